"""
Evaluation Module

This module provides position evaluation functions for the checkers engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material ratio with optional promotion potential

Data Flow:
    BoardState, Side → evaluator.score() → float
                                           WIN_SCORE  = opponent has no pieces
                                           LOSS_SCORE = own side has no pieces
                                           otherwise own / opponent material
"""

from checkers_engine.evaluation.base import LOSS_SCORE, WIN_SCORE, Evaluator
from checkers_engine.evaluation.material import MaterialEvaluator

__all__ = ['Evaluator', 'MaterialEvaluator', 'WIN_SCORE', 'LOSS_SCORE']
