"""
Move Generation Module

Key Components:
    - MoveGenerator: forced-capture move enumeration with optional shuffling
    - MoveList: (moves, forced) result tuple
    - moves_for_side / moves_for_square: scan-order convenience functions
"""

from checkers_engine.moves.generator import (
    MoveGenerator,
    MoveList,
    moves_for_side,
    moves_for_square,
)

__all__ = ['MoveGenerator', 'MoveList', 'moves_for_side', 'moves_for_square']
