"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between evaluators without
modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. score() is always taken from the perspective side's point of view
    3. Higher = better for the perspective side, never negative
    4. A side with no pieces left has lost: WIN_SCORE / LOSS_SCORE

Convention:
    - Scores are material ratios (own / opponent), 1.0 for equal material
    - WIN_SCORE is far above any attainable ratio (12 kings vs 1 man is 60)
    - LOSS_SCORE is 0, below any ratio with material on both sides
"""

from abc import ABC, abstractmethod
from typing import Optional

from checkers_engine.board.state import BoardState, Side


# Evaluation constants
WIN_SCORE = 1e9  # Opponent has no pieces left
LOSS_SCORE = 0.0  # Perspective side has no pieces left


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the score() method. This ensures compatibility with the search algorithm.

    Methods:
        score(board, perspective): Returns the position score for perspective
    """

    @abstractmethod
    def score(self, board: BoardState, perspective: Side) -> float:
        """
        Score a position from ``perspective``'s point of view.

        Args:
            board: Position to evaluate
            perspective: Side whose advantage is measured

        Returns:
            float: WIN_SCORE, LOSS_SCORE or a positive heuristic value

        Raises:
            NotImplementedError: If subclass doesn't implement this method
        """
        pass

    def evaluate_terminal(self, board: BoardState, perspective: Side) -> Optional[float]:
        """
        Detect decided positions.

        The opponent running out of pieces is checked first, so an
        (unreachable) empty board counts as a win.

        Returns:
            float: WIN_SCORE or LOSS_SCORE if one side has no pieces
            None: If both sides still have material
        """
        if next(board.pieces(perspective.other), None) is None:
            return WIN_SCORE
        if next(board.pieces(perspective), None) is None:
            return LOSS_SCORE
        return None

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
