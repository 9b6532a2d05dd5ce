"""
Material Ratio Evaluation

This module implements the engine's position heuristic:

    1. Material counting: men + kings * king_weight for each side
    2. Promotion potential (optional): each man adds a small bonus that
       grows with every row it has advanced toward its promotion row

The score is the ratio own_material / opponent_material, so 1.0 means
equal material, values above 1.0 favour the perspective side and values
below favour the opponent. Decided positions short-circuit to WIN_SCORE
or LOSS_SCORE before any ratio is taken.

Scoring Modes:
    - MATERIAL: king_weight = 4, no potential bonus
    - MATERIAL_AND_POTENTIAL: king_weight = 5, potential bonus 0.05 per row
"""

from typing import Optional

import numpy as np

from checkers_engine.board.state import (
    BLACK_KING,
    BLACK_MAN,
    BOARD_SIZE,
    WHITE_KING,
    WHITE_MAN,
    BoardState,
    Side,
)
from checkers_engine.config import ScoringMode
from checkers_engine.evaluation.base import Evaluator

#fmt: off
# ============================================================================
# Material Values
# ============================================================================

KING_WEIGHTS = {
    ScoringMode.MATERIAL: 4.0,
    ScoringMode.MATERIAL_AND_POTENTIAL: 5.0,
}

POTENTIAL_PER_ROW = 0.05


# ============================================================================
# Advancement Tables
# ============================================================================
# Bonus for a man standing on each square, proportional to the number of
# rows it has advanced from its own back row. Only used in potential mode.
# White advances toward row 0, Black toward row 7.
# ============================================================================

_ROWS = np.arange(BOARD_SIZE, dtype=np.float64).reshape(BOARD_SIZE, 1)

ADVANCEMENT_TABLES = {
    Side.WHITE: np.broadcast_to(POTENTIAL_PER_ROW * (BOARD_SIZE - 1 - _ROWS), (BOARD_SIZE, BOARD_SIZE)),
    Side.BLACK: np.broadcast_to(POTENTIAL_PER_ROW * _ROWS, (BOARD_SIZE, BOARD_SIZE)),
}

MEN = {Side.WHITE: WHITE_MAN, Side.BLACK: BLACK_MAN}
KINGS = {Side.WHITE: WHITE_KING, Side.BLACK: BLACK_KING}
#fmt: on


class MaterialEvaluator(Evaluator):
    """
    Material ratio evaluation with optional promotion potential.

    Attributes:
        mode: ScoringMode in use
        king_weight: How many men a king is worth
    """

    def __init__(self, mode: ScoringMode = ScoringMode.MATERIAL, king_weight: Optional[float] = None):
        """
        Args:
            mode: Scoring heuristic
            king_weight: Override for the mode's default king weight

        Raises:
            ValueError: If king_weight is not positive
        """
        self.mode = ScoringMode(mode)
        self.king_weight = KING_WEIGHTS[self.mode] if king_weight is None else float(king_weight)
        if self.king_weight <= 0:
            raise ValueError(f"king_weight must be positive, got {self.king_weight}")

    @property
    def uses_potential(self) -> bool:
        return self.mode is ScoringMode.MATERIAL_AND_POTENTIAL

    def material(self, board: BoardState, side: Side) -> float:
        """
        Material of one side: men (plus potential bonus) + kings * king_weight.
        """
        men = board.grid == MEN[side]
        value = float(np.count_nonzero(men))
        if self.uses_potential:
            value += float(ADVANCEMENT_TABLES[side][men].sum())
        value += self.king_weight * np.count_nonzero(board.grid == KINGS[side])
        return value

    def score(self, board: BoardState, perspective: Side) -> float:
        """
        Score position as own material over opponent material.

        Args:
            board: Position to evaluate
            perspective: Side whose advantage is measured

        Returns:
            float: WIN_SCORE if the opponent has no pieces, LOSS_SCORE if
            the perspective side has none, the material ratio otherwise
        """
        terminal_score = self.evaluate_terminal(board, perspective)
        if terminal_score is not None:
            return terminal_score

        return self.material(board, perspective) / self.material(board, perspective.other)

    def __repr__(self) -> str:
        return f"MaterialEvaluator(mode={self.mode.name}, king_weight={self.king_weight})"
