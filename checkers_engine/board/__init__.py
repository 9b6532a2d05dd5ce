"""
Board Module

This module provides the checkers data model and its representations.

Key Components:
    - Side, piece codes, Move: core value types
    - BoardState: immutable 8x8 snapshot with copy-with-move (apply)
    - parse_board / board_to_string: ASCII diagrams for tests and tools

Data Flow:
    BoardState → apply(move) → new BoardState (the original is never mutated)
"""

from checkers_engine.board.state import (
    BLACK_KING,
    BLACK_MAN,
    BOARD_SIZE,
    EMPTY,
    WHITE_KING,
    WHITE_MAN,
    BoardState,
    Move,
    Side,
    Square,
    is_king,
    king_of,
    man_of,
    on_board,
    promoted,
    side_of,
)
from checkers_engine.board.representation import (
    board_to_string,
    parse_board,
)

__all__ = [
    'BLACK_KING',
    'BLACK_MAN',
    'BOARD_SIZE',
    'EMPTY',
    'WHITE_KING',
    'WHITE_MAN',
    'BoardState',
    'Move',
    'Side',
    'Square',
    'is_king',
    'king_of',
    'man_of',
    'on_board',
    'promoted',
    'side_of',
    'board_to_string',
    'parse_board',
]
