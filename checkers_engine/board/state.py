"""
Board State and Core Types

This module defines the data model shared by move generation, evaluation
and search:

    - Side: explicit two-valued side-to-move enumeration
    - Piece codes: small integers where parity gives the side and a fixed
      offset of 2 turns a man into a king
    - Move: from-square, to-square and optional captured square
    - BoardState: immutable 8x8 snapshot backed by a read-only numpy array

Piece Codes:
    0: Empty
    1: White man        3: White king
    2: Black man        4: Black king

Board Orientation:
    - Row 0 = top of the board, Black's back row
    - Row 7 = bottom of the board, White's back row
    - White men move toward row 0 and promote there
    - Black men move toward row 7 and promote there
    - Pieces stand on dark squares, where (row + col) is odd
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

BOARD_SIZE = 8

EMPTY = 0
WHITE_MAN = 1
BLACK_MAN = 2
WHITE_KING = 3
BLACK_KING = 4

PIECE_CODES = (EMPTY, WHITE_MAN, BLACK_MAN, WHITE_KING, BLACK_KING)

# Offset between a man and the king of the same side
KING_OFFSET = 2

Square = Tuple[int, int]


class Side(Enum):
    """
    Side to move.

    The value is the parity shared by all piece codes of that side, so
    ``Side(code % 2)`` recovers the owner of any non-empty piece.
    """
    WHITE = 1
    BLACK = 0

    @property
    def other(self) -> "Side":
        """The opposing side."""
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """Row step of a man of this side."""
        return -1 if self is Side.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Row on which a man of this side becomes a king."""
        return 0 if self is Side.WHITE else BOARD_SIZE - 1

    def __str__(self) -> str:
        return self.name.lower()


def side_of(piece: int) -> Side:
    """Owner of a non-empty piece code."""
    return Side(piece % 2)


def is_king(piece: int) -> bool:
    return piece > KING_OFFSET


def promoted(piece: int) -> int:
    """King code for a man code (kings are returned unchanged)."""
    return piece if is_king(piece) else piece + KING_OFFSET


def man_of(side: Side) -> int:
    return WHITE_MAN if side is Side.WHITE else BLACK_MAN


def king_of(side: Side) -> int:
    return promoted(man_of(side))


def on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, eq=False)
class Move:
    """
    A single piece displacement, possibly removing one enemy piece.

    Two moves compare equal when their start and end squares match; the
    captured square is ignored so that a move picked on the board can be
    matched against the generated list.

    Attributes:
        start: (row, col) the piece leaves
        end: (row, col) the piece lands on
        captured: (row, col) of the removed enemy piece, None for a quiet move
    """
    start: Square
    end: Square
    captured: Optional[Square] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __str__(self) -> str:
        text = f"({self.start[0]},{self.start[1]})->({self.end[0]},{self.end[1]})"
        if self.captured is not None:
            text += f"x({self.captured[0]},{self.captured[1]})"
        return text


class BoardState:
    """
    Immutable 8x8 checkers position.

    The grid is stored as a read-only ``numpy.int8`` array. New positions
    are only ever derived through ``apply()``, which copies the grid, so a
    snapshot handed to the search can be shared freely between branches.

    Attributes:
        grid: Read-only (8, 8) int8 array of piece codes
    """

    __slots__ = ("grid",)

    def __init__(self, grid: Iterable[Iterable[int]]):
        """
        Build a board from any 8x8 array-like of piece codes.

        Raises:
            ValueError: If the shape is not (8, 8) or a cell holds an
                unknown piece code
        """
        # Validate codes before the int8 cast
        array = np.array(grid)
        if array.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(
                f"Invalid board shape: {array.shape}. Expected ({BOARD_SIZE}, {BOARD_SIZE})"
            )
        if not np.isin(array, PIECE_CODES).all():
            bad = sorted(set(array[~np.isin(array, PIECE_CODES)].tolist()))
            raise ValueError(f"Unknown piece codes on board: {bad}")
        array = array.astype(np.int8)
        array.setflags(write=False)
        self.grid = array

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "BoardState":
        # Trusted constructor for grids produced by apply()
        board = cls.__new__(cls)
        array.setflags(write=False)
        board.grid = array
        return board

    @classmethod
    def empty(cls) -> "BoardState":
        return cls._wrap(np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8))

    @classmethod
    def initial(cls) -> "BoardState":
        """Standard starting position: 12 black men on rows 0-2, 12 white men on rows 5-7."""
        array = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 0:
                    continue
                if row < 3:
                    array[row, col] = BLACK_MAN
                elif row > 4:
                    array[row, col] = WHITE_MAN
        return cls._wrap(array)

    @classmethod
    def from_pieces(cls, pieces: dict) -> "BoardState":
        """Build a board from a ``{(row, col): piece_code}`` mapping."""
        array = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for (row, col), piece in pieces.items():
            if not on_board(row, col):
                raise ValueError(f"Square ({row}, {col}) is off the board")
            if piece not in PIECE_CODES:
                raise ValueError(f"Unknown piece code {piece!r} on ({row}, {col})")
            array[row, col] = piece
        return cls(array)

    def __getitem__(self, square: Square) -> int:
        return int(self.grid[square])

    def to_list(self) -> List[List[int]]:
        """Plain nested-list copy of the grid (fast cell access)."""
        return self.grid.tolist()

    def to_array(self) -> np.ndarray:
        """Writable copy of the grid."""
        return self.grid.copy()

    def pieces(self, side: Side) -> Iterator[Square]:
        """Squares holding pieces of ``side``, in row-major scan order."""
        mask = (self.grid != EMPTY) & (self.grid % 2 == side.value)
        for row, col in np.argwhere(mask):
            yield int(row), int(col)

    def count(self, piece: int) -> int:
        return int(np.count_nonzero(self.grid == piece))

    def apply(self, move: Move) -> "BoardState":
        """
        Return a new board with ``move`` played.

        The captured piece (if any) is removed, and a man that lands on its
        promotion row becomes a king as part of this same move.

        Raises:
            ValueError: If the start square is empty or the end square is
                occupied
        """
        piece = self[move.start]
        if piece == EMPTY:
            raise ValueError(f"Start square {move.start} is empty, can't move")
        if self[move.end] != EMPTY:
            raise ValueError(f"End square {move.end} is not empty, can't move")

        array = self.grid.copy()
        if move.captured is not None:
            array[move.captured] = EMPTY
        if not is_king(piece) and move.end[0] == side_of(piece).promotion_row:
            piece = promoted(piece)
        array[move.end] = piece
        array[move.start] = EMPTY
        return BoardState._wrap(array)

    def apply_sequence(self, moves: Sequence[Move]) -> "BoardState":
        """Apply every move of a turn in order."""
        board = self
        for move in moves:
            board = board.apply(move)
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())

    def __str__(self) -> str:
        from checkers_engine.board.representation import board_to_string

        return board_to_string(self)

    def __repr__(self) -> str:
        return (
            f"BoardState(white={self.count(WHITE_MAN)}+{self.count(WHITE_KING)}K, "
            f"black={self.count(BLACK_MAN)}+{self.count(BLACK_KING)}K)"
        )
