"""
Legal Move Generation

This module enumerates legal moves for a whole side or for a single piece
under the forced-capture rule:

    - If any piece of the side can capture, only captures are legal, from
      every piece that has at least one (the side may pick any of them,
      not necessarily the longest chain).
    - Otherwise every ordinary move of every piece is legal.

Piece Movement:
    Man:  steps one square diagonally forward; captures by jumping an
          adjacent enemy piece in any of the four diagonal directions.
    King: slides any distance along a diagonal; captures the first enemy
          piece on a ray and may land on any empty square behind it, up to
          the next occupied square. A second piece on the ray (of either
          side) ends the ray, so a king never captures two pieces in one
          jump.

Capture chains are not expanded here: a generated capture is a single
jump. The caller applies it and asks for moves of the landing square again
to continue the chain (see SearchEngine). Promotion is applied by
BoardState.apply(), so a man that promotes mid-chain continues as a king.
"""

import random
from typing import List, NamedTuple, Optional

from checkers_engine.board.state import (
    EMPTY,
    BoardState,
    Move,
    Side,
    Square,
    is_king,
    on_board,
    side_of,
)

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class MoveList(NamedTuple):
    """
    Result of a move query.

    Attributes:
        moves: Legal moves (captures only when forced)
        forced: True if the moves are captures that must be played
    """
    moves: List[Move]
    forced: bool


def _is_enemy(piece: int, target: int) -> bool:
    return target != EMPTY and target % 2 != piece % 2


def _man_captures(cells: List[List[int]], row: int, col: int) -> List[Move]:
    piece = cells[row][col]
    moves = []
    for dr, dc in DIAGONALS:
        land_row, land_col = row + 2 * dr, col + 2 * dc
        if not on_board(land_row, land_col) or cells[land_row][land_col] != EMPTY:
            continue
        mid_row, mid_col = row + dr, col + dc
        if _is_enemy(piece, cells[mid_row][mid_col]):
            moves.append(Move((row, col), (land_row, land_col), (mid_row, mid_col)))
    return moves


def _king_captures(cells: List[List[int]], row: int, col: int) -> List[Move]:
    piece = cells[row][col]
    moves = []
    for dr, dc in DIAGONALS:
        captured: Optional[Square] = None
        r, c = row + dr, col + dc
        while on_board(r, c):
            target = cells[r][c]
            if target != EMPTY:
                # Own piece, or a second piece behind the captured one
                if not _is_enemy(piece, target) or captured is not None:
                    break
                captured = (r, c)
            elif captured is not None:
                moves.append(Move((row, col), (r, c), captured))
            r, c = r + dr, c + dc
    return moves


def _man_steps(cells: List[List[int]], row: int, col: int) -> List[Move]:
    next_row = row + side_of(cells[row][col]).forward
    moves = []
    for next_col in (col - 1, col + 1):
        if on_board(next_row, next_col) and cells[next_row][next_col] == EMPTY:
            moves.append(Move((row, col), (next_row, next_col)))
    return moves


def _king_slides(cells: List[List[int]], row: int, col: int) -> List[Move]:
    moves = []
    for dr, dc in DIAGONALS:
        r, c = row + dr, col + dc
        while on_board(r, c) and cells[r][c] == EMPTY:
            moves.append(Move((row, col), (r, c)))
            r, c = r + dr, c + dc
    return moves


def piece_captures(cells: List[List[int]], row: int, col: int) -> List[Move]:
    """All single-jump captures of the piece on (row, col)."""
    if is_king(cells[row][col]):
        return _king_captures(cells, row, col)
    return _man_captures(cells, row, col)


def piece_steps(cells: List[List[int]], row: int, col: int) -> List[Move]:
    """All ordinary (non-capturing) moves of the piece on (row, col)."""
    if is_king(cells[row][col]):
        return _king_slides(cells, row, col)
    return _man_steps(cells, row, col)


class MoveGenerator:
    """
    Forced-capture move generator.

    The generator is stateless apart from an optional random source used to
    shuffle each result, so that callers consuming lists in order do not
    always favour board-scan order. Shuffling never changes which moves are
    returned.

    Attributes:
        rng: random.Random used for shuffling, or None to keep scan order
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    def _finish(self, moves: List[Move], forced: bool) -> MoveList:
        if self.rng is not None:
            self.rng.shuffle(moves)
        return MoveList(moves, forced)

    def moves_for_side(self, board: BoardState, side: Side) -> MoveList:
        """
        Enumerate legal moves for every piece of ``side``.

        Args:
            board: Position to analyse
            side: Side to move

        Returns:
            MoveList; empty when the side has no pieces or cannot move
        """
        cells = board.to_list()
        captures: List[Move] = []
        steps: List[Move] = []
        for row, col in board.pieces(side):
            jumps = piece_captures(cells, row, col)
            if jumps:
                captures.extend(jumps)
            elif not captures:
                steps.extend(piece_steps(cells, row, col))

        if captures:
            return self._finish(captures, True)
        return self._finish(steps, False)

    def moves_for_square(self, board: BoardState, square: Square) -> MoveList:
        """
        Enumerate legal moves for the single piece on ``square``.

        Used to continue a capture chain: when the piece has a capture, only
        captures are returned and ``forced`` is True.

        Returns:
            MoveList; empty when the square is empty or the piece is stuck
        """
        row, col = square
        cells = board.to_list()
        if cells[row][col] == EMPTY:
            return MoveList([], False)

        jumps = piece_captures(cells, row, col)
        if jumps:
            return self._finish(jumps, True)
        return self._finish(piece_steps(cells, row, col), False)


_SCAN_ORDER = MoveGenerator()


def moves_for_side(board: BoardState, side: Side) -> MoveList:
    """Legal moves for ``side`` in board-scan order."""
    return _SCAN_ORDER.moves_for_side(board, side)


def moves_for_square(board: BoardState, square: Square) -> MoveList:
    """Legal moves for the piece on ``square`` in board-scan order."""
    return _SCAN_ORDER.moves_for_square(board, square)
