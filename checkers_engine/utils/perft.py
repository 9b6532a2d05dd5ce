"""
Perft: Move Generation Verification

Perft counts the leaf positions of the full game tree to a fixed depth.
Comparing counts against known values is the standard way to validate a
move generator.

Here one ply is a full turn, so a capture chain is expanded jump by jump
and only counted once it is complete. Distinct chains count separately
even when they end on the same square.

Known values from the starting position (no capture can reach a man from
behind this early, so they match English draughts):
    depth 1: 7
    depth 2: 49
    depth 3: 302

Reference:
    - Perft: https://www.chessprogramming.org/Perft
"""

from typing import Dict, Iterator, List, Optional, Tuple

from checkers_engine.board.state import BoardState, Move, Side, Square
from checkers_engine.moves.generator import MoveGenerator

_GENERATOR = MoveGenerator()


def iter_turns(
    board: BoardState, side: Side, square: Optional[Square] = None
) -> Iterator[Tuple[List[Move], BoardState]]:
    """
    Yield every complete turn of ``side`` and the position it leads to.

    Args:
        board: Current position
        side: Side to move
        square: Piece in the middle of a capture chain, None for a fresh turn

    Yields:
        (moves, board_after) for each complete turn
    """
    if square is None:
        moves, forced = _GENERATOR.moves_for_side(board, side)
    else:
        moves, forced = _GENERATOR.moves_for_square(board, square)
        if not forced:
            yield [], board
            return

    for move in moves:
        child = board.apply(move)
        if not forced:
            yield [move], child
            continue
        for rest, after in iter_turns(child, side, move.end):
            yield [move] + rest, after


def perft(board: BoardState, side: Side, depth: int) -> int:
    """
    Count complete turn sequences of length ``depth``.

    A side without moves ends its branch, which then contributes nothing.
    """
    if depth == 0:
        return 1
    return sum(perft(after, side.other, depth - 1) for _, after in iter_turns(board, side))


def divide(board: BoardState, side: Side, depth: int) -> Dict[str, int]:
    """Perft split by first turn, keyed by the turn's moves joined with spaces."""
    counts = {}
    for moves, after in iter_turns(board, side):
        key = " ".join(str(move) for move in moves)
        counts[key] = counts.get(key, 0) + perft(after, side.other, depth - 1)
    return counts
