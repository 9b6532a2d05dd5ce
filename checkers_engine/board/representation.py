"""
Board Representation Helpers

This module converts BoardState objects to and from the ASCII diagrams
used by tests and tools.

ASCII Diagram (one line per row, row 0 first):
    .  Empty square
    w  White man        W  White king
    b  Black man        B  Black king

    Whitespace inside a line is ignored, so both "..b.b..." and
    ". . b . b . . ." parse to the same row.
"""

from checkers_engine.board.state import (
    BLACK_KING,
    BLACK_MAN,
    BOARD_SIZE,
    EMPTY,
    WHITE_KING,
    WHITE_MAN,
    BoardState,
)

PIECE_TO_CHAR = {
    EMPTY: ".",
    WHITE_MAN: "w",
    BLACK_MAN: "b",
    WHITE_KING: "W",
    BLACK_KING: "B",
}

CHAR_TO_PIECE = {char: piece for piece, char in PIECE_TO_CHAR.items()}


def parse_board(text: str) -> BoardState:
    """
    Parse an ASCII diagram into a BoardState.

    Blank lines are skipped, so triple-quoted literals can start on a new
    line.

    Args:
        text: Eight lines of eight piece characters

    Returns:
        BoardState for the diagram

    Raises:
        ValueError: If the diagram is not 8x8 or contains unknown characters
    """
    rows = []
    for line in text.strip().splitlines():
        cells = "".join(line.split())
        if not cells:
            continue
        try:
            rows.append([CHAR_TO_PIECE[char] for char in cells])
        except KeyError as e:
            raise ValueError(f"Unknown piece character {e.args[0]!r} in line {line!r}")

    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(
            f"Board diagram must be {BOARD_SIZE}x{BOARD_SIZE}, got "
            f"{len(rows)} rows of lengths {[len(row) for row in rows]}"
        )

    return BoardState(rows)


def board_to_string(board: BoardState) -> str:
    """Render a board as an ASCII diagram (inverse of parse_board)."""
    return "\n".join(
        " ".join(PIECE_TO_CHAR[piece] for piece in row) for row in board.to_list()
    )

