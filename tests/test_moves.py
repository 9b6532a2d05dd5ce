"""
Unit Tests for Move Generation

Tests for the forced-capture move generator, focusing on:
    - Man steps (forward only) and jumps (all four directions)
    - Flying king slides and captures, including blocked rays
    - Forced-capture rule across a whole side
    - Promotion before a chain continues
    - Shuffling changes order only
"""

import random

import pytest

from checkers_engine.board import (
    BLACK_MAN,
    WHITE_KING,
    WHITE_MAN,
    BoardState,
    Move,
    Side,
)
from checkers_engine.moves import MoveGenerator, moves_for_side, moves_for_square


def ends(moves):
    """Set of (start, end) pairs of a move list."""
    return {(m.start, m.end) for m in moves}


class TestManMoves:
    """Tests for ordinary pieces."""

    def test_white_man_steps_forward(self):
        board = BoardState.from_pieces({(5, 2): WHITE_MAN})

        moves, forced = moves_for_square(board, (5, 2))

        assert not forced
        assert ends(moves) == {((5, 2), (4, 1)), ((5, 2), (4, 3))}
        assert all(not m.is_capture for m in moves)

    def test_black_man_steps_forward(self):
        board = BoardState.from_pieces({(2, 1): BLACK_MAN})

        moves, forced = moves_for_square(board, (2, 1))

        assert not forced
        assert ends(moves) == {((2, 1), (3, 0)), ((2, 1), (3, 2))}

    def test_edge_man_has_one_step(self):
        board = BoardState.from_pieces({(3, 7): BLACK_MAN, (6, 1): WHITE_MAN})

        moves, forced = moves_for_side(board, Side.BLACK)

        assert not forced
        assert moves == [Move((3, 7), (4, 6))], f"Expected single step, got {moves}"

    def test_man_blocked_by_pieces(self):
        board = BoardState.from_pieces({
            (2, 1): WHITE_MAN,
            (1, 0): BLACK_MAN,
            (1, 2): BLACK_MAN,
            (0, 3): BLACK_MAN,
        })

        moves, forced = moves_for_square(board, (2, 1))

        assert moves == [] and not forced

    def test_white_captures_backward(self):
        # White man (3,2) jumps black man (4,3) into (5,4): a backward jump for White
        board = BoardState.from_pieces({(3, 2): WHITE_MAN, (4, 3): BLACK_MAN})

        moves, forced = moves_for_square(board, (3, 2))

        assert forced
        assert len(moves) == 1
        assert moves[0].start == (3, 2)
        assert moves[0].end == (5, 4)
        assert moves[0].captured == (4, 3)

    def test_black_captures_backward(self):
        board = BoardState.from_pieces({(2, 3): WHITE_MAN, (3, 4): BLACK_MAN})

        moves, forced = moves_for_side(board, Side.BLACK)

        assert forced
        assert moves == [Move((3, 4), (1, 2), (2, 3))]
        assert moves[0].captured == (2, 3)

    def test_no_capture_over_own_piece(self):
        board = BoardState.from_pieces({(5, 2): WHITE_MAN, (4, 3): WHITE_MAN})

        moves, forced = moves_for_square(board, (5, 2))

        assert not forced
        assert ends(moves) == {((5, 2), (4, 1))}

    def test_no_capture_onto_occupied_square(self):
        board = BoardState.from_pieces({
            (5, 2): WHITE_MAN,
            (4, 3): BLACK_MAN,
            (3, 4): BLACK_MAN,
        })

        moves, forced = moves_for_square(board, (5, 2))

        assert not forced
        assert ends(moves) == {((5, 2), (4, 1))}

    def test_empty_square_has_no_moves(self):
        moves, forced = moves_for_square(BoardState.initial(), (4, 3))

        assert moves == [] and not forced


class TestKingMoves:
    """Tests for flying kings."""

    def test_king_slides_along_all_diagonals(self):
        board = BoardState.from_pieces({(4, 3): WHITE_KING})

        moves, forced = moves_for_square(board, (4, 3))

        assert not forced
        assert len(moves) == 13, f"Expected 13 slides, got {len(moves)}"
        assert ((4, 3), (0, 7)) in ends(moves)
        assert ((4, 3), (7, 0)) in ends(moves)

    def test_king_slide_stops_before_piece(self):
        board = BoardState.from_pieces({(7, 0): WHITE_KING, (4, 3): WHITE_MAN})

        moves, _ = moves_for_square(board, (7, 0))

        assert ends(moves) == {((7, 0), (6, 1)), ((7, 0), (5, 2))}

    def test_king_captures_from_distance(self):
        board = BoardState.from_pieces({(7, 0): WHITE_KING, (4, 3): BLACK_MAN})

        moves, forced = moves_for_square(board, (7, 0))

        assert forced
        assert ends(moves) == {
            ((7, 0), (3, 4)),
            ((7, 0), (2, 5)),
            ((7, 0), (1, 6)),
            ((7, 0), (0, 7)),
        }
        assert all(m.captured == (4, 3) for m in moves)

    def test_king_landing_stops_at_second_piece(self):
        board = BoardState.from_pieces({
            (7, 0): WHITE_KING,
            (4, 3): BLACK_MAN,
            (2, 5): BLACK_MAN,
        })

        moves, forced = moves_for_square(board, (7, 0))

        assert forced
        assert moves == [Move((7, 0), (3, 4), (4, 3))]

    def test_king_cannot_jump_two_adjacent_pieces(self):
        board = BoardState.from_pieces({
            (7, 0): WHITE_KING,
            (5, 2): BLACK_MAN,
            (4, 3): BLACK_MAN,
        })

        moves, forced = moves_for_square(board, (7, 0))

        assert not forced
        assert ends(moves) == {((7, 0), (6, 1))}

    def test_king_cannot_capture_through_own_piece(self):
        board = BoardState.from_pieces({
            (7, 0): WHITE_KING,
            (5, 2): WHITE_MAN,
            (4, 3): BLACK_MAN,
        })

        moves, forced = moves_for_square(board, (7, 0))

        assert not forced
        assert ends(moves) == {((7, 0), (6, 1))}


class TestForcedCapture:
    """Tests for the forced-capture rule over a whole side."""

    @pytest.fixture
    def board(self):
        # Two white men can capture, the third can only step
        return BoardState.from_pieces({
            (5, 0): WHITE_MAN,
            (4, 1): BLACK_MAN,
            (5, 6): WHITE_MAN,
            (4, 5): BLACK_MAN,
            (7, 4): WHITE_MAN,
        })

    def test_only_captures_when_any_capture_exists(self, board):
        moves, forced = moves_for_side(board, Side.WHITE)

        assert forced
        assert all(m.is_capture for m in moves), "Quiet moves must be excluded"
        assert ends(moves) == {((5, 0), (3, 2)), ((5, 6), (3, 4))}

    def test_union_matches_per_square_captures(self, board):
        moves, forced = moves_for_side(board, Side.WHITE)

        expected = set()
        for square in board.pieces(Side.WHITE):
            piece_moves, piece_forced = moves_for_square(board, square)
            if piece_forced:
                expected |= ends(piece_moves)

        assert forced
        assert ends(moves) == expected

    def test_square_without_capture_still_steps(self, board):
        moves, forced = moves_for_square(board, (7, 4))

        assert not forced
        assert ends(moves) == {((7, 4), (6, 3)), ((7, 4), (6, 5))}

    def test_king_capture_forces_side(self):
        board = BoardState.from_pieces({
            (7, 0): WHITE_KING,
            (3, 4): BLACK_MAN,
            (6, 5): WHITE_MAN,
        })

        moves, forced = moves_for_side(board, Side.WHITE)

        assert forced
        assert {m.start for m in moves} == {(7, 0)}
        assert ends(moves) == {((7, 0), (2, 5)), ((7, 0), (1, 6)), ((7, 0), (0, 7))}

    def test_no_pieces_no_moves(self):
        board = BoardState.from_pieces({(3, 4): BLACK_MAN})

        moves, forced = moves_for_side(board, Side.WHITE)

        assert moves == [] and not forced

    def test_initial_position(self):
        moves, forced = moves_for_side(BoardState.initial(), Side.WHITE)

        assert not forced
        assert len(moves) == 7
        assert {m.start[0] for m in moves} == {5}


class TestPromotion:
    """Tests for promotion inside capture chains."""

    def test_chain_continues_as_king(self):
        board = BoardState.from_pieces({
            (2, 1): WHITE_MAN,
            (1, 2): BLACK_MAN,
            (2, 5): BLACK_MAN,
        })

        moves, forced = moves_for_square(board, (2, 1))
        assert forced
        assert moves == [Move((2, 1), (0, 3), (1, 2))]

        after = board.apply(moves[0])
        assert after[0, 3] == WHITE_KING, "Man should be promoted on landing"

        # As a man there is no adjacent piece to jump; as a king (2,5) is capturable
        chain, chain_forced = moves_for_square(after, (0, 3))
        assert chain_forced
        assert ends(chain) == {((0, 3), (3, 6)), ((0, 3), (4, 7))}
        assert all(m.captured == (2, 5) for m in chain)


class TestShuffling:
    """Tests for the shuffled generator."""

    def test_same_moves_any_order(self):
        board = BoardState.initial()
        shuffled = MoveGenerator(random.Random(7))

        expected = ends(moves_for_side(board, Side.WHITE).moves)
        for _ in range(5):
            moves, forced = shuffled.moves_for_side(board, Side.WHITE)
            assert ends(moves) == expected
            assert not forced

    def test_moves_for_square_idempotent(self):
        board = BoardState.from_pieces({(4, 3): WHITE_KING, (2, 1): BLACK_MAN})
        shuffled = MoveGenerator(random.Random(0))

        first = shuffled.moves_for_square(board, (4, 3))
        for _ in range(5):
            again = shuffled.moves_for_square(board, (4, 3))
            assert ends(again.moves) == ends(first.moves)
            assert again.forced == first.forced

    def test_fixed_seed_reproducible(self):
        board = BoardState.initial()

        first = MoveGenerator(random.Random(0)).moves_for_side(board, Side.WHITE).moves
        second = MoveGenerator(random.Random(0)).moves_for_side(board, Side.WHITE).moves

        assert [(m.start, m.end) for m in first] == [(m.start, m.end) for m in second]
