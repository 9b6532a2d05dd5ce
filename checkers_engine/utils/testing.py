"""
Engine Testing and Benchmarking

This module provides self-play tools for evaluating engine strength and
speed.

Self-Play:
    Two SearchEngine instances play a full game from a given position.
    White moves first. Each computed turn is applied move by move and the
    captures of every turn are counted (a capture chain of N jumps is a
    series of N). The game ends when the side to move has no legal move
    (it loses) or when the turn cap is reached (draw).

Evaluation Metrics:
    - Result: white win / black win / draw by turn cap
    - Turns played and captures made
    - Nodes searched and time spent by each side
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from checkers_engine.board.state import BoardState, Move, Side
from checkers_engine.search.minimax import SearchEngine

DEFAULT_MAX_TURNS = 120


class GameResult(Enum):
    WHITE_WIN = "white"
    BLACK_WIN = "black"
    DRAW = "draw"

    @classmethod
    def win_for(cls, side: Side) -> "GameResult":
        return cls.WHITE_WIN if side is Side.WHITE else cls.BLACK_WIN


@dataclass
class TurnRecord:
    """
    One played turn.

    Attributes:
        side: Side that moved
        moves: Moves of the turn in order
        capture_series: Number of captures made during the turn
        nodes_searched: Nodes visited by the search
        time_taken: Search time (seconds)
    """
    side: Side
    moves: List[Move]
    capture_series: int
    nodes_searched: int
    time_taken: float


@dataclass
class GameRecord:
    """
    Result of a self-play game.

    Attributes:
        result: Outcome of the game
        turns: Played turns in order
        final_board: Position when the game ended
        time_taken: Total wall-clock time (seconds)
    """
    result: GameResult
    final_board: BoardState
    turns: List[TurnRecord] = field(default_factory=list)
    time_taken: float = 0.0

    @property
    def captures(self) -> int:
        return sum(turn.capture_series for turn in self.turns)

    def nodes_by_side(self) -> Dict[Side, int]:
        nodes = {Side.WHITE: 0, Side.BLACK: 0}
        for turn in self.turns:
            nodes[turn.side] += turn.nodes_searched
        return nodes


def play_game(
    white: SearchEngine,
    black: SearchEngine,
    board: Optional[BoardState] = None,
    max_turns: int = DEFAULT_MAX_TURNS,
    first: Side = Side.WHITE,
) -> GameRecord:
    """
    Play one engine-vs-engine game.

    Args:
        white: Engine playing White
        black: Engine playing Black
        board: Starting position (default: standard set-up)
        max_turns: Turn cap; reaching it is a draw
        first: Side to move first

    Returns:
        GameRecord with the outcome and every turn played

    Raises:
        ValueError: If max_turns is not positive
    """
    if max_turns <= 0:
        raise ValueError(f"max_turns must be positive, got {max_turns}")

    engines = {Side.WHITE: white, Side.BLACK: black}
    board = board if board is not None else BoardState.initial()
    side = first
    turns: List[TurnRecord] = []
    start_time = time.time()

    while len(turns) < max_turns:
        engine = engines[side]
        if not engine.moves_for_side(board, side).moves:
            return GameRecord(GameResult.win_for(side.other), board, turns, time.time() - start_time)

        search = engine.search(board, side)
        capture_series = 0
        for move in search.sequence:
            capture_series += move.is_capture
            board = board.apply(move)

        turns.append(TurnRecord(side, search.sequence, capture_series, search.nodes, search.elapsed))
        side = side.other

    return GameRecord(GameResult.DRAW, board, turns, time.time() - start_time)
