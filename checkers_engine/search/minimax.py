"""
Minimax Search with Alpha-Beta Pruning

This module implements the core search algorithm for the checkers engine.
Minimax explores the game tree to find the best turn, and alpha-beta
pruning reduces the number of positions evaluated.

Key Concepts:
    - Ply: one full turn of one side. A turn may be a chain of captures by
      the same piece; the whole chain costs a single ply of depth.
    - Minimax: the root side maximises the evaluator's score, the opponent
      minimises it. Plies alternate strictly, so odd plies (counted after
      the root turn) are maximising and even plies minimising.
    - Alpha-Beta: a branch is abandoned as soon as alpha >= beta. The
      returned value is then only a bound (max_score + 1 or min_score - 1)
      that the parent never selects.
    - Search Arena: the best line is recorded as SearchNode entries in a
      flat list; each node names its chosen move and the index of the node
      that continues the capture chain. The arena is rebuilt on every call.

Search Structure:
    _best_chain: the root side's turn. Picks the best first move and, for
        capture chains, the best continuation at every jump, writing one
        arena node per decision.
    _ply: every later turn, scored by value only. Continues the side to
        move's capture chain at the same ply, then hands over to the other
        side at ply + 1.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional

from checkers_engine.board.state import BoardState, Move, Side, Square
from checkers_engine.config import EngineConfig, SeedPolicy
from checkers_engine.evaluation.base import LOSS_SCORE, WIN_SCORE, Evaluator
from checkers_engine.evaluation.material import MaterialEvaluator
from checkers_engine.moves.generator import MoveGenerator, MoveList

logger = logging.getLogger(__name__)

# Window bounds strictly outside every score the evaluator can return
NO_SCORE = LOSS_SCORE - 1
ABOVE_WIN = WIN_SCORE + 1


@dataclass
class SearchNode:
    """
    Entry in the search arena.

    Attributes:
        move: Best move chosen at this decision, None if none was recorded
        next_index: Arena index of the node continuing the capture chain,
            None when the turn ends with this move
    """
    move: Optional[Move] = None
    next_index: Optional[int] = None


@dataclass
class SearchResult:
    """
    Outcome of one top-level search.

    Attributes:
        sequence: Moves of the best turn, in order (empty if no legal move)
        score: Minimax score of that turn from the searching side's view
        nodes: Number of positions visited
        elapsed: Wall-clock seconds spent searching
        depth: Plies searched after the root turn
    """
    sequence: List[Move]
    score: float
    nodes: int
    elapsed: float
    depth: int


def make_generator(config: EngineConfig) -> MoveGenerator:
    """Move generator shuffling with the seed policy of ``config``."""
    seed = 0 if config.seed_policy is SeedPolicy.FIXED else int(time.time())
    return MoveGenerator(random.Random(seed))


class SearchEngine:
    """
    Bounded-depth best-turn search.

    Attributes:
        config: EngineConfig (depths, pruning, scoring, seed policy)
        evaluator: Leaf evaluator, MaterialEvaluator by default
        generator: MoveGenerator used for every move list
        nodes: Search arena of the last call
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        evaluator: Optional[Evaluator] = None,
        generator: Optional[MoveGenerator] = None,
    ):
        """
        Args:
            config: Engine configuration (defaults to EngineConfig())
            evaluator: Leaf evaluator (defaults to the config's scoring mode)
            generator: Move generator (defaults to one shuffling with the
                config's seed policy); pass MoveGenerator() for scan order
        """
        self.config = config if config is not None else EngineConfig()
        self.evaluator = evaluator if evaluator is not None else MaterialEvaluator(self.config.scoring_mode)
        self.generator = generator if generator is not None else make_generator(self.config)
        self.nodes: List[SearchNode] = []

        self._root_side = Side.WHITE
        self._max_depth = 0
        self._visited = 0

    def moves_for_side(self, board: BoardState, side: Side) -> MoveList:
        """Legal moves for ``side`` (game over when empty)."""
        return self.generator.moves_for_side(board, side)

    def moves_for_square(self, board: BoardState, square: Square) -> MoveList:
        """Legal moves for one piece, e.g. to continue a capture chain."""
        return self.generator.moves_for_square(board, square)

    def find_best_sequence(self, board: BoardState, side: Side, depth: Optional[int] = None) -> List[Move]:
        """
        Find the best full turn for ``side``.

        Args:
            board: Current position (never modified)
            side: Side to move
            depth: Plies to search after this turn (defaults to the config)

        Returns:
            The moves of the best turn in order: one quiet move, or every
            jump of a capture chain. Empty if ``side`` has no legal move.
        """
        return self.search(board, side, depth).sequence

    def search(self, board: BoardState, side: Side, depth: Optional[int] = None) -> SearchResult:
        """
        Run a search and return the best turn together with statistics.

        Raises:
            ValueError: If depth is not a positive integer
        """
        if depth is None:
            depth = self.config.depth_for(side)
        if isinstance(depth, bool) or not isinstance(depth, int) or depth <= 0:
            raise ValueError(f"depth must be a positive integer, got {depth!r}")

        self.nodes.clear()
        self._root_side = side
        self._max_depth = depth
        self._visited = 0

        start_time = time.time()
        score = self._best_chain(board, side, None, NO_SCORE)
        elapsed = time.time() - start_time

        sequence = self._principal_sequence()
        logger.debug(
            f"{side} depth={depth} pruning={self.config.pruning}: "
            f"{' '.join(str(m) for m in sequence) or 'no moves'} "
            f"score={score:.3f} nodes={self._visited} arena={len(self.nodes)} "
            f"time={elapsed:.3f}s"
        )
        return SearchResult(sequence, score, self._visited, elapsed, depth)

    def _principal_sequence(self) -> List[Move]:
        """Walk the arena from the root node until the chain ends."""
        sequence = []
        index: Optional[int] = 0
        while index is not None and index < len(self.nodes):
            node = self.nodes[index]
            if node.move is None:
                break
            sequence.append(node.move)
            index = node.next_index
        return sequence

    def _best_chain(self, board: BoardState, side: Side, square: Optional[Square], alpha: float) -> float:
        """
        Choose the root side's best move from ``board``.

        Args:
            board: Position with ``side`` to move
            side: Root side
            square: Piece in the middle of a capture chain, None for a fresh turn
            alpha: Score the caller already has; passed on as the lower bound
                once the turn is over

        Returns:
            float: Best score found, NO_SCORE if there is no move at all
        """
        index = len(self.nodes)
        node = SearchNode()
        self.nodes.append(node)
        self._visited += 1

        if square is None:
            moves, forced = self.generator.moves_for_side(board, side)
        else:
            moves, forced = self.generator.moves_for_square(board, square)
            if not forced:
                # Chain finished: the opponent starts ply 0
                return self._ply(board, side.other, 0, alpha, ABOVE_WIN)

        best_score = NO_SCORE
        for move in moves:
            child = board.apply(move)
            if forced:
                next_index = len(self.nodes)
                score = self._best_chain(child, side, move.end, best_score)
            else:
                next_index = None
                score = self._ply(child, side.other, 0, best_score, ABOVE_WIN)

            if score > best_score:
                best_score = score
                node.move = move
                node.next_index = next_index

        logger.debug(f"arena[{index}] = {node.move} -> {node.next_index} ({best_score:.3f})")
        return best_score

    def _ply(
        self,
        board: BoardState,
        side: Side,
        depth: int,
        alpha: float,
        beta: float,
        square: Optional[Square] = None,
    ) -> float:
        """
        Minimax value of ``board`` with ``side`` to move at ply ``depth``.

        Args:
            board: Current position
            side: Side to move
            depth: Plies played since the root turn
            alpha: Best score the maximising side can already force
            beta: Best score the minimising side can already force
            square: Piece in the middle of a capture chain, if any

        Returns:
            float: Position value for the root side (exact inside the
            alpha-beta window, a bound outside it)
        """
        self._visited += 1

        if depth == self._max_depth:
            return self.evaluator.score(board, self._root_side)

        if square is None:
            moves, forced = self.generator.moves_for_side(board, side)
        else:
            moves, forced = self.generator.moves_for_square(board, square)
            if not forced:
                return self._ply(board, side.other, depth + 1, alpha, beta)

        # Odd plies belong to the root side
        maximizing = depth % 2 == 1

        if not moves:
            return LOSS_SCORE if maximizing else WIN_SCORE

        min_score = ABOVE_WIN
        max_score = NO_SCORE
        for move in moves:
            child = board.apply(move)
            if forced:
                score = self._ply(child, side, depth, alpha, beta, move.end)
            else:
                score = self._ply(child, side.other, depth + 1, alpha, beta)

            min_score = min(min_score, score)
            max_score = max(max_score, score)

            if maximizing:
                alpha = max(alpha, max_score)
            else:
                beta = min(beta, min_score)

            if self.config.pruning and alpha >= beta:
                return max_score + 1 if maximizing else min_score - 1

        return max_score if maximizing else min_score


def find_best_sequence(
    board: BoardState,
    side: Side,
    config: Optional[EngineConfig] = None,
    evaluator: Optional[Evaluator] = None,
) -> List[Move]:
    """
    Find the best turn for ``side`` with a throwaway engine.

    Args:
        board: Current position
        side: Side to move
        config: Engine configuration (defaults to EngineConfig())
        evaluator: Leaf evaluator (defaults to the config's scoring mode)

    Returns:
        The moves of the best turn, empty if ``side`` cannot move
    """
    return SearchEngine(config, evaluator).find_best_sequence(board, side)
