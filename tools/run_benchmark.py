#!/usr/bin/env python3
"""
Self-Play Benchmark Runner

Plays engine-vs-engine games from the starting position at several depths
to measure search speed and compare pruning and scoring settings.

Usage:
    python tools/run_benchmark.py [--depths 2,3,4] [--games 4] [--no-pruning] [--verbose]
"""

import sys
import argparse
import logging
import time
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers_engine.config import EngineConfig, ScoringMode, SeedPolicy
from checkers_engine.search.minimax import SearchEngine
from checkers_engine.utils.testing import DEFAULT_MAX_TURNS, GameResult, play_game


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(
    depths: list[int],
    games: int,
    max_turns: int = DEFAULT_MAX_TURNS,
    pruning: bool = True,
    scoring_mode: ScoringMode = ScoringMode.MATERIAL,
    fixed_seed: bool = False,
):
    """
    Run self-play games at multiple depths.

    Args:
        depths: List of depths to test (both sides use the same depth)
        games: Games per depth
        max_turns: Turn cap per game (draw when reached)
        pruning: Enable alpha-beta pruning
        scoring_mode: Leaf evaluation heuristic
        fixed_seed: Use the fixed shuffle seed instead of wall-clock time
    """
    logger = logging.getLogger(__name__)

    print("=" * 80)
    print("SELF-PLAY BENCHMARK - checkers_engine")
    print("=" * 80)
    print(f"Evaluator: {scoring_mode.value}")
    print(f"Search: Minimax {'with' if pruning else 'without'} Alpha-Beta Pruning")
    print(f"Depths: {depths}  Games per depth: {games}  Turn cap: {max_turns}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        config = EngineConfig(
            white_depth=depth,
            black_depth=depth,
            scoring_mode=scoring_mode,
            pruning=pruning,
            seed_policy=SeedPolicy.FIXED if fixed_seed else SeedPolicy.TIME,
        )
        logger.info(f"Depth {depth}: {config!r}")

        outcomes = {result: 0 for result in GameResult}
        total_turns = 0
        total_captures = 0
        total_nodes = 0
        search_time = 0.0

        start_time = time.time()
        for _ in tqdm(range(games), desc=f"Depth {depth}", unit="game"):
            record = play_game(SearchEngine(config), SearchEngine(config), max_turns=max_turns)
            outcomes[record.result] += 1
            total_turns += len(record.turns)
            total_captures += record.captures
            total_nodes += sum(record.nodes_by_side().values())
            search_time += sum(turn.time_taken for turn in record.turns)
            logger.debug(
                f"Game over: {record.result.value} after {len(record.turns)} turns, "
                f"{record.captures} captures"
            )
        total_time = time.time() - start_time

        nodes_per_sec = total_nodes / search_time if search_time > 0 else 0
        all_results.append({
            'depth': depth,
            'outcomes': outcomes,
            'avg_turns': total_turns / games,
            'avg_captures': total_captures / games,
            'total_nodes': total_nodes,
            'nodes_per_sec': nodes_per_sec,
            'avg_turn_time': search_time / total_turns if total_turns else 0.0,
            'total_time': total_time,
        })

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<7} {'W/B/D':<10} {'Turns':<8} {'Captures':<10} {'Turn time':<11} {'Nodes/sec':<12} {'Total':<8}")
    print("-" * 80)

    for r in all_results:
        o = r['outcomes']
        wbd = f"{o[GameResult.WHITE_WIN]}/{o[GameResult.BLACK_WIN]}/{o[GameResult.DRAW]}"
        print(
            f"{r['depth']:<7} {wbd:<10} {r['avg_turns']:<8.1f} {r['avg_captures']:<10.1f} "
            f"{format_time(r['avg_turn_time']):<11} {r['nodes_per_sec']:>10,.0f}  {format_time(r['total_time']):<8}"
        )

    print("=" * 80)
    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run self-play games at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="2,3,4",
        help="Comma-separated list of depths to test (default: 2,3,4)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=4,
        help="Games per depth (default: 4)"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=DEFAULT_MAX_TURNS,
        help=f"Turn cap per game (default: {DEFAULT_MAX_TURNS})"
    )
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Disable alpha-beta pruning"
    )
    parser.add_argument(
        "--scoring",
        choices=[mode.value for mode in ScoringMode],
        default=ScoringMode.MATERIAL.value,
        help="Leaf evaluation heuristic"
    )
    parser.add_argument(
        "--fixed-seed",
        action="store_true",
        help="Shuffle moves with the fixed seed (reproducible games)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        logger.error("depths must be comma-separated integers")
        sys.exit(1)

    if args.games <= 0:
        logger.error(f"games must be positive, got {args.games}")
        sys.exit(1)

    try:
        run_benchmark(
            depths,
            args.games,
            max_turns=args.max_turns,
            pruning=not args.no_pruning,
            scoring_mode=ScoringMode(args.scoring),
            fixed_seed=args.fixed_seed,
        )
    except KeyboardInterrupt:
        logger.warning("\n\nBenchmark interrupted by user")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid benchmark settings: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
