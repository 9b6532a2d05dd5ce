"""
Utilities Module

This module provides utility functions for testing and benchmarking the
checkers engine.

Key Components:
    - Perft: Move generation verification (complete turns, chains expanded)
    - Self-play: engine-vs-engine games with per-turn statistics

Success Metrics:
    - Perft from the starting position: 7, 49, 302 at depths 1-3
"""

from checkers_engine.utils.perft import divide, iter_turns, perft
from checkers_engine.utils.testing import (
    GameRecord,
    GameResult,
    TurnRecord,
    play_game,
)

__all__ = [
    'divide',
    'iter_turns',
    'perft',
    'GameRecord',
    'GameResult',
    'TurnRecord',
    'play_game',
]
