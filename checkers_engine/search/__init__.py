"""
Search Module

This module implements the checkers search algorithm: minimax with
alpha-beta pruning over full turns, where a turn may be a chain of
captures by one piece.

Key Components:
    - SearchEngine: configurable engine, find_best_sequence() / search()
    - SearchNode: arena entry used to rebuild the best capture chain
    - SearchResult: best turn plus score, node count and timing
    - find_best_sequence: one-shot convenience wrapper
"""

from checkers_engine.search.minimax import (
    SearchEngine,
    SearchNode,
    SearchResult,
    find_best_sequence,
)

__all__ = ['SearchEngine', 'SearchNode', 'SearchResult', 'find_best_sequence']
