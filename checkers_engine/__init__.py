"""
checkers_engine

A rules engine and adversarial search engine for 8x8 checkers with forced
captures, multi-jump capture chains and flying kings.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation
   - Immutable BoardState snapshots with copy-with-move
   - ASCII diagrams for tests and tools

2. **moves**: Legal move generation
   - Forced-capture rule for a whole side or a single piece
   - Man steps and jumps, flying king slides and captures

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: material ratio, optional promotion potential

4. **search**: Search algorithms
   - Minimax with alpha-beta pruning over full turns
   - Capture chains searched jump by jump within a single ply
   - Arena of search nodes to rebuild the best capture chain

5. **utils**: Testing and benchmarking utilities
   - Perft move-generation counts
   - Engine-vs-engine self-play

## Quick Start

```python
from checkers_engine import BoardState, EngineConfig, SearchEngine, Side

engine = SearchEngine(EngineConfig(white_depth=4, black_depth=4))
board = BoardState.initial()

sequence = engine.find_best_sequence(board, Side.WHITE)
for move in sequence:
    board = board.apply(move)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from checkers_engine.board import BoardState, Move, Side, parse_board
from checkers_engine.config import EngineConfig, ScoringMode, SeedPolicy
from checkers_engine.evaluation import Evaluator, MaterialEvaluator
from checkers_engine.moves import MoveGenerator, MoveList, moves_for_side, moves_for_square
from checkers_engine.search import SearchEngine, find_best_sequence

__all__ = [
    'BoardState',
    'Move',
    'Side',
    'parse_board',
    'EngineConfig',
    'ScoringMode',
    'SeedPolicy',
    'Evaluator',
    'MaterialEvaluator',
    'MoveGenerator',
    'MoveList',
    'moves_for_side',
    'moves_for_square',
    'SearchEngine',
    'find_best_sequence',
]
