"""Draughts package: console checkers against a one-ply computer opponent.

Usage examples:
    from draughts import GameEngine, Side
    from draughts import explore_capture_chains, MoveSelector
"""
from __future__ import annotations

from .types import (
    Cell,
    Direction,
    GameState,
    Outcome,
    Piece,
    SearchResult,
    Side,
    TurnContext,
    create_turn_context,
)
from .board import census, empty_board, initial_board, initial_counts, playable_cells
from .notation import parse_square, to_notation
from .moves import MoveGenerator, MoveOption
from .rules import apply_capture, apply_step, promote, winner
from .chains import explore_capture_chains
from .eval import Evaluator, MaterialEvaluator, get_evaluator
from .search import BestSequenceSearch, MoveSelector, get_search_strategy
from .engine import GameEngine
from .errors import DraughtsError

__version__ = "1.0.0"
