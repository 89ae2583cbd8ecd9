"""
Move search for the computer player.

One ply for quiet moves, exhaustive over capture chains: no pruning, no
transposition table. Ties always go to the first candidate found in scan
order (rows top to bottom, directions in ``Direction`` order).
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .board import cells_of
from .eval import Evaluator, get_evaluator
from .moves import MoveGenerator
from .notation import to_notation
from .rules import apply_capture, apply_step
from .types import Board, Cell, GameState, Outcome, SearchResult, TurnContext

logger = logging.getLogger(__name__)

NO_SCORE = -1


class BestSequenceSearch:
    """Finds the capture line of one piece whose final position scores highest."""

    def __init__(self, evaluator: Evaluator, generator: Optional[MoveGenerator] = None) -> None:
        self.evaluator = evaluator
        self.generator = generator or MoveGenerator()

    def search(self, board: Board, counts: GameState, cell: Cell, ctx: TurnContext,
               best: SearchResult = (NO_SCORE, None)) -> SearchResult:
        """Best (score, outcome) over every maximal capture line from ``cell``.

        ``best`` is the running maximum carried in; a line replaces it only
        with a strictly greater score.
        """

        def walk(pos: Board, cnt: GameState, at: Cell, captured: Tuple[Cell, ...],
                 current: SearchResult) -> SearchResult:
            options = self.generator.captures(pos, at, ctx)
            if not options:
                score = self.evaluator.evaluate(pos, cnt, ctx.current)
                if score > current[0]:
                    return score, Outcome(pos, cnt, cell, at, captured)
                return current
            for opt in options:
                nb, nc = apply_capture(pos, cnt, opt, ctx)
                current = walk(nb, nc, opt.target, captured + (opt.captured,), current)
            return current

        return walk(board, counts, cell, (), best)


class SearchStrategy(ABC):
    """Abstract interface for search strategies."""

    @abstractmethod
    def select(self, board: Board, counts: GameState, ctx: TurnContext) -> SearchResult:  # pragma: no cover
        raise NotImplementedError


class MoveSelector(SearchStrategy):
    """Picks the move of the side to move in ``ctx``.

    Capturing is mandatory: as soon as one piece can capture, quiet moves of
    every piece are ignored for the turn.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None,
                 generator: Optional[MoveGenerator] = None) -> None:
        self.evaluator: Evaluator = evaluator or get_evaluator()
        self.generator = generator or MoveGenerator()
        self.sequences = BestSequenceSearch(self.evaluator, self.generator)

    def select(self, board: Board, counts: GameState, ctx: TurnContext) -> SearchResult:
        best: SearchResult = (NO_SCORE, None)
        has_to_kill: bool = False
        side = ctx.current

        for cell in cells_of(board, side):
            if self.generator.captures(board, cell, ctx):
                candidate = self.sequences.search(board, counts, cell, ctx)
                # The first capturing piece always displaces quiet moves found so far
                if candidate[0] > best[0] or not has_to_kill:
                    best = candidate
                has_to_kill = True
                continue
            if has_to_kill:
                continue
            for step in self.generator.simple_moves(board, cell, ctx):
                nb, nc = apply_step(board, counts, step, ctx)
                score = self.evaluator.evaluate(nb, nc, side)
                if score > best[0]:
                    best = (score, Outcome(nb, nc, cell, step.target))

        score, outcome = best
        if outcome is None:
            logger.info("No move available for %s", side.title)
        else:
            logger.debug("%s selects %s -> %s (score %d, captures %d)", side.title,
                         to_notation(outcome.origin), to_notation(outcome.landing),
                         score, len(outcome.captured))
        return best


def get_search_strategy(evaluator: Optional[Evaluator] = None) -> SearchStrategy:
    """Factory for the default one-ply strategy."""
    return MoveSelector(evaluator)


__all__ = [
    "BestSequenceSearch",
    "SearchStrategy",
    "MoveSelector",
    "get_search_strategy",
    "NO_SCORE",
]
