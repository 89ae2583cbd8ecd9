"""
Capture-chain exploration.

A piece that captures keeps capturing from its landing cell for as long as it
can. ``explore_capture_chains`` follows every alternative and returns one
outcome per maximal line; each branch works on its own copy of the board and
its own counts, so the caller's position is never touched.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from .moves import MoveGenerator
from .rules import apply_capture
from .types import Board, Cell, GameState, Outcome, TurnContext


def explore_capture_chains(board: Board, counts: GameState, cell: Cell, ctx: TurnContext,
                           generator: Optional[MoveGenerator] = None) -> List[Outcome]:
    """All maximal capture lines of the piece on ``cell``.

    A piece without captures yields a single outcome: the position itself.
    """
    gen = generator or MoveGenerator()
    outcomes: List[Outcome] = []

    def walk(pos: Board, cnt: GameState, at: Cell, captured: Tuple[Cell, ...]) -> None:
        options = gen.captures(pos, at, ctx)
        if not options:
            outcomes.append(Outcome(pos if captured else pos.copy(), cnt, cell, at, captured))
            return
        for opt in options:
            nb, nc = apply_capture(pos, cnt, opt, ctx)
            walk(nb, nc, opt.target, captured + (opt.captured,))

    walk(board, counts, cell, ())
    return outcomes
