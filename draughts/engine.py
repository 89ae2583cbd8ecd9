"""
Game engine: the live position plus the operations the console front end
calls for each turn.

Nothing here reads input or prints; validation failures are raised as the
exceptions in ``draughts.errors`` before any state is changed.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from .board import census, initial_board, initial_counts, on_board, owner_at
from .chains import explore_capture_chains
from .errors import (
    CaptureRequiredError,
    InvalidChoiceError,
    InvalidNotationError,
    NoLegalMoveError,
    NotYourPieceError,
    OutOfTurnError,
)
from .eval import Evaluator
from .moves import MoveGenerator
from .notation import parse_square, to_notation
from .rules import apply_step, winner
from .search import MoveSelector
from .types import Board, Cell, GameState, Outcome, Side, TurnContext, create_turn_context

logger = logging.getLogger(__name__)

Square = Union[Cell, str]


class GameEngine:
    """Holds the board, the running counts and the turn context."""

    def __init__(self, human: Side = Side.WHITE, evaluator: Optional[Evaluator] = None,
                 ctx: Optional[TurnContext] = None, board: Optional[Board] = None,
                 counts: Optional[GameState] = None) -> None:
        self.ctx: TurnContext = ctx or create_turn_context(human)
        self.board: Board = board if board is not None else initial_board(self.ctx)
        self.counts: GameState = counts if counts is not None else (
            census(self.board) if board is not None else initial_counts())
        self.generator = MoveGenerator()
        self.selector = MoveSelector(evaluator, self.generator)
        self.move_number: int = 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_capture_mandatory_for(self, side: Side) -> bool:
        return self.generator.has_capture(self.board, self._context_for(side))

    def is_game_over(self) -> Optional[Side]:
        """Winner of the live position, or None while the side to move still has
        something to play.
        """
        return winner(self.board, self.counts, self.ctx, self.generator)

    def census_is_consistent(self) -> bool:
        return census(self.board) == self.counts

    def enumerate_human_options(self, origin: Square) -> List[Tuple[int, str]]:
        """Numbered destinations (1-based) for the human piece on ``origin``."""
        cell = self._check_origin(origin)
        return [(i, to_notation(o.landing)) for i, o in enumerate(self._outcomes_for(cell), start=1)]

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------
    def apply_human_move(self, origin: Square, choice: int) -> GameState:
        """Play option ``choice`` (as listed by ``enumerate_human_options``)."""
        cell = self._check_origin(origin)
        outcomes = self._outcomes_for(cell)
        if not 1 <= choice <= len(outcomes):
            raise InvalidChoiceError(f"Choose an option between 1 and {len(outcomes)}")
        self._commit(outcomes[choice - 1])
        return self.counts

    def compute_computer_move(self) -> Optional[Outcome]:
        """Let the computer play; None when it has no move available."""
        if self.ctx.is_human_turn:
            raise OutOfTurnError("It is the human player's turn")
        _, outcome = self.selector.select(self.board, self.counts, self.ctx)
        if outcome is None:
            return None
        self._commit(outcome)
        return outcome

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _context_for(self, side: Side) -> TurnContext:
        return self.ctx if side is self.ctx.current else self.ctx.switched()

    def _check_origin(self, origin: Square) -> Cell:
        if not self.ctx.is_human_turn:
            raise OutOfTurnError("It is the computer's turn")
        if isinstance(origin, str):
            cell = parse_square(origin)
            if cell is None:
                raise InvalidNotationError(f"Invalid square {origin!r}: use a letter A-H and a digit 1-8")
        else:
            cell = Cell(*origin)
            if not on_board(*cell):
                raise InvalidNotationError(f"Cell {tuple(cell)} lies outside the board")
        if owner_at(self.board, cell) is not self.ctx.human:
            raise NotYourPieceError(f"{to_notation(cell)} does not hold one of your pieces")
        capturing = self.generator.capturing_cells(self.board, self.ctx)
        if capturing and cell not in capturing:
            squares = ", ".join(to_notation(c) for c in capturing)
            raise CaptureRequiredError(f"You must capture: choose one of {squares}")
        if not capturing and not self.generator.simple_moves(self.board, cell, self.ctx):
            raise NoLegalMoveError(f"The piece on {to_notation(cell)} cannot move")
        return cell

    def _outcomes_for(self, cell: Cell) -> List[Outcome]:
        if self.generator.captures(self.board, cell, self.ctx):
            return explore_capture_chains(self.board, self.counts, cell, self.ctx, self.generator)
        outcomes: List[Outcome] = []
        for step in self.generator.simple_moves(self.board, cell, self.ctx):
            nb, nc = apply_step(self.board, self.counts, step, self.ctx)
            outcomes.append(Outcome(nb, nc, cell, step.target))
        return outcomes

    def _commit(self, outcome: Outcome) -> None:
        logger.info("Move %d: %s %s %s", self.move_number, self.ctx.current.title,
                    to_notation(outcome.origin),
                    ("x" if outcome.is_capture else "-") + to_notation(outcome.landing))
        self.board = outcome.board
        self.counts = outcome.counts
        self.ctx = self.ctx.switched()
        if self.ctx.current is Side.WHITE:
            self.move_number += 1
