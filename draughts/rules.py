from __future__ import annotations

import logging
from typing import Optional, Tuple

from .board import census, piece_at
from .moves import MoveGenerator, MoveOption
from .types import Board, Cell, GameState, Piece, Side, TurnContext, is_king, piece_side, promoted

logger = logging.getLogger(__name__)


def promote(board: Board, counts: GameState, cell: Cell, ctx: TurnContext) -> GameState:
    """Crown a man that has reached its promotion row.

    Mutates ``board`` (which the caller must own) and returns the updated
    counts. Running it again on the same landing changes nothing.
    """
    piece: Piece = piece_at(board, cell)
    side: Optional[Side] = piece_side(piece)
    if side is None or is_king(piece):
        return counts
    if cell.row != ctx.promotion_row(side):
        return counts
    board[cell.row, cell.col] = promoted(piece)
    logger.debug("%s man crowned on %s", side.title, cell)
    return counts.after_promotion(side)


def census_matches(board: Board, counts: GameState) -> bool:
    return census(board) == counts


def winner(board: Board, counts: GameState, ctx: TurnContext,
           generator: Optional[MoveGenerator] = None) -> Optional[Side]:
    """Winner of the position, or None while the game goes on.

    A side without pieces loses; so does the side to move when none of its
    pieces can step or capture.
    """
    for side in (ctx.current, ctx.current.opponent):
        if counts.remaining(side) == 0:
            return side.opponent
    gen = generator or MoveGenerator()
    if not gen.has_any_action(board, ctx):
        logger.info("%s is immobilized", ctx.current.title)
        return ctx.current.opponent
    return None


def apply_step(board: Board, counts: GameState, option: MoveOption,
               ctx: TurnContext) -> Tuple[Board, GameState]:
    """Play a plain step on a copy of ``board``."""
    if option.target is None or option.is_capture:
        raise ValueError(f"Not a plain step: {option}")
    nb: Board = board.copy()
    nb[option.target.row, option.target.col] = piece_at(board, option.origin)
    nb[option.origin.row, option.origin.col] = Piece.EMPTY
    return nb, promote(nb, counts, option.target, ctx)


def apply_capture(board: Board, counts: GameState, option: MoveOption,
                  ctx: TurnContext) -> Tuple[Board, GameState]:
    """Play one capture step on a copy of ``board``."""
    if option.target is None or option.captured is None:
        raise ValueError(f"Not a capture: {option}")
    nb: Board = board.copy()
    mover: Piece = piece_at(board, option.origin)
    taken: Piece = piece_at(board, option.captured)
    nc: GameState = counts.after_capture(taken)
    nb[option.captured.row, option.captured.col] = Piece.EMPTY
    nb[option.origin.row, option.origin.col] = Piece.EMPTY
    nb[option.target.row, option.target.col] = mover
    return nb, promote(nb, nc, option.target, ctx)
