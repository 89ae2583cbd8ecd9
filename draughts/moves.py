from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .board import cells_of, on_board, piece_at
from .types import DIRECTIONS, Board, Cell, Direction, Piece, Side, TurnContext, is_king, piece_side


@dataclass(frozen=True)
class MoveOption:
    """One of the four directional options of a piece.

    ``target`` is None when the direction is not playable.
    """
    direction: Direction
    origin: Cell
    target: Optional[Cell] = None
    captured: Optional[Cell] = None

    @property
    def valid(self) -> bool:
        return self.target is not None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


def valid_only(options: List[MoveOption]) -> List[MoveOption]:
    return [o for o in options if o.valid]


class MoveGenerator:
    """Generates plain steps and single captures for one piece.

    Men step forward only but capture in all four diagonals; kings do both in
    all four diagonals. Only one enemy piece is jumped per capture.
    """

    def move_options(self, board: Board, cell: Cell, ctx: TurnContext) -> List[MoveOption]:
        piece: Piece = piece_at(board, cell)
        owner: Optional[Side] = piece_side(piece)
        if owner is None:
            return [MoveOption(d, cell) for d in DIRECTIONS]
        forward = ctx.forward(owner)
        options: List[MoveOption] = []
        for d in DIRECTIONS:
            dest = cell.step(d)
            if not is_king(piece) and d.dr != forward:
                options.append(MoveOption(d, cell))
            elif on_board(*dest) and piece_at(board, dest) == Piece.EMPTY:
                options.append(MoveOption(d, cell, dest))
            else:
                options.append(MoveOption(d, cell))
        return options

    def capture_options(self, board: Board, cell: Cell, ctx: TurnContext) -> List[MoveOption]:
        """Captures for the piece on ``cell`` against the opponent of ``ctx.current``."""
        piece: Piece = piece_at(board, cell)
        if piece == Piece.EMPTY:
            return [MoveOption(d, cell) for d in DIRECTIONS]
        enemy = ctx.markers(ctx.current.opponent)
        options: List[MoveOption] = []
        for d in DIRECTIONS:
            mid = cell.step(d)
            end = cell.step(d, 2)
            if (on_board(*end) and piece_at(board, mid) in enemy
                    and piece_at(board, end) == Piece.EMPTY):
                options.append(MoveOption(d, cell, end, mid))
            else:
                options.append(MoveOption(d, cell))
        return options

    def simple_moves(self, board: Board, cell: Cell, ctx: TurnContext) -> List[MoveOption]:
        return valid_only(self.move_options(board, cell, ctx))

    def captures(self, board: Board, cell: Cell, ctx: TurnContext) -> List[MoveOption]:
        return valid_only(self.capture_options(board, cell, ctx))

    def capturing_cells(self, board: Board, ctx: TurnContext) -> List[Cell]:
        """Cells of the side to move that have at least one capture, row-major."""
        return [c for c in cells_of(board, ctx.current) if self.captures(board, c, ctx)]

    def has_capture(self, board: Board, ctx: TurnContext) -> bool:
        return any(self.captures(board, c, ctx) for c in cells_of(board, ctx.current))

    def has_any_action(self, board: Board, ctx: TurnContext) -> bool:
        for c in cells_of(board, ctx.current):
            if self.captures(board, c, ctx) or self.simple_moves(board, c, ctx):
                return True
        return False


# Convenience functional API

def has_capture(board: Board, ctx: TurnContext) -> bool:
    return MoveGenerator().has_capture(board, ctx)
