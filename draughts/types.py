"""
Type definitions for the draughts engine.

This module provides:
- Enumerations for sides, piece markers and diagonal directions
- Dataclass implementations for piece counts, turn context and outcomes
- Type aliases shared by the generators, search and console layers
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import NamedTuple, Optional, Tuple

import numpy as np

# Basic type aliases
Board = np.ndarray  # int8 array of shape (8, 8) indexed [row, col]

BOARD_SIZE = 8
PIECES_PER_SIDE = 12


class Side(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def title(self) -> str:
        return self.value.capitalize()


class Piece(IntEnum):
    """Content of a board cell."""
    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4


_SIDE_OF = {
    Piece.WHITE_MAN: Side.WHITE,
    Piece.WHITE_KING: Side.WHITE,
    Piece.BLACK_MAN: Side.BLACK,
    Piece.BLACK_KING: Side.BLACK,
}


def piece_side(piece: int) -> Optional[Side]:
    """Owner of a piece, or None for an empty cell."""
    return _SIDE_OF.get(Piece(piece))


def is_king(piece: int) -> bool:
    return piece in (Piece.WHITE_KING, Piece.BLACK_KING)


def man_of(side: Side) -> Piece:
    return Piece.WHITE_MAN if side is Side.WHITE else Piece.BLACK_MAN


def king_of(side: Side) -> Piece:
    return Piece.WHITE_KING if side is Side.WHITE else Piece.BLACK_KING


def promoted(piece: int) -> Piece:
    if piece == Piece.WHITE_MAN:
        return Piece.WHITE_KING
    if piece == Piece.BLACK_MAN:
        return Piece.BLACK_KING
    return Piece(piece)


class Cell(NamedTuple):
    """Logical coordinates: column 0..7 left to right, row 0..7 top to bottom."""
    col: int
    row: int

    def step(self, direction: "Direction", distance: int = 1) -> "Cell":
        return Cell(self.col + direction.dc * distance, self.row + direction.dr * distance)


class Direction(Enum):
    # Declaration order is the exploration order used everywhere
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class GameState:
    """
    Running piece census for both sides.

    Kept alongside the board and updated together with every capture and
    promotion; every update returns a new instance so that search branches
    never share counts.
    """
    white_men: int = PIECES_PER_SIDE
    black_men: int = PIECES_PER_SIDE
    white_kings: int = 0
    black_kings: int = 0

    def __post_init__(self) -> None:
        for name in ("white_men", "black_men", "white_kings", "black_kings"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def men(self, side: Side) -> int:
        return self.white_men if side is Side.WHITE else self.black_men

    def kings(self, side: Side) -> int:
        return self.white_kings if side is Side.WHITE else self.black_kings

    def remaining(self, side: Side) -> int:
        return self.men(side) + self.kings(side)

    def after_capture(self, piece: int) -> "GameState":
        """Counts after removing ``piece`` from the board."""
        if piece == Piece.WHITE_MAN:
            return replace(self, white_men=self.white_men - 1)
        if piece == Piece.BLACK_MAN:
            return replace(self, black_men=self.black_men - 1)
        if piece == Piece.WHITE_KING:
            return replace(self, white_kings=self.white_kings - 1)
        if piece == Piece.BLACK_KING:
            return replace(self, black_kings=self.black_kings - 1)
        raise ValueError("Cannot capture an empty cell")

    def after_promotion(self, side: Side) -> "GameState":
        if side is Side.WHITE:
            return replace(self, white_men=self.white_men - 1, white_kings=self.white_kings + 1)
        return replace(self, black_men=self.black_men - 1, black_kings=self.black_kings + 1)


@dataclass(frozen=True)
class TurnContext:
    """
    Whose turn it is and how the two sides are laid out.

    The human always plays from the bottom of the board (towards row 0), the
    computer from the top (towards row 7).
    """
    current: Side
    human: Side

    @property
    def computer(self) -> Side:
        return self.human.opponent

    @property
    def bottom(self) -> Side:
        return self.human

    @property
    def top(self) -> Side:
        return self.computer

    @property
    def is_human_turn(self) -> bool:
        return self.current is self.human

    def forward(self, side: Side) -> int:
        """Row delta of a forward step for ``side``."""
        return -1 if side is self.bottom else 1

    def promotion_row(self, side: Side) -> int:
        return 0 if side is self.bottom else BOARD_SIZE - 1

    def markers(self, side: Side) -> Tuple[Piece, Piece]:
        return man_of(side), king_of(side)

    def switched(self) -> "TurnContext":
        return replace(self, current=self.current.opponent)


@dataclass(frozen=True)
class Outcome:
    """Terminal result of one explored plain move or capture chain."""
    board: Board
    counts: GameState
    origin: Cell
    landing: Cell
    captured: Tuple[Cell, ...] = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)


# (score, outcome); outcome is None when the side has nothing to play
SearchResult = Tuple[int, Optional[Outcome]]


def create_turn_context(human: Side, current: Side = Side.WHITE) -> TurnContext:
    """Create a turn context; white moves first unless told otherwise."""
    return TurnContext(current=current, human=human)

