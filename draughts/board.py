from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from .types import (
    BOARD_SIZE,
    Board,
    Cell,
    GameState,
    Piece,
    Side,
    TurnContext,
    king_of,
    man_of,
    piece_side,
)

# ============================
# Board indexing
# ============================
# Playable cells in row-major order: column stride 2, starting at 1 on even rows
_PLAYABLE: List[Cell] = [
    Cell(c, r)
    for r in range(BOARD_SIZE)
    for c in range(1 if r % 2 == 0 else 0, BOARD_SIZE, 2)
]


def on_board(col: int, row: int) -> bool:
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


def is_playable(cell: Cell) -> bool:
    """Playable (dark) cells are exactly those with an odd coordinate sum."""
    return on_board(cell.col, cell.row) and (cell.col + cell.row) % 2 == 1


def playable_cells() -> Iterator[Cell]:
    return iter(_PLAYABLE)


# ============================
# Board setup and utilities
# ============================
def empty_board() -> Board:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def initial_board(ctx: TurnContext) -> Board:
    """Initial position: top side men on rows 0..2, bottom side men on rows 5..7."""
    b: Board = empty_board()
    for cell in _PLAYABLE:
        if cell.row <= 2:
            b[cell.row, cell.col] = man_of(ctx.top)
        elif cell.row >= 5:
            b[cell.row, cell.col] = man_of(ctx.bottom)
    return b


def initial_counts() -> GameState:
    return GameState()


def piece_at(board: Board, cell: Cell) -> Piece:
    return Piece(int(board[cell.row, cell.col]))


def place(board: Board, cell: Cell, piece: Piece) -> None:
    if piece != Piece.EMPTY and not is_playable(cell):
        raise ValueError(f"Pieces may only occupy playable cells, got {cell}")
    board[cell.row, cell.col] = piece


def owner_at(board: Board, cell: Cell) -> Optional[Side]:
    return piece_side(piece_at(board, cell))


def cells_of(board: Board, side: Side) -> Iterator[Cell]:
    """Cells holding ``side``'s pieces, row-major."""
    for cell in _PLAYABLE:
        if owner_at(board, cell) is side:
            yield cell


def census(board: Board) -> GameState:
    """Count pieces of each type by scanning the whole board.

    Used to validate the running counts; the move generators never call it.
    """
    return GameState(
        white_men=int(np.count_nonzero(board == int(Piece.WHITE_MAN))),
        black_men=int(np.count_nonzero(board == int(Piece.BLACK_MAN))),
        white_kings=int(np.count_nonzero(board == int(king_of(Side.WHITE)))),
        black_kings=int(np.count_nonzero(board == int(king_of(Side.BLACK)))),
    )
