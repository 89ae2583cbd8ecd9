"""
Coordinate mapping between logical cells, the text display grid and
algebraic notation (A1..H8).
"""
from __future__ import annotations

from typing import Optional, Tuple

from .types import BOARD_SIZE, Cell

# Text board geometry: every cell is 4 characters wide and 2 lines tall
CELL_WIDTH = 4
CELL_HEIGHT = 2
DISPLAY_ROWS = BOARD_SIZE * CELL_HEIGHT + 2  # grid lines plus the letter row
DISPLAY_COLS = BOARD_SIZE * CELL_WIDTH + 3   # grid plus the digit column

COLUMN_LETTERS = "ABCDEFGH"


def to_notation(cell: Cell) -> str:
    """Convert a logical cell to algebraic notation (row 0 is rank 8)."""
    col, row = cell
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"Cell out of range: {cell}")
    return f"{COLUMN_LETTERS[col]}{BOARD_SIZE - row}"


def parse_square(s: str) -> Optional[Cell]:
    """Parse algebraic notation such as ``"b3"`` into a cell."""
    s = s.strip().upper()
    if len(s) != 2:
        return None
    letter, digit = s
    if letter not in COLUMN_LETTERS or not digit.isdigit():
        return None
    rank = int(digit)
    if not 1 <= rank <= BOARD_SIZE:
        return None
    return Cell(COLUMN_LETTERS.index(letter), BOARD_SIZE - rank)


def to_display(cell: Cell) -> Tuple[int, int]:
    """Position of the piece marker for ``cell`` on the text grid as (x, y)."""
    col, row = cell
    return col * CELL_WIDTH + 2, row * CELL_HEIGHT + 1


def from_display(x: int, y: int) -> Cell:
    if (x - 2) % CELL_WIDTH or (y - 1) % CELL_HEIGHT:
        raise ValueError(f"({x}, {y}) is not a cell centre on the display grid")
    col, row = (x - 2) // CELL_WIDTH, (y - 1) // CELL_HEIGHT
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"({x}, {y}) lies outside the display grid")
    return Cell(col, row)
