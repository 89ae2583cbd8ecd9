"""
Text rendering of the board for the console.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .board import is_playable, piece_at
from .config import UISettings, get_ui_settings
from .notation import (
    CELL_HEIGHT,
    CELL_WIDTH,
    COLUMN_LETTERS,
    DISPLAY_COLS,
    DISPLAY_ROWS,
    to_display,
)
from .types import BOARD_SIZE, Board, Cell, GameState, Piece, Side

# Board appearance
EMPTY_MARK = "*"
ASCII_MARKS: Dict[Piece, str] = {
    Piece.EMPTY: EMPTY_MARK,
    Piece.WHITE_MAN: "O",
    Piece.BLACK_MAN: "0",
    Piece.WHITE_KING: "W",
    Piece.BLACK_KING: "B",
}
UNICODE_MARKS: Dict[Piece, str] = {
    Piece.EMPTY: "·",
    Piece.WHITE_MAN: "⛀",
    Piece.BLACK_MAN: "⛂",
    Piece.WHITE_KING: "⛁",
    Piece.BLACK_KING: "⛃",
}
SELECTED_LEFT, SELECTED_RIGHT = "#", "#"
DEST_LEFT, DEST_RIGHT = "(", ")"

# ANSI colors
RESET = "\033[0m"
COLOR_WHITE = "\033[1;37m"
COLOR_BLACK = "\033[1;31m"
COLOR_HIGHLIGHT = "\033[1;33m"


class BoardRenderer:
    """Draws the board as an 18 x 35 character grid."""

    def __init__(self, settings: Optional[UISettings] = None) -> None:
        self.settings = settings or get_ui_settings()
        self.marks = UNICODE_MARKS if self.settings.use_unicode else ASCII_MARKS

    def legend(self) -> str:
        m = self.marks
        return (f"{m[Piece.WHITE_MAN]} - white man, {m[Piece.BLACK_MAN]} - black man, "
                f"{m[Piece.WHITE_KING]}, {m[Piece.BLACK_KING]} - kings")

    def census_line(self, counts: GameState) -> str:
        return (f"White: {counts.men(Side.WHITE)} ({counts.kings(Side.WHITE)} kings), "
                f"Black: {counts.men(Side.BLACK)} ({counts.kings(Side.BLACK)} kings)")

    def grid(self, board: Board, selected: Optional[Cell] = None,
             destinations: Iterable[Cell] = ()) -> List[List[str]]:
        """Character grid without colors, indexed [y][x]."""
        rows: List[List[str]] = [[" "] * DISPLAY_COLS for _ in range(DISPLAY_ROWS)]
        border = "+" + ("-" * (CELL_WIDTH - 1) + "+") * BOARD_SIZE
        for y in range(0, BOARD_SIZE * CELL_HEIGHT + 1, CELL_HEIGHT):
            rows[y][:len(border)] = list(border)
        for row in range(BOARD_SIZE):
            y = row * CELL_HEIGHT + 1
            for x in range(0, BOARD_SIZE * CELL_WIDTH + 1, CELL_WIDTH):
                rows[y][x] = "|"
            rows[y][DISPLAY_COLS - 1] = str(BOARD_SIZE - row)
            for col in range(BOARD_SIZE):
                cell = Cell(col, row)
                if is_playable(cell):
                    x, _ = to_display(cell)
                    rows[y][x] = self.marks[piece_at(board, cell)]
        for col, letter in enumerate(COLUMN_LETTERS):
            rows[DISPLAY_ROWS - 1][col * CELL_WIDTH + 2] = letter

        if self.settings.highlight_moves:
            for dest in destinations:
                self._bracket(rows, dest, DEST_LEFT, DEST_RIGHT)
            if selected is not None:
                self._bracket(rows, selected, SELECTED_LEFT, SELECTED_RIGHT)
        return rows

    def render(self, board: Board, counts: Optional[GameState] = None,
               selected: Optional[Cell] = None, destinations: Iterable[Cell] = ()) -> str:
        rows = self.grid(board, selected, destinations)
        lines: List[str] = []
        if counts is not None and self.settings.show_counts:
            lines.append(self.census_line(counts))
        for y, line in enumerate(rows):
            text = "".join(line).rstrip()
            # The letter row holds B, which would otherwise be painted as a king
            if self.settings.use_color and y < DISPLAY_ROWS - 1:
                text = self._colorize(text)
            lines.append(text)
        return "\n".join(lines)

    @staticmethod
    def _bracket(rows: List[List[str]], cell: Cell, left: str, right: str) -> None:
        x, y = to_display(cell)
        rows[y][x - 1] = left
        rows[y][x + 1] = right

    def _colorize(self, line: str) -> str:
        m = self.marks
        colors = {
            m[Piece.WHITE_MAN]: COLOR_WHITE,
            m[Piece.WHITE_KING]: COLOR_WHITE,
            m[Piece.BLACK_MAN]: COLOR_BLACK,
            m[Piece.BLACK_KING]: COLOR_BLACK,
            SELECTED_LEFT: COLOR_HIGHLIGHT,
            DEST_LEFT: COLOR_HIGHLIGHT,
            DEST_RIGHT: COLOR_HIGHLIGHT,
        }
        # Digits only mark pieces inside the grid, never the rank labels
        body, tail = line[:DISPLAY_COLS - 1], line[DISPLAY_COLS - 1:]
        out = "".join(f"{colors[ch]}{ch}{RESET}" if ch in colors else ch for ch in body)
        return out + tail
