"""Double-buffered screen with minimal-diff flushing."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.constants import BOX_GLYPHS, BorderStyle
from termgrid.core.rect import Rect
from termgrid.log import get_logger
from termgrid.render.encoder import TerminalEncoder

log = get_logger(__name__)


def _blank_grid(width: int, height: int) -> list[list[Cell]]:
    return [[Cell.EMPTY] * max(0, width) for _ in range(max(0, height))]


def _undrawn_grid(width: int, height: int) -> list[list[Cell | None]]:
    # None marks a position whose terminal content is unknown; no cell equals it
    return [[None] * max(0, width) for _ in range(max(0, height))]


class ScreenBuffer:
    """
    Two equally sized cell grids: ``front`` and ``back``.

    All drawing goes into the back grid. ``flush`` compares back against
    front, writes one positioned glyph for every differing cell and copies
    it into front. Front therefore always records what the terminal
    physically shows, and an unchanged frame writes nothing at all.

    The back grid is cleared (not swapped) at the start of each frame, so
    every frame is drawn from blank.
    """

    def __init__(
        self,
        width: int,
        height: int,
        out: TextIO | None = None,
        encoder: TerminalEncoder | None = None,
    ) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.out = out if out is not None else sys.stdout
        self.encoder = encoder or TerminalEncoder()
        self._front = _undrawn_grid(self.width, self.height)
        self._back = _blank_grid(self.width, self.height)

    # -- grid access ---------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell | None:
        """Cell currently drawn into the back grid, or None off-screen."""
        if not self.in_bounds(x, y):
            return None
        return self._back[y][x]

    def get_front_cell(self, x: int, y: int) -> Cell | None:
        """Cell last flushed to the terminal; None off-screen or not yet drawn."""
        if not self.in_bounds(x, y):
            return None
        return self._front[y][x]

    def back_rows(self) -> Iterator[list[Cell]]:
        """Iterate over back-grid rows (for inspection and tests)."""
        yield from self._back

    def row_text(self, y: int) -> str:
        """Characters of one back-grid row as a string."""
        if not 0 <= y < self.height:
            return ""
        return "".join(cell.char for cell in self._back[y])

    # -- lifecycle ------------------------------------------------------

    def clear(self) -> None:
        """Reset the back grid to empty cells."""
        self._back = _blank_grid(self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """
        Reallocate both grids at the new size.

        Front is reset to "undrawn", so the next flush rewrites every cell
        regardless of what was on screen before.
        """
        self.width = max(0, width)
        self.height = max(0, height)
        self._front = _undrawn_grid(self.width, self.height)
        self._back = _blank_grid(self.width, self.height)
        log.debug("screen_resized", width=self.width, height=self.height)

    def invalidate(self) -> None:
        """
        Force a full redraw without resizing.

        The physical screen is cleared and the front grid forgotten, so the
        next flush rewrites every cell.
        """
        self._front = _undrawn_grid(self.width, self.height)
        self._back = _blank_grid(self.width, self.height)
        self.out.write(self.encoder.clear_screen())
        self.out.flush()

    # -- drawing primitives --------------------------------------------

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Place a cell in the back grid. Out-of-bounds writes are ignored."""
        if self.in_bounds(x, y):
            self._back[y][x] = cell

    def write_text(
        self,
        x: int,
        y: int,
        text: str,
        fg: Color = Color.WHITE,
        bg: Color = Color.TRANSPARENT,
        bold: bool = False,
        italic: bool = False,
        underline: bool = False,
    ) -> None:
        """Write a horizontal run of characters, clipped at the right edge."""
        if not 0 <= y < self.height:
            return
        row = self._back[y]
        for i, char in enumerate(text):
            col = x + i
            if col >= self.width:
                break
            if col >= 0:
                row[col] = Cell(char, fg, bg, bold, italic, underline)

    def fill_rect(
        self,
        rect: Rect,
        char: str = ' ',
        fg: Color = Color.WHITE,
        bg: Color = Color.BLACK,
    ) -> None:
        """
        Fill a rectangle with one cell value.

        A transparent background makes the fill a no-op; fills never blend.
        """
        if bg.is_transparent or rect.is_empty:
            return
        cell = Cell(char, fg, bg)
        for y in range(max(rect.y, 0), min(rect.bottom, self.height)):
            row = self._back[y]
            for x in range(max(rect.x, 0), min(rect.right, self.width)):
                row[x] = cell

    def draw_border(
        self,
        rect: Rect,
        fg: Color = Color.WHITE,
        bg: Color = Color.TRANSPARENT,
        style: BorderStyle = BorderStyle.SINGLE,
    ) -> None:
        """Draw a box along the rectangle's edges using line-drawing glyphs."""
        if rect.is_empty or style is BorderStyle.NONE:
            return
        horizontal, vertical, top_left, top_right, bottom_left, bottom_right = BOX_GLYPHS[style]
        left, top = rect.x, rect.y
        right, bottom = rect.right - 1, rect.bottom - 1

        for x in range(left, rect.right):
            self.set_cell(x, top, Cell(horizontal, fg, bg))
            self.set_cell(x, bottom, Cell(horizontal, fg, bg))
        for y in range(top, rect.bottom):
            self.set_cell(left, y, Cell(vertical, fg, bg))
            self.set_cell(right, y, Cell(vertical, fg, bg))

        self.set_cell(left, top, Cell(top_left, fg, bg))
        self.set_cell(right, top, Cell(top_right, fg, bg))
        self.set_cell(left, bottom, Cell(bottom_left, fg, bg))
        self.set_cell(right, bottom, Cell(bottom_right, fg, bg))

    # -- output ---------------------------------------------------------

    def diff(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` for every back cell that differs from front."""
        for y, (back_row, front_row) in enumerate(zip(self._back, self._front)):
            for x, (current, previous) in enumerate(zip(back_row, front_row)):
                if current != previous:
                    yield x, y, current

    def flush(self) -> int:
        """
        Write every changed cell and commit it to the front grid.

        The cursor is hidden before the first glyph and shown after the
        last. Nothing at all is written when the frame is unchanged.
        Returns the number of cells written.
        """
        changes = list(self.diff())
        if not changes:
            return 0

        parts = [self.encoder.hide_cursor()]
        for x, y, cell in changes:
            parts.append(self.encoder.encode_cell_at(x, y, cell))
            self._front[y][x] = cell
        parts.append(self.encoder.show_cursor())

        self.out.write("".join(parts))
        self.out.flush()
        return len(changes)
