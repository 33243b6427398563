"""Translate cells into terminal control sequences."""

from termgrid.core.cell import Cell
from termgrid.core.constants import CSI, RESET


class TerminalEncoder:
    """
    Stateless encoder from cells to ANSI escape sequences.

    Every glyph is written as ``<move><SGR><glyph><reset>``: the style
    prefix (bold/italic/underline) comes before the true-color foreground
    selector, the background selector is omitted for transparent
    backgrounds, and the trailing reset keeps untouched neighbours
    unaffected.
    """

    @staticmethod
    def move_cursor(row: int, col: int) -> str:
        """Move cursor to position (1-indexed)."""
        return f"{CSI}{row};{col}H"

    @staticmethod
    def style(cell: Cell) -> str:
        """SGR sequence selecting the cell's style and colors."""
        params: list[str] = []
        if cell.bold:
            params.append('1')
        if cell.italic:
            params.append('3')
        if cell.underline:
            params.append('4')
        params.append(cell.fg.to_sgr_fg())
        if not cell.bg.is_transparent:
            params.append(cell.bg.to_sgr_bg())
        return f"{CSI}{';'.join(params)}m"

    @classmethod
    def encode_cell(cls, cell: Cell) -> str:
        """Styled glyph followed by a reset."""
        return f"{cls.style(cell)}{cell.char}{RESET}"

    @classmethod
    def encode_cell_at(cls, x: int, y: int, cell: Cell) -> str:
        """Cursor move to the 0-indexed grid position plus the encoded cell."""
        return cls.move_cursor(y + 1, x + 1) + cls.encode_cell(cell)

    @staticmethod
    def clear_screen() -> str:
        return f"{CSI}2J"

    @staticmethod
    def hide_cursor() -> str:
        return f"{CSI}?25l"

    @staticmethod
    def show_cursor() -> str:
        return f"{CSI}?25h"

    @staticmethod
    def enter_alternate_buffer() -> str:
        return f"{CSI}?1049h"

    @staticmethod
    def exit_alternate_buffer() -> str:
        return f"{CSI}?1049l"

    @staticmethod
    def reset() -> str:
        return RESET
