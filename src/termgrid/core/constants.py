"""Shared constants for terminal output and box drawing."""

from enum import Enum

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"


class BorderStyle(Enum):
    """Line style used when drawing a rectangle border."""
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"


# (horizontal, vertical, top-left, top-right, bottom-left, bottom-right)
BOX_GLYPHS: dict[BorderStyle, tuple[str, str, str, str, str, str]] = {
    BorderStyle.SINGLE: ("─", "│", "┌", "┐", "└", "┘"),
    BorderStyle.DOUBLE: ("═", "║", "╔", "╗", "╚", "╝"),
    BorderStyle.ROUNDED: ("─", "│", "╭", "╮", "╰", "╯"),
}
