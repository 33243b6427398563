"""Screen buffering and terminal encoding."""

from termgrid.render.encoder import TerminalEncoder
from termgrid.render.screen import ScreenBuffer

__all__ = ["TerminalEncoder", "ScreenBuffer"]
