"""Core value types: cells, colors, rectangles."""

from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.constants import BorderStyle
from termgrid.core.errors import TermgridError, WidgetOwnershipError
from termgrid.core.rect import Rect

__all__ = [
    "Cell",
    "Color",
    "BorderStyle",
    "Rect",
    "TermgridError",
    "WidgetOwnershipError",
]
