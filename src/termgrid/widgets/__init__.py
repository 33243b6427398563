"""Widget tree: the abstract widget, layout containers and a few reference widgets."""

from termgrid.widgets.base import Widget
from termgrid.widgets.container import Container, LayoutMode
from termgrid.widgets.frame import Frame
from termgrid.widgets.label import Label
from termgrid.widgets.status_bar import Shortcut, StatusBar

__all__ = [
    "Widget",
    "Container",
    "LayoutMode",
    "Frame",
    "Label",
    "Shortcut",
    "StatusBar",
]
