"""
termgrid: cell-grid terminal UI toolkit

Draw widget trees into a double-buffered grid of styled cells and let the
event loop push only the changed cells to the terminal.

Quick Start:
    >>> from termgrid import Application, Frame, Label
    >>> panel = Frame("Hello", padding=1)
    >>> panel.add(Label("Press Esc to exit"))
    >>> Application().run(panel)

Features:
    - Truecolor cells with bold, italic and underline
    - Minimal redraws by diffing the back grid against what is on screen
    - Widget tree with z-order, visibility and absolute/stacked/fill layout
    - Keyboard focus with Tab / Shift+Tab cycling
    - Background input thread and a fixed-rate frame loop
"""

__version__ = "0.1.0"

# Core types
from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.constants import BorderStyle
from termgrid.core.errors import TermgridError, WidgetOwnershipError
from termgrid.core.rect import Rect

# Rendering
from termgrid.render.screen import ScreenBuffer

# Terminal I/O
from termgrid.term.input import Key, KeyEvent, Modifiers

# Widgets
from termgrid.widgets.base import Widget
from termgrid.widgets.container import Container, LayoutMode
from termgrid.widgets.frame import Frame
from termgrid.widgets.label import Label
from termgrid.widgets.status_bar import Shortcut, StatusBar

# Application
from termgrid.app.application import Application, AppState
from termgrid.config import TermgridConfig

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "BorderStyle",
    "Rect",
    "TermgridError",
    "WidgetOwnershipError",
    # Rendering
    "ScreenBuffer",
    # Input
    "Key",
    "KeyEvent",
    "Modifiers",
    # Widgets
    "Widget",
    "Container",
    "LayoutMode",
    "Frame",
    "Label",
    "Shortcut",
    "StatusBar",
    # Application
    "Application",
    "AppState",
    "TermgridConfig",
]
