"""Widgets for the ``termgrid demo`` screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termgrid.core.color import Color
from termgrid.core.constants import BorderStyle
from termgrid.core.rect import Rect
from termgrid.term.input import Key, KeyEvent
from termgrid.widgets.container import Container, LayoutMode
from termgrid.widgets.frame import Frame
from termgrid.widgets.label import Label
from termgrid.widgets.status_bar import Shortcut, StatusBar

if TYPE_CHECKING:
    from termgrid.render.screen import ScreenBuffer


class Counter(Label):
    """Focusable label that counts Enter/space presses."""

    focusable = True

    def __init__(self, name: str, width: int = 30) -> None:
        super().__init__(f"{name}: 0", bounds=Rect(0, 0, width, 1))
        self.name = name
        self.count = 0

    def on_render(self, screen: ScreenBuffer) -> None:
        marker = ">" if self.has_focus else " "
        self.text = f"{marker} {self.name}: {self.count}"
        self.bold = self.has_focus
        self.bg = Color.from_rgb(0, 0, 96) if self.has_focus else Color.TRANSPARENT
        super().on_render(screen)

    def on_key_press(self, event: KeyEvent) -> bool:
        if event.key == Key.ENTER or event.char == " ":
            self.count += 1
            return True
        if event.char == "-":
            self.count -= 1
            return True
        return False


class DemoScreen(Container):
    """Bordered panel of counters above a status bar."""

    def __init__(self, counters: int = 3) -> None:
        self.status = StatusBar()
        self.status.set_left("termgrid demo")
        self.status.set_shortcuts([
            Shortcut("Tab", "Next"),
            Shortcut("Enter", "Count"),
            Shortcut("Esc", "Quit"),
        ])
        self.panel = Frame(
            "termgrid",
            border_style=BorderStyle.ROUNDED,
            border_color=Color.CYAN,
            layout=LayoutMode.VERTICAL,
            padding=1,
            spacing=1,
            bg=Color.from_rgb(16, 16, 24),
        )
        self.panel.add(Label("Tab / Shift+Tab moves focus.", fg=Color.GRAY))
        self.counters = [self.panel.add(Counter(f"Counter {n + 1}")) for n in range(counters)]
        super().__init__(layout=LayoutMode.ABSOLUTE)
        self.add(self.panel)
        self.add(self.status)

    def layout_children(self) -> None:
        area = self.interior
        if area.is_empty:
            return
        self.panel.bounds = Rect(area.x, area.y, area.width, max(0, area.height - 1))
        self.status.bounds = Rect(area.x, area.bottom - 1, area.width, 1)
