"""Status bar widget for displaying info and shortcuts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from termgrid.core.color import Color
from termgrid.core.rect import Rect
from termgrid.widgets.base import Widget

if TYPE_CHECKING:
    from termgrid.render.screen import ScreenBuffer


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: str
    label: str

    @property
    def display_len(self) -> int:
        return len(self.key) + len(self.label) + 3


class StatusBar(Widget):
    """Bottom status bar showing info text and keyboard shortcuts."""

    def __init__(
        self,
        bounds: Rect | None = None,
        fg: Color = Color.WHITE,
        bg: Color = Color.from_rgb(64, 64, 64),
        key_fg: Color = Color.BLACK,
        key_bg: Color = Color.from_rgb(192, 192, 192),
        label_fg: Color = Color.CYAN,
    ) -> None:
        super().__init__(bounds=bounds, fg=fg, bg=bg)
        self.key_fg = key_fg
        self.key_bg = key_bg
        self.label_fg = label_fg
        self._left_text: str = ""
        self._shortcuts: list[Shortcut] = []

    def set_left(self, text: str) -> None:
        """Set left-aligned text."""
        self._left_text = text

    def set_shortcuts(self, shortcuts: list[Shortcut]) -> None:
        """Set keyboard shortcuts to display."""
        self._shortcuts = list(shortcuts)

    def visible_shortcuts(self, width: int) -> list[Shortcut]:
        """Shortcuts that fit, keeping the rightmost ones and room for 20 columns of text."""
        shown: list[Shortcut] = []
        used = 0
        for sc in reversed(self._shortcuts):
            if used + sc.display_len + 20 < width:
                shown.insert(0, sc)
                used += sc.display_len
            else:
                break
        return shown

    def on_render(self, screen: ScreenBuffer) -> None:
        if self.width <= 0 or self.height <= 0:
            return
        row = Rect(self.x, self.y, self.width, 1)
        screen.fill_rect(row, ' ', self.fg, self.bg)

        shortcuts = self.visible_shortcuts(self.width)
        shortcuts_len = sum(sc.display_len for sc in shortcuts)

        available = self.width - shortcuts_len - 2
        if available > 1:
            left = f" {self._left_text}"
            if len(left) > available:
                left = left[:available - 1] + "…"
            screen.write_text(self.x, self.y, left, self.fg, self.bg)

        col = self.x + self.width - shortcuts_len
        for sc in shortcuts:
            key_text = f" {sc.key} "
            screen.write_text(col, self.y, key_text, self.key_fg, self.key_bg)
            col += len(key_text)
            screen.write_text(col, self.y, f"{sc.label} ", self.label_fg, self.bg)
            col += len(sc.label) + 1
