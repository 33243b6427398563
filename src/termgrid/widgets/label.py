"""Single-line text label."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termgrid.core.color import Color
from termgrid.core.rect import Rect
from termgrid.widgets.base import Widget

if TYPE_CHECKING:
    from termgrid.render.screen import ScreenBuffer


class Label(Widget):
    """Text drawn on the widget's first row, clipped to its width."""

    def __init__(
        self,
        text: str = "",
        bounds: Rect | None = None,
        fg: Color = Color.WHITE,
        bg: Color = Color.TRANSPARENT,
        bold: bool = False,
        italic: bool = False,
        underline: bool = False,
    ) -> None:
        super().__init__(bounds=bounds or Rect(0, 0, len(text), 1), fg=fg, bg=bg)
        self.text = text
        self.bold = bold
        self.italic = italic
        self.underline = underline

    def on_render(self, screen: ScreenBuffer) -> None:
        if self.width <= 0 or self.height <= 0:
            return
        screen.fill_rect(self.bounds, ' ', self.fg, self.bg)
        screen.write_text(
            self.x, self.y, self.text[:self.width], self.fg, self.bg,
            bold=self.bold, italic=self.italic, underline=self.underline,
        )
