"""Frame - a container with a border and an optional title."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termgrid.core.color import Color
from termgrid.core.constants import BorderStyle
from termgrid.core.rect import Rect
from termgrid.widgets.container import Container, LayoutMode

if TYPE_CHECKING:
    from termgrid.render.screen import ScreenBuffer


class Frame(Container):
    """
    Bordered container.

    The border sits on the frame's outer edge; give the frame a padding of
    at least 1 so laid-out children stay inside it. The title is drawn in
    bold on the top edge, two columns in, and truncated to fit.
    """

    def __init__(
        self,
        title: str = "",
        border_style: BorderStyle = BorderStyle.SINGLE,
        border_color: Color | None = None,
        layout: LayoutMode = LayoutMode.ABSOLUTE,
        padding: int = 1,
        spacing: int = 0,
        bounds: Rect | None = None,
        fg: Color = Color.WHITE,
        bg: Color = Color.TRANSPARENT,
    ) -> None:
        super().__init__(layout=layout, padding=padding, spacing=spacing, bounds=bounds, fg=fg, bg=bg)
        self.title = title
        self.border_style = border_style
        self.border_color = border_color

    def on_render(self, screen: ScreenBuffer) -> None:
        if self.width < 2 or self.height < 2:
            return
        screen.fill_rect(self.bounds, ' ', self.fg, self.bg)
        screen.draw_border(self.bounds, self.border_color or self.fg, self.bg, self.border_style)

        if self.title and self.width > 4:
            title = self.title[:self.width - 4]
            screen.write_text(self.x + 2, self.y, f" {title} ", self.fg, self.bg, bold=True)
