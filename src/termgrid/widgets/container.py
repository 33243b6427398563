"""Container widget that positions its direct children by a layout policy."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from termgrid.core.color import Color
from termgrid.core.rect import Rect
from termgrid.widgets.base import Widget

if TYPE_CHECKING:
    from termgrid.render.screen import ScreenBuffer


class LayoutMode(Enum):
    """How a container places its children."""
    ABSOLUTE = "absolute"      # Children keep whatever bounds they were given
    VERTICAL = "vertical"      # Stacked top-to-bottom, full interior width
    HORIZONTAL = "horizontal"  # Stacked left-to-right, full interior height
    FILL = "fill"              # Every child covers the whole interior


class Container(Widget):
    """
    A widget that lays out its children.

    Layout runs whenever the container's bounds change, a child is added
    or removed, or the mode, padding or spacing change. Hidden children
    take no space and keep their old geometry.

    Stacks stop placing children once the cursor reaches the interior's
    far edge; the rest keep their last geometry (off-screen, not hidden).
    """

    def __init__(
        self,
        layout: LayoutMode = LayoutMode.ABSOLUTE,
        padding: int = 0,
        spacing: int = 0,
        bounds: Rect | None = None,
        fg: Color = Color.WHITE,
        bg: Color = Color.TRANSPARENT,
    ) -> None:
        super().__init__(bounds=bounds, fg=fg, bg=bg)
        self._layout = layout
        self._padding = max(0, padding)
        self._spacing = max(0, spacing)

    @property
    def layout(self) -> LayoutMode:
        return self._layout

    @layout.setter
    def layout(self, value: LayoutMode) -> None:
        if value != self._layout:
            self._layout = value
            self.layout_children()

    @property
    def padding(self) -> int:
        return self._padding

    @padding.setter
    def padding(self, value: int) -> None:
        value = max(0, value)
        if value != self._padding:
            self._padding = value
            self.layout_children()

    @property
    def spacing(self) -> int:
        return self._spacing

    @spacing.setter
    def spacing(self, value: int) -> None:
        value = max(0, value)
        if value != self._spacing:
            self._spacing = value
            self.layout_children()

    @property
    def interior(self) -> Rect:
        """Bounds minus padding on every side."""
        return self.bounds.inset(self._padding)

    def on_render(self, screen: ScreenBuffer) -> None:
        # Containers draw nothing themselves; children are drawn by render()
        pass

    def on_bounds_changed(self) -> None:
        self.layout_children()

    def on_child_added(self, child: Widget) -> None:
        self.layout_children()

    def on_child_removed(self, child: Widget) -> None:
        self.layout_children()

    def layout_children(self) -> None:
        """Reposition children according to the current layout mode."""
        if not self._children:
            return
        if self._layout is LayoutMode.VERTICAL:
            self._layout_vertical()
        elif self._layout is LayoutMode.HORIZONTAL:
            self._layout_horizontal()
        elif self._layout is LayoutMode.FILL:
            self._layout_fill()

    def _layout_vertical(self) -> None:
        area = self.interior
        cursor = area.y
        for child in self._children:
            if not child.visible:
                continue
            child.bounds = Rect(area.x, cursor, area.width, child.height)
            cursor += child.height + self._spacing
            if cursor >= area.bottom:
                break

    def _layout_horizontal(self) -> None:
        area = self.interior
        cursor = area.x
        for child in self._children:
            if not child.visible:
                continue
            child.bounds = Rect(cursor, area.y, child.width, area.height)
            cursor += child.width + self._spacing
            if cursor >= area.right:
                break

    def _layout_fill(self) -> None:
        area = self.interior
        for child in self._children:
            if child.visible:
                child.bounds = area
