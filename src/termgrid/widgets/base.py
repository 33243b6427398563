"""Base widget: bounds, ownership tree, z-order and lifecycle hooks."""

from __future__ import annotations

import itertools
import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional

from termgrid.core.color import Color
from termgrid.core.errors import WidgetOwnershipError
from termgrid.core.rect import Rect
from termgrid.term.input import KeyEvent

if TYPE_CHECKING:
    from termgrid.render.screen import ScreenBuffer

# Insertion sequence shared by all widgets; breaks z-order ties.
_insertion_counter = itertools.count()


class Widget(ABC):
    """
    Abstract composition unit.

    A widget owns its children (an ordered list, kept sorted by z-order
    with ties in insertion order) and holds only a weak reference to its
    parent, so the tree has no strong cycles. Bounds are absolute screen
    coordinates; a child may lie outside its parent and is not clipped.

    Subclasses implement ``on_render`` to draw their own cells and may
    override the ``on_*`` hooks to react to structural changes, focus
    transitions and key presses.
    """

    #: Whether the widget can receive keyboard focus.
    focusable: bool = False

    def __init__(
        self,
        bounds: Rect | None = None,
        fg: Color = Color.WHITE,
        bg: Color = Color.TRANSPARENT,
    ) -> None:
        self._bounds = bounds or Rect()
        self._visible = True
        self._enabled = True
        self._has_focus = False
        self._z_index = 0
        self._insertion = 0
        self._parent_ref: Optional[weakref.ReferenceType[Widget]] = None
        self._children: list[Widget] = []
        self.fg = fg
        self.bg = bg

    def __repr__(self) -> str:
        b = self._bounds
        return f"<{type(self).__name__} ({b.x},{b.y},{b.width},{b.height})>"

    # -- geometry -------------------------------------------------------

    @property
    def bounds(self) -> Rect:
        return self._bounds

    @bounds.setter
    def bounds(self, value: Rect) -> None:
        if value != self._bounds:
            self._bounds = value
            self.on_bounds_changed()

    @property
    def x(self) -> int:
        return self._bounds.x

    @x.setter
    def x(self, value: int) -> None:
        self.bounds = self._bounds.moved(value, self._bounds.y)

    @property
    def y(self) -> int:
        return self._bounds.y

    @y.setter
    def y(self, value: int) -> None:
        self.bounds = self._bounds.moved(self._bounds.x, value)

    @property
    def width(self) -> int:
        return self._bounds.width

    @width.setter
    def width(self, value: int) -> None:
        self.bounds = self._bounds.resized(value, self._bounds.height)

    @property
    def height(self) -> int:
        return self._bounds.height

    @height.setter
    def height(self, value: int) -> None:
        self.bounds = self._bounds.resized(self._bounds.width, value)

    # -- flags ------------------------------------------------------------

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        if value != self._visible:
            self._visible = value
            self.on_visible_changed()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        if value != self._enabled:
            self._enabled = value
            self.on_enabled_changed()

    @property
    def has_focus(self) -> bool:
        """True while this widget holds input focus (focusable widgets only)."""
        return self.focusable and self._has_focus

    @property
    def z_index(self) -> int:
        """Paint order among siblings; higher paints later (on top)."""
        return self._z_index

    @z_index.setter
    def z_index(self, value: int) -> None:
        if value != self._z_index:
            self._z_index = value
            parent = self.parent
            if parent is not None:
                parent._sort_children()

    # -- tree -------------------------------------------------------------

    @property
    def parent(self) -> Optional[Widget]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> tuple[Widget, ...]:
        """Children in paint order."""
        return tuple(self._children)

    @property
    def root(self) -> Widget:
        node = self
        while (parent := node.parent) is not None:
            node = parent
        return node

    def add(self, child: Widget) -> Widget:
        """
        Attach ``child`` as the last child (within its z-order).

        Raises WidgetOwnershipError if the child already has a parent or if
        attaching it would create a cycle. Returns the child.
        """
        if child.parent is not None:
            raise WidgetOwnershipError(f"{child!r} already has a parent")
        node: Optional[Widget] = self
        while node is not None:
            if node is child:
                raise WidgetOwnershipError(f"Cannot add {child!r} to itself or its descendant")
            node = node.parent

        child._parent_ref = weakref.ref(self)
        child._insertion = next(_insertion_counter)
        self._children.append(child)
        self._sort_children()
        self.on_child_added(child)
        return child

    def remove(self, child: Widget) -> bool:
        """Detach ``child``. Returns False if it is not a child of this widget."""
        for i, existing in enumerate(self._children):
            if existing is child:
                del self._children[i]
                child._parent_ref = None
                self.on_child_removed(child)
                return True
        return False

    def clear(self) -> None:
        """Remove all children."""
        for child in list(self._children):
            self.remove(child)

    def walk(self) -> Iterator[Widget]:
        """Pre-order traversal of this subtree in paint order."""
        yield self
        for child in self._children:
            yield from child.walk()

    def _sort_children(self) -> None:
        self._children.sort(key=lambda w: (w._z_index, w._insertion))

    # -- rendering and input -------------------------------------------

    def render(self, screen: ScreenBuffer) -> None:
        """Draw this widget, then its children in z-order. Hidden subtrees draw nothing."""
        if not self._visible:
            return
        self.on_render(screen)
        for child in self._children:
            child.render(screen)

    @abstractmethod
    def on_render(self, screen: ScreenBuffer) -> None:
        """Draw this widget's own cells (not its children) into the back grid."""

    def on_key_press(self, event: KeyEvent) -> bool:
        """React to a key while focused. Returns True if the key was consumed."""
        return False

    def on_mouse_click(self, x: int, y: int) -> bool:
        """React to a click at screen position ``(x, y)``. Returns True if consumed."""
        return False

    # -- focus (driven by FocusController) -------------------------------

    def _gain_focus(self) -> None:
        self._has_focus = True
        self.on_focus()

    def _lose_focus(self) -> None:
        self._has_focus = False
        self.on_blur()

    def on_focus(self) -> None:
        pass

    def on_blur(self) -> None:
        pass

    # -- structural hooks ------------------------------------------------

    def on_bounds_changed(self) -> None:
        pass

    def on_visible_changed(self) -> None:
        pass

    def on_enabled_changed(self) -> None:
        pass

    def on_child_added(self, child: Widget) -> None:
        pass

    def on_child_removed(self, child: Widget) -> None:
        pass
