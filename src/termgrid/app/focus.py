"""Focus tracking over the widget tree."""

from __future__ import annotations

from typing import Optional

from termgrid.log import get_logger
from termgrid.widgets.base import Widget

log = get_logger(__name__)


def compute_focusable(root: Widget) -> list[Widget]:
    """
    Depth-first pre-order list of widgets that can take focus.

    A widget qualifies when it is visible, enabled and focusable. The walk
    does not descend into invisible or disabled widgets, so a hidden or
    disabled container hides its whole subtree from focus.
    """
    found: list[Widget] = []

    def visit(widget: Widget) -> None:
        if not widget.visible or not widget.enabled:
            return
        if widget.focusable:
            found.append(widget)
        for child in widget.children:
            visit(child)

    visit(root)
    return found


class FocusController:
    """
    Tracks which widget holds input focus.

    The focusable sequence is recomputed from the tree on demand; it is
    never cached across tree mutations except as the "most recent"
    sequence used for cycling. Every transition fires exactly one
    ``on_blur`` on the old holder followed by one ``on_focus`` on the new.
    """

    def __init__(self, root: Widget) -> None:
        self.root = root
        self._focused: Optional[Widget] = None
        self._sequence: list[Widget] = []

    @property
    def focused(self) -> Optional[Widget]:
        return self._focused

    @property
    def sequence(self) -> list[Widget]:
        """The most recently computed focusable sequence."""
        return list(self._sequence)

    def refresh(self) -> list[Widget]:
        """Recompute the focusable sequence from the tree."""
        self._sequence = compute_focusable(self.root)
        return list(self._sequence)

    def initialize(self, preferred: Optional[Widget] = None) -> Widget:
        """
        Pick and focus the initial widget.

        ``preferred`` wins if it is currently focusable; otherwise the first
        focusable widget, or the root when nothing is focusable.
        """
        sequence = self.refresh()
        if preferred is not None and preferred in sequence:
            target = preferred
        elif sequence:
            target = sequence[0]
        else:
            target = self.root
        self.set_focus(target)
        return target

    def set_focus(self, widget: Optional[Widget]) -> bool:
        """Move focus to ``widget``. Returns False if it already had focus."""
        if widget is self._focused:
            return False
        previous = self._focused
        self._focused = widget
        if previous is not None:
            previous._lose_focus()
        if widget is not None:
            widget._gain_focus()
        log.debug("focus_changed", previous=repr(previous), current=repr(widget))
        return True

    def focus_next(self) -> Optional[Widget]:
        return self._cycle(1)

    def focus_previous(self) -> Optional[Widget]:
        return self._cycle(-1)

    def _cycle(self, step: int) -> Optional[Widget]:
        sequence = self.refresh()
        if not sequence:
            self.set_focus(self.root)
            return self._focused

        try:
            index = sequence.index(self._focused)
        except ValueError:
            # Focus holder left the sequence (hidden, disabled, removed)
            self.set_focus(sequence[0])
            return self._focused

        self.set_focus(sequence[(index + step) % len(sequence)])
        return self._focused
