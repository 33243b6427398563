"""Tests for focus computation and transitions."""

from __future__ import annotations

from termgrid.app.focus import FocusController, compute_focusable
from termgrid.core.rect import Rect
from termgrid.render.screen import ScreenBuffer
from termgrid.widgets.base import Widget
from termgrid.widgets.container import Container


class Focusable(Widget):
    """Focusable widget that logs focus hooks into a shared journal."""

    focusable = True

    def __init__(self, name: str, journal: list[str] | None = None) -> None:
        super().__init__(bounds=Rect(0, 0, 1, 1))
        self.name = name
        self.journal = journal if journal is not None else []

    def __repr__(self) -> str:
        return f"<Focusable {self.name}>"

    def on_render(self, screen: ScreenBuffer) -> None:
        pass

    def on_focus(self) -> None:
        self.journal.append(f"focus:{self.name}")

    def on_blur(self) -> None:
        self.journal.append(f"blur:{self.name}")


def build_tree(journal: list[str]) -> tuple[Container, list[Focusable]]:
    root = Container()
    widgets = [root.add(Focusable(name, journal)) for name in "abc"]
    return root, widgets


class TestComputeFocusable:
    """Tests for the focusable sequence."""

    def test_prunes_invisible_and_disabled_subtrees(self) -> None:
        root = Container()
        a = root.add(Focusable("A"))
        b = root.add(Focusable("B"))
        b.visible = False
        c = root.add(Container())
        c.enabled = False
        c.add(Focusable("D"))
        assert compute_focusable(root) == [a]

    def test_pre_order(self) -> None:
        root = Container()
        outer = root.add(Container())
        first = outer.add(Focusable("1"))
        second = root.add(Focusable("2"))
        nested = outer.add(Focusable("3"))
        assert compute_focusable(root) == [first, nested, second]

    def test_focusable_parent_before_children(self) -> None:
        parent = Focusable("p")
        child = parent.add(Focusable("c"))
        assert compute_focusable(parent) == [parent, child]

    def test_non_focusable_root_excluded(self) -> None:
        assert compute_focusable(Container()) == []


class TestFocusController:
    """Tests for focus transitions and cycling."""

    def test_transition_hook_order(self) -> None:
        journal: list[str] = []
        root, (a, b, _) = build_tree(journal)
        focus = FocusController(root)
        focus.set_focus(a)
        journal.clear()
        assert focus.set_focus(b) is True
        assert journal == ["blur:a", "focus:b"]
        assert b.has_focus is True
        assert a.has_focus is False

    def test_same_target_fires_nothing(self) -> None:
        journal: list[str] = []
        root, (a, _, _) = build_tree(journal)
        focus = FocusController(root)
        focus.set_focus(a)
        journal.clear()
        assert focus.set_focus(a) is False
        assert journal == []

    def test_initialize_prefers_requested_widget(self) -> None:
        journal: list[str] = []
        root, (_, b, _) = build_tree(journal)
        focus = FocusController(root)
        assert focus.initialize(b) is b
        assert journal == ["focus:b"]

    def test_initialize_ignores_unfocusable_preference(self) -> None:
        root, (a, b, _) = build_tree([])
        b.enabled = False
        focus = FocusController(root)
        assert focus.initialize(b) is a

    def test_initialize_falls_back_to_root(self) -> None:
        root = Container()
        focus = FocusController(root)
        assert focus.initialize() is root
        assert focus.focused is root
        # A non-focusable widget never reports focus
        assert root.has_focus is False

    def test_cycle_forward_wraps(self) -> None:
        root, (a, b, c) = build_tree([])
        focus = FocusController(root)
        focus.initialize()
        assert [focus.focus_next() for _ in range(3)] == [b, c, a]

    def test_cycle_backward_wraps(self) -> None:
        root, (a, b, c) = build_tree([])
        focus = FocusController(root)
        focus.initialize()
        assert [focus.focus_previous() for _ in range(3)] == [c, b, a]

    def test_cycle_uses_fresh_sequence(self) -> None:
        root, (a, b, c) = build_tree([])
        focus = FocusController(root)
        focus.initialize()
        b.visible = False
        assert focus.focus_next() is c

    def test_holder_leaving_sequence_restarts_at_first(self) -> None:
        journal: list[str] = []
        root, (a, b, c) = build_tree(journal)
        focus = FocusController(root)
        focus.initialize(c)
        root.remove(c)
        journal.clear()
        assert focus.focus_next() is a
        assert journal == ["blur:c", "focus:a"]

    def test_empty_sequence_focuses_root(self) -> None:
        root, widgets = build_tree([])
        focus = FocusController(root)
        focus.initialize()
        for widget in widgets:
            widget.enabled = False
        assert focus.focus_next() is root
        assert focus.sequence == []
