"""Reserved key bindings intercepted before widget dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from termgrid.term.input import Key, KeyEvent, Modifiers

QUIT = "quit"
FOCUS_NEXT = "focus_next"
FOCUS_PREVIOUS = "focus_previous"


@dataclass(frozen=True)
class Binding:
    """One key combination: a named key or a character, plus modifiers."""
    key: Optional[Key] = None
    char: Optional[str] = None
    modifiers: Modifiers = Modifiers.NONE

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this binding exactly."""
        if event.modifiers != self.modifiers:
            return False
        if self.key is not None:
            return event.key == self.key
        return self.char is not None and event.char == self.char


@dataclass
class KeyBindings:
    """
    The application's reserved bindings.

    Checked in order quit, focus_previous, focus_next, so a more specific
    chord (Shift+Tab) is never shadowed.
    """
    quit: list[Binding] = field(default_factory=lambda: [
        Binding(key=Key.ESCAPE),
        Binding(char='c', modifiers=Modifiers.CTRL),
    ])
    focus_next: list[Binding] = field(default_factory=lambda: [
        Binding(key=Key.TAB),
    ])
    focus_previous: list[Binding] = field(default_factory=lambda: [
        Binding(key=Key.TAB, modifiers=Modifiers.SHIFT),
    ])

    def match(self, event: KeyEvent) -> Optional[str]:
        """Return the action bound to ``event``, or None for ordinary keys."""
        for action, bindings in (
            (QUIT, self.quit),
            (FOCUS_PREVIOUS, self.focus_previous),
            (FOCUS_NEXT, self.focus_next),
        ):
            if any(binding.matches(event) for binding in bindings):
                return action
        return None
