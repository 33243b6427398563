"""One iteration of the render/input loop, as plain functions over a state record.

Nothing here is global: every function takes the ``LoopState`` it works on,
so several loops can run side by side (tests do exactly that).
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from termgrid.app.bindings import FOCUS_NEXT, FOCUS_PREVIOUS, QUIT, KeyBindings
from termgrid.app.focus import FocusController
from termgrid.core.rect import Rect
from termgrid.log import get_logger
from termgrid.render.screen import ScreenBuffer
from termgrid.term.input import KeyEvent
from termgrid.term.terminal import TerminalSize
from termgrid.widgets.base import Widget

log = get_logger(__name__)


class KeyPoller(Protocol):
    """Anything the loop can ask for a key event without blocking for long."""

    def poll(self, timeout: float = 0.0) -> Optional[KeyEvent]:
        ...


@dataclass
class LoopState:
    """Everything one loop instance mutates."""
    screen: ScreenBuffer
    root: Widget
    focus: FocusController
    bindings: KeyBindings = field(default_factory=KeyBindings)
    running: bool = True
    stop_signal: threading.Event = field(default_factory=threading.Event)
    frames: int = 0

    @classmethod
    def create(
        cls,
        screen: ScreenBuffer,
        root: Widget,
        bindings: KeyBindings | None = None,
        stop_signal: threading.Event | None = None,
    ) -> LoopState:
        return cls(
            screen=screen,
            root=root,
            focus=FocusController(root),
            bindings=bindings or KeyBindings(),
            stop_signal=stop_signal or threading.Event(),
        )

    @property
    def should_run(self) -> bool:
        return self.running and not self.stop_signal.is_set()

    def request_stop(self) -> None:
        self.running = False
        self.stop_signal.set()


class FrameClock:
    """
    Fixed-cadence frame pacing.

    Each frame is measured from its own start; the remainder of the
    interval is slept and an overrun frame simply does not sleep. No debt
    is carried into the next frame.
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._frame_start = clock()

    def begin(self) -> None:
        """Mark the start of a frame."""
        self._frame_start = self._clock()

    def remaining(self) -> float:
        return max(0.0, self.interval - (self._clock() - self._frame_start))

    def wait(self) -> float:
        """Sleep out the rest of the frame. Returns the time slept."""
        delay = self.remaining()
        if delay > 0:
            self._sleep(delay)
        return delay


def dispatch_key(state: LoopState, event: KeyEvent) -> bool:
    """
    Route one key event.

    Reserved bindings are handled first; anything else goes to the focused
    widget only. A key the widget does not consume is dropped, it is not
    offered to ancestors. Returns True if something handled the key.
    """
    action = state.bindings.match(event)
    if action == QUIT:
        log.info("quit_requested", raw=repr(event.raw))
        state.request_stop()
        return True
    if action == FOCUS_NEXT:
        state.focus.focus_next()
        return True
    if action == FOCUS_PREVIOUS:
        state.focus.focus_previous()
        return True

    target = state.focus.focused
    if target is None:
        return False
    consumed = target.on_key_press(event)
    if not consumed:
        log.debug("key_dropped", raw=repr(event.raw), widget=repr(target))
    return consumed


def check_resize(state: LoopState, size: TerminalSize) -> bool:
    """Reallocate the screen and re-bound the root if the terminal size changed."""
    screen = state.screen
    if size.cols == screen.width and size.rows == screen.height:
        return False
    log.info("terminal_resized", cols=size.cols, rows=size.rows)
    screen.resize(size.cols, size.rows)
    state.root.bounds = Rect(0, 0, size.cols, size.rows)
    return True


def render_frame(state: LoopState) -> int:
    """Clear the back grid, draw the tree, flush. Returns cells written."""
    state.screen.clear()
    state.root.render(state.screen)
    written = state.screen.flush()
    state.frames += 1
    return written


def step(
    state: LoopState,
    poller: KeyPoller,
    size_provider: Callable[[], TerminalSize],
    poll_timeout: float = 0.0,
) -> None:
    """
    One loop iteration: input, resize check, render.

    The size is sampled once, before rendering, so a resize that happens
    mid-render is picked up on the next iteration.
    """
    event = poller.poll(poll_timeout)
    if event is not None:
        dispatch_key(state, event)
        if not state.should_run:
            return

    check_resize(state, size_provider())
    render_frame(state)
