"""Application - owns the screen, the widget tree and the event loop."""

from __future__ import annotations

import threading
from contextlib import ExitStack
from enum import Enum
from typing import Optional

from termgrid.app.bindings import KeyBindings
from termgrid.app.loop import FrameClock, LoopState, step
from termgrid.config import TermgridConfig
from termgrid.core.rect import Rect
from termgrid.log import configure_logging, get_logger
from termgrid.render.screen import ScreenBuffer
from termgrid.term.input import InputReader, KeySource
from termgrid.term.pump import InputPump
from termgrid.term.terminal import Terminal
from termgrid.widgets.base import Widget

log = get_logger(__name__)


class AppState(Enum):
    """Lifecycle of an application run."""
    NOT_STARTED = "not_started"
    INITIALIZING = "initializing"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class Application:
    """
    Runs a widget tree in the terminal.

    ``run`` takes over the terminal (alternate buffer, hidden cursor, raw
    input), then repeats at the configured frame rate: poll one key event
    from the input worker, check for a resize, redraw. ``stop`` (from any
    thread) or a quit key ends the loop. The terminal is restored on every
    exit path, including exceptions raised by widgets, which propagate
    once teardown has run.

    Example:
        app = Application()
        frame = Frame("Hello", padding=1)
        frame.add(Label("Press Esc to exit"))
        app.run(frame)
    """

    def __init__(
        self,
        config: TermgridConfig | None = None,
        input_source: KeySource | None = None,
        terminal: Terminal | None = None,
        bindings: KeyBindings | None = None,
    ) -> None:
        self.config = config or TermgridConfig.from_env()
        self.terminal = terminal or Terminal()
        self.bindings = bindings or KeyBindings()
        self.initial_focus: Optional[Widget] = None

        self._input_source = input_source
        self._app_state = AppState.NOT_STARTED
        self._loop: Optional[LoopState] = None
        self._pump: Optional[InputPump] = None
        self._stop_signal = threading.Event()
        self._invalidate_requested = False
        self._resources: Optional[ExitStack] = None

    # -- public state ----------------------------------------------------

    @property
    def state(self) -> AppState:
        return self._app_state

    @property
    def running(self) -> bool:
        return self._app_state in (AppState.INITIALIZING, AppState.RUNNING)

    @property
    def screen(self) -> Optional[ScreenBuffer]:
        return self._loop.screen if self._loop else None

    @property
    def loop_state(self) -> Optional[LoopState]:
        return self._loop

    @property
    def focused(self) -> Optional[Widget]:
        return self._loop.focus.focused if self._loop else None

    @property
    def frames_rendered(self) -> int:
        return self._loop.frames if self._loop else 0

    @property
    def target_fps(self) -> int:
        return self.config.target_fps

    @target_fps.setter
    def target_fps(self, value: int) -> None:
        self.config.target_fps = max(1, value)

    # -- control -----------------------------------------------------------

    def run(self, root: Widget) -> None:
        """Run the loop until stopped. Blocks the calling thread."""
        if self._app_state in (AppState.INITIALIZING, AppState.RUNNING, AppState.STOPPING):
            raise RuntimeError("Application is already running")

        try:
            self._initialize(root)
            self._run_loop()
        finally:
            self._shutdown()

    def stop(self) -> None:
        """
        Ask the loop to finish its current frame and exit. Thread-safe.

        A stop requested before ``run`` makes the next run tear down
        without rendering a frame.
        """
        self._stop_signal.set()
        if self._loop is not None:
            self._loop.running = False

    def set_focus(self, widget: Widget) -> None:
        if self._loop is None:
            raise RuntimeError("Application is not running")
        self._loop.focus.set_focus(widget)

    def invalidate(self) -> None:
        """Redraw every cell on the next frame (after theme or color changes)."""
        self._invalidate_requested = True

    # -- lifecycle ---------------------------------------------------------

    def _initialize(self, root: Widget) -> None:
        self._app_state = AppState.INITIALIZING
        if self.config.log_file is not None:
            configure_logging(level=self.config.log_level, log_file=self.config.log_file)

        self._resources = ExitStack()
        self.terminal.start(self.config.alternate_screen)
        self._resources.enter_context(self.terminal.raw_mode())

        size = self.terminal.size()
        screen = ScreenBuffer(size.cols, size.rows, out=self.terminal.out, encoder=self.terminal.encoder)
        root.bounds = Rect(0, 0, size.cols, size.rows)

        self._loop = LoopState.create(screen, root, self.bindings, self._stop_signal)
        self._loop.focus.initialize(self.initial_focus)

        source = self._input_source if self._input_source is not None else InputReader()
        self._pump = InputPump(source, self._stop_signal)
        self._pump.start()
        log.info("application_started", cols=size.cols, rows=size.rows, fps=self.config.target_fps)

    def _run_loop(self) -> None:
        assert self._loop is not None and self._pump is not None
        self._app_state = AppState.RUNNING
        clock = FrameClock(self.config.frame_interval)
        loop = self._loop

        while loop.should_run:
            clock.begin()
            if self._invalidate_requested:
                self._invalidate_requested = False
                loop.screen.invalidate()
            step(loop, self._pump, self.terminal.size, self.config.input_poll_timeout)
            clock.wait()

    def _shutdown(self) -> None:
        """Restore the terminal. Runs on every exit path and never raises."""
        self._app_state = AppState.STOPPING
        self._stop_signal.set()
        if self._loop is not None:
            self._loop.running = False
            try:
                self._loop.focus.set_focus(None)
            except Exception as exc:
                log.warning("focus_release_failed", error=str(exc))

        if self._pump is not None:
            try:
                self._pump.stop()
            except Exception as exc:
                log.warning("input_worker_stop_failed", error=str(exc))
            self._pump = None

        if self._resources is not None:
            try:
                self._resources.close()
            except Exception as exc:
                log.warning("raw_mode_restore_failed", error=str(exc))
            self._resources = None

        self.terminal.restore(self.config.alternate_screen)
        self._stop_signal.clear()
        self._app_state = AppState.STOPPED
        log.info("application_stopped", frames=self.frames_rendered)
