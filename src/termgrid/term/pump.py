"""Background worker that turns a blocking key source into a pollable queue."""

from __future__ import annotations

import queue
import threading
from typing import Optional

from termgrid.log import get_logger
from termgrid.term.input import KeyEvent, KeySource

log = get_logger(__name__)


class InputPump:
    """
    Services a ``KeySource`` on a daemon thread.

    The worker only reads: each completed ``KeyEvent`` is put on a queue
    that the loop thread drains with ``poll``. Widgets, focus and screen
    state are never touched from the worker. Stopping is cooperative: the
    shared stop signal cancels the in-flight read and the thread unwinds.
    A read that raises is logged and counted as "no event"; it never ends
    the worker.
    """

    def __init__(
        self,
        source: KeySource,
        stop_signal: threading.Event | None = None,
    ) -> None:
        self.source = source
        self.stop_signal = stop_signal or threading.Event()
        self._events: queue.Queue[KeyEvent] = queue.Queue()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._thread = threading.Thread(
            target=self._run, name="termgrid-input", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float = 0.5) -> None:
        """Signal the worker and wait briefly for it to exit."""
        self.stop_signal.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                log.warning("input_worker_still_running", timeout=timeout)
            self._thread = None

    def poll(self, timeout: float = 0.0) -> Optional[KeyEvent]:
        """Return the next key event, waiting at most ``timeout`` seconds."""
        try:
            if timeout <= 0:
                return self._events.get_nowait()
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def _run(self) -> None:
        while not self.stop_signal.is_set():
            try:
                event = self.source.read_key(self.stop_signal)
            except Exception as exc:
                # A failed read is just "no event this tick"; the worker keeps going
                log.warning("input_read_failed", error=str(exc))
                self.stop_signal.wait(0.05)
                continue
            if event is not None:
                self._events.put(event)
