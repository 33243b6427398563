"""Shared fixtures: captured output, a fixed-size terminal and scripted input."""

from __future__ import annotations

import io
import threading
from collections import deque
from typing import Iterable, Optional

import pytest

from termgrid.render.screen import ScreenBuffer
from termgrid.term.input import KeyEvent, parse_keys
from termgrid.term.terminal import Terminal, TerminalSize


class RecordingStream(io.StringIO):
    """Text stream that also remembers each write and flush."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []
        self.flushes = 0

    def write(self, s: str) -> int:
        self.writes.append(s)
        return super().write(s)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()

    def reset(self) -> None:
        """Forget everything recorded so far."""
        self.seek(0)
        self.truncate()
        self.writes.clear()
        self.flushes = 0


class ScriptedKeySource:
    """
    Key source that replays a fixed script.

    Once the script is exhausted it behaves like an idle keyboard: each
    read waits briefly on the cancel signal and returns None.
    """

    def __init__(self, events: Iterable[KeyEvent] = ()) -> None:
        self._events: deque[KeyEvent] = deque(events)
        self._lock = threading.Lock()

    @classmethod
    def from_keys(cls, data: str) -> ScriptedKeySource:
        return cls(parse_keys(data))

    def push(self, event: KeyEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def remaining(self) -> int:
        with self._lock:
            return len(self._events)

    def is_ready(self) -> bool:
        with self._lock:
            return bool(self._events)

    def read_key(self, cancel: threading.Event) -> Optional[KeyEvent]:
        with self._lock:
            if self._events:
                return self._events.popleft()
        cancel.wait(0.005)
        return None


class ScriptedPoller:
    """Synchronous stand-in for InputPump: hands out one scripted event per poll."""

    def __init__(self, events: Iterable[Optional[KeyEvent]] = ()) -> None:
        self._events: deque[Optional[KeyEvent]] = deque(events)
        self.polls = 0

    def poll(self, timeout: float = 0.0) -> Optional[KeyEvent]:
        self.polls += 1
        return self._events.popleft() if self._events else None


class FakeClock:
    """Monotonic clock that only advances when told to (or when slept on)."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def output() -> RecordingStream:
    """Captured terminal output."""
    return RecordingStream()


@pytest.fixture
def screen(output: RecordingStream) -> ScreenBuffer:
    """A small 10x4 screen writing into the captured stream."""
    return ScreenBuffer(10, 4, out=output)


@pytest.fixture
def terminal_size() -> list[TerminalSize]:
    """Mutable holder for the size the fake terminal reports."""
    return [TerminalSize(rows=12, cols=40)]


@pytest.fixture
def terminal(output: RecordingStream, terminal_size: list[TerminalSize]) -> Terminal:
    """Terminal writing to the captured stream with a settable size."""
    return Terminal(out=output, size_provider=lambda: terminal_size[0])


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
