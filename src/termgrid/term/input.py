"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import os
import select
import sys
import threading
import time
from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Optional, Protocol, runtime_checkable

from termgrid.log import get_logger

log = get_logger(__name__)


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F10 = auto()
    F12 = auto()


class Modifiers(Flag):
    """Modifier keys held during a key press."""
    NONE = 0
    SHIFT = auto()
    ALT = auto()
    CTRL = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable (or the letter of a Ctrl chord)
    raw: str = ""  # Raw input that produced the event
    modifiers: Modifiers = Modifiers.NONE

    @property
    def is_char(self) -> bool:
        """Check if this is a plain printable character."""
        return self.char is not None and self.key is None and self.modifiers == Modifiers.NONE

    @property
    def ctrl(self) -> bool:
        return bool(self.modifiers & Modifiers.CTRL)

    @property
    def shift(self) -> bool:
        return bool(self.modifiers & Modifiers.SHIFT)

    @property
    def alt(self) -> bool:
        return bool(self.modifiers & Modifiers.ALT)


@runtime_checkable
class KeySource(Protocol):
    """What the application needs from an input device."""

    def is_ready(self) -> bool:
        """Non-blocking check for a pending key event."""
        ...

    def read_key(self, cancel: threading.Event) -> Optional[KeyEvent]:
        """Wait for the next key event; return None once ``cancel`` is set."""
        ...


def parse_keys(data: str) -> list[KeyEvent]:
    """Parse a complete chunk of terminal input into key events."""
    reader = InputReader(fd=-1)
    reader.feed(data)
    events: list[KeyEvent] = []
    while reader.pending:
        event = reader._process_buffer()
        if event is not None:
            events.append(event)
    return events


class InputReader:
    """
    Non-blocking keyboard input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, tuple[Key, Modifiers]] = {
        # Arrow keys (CSI)
        '[A': (Key.UP, Modifiers.NONE),
        '[B': (Key.DOWN, Modifiers.NONE),
        '[C': (Key.RIGHT, Modifiers.NONE),
        '[D': (Key.LEFT, Modifiers.NONE),
        # Arrow keys (SS3 - application mode)
        'OA': (Key.UP, Modifiers.NONE),
        'OB': (Key.DOWN, Modifiers.NONE),
        'OC': (Key.RIGHT, Modifiers.NONE),
        'OD': (Key.LEFT, Modifiers.NONE),
        # Navigation
        '[H': (Key.HOME, Modifiers.NONE),
        '[F': (Key.END, Modifiers.NONE),
        '[1~': (Key.HOME, Modifiers.NONE),
        '[4~': (Key.END, Modifiers.NONE),
        '[5~': (Key.PAGE_UP, Modifiers.NONE),
        '[6~': (Key.PAGE_DOWN, Modifiers.NONE),
        '[2~': (Key.INSERT, Modifiers.NONE),
        '[3~': (Key.DELETE, Modifiers.NONE),
        '[Z': (Key.TAB, Modifiers.SHIFT),
        # Function keys
        'OP': (Key.F1, Modifiers.NONE),
        'OQ': (Key.F2, Modifiers.NONE),
        'OR': (Key.F3, Modifiers.NONE),
        'OS': (Key.F4, Modifiers.NONE),
        '[15~': (Key.F5, Modifiers.NONE),
        '[21~': (Key.F10, Modifiers.NONE),
        '[24~': (Key.F12, Modifiers.NONE),
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    def __init__(self, fd: int | None = None) -> None:
        self._buffer = ""
        self._closed = False
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, data: str) -> None:
        """Queue already-read input for parsing."""
        self._buffer += data

    @property
    def pending(self) -> bool:
        """True while parsed-but-undelivered input is buffered."""
        return bool(self._buffer)

    @property
    def closed(self) -> bool:
        """True once the input reached end-of-file."""
        return self._closed

    def is_ready(self) -> bool:
        """Check for buffered or pending input without blocking."""
        return bool(self._buffer) or (not self._closed and self._has_input(0))

    def read_key(self, cancel: threading.Event, interval: float = 0.01) -> Optional[KeyEvent]:
        """
        Read the next key event, giving up once ``cancel`` is set.

        Polls in short slices so a stop request is noticed within
        ``interval`` seconds. Once the input is closed it just waits for
        ``cancel``.
        """
        while not cancel.is_set():
            event = self.read(timeout=interval)
            if event is not None:
                return event
            if self._closed:
                cancel.wait()
        return None

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if self._closed or not self._has_input(timeout):
            return None

        # Read all available input using os.read to bypass Python buffering
        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        self._read_chunk()

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _read_chunk(self) -> None:
        """Append one os.read worth of input; an empty read means end-of-file."""
        try:
            data = os.read(self._fd, 1024)
        except (OSError, BlockingIOError):
            return
        if not data:
            # select keeps reporting a closed fd as readable
            self._closed = True
            log.debug("input_closed", fd=self._fd)
            return
        self._buffer += data.decode('utf-8', errors='replace')

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1  # 100ms total wait

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                self._read_chunk()
                if self._closed:
                    return

                # Check if sequence looks complete
                if len(self._buffer) > 1:
                    rest = self._buffer[1:]
                    if rest and (rest[-1].isalpha() or rest[-1] == '~'):
                        return
                    if rest in self.SEQUENCES:
                        return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        ch = self._buffer[0]

        # Simple keys
        if ch in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[ch], raw=ch)

        # Escape sequence
        if ch == '\x1b':
            return self._parse_escape_sequence()

        # Ctrl+letter chords arrive as 0x01-0x1a
        if '\x01' <= ch <= '\x1a':
            self._buffer = self._buffer[1:]
            letter = chr(ord(ch) + ord('a') - 1)
            return KeyEvent(char=letter, raw=ch, modifiers=Modifiers.CTRL)

        # Printable character
        if ch.isprintable():
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        if len(self._buffer) == 1:
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        rest = self._buffer[1:]

        # Alt+char: ESC followed by a printable that does not open a sequence
        if rest[0] not in '[O' and rest[0] != '\x1b' and rest[0].isprintable():
            self._buffer = rest[1:]
            return KeyEvent(char=rest[0], raw='\x1b' + rest[0], modifiers=Modifiers.ALT)

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if i > 0 and (ch.isalpha() or ch == '~'):
                # End of this sequence (the introducer itself may be a letter)
                end_idx = i + 1
                break
            end_idx = i + 1

        if end_idx == 0:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        raw = '\x1b' + seq
        self._buffer = self._buffer[1 + end_idx:]

        if seq in self.SEQUENCES:
            key, modifiers = self.SEQUENCES[seq]
            return KeyEvent(key=key, raw=raw, modifiers=modifiers)

        # Unknown sequence
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
