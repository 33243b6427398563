"""Low-level terminal operations: size, raw mode, startup and restore."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, TextIO

from termgrid.log import get_logger
from termgrid.render.encoder import TerminalEncoder

log = get_logger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """
    Terminal I/O for TUI applications.

    Writes go to ``out`` (stdout by default) so the whole output path can
    be captured in tests.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        size_provider: Callable[[], TerminalSize] | None = None,
        encoder: TerminalEncoder | None = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self._size_provider = size_provider or self.query_size
        self.encoder = encoder or TerminalEncoder()

    @staticmethod
    def query_size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def size(self) -> TerminalSize:
        return self._size_provider()

    def write(self, text: str) -> None:
        """Write text to terminal."""
        self.out.write(text)
        self.out.flush()

    def select_utf8(self) -> None:
        """Switch the output stream to UTF-8 where it supports it."""
        reconfigure = getattr(self.out, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")

    def start(self, alternate_screen: bool = True) -> None:
        """UTF-8 output, alternate buffer, clear screen, hidden cursor."""
        self.select_utf8()
        if alternate_screen:
            self.write(self.encoder.enter_alternate_buffer())
        self.write(self.encoder.clear_screen())
        self.write(self.encoder.hide_cursor())

    def restore(self, alternate_screen: bool = True) -> None:
        """
        Show cursor, leave the alternate buffer, reset styles.

        Every step is attempted even if an earlier one fails; this never
        raises.
        """
        steps = [self.encoder.show_cursor()]
        if alternate_screen:
            steps.append(self.encoder.exit_alternate_buffer())
        steps.append(self.encoder.reset())

        for sequence in steps:
            try:
                self.write(sequence)
            except (OSError, ValueError) as exc:
                log.warning("terminal_restore_step_failed", sequence=repr(sequence), error=str(exc))

    @staticmethod
    @contextmanager
    def raw_mode(fd: int | None = None) -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            termios = tty = None

        old_settings = None
        if termios is not None:
            try:
                fd = sys.stdin.fileno() if fd is None else fd
                old_settings = termios.tcgetattr(fd)
            except (OSError, ValueError, termios.error):
                old_settings = None  # not a tty (piped input, test runner)

        if old_settings is None:
            # Windows, no termios or no tty - just yield
            yield
            return

        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @contextmanager
    def managed_mode(self, alternate_screen: bool = True) -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input."""
        self.start(alternate_screen)
        try:
            with self.raw_mode():
                yield
        finally:
            self.restore(alternate_screen)
