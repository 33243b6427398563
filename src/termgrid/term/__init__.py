"""Terminal I/O: output stream, key parsing, input worker."""

from termgrid.term.input import InputReader, Key, KeyEvent, KeySource, Modifiers, parse_keys
from termgrid.term.pump import InputPump
from termgrid.term.terminal import Terminal, TerminalSize

__all__ = [
    "InputReader",
    "InputPump",
    "Key",
    "KeyEvent",
    "KeySource",
    "Modifiers",
    "parse_keys",
    "Terminal",
    "TerminalSize",
]
