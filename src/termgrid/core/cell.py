"""Cell - atomic unit of the screen grid."""

from dataclasses import dataclass, replace
from typing import ClassVar

from termgrid.core.color import Color


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Cells are values: two cells are equal when every field matches, which
    is what the screen diff relies on. A stored cell is only ever replaced
    as a whole.
    """
    char: str = ' '
    fg: Color = Color.WHITE
    bg: Color = Color.TRANSPARENT
    bold: bool = False
    italic: bool = False
    underline: bool = False

    EMPTY: ClassVar["Cell"]

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Cell holds exactly one character, got {self.char!r}")

    def with_char(self, char: str) -> "Cell":
        """Return a copy of this cell showing a different character."""
        return replace(self, char=char)

    def is_empty(self) -> bool:
        """Check if this cell is the blank cell every frame starts from."""
        return self == Cell.EMPTY


Cell.EMPTY = Cell()
