"""Color representation for terminal cells."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Color:
    """
    An RGBA color value.

    Cells are always emitted as 24-bit true color. The alpha channel is
    only meaningful for backgrounds: a transparent background is never
    written to the terminal and transparent fills are skipped.
    """
    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    GRAY: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(
                    f"Color channels must be 0-255, got ({self.r}, {self.g}, {self.b}, {self.a})"
                )

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create an opaque color from RGB values."""
        return cls(r, g, b, 255)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Create a color from RGBA values."""
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from ``#RRGGBB`` or ``#RRGGBBAA``."""
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Hex color must be 6 or 8 digits, got {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None
        return cls(*channels)

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as foreground."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as background."""
        return f"48;2;{self.r};{self.g};{self.b}"


# Initialize class-level color constants
Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.GRAY = Color(128, 128, 128)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 128, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.CYAN = Color(0, 255, 255)
Color.MAGENTA = Color(255, 0, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)
