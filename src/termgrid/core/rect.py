"""Rectangle bounds for widget positioning."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """
    Rectangle in absolute screen coordinates.

    Width or height of zero or less means "not drawable"; such rectangles
    are legal and every drawing primitive treats them as empty.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        """First column to the right of the rectangle."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row below the rectangle."""
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inset(self, amount: int) -> Rect:
        """Shrink the rectangle by ``amount`` on every side."""
        return Rect(
            self.x + amount,
            self.y + amount,
            self.width - 2 * amount,
            self.height - 2 * amount,
        )

    def moved(self, x: int, y: int) -> Rect:
        return Rect(x, y, self.width, self.height)

    def resized(self, width: int, height: int) -> Rect:
        return Rect(self.x, self.y, width, height)
