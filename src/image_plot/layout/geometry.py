"""Geometry primitives shared by the layout engine and both renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Alignment(str, Enum):
    """Placement of a label inside its band along the band's axis."""

    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class Insets:
    """Per-side thickness in pixels."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            msg = f"Insets must be non-negative, got {self}"
            raise ValueError(msg)

    @classmethod
    def uniform(cls, px: int) -> Insets:
        """Same thickness on every side."""
        return cls(top=px, right=px, bottom=px, left=px)


@dataclass(frozen=True)
class Rect:
    """Half-open pixel rectangle ``[x0, x1) x [y0, y1)``."""

    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Build a rectangle from its top left corner and size."""
        return cls(x, y, x + w, y + h)

    @property
    def w(self) -> int:
        """Width."""
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        """Height."""
        return self.y1 - self.y0

    @property
    def area(self) -> int:
        """Pixel count; zero for empty rectangles."""
        return self.w * self.h if not self.is_empty else 0

    @property
    def is_empty(self) -> bool:
        """True when the rectangle covers no pixels."""
        return self.w <= 0 or self.h <= 0

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h

    def shrink(self, insets: Insets) -> Rect:
        """Return the area left after removing ``insets`` from each side."""
        return Rect(
            self.x0 + insets.left,
            self.y0 + insets.top,
            self.x1 - insets.right,
            self.y1 - insets.bottom,
        )

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles share at least one pixel."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x0 < other.x1 and other.x0 < self.x1
            and self.y0 < other.y1 and other.y0 < self.y1
        )

    def contains(self, other: Rect) -> bool:
        """True when ``other`` lies entirely within this rectangle."""
        return (
            self.x0 <= other.x0 and other.x1 <= self.x1
            and self.y0 <= other.y0 and other.y1 <= self.y1
        )

    def box(self) -> tuple[int, int, int, int]:
        """Return the Pillow style ``(left, upper, right, lower)`` box."""
        return self.x0, self.y0, self.x1, self.y1


def align_span(start: int, length: int, extent: int,
               alignment: Alignment) -> int:
    """
    Return where content of size ``extent`` begins inside a span.

    The span starts at ``start`` and is ``length`` pixels long. Center
    rounds the leading gap down, so the trailing gap is at most one pixel
    larger.
    """
    if alignment is Alignment.START:
        return start
    if alignment is Alignment.END:
        return start + length - extent
    return start + (length - extent) // 2
