"""
Rectangle geometry for MaxRects packing.

Coordinates are integer pixels with y growing downwards, so the "top" edge of
a rectangle is ``y`` and its "bottom" edge is ``y + height``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle placed (or to be placed) in a bin."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_null(self) -> bool:
        """True for the "no placement found" result."""
        return self.height == 0

    def flipped(self) -> Rect:
        """Same position, width and height swapped."""
        return Rect(self.x, self.y, self.height, self.width)


# Returned by the heuristics and by insert() when a piece does not fit
NULL_RECT = Rect(0, 0, 0, 0)


def interval_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> int:
    """Return 0 if the two intervals are disjoint, else the length of their overlap."""
    if a_end < b_start or b_end < a_start:
        return 0
    return min(a_end, b_end) - max(a_start, b_start)


def intersects(a: Rect, b: Rect) -> bool:
    """Separating axis test. Rectangles that only share an edge do not intersect."""
    return not (
        b.x >= a.right or b.right <= a.x or
        b.y >= a.bottom or b.bottom <= a.y
    )


def contains(outer: Rect, inner: Rect) -> bool:
    """True if ``inner`` lies entirely within ``outer`` (edges inclusive)."""
    return (
        inner.x >= outer.x and inner.y >= outer.y and
        inner.right <= outer.right and inner.bottom <= outer.bottom
    )
