"""Geometry primitives and helpers for card layout calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class Size:
    width: float
    height: float

    def ceil(self) -> "Size":
        """Round both dimensions up to whole pixels."""
        return Size(math.ceil(self.width), math.ceil(self.height))


@dataclass(slots=True)
class Rect:
    """Axis-aligned rectangle in SVG coordinates (y grows downwards)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Ensure non-negative dimensions."""
        if self.width < 0:
            self.width = abs(self.width)
        if self.height < 0:
            self.height = abs(self.height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rect") -> bool:
        """Check if this rectangle overlaps another rectangle.

        Rectangles that only share an edge do not intersect.
        """
        return not (
            self.right <= other.left or
            self.left >= other.right or
            self.bottom <= other.top or
            self.top >= other.bottom
        )

    def contains(self, other: "Rect") -> bool:
        return (
            other.left >= self.left and
            other.right <= self.right and
            other.top >= self.top and
            other.bottom <= self.bottom
        )


def round_metric(value: float, places: int = 4) -> float:
    """Round away float accumulation noise; integral results come back as ``int``."""
    rounded = round(value, places)
    return int(rounded) if float(rounded).is_integer() else rounded
