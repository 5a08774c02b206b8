"""Geometric primitives used throughout the engine."""

from __future__ import annotations
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the plan (y grows downwards, SVG convention)."""
    x: float
    y: float


class Segment(BaseModel):
    """Straight line segment between (x1, y1) and (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    def span(self) -> tuple[float, float]:
        """Extent along the segment's own axis as (min, max)."""
        if self.is_horizontal:
            return min(self.x1, self.x2), max(self.x1, self.x2)
        return min(self.y1, self.y2), max(self.y1, self.y2)


class Rect(BaseModel):
    """Axis-aligned rectangle anchored at its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersection(self, other: Rect) -> Rect:
        """Intersection rectangle; width/height go negative when disjoint."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x=x1, y=y1, width=x2 - x1, height=y2 - y1)
