"""Geometric primitives: rectangles, lines and positions.

Coordinates follow PDF user space: the origin is the lower left corner of a
page and Y grows upwards, so the "top" of a rectangle is its ``max_y``.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

# Number of decimal digits kept for coordinates, to avoid floating noise.
PRECISION = 2


def _round(value: float) -> float:
    return round(float(value), PRECISION)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned, immutable rectangle"""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        for name in ('min_x', 'min_y', 'max_x', 'max_y'):
            object.__setattr__(self, name, _round(getattr(self, name)))
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Inverted rectangle: {self}")

    @property
    def width(self) -> float:
        return _round(self.max_x - self.min_x)

    @property
    def height(self) -> float:
        return _round(self.max_y - self.min_y)

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def union(self, other: Optional["Rectangle"]) -> "Rectangle":
        """Return the smallest rectangle containing this and the other rectangle."""
        if other is None:
            return self
        return Rectangle(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def overlaps(self, other: Optional["Rectangle"]) -> bool:
        """Closed-interval intersection test; touching rectangles overlap."""
        if other is None:
            return False
        return (self.min_x <= other.max_x and other.min_x <= self.max_x and
                self.min_y <= other.max_y and other.min_y <= self.max_y)

    def contains(self, other: Optional["Rectangle"]) -> bool:
        if other is None:
            return False
        return (self.min_x <= other.min_x and other.max_x <= self.max_x and
                self.min_y <= other.min_y and other.max_y <= self.max_y)

    def to_list(self):
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    @staticmethod
    def try_create(min_x: float, min_y: float, max_x: float, max_y: float) -> Optional["Rectangle"]:
        """Create a rectangle, or return None for malformed extents."""
        try:
            return Rectangle(min_x, min_y, max_x, max_y)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def from_elements(elements: Iterable) -> Optional["Rectangle"]:
        """Union of the rectangles of the given elements (None if there are none)."""
        result = None
        for element in elements:
            rect = get_rectangle(element)
            if rect is None:
                continue
            result = rect if result is None else result.union(rect)
        return result


def get_rectangle(element) -> Optional[Rectangle]:
    """Return the rectangle of an element, a rectangle itself, or None."""
    if element is None:
        return None
    if isinstance(element, Rectangle):
        return element
    return getattr(element, 'rectangle', None)


@dataclass(frozen=True)
class Line:
    """Line segment, used for text line baselines"""
    start_x: float
    start_y: float
    end_x: float
    end_y: float

    def __post_init__(self):
        for name in ('start_x', 'start_y', 'end_x', 'end_y'):
            object.__setattr__(self, name, _round(getattr(self, name)))

    def to_list(self):
        return [self.start_x, self.start_y, self.end_x, self.end_y]


@dataclass(frozen=True)
class Position:
    """Location of an element: page number plus bounding rectangle"""
    page_number: int
    rectangle: Optional[Rectangle]
