"""Two-dimensional coordinates.

Points are used both for screen-space badge coordinates (integer viewBox
units) and for outline-space coordinates (floating font design units).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True, slots=True)
class Point(Generic[T]):
    """A point in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: T
    y: T


ORIGIN: Point[int] = Point(0, 0)
