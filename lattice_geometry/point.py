"""
Lattice Point Module
====================

Immutable integer point / vector in the plane.

Design:
- Frozen dataclass (hashable, value equality)
- Components coerced with operator.index: numpy integer scalars become
  Python int, floats are rejected
- Same type used for points and direction vectors
"""

import operator
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, Union


@dataclass(frozen=True)
class Point:
    """
    Immutable lattice point with exact integer components.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Example:
        >>> Point(3, 4) - Point(1, 1)
        Point(x=2, y=3)
        >>> Point(1, 0).cross(Point(0, 1))
        1
    """

    x: int
    y: int

    def __post_init__(self):
        """Coerce components to Python int."""
        for name in ("x", "y"):
            value = getattr(self, name)
            try:
                coerced = operator.index(value)
            except TypeError:
                raise TypeError(
                    f"Point.{name} must be an integer, got {type(value).__name__} {value!r}"
                ) from None
            object.__setattr__(self, name, int(coerced))

    @classmethod
    def of(cls, value: "PointLike") -> "Point":
        """
        Build a Point from a Point or any (x, y) pair.

        Raises:
            ValueError: If value does not have exactly two components
        """
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise ValueError(f"Expected an (x, y) pair, got {value!r}") from None
        return cls(x, y)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def cross(self, other: "Point") -> int:
        """2-D cross product self.x * other.y - self.y * other.x (exact)."""
        return self.x * other.y - self.y * other.x

    def dot(self, other: "Point") -> int:
        return self.x * other.x + self.y * other.y

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


PointLike = Union[Point, Tuple[Any, Any]]
