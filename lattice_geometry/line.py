"""
Oriented Line Module
====================

Infinite line through two lattice points, oriented from the first toward
the second, with an exact signed-distance (orientation) query.

Sign convention:
    v = second - first, w = point - first
    signed_distance = v.x * w.y - v.y * w.x

    > 0  point is left of the line (counter-clockwise side)
    < 0  point is right of the line (clockwise side)
    = 0  point is on the line

    OrientedLine((0, 0), (10, 0)).signed_distance((5, 5))  == 50
    OrientedLine((0, 0), (10, 0)).signed_distance((5, -5)) == -50

The magnitude is twice the signed area of (first, second, point). It is not
a Euclidean distance and is never rounded.

Validity:
- Construction accepts equal points; is_valid() then returns False
- Every arithmetic query re-checks validity and raises InvalidLineError
- OrientedLine.checked() refuses equal points at construction
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from lattice_geometry.errors import InvalidLineError
from lattice_geometry.integers import CoordinateType, INTEGER
from lattice_geometry.point import Point, PointLike


class Orientation(int, Enum):
    """Side of an oriented line a point lies on."""

    LEFT = 1
    ON = 0
    RIGHT = -1

    @classmethod
    def from_value(cls, value: int) -> "Orientation":
        """Orientation matching the sign of a signed distance."""
        return cls((value > 0) - (value < 0))


@dataclass(frozen=True, repr=False)
class OrientedLine:
    """
    Immutable oriented line defined by two lattice points.

    Attributes:
        first: Point the line starts from
        second: Point giving the direction of travel
        coordinate_type: Integer type both points (and queries) must fit

    Thread-safe: no mutable state after construction.
    """

    first: Point
    second: Point
    coordinate_type: CoordinateType = field(default=INTEGER)

    def __post_init__(self):
        """Coerce points and check they fit the coordinate type."""
        object.__setattr__(self, "first", self._coerce(self.first, "first"))
        object.__setattr__(self, "second", self._coerce(self.second, "second"))

    @classmethod
    def checked(
        cls,
        first: PointLike,
        second: PointLike,
        coordinate_type: CoordinateType = INTEGER,
    ) -> "OrientedLine":
        """
        Build a line, failing immediately if the points are equal.

        Raises:
            InvalidLineError: If first == second
        """
        line = cls(first, second, coordinate_type)
        line._require_valid()
        return line

    def _coerce(self, value: PointLike, what: str = "point") -> Point:
        point = Point.of(value)
        self.coordinate_type.require(point.x, what=f"{what}.x")
        self.coordinate_type.require(point.y, what=f"{what}.y")
        return point

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise InvalidLineError(
                f"Line is undefined: both defining points are {self.first.to_tuple()}"
            )

    # ----------------------------------------------------------------- queries

    def is_valid(self) -> bool:
        """True when the two defining points differ."""
        return self.first != self.second

    @property
    def direction(self) -> Point:
        """Direction vector second - first."""
        self._require_valid()
        return self.second - self.first

    @property
    def distance_type(self) -> CoordinateType:
        """Type wide enough for every signed distance of this line."""
        return self.coordinate_type.widened()

    def signed_distance(self, point: PointLike, narrow: bool = False) -> int:
        """
        Signed distance of point to the line (2-D cross product).

        Args:
            point: Query point, must fit the line's coordinate type
            narrow: If True, the result must also fit the coordinate type

        Returns:
            Exact cross product (second - first) x (point - first)

        Raises:
            InvalidLineError: If the line is not valid
            CoordinateRangeError: If point is outside the coordinate type
            CoordinateOverflowError: If narrow and the result does not fit
        """
        self._require_valid()
        query = self._coerce(point)
        result = (self.second - self.first).cross(query - self.first)
        if narrow:
            return self.coordinate_type.narrow(result)
        return result

    def orientation(self, point: PointLike) -> Orientation:
        return Orientation.from_value(self.signed_distance(point))

    def contains(self, point: PointLike) -> bool:
        """True if point is collinear with first and second."""
        return self.signed_distance(point) == 0

    def in_half_plane(self, point: PointLike, closed: bool = True) -> bool:
        """
        Membership in the left half-plane of the line.

        Args:
            point: Query point
            closed: Whether points on the line belong to the half-plane
        """
        value = self.signed_distance(point)
        return value >= 0 if closed else value > 0

    def euclidean_distance(self, point: PointLike) -> float:
        """Unsigned Euclidean distance, the only inexact query."""
        direction = self.direction
        return abs(self.signed_distance(point)) / math.hypot(direction.x, direction.y)

    # ----------------------------------------------------------- derivations

    def reversed(self) -> "OrientedLine":
        """Same line with opposite orientation."""
        return OrientedLine(self.second, self.first, self.coordinate_type)

    def translated(self, offset: PointLike) -> "OrientedLine":
        """
        Line moved by offset.

        Raises:
            CoordinateRangeError: If a moved point leaves the coordinate type
        """
        offset = Point.of(offset)
        return OrientedLine(
            self.first + offset, self.second + offset, self.coordinate_type
        )

    def __repr__(self) -> str:
        return (
            f"OrientedLine(first={self.first.to_tuple()}, "
            f"second={self.second.to_tuple()}, "
            f"coordinate_type={self.coordinate_type.name})"
        )
