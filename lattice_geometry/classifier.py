"""
Half-Plane Classifier Module
============================

Stateless, vectorised orientation queries - applies one line to many points.

Design:
- All methods static (no instance state)
- Exact: int64 arithmetic only when the data bound proves no overflow,
  otherwise object arrays of Python int
- Agrees point-for-point with OrientedLine.signed_distance()
"""

import operator
from typing import Any

import numpy as np

from lattice_geometry.line import OrientedLine
from lattice_logging import LogEvent, create_logger

logger = create_logger("classifier")

# |cross| <= 8 * bound^2 when every coordinate satisfies |c| <= bound
_INT64_MAX = int(np.iinfo(np.int64).max)


class HalfPlaneClassifier:
    """
    Classifies arrays of lattice points against an oriented line.

    Usage:
        points = np.array([[5, 5], [5, -5], [20, 0]])
        HalfPlaneClassifier.signed_distances(line, points)   # [50, -50, 0]
        HalfPlaneClassifier.classify(line, points)           # [1, -1, 0]
        HalfPlaneClassifier.half_plane_mask(line, points)    # [True, False, True]
    """

    @staticmethod
    def _as_points(line: OrientedLine, points: Any) -> np.ndarray:
        """
        Validate an Nx2 integer array and check it fits the line's type.

        Raises:
            ValueError: If the array is not Nx2
            TypeError: If the array is not integral
            CoordinateRangeError: If a coordinate is outside the line's type
        """
        array = np.asarray(points)

        # A bare empty sequence carries no shape or dtype
        if array.ndim == 1 and array.size == 0:
            return np.empty((0, 2), dtype=np.int64)
        if array.ndim != 2 or array.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {array.shape}")

        if array.dtype.kind == "O":
            array = np.frompyfunc(operator.index, 1, 1)(array)
        elif array.dtype.kind not in "iu":
            raise TypeError(f"points must be integers, got dtype {array.dtype}")

        if array.size == 0:
            return np.empty((0, 2), dtype=np.int64)

        coordinate_type = line.coordinate_type
        if coordinate_type.is_bounded:
            coordinate_type.require(int(array.min()), what="points coordinate")
            coordinate_type.require(int(array.max()), what="points coordinate")

        return array

    @staticmethod
    def signed_distances(line: OrientedLine, points: Any) -> np.ndarray:
        """
        Exact signed distance of every point to the line.

        Args:
            line: Valid oriented line
            points: Nx2 array-like of integer (x, y)

        Returns:
            Array of shape (N,): int64 when safe, object (Python int) otherwise

        Raises:
            InvalidLineError: If the line is not valid
        """
        direction = line.direction
        array = HalfPlaneClassifier._as_points(line, points)

        if len(array) == 0:
            return np.empty(0, dtype=np.int64)

        bound = max(
            abs(int(array.min())),
            abs(int(array.max())),
            abs(line.first.x), abs(line.first.y),
            abs(line.second.x), abs(line.second.y),
        )

        if 8 * bound * bound <= _INT64_MAX:
            work = array.astype(np.int64)
            path = "int64"
        else:
            work = array.astype(object)
            path = "object"

        wx = work[:, 0] - line.first.x
        wy = work[:, 1] - line.first.y
        result = direction.x * wy - direction.y * wx

        logger.debug(
            event=LogEvent.POINTS_CLASSIFIED,
            message=f"Computed {len(result)} signed distances",
            metadata={"count": len(result), "path": path, "line": repr(line)},
        )
        return result

    @staticmethod
    def classify(line: OrientedLine, points: Any) -> np.ndarray:
        """
        Orientation of every point.

        Returns:
            int8 array: 1 left, -1 right, 0 on line (Orientation values)
        """
        distances = HalfPlaneClassifier.signed_distances(line, points)
        return (distances > 0).astype(np.int8) - (distances < 0).astype(np.int8)

    @staticmethod
    def half_plane_mask(
        line: OrientedLine,
        points: Any,
        closed: bool = True,
    ) -> np.ndarray:
        """
        Boolean mask of points in the left half-plane.

        Args:
            line: Valid oriented line
            points: Nx2 array-like of integer (x, y)
            closed: Whether points on the line count as inside
        """
        distances = HalfPlaneClassifier.signed_distances(line, points)
        mask = distances >= 0 if closed else distances > 0
        return np.asarray(mask, dtype=bool)
