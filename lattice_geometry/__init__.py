"""
Lattice Geometry
================

Bounded Context: Exact integer geometry for oriented lines.

Responsibilities:
- Lattice points and coordinate integer types
- Oriented line through two points with exact signed distance
- Vectorised half-plane classification
- NO drawing, NO persistence, NO floating-point lines

Design Philosophy:
- Immutable value objects (frozen dataclasses)
- Exact arithmetic on Python int, widened explicitly
- Fail-fast errors reported to the caller

Usage:

    from lattice_geometry import OrientedLine, Orientation, INT32

    line = OrientedLine((0, 0), (10, 0), coordinate_type=INT32)
    line.signed_distance((5, 5))     # 50
    line.orientation((5, -5))        # Orientation.RIGHT
    line.distance_type               # int64 holds every result
"""

from lattice_geometry.errors import (
    LatticeGeometryError,
    InvalidLineError,
    CoordinateRangeError,
    CoordinateOverflowError,
)
from lattice_geometry.integers import (
    CoordinateType,
    INT8,
    INT16,
    INT32,
    INT64,
    INTEGER,
    from_name,
)
from lattice_geometry.point import Point
from lattice_geometry.line import OrientedLine, Orientation
from lattice_geometry.classifier import HalfPlaneClassifier

__all__ = [
    # Errors
    "LatticeGeometryError",
    "InvalidLineError",
    "CoordinateRangeError",
    "CoordinateOverflowError",
    # Coordinate types
    "CoordinateType",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INTEGER",
    "from_name",
    # Values
    "Point",
    "OrientedLine",
    "Orientation",
    # Batch queries
    "HalfPlaneClassifier",
]

__version__ = "1.0.0"
