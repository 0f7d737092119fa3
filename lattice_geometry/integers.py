"""
Coordinate Integer Types
========================

Descriptors for the integer type a line's coordinates are drawn from.

Design:
- Fixed-width types (int8 ... int64) take their bounds from numpy.iinfo
- Arbitrary precision (`integer`) has no bounds
- All arithmetic happens on Python int, the descriptor only checks ranges
- widened() names the type that holds every exact cross product

Bounds for B-bit coordinates:
    differences      |d| <= 2^B - 1
    products         |d1 * d2| < 2^(2B)
    cross product    |p1 - p2| < 2^(2B+1)  ->  2B + 2 signed bits
"""

import operator
from dataclasses import dataclass
from typing import Optional, Dict, Any

import numpy as np

from lattice_geometry.errors import CoordinateRangeError, CoordinateOverflowError


@dataclass(frozen=True)
class CoordinateType:
    """
    Immutable description of a signed integer coordinate type.

    Attributes:
        name: Public name ("int32", "integer", ...)
        dtype: numpy dtype name for fixed-width types, None when unbounded

    Example:
        >>> INT16.max_value
        32767
        >>> INT16.widened()
        CoordinateType(name='int64', dtype='int64')
    """

    name: str
    dtype: Optional[str] = None

    def __post_init__(self):
        """Validate dtype is a signed numpy integer."""
        if self.dtype is not None:
            kind = np.dtype(self.dtype).kind
            if kind != "i":
                raise ValueError(
                    f"Coordinate dtype must be a signed integer, got {self.dtype!r}"
                )

    @property
    def is_bounded(self) -> bool:
        return self.dtype is not None

    @property
    def bits(self) -> Optional[int]:
        """Width in bits, None for arbitrary precision."""
        if self.dtype is None:
            return None
        return int(np.iinfo(self.dtype).bits)

    @property
    def min_value(self) -> Optional[int]:
        if self.dtype is None:
            return None
        return int(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> Optional[int]:
        if self.dtype is None:
            return None
        return int(np.iinfo(self.dtype).max)

    @property
    def numpy_dtype(self) -> np.dtype:
        """numpy dtype holding values of this type (object for unbounded)."""
        if self.dtype is None:
            return np.dtype(object)
        return np.dtype(self.dtype)

    def contains(self, value: Any) -> bool:
        """
        Check whether an integer value is representable.

        Args:
            value: Any integral value (int, numpy integer, bool excluded)

        Returns:
            True if min_value <= value <= max_value (always True if unbounded)
        """
        value = operator.index(value)
        if self.dtype is None:
            return True
        return self.min_value <= value <= self.max_value

    def require(self, value: Any, what: str = "coordinate") -> int:
        """
        Return value as a Python int, raising if it is out of range.

        Raises:
            CoordinateRangeError: If value is not representable
        """
        value = operator.index(value)
        if not self.contains(value):
            raise CoordinateRangeError(
                f"{what} {value} out of range for {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    def narrow(self, value: Any) -> int:
        """
        Narrow an exact result back to this type.

        Raises:
            CoordinateOverflowError: If value does not fit (no wraparound)
        """
        value = operator.index(value)
        if not self.contains(value):
            raise CoordinateOverflowError(
                f"Result {value} overflows {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    def widened(self) -> "CoordinateType":
        """
        Smallest known type holding every cross product of this type.

        Needs 2B + 2 bits for B-bit coordinates; falls back to INTEGER.
        """
        if self.bits is None:
            return INTEGER
        required = 2 * self.bits + 2
        for candidate in FIXED_WIDTH_TYPES:
            if candidate.bits >= required:
                return candidate
        return INTEGER

    def __str__(self) -> str:
        return self.name


INT8 = CoordinateType(name="int8", dtype="int8")
INT16 = CoordinateType(name="int16", dtype="int16")
INT32 = CoordinateType(name="int32", dtype="int32")
INT64 = CoordinateType(name="int64", dtype="int64")
INTEGER = CoordinateType(name="integer")

# Ordered by width, used by widened()
FIXED_WIDTH_TYPES = (INT8, INT16, INT32, INT64)

_BY_NAME: Dict[str, CoordinateType] = {
    t.name: t for t in (*FIXED_WIDTH_TYPES, INTEGER)
}

_ALIASES: Dict[str, str] = {
    "int": "integer",
    "bigint": "integer",
    "arbitrary": "integer",
    "object": "integer",
}


def from_name(name: Any) -> CoordinateType:
    """
    Resolve a coordinate type from its name or a numpy dtype.

    Args:
        name: "int8" ... "int64", "integer" (aliases: int, bigint, arbitrary),
              or anything numpy.dtype() accepts

    Returns:
        Matching CoordinateType

    Raises:
        ValueError: If name does not denote a supported signed integer type
    """
    if not isinstance(name, str):
        try:
            name = np.dtype(name).name
        except TypeError as e:
            raise ValueError(f"Unsupported coordinate type: {name!r}") from e

    key = name.strip().lower()
    key = _ALIASES.get(key, key)

    try:
        return _BY_NAME[key]
    except KeyError:
        raise ValueError(
            f"Unsupported coordinate type: {name!r}. "
            f"Must be one of {sorted(_BY_NAME)}"
        ) from None
