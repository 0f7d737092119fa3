"""
Geometry Errors
===============

Exception taxonomy for the geometry layer.

All errors are local precondition violations reported to the immediate
caller. Nothing here is retried or logged by the geometry layer itself.
"""


class LatticeGeometryError(Exception):
    """Base class for all lattice geometry errors."""
    pass


class InvalidLineError(LatticeGeometryError, ValueError):
    """Raised when a line is defined by two equal points."""
    pass


class CoordinateRangeError(LatticeGeometryError, ValueError):
    """Raised when a coordinate lies outside its declared coordinate type."""
    pass


class CoordinateOverflowError(LatticeGeometryError, OverflowError):
    """Raised when a result does not fit the coordinate type it is narrowed to."""
    pass
