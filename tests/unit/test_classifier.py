"""
Tests for HalfPlaneClassifier

Checks:
1. Agreement with the scalar OrientedLine query
2. int64 fast path and exact object fallback
3. Masks and classification values
4. Input validation
"""

import numpy as np
import pytest

from lattice_geometry import (
    INT8,
    INT64,
    CoordinateRangeError,
    HalfPlaneClassifier,
    InvalidLineError,
    OrientedLine,
)


@pytest.fixture
def horizontal() -> OrientedLine:
    return OrientedLine((0, 0), (10, 0))


class TestSignedDistances:
    """Vectorised values equal scalar values"""

    def test_basic_values(self, horizontal) -> None:
        points = np.array([[5, 5], [5, -5], [20, 0]])
        result = HalfPlaneClassifier.signed_distances(horizontal, points)
        assert result.tolist() == [50, -50, 0]
        assert result.dtype == np.int64

    def test_matches_scalar_query(self) -> None:
        rng = np.random.default_rng(7)
        points = rng.integers(-10_000, 10_000, size=(200, 2))
        line = OrientedLine((-37, 12), (91, -4))
        result = HalfPlaneClassifier.signed_distances(line, points)
        expected = [line.signed_distance(tuple(p)) for p in points.tolist()]
        assert result.tolist() == expected

    def test_int64_extremes_use_exact_fallback(self) -> None:
        lo, hi = INT64.min_value, INT64.max_value
        line = OrientedLine((lo, lo), (hi, lo), INT64)
        points = np.array([[lo, hi], [hi, hi], [0, lo]], dtype=np.int64)
        result = HalfPlaneClassifier.signed_distances(line, points)
        assert result.dtype == object
        assert result.tolist() == [
            line.signed_distance((lo, hi)),
            line.signed_distance((hi, hi)),
            0,
        ]
        assert result[0] == (hi - lo) ** 2

    def test_object_array_of_big_ints(self) -> None:
        big = 10**30
        line = OrientedLine((0, 0), (big, 0))
        points = np.array([[1, big], [1, -big]], dtype=object)
        result = HalfPlaneClassifier.signed_distances(line, points)
        assert result.tolist() == [big * big, -big * big]

    def test_accepts_lists(self, horizontal) -> None:
        result = HalfPlaneClassifier.signed_distances(horizontal, [(5, 5), (1, -1)])
        assert result.tolist() == [50, -10]

    def test_empty(self, horizontal) -> None:
        result = HalfPlaneClassifier.signed_distances(horizontal, [])
        assert result.shape == (0,)


class TestClassify:
    """Orientation values and half-plane masks"""

    def test_classify(self, horizontal) -> None:
        points = np.array([[5, 5], [5, -5], [20, 0]])
        assert HalfPlaneClassifier.classify(horizontal, points).tolist() == [1, -1, 0]

    def test_classify_object_path(self) -> None:
        lo, hi = INT64.min_value, INT64.max_value
        line = OrientedLine((lo, lo), (hi, lo), INT64)
        points = np.array([[0, hi], [0, lo], [0, lo + 1]], dtype=np.int64)
        assert HalfPlaneClassifier.classify(line, points).tolist() == [1, 0, 1]

    def test_half_plane_mask(self, horizontal) -> None:
        points = np.array([[5, 5], [5, -5], [20, 0]])
        closed = HalfPlaneClassifier.half_plane_mask(horizontal, points)
        opened = HalfPlaneClassifier.half_plane_mask(horizontal, points, closed=False)
        assert closed.tolist() == [True, False, True]
        assert opened.tolist() == [True, False, False]
        assert closed.dtype == bool

    def test_antisymmetry(self) -> None:
        rng = np.random.default_rng(3)
        points = rng.integers(-500, 500, size=(50, 2))
        line = OrientedLine((3, 4), (-8, 11))
        forward = HalfPlaneClassifier.classify(line, points)
        backward = HalfPlaneClassifier.classify(line.reversed(), points)
        assert (forward == -backward).all()


class TestValidation:
    """Bad input is rejected"""

    def test_invalid_line(self) -> None:
        line = OrientedLine((1, 1), (1, 1))
        with pytest.raises(InvalidLineError):
            HalfPlaneClassifier.signed_distances(line, [(0, 0)])

    def test_wrong_shape(self, horizontal) -> None:
        with pytest.raises(ValueError, match="Nx2"):
            HalfPlaneClassifier.signed_distances(horizontal, np.zeros((3, 3), dtype=int))

    def test_float_points(self, horizontal) -> None:
        with pytest.raises(TypeError, match="integers"):
            HalfPlaneClassifier.signed_distances(horizontal, np.array([[0.5, 1.0]]))

    def test_out_of_range_for_coordinate_type(self) -> None:
        line = OrientedLine((0, 0), (1, 0), INT8)
        with pytest.raises(CoordinateRangeError):
            HalfPlaneClassifier.signed_distances(line, np.array([[0, 200]]))

    def test_empty_with_wrong_width(self, horizontal) -> None:
        with pytest.raises(ValueError, match="Nx2"):
            HalfPlaneClassifier.signed_distances(horizontal, np.zeros((0, 3), dtype=np.int64))

    def test_empty_float_array(self, horizontal) -> None:
        with pytest.raises(TypeError, match="integers"):
            HalfPlaneClassifier.signed_distances(horizontal, np.zeros((0, 2)))

    def test_empty_integer_array(self, horizontal) -> None:
        result = HalfPlaneClassifier.signed_distances(horizontal, np.zeros((0, 2), dtype=np.int32))
        assert result.shape == (0,)
