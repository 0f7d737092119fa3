"""
Tests for Point

Checks:
1. Coercion of components to Python int
2. Vector arithmetic and exact cross product
3. Construction from pairs
"""

import numpy as np
import pytest

from lattice_geometry import Point


class TestCoercion:
    """Components become Python int"""

    def test_numpy_scalars_converted(self) -> None:
        p = Point(np.int32(3), np.int64(-4))
        assert p == Point(3, -4)
        assert type(p.x) is int
        assert type(p.y) is int

    @pytest.mark.parametrize("bad", [1.0, 2.5, "3", None, np.float64(1.0)])
    def test_non_integers_rejected(self, bad) -> None:
        with pytest.raises(TypeError, match="Point.x must be an integer"):
            Point(bad, 0)


class TestArithmetic:
    """Exact vector operations"""

    def test_add_sub_neg(self) -> None:
        a, b = Point(1, 2), Point(10, -3)
        assert a + b == Point(11, -1)
        assert b - a == Point(9, -5)
        assert -a == Point(-1, -2)

    def test_cross_and_dot(self) -> None:
        assert Point(1, 0).cross(Point(0, 1)) == 1
        assert Point(0, 1).cross(Point(1, 0)) == -1
        assert Point(2, 3).dot(Point(4, 5)) == 23

    def test_cross_beyond_int64(self) -> None:
        big = 2**62
        assert Point(big, -big).cross(Point(big, big)) == 2 * big * big

    def test_unpacking(self) -> None:
        x, y = Point(7, 8)
        assert (x, y) == (7, 8)
        assert Point(7, 8).to_tuple() == (7, 8)


class TestOf:
    """Point.of accepts points and pairs"""

    def test_point_returned_unchanged(self) -> None:
        p = Point(1, 1)
        assert Point.of(p) is p

    def test_from_tuple_and_list(self) -> None:
        assert Point.of((1, 2)) == Point(1, 2)
        assert Point.of([3, 4]) == Point(3, 4)
        assert Point.of(np.array([5, 6])) == Point(5, 6)

    @pytest.mark.parametrize("bad", [(1,), (1, 2, 3), 5])
    def test_wrong_arity(self, bad) -> None:
        with pytest.raises(ValueError, match="Expected an"):
            Point.of(bad)
