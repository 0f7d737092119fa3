"""
Tests for the rendering adapter

Checks:
1. Line and defining-point markers drawn with the configured colors
2. Query points colored by side
3. Invalid lines and bad styles rejected
"""

import numpy as np
import pytest
import supervision as sv

from lattice_geometry import INT64, CoordinateRangeError, InvalidLineError, OrientedLine
from lattice_rendering import LineStyle, LineVisualizer


@pytest.fixture
def frame() -> np.ndarray:
    return np.zeros((100, 100, 3), dtype=np.uint8)


@pytest.fixture
def line() -> OrientedLine:
    return OrientedLine((10, 50), (90, 50))


class TestDrawLine:
    """Drawing the two defining points"""

    def test_line_pixels(self, frame, line) -> None:
        style = LineStyle()
        result = LineVisualizer(style).draw_line(frame, line)
        assert result[50, 50].tolist() == list(style.line_color.as_bgr())

    def test_markers(self, frame, line) -> None:
        style = LineStyle()
        result = LineVisualizer(style).draw_line(frame, line)
        assert result[50, 10].tolist() == list(style.first_color.as_bgr())
        assert result[50, 90].tolist() == list(style.second_color.as_bgr())

    def test_no_markers(self, frame, line) -> None:
        style = LineStyle(marker_radius=0)
        result = LineVisualizer(style).draw_line(frame, line)
        assert result[50, 10].tolist() == list(style.line_color.as_bgr())

    def test_label(self, frame, line) -> None:
        result = LineVisualizer().draw_line(frame.copy(), line, label="edge")
        assert result.any()

    def test_invalid_line(self, frame) -> None:
        with pytest.raises(InvalidLineError):
            LineVisualizer().draw_line(frame, OrientedLine((5, 5), (5, 5)))


class TestDrawPoints:
    """Query points colored by orientation"""

    def test_point_colors(self, frame, line) -> None:
        style = LineStyle()
        points = [(50, 20), (50, 80), (50, 50)]
        result = LineVisualizer(style).draw_points(frame, line, points)
        # y grows downwards: (50, 80) is left of (10,50)->(90,50)
        assert result[20, 50].tolist() == list(style.right_color.as_bgr())
        assert result[80, 50].tolist() == list(style.left_color.as_bgr())
        assert result[50, 50].tolist() == list(style.on_color.as_bgr())

    def test_no_points(self, frame, line) -> None:
        result = LineVisualizer().draw_points(frame, line, [])
        assert not result.any()


class TestLineStyle:
    """Style validation and tag"""

    def test_default_name(self) -> None:
        assert LineVisualizer().style_name == "OrientedLine"

    def test_custom_name(self) -> None:
        visualizer = LineVisualizer(LineStyle(name="hull_edge", line_color=sv.Color.WHITE))
        assert visualizer.style_name == "hull_edge"

    @pytest.mark.parametrize(
        "kwargs",
        [{"thickness": 0}, {"marker_radius": -1}, {"text_scale": 0}],
    )
    def test_invalid_sizes(self, kwargs) -> None:
        with pytest.raises(ValueError):
            LineStyle(**kwargs)


class TestPixelRange:
    """Positions OpenCV cannot take are rejected"""

    def test_defining_point_beyond_int32(self, frame) -> None:
        line = OrientedLine((0, 0), (10**10, 5), INT64)
        with pytest.raises(CoordinateRangeError, match="second.x pixel"):
            LineVisualizer().draw_line(frame, line)

    def test_query_point_beyond_int32(self, frame, line) -> None:
        with pytest.raises(CoordinateRangeError, match="pixel"):
            LineVisualizer().draw_points(frame, line, [(2**40, 0)])

    def test_marker_radius_pushes_past_int32(self, frame, line) -> None:
        visualizer = LineVisualizer(LineStyle(marker_radius=4))
        with pytest.raises(CoordinateRangeError):
            visualizer.draw_points(frame, line, [(2**31 - 2, 0)])
