"""
Line Visualizer Module
======================

Rendering adapter for oriented lines.

Design:
- Reads only line.first / line.second (no geometry logic here)
- Style is a separate immutable LineStyle, no drawable base class
- Returns the drawn frame, keeps no state between calls
- Uses supervision drawing utilities

Dependencies:
- supervision (draw utilities, Color, Point)
- numpy (frames)
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np
import supervision as sv
import supervision.draw.utils as sv_draw

from lattice_geometry.classifier import HalfPlaneClassifier
from lattice_geometry.errors import InvalidLineError
from lattice_geometry.integers import INT32
from lattice_geometry.line import OrientedLine
from lattice_logging import LogEvent, create_logger

logger = create_logger("visualizer")

# OpenCV takes pixel positions as int32
PIXEL_TYPE = INT32


@dataclass(frozen=True)
class LineStyle:
    """
    Immutable drawing style for a line.

    Attributes:
        name: Style tag consumers can switch on
        line_color: Color of the segment between the defining points
        first_color: Marker color of the first point
        second_color: Marker color of the second point
        thickness: Line thickness in pixels
        marker_radius: Radius of point markers in pixels
        left_color / right_color / on_color: Query point colors by side
        text_color / text_background_color / text_scale / text_padding: Label
    """

    name: str = "OrientedLine"
    line_color: sv.Color = field(default_factory=lambda: sv.Color(r=255, g=0, b=0))
    first_color: sv.Color = field(default_factory=lambda: sv.Color(r=0, g=0, b=255))
    second_color: sv.Color = field(default_factory=lambda: sv.Color(r=0, g=255, b=255))
    thickness: int = 2
    marker_radius: int = 4
    left_color: sv.Color = field(default_factory=lambda: sv.Color(r=0, g=255, b=0))
    right_color: sv.Color = field(default_factory=lambda: sv.Color(r=255, g=0, b=255))
    on_color: sv.Color = field(default_factory=lambda: sv.Color(r=255, g=255, b=255))
    text_color: sv.Color = field(default_factory=lambda: sv.Color(r=255, g=255, b=255))
    text_background_color: sv.Color = field(default_factory=lambda: sv.Color(r=0, g=0, b=0))
    text_scale: float = 0.5
    text_padding: int = 5

    def __post_init__(self):
        """Validate sizes."""
        if self.thickness <= 0:
            raise ValueError(f"thickness must be positive, got {self.thickness}")
        if self.marker_radius < 0:
            raise ValueError(f"marker_radius must be >= 0, got {self.marker_radius}")
        if self.text_scale <= 0:
            raise ValueError(f"text_scale must be positive, got {self.text_scale}")


class LineVisualizer:
    """
    Stateless visualizer for oriented lines.

    Usage:
        visualizer = LineVisualizer(LineStyle(thickness=3))
        frame = visualizer.draw_line(frame, line, label="edge_1")
        frame = visualizer.draw_points(frame, line, points)
    """

    def __init__(self, style: Optional[LineStyle] = None):
        self.style = style or LineStyle()

    @property
    def style_name(self) -> str:
        return self.style.name

    @staticmethod
    def _require_pixel(x: int, y: int, what: str, margin: int = 0) -> None:
        """
        Check a position can be handed to OpenCV.

        Raises:
            CoordinateRangeError: If x or y (+/- margin) does not fit int32
        """
        for name, value in (("x", x), ("y", y)):
            PIXEL_TYPE.require(value - margin, what=f"{what}.{name} pixel")
            PIXEL_TYPE.require(value + margin, what=f"{what}.{name} pixel")

    def _marker(self, frame: np.ndarray, x: int, y: int, color: sv.Color) -> np.ndarray:
        r = self.style.marker_radius
        self._require_pixel(x, y, "marker", margin=r)
        if r == 0:
            return frame
        return sv_draw.draw_filled_rectangle(
            scene=frame,
            rect=sv.Rect(x=x - r, y=y - r, width=2 * r, height=2 * r),
            color=color,
        )

    def draw_line(
        self,
        frame: np.ndarray,
        line: OrientedLine,
        label: Optional[str] = None,
    ) -> np.ndarray:
        """
        Draw the two defining points of a line, joined.

        Args:
            frame: Image to draw on (HxWx3 uint8)
            line: Valid oriented line
            label: Optional text shown near the first point

        Returns:
            Frame with line drawn

        Raises:
            InvalidLineError: If the line is not valid
            CoordinateRangeError: If a defining point is outside int32 pixel range
        """
        if not line.is_valid():
            raise InvalidLineError(f"Cannot draw undefined line {line!r}")
        self._require_pixel(line.first.x, line.first.y, "first")
        self._require_pixel(line.second.x, line.second.y, "second")

        start = sv.Point(x=line.first.x, y=line.first.y)
        end = sv.Point(x=line.second.x, y=line.second.y)

        frame = sv.draw_line(
            scene=frame,
            start=start,
            end=end,
            color=self.style.line_color,
            thickness=self.style.thickness,
        )
        frame = self._marker(frame, line.first.x, line.first.y, self.style.first_color)
        frame = self._marker(frame, line.second.x, line.second.y, self.style.second_color)

        if label:
            frame = sv.draw_text(
                scene=frame,
                text=label,
                text_anchor=sv.Point(x=line.first.x, y=max(line.first.y - 15, 10)),
                text_color=self.style.text_color,
                text_scale=self.style.text_scale,
                text_padding=self.style.text_padding,
                background_color=self.style.text_background_color,
            )

        logger.debug(
            event=LogEvent.LINE_RENDERED,
            message="Drew line",
            metadata={"line": repr(line), "style": self.style.name},
        )
        return frame

    def draw_points(
        self,
        frame: np.ndarray,
        line: OrientedLine,
        points: Any,
    ) -> np.ndarray:
        """
        Draw query points colored by their side of the line.

        Args:
            frame: Image to draw on
            line: Valid oriented line
            points: Nx2 array-like of integer (x, y)

        Returns:
            Frame with points drawn
        """
        sides = HalfPlaneClassifier.classify(line, points)
        if len(sides) == 0:
            return frame

        colors = {
            1: self.style.left_color,
            -1: self.style.right_color,
            0: self.style.on_color,
        }
        for (x, y), side in zip(np.asarray(points).tolist(), sides.tolist()):
            frame = self._marker(frame, int(x), int(y), colors[side])

        logger.debug(
            event=LogEvent.POINTS_RENDERED,
            message=f"Drew {len(sides)} points",
            metadata={
                "left": int((sides == 1).sum()),
                "right": int((sides == -1).sum()),
                "on": int((sides == 0).sum()),
            },
        )
        return frame
