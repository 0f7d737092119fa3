"""
Configuration schema for the lattice-lines CLI.

Defines the lines to build, the query points to classify against them,
their coordinate type, and the canvas and style used when drawing.
"""

import operator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import supervision as sv
import yaml

from lattice_geometry import CoordinateType, OrientedLine, from_name
from lattice_logging import LogEvent, create_logger
from lattice_rendering import LineStyle

logger = create_logger("config")


def _parse_point(value: Any) -> Tuple[int, int]:
    """
    Parse a YAML [x, y] pair of integers.

    Raises:
        ValueError: If value is not a pair or a coordinate is not integral
    """
    try:
        x, y = value
        return (operator.index(x), operator.index(y))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Point must be [x, y] integers, got {value!r}") from e


@dataclass(frozen=True)
class LineConfig:
    """One line: identifier plus its two defining points."""

    line_id: str
    points: List[Tuple[int, int]]
    enabled: bool = True

    def __post_init__(self):
        """Validate line configuration."""
        if not self.line_id:
            raise ValueError("line_id cannot be empty")
        if len(self.points) != 2:
            raise ValueError(
                f"Line '{self.line_id}' must have exactly 2 points, "
                f"got {len(self.points)}"
            )

    def to_line(self, coordinate_type: CoordinateType, strict: bool = False) -> OrientedLine:
        """
        Build the oriented line.

        Args:
            coordinate_type: Type both points must fit
            strict: Refuse equal points at construction
        """
        first, second = self.points
        if strict:
            return OrientedLine.checked(first, second, coordinate_type)
        return OrientedLine(first, second, coordinate_type)


@dataclass(frozen=True)
class StyleConfig:
    """Drawing style, colors as hex strings."""

    name: str = "OrientedLine"
    line_color: str = "#ff0000"
    left_color: str = "#00ff00"
    right_color: str = "#ff00ff"
    on_color: str = "#ffffff"
    thickness: int = 2
    marker_radius: int = 4
    show_labels: bool = True

    def to_style(self) -> LineStyle:
        """
        Convert to a LineStyle.

        Raises:
            ValueError: If a color is not a valid hex string
        """
        return LineStyle(
            name=self.name,
            line_color=sv.Color.from_hex(self.line_color),
            left_color=sv.Color.from_hex(self.left_color),
            right_color=sv.Color.from_hex(self.right_color),
            on_color=sv.Color.from_hex(self.on_color),
            thickness=self.thickness,
            marker_radius=self.marker_radius,
        )


@dataclass(frozen=True)
class LinesConfig:
    """
    Main configuration for the CLI.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    coordinate_type: str = "integer"
    lines: List[LineConfig] = field(default_factory=list)
    points: List[Tuple[int, int]] = field(default_factory=list)
    strict: bool = False
    canvas_wh: Tuple[int, int] = (640, 480)  # (width, height)
    style: StyleConfig = field(default_factory=StyleConfig)

    def __post_init__(self):
        """Validate configuration."""
        # Raises ValueError for unknown names
        from_name(self.coordinate_type)

        line_ids = [line.line_id for line in self.lines]
        duplicates = sorted({i for i in line_ids if line_ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate line_id: {duplicates}")

        for point in self.points:
            if len(point) != 2:
                raise ValueError(f"Query point must be (x, y), got {point!r}")

        width, height = self.canvas_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas_wh must have positive dimensions, got {self.canvas_wh}"
            )
        if width > 4096 or height > 4096:
            raise ValueError(
                f"canvas_wh dimensions too large (max 4096x4096), got {self.canvas_wh}"
            )

    @property
    def resolved_coordinate_type(self) -> CoordinateType:
        return from_name(self.coordinate_type)

    def build_lines(self) -> Dict[str, OrientedLine]:
        """
        Build every enabled line, keyed by line_id.

        Raises:
            CoordinateRangeError: If a point does not fit the coordinate type
            InvalidLineError: If strict and a line has equal points
        """
        coordinate_type = self.resolved_coordinate_type
        return {
            line.line_id: line.to_line(coordinate_type, strict=self.strict)
            for line in self.lines
            if line.enabled
        }

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "LinesConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            coordinate_type: "int32"
            strict: false
            canvas_wh: [640, 480]

            lines:
              - line_id: "horizon"
                points: [[0, 240], [640, 240]]
                enabled: true

            points:
              - [100, 100]
              - [100, 400]

            style:
              name: "OrientedLine"
              line_color: "#ff0000"
              thickness: 2

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If YAML is invalid or fails validation
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        lines_data = data.get("lines", [])
        try:
            lines = [
                LineConfig(
                    line_id=str(entry["line_id"]),
                    points=[_parse_point(point) for point in entry["points"]],
                    enabled=entry.get("enabled", True),
                )
                for entry in lines_data
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid line entry in {yaml_path}: {e}") from e

        try:
            points = [_parse_point(point) for point in data.get("points", [])]
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid query point in {yaml_path}: {e}") from e

        try:
            style = StyleConfig(**data.get("style", {}))
        except TypeError as e:
            raise ValueError(f"Invalid style in {yaml_path}: {e}") from e
        canvas_wh = tuple(data.get("canvas_wh", [640, 480]))

        config = cls(
            coordinate_type=str(data.get("coordinate_type", "integer")),
            lines=lines,
            points=points,
            strict=bool(data.get("strict", False)),
            canvas_wh=canvas_wh,
            style=style,
        )

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded {len(lines)} lines and {len(points)} points",
            metadata={"path": str(yaml_path), "coordinate_type": config.coordinate_type},
        )
        return config
