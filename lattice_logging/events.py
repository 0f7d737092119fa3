"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (<component>.<action>)
- Searchable in log aggregators

Example Log Query:
    fields @timestamp, event, message, metadata.count
    | filter event = "points.classified"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - config.*: Configuration loading
    - points.*: Batch orientation queries
    - render.*: Drawing lines and points
    - cli.*: Command-line invocations
    - error.*: Error conditions
    """

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """YAML configuration parsed and validated."""

    # ========== Geometry Events ==========
    POINTS_CLASSIFIED = "points.classified"
    """Batch of points classified against a line."""

    # ========== Rendering Events ==========
    LINE_RENDERED = "render.line"
    """Line drawn on a frame."""

    POINTS_RENDERED = "render.points"
    """Query points drawn on a frame, coloured by orientation."""

    CANVAS_WRITTEN = "render.canvas_written"
    """Rendered canvas written to disk."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """CLI subcommand started."""

    # ========== Error Events ==========
    INVALID_LINE_ERROR = "error.invalid_line"
    """Line defined by two equal points was used."""

    COORDINATE_ERROR = "error.coordinate"
    """Coordinate out of range or result overflow."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""


# Event categories for filtering
GEOMETRY_EVENTS = {
    LogEvent.POINTS_CLASSIFIED,
}

RENDER_EVENTS = {
    LogEvent.LINE_RENDERED,
    LogEvent.POINTS_RENDERED,
    LogEvent.CANVAS_WRITTEN,
}

ERROR_EVENTS = {
    LogEvent.INVALID_LINE_ERROR,
    LogEvent.COORDINATE_ERROR,
    LogEvent.CONFIG_ERROR,
}
