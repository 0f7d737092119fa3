"""
Structured Logging for lattice-lines
====================================

Bounded Context: Observability

JSON-structured logging shared by the classifier, renderer, config loader
and CLI. The exact geometry core (Point, OrientedLine) never logs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
