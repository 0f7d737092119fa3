"""
Rendering Layer
===============

Bounded Context: Line visualization.

Responsibilities:
- Draw a line's two defining points on frames
- Color query points by their side of the line
- Pure rendering - no geometry, no state

Non-responsibilities:
- Orientation arithmetic (handled by lattice_geometry)
- Clipping the infinite line to the frame

Design:
- Optional adapter reading line.first / line.second
- Style tag carried by LineStyle
- Uses supervision.draw.utils
"""

from lattice_rendering.visualizer import LineVisualizer, LineStyle

__all__ = [
    "LineVisualizer",
    "LineStyle",
]
