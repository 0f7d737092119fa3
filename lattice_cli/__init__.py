"""
lattice-lines CLI - Command-line interface over the geometry and rendering layers.

Usage:
    lattice-lines classify config/lines.yaml
    lattice-lines draw config/lines.yaml runs/lines.png
"""

__version__ = "1.0.0"
