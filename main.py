#!/usr/bin/env python3
"""
lattice-lines - Entry Point
===========================

Usage:
    python main.py classify config/lines.yaml
    python main.py draw config/lines.yaml runs/lines.png
"""

from lattice_cli.cli import main


if __name__ == '__main__':
    main()
