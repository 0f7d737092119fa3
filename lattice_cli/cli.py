"""
lattice-lines CLI - Main entry point.

Classifies configured query points against configured lines, or renders
lines and points onto a blank canvas.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import cv2
import numpy as np

from lattice_geometry import (
    HalfPlaneClassifier,
    LatticeGeometryError,
    InvalidLineError,
    Orientation,
)
from lattice_logging import LogEvent, create_logger
from lattice_rendering import LineVisualizer

from .config import LinesConfig

logger = create_logger("cli")


def classify(config: LinesConfig, out: TextIO = sys.stdout) -> int:
    """
    Print one JSON object per (line, point) pair.

    Invalid lines (equal points, permissive config) are reported once with
    "valid": false and skipped.

    Returns:
        Number of records written
    """
    lines = config.build_lines()
    points = np.array(config.points, dtype=object).reshape(-1, 2)
    written = 0

    for line_id, line in lines.items():
        if not line.is_valid():
            logger.warning(
                event=LogEvent.INVALID_LINE_ERROR,
                message=f"Skipping undefined line '{line_id}'",
                metadata={"line": repr(line)},
            )
            out.write(json.dumps({"line_id": line_id, "valid": False}) + "\n")
            written += 1
            continue

        distances = HalfPlaneClassifier.signed_distances(line, points)
        for point, distance in zip(config.points, distances.tolist()):
            record = {
                "line_id": line_id,
                "valid": True,
                "point": [int(point[0]), int(point[1])],
                "signed_distance": int(distance),
                "orientation": Orientation.from_value(distance).name,
            }
            out.write(json.dumps(record) + "\n")
            written += 1

    return written


def draw(config: LinesConfig, output: Path, reference: Optional[str] = None) -> np.ndarray:
    """
    Render every valid line and the query points to an image file.

    Args:
        config: Loaded configuration
        output: Image path, format chosen by extension
        reference: line_id the points are colored against (default: first valid)

    Returns:
        The rendered canvas

    Raises:
        ValueError: If reference names no valid line
        OSError: If the image cannot be written
    """
    lines = config.build_lines()
    valid = {line_id: line for line_id, line in lines.items() if line.is_valid()}

    width, height = config.canvas_wh
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    visualizer = LineVisualizer(config.style.to_style())

    for line_id, line in valid.items():
        label = line_id if config.style.show_labels else None
        canvas = visualizer.draw_line(canvas, line, label=label)

    if config.points and valid:
        if reference is None:
            reference = next(iter(valid))
        if reference not in valid:
            raise ValueError(f"No valid line with line_id '{reference}'")
        canvas = visualizer.draw_points(canvas, valid[reference], config.points)

    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output), canvas):
        raise OSError(f"Failed to write image: {output}")

    logger.info(
        event=LogEvent.CANVAS_WRITTEN,
        message=f"Rendered {len(valid)} lines",
        metadata={"output": str(output), "canvas_wh": list(config.canvas_wh)},
    )
    return canvas


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lattice-lines",
        description="lattice-lines - Exact orientation queries against lattice lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Signed distance of every configured point to every configured line
  lattice-lines classify config/lines.yaml

  # Render lines and points, colored against the line 'horizon'
  lattice-lines draw config/lines.yaml runs/lines.png --reference horizon
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    classify_cmd = subparsers.add_parser('classify', help='Classify points against lines')
    classify_cmd.add_argument('config', help='Path to lines config YAML')

    draw_cmd = subparsers.add_parser('draw', help='Render lines and points to an image')
    draw_cmd.add_argument('config', help='Path to lines config YAML')
    draw_cmd.add_argument('output', help='Output image path (.png, .jpg)')
    draw_cmd.add_argument(
        '--reference',
        default=None,
        help='line_id points are colored against (default: first valid line)'
    )

    return parser


def run(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    """
    Execute the CLI and return its exit status.

    Errors are logged and turned into exit status 1.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger.info(
        event=LogEvent.CLI_COMMAND,
        message=args.command,
        metadata={"config": args.config},
    )

    try:
        config = LinesConfig.from_yaml(Path(args.config))

        if args.command == 'classify':
            classify(config, out=out)
        elif args.command == 'draw':
            draw(config, Path(args.output), reference=args.reference)

    except InvalidLineError as e:
        logger.error(event=LogEvent.INVALID_LINE_ERROR, message="Undefined line", exc_info=e)
        return 1
    except LatticeGeometryError as e:
        logger.error(event=LogEvent.COORDINATE_ERROR, message="Coordinate error", exc_info=e)
        return 1
    except (FileNotFoundError, ValueError, OSError) as e:
        logger.error(event=LogEvent.CONFIG_ERROR, message="Command failed", exc_info=e)
        return 1

    return 0


def main():
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == '__main__':
    main()
