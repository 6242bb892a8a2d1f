"""
Badger CLI - Main entry point.

Lays out and renders badges described by a YAML config.
"""

import argparse
import json
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

import cv2

from badger_shape.config import BadgeConfig
from badger_shape.geometry.layout import compute_badge_rect
from badger_shape.geometry.rect import Rect
from badger_shape.logging import LogEvent, create_logger
from badger_shape.rendering.surface import FrameSurface


logger = create_logger("cli")


def get_target_run_folder(application_name: str) -> str:
    # runs is datetime generated folder in the application name folder
    target_run_folder = f"./runs/{application_name}/{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    os.makedirs(target_run_folder, exist_ok=True)
    return target_run_folder


def parse_size(value: str) -> Tuple[int, int]:
    """
    Parse a canvas size such as "64x64".

    Raises:
        argparse.ArgumentTypeError: If the size is malformed or not positive
    """
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid size {value!r}, expected WIDTHxHEIGHT")

    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Size must be positive, got {value!r}")
    return width, height


def load_config(config_path: str) -> BadgeConfig:
    """Load and validate the badge config, logging the outcome."""
    try:
        config = BadgeConfig.from_yaml(Path(config_path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_INVALID,
            message="Invalid badge config",
            metadata={'path': config_path},
            exc_info=e,
        )
        raise

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message=f"Loaded {config.shape} badge config",
        metadata={'path': config_path},
    )
    return config


def run_layout(config: BadgeConfig, size: Tuple[int, int]) -> Rect:
    """Compute the badge rect for a canvas of the given size."""
    width, height = size
    shape = config.build_shape()
    return compute_badge_rect(Rect(0, 0, width, height), shape.layout, config.direction)


def run_render(
    config: BadgeConfig,
    input_path: Optional[str],
    size: Optional[Tuple[int, int]],
    output_path: Optional[str],
) -> Tuple[Rect, str]:
    """
    Draw the configured badge onto an image and save it.

    Returns:
        Badge rect and the path the image was written to

    Raises:
        OSError: If the input image cannot be read or the output written
    """
    if input_path is not None:
        frame = cv2.imread(input_path, cv2.IMREAD_COLOR)
        if frame is None:
            raise OSError(f"Could not read image: {input_path}")
        surface = FrameSurface(frame)
    else:
        surface = FrameSurface.blank(*size)

    badge_style, border_style = config.styles()
    badge_rect = config.build_shape().draw(
        surface,
        surface.bounds,
        badge_style,
        border_style,
        config.border_size,
        config.direction,
    )

    if output_path is None:
        output_path = os.path.join(get_target_run_folder("badger-cli"), "badge.png")

    try:
        written = cv2.imwrite(output_path, surface.frame)
    except cv2.error as e:
        # raised instead of returning False for unsupported extensions
        raise OSError(f"Could not write image: {output_path}") from e
    if not written:
        raise OSError(f"Could not write image: {output_path}")

    logger.info(
        event=LogEvent.RENDER_SAVED,
        message="Saved badge image",
        metadata={'path': output_path, 'badge_rect': badge_rect.as_xyxy()},
    )
    return badge_rect, output_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Badger CLI - Lay out and render badge overlays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print where the badge lands on a 64x64 canvas
  badger-cli layout --config config/badge.yaml --size 64x64

  # Draw the badge on an image
  badger-cli render --config config/badge.yaml --input avatar.png --output avatar_badge.png

  # Draw the badge on a blank canvas (saved under ./runs/badger-cli/)
  badger-cli render --config config/badge.yaml --size 128x128
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # layout command
    layout = subparsers.add_parser('layout', help='Print the badge rect as JSON')
    layout.add_argument('--config', required=True, help='Path to badge config YAML')
    layout.add_argument('--size', required=True, type=parse_size, help='Canvas size WIDTHxHEIGHT')

    # render command
    render = subparsers.add_parser('render', help='Draw the badge and save the image')
    render.add_argument('--config', required=True, help='Path to badge config YAML')
    source = render.add_mutually_exclusive_group(required=True)
    source.add_argument('--input', help='Image to draw the badge on')
    source.add_argument('--size', type=parse_size, help='Blank canvas size WIDTHxHEIGHT')
    render.add_argument('--output', help='Output image path (default: ./runs/badger-cli/<timestamp>/)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)

        if args.command == 'layout':
            badge_rect = run_layout(config, args.size)
            print(json.dumps(badge_rect.to_dict()))

        elif args.command == 'render':
            badge_rect, output_path = run_render(config, args.input, args.size, args.output)
            print(json.dumps({'badge_rect': badge_rect.to_dict(), 'output': output_path}))

    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(
            event=LogEvent.RENDER_FAILED,
            message="Render failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
