#!/usr/bin/env python3
"""
Overlay Camera

Command-line entry point: interpret a typed overlay command, optionally
render it over an image, and manage saved presets.

Usage:
    python main.py COMMAND... [--image IN] [--output OUT] [--tilt DEG]
    python main.py --list-overlays
    python main.py --list-presets
    python main.py --preset ID --output OUT

Example Commands:
    "add thirds grid"
    "draw an ellipse 70% wide 40% tall"
    "red crosshair please"
    "frame with 10% inset"
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import cv2
import numpy as np
from loguru import logger

from overlay_cam.config import load_config
from overlay_cam.core.exceptions import OverlayCamError
from overlay_cam.logging_setup import setup_logging
from overlay_cam.overlays import list_overlays
from overlay_cam.session import OverlaySession
from overlay_cam.storage.settings import SettingsStore, SETTINGS_FILENAME
from overlay_cam.theme import THEMES

EXIT_OK = 0
EXIT_NOT_UNDERSTOOD = 1
EXIT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Overlay Camera - composition guides from typed commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py add thirds grid
  python main.py draw ellipse 70% wide 40% tall --image in.jpg --output out.jpg
  python main.py show horizon level --tilt 3.5 --output level.png
  python main.py red crosshair --save-preset
  python main.py --color "#27ae60" --opacity 0.5
        """
    )

    parser.add_argument('command', nargs='*', help='Overlay command text')

    parser.add_argument('--config', '-c', default=None,
                        help='YAML settings file (default: config/settings.yaml)')
    parser.add_argument('--theme', choices=list(THEMES.keys()), default=None,
                        help='Color theme (overrides config)')
    parser.add_argument('--state-dir', default=None,
                        help='Directory for presets and saved settings (overrides config)')
    parser.add_argument('--log-level', default=None,
                        help='Console log level (overrides config)')
    parser.add_argument('--log-file', default=None, help='Also log to this file')

    parser.add_argument('--image', '-i', default=None,
                        help='Image to draw the overlay on (default: blank preview frame)')
    parser.add_argument('--output', '-o', default=None,
                        help='Write the rendered overlay to this image file')
    parser.add_argument('--tilt', type=float, default=0.0,
                        help='Device tilt in degrees for the horizon guide')

    parser.add_argument('--color', default=None,
                        help='Overlay color as hex, e.g. "#eb5757" (remembered)')
    parser.add_argument('--opacity', type=float, default=None,
                        help='Overlay opacity 0-1 (remembered)')
    parser.add_argument('--thickness', type=float, default=None,
                        help='Overlay line thickness (remembered)')

    parser.add_argument('--save-preset', action='store_true',
                        help='Save the parsed command as a preset')
    parser.add_argument('--preset', default=None, help='Activate a saved preset by id')
    parser.add_argument('--list-presets', action='store_true',
                        help='List saved presets and exit')
    parser.add_argument('--list-overlays', action='store_true',
                        help='List built-in overlays and exit')

    return parser.parse_args(argv)


def _render(session: OverlaySession, image: Optional[str], output: str, tilt: float) -> None:
    if image:
        frame = cv2.imread(image)
        if frame is None:
            raise OverlayCamError(f"Cannot read image: {image}")
    else:
        frame = np.zeros((session.config.frame_height, session.config.frame_width, 3), dtype=np.uint8)

    rendered = session.render(frame, tilt_deg=tilt)
    if not cv2.imwrite(output, rendered):
        raise OverlayCamError(f"Cannot write image: {output}")
    logger.info(f"Rendered {session.summary} to {output}")


def run(args: argparse.Namespace) -> int:
    """Run the CLI; returns the process exit code."""
    try:
        config = load_config(args.config, overrides={
            'theme': args.theme,
            'state_dir': args.state_dir,
            'log_level': args.log_level,
            'log_file': args.log_file,
        })
    except OverlayCamError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(config.log_level, config.log_file)

    if args.list_overlays:
        for entry in list_overlays():
            print(f"{entry.kind.value:<20} {entry.label}")
        return EXIT_OK

    session = OverlaySession(config)

    if args.list_presets:
        for preset in session.presets.all():
            print(f"{preset.id:<24} {preset.summary}")
        return EXIT_OK

    settings_store = SettingsStore(config.state_path / SETTINGS_FILENAME)
    stored = settings_store.load()
    if stored is not None:
        session.restore(stored)

    command = " ".join(args.command)
    restyled = any(v is not None for v in (args.color, args.opacity, args.thickness))
    try:
        if restyled:
            session.set_style(args.color, args.opacity, args.thickness)

        if args.preset:
            session.select_preset(args.preset)

        if command:
            result = session.submit(command)
            if not result.ok:
                print(result.message)
                print("Try: " + " · ".join(result.suggestions))
                return EXIT_NOT_UNDERSTOOD
            if args.save_preset:
                preset = session.save_preset()
                print(f"Saved preset {preset.id}")
        elif args.save_preset:
            raise OverlayCamError("--save-preset needs a command")

        print(session.summary)

        if args.output:
            _render(session, args.image, args.output, args.tilt)

        if command or args.preset or restyled:
            settings_store.save(session.snapshot())
    except (OverlayCamError, OSError) as e:
        logger.error(str(e))
        return EXIT_ERROR

    return EXIT_OK


def main():
    sys.exit(run(parse_args()))


if __name__ == "__main__":
    main()
