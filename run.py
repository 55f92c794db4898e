"""Command-line entry point for the Python CHIP-8 interpreter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pychip8.ui.app import AppConfig, Chip8App


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run.py",
        description="CHIP-8 interpreter",
    )
    parser.add_argument(
        "--rom",
        type=Path,
        required=True,
        help="Path to the CHIP-8 program image",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=20,
        help="Integer window scale factor (default: 20)",
    )
    parser.add_argument(
        "--ips",
        type=int,
        default=500,
        help="Instructions executed per second (default: 500)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=64,
        help="Display width in CHIP-8 pixels (default: 64)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=32,
        help="Display height in CHIP-8 pixels (default: 32)",
    )
    parser.add_argument(
        "--no-outlines",
        action="store_true",
        help="Draw lit pixels as solid squares without an outline",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable the sound-timer tone",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not args.rom.exists():
        parser.error(f"ROM file not found: {args.rom}")
    if args.scale <= 0:
        parser.error("--scale must be positive")
    if args.ips <= 0:
        parser.error("--ips must be positive")
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")

    config = AppConfig(
        rom_path=args.rom,
        scale=args.scale,
        instructions_per_second=args.ips,
        pixel_outlines=not args.no_outlines,
        screen_width=args.width,
        screen_height=args.height,
        enable_audio=not args.mute,
    )
    app = Chip8App(config)
    try:
        app.run()
    except RuntimeError as exc:
        parser.exit(1, f"run.py: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
