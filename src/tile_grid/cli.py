"""CLI entry point for the tile-grid toolchain."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

from grid_composition.settings import load_env_file
from image_io import TileGridError
from . import __version__
from .pipeline import compose_files, resize_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Image grid and square resize helper")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    compose = sub.add_parser("compose", help="Lay images out on a square grid")
    compose.add_argument("images", nargs="+", type=Path, help="Input image paths (row-major order)")
    compose.add_argument("--size", type=int, required=True, help="Output canvas width/height in pixels")
    compose.add_argument("--out", type=Path, required=True, help="Where to write the grid PNG")
    compose.add_argument("--padding", type=int, default=0, help="Pixels between and around tiles")
    compose.add_argument(
        "--background",
        default=None,
        help="Canvas color, e.g. '#ffffff' or 'transparent' (default: TILEGRID_BACKGROUND or transparent)",
    )
    compose.add_argument(
        "--workers", type=int, default=None, help="Tile worker threads (default: TILEGRID_MAX_WORKERS)"
    )

    resize = sub.add_parser("resize", help="Cover-fit one image to a square")
    resize.add_argument("image", type=Path, help="Input image path")
    resize.add_argument("--size", type=int, required=True, help="Output side length in pixels")
    resize.add_argument("--out", type=Path, required=True, help="Where to write the PNG")

    return parser


def main(argv: List[str] | None = None) -> None:
    # Load .env if present (ignored if values already in env)
    load_env_file()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    try:
        if args.command == "compose":
            summary = compose_files(
                args.images,
                output_size=args.size,
                out_path=args.out,
                padding=args.padding,
                background=args.background,
                max_workers=args.workers,
            )
            print(json.dumps(summary, indent=2))
            return

        if args.command == "resize":
            print(resize_file(args.image, size=args.size, out_path=args.out))
            return
    except (TileGridError, OSError, ValueError) as exc:
        parser.exit(1, f"error: {exc}\n")

    parser.print_help()


if __name__ == "__main__":
    main()
