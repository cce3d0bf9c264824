#!/usr/bin/env python3
"""Render a region of an isohedral tiling to a PNG.

Usage (from the repo root):
    python scripts/render_tiling.py 0 -o ih01.png
    python scripts/render_tiling.py 12 -o out.png --bound 5 --width 1200
    python scripts/render_tiling.py 12 -o out.png --params 0.2 0.4
    python scripts/render_tiling.py --all -o renders/   # one PNG per type
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the repo root to path so we can import isohedral
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from isohedral.catalog import NUM_VALID_TYPES, get_tiling_type  # noqa: E402
from isohedral.render import render_region, save_png  # noqa: E402
from isohedral.tiling import IsohedralTiling  # noqa: E402


def _render_one(tiling, args, path):
    b = args.bound
    img = render_region(
        tiling, -b, -b, b, b, width=args.width, outline=not args.no_outline
    )
    save_png(img, str(path))
    print(f"Wrote {tiling.tiling_type} to {path}")


def cmd_all(args):
    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)
    tiling = IsohedralTiling(get_tiling_type(0))
    for index in range(NUM_VALID_TYPES):
        tiling.select_tiling(index)
        _render_one(tiling, args, out_dir / f"{tiling.tiling_type}.png")


def cmd_render(args):
    tiling = IsohedralTiling(get_tiling_type(args.index))
    if args.params is not None:
        try:
            tiling.set_parameters(args.params)
        except ValueError as e:
            print(e)
            sys.exit(1)
    _render_one(tiling, args, Path(args.output))


def main():
    parser = argparse.ArgumentParser(
        description="Render an isohedral tiling to PNG"
    )
    parser.add_argument(
        "index",
        type=int,
        nargs="?",
        default=0,
        help=f"Defined tiling type index, 0..{NUM_VALID_TYPES - 1}",
    )
    parser.add_argument("-o", "--output", required=True, help="Output path")
    parser.add_argument(
        "--bound",
        type=float,
        default=3.0,
        help="Render [-bound, bound] in both axes (default 3)",
    )
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument(
        "--params", type=float, nargs="+", help="Override shape parameters"
    )
    parser.add_argument("--no-outline", action="store_true")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Render every type into the directory given by --output",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.bound <= 0:
        print("--bound must be positive")
        sys.exit(1)

    if args.all:
        cmd_all(args)
        return

    if not 0 <= args.index < NUM_VALID_TYPES:
        print(f"Index must be in 0..{NUM_VALID_TYPES - 1}, got {args.index}")
        sys.exit(1)
    cmd_render(args)


if __name__ == "__main__":
    main()
