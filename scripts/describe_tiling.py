#!/usr/bin/env python3
"""Describe an isohedral tiling type.

Usage (from the repo root):
    python scripts/describe_tiling.py                  # the 21st defined type
    python scripts/describe_tiling.py 0                # IH01
    python scripts/describe_tiling.py 5 --region 0 0 100 100
    python scripts/describe_tiling.py 5 --dump-json    # raw catalogue record
    python scripts/describe_tiling.py --list           # every defined type
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add the repo root to path so we can import isohedral
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from isohedral.catalog import NUM_VALID_TYPES, get_tiling_type  # noqa: E402
from isohedral.tiling import IsohedralTiling  # noqa: E402


def _fmt_point(p):
    return f"({p[0]:.6f}, {p[1]:.6f})"


def cmd_list(args):
    tiling = IsohedralTiling(get_tiling_type(0))
    for index in range(NUM_VALID_TYPES):
        tiling.select_tiling(index)
        shapes = "".join(
            tiling.edge_shape(i).value for i in range(tiling.num_edge_shapes)
        )
        print(
            f"{index:2d}  {tiling.tiling_type}  "
            f"vertices={tiling.num_vertices} aspects={tiling.num_aspects} "
            f"params={tiling.num_params} shapes={shapes}"
        )


def cmd_describe(args):
    tiling_type = get_tiling_type(args.index)
    tiling = IsohedralTiling(tiling_type)

    if args.dump_json:
        print(json.dumps(tiling.record.to_dict(), indent=2))
        return

    print(f"This is tiling type {tiling_type}. It has:")
    print(
        f"  - {tiling.num_vertices} vertices, which can be controlled "
        f"with {tiling.num_params} parameters."
    )
    for i, v in enumerate(tiling.vertices()):
        print(f"    - vertex {i}: {_fmt_point(v)}")
    print(f"  - {tiling.num_edge_shapes} distinct edge shapes")
    print("  - the edges of the prototile are:")
    for i, shape in enumerate(tiling.shapes()):
        print(
            f"    - edge {i} has shape {shape.id} "
            f"(of type {shape.shape.value})"
        )
    print(
        f"  - {tiling.num_aspects} aspects, "
        f"translations t1={_fmt_point(tiling.t1)} t2={_fmt_point(tiling.t2)}"
    )

    xmin, ymin, xmax, ymax = args.region
    num_tiles = sum(1 for _ in tiling.fill_region(xmin, ymin, xmax, ymax))
    print(
        f"  - To fill the region [{xmin}, {ymin}]-[{xmax}, {ymax}] "
        f"you would need to draw about {num_tiles} tiles"
    )


def main():
    parser = argparse.ArgumentParser(
        description="Describe an isohedral tiling type"
    )
    parser.add_argument(
        "index",
        type=int,
        nargs="?",
        default=21,
        help=f"Defined tiling type index, 0..{NUM_VALID_TYPES - 1} (default 21)",
    )
    parser.add_argument(
        "--region",
        type=float,
        nargs=4,
        metavar=("XMIN", "YMIN", "XMAX", "YMAX"),
        default=[0.0, 0.0, 100.0, 100.0],
        help="Region to count tiles for",
    )
    parser.add_argument(
        "--dump-json", action="store_true", help="Print the catalogue record"
    )
    parser.add_argument(
        "--list", action="store_true", help="List every defined tiling type"
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.list:
        cmd_list(args)
        return

    if not 0 <= args.index < NUM_VALID_TYPES:
        print(f"Index must be in 0..{NUM_VALID_TYPES - 1}, got {args.index}")
        sys.exit(1)
    cmd_describe(args)


if __name__ == "__main__":
    main()
