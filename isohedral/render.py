"""Rasterise a region of a tiling with Pillow.

Each tile is drawn as the straight-edged prototile polygon under its
placement transform, filled with one of three palette colours picked by
``IsohedralTiling.colour``. This is a preview renderer: edges are not
deformed into curves.

Used by ``scripts/render_tiling.py``.
"""

from __future__ import annotations

import math

import numpy as np
from PIL import Image, ImageDraw

from .affine import transform_points
from .fill import prototile_reach
from .tiling import IsohedralTiling

PALETTE = (
    (0x4E, 0x79, 0xA7),
    (0xF2, 0x8E, 0x2B),
    (0x59, 0xA1, 0x4F),
)
OUTLINE = (0x33, 0x33, 0x33)
BACKGROUND = (0xFF, 0xFF, 0xFF)


def render_region(
    tiling: IsohedralTiling,
    xmin: float,
    ymin: float,
    xmax: float,
    ymax: float,
    width: int = 800,
    height: int | None = None,
    outline: bool = True,
) -> Image.Image:
    """Draw every tile overlapping [xmin,xmax]x[ymin,ymax].

    ``height`` defaults to keeping the region's aspect ratio. World y grows
    upwards; image rows grow downwards.
    """
    if xmax <= xmin or ymax <= ymin:
        raise ValueError(
            f"Empty region: [{xmin}, {xmax}] x [{ymin}, {ymax}]"
        )
    if height is None:
        height = max(1, int(round(width * (ymax - ymin) / (xmax - xmin))))
    sx = width / (xmax - xmin)
    sy = height / (ymax - ymin)

    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    verts = np.array(tiling.vertices())
    pad = prototile_reach(tiling)
    line_width = max(1, int(math.ceil(min(width, height) / 400)))

    for tile in tiling.fill_region(xmin - pad, ymin - pad, xmax + pad, ymax + pad):
        pts = transform_points(tile.transform, verts)
        px = [
            ((x - xmin) * sx, height - (y - ymin) * sy) for x, y in pts.tolist()
        ]
        col = PALETTE[tiling.colour(tile.t1, tile.t2, tile.aspect)]
        draw.polygon(px, fill=col)
        if outline:
            draw.line(px + [px[0]], fill=OUTLINE, width=line_width)
    return img


def save_png(img: Image.Image, path: str) -> None:
    img.save(path, format="PNG")
