"""Enumerate the tiles of an isohedral tiling that cover a region.

The lattice vectors ``t1`` and ``t2`` give every tile an integer address
``(t1, t2, aspect)``: the tile is aspect transform ``aspect`` moved by
``t1 * T1 + t2 * T2``. Filling a region therefore reduces to finding the
integer lattice points inside the region once it is mapped into lattice
coordinates, which turns the query rectangle into a parallelogram.

**What is enumerated.** Every lattice point inside the mapped
parallelogram, with all of its aspects. The scan also emits a fringe of
nearby lattice points: a partial column on the left of each row, the row
below the bottom corner and one extra row at the top. Every emitted tile
origin lies within ``|T1| + |T2|`` of the region, so some emitted tiles do
not touch it. Tiles whose footprint reaches into the region from a lattice
point outside it are not enumerated; to get every tile that overlaps the
region, grow the region by the prototile's reach
(``prototile_reach``) before filling.

**Scan bands.** The mapped parallelogram is cut into at most three
horizontal trapezoids (``ScanBand``) so that within each band the left and
right boundaries are single straight lines:

  1. The four corners are mapped through the inverse of ``[T1 | T2]``. A
     negative determinant mirrors the shape, so two corners are swapped to
     keep counter-clockwise order.
  2. If an edge is horizontal the shape is already a single trapezoid.
  3. Otherwise the lowest corner is the bottom, the opposite corner the
     top, and the other two are sorted into left and right. The bands are
     split at the heights of the left and right corners.

The top band's ``ymax`` is raised by one so the boundary row survives
truncation to integer rows.

**Iteration.** ``FillRegionIterator`` walks rows bottom to top. Entering a
band at row ``y`` it evaluates the band's boundaries at height ``y``,
then advances them by the slopes each row. Within a row it emits every
integer ``x`` with ``floor(xlo) <= x < xhi + 1e-7`` and, for each, every
aspect. The epsilon keeps a column sitting exactly on the right boundary
from being dropped (or emitted twice) through rounding; the row test uses
it the same way. Leaving a band carries the row forward, so no row is
visited twice.

The iterator is forward-only. ``FillAlgorithm`` is the re-iterable factory
returned by ``IsohedralTiling.fill_region``; it snapshots the tiling's
lattice and aspect transforms so a later ``reset`` cannot skew a fill in
progress.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from .affine import transform_points, translated
from .types import ScanBand, TileInstance

if TYPE_CHECKING:
    from .tiling import IsohedralTiling

logger = logging.getLogger(__name__)

FILL_EPSILON = 1e-7

Point = tuple[float, float]


def _slope(p: Point, q: Point) -> float:
    """Change in x per unit of y along p-q (0 for a flat segment)."""
    dy = q[1] - p[1]
    if abs(dy) < FILL_EPSILON:
        return 0.0
    return (q[0] - p[0]) / dy


def _sample_at_height(p: Point, q: Point, y: float) -> Point:
    dy = q[1] - p[1]
    if dy == 0.0:
        return (p[0], y)
    t = (y - p[1]) / dy
    return ((1.0 - t) * p[0] + t * q[0], y)


def _band(a: Point, b: Point, c: Point, d: Point, top: bool) -> ScanBand:
    # a, b: bottom left/right. c, d: top right/left.
    return ScanBand(
        xlo=a[0],
        xhi=b[0],
        dxlo=_slope(a, d),
        dxhi=_slope(b, c),
        ymin=a[1],
        ymax=c[1] + 1.0 if top else c[1],
    )


def _band_fix_x(a: Point, b: Point, c: Point, d: Point, top: bool) -> ScanBand:
    if a[0] > b[0]:
        return _band(b, a, d, c, top)
    return _band(a, b, c, d, top)


def _band_fix_y(a: Point, b: Point, c: Point, d: Point, top: bool) -> ScanBand:
    if a[1] > c[1]:
        return _band(c, d, a, b, top)
    return _band(a, b, c, d, top)


def to_lattice(
    t1: Sequence[float], t2: Sequence[float], pts: Sequence[Sequence[float]]
) -> tuple[list[Point], float]:
    """Express world points in the basis (t1, t2).

    Returns the mapped points and the determinant of ``[t1 | t2]``. Raises
    ValueError if the basis is degenerate.
    """
    det = t1[0] * t2[1] - t2[0] * t1[1]
    if abs(det) < 1e-12:
        raise ValueError(f"Degenerate lattice: t1={list(t1)}, t2={list(t2)}")
    inv = 1.0 / det
    m00, m01 = t2[1] * inv, -t2[0] * inv
    m10, m11 = -t1[1] * inv, t1[0] * inv
    mapped = [
        (m00 * p[0] + m01 * p[1], m10 * p[0] + m11 * p[1]) for p in pts
    ]
    return mapped, det


def compute_scan_bands(
    t1: Sequence[float],
    t2: Sequence[float],
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
) -> list[ScanBand]:
    """Split the parallelogram a-b-c-d (counter-clockwise, world space)
    into scan bands in lattice coordinates.

    The corners must form a parallelogram: the split relies on the lowest
    and highest mapped corners being opposite, and on a horizontal edge
    having a horizontal opposite edge.
    """
    pts, det = to_lattice(t1, t2, (a, b, c, d))
    if det < 0.0:
        pts[1], pts[3] = pts[3], pts[1]

    if abs(pts[0][1] - pts[1][1]) < FILL_EPSILON:
        return [_band_fix_y(pts[0], pts[1], pts[2], pts[3], True)]
    if abs(pts[1][1] - pts[2][1]) < FILL_EPSILON:
        return [_band_fix_y(pts[1], pts[2], pts[3], pts[0], True)]

    lowest = 0
    for idx in range(1, 4):
        if pts[idx][1] < pts[lowest][1]:
            lowest = idx

    bottom = pts[lowest]
    left = pts[(lowest + 1) % 4]
    top = pts[(lowest + 2) % 4]
    right = pts[(lowest + 3) % 4]

    if left[0] > right[0]:
        left, right = right, left

    if left[1] < right[1]:
        r1 = _sample_at_height(bottom, right, left[1])
        l2 = _sample_at_height(left, top, right[1])
        return [
            _band_fix_x(bottom, bottom, r1, left, False),
            _band_fix_x(left, r1, right, l2, False),
            _band_fix_x(l2, right, top, top, True),
        ]

    l1 = _sample_at_height(bottom, left, right[1])
    r2 = _sample_at_height(right, top, left[1])
    return [
        _band_fix_x(bottom, bottom, right, l1, False),
        _band_fix_x(l1, right, r2, left, False),
        _band_fix_x(left, r2, top, top, True),
    ]


class FillRegionIterator:
    """Forward-only iterator over the ``TileInstance``s of a set of bands."""

    def __init__(
        self,
        bands: Sequence[ScanBand],
        t1: np.ndarray,
        t2: np.ndarray,
        aspects: Sequence[np.ndarray],
    ) -> None:
        self._bands = bands
        self._t1 = t1
        self._t2 = t2
        self._aspects = aspects
        self._band_idx = -1
        self._y: int | None = None
        self._xlo = 0.0
        self._xhi = 0.0
        self._x = 0
        self._asp = 0
        self._done = False
        self._next_band()

    def __iter__(self) -> FillRegionIterator:
        return self

    def __next__(self) -> TileInstance:
        while not self._done:
            if self._x >= self._xhi + FILL_EPSILON:
                self._next_row()
            elif self._asp >= len(self._aspects):
                self._asp = 0
                self._x += 1
            else:
                tile = self._current()
                self._asp += 1
                return tile
        raise StopIteration

    def _current(self) -> TileInstance:
        x, y = self._x, self._y
        assert y is not None
        transform = translated(
            self._aspects[self._asp],
            x * self._t1[0] + y * self._t2[0],
            x * self._t1[1] + y * self._t2[1],
        )
        return TileInstance(t1=x, t2=y, aspect=self._asp, transform=transform)

    def _next_row(self) -> None:
        band = self._bands[self._band_idx]
        assert self._y is not None
        self._y += 1
        if self._y >= band.ymax + FILL_EPSILON:
            self._next_band()
            return
        self._xlo += band.dxlo
        self._xhi += band.dxhi
        self._x = math.floor(self._xlo)
        self._asp = 0

    def _next_band(self) -> None:
        while True:
            self._band_idx += 1
            if self._band_idx >= len(self._bands):
                self._done = True
                return
            band = self._bands[self._band_idx]
            start = math.floor(band.ymin)
            y = start if self._y is None else max(self._y, start)
            self._y = y
            if y < band.ymax + FILL_EPSILON:
                rise = y - band.ymin
                self._xlo = band.xlo + rise * band.dxlo
                self._xhi = band.xhi + rise * band.dxhi
                self._x = math.floor(self._xlo)
                self._asp = 0
                return


def prototile_reach(tiling: IsohedralTiling) -> float:
    """Padding that makes a fill catch every tile overlapping its region.

    The farthest any aspect's prototile vertex lies from its lattice
    origin, plus ``|t1| + |t2|`` of slack for the scan's boundary rounding.
    """
    verts = np.array(tiling.vertices())
    reach = 0.0
    for i in range(tiling.num_aspects):
        pts = transform_points(tiling.aspect_transform(i), verts)
        reach = max(reach, float(np.max(np.hypot(pts[:, 0], pts[:, 1]))))
    return reach + float(np.hypot(*tiling.t1)) + float(np.hypot(*tiling.t2))


class FillAlgorithm:
    """Re-iterable set of tiles for a parallelogram of the plane.

    See the module docstring for exactly which tiles are produced.
    """

    def __init__(
        self,
        tiling: IsohedralTiling,
        a: Sequence[float],
        b: Sequence[float],
        c: Sequence[float],
        d: Sequence[float],
    ) -> None:
        self._t1 = tiling.t1
        self._t2 = tiling.t2
        self._aspects = tuple(
            tiling.aspect_transform(i) for i in range(tiling.num_aspects)
        )
        self.bands = compute_scan_bands(self._t1, self._t2, a, b, c, d)
        logger.debug(
            "Fill of %s: %d scan band(s)", tiling.tiling_type, len(self.bands)
        )

    def __iter__(self) -> FillRegionIterator:
        return FillRegionIterator(self.bands, self._t1, self._t2, self._aspects)
