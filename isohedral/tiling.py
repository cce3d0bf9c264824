"""The isohedral tiling state machine.

An ``IsohedralTiling`` binds one catalogue record plus a parameter vector
and caches everything derived from them:

  * the prototile's vertices,
  * one transform per polygon edge (placing the unit segment (0,0)-(1,0)
    onto the edge, oriented by the record's flip/reverse bits) plus the
    edge's reversal flag,
  * one transform per aspect (the symmetric copies of the prototile in a
    fundamental cell),
  * the lattice translation vectors ``t1`` and ``t2``.

Derived state is recomputed on ``reset`` (new type, default parameters)
and on ``set_parameters``. Each mutation computes the new geometry into
locals first and commits it in one step, so a rejected call leaves the
previous state intact and readers never see a half-updated tiling. Cached
arrays are read-only; concurrent reads are safe, mutations need external
exclusion.

Reading the geometry is delegated to two consumers that never mutate it:

  * ``shapes.py``: edge and half-edge iteration for drawing prototiles.
  * ``fill.py``: enumerating the placements that cover a region.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from .affine import evaluate_affine, evaluate_point, match, orient
from .catalog import TilingType, get_record, get_tiling_type
from .fill import FillAlgorithm
from .shapes import iter_parts, iter_shapes
from .types import EdgeShape, TilingShape, TilingTypeRecord

logger = logging.getLogger(__name__)

DEGENERATE_TOLERANCE = 1e-12


@dataclass
class _Geometry:
    vertices: tuple[np.ndarray, ...]
    edges: tuple[np.ndarray, ...]
    reversals: tuple[bool, ...]
    aspects: tuple[np.ndarray, ...]
    t1: np.ndarray
    t2: np.ndarray


def _readonly(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


def _compute_geometry(
    rec: TilingTypeRecord, params: Sequence[float]
) -> _Geometry:
    np_ = rec.num_params
    ntv = rec.num_vertices
    stride = np_ + 1

    # Vertex locations
    vertices = tuple(
        _readonly(evaluate_point(rec.vertex_coeffs, params, np_, 2 * stride * i))
        for i in range(ntv)
    )

    # Edge transforms and reversals from orientation bits
    edges = []
    reversals = []
    for i, (fl, ro) in enumerate(rec.edge_orientations):
        reversals.append(fl != ro)
        m = match(vertices[i], vertices[(i + 1) % ntv]) @ orient(fl, ro)
        edges.append(_readonly(m))

    aspects = tuple(
        _readonly(evaluate_affine(rec.aspect_coeffs, params, np_, 6 * stride * i))
        for i in range(rec.num_aspects)
    )

    t1 = evaluate_point(rec.translation_coeffs, params, np_)
    t2 = evaluate_point(rec.translation_coeffs, params, np_, 2 * stride)
    cross = t1[0] * t2[1] - t1[1] * t2[0]
    if abs(cross) < DEGENERATE_TOLERANCE:
        raise ValueError(
            f"IH{rec.number:02d}: translation vectors are parallel "
            f"(t1={t1.tolist()}, t2={t2.tolist()})"
        )

    return _Geometry(
        vertices=vertices,
        edges=tuple(edges),
        reversals=tuple(reversals),
        aspects=aspects,
        t1=_readonly(t1),
        t2=_readonly(t2),
    )


def _check_index(idx: int, size: int, what: str) -> None:
    if not 0 <= idx < size:
        raise IndexError(f"{what} index {idx} out of range [0, {size})")


class IsohedralTiling:
    """One isohedral tiling type with a concrete parameter vector."""

    def __init__(self, tiling_type: TilingType) -> None:
        self.reset(tiling_type)

    def reset(self, tiling_type: TilingType) -> None:
        """Switch to ``tiling_type`` with its default parameters.

        Raises ValueError for an undefined slot, leaving state untouched.
        """
        rec = get_record(tiling_type)
        params = list(rec.default_params)
        geometry = _compute_geometry(rec, params)
        self._tiling_type = tiling_type
        self._record = rec
        self._params = params
        self._geometry = geometry
        logger.debug("Reset to %s with parameters %s", tiling_type, params)

    def select_tiling(self, index: int) -> None:
        """Reset to the ``index``-th defined tiling type (0..80)."""
        self.reset(get_tiling_type(index))

    # -- Accessors -------------------------------------------------------

    @property
    def tiling_type(self) -> TilingType:
        return self._tiling_type

    @property
    def record(self) -> TilingTypeRecord:
        return self._record

    @property
    def num_params(self) -> int:
        """Number of parameters controlling the prototile's shape (0 to 6)."""
        return self._record.num_params

    @property
    def num_edge_shapes(self) -> int:
        return self._record.num_edge_shapes

    @property
    def num_vertices(self) -> int:
        return self._record.num_vertices

    @property
    def num_aspects(self) -> int:
        return self._record.num_aspects

    def edge_shape(self, idx: int) -> EdgeShape:
        """Shape of the ``idx``-th distinct edge shape (not polygon edge)."""
        _check_index(idx, self.num_edge_shapes, "Edge shape")
        return self._record.edge_shapes[idx]

    def edge_shape_id(self, idx: int) -> int:
        """Distinct-shape id used by polygon edge ``idx``."""
        _check_index(idx, self.num_vertices, "Edge")
        return self._record.edge_shape_ids[idx]

    def edge_transform(self, idx: int) -> np.ndarray:
        _check_index(idx, self.num_vertices, "Edge")
        return self._geometry.edges[idx]

    def edge_reversed(self, idx: int) -> bool:
        _check_index(idx, self.num_vertices, "Edge")
        return self._geometry.reversals[idx]

    def vertex(self, idx: int) -> np.ndarray:
        _check_index(idx, self.num_vertices, "Vertex")
        return self._geometry.vertices[idx]

    def vertices(self) -> list[np.ndarray]:
        return list(self._geometry.vertices)

    def aspect_transform(self, idx: int) -> np.ndarray:
        _check_index(idx, self.num_aspects, "Aspect")
        return self._geometry.aspects[idx]

    @property
    def t1(self) -> np.ndarray:
        """First lattice translation vector."""
        return self._geometry.t1

    @property
    def t2(self) -> np.ndarray:
        """Second lattice translation vector."""
        return self._geometry.t2

    def colour(self, t1: int, t2: int, aspect: int) -> int:
        """Colour (0, 1 or 2) of a tile, for a 3-colouring of the tiling.

        ``t1``, ``t2`` and ``aspect`` identify a tile as produced by
        ``fill_region``; lattice indices may be negative.
        """
        _check_index(aspect, self.num_aspects, "Aspect")
        clr = self._record.colouring
        nc = clr[18]

        # Python's % is already non-negative for a positive modulus
        mt1 = t1 % nc
        mt2 = t2 % nc
        col = clr[aspect]
        for _ in range(mt1):
            col = clr[12 + col]
        for _ in range(mt2):
            col = clr[15 + col]
        return col

    # -- Parameters ------------------------------------------------------

    def get_parameters(self) -> list[float]:
        """A copy of the parameter vector (length ``num_params``)."""
        return list(self._params)

    def set_parameters(self, params: Sequence[float]) -> None:
        """Replace the parameter vector and recompute the geometry.

        Raises ValueError unless exactly ``num_params`` values are given.
        """
        if len(params) != self.num_params:
            raise ValueError(
                f"{self._tiling_type} takes {self.num_params} parameters, "
                f"got {len(params)}"
            )
        new_params = [float(p) for p in params]
        geometry = _compute_geometry(self._record, new_params)
        self._params = new_params
        self._geometry = geometry
        logger.debug("Parameters of %s set to %s", self._tiling_type, new_params)

    # -- Iteration -------------------------------------------------------

    def shapes(self) -> Iterator[TilingShape]:
        """Iterate over the prototile's edges, one per vertex."""
        return iter_shapes(self)

    def parts(self) -> Iterator[TilingShape]:
        """Iterate over edge parts; U and S edges come as two halves."""
        return iter_parts(self)

    def fill_region(
        self, xmin: float, ymin: float, xmax: float, ymax: float
    ) -> FillAlgorithm:
        """Tiles at the lattice points of the rectangle [xmin,xmax]x[ymin,ymax].

        Iterating the result yields ``TileInstance`` values. Every lattice
        point inside the rectangle is produced, along with a fringe of
        points within ``|t1| + |t2|`` of it. Tiles that only reach into the
        rectangle from outside are not; grow the rectangle by
        ``fill.prototile_reach(self)`` to get every overlapping tile.
        """
        return FillAlgorithm(
            self,
            (xmin, ymin),
            (xmax, ymin),
            (xmax, ymax),
            (xmin, ymax),
        )

    def fill_region_quad(
        self,
        a: Sequence[float],
        b: Sequence[float],
        c: Sequence[float],
        d: Sequence[float],
    ) -> FillAlgorithm:
        """Like ``fill_region`` for the parallelogram a-b-c-d.

        The corners go counter-clockwise. The scan only handles
        parallelograms, not general quadrilaterals.
        """
        return FillAlgorithm(self, a, b, c, d)
