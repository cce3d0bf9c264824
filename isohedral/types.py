"""Data types matching the tiling catalogue JSON schema."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class EdgeShape(Enum):
    """The set of constraints an edge of the prototile must follow."""

    J = "J"  # any shape
    U = "U"  # symmetric under reflection across its length
    S = "S"  # symmetric under a 180 degree rotation
    I = "I"  # noqa: E741  both of the above


@dataclass(frozen=True)
class TilingTypeRecord:
    number: int
    num_params: int
    num_aspects: int
    num_vertices: int
    num_edge_shapes: int
    edge_shapes: tuple[EdgeShape, ...]
    edge_orientations: tuple[tuple[bool, bool], ...]
    edge_shape_ids: tuple[int, ...]
    default_params: tuple[float, ...]
    vertex_coeffs: tuple[float, ...]
    translation_coeffs: tuple[float, ...]
    aspect_coeffs: tuple[float, ...]
    colouring: tuple[int, ...]

    @staticmethod
    def from_dict(d: dict) -> TilingTypeRecord:
        return TilingTypeRecord(
            number=d["number"],
            num_params=d["num_params"],
            num_aspects=d["num_aspects"],
            num_vertices=d["num_vertices"],
            num_edge_shapes=d["num_edge_shapes"],
            edge_shapes=tuple(EdgeShape(c) for c in d["edge_shapes"]),
            edge_orientations=tuple(
                (bool(fl), bool(ro)) for fl, ro in d["edge_orientations"]
            ),
            edge_shape_ids=tuple(d["edge_shape_ids"]),
            default_params=tuple(float(v) for v in d["default_params"]),
            vertex_coeffs=tuple(float(v) for v in d["vertex_coeffs"]),
            translation_coeffs=tuple(
                float(v) for v in d["translation_coeffs"]
            ),
            aspect_coeffs=tuple(float(v) for v in d["aspect_coeffs"]),
            colouring=tuple(d["colouring"]),
        )

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "num_params": self.num_params,
            "num_aspects": self.num_aspects,
            "num_vertices": self.num_vertices,
            "num_edge_shapes": self.num_edge_shapes,
            "edge_shapes": "".join(s.value for s in self.edge_shapes),
            "edge_orientations": [list(o) for o in self.edge_orientations],
            "edge_shape_ids": list(self.edge_shape_ids),
            "default_params": list(self.default_params),
            "vertex_coeffs": list(self.vertex_coeffs),
            "translation_coeffs": list(self.translation_coeffs),
            "aspect_coeffs": list(self.aspect_coeffs),
            "colouring": list(self.colouring),
        }


@dataclass
class TilingShape:
    """One edge (or half-edge part) of the prototile.

    ``transform`` maps the unit segment (0,0)-(1,0) onto the edge. ``id``
    indexes the tiling's distinct edge shapes, so edges sharing an id
    share a curve.
    """

    transform: np.ndarray
    id: int
    shape: EdgeShape
    reversed: bool
    second: bool = False


@dataclass
class TileInstance:
    """A single prototile placement produced by filling a region."""

    t1: int
    t2: int
    aspect: int
    transform: np.ndarray


@dataclass
class ScanBand:
    """A trapezoidal strip of a region expressed in lattice coordinates.

    ``xlo``/``xhi`` are the left/right boundaries at height ``ymin``;
    ``dxlo``/``dxhi`` are their change per unit of height.
    """

    xlo: float
    xhi: float
    dxlo: float
    dxhi: float
    ymin: float
    ymax: float

