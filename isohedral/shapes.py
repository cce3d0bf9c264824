"""Walk the edges of a tiling's prototile.

``iter_shapes`` yields one ``TilingShape`` per polygon edge. ``iter_parts``
splits edges with an intrinsic symmetry so their curve only has to be
authored once:

  * U and S edges are emitted as two halves. The first half uses the
    ``TSPI_U``/``TSPI_S`` entry selected by the edge's reversal flag and is
    never reversed; the second uses the complementary entry and is always
    reversed, with ``second=True``.
  * J edges have no symmetry to exploit, and any half of an I edge is as
    good as the other, so both are emitted whole, exactly once.

Both are generators: finite, lazily evaluated, and restartable by calling
them again.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .affine import TSPI_S, TSPI_U
from .types import EdgeShape, TilingShape

if TYPE_CHECKING:
    from .tiling import IsohedralTiling


def iter_shapes(tiling: IsohedralTiling) -> Iterator[TilingShape]:
    for idx in range(tiling.num_vertices):
        shape_id = tiling.edge_shape_id(idx)
        yield TilingShape(
            transform=tiling.edge_transform(idx),
            id=shape_id,
            shape=tiling.edge_shape(shape_id),
            reversed=tiling.edge_reversed(idx),
        )


def iter_parts(tiling: IsohedralTiling) -> Iterator[TilingShape]:
    for idx in range(tiling.num_vertices):
        shape_id = tiling.edge_shape_id(idx)
        shp = tiling.edge_shape(shape_id)
        edge = tiling.edge_transform(idx)
        rev = tiling.edge_reversed(idx)

        if shp in (EdgeShape.J, EdgeShape.I):
            yield TilingShape(transform=edge, id=shape_id, shape=shp, reversed=rev)
            continue

        halves = TSPI_U if shp == EdgeShape.U else TSPI_S
        first, second = (halves[1], halves[0]) if rev else (halves[0], halves[1])
        yield TilingShape(
            transform=edge @ first, id=shape_id, shape=shp, reversed=False
        )
        yield TilingShape(
            transform=edge @ second,
            id=shape_id,
            shape=shp,
            reversed=True,
            second=True,
        )
