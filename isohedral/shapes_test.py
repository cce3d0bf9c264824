"""Tests for edge and edge-part iteration."""

import numpy as np
import pytest

from isohedral.affine import transform_point
from isohedral.catalog import NUM_VALID_TYPES, get_tiling_type
from isohedral.tiling import IsohedralTiling
from isohedral.types import EdgeShape

ALL_INDICES = list(range(NUM_VALID_TYPES))
SPLIT = (EdgeShape.U, EdgeShape.S)


def _edge_shape(t, i):
    return t.edge_shape(t.edge_shape_id(i))


@pytest.mark.parametrize("index", ALL_INDICES)
def test_shapes_one_per_edge(index):
    t = IsohedralTiling(get_tiling_type(index))
    shapes = list(t.shapes())
    assert len(shapes) == t.num_vertices
    for i, s in enumerate(shapes):
        assert s.id == t.edge_shape_id(i)
        assert s.shape == _edge_shape(t, i)
        assert s.reversed == t.edge_reversed(i)
        assert not s.second
        np.testing.assert_array_equal(s.transform, t.edge_transform(i))


@pytest.mark.parametrize("index", ALL_INDICES)
def test_parts_split_symmetric_edges(index):
    t = IsohedralTiling(get_tiling_type(index))
    n = t.num_vertices
    parts = list(t.parts())
    num_split = sum(1 for i in range(n) if _edge_shape(t, i) in SPLIT)
    assert len(parts) == n + num_split

    it = iter(parts)
    for i in range(n):
        shp = _edge_shape(t, i)
        v0, v1 = t.vertex(i), t.vertex((i + 1) % n)
        if shp not in SPLIT:
            whole = next(it)
            assert whole.shape == shp
            assert whole.reversed == t.edge_reversed(i)
            assert not whole.second
            continue

        mid = (v0 + v1) / 2
        first = next(it)
        second = next(it)
        assert first.id == second.id == t.edge_shape_id(i)
        assert not first.reversed and not first.second
        assert second.reversed and second.second
        np.testing.assert_allclose(
            transform_point(first.transform, (0.0, 0.0)), v0, atol=1e-9
        )
        np.testing.assert_allclose(
            transform_point(first.transform, (1.0, 0.0)), mid, atol=1e-9
        )
        np.testing.assert_allclose(
            transform_point(second.transform, (0.0, 0.0)), v1, atol=1e-9
        )
        np.testing.assert_allclose(
            transform_point(second.transform, (1.0, 0.0)), mid, atol=1e-9
        )


def test_j_edges_are_whole():
    # IH01 is all J edges
    t = IsohedralTiling(get_tiling_type(0))
    parts = list(t.parts())
    shapes = list(t.shapes())
    assert len(parts) == len(shapes) == 6
    for p, s in zip(parts, shapes):
        np.testing.assert_array_equal(p.transform, s.transform)


def test_u_edge_halves():
    # IH12: shapes "UJ"
    t = IsohedralTiling(get_tiling_type(11))
    assert t.edge_shape(0) == EdgeShape.U
    u_parts = [p for p in t.parts() if p.shape == EdgeShape.U]
    u_edges = [s for s in t.shapes() if s.shape == EdgeShape.U]
    assert len(u_parts) == 2 * len(u_edges) > 0


def test_iteration_is_restartable():
    t = IsohedralTiling(get_tiling_type(11))
    first = [(p.id, p.reversed, p.second) for p in t.parts()]
    again = [(p.id, p.reversed, p.second) for p in t.parts()]
    assert first == again
    assert len(list(t.shapes())) == len(list(t.shapes()))
