"""Tests for affine coefficient evaluation and the fixed matrices."""

import numpy as np
import pytest

from isohedral.affine import (
    ORIENTS,
    TSPI_S,
    TSPI_U,
    evaluate_affine,
    evaluate_point,
    evaluate_scalar,
    match,
    orient,
    transform_point,
    transform_points,
    translated,
)


class TestEvaluateScalar:
    def test_no_params_returns_constant(self):
        assert evaluate_scalar([2.5], [], 0) == 2.5
        assert evaluate_scalar([2.5], [99.0, -3.0], 0) == 2.5

    def test_dot_plus_constant(self):
        # 1*4 + 2*5 + 3
        assert evaluate_scalar([1.0, 2.0, 3.0], [4.0, 5.0], 2) == 17.0

    def test_offset(self):
        coeffs = [9.0, 9.0, 9.0, 1.0, 2.0, 3.0]
        assert evaluate_scalar(coeffs, [4.0, 5.0], 2, offset=3) == 17.0

    def test_linear_in_params(self):
        coeffs = [0.5, -2.0, 4.0, 1.25]
        p = [1.0, 2.0, 3.0]
        q = [-4.0, 0.5, 8.0]
        zero = evaluate_scalar(coeffs, [0.0, 0.0, 0.0], 3)
        fp = evaluate_scalar(coeffs, p, 3) - zero
        fq = evaluate_scalar(coeffs, q, 3) - zero
        pq = [a + b for a, b in zip(p, q)]
        assert evaluate_scalar(coeffs, pq, 3) - zero == pytest.approx(fp + fq)

    def test_short_table_fails_loudly(self):
        with pytest.raises(IndexError):
            evaluate_scalar([1.0, 2.0], [1.0, 1.0], 2)


class TestEvaluatePoint:
    def test_consumes_two_scalars(self):
        coeffs = [1.0, 0.0, 5.0, 0.0, 1.0, 7.0]
        p = evaluate_point(coeffs, [2.0, 3.0], 2)
        assert p.tolist() == [7.0, 10.0]

    def test_no_params(self):
        p = evaluate_point([0.25, -1.5], [123.0], 0)
        assert p.tolist() == [0.25, -1.5]

    def test_offset_selects_later_point(self):
        coeffs = [0.0, 0.0, 3.0, 4.0]
        assert evaluate_point(coeffs, [], 0, offset=2).tolist() == [3.0, 4.0]


class TestEvaluateAffine:
    def test_row_major_fill(self):
        m = evaluate_affine([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [], 0)
        np.testing.assert_array_equal(
            m, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [0.0, 0.0, 1.0]]
        )

    def test_with_params(self):
        # each cell is p0 * c + k with c = 1 and k = cell number
        coeffs = []
        for k in range(6):
            coeffs += [1.0, float(k)]
        m = evaluate_affine(coeffs, [10.0], 1)
        np.testing.assert_array_equal(
            m, [[10.0, 11.0, 12.0], [13.0, 14.0, 15.0], [0.0, 0.0, 1.0]]
        )

    def test_short_table_fails_loudly(self):
        with pytest.raises(IndexError):
            evaluate_affine([1.0] * 5, [], 0)


class TestMatch:
    def test_maps_unit_segment(self):
        p = np.array([1.0, 2.0])
        q = np.array([4.0, -2.0])
        m = match(p, q)
        np.testing.assert_allclose(transform_point(m, (0.0, 0.0)), p)
        np.testing.assert_allclose(transform_point(m, (1.0, 0.0)), q)

    def test_preserves_orientation(self):
        m = match(np.array([0.0, 0.0]), np.array([0.0, 2.0]))
        assert np.linalg.det(m[:2, :2]) > 0
        # (0,1) is to the left of the segment, and stays to its left
        np.testing.assert_allclose(transform_point(m, (0.0, 1.0)), [-2.0, 0.0])


class TestOrients:
    @pytest.mark.parametrize(
        "flip,reverse,start,det",
        [
            (False, False, 0.0, 1.0),
            (False, True, 1.0, 1.0),
            (True, False, 1.0, -1.0),
            (True, True, 0.0, -1.0),
        ],
    )
    def test_unit_segment_onto_itself(self, flip, reverse, start, det):
        m = orient(flip, reverse)
        a = transform_point(m, (0.0, 0.0))
        b = transform_point(m, (1.0, 0.0))
        np.testing.assert_allclose(a, [start, 0.0])
        np.testing.assert_allclose(b, [1.0 - start, 0.0])
        assert np.linalg.det(m[:2, :2]) == pytest.approx(det)

    def test_constants_are_read_only(self):
        for m in (*ORIENTS, *TSPI_U, *TSPI_S):
            with pytest.raises(ValueError):
                m[0, 0] = 2.0


class TestHalfTransforms:
    @pytest.mark.parametrize("halves", [TSPI_U, TSPI_S])
    def test_halves_meet_at_midpoint(self, halves):
        first, second = halves
        np.testing.assert_allclose(transform_point(first, (0.0, 0.0)), [0, 0])
        np.testing.assert_allclose(transform_point(first, (1.0, 0.0)), [0.5, 0])
        np.testing.assert_allclose(transform_point(second, (0.0, 0.0)), [1, 0])
        np.testing.assert_allclose(
            transform_point(second, (1.0, 0.0)), [0.5, 0]
        )

    def test_u_second_half_is_mirror(self):
        # mirrored across the segment's perpendicular: y is kept
        assert transform_point(TSPI_U[1], (0.5, 1.0))[1] == pytest.approx(0.5)

    def test_s_second_half_is_rotated(self):
        assert transform_point(TSPI_S[1], (0.5, 1.0))[1] == pytest.approx(-0.5)


def test_transform_points_batch():
    m = np.array([[0.0, -1.0, 1.0], [1.0, 0.0, 2.0], [0.0, 0.0, 1.0]])
    pts = transform_points(m, [(1.0, 0.0), (0.0, 1.0)])
    np.testing.assert_allclose(pts, [[1.0, 3.0], [0.0, 2.0]])


def test_translated_copies():
    m = ORIENTS[0]
    t = translated(m, 2.0, -3.0)
    assert t[0, 2] == 2.0 and t[1, 2] == -3.0
    assert m[0, 2] == 0.0
    t[0, 0] = 5.0  # writable
