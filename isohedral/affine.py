"""Affine evaluation of catalogue coefficient tables, plus fixed matrices.

Every quantity in a tiling type (vertex positions, translation vectors,
aspect transforms) is an affine function of the tiling's parameter vector.
A coefficient table stores these functions back to back: each scalar takes
``num_params + 1`` coefficients, the last being the constant term. So a
point consumes ``2 * (num_params + 1)`` coefficients and a 2x3 affine
matrix consumes ``6 * (num_params + 1)``, row-major.

Transforms are 3x3 numpy arrays whose last row is ``[0, 0, 1]``; points
are length-2 arrays.

The tables are static and trusted, so a short table is a catalogue bug:
lookups past the end raise ``IndexError`` instead of being truncated.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def evaluate_scalar(
    coeffs: Sequence[float],
    params: Sequence[float],
    num_params: int,
    offset: int = 0,
) -> float:
    """Dot the first ``num_params`` coefficients with ``params``, plus the
    constant term at ``coeffs[offset + num_params]``."""
    total = 0.0
    for idx in range(num_params):
        total += coeffs[offset + idx] * params[idx]
    # Affine term
    total += coeffs[offset + num_params]
    return total


def evaluate_point(
    coeffs: Sequence[float],
    params: Sequence[float],
    num_params: int,
    offset: int = 0,
) -> np.ndarray:
    stride = num_params + 1
    return np.array(
        [
            evaluate_scalar(coeffs, params, num_params, offset),
            evaluate_scalar(coeffs, params, num_params, offset + stride),
        ]
    )


def evaluate_affine(
    coeffs: Sequence[float],
    params: Sequence[float],
    num_params: int,
    offset: int = 0,
) -> np.ndarray:
    stride = num_params + 1
    m = np.identity(3)
    for row in range(2):
        for col in range(3):
            m[row, col] = evaluate_scalar(coeffs, params, num_params, offset)
            offset += stride
    return m


def match(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    """The similarity taking the segment (0,0)-(1,0) onto p-q."""
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    return np.array(
        [
            [dx, -dy, p[0]],
            [dy, dx, p[1]],
            [0.0, 0.0, 1.0],
        ]
    )


def _frozen(rows: list[list[float]]) -> np.ndarray:
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


# Indexed by 2 * flip + reverse. Each maps the unit segment onto itself.
ORIENTS: tuple[np.ndarray, ...] = (
    _frozen([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]),  # identity
    _frozen([[-1.0, 0.0, 1.0], [0.0, -1.0, 0.0], [0.0, 0.0, 1.0]]),  # rot
    _frozen([[-1.0, 0.0, 1.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]),  # flip
    _frozen([[1.0, 0.0, 0.0], [0.0, -1.0, 0.0], [0.0, 0.0, 1.0]]),  # rofl
)

# Half-edge placements for edges split into two parts.
TSPI_U: tuple[np.ndarray, ...] = (
    _frozen([[0.5, 0.0, 0.0], [0.0, 0.5, 0.0], [0.0, 0.0, 1.0]]),
    _frozen([[-0.5, 0.0, 1.0], [0.0, 0.5, 0.0], [0.0, 0.0, 1.0]]),
)

TSPI_S: tuple[np.ndarray, ...] = (
    _frozen([[0.5, 0.0, 0.0], [0.0, 0.5, 0.0], [0.0, 0.0, 1.0]]),
    _frozen([[-0.5, 0.0, 1.0], [0.0, -0.5, 0.0], [0.0, 0.0, 1.0]]),
)


def orient(flip: bool, reverse: bool) -> np.ndarray:
    return ORIENTS[2 * int(flip) + int(reverse)]


def transform_point(m: np.ndarray, p: Sequence[float]) -> np.ndarray:
    return m[:2, :2] @ np.asarray(p, dtype=np.float64) + m[:2, 2]


def transform_points(m: np.ndarray, pts: Sequence) -> np.ndarray:
    """Apply ``m`` to an (N, 2) array of points."""
    arr = np.asarray(pts, dtype=np.float64).reshape(-1, 2)
    return arr @ m[:2, :2].T + m[:2, 2]


def translated(m: np.ndarray, dx: float, dy: float) -> np.ndarray:
    """Return a copy of ``m`` with (dx, dy) added to its translation."""
    out = np.array(m, dtype=np.float64)
    out[0, 2] += dx
    out[1, 2] += dy
    return out
