"""The fixed catalogue of isohedral tiling types.

There are 94 slots, IH00 through IH93, of which 81 hold a tiling type; the
others (IH00, IH19, IH35, ...) are undefined and stay ``None``. Callers
never address slots directly: ``get_tiling_type`` maps a dense index
``0..80`` over the defined slots to a ``TilingType`` handle, so undefined
slots cannot be selected through the public API.

Every record is validated when the catalogue is loaded: all table lengths
are exact functions of the record's vertex/aspect/parameter counts, so a
mismatch means the data file is corrupt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .catalog_io import builtin_catalogue_path, load_catalogue
from .types import TilingTypeRecord

logger = logging.getLogger(__name__)

MAX_PARAMS = 6
MAX_ASPECTS = 12
MAX_VERTICES = 6
NUM_SLOTS = 94
NUM_VALID_TYPES = 81
COLOURING_SIZE = 19


@dataclass(frozen=True)
class TilingType:
    """Handle for one slot of the catalogue."""

    number: int

    def __str__(self) -> str:
        return f"IH{self.number:02d}"


def validate_record(rec: TilingTypeRecord) -> None:
    """Raise ValueError if ``rec``'s tables don't fit its declared sizes."""
    name = f"IH{rec.number:02d}"
    np1 = rec.num_params + 1

    def check(ok: bool, what: str) -> None:
        if not ok:
            raise ValueError(f"Malformed catalogue record {name}: {what}")

    check(0 <= rec.num_params <= MAX_PARAMS, "num_params out of range")
    check(1 <= rec.num_aspects <= MAX_ASPECTS, "num_aspects out of range")
    check(1 <= rec.num_vertices <= MAX_VERTICES, "num_vertices out of range")
    check(len(rec.edge_shapes) == rec.num_edge_shapes, "edge_shapes length")
    check(
        len(rec.edge_orientations) == rec.num_vertices,
        "edge_orientations length",
    )
    check(len(rec.edge_shape_ids) == rec.num_vertices, "edge_shape_ids length")
    check(
        all(0 <= i < rec.num_edge_shapes for i in rec.edge_shape_ids),
        "edge_shape_ids out of range",
    )
    check(len(rec.default_params) == rec.num_params, "default_params length")
    check(
        len(rec.vertex_coeffs) == 2 * rec.num_vertices * np1,
        "vertex_coeffs length",
    )
    check(len(rec.translation_coeffs) == 4 * np1, "translation_coeffs length")
    check(
        len(rec.aspect_coeffs) == 6 * rec.num_aspects * np1,
        "aspect_coeffs length",
    )
    check(len(rec.colouring) == COLOURING_SIZE, "colouring length")
    check(rec.colouring[18] > 0, "colouring modulus must be positive")
    check(
        all(0 <= c <= 2 for c in rec.colouring[:18]),
        "colouring entries must be 0, 1 or 2",
    )


def _build_slots(
    num_slots: int, records: list[TilingTypeRecord]
) -> tuple[TilingTypeRecord | None, ...]:
    if num_slots != NUM_SLOTS:
        raise ValueError(f"Expected {NUM_SLOTS} catalogue slots, got {num_slots}")
    slots: list[TilingTypeRecord | None] = [None] * num_slots
    for rec in records:
        if not 0 <= rec.number < num_slots:
            raise ValueError(f"Catalogue slot IH{rec.number:02d} out of range")
        if slots[rec.number] is not None:
            raise ValueError(f"Duplicate catalogue slot IH{rec.number:02d}")
        validate_record(rec)
        slots[rec.number] = rec
    return tuple(slots)


_SLOTS = _build_slots(*load_catalogue(builtin_catalogue_path()))

# Slot numbers of the defined tiling types, in ascending order.
TILING_TYPES: tuple[int, ...] = tuple(
    i for i, rec in enumerate(_SLOTS) if rec is not None
)

if len(TILING_TYPES) != NUM_VALID_TYPES:
    raise ValueError(
        f"Expected {NUM_VALID_TYPES} defined tiling types, "
        f"got {len(TILING_TYPES)}"
    )

logger.debug("Catalogue ready: %d of %d slots defined", len(TILING_TYPES), NUM_SLOTS)


def get_tiling_type(index: int) -> TilingType:
    """Return the ``index``-th defined tiling type (0 gives IH01).

    Raises ValueError unless ``0 <= index < 81``.
    """
    if not 0 <= index < NUM_VALID_TYPES:
        raise ValueError(
            f"Tiling type index must be in [0, {NUM_VALID_TYPES}), got {index}"
        )
    return TilingType(TILING_TYPES[index])


def get_record(tiling_type: TilingType) -> TilingTypeRecord:
    """Look up the catalogue record for ``tiling_type``.

    Raises ValueError for undefined or out-of-range slots.
    """
    number = tiling_type.number
    rec = _SLOTS[number] if 0 <= number < NUM_SLOTS else None
    if rec is None:
        raise ValueError(f"Tiling type {tiling_type} is undefined")
    return rec
