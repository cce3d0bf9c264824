"""Load the tiling-type catalogue from its bundled JSON file.

The catalogue ships as ``isohedral/data/tiling_types.json``: one record per
defined isohedral type, keyed by its ``number`` (the "IHnn" slot). Slots
that are not defined (IH00, IH19, IH35, ...) are simply absent from the
file; ``catalog.py`` turns the list into the fixed 94-slot table.

Used by:
  - ``catalog.py``: builds the process-wide catalogue at import time.
  - ``scripts/describe_tiling.py``: ``--dump-json`` prints a raw record.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .types import TilingTypeRecord

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


def builtin_catalogue_path() -> Path:
    """Return the path to the bundled catalogue JSON file."""
    return _DATA_DIR / "tiling_types.json"


def load_catalogue_dict(path: Path) -> dict:
    """Load a catalogue JSON file and return the raw dict."""
    with open(path) as f:
        return json.load(f)


def load_catalogue(path: Path) -> tuple[int, list[TilingTypeRecord]]:
    """Load a catalogue JSON file.

    Returns:
        ``(num_slots, records)`` with records in file order. No validation
        happens here; see ``catalog.validate_record``.
    """
    data = load_catalogue_dict(path)
    records = [TilingTypeRecord.from_dict(d) for d in data["tiling_types"]]
    logger.debug("Loaded %d tiling types from %s", len(records), path)
    return data["num_slots"], records
