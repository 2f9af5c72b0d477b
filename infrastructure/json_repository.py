"""JSON dataset loading for raw catalog records.

The dataset is a JSON array of catalog objects using the catalog's native
keys (`imdasid`, `bilder`, `datierung`, ...). Parsing is tolerant: missing
optional fields become empty values, and entries that cannot be parsed at
all are logged and skipped.
"""

from __future__ import annotations

from collections.abc import Iterator
import json
from pathlib import Path
from typing import Any

from loguru import logger

from core.models import DatingEntry, ImageReference, LocationEntry, RawCatalogRecord

KEY_ID = "imdasid"
KEY_IMAGES = "bilder"
KEY_IMAGE_PATH = "pfad"
KEY_DATINGS = "datierung"
KEY_DATING_START = "anfang"
KEY_DATING_END = "ende"
KEY_DATING_LABEL = "datum"
KEY_MATERIALS = "materialien"
KEY_TECHNIQUES = "techniken"
KEY_DESIGNATION = "objektbezeichnung"
KEY_INVENTORY = "inventarnummer"
KEY_LOCATIONS = "orte"
KEY_LOCATION_TYPE = "ortstyp"
KEY_TERM = "term"


def _text(value: Any) -> str:
    """Return `value` as text; None becomes an empty string."""
    if value is None:
        return ""
    return str(value)


def _list_of_dicts(value: Any) -> list[dict]:
    """Return the dict entries of a JSON list; anything else yields []."""
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _terms(value: Any) -> tuple[str, ...]:
    """Extract `term` strings from a list of term objects."""
    return tuple(_text(v.get(KEY_TERM)) for v in _list_of_dicts(value))


def parse_record(entry: dict) -> RawCatalogRecord:
    """Convert one catalog JSON object into a `RawCatalogRecord`.

    Raises:
        KeyError: If the record has no identifier.
    """
    raw_id = entry.get(KEY_ID)
    if raw_id is None or _text(raw_id) == "":
        raise KeyError(KEY_ID)

    images = tuple(
        ImageReference(path=_text(img.get(KEY_IMAGE_PATH)))
        for img in _list_of_dicts(entry.get(KEY_IMAGES))
    )
    datings = tuple(
        DatingEntry(
            start_text=_text(d.get(KEY_DATING_START)),
            end_text=_text(d.get(KEY_DATING_END)),
            label=_text(d.get(KEY_DATING_LABEL)),
        )
        for d in _list_of_dicts(entry.get(KEY_DATINGS))
    )
    locations = tuple(
        LocationEntry(
            location_type=_text(loc.get(KEY_LOCATION_TYPE)),
            term=_text(loc.get(KEY_TERM)),
        )
        for loc in _list_of_dicts(entry.get(KEY_LOCATIONS))
    )

    designation = entry.get(KEY_DESIGNATION)
    name: str | None = None
    if isinstance(designation, dict) and designation.get(KEY_TERM) is not None:
        name = _text(designation.get(KEY_TERM))

    return RawCatalogRecord(
        id=_text(raw_id),
        images=images,
        datings=datings,
        materials=_terms(entry.get(KEY_MATERIALS)),
        techniques=_terms(entry.get(KEY_TECHNIQUES)),
        designation=name,
        inventory_number=_text(entry.get(KEY_INVENTORY)),
        locations=locations,
    )


class JsonDatasetRepository:
    """Load raw catalog records from a JSON file."""

    def load(self, json_path: str | Path) -> Iterator[RawCatalogRecord]:
        """Yield `RawCatalogRecord` from the JSON array at `json_path`.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            ValueError: If the top-level value is not a list.
        """
        path = Path(json_path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Dataset must be a JSON array: {path}")

        logger.info("Loading {} catalog entries from {}", len(data), path)
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                logger.error("Dataset entry {} is not an object: {!r}", index, entry)
                continue
            try:
                yield parse_record(entry)
            except (KeyError, TypeError, ValueError) as ex:
                logger.error("Dataset entry error: {} | index={}", ex, index)
                continue
