"""Core service interfaces and shared data structures.

This module defines the rejection records produced while building the
collection, the normalization options, and the hit-test protocol the era
lookup depends on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from core.models import ExhibitionObject


class RejectReason(str, Enum):
    """Why a raw record did not make it into the collection."""

    NO_IMAGES = "no_images"
    NO_DATING = "no_dating"
    INVALID_YEAR = "invalid_year"
    NO_LOCATION = "no_location"


@dataclass(frozen=True)
class Rejected:
    """A raw record excluded from the collection.

    Attributes:
        record_id: Identifier of the raw record.
        reason: Why the record was excluded.
    """

    record_id: str
    reason: RejectReason


@dataclass(frozen=True)
class NormalizeOptions:
    """Catalog and display conventions used by the normalizer.

    Attributes:
        local_prefix: Filesystem prefix of image paths (after slash normalization).
        url_prefix: Servable URL prefix that replaces `local_prefix`.
        origin_location_type: Location type tag marking the find spot.
        bce_suffix: Suffix of the date string when the end year is negative.
        ce_suffix: Suffix of the date string otherwise.
        thousands_separator: Digit grouping separator for years.
    """

    local_prefix: str = "Z:/Objekt/Bild"
    url_prefix: str = "http://localhost:3000"
    origin_location_type: str = "Fundort/Herkunft"
    bce_suffix: str = "v Chr."
    ce_suffix: str = "n Chr."
    thousands_separator: str = "."


@dataclass
class BuildReport:
    """Outcome of a collection build.

    Attributes:
        objects: The sorted, immutable collection.
        rejected: Records excluded at any step, in input order per step.
    """

    objects: tuple[ExhibitionObject, ...]
    rejected: list[Rejected]

    def count_by_reason(self) -> dict[RejectReason, int]:
        """Return the number of rejected records per reason."""
        counts: dict[RejectReason, int] = {}
        for r in self.rejected:
            counts[r.reason] = counts.get(r.reason, 0) + 1
        return counts


class ObjectLocator(Protocol):
    """Hit-test capability supplied by the rendering layer.

    Returns the id of the object rendered at `position`, or None.
    """

    def __call__(self, position: Any) -> str | None:
        raise NotImplementedError
