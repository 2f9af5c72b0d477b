"""Collection builder for exhibition objects.

Runs once at startup: filter raw records, normalize them, drop objects
without a usable dating or find spot, and sort by start year.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.models import ExhibitionObject, RawCatalogRecord
from core.services.interfaces import BuildReport, NormalizeOptions, Rejected, RejectReason
from core.services.normalize_service import normalize


class CollectionBuilder:
    """Builds the immutable, start-sorted exhibition collection."""

    def __init__(self, options: NormalizeOptions | None = None) -> None:
        self._options = options or NormalizeOptions()

    def build_with_report(self, raw_dataset: Iterable[RawCatalogRecord]) -> BuildReport:
        """Build the collection and keep track of every excluded record."""
        rejected: list[Rejected] = []

        # Step 1: only records with images and at least one dating entry
        candidates: list[RawCatalogRecord] = []
        for raw in raw_dataset:
            if not raw.images:
                rejected.append(Rejected(raw.id, RejectReason.NO_IMAGES))
            elif not raw.datings:
                rejected.append(Rejected(raw.id, RejectReason.NO_DATING))
            else:
                candidates.append(raw)

        # Steps 2-3: normalize, then validate
        kept: list[ExhibitionObject] = []
        for raw in candidates:
            result = normalize(raw, self._options)
            if isinstance(result, Rejected):
                rejected.append(result)
                continue
            if result.start is None or result.end is None:
                rejected.append(Rejected(result.id, RejectReason.INVALID_YEAR))
                continue
            if result.location is None:
                rejected.append(Rejected(result.id, RejectReason.NO_LOCATION))
                continue
            kept.append(result)

        # Step 4: sorted() is stable, ties keep input order
        objects = tuple(sorted(kept, key=lambda o: o.start))
        return BuildReport(objects=objects, rejected=rejected)

    def build(self, raw_dataset: Iterable[RawCatalogRecord]) -> tuple[ExhibitionObject, ...]:
        """Return the sorted collection for `raw_dataset`."""
        return self.build_with_report(raw_dataset).objects


def build_collection(
    raw_dataset: Iterable[RawCatalogRecord], options: NormalizeOptions | None = None
) -> tuple[ExhibitionObject, ...]:
    """Convenience wrapper around `CollectionBuilder.build`."""
    return CollectionBuilder(options).build(raw_dataset)
