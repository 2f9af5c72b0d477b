"""Search filtering over the exhibition collection.

Matching is a plain case-sensitive substring test on the object name; the
collection order is preserved.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from core.models import ExhibitionObject


@dataclass(frozen=True)
class FilterResult:
    """Objects matching a query, in collection order."""

    query: str
    objects: tuple[ExhibitionObject, ...]

    @property
    def count(self) -> int:
        """Number of matching objects."""
        return len(self.objects)


def filter_objects(collection: Iterable[ExhibitionObject], query: str) -> FilterResult:
    """Keep every object whose `name` contains `query` (empty matches all)."""
    q = query or ""
    return FilterResult(query=q, objects=tuple(o for o in collection if q in o.name))


def gallery_objects(
    view: Iterable[ExhibitionObject], selected: Sequence[ExhibitionObject]
) -> tuple[ExhibitionObject, ...]:
    """Return objects of `view` that are not in the selection workspace."""
    selected_ids = {o.id for o in selected}
    return tuple(o for o in view if o.id not in selected_ids)


def result_count_text(count: int) -> str:
    """Human-readable search result count."""
    if count == 1:
        return "1 gefundenes Objekt"
    return f"{count} gefundenen Objekte"
