"""Era lookup for the gallery scroll position.

The lookup depends only on an injected hit-test callable, so it can be
driven by any rendering layer (or a plain function in tests).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from core.models import ExhibitionObject
from core.services.interfaces import ObjectLocator


class EraLookup:
    """Map a viewport position to the era label of the object shown there."""

    def __init__(self, collection: Iterable[ExhibitionObject], locate: ObjectLocator) -> None:
        self._by_id: dict[str, ExhibitionObject] = {o.id: o for o in collection}
        self._locate = locate

    def era_at(self, position: Any) -> str | None:
        """Return the era at `position`, or None if no known object is there."""
        object_id = self._locate(position)
        if object_id is None:
            return None
        obj = self._by_id.get(object_id)
        return obj.era if obj is not None else None


def initial_era(collection: Iterable[ExhibitionObject]) -> str | None:
    """Era of the first collection entry, or None for an empty collection."""
    for obj in collection:
        return obj.era
    return None
