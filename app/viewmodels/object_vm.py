"""Lightweight view model wrapper around `ExhibitionObject`."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import ExhibitionObject


@dataclass(frozen=True)
class ObjectVM:
    """Expose the detail panel fields of the focused object."""

    record: ExhibitionObject
    technique_limit: int = 4

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def inventory_id(self) -> str:
        return self.record.inventory_id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def materials_text(self) -> str:
        """All materials, comma-separated."""
        return ", ".join(self.record.materials)

    @property
    def technology_text(self) -> str:
        """The first `technique_limit` techniques, comma-separated."""
        return ", ".join(self.record.technology[: max(0, self.technique_limit)])

    @property
    def dating_text(self) -> str:
        """Era label and formatted date on two lines."""
        return "\n".join(part for part in (self.record.era, self.record.date) if part)

    @property
    def location(self) -> str:
        return self.record.location or ""
