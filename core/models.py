"""Core domain models for catalog records and exhibition objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImageReference:
    """A catalog image entry; `path` is a local filesystem path."""

    path: str


@dataclass(frozen=True)
class DatingEntry:
    """One dating entry with start/end years as raw text and a display label."""

    start_text: str = ""
    end_text: str = ""
    label: str = ""


@dataclass(frozen=True)
class LocationEntry:
    """A location entry tagged with its location type."""

    location_type: str
    term: str


@dataclass(frozen=True)
class RawCatalogRecord:
    """A single catalog row as supplied by the dataset source.

    Every field except `id` may be empty or absent; normalization decides
    whether the record becomes an exhibition object.
    """

    id: str
    images: tuple[ImageReference, ...] = ()
    datings: tuple[DatingEntry, ...] = ()
    materials: tuple[str, ...] = ()
    techniques: tuple[str, ...] = ()
    designation: str | None = None
    inventory_number: str = ""
    locations: tuple[LocationEntry, ...] = ()


@dataclass(frozen=True)
class ExhibitionObject:
    """A normalized, displayable museum object.

    `start`/`end` are years (negative for BCE); they are None when a dating
    entry could not be parsed. `location` is None when the record has no
    site of origin.
    """

    id: str
    preview_url: str
    start: int | None
    end: int | None
    era: str
    date: str
    inventory_id: str
    name: str
    location: str | None
    materials: tuple[str, ...] = field(default_factory=tuple)
    technology: tuple[str, ...] = field(default_factory=tuple)
