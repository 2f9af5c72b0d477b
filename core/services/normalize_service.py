"""Normalization of raw catalog records into exhibition objects.

All functions are pure and never raise on malformed text: an unparseable
year yields None, a missing find spot yields None, and the collection
builder drops such objects afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from core.models import ExhibitionObject, RawCatalogRecord
from core.services.interfaces import NormalizeOptions, Rejected, RejectReason

_YEAR_RX = re.compile(r"^\s*([+-]?\d+)")


def parse_year(text: str | None) -> int | None:
    """Parse the leading base-10 integer of `text`.

    Leading whitespace and a sign are accepted and trailing characters are
    ignored ("-200 " -> -200, "12th" -> 12). Returns None for empty or
    non-numeric text.
    """
    if text is None:
        return None
    m = _YEAR_RX.match(str(text))
    if not m:
        return None
    return int(m.group(1))


def _strict_min(values: Iterable[int | None]) -> int | None:
    """Minimum of `values`; None if empty or if any value is None."""
    result: int | None = None
    for v in values:
        if v is None:
            return None
        if result is None or v < result:
            result = v
    return result


def _strict_max(values: Iterable[int | None]) -> int | None:
    """Maximum of `values`; None if empty or if any value is None."""
    result: int | None = None
    for v in values:
        if v is None:
            return None
        if result is None or v > result:
            result = v
    return result


def format_year(value: int, separator: str = ".") -> str:
    """Format the absolute integer part of `value` with digit grouping."""
    return format(abs(int(value)), ",").replace(",", separator)


def format_date(start: int | None, end: int | None, options: NormalizeOptions) -> str:
    """Build the display string `(<|start|> - <|end|> <suffix>)`.

    Returns an empty string when either year is undefined.
    """
    if start is None or end is None:
        return ""
    suffix = options.bce_suffix if end < 0 else options.ce_suffix
    sep = options.thousands_separator
    return f"({format_year(start, sep)} - {format_year(end, sep)} {suffix})"


def preview_url(path: str, options: NormalizeOptions) -> str:
    """Rewrite a local image path into a servable URL.

    Backslashes become forward slashes, then the first occurrence of the
    local prefix is replaced with the URL prefix.
    """
    normalized = path.replace("\\", "/")
    return normalized.replace(options.local_prefix, options.url_prefix, 1)


def find_origin_location(raw: RawCatalogRecord, options: NormalizeOptions) -> str | None:
    """Return the term of the first location typed as site of origin."""
    for loc in raw.locations:
        if loc.location_type == options.origin_location_type:
            return loc.term
    return None


def normalize(
    raw: RawCatalogRecord, options: NormalizeOptions | None = None
) -> ExhibitionObject | Rejected:
    """Normalize `raw` into an `ExhibitionObject`.

    Records without images or dating entries are `Rejected`. Any dating entry
    whose year cannot be parsed leaves the corresponding aggregate (`start`
    or `end`) as None; the object is still returned so that the builder can
    report the reason.
    """
    opts = options or NormalizeOptions()
    if not raw.images:
        return Rejected(raw.id, RejectReason.NO_IMAGES)
    if not raw.datings:
        return Rejected(raw.id, RejectReason.NO_DATING)

    start = _strict_min(parse_year(d.start_text) for d in raw.datings)
    end = _strict_max(parse_year(d.end_text) for d in raw.datings)

    return ExhibitionObject(
        id=raw.id,
        preview_url=preview_url(raw.images[0].path, opts),
        start=start,
        end=end,
        era=raw.datings[0].label,
        date=format_date(start, end, opts),
        inventory_id=raw.inventory_number,
        name=raw.designation or "",
        location=find_origin_location(raw, opts),
        materials=tuple(raw.materials),
        technology=tuple(raw.techniques),
    )
