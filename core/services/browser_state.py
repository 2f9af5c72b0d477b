"""Browser session state as one immutable record with pure transitions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from core.models import ExhibitionObject
from core.services import selection_service
from core.services.selection_service import SelectionState


@dataclass(frozen=True)
class BrowserState:
    """Everything that changes while the browser is open.

    The collection itself is not part of the state; it is built once and
    passed alongside.
    """

    selection: SelectionState = field(default_factory=SelectionState)
    search: str = ""
    current_era: str | None = None


def add_object(state: BrowserState, obj: ExhibitionObject) -> BrowserState:
    """Drop `obj` into the workspace."""
    return replace(state, selection=selection_service.add(state.selection, obj))


def focus_object(state: BrowserState, object_id: str | None) -> BrowserState:
    """Focus a workspace object."""
    return replace(state, selection=selection_service.focus(state.selection, object_id))


def remove_focused(state: BrowserState) -> BrowserState:
    """Return the focused object to the gallery."""
    return replace(state, selection=selection_service.remove_focused(state.selection))


def set_search(state: BrowserState, search: str) -> BrowserState:
    """Replace the search query."""
    return replace(state, search=search or "")


def set_era(state: BrowserState, era: str | None) -> BrowserState:
    """Update the displayed era; None keeps the last known value."""
    if era is None:
        return state
    return replace(state, current_era=era)
