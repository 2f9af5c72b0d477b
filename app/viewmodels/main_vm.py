"""ViewModel orchestrating the exhibit collection and browser state."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from app.viewmodels.object_vm import ObjectVM
from core.models import ExhibitionObject
from core.services import browser_state as bs
from core.services.browser_state import BrowserState
from core.services.era_service import EraLookup, initial_era
from core.services.filter_service import filter_objects, gallery_objects
from core.services.interfaces import ObjectLocator
from core.services.selection_service import focused_object, initial_selection

Scheduler = Callable[[Callable[[], None]], None]


def _no_object(_position: Any) -> str | None:
    return None


def _run_now(callback: Callable[[], None]) -> None:
    callback()


@dataclass(frozen=True)
class BrowserSnapshot:
    """Read-only view of everything the rendering layer needs for one tick."""

    gallery: tuple[ExhibitionObject, ...]
    result_count: int
    selected: tuple[ExhibitionObject, ...]
    focused_id: str | None
    focused: ObjectVM | None
    search: str
    current_era: str | None


class ExhibitVM:
    """Main application view-model.

    Holds the immutable collection and the current `BrowserState`, and turns
    UI events into state transitions.
    """

    def __init__(
        self,
        collection: Sequence[ExhibitionObject],
        locate: ObjectLocator | None = None,
        schedule: Scheduler | None = None,
        preselect_first: bool = False,
        technique_limit: int = 4,
        reference_position: Any = None,
    ) -> None:
        """Create an ExhibitVM.

        Args:
            collection: Built exhibition collection (never mutated).
            locate: Hit-test capability mapping a gallery position to an object id.
            schedule: Runs a callback on the next event-loop tick (deferred era
                re-check after a search change). Defaults to running immediately.
            preselect_first: Start with the first collection entry in the workspace.
            technique_limit: Number of techniques shown in the detail panel.
            reference_position: Gallery position used before the first scroll.
        """
        self._collection: tuple[ExhibitionObject, ...] = tuple(collection)
        self._by_id = {o.id: o for o in self._collection}
        self._era_lookup = EraLookup(self._collection, locate or _no_object)
        self._schedule = schedule or _run_now
        self._technique_limit = technique_limit
        self._last_position: Any = reference_position
        self._listeners: list[Callable[[BrowserSnapshot], None]] = []
        self.state = BrowserState(
            selection=initial_selection(self._collection, preselect_first),
            current_era=initial_era(self._collection),
        )

    @property
    def collection(self) -> tuple[ExhibitionObject, ...]:
        """The exhibition collection built at startup."""
        return self._collection

    def set_locator(self, locate: ObjectLocator) -> None:
        """Install the hit-test capability once the view exists."""
        self._era_lookup = EraLookup(self._collection, locate)

    def subscribe(self, listener: Callable[[BrowserSnapshot], None]) -> None:
        """Register a callback invoked with a fresh snapshot after each change."""
        self._listeners.append(listener)

    def snapshot(self) -> BrowserSnapshot:
        """Return the render tuple for the current state."""
        view = filter_objects(self._collection, self.state.search)
        selection = self.state.selection
        focused = focused_object(selection)
        return BrowserSnapshot(
            gallery=gallery_objects(view.objects, selection.selected),
            result_count=view.count,
            selected=selection.selected,
            focused_id=selection.focused_id,
            focused=ObjectVM(focused, self._technique_limit) if focused else None,
            search=self.state.search,
            current_era=self.state.current_era,
        )

    # UI events

    def on_search_change(self, text: str) -> None:
        """Apply a new search query and re-check the era on the next tick."""
        self._set_state(bs.set_search(self.state, text))
        self._schedule(self.refresh_era)

    def on_scroll(self, position: Any) -> None:
        """Update the era label for the gallery position."""
        self._last_position = position
        self._update_era(position)

    def on_drop_object(self, object_id: str) -> None:
        """Move the dropped object into the workspace and focus it."""
        obj = self._by_id.get(object_id)
        if obj is None:
            logger.warning("Dropped unknown object id: {}", object_id)
            return
        if self.state.selection.contains(object_id):
            logger.debug("Object {} already selected, refocusing", object_id)
        self._set_state(bs.add_object(self.state, obj))
        logger.info("Selected object {} ({})", obj.id, obj.name)

    def on_focus_object(self, object_id: str | None) -> None:
        """Focus a workspace object; unknown ids leave nothing focused."""
        self._set_state(bs.focus_object(self.state, object_id))

    def on_return_focused(self) -> None:
        """Return the focused object to the gallery."""
        returned = self.state.selection.focused_id
        if returned is None:
            return
        self._set_state(bs.remove_focused(self.state))
        logger.info("Returned object {} to gallery", returned)

    def refresh_era(self) -> None:
        """Re-evaluate the era at the last known scroll position."""
        self._update_era(self._last_position)

    # Internal helpers

    def _update_era(self, position: Any) -> None:
        era = self._era_lookup.era_at(position)
        if era is None or era == self.state.current_era:
            return
        self._set_state(bs.set_era(self.state, era))

    def _set_state(self, state: BrowserState) -> None:
        if state == self.state:
            return
        self.state = state
        if self._listeners:
            snap = self.snapshot()
            for listener in list(self._listeners):
                listener(snap)
