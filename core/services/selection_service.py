"""Selection workspace state and its transitions, decoupled from any UI toolkit.

The state is an immutable value; each transition returns a new state. The
workspace holds each object at most once and at most one object is focused.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from core.models import ExhibitionObject


@dataclass(frozen=True)
class SelectionState:
    """Objects pulled into the workspace (drop order) and the focused id."""

    selected: tuple[ExhibitionObject, ...] = ()
    focused_id: str | None = None

    def contains(self, object_id: str) -> bool:
        """True if an object with `object_id` is in the workspace."""
        return any(o.id == object_id for o in self.selected)

    @property
    def selected_ids(self) -> list[str]:
        """Ids of selected objects in drop order."""
        return [o.id for o in self.selected]


def initial_selection(
    collection: Sequence[ExhibitionObject], preselect_first: bool = False
) -> SelectionState:
    """Return the startup selection.

    Empty by default; with `preselect_first` the first collection entry is
    placed in the workspace and focused.
    """
    if preselect_first and collection:
        first = collection[0]
        return SelectionState(selected=(first,), focused_id=first.id)
    return SelectionState()


def add(state: SelectionState, obj: ExhibitionObject) -> SelectionState:
    """Append `obj` to the workspace and focus it.

    Dropping an object that is already selected only re-focuses it.
    """
    if state.contains(obj.id):
        return SelectionState(selected=state.selected, focused_id=obj.id)
    return SelectionState(selected=state.selected + (obj,), focused_id=obj.id)


def focus(state: SelectionState, object_id: str | None) -> SelectionState:
    """Focus `object_id`; an id outside the workspace leaves nothing focused."""
    if object_id is None or not state.contains(object_id):
        return SelectionState(selected=state.selected, focused_id=None)
    return SelectionState(selected=state.selected, focused_id=object_id)


def remove_focused(state: SelectionState) -> SelectionState:
    """Return the focused object to the gallery.

    Focus moves to the new first workspace entry, or is cleared when the
    workspace becomes empty. No-op when nothing is focused.
    """
    if state.focused_id is None:
        return state
    remaining = tuple(o for o in state.selected if o.id != state.focused_id)
    return SelectionState(
        selected=remaining,
        focused_id=remaining[0].id if remaining else None,
    )


def focused_object(state: SelectionState) -> ExhibitionObject | None:
    """Return the focused object, or None."""
    if state.focused_id is None:
        return None
    for o in state.selected:
        if o.id == state.focused_id:
            return o
    return None
