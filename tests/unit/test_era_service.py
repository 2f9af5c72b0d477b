"""Tests for era lookup and browser state transitions."""

import pytest

from core.services import browser_state as bs
from core.services.browser_state import BrowserState
from core.services.era_service import EraLookup, initial_era

pytestmark = pytest.mark.unit


def test_era_at_returns_era_of_located_object(collection):
    lookup = EraLookup(collection, lambda pos: {10: "b", 20: "c"}.get(pos))

    assert lookup.era_at(10) == "Hellenistisch"
    assert lookup.era_at(20) == "Kaiserzeit"


def test_era_at_none_when_nothing_located(collection):
    lookup = EraLookup(collection, lambda pos: None)
    assert lookup.era_at((50, 250)) is None


def test_era_at_none_for_unknown_id(collection):
    lookup = EraLookup(collection, lambda pos: "not-in-collection")
    assert lookup.era_at(0) is None


def test_initial_era(collection):
    assert initial_era(collection) == "Archaisch"
    assert initial_era(()) is None


def test_set_era_is_sticky():
    state = bs.set_era(BrowserState(), "Kaiserzeit")

    assert bs.set_era(state, None) is state
    assert bs.set_era(state, "Spätantike").current_era == "Spätantike"


def test_browser_state_transitions(collection):
    state = bs.set_search(BrowserState(), "Amph")
    state = bs.add_object(state, collection[0])
    state = bs.add_object(state, collection[3])
    state = bs.focus_object(state, "a")
    state = bs.remove_focused(state)

    assert state.search == "Amph"
    assert state.selection.selected_ids == ["d"]
    assert state.selection.focused_id == "d"
