"""Tests for the exhibit view-model (no Qt required)."""

import pytest

from app.viewmodels.main_vm import ExhibitVM
from app.viewmodels.object_vm import ObjectVM

pytestmark = pytest.mark.unit


class FakeGallery:
    """Stand-in for the rendered gallery: the object at the reference point."""

    def __init__(self):
        self.visible = []

    def locate(self, position):
        return self.visible[0] if self.visible else None


@pytest.fixture
def deferred():
    """Scheduler that queues callbacks until `run()` is called."""

    class Queue:
        def __init__(self):
            self.pending = []

        def __call__(self, callback):
            self.pending.append(callback)

        def run(self):
            pending, self.pending = self.pending, []
            for cb in pending:
                cb()

    return Queue()


def test_initial_snapshot(collection):
    vm = ExhibitVM(collection)

    snap = vm.snapshot()

    assert snap.gallery == collection
    assert snap.result_count == 4
    assert snap.selected == ()
    assert snap.focused is None
    assert snap.search == ""
    assert snap.current_era == "Archaisch"


def test_empty_collection_is_tolerated():
    vm = ExhibitVM(())

    snap = vm.snapshot()

    assert snap.gallery == ()
    assert snap.current_era is None
    vm.on_scroll(None)
    vm.on_search_change("x")
    vm.on_return_focused()
    assert vm.snapshot().current_era is None


def test_preselect_first(collection):
    vm = ExhibitVM(collection, preselect_first=True)

    snap = vm.snapshot()

    assert [o.id for o in snap.selected] == ["a"]
    assert snap.focused_id == "a"
    assert [o.id for o in snap.gallery] == ["b", "c", "d"]


def test_drop_moves_object_to_workspace(collection):
    vm = ExhibitVM(collection)

    vm.on_drop_object("c")

    snap = vm.snapshot()
    assert [o.id for o in snap.selected] == ["c"]
    assert [o.id for o in snap.gallery] == ["a", "b", "d"]
    assert snap.result_count == 4
    assert isinstance(snap.focused, ObjectVM)
    assert snap.focused.id == "c"


def test_drop_unknown_id_is_ignored(collection):
    vm = ExhibitVM(collection)
    vm.on_drop_object("nope")
    assert vm.snapshot().selected == ()


def test_focus_and_return(collection):
    vm = ExhibitVM(collection)
    vm.on_drop_object("a")
    vm.on_drop_object("b")
    vm.on_drop_object("c")

    vm.on_focus_object("b")
    vm.on_return_focused()

    snap = vm.snapshot()
    assert [o.id for o in snap.selected] == ["a", "c"]
    assert snap.focused_id == "a"
    assert "b" in [o.id for o in snap.gallery]


def test_focus_unknown_id_renders_nothing(collection):
    vm = ExhibitVM(collection)
    vm.on_drop_object("a")

    vm.on_focus_object("zzz")

    assert vm.snapshot().focused is None
    vm.on_return_focused()
    assert [o.id for o in vm.snapshot().selected] == ["a"]


def test_scroll_updates_era_and_keeps_last_known(collection):
    gallery = FakeGallery()
    vm = ExhibitVM(collection, locate=gallery.locate)

    gallery.visible = ["c", "d"]
    vm.on_scroll((50, 250))
    assert vm.snapshot().current_era == "Kaiserzeit"

    gallery.visible = []
    vm.on_scroll((50, 250))
    assert vm.snapshot().current_era == "Kaiserzeit"


def test_search_rechecks_era_on_next_tick(collection, deferred):
    gallery = FakeGallery()
    vm = ExhibitVM(collection, locate=gallery.locate, schedule=deferred)
    gallery.visible = ["a", "b"]
    vm.on_scroll((50, 250))

    vm.on_search_change("Fibel")
    gallery.visible = ["c"]

    assert vm.snapshot().current_era == "Archaisch"
    assert [o.id for o in vm.snapshot().gallery] == ["c"]
    deferred.run()
    assert vm.snapshot().current_era == "Kaiserzeit"


def test_multiple_pending_rechecks_are_harmless(collection, deferred):
    gallery = FakeGallery()
    vm = ExhibitVM(collection, locate=gallery.locate, schedule=deferred)

    vm.on_search_change("F")
    vm.on_search_change("Fi")
    gallery.visible = ["c"]
    deferred.run()

    assert vm.snapshot().current_era == "Kaiserzeit"


def test_listeners_receive_snapshots(collection):
    vm = ExhibitVM(collection)
    seen = []
    vm.subscribe(seen.append)

    vm.on_search_change("Amph")
    vm.on_drop_object("a")

    assert seen[0].result_count == 2
    assert [o.id for o in seen[-1].selected] == ["a"]


def test_object_vm_detail_fields(collection):
    detail = ObjectVM(collection[0], technique_limit=4)

    assert detail.materials_text == "Ton"
    assert detail.technology_text == "gedreht, bemalt, poliert, gebrannt"
    assert detail.location == "Rome"
    assert detail.dating_text == "Archaisch"
