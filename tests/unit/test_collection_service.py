"""Tests for building the exhibition collection."""

import pytest

from core.services.collection_service import CollectionBuilder, build_collection
from core.services.interfaces import Rejected, RejectReason

pytestmark = pytest.mark.unit


def test_excludes_records_without_images_or_datings(raw_factory):
    dataset = [
        raw_factory(record_id="ok"),
        raw_factory(record_id="no-img", images=()),
        raw_factory(record_id="no-date", datings=()),
    ]

    result = build_collection(dataset)

    assert [o.id for o in result] == ["ok"]


def test_drops_invalid_years_and_missing_location(raw_factory):
    dataset = [
        raw_factory(record_id="bad-year", datings=(("", "-30", "x"),)),
        raw_factory(record_id="bad-end", datings=(("-30", "later", "x"),)),
        raw_factory(record_id="no-loc", location=None),
        raw_factory(record_id="ok"),
    ]

    report = CollectionBuilder().build_with_report(dataset)

    assert [o.id for o in report.objects] == ["ok"]
    assert report.rejected == [
        Rejected("bad-year", RejectReason.INVALID_YEAR),
        Rejected("bad-end", RejectReason.INVALID_YEAR),
        Rejected("no-loc", RejectReason.NO_LOCATION),
    ]


def test_report_counts_reasons(raw_factory):
    dataset = [
        raw_factory(record_id="1", images=()),
        raw_factory(record_id="2", images=()),
        raw_factory(record_id="3", datings=()),
    ]

    counts = CollectionBuilder().build_with_report(dataset).count_by_reason()

    assert counts == {RejectReason.NO_IMAGES: 2, RejectReason.NO_DATING: 1}


def test_sorted_ascending_by_start(raw_factory):
    dataset = [
        raw_factory(record_id="late", datings=(("300", "400", "x"),)),
        raw_factory(record_id="early", datings=(("-120000", "-80000", "x"),)),
        raw_factory(record_id="mid", datings=(("-200", "-30", "x"),)),
    ]

    result = build_collection(dataset)

    assert [o.id for o in result] == ["early", "mid", "late"]
    assert all(a.start <= b.start for a, b in zip(result, result[1:]))


def test_sort_is_stable_for_equal_start(raw_factory):
    dataset = [
        raw_factory(record_id="first", datings=(("-50", "-10", "x"),)),
        raw_factory(record_id="other", datings=(("-100", "0", "x"),)),
        raw_factory(record_id="second", datings=(("-50", "20", "x"),)),
        raw_factory(record_id="third", datings=(("-50", "-40", "x"),)),
    ]

    result = build_collection(dataset)

    assert [o.id for o in result] == ["other", "first", "second", "third"]


def test_result_is_immutable_tuple(raw_factory):
    result = build_collection([raw_factory()])
    assert isinstance(result, tuple)
    with pytest.raises(AttributeError):
        result[0].name = "changed"  # type: ignore[misc]


def test_empty_dataset_gives_empty_collection():
    assert build_collection([]) == ()


def test_scenario_single_record(raw_factory):
    raw = raw_factory(
        datings=(("-200", "-180", "Hellenistisch"), ("-50", "-30", "Späthellenistisch")),
        location="Rome",
    )

    (obj,) = build_collection([raw])

    assert (obj.start, obj.end, obj.location) == (-200, -30, "Rome")
    assert obj.date == "(200 - 30 v Chr.)"
