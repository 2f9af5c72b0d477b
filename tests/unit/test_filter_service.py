"""Tests for search filtering."""

import pytest

from core.services.filter_service import filter_objects, gallery_objects, result_count_text

pytestmark = pytest.mark.unit


def test_empty_query_returns_everything(collection):
    result = filter_objects(collection, "")

    assert result.objects == collection
    assert result.count == len(collection)


def test_substring_match_preserves_order(collection):
    result = filter_objects(collection, "Amphor")
    assert [o.id for o in result.objects] == ["a", "d"]


def test_match_is_case_sensitive(collection):
    assert filter_objects(collection, "amphora").count == 0
    assert filter_objects(collection, "Fibel").count == 1


def test_no_match_is_valid(collection):
    result = filter_objects(collection, "Schwert")
    assert result.objects == ()
    assert result.count == 0


def test_gallery_excludes_selected(collection):
    selected = (collection[1], collection[3])
    assert [o.id for o in gallery_objects(collection, selected)] == ["a", "c"]


def test_result_count_text():
    assert result_count_text(1) == "1 gefundenes Objekt"
    assert result_count_text(0) == "0 gefundenen Objekte"
    assert result_count_text(12) == "12 gefundenen Objekte"
