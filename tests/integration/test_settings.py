"""Tests for JSON settings and asset path mapping."""

import json
from pathlib import Path

import pytest

from infrastructure.settings import JsonSettings
from infrastructure.utils import scaled_size, url_to_asset_path

pytestmark = pytest.mark.integration


@pytest.fixture
def settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "dataset": {"path": "data/objects.json"},
                "display": {"technique_limit": "3", "bce_suffix": 7},
                "selection": {"preselect_first": True},
                "gallery": {"thumb_height": "big"},
            }
        ),
        encoding="utf-8",
    )
    return JsonSettings(path)


def test_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonSettings(tmp_path / "nope.json")


def test_dotted_get(settings):
    assert settings.get("selection.preselect_first") is True
    assert settings.get("selection.unknown", 5) == 5
    assert settings.get("dataset.path.deeper") is None


def test_typed_getters_fall_back(settings):
    assert settings.get_int("display.technique_limit", 4) == 3
    assert settings.get_int("gallery.thumb_height", 150) == 150
    assert settings.get_str("display.bce_suffix", "v Chr.") == "v Chr."
    assert settings.get_bool("selection.preselect_first", False) is True
    assert settings.get_bool("display.technique_limit", False) is False


def test_resolve_path_relative_to_settings(settings, tmp_path):
    assert settings.resolve_path("dataset.path", "x.json") == tmp_path / "data" / "objects.json"


def test_url_to_asset_path(tmp_path):
    path = url_to_asset_path("http://localhost:3000/10234/a%20b.jpg", "http://localhost:3000", tmp_path)
    assert path == (tmp_path / "10234" / "a b.jpg").resolve()


def test_url_to_asset_path_rejects_foreign_or_escaping_urls(tmp_path):
    assert url_to_asset_path("https://example.org/a.jpg", "http://localhost:3000", tmp_path) is None
    assert url_to_asset_path("http://localhost:3000/../../etc/passwd", "http://localhost:3000", tmp_path) is None
    assert url_to_asset_path("", "http://localhost:3000", Path(tmp_path)) is None


def test_scaled_size():
    assert scaled_size(300, 600, 150) == (75, 150)
    assert scaled_size(100, 100, 150) == (100, 100)
    assert scaled_size(0, 0, 150) == (0, 0)
