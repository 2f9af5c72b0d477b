"""Tests for loading the raw dataset from JSON files."""

import json

import pytest

from core.services.collection_service import CollectionBuilder
from infrastructure.json_repository import JsonDatasetRepository, parse_record

pytestmark = pytest.mark.integration


SCENARIO = {
    "imdasid": 4711,
    "inventarnummer": "Misc. 8401",
    "objektbezeichnung": {"term": "Öllampe"},
    "bilder": [{"pfad": "Z:\\Objekt\\Bild\\4711\\lampe.jpg"}],
    "datierung": [
        {"anfang": "-200", "ende": "-180", "datum": "Hellenistisch"},
        {"anfang": "-50", "ende": "-30", "datum": "Späthellenistisch"},
    ],
    "materialien": [{"term": "Ton"}],
    "techniken": [{"term": "formgepresst"}],
    "orte": [{"ortstyp": "Fundort/Herkunft", "term": "Rome"}],
}


def write_dataset(tmp_path, data):
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_parse_record_maps_catalog_keys():
    raw = parse_record(SCENARIO)

    assert raw.id == "4711"
    assert raw.images[0].path == "Z:\\Objekt\\Bild\\4711\\lampe.jpg"
    assert [(d.start_text, d.end_text, d.label) for d in raw.datings] == [
        ("-200", "-180", "Hellenistisch"),
        ("-50", "-30", "Späthellenistisch"),
    ]
    assert raw.materials == ("Ton",)
    assert raw.techniques == ("formgepresst",)
    assert raw.designation == "Öllampe"
    assert raw.inventory_number == "Misc. 8401"
    assert raw.locations[0].location_type == "Fundort/Herkunft"


def test_parse_record_tolerates_missing_fields():
    raw = parse_record({"imdasid": "x"})

    assert raw.images == ()
    assert raw.datings == ()
    assert raw.designation is None
    assert raw.inventory_number == ""


def test_parse_record_numeric_years_become_text():
    raw = parse_record({"imdasid": 1, "datierung": [{"anfang": -200, "ende": None}]})
    assert (raw.datings[0].start_text, raw.datings[0].end_text) == ("-200", "")


def test_parse_record_requires_id():
    with pytest.raises(KeyError):
        parse_record({"bilder": []})


def test_load_skips_unparseable_entries(tmp_path):
    path = write_dataset(tmp_path, [SCENARIO, "garbage", {"bilder": []}, {"imdasid": 2}])

    records = list(JsonDatasetRepository().load(path))

    assert [r.id for r in records] == ["4711", "2"]


def test_load_rejects_non_list(tmp_path):
    path = write_dataset(tmp_path, {"imdasid": 1})
    with pytest.raises(ValueError):
        list(JsonDatasetRepository().load(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(JsonDatasetRepository().load(tmp_path / "missing.json"))


def test_scenario_end_to_end(tmp_path):
    path = write_dataset(tmp_path, [SCENARIO])

    (obj,) = CollectionBuilder().build(JsonDatasetRepository().load(path))

    assert obj.start == -200
    assert obj.end == -30
    assert obj.location == "Rome"
    assert obj.date == "(200 - 30 v Chr.)"
    assert obj.preview_url == "http://localhost:3000/4711/lampe.jpg"


def test_sample_dataset_builds(tmp_path):
    from pathlib import Path

    sample = Path(__file__).resolve().parents[2] / "samples" / "small-dataset.json"

    report = CollectionBuilder().build_with_report(JsonDatasetRepository().load(sample))

    assert [o.name for o in report.objects] == ["Faustkeil", "Amphora", "Öllampe", "Fibel"]
    assert len(report.rejected) == 3
