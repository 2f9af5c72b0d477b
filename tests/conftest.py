"""
Root test configuration.

Test organization:
- unit/        Pure core services and view-model, no Qt, no I/O
- integration/ Dataset and settings files read from tmp_path

Run specific levels:
    pytest tests/unit -v
    pytest tests/integration -v
    pytest tests -v
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from core.models import DatingEntry, ExhibitionObject, ImageReference, LocationEntry, RawCatalogRecord

ORIGIN = "Fundort/Herkunft"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")


def make_raw(
    record_id="1",
    datings=(("-200", "-180", "Hellenistisch"),),
    images=("Z:\\Objekt\\Bild\\1\\a.jpg",),
    location="Rome",
    name="Amphora",
    materials=("Ton",),
    techniques=("gedreht",),
    inventory="V.I. 1",
):
    """Build a RawCatalogRecord from compact arguments."""
    locations = ()
    if location is not None:
        locations = (LocationEntry(ORIGIN, location),)
    return RawCatalogRecord(
        id=record_id,
        images=tuple(ImageReference(p) for p in images),
        datings=tuple(DatingEntry(s, e, label) for s, e, label in datings),
        materials=tuple(materials),
        techniques=tuple(techniques),
        designation=name,
        inventory_number=inventory,
        locations=locations,
    )


def make_object(object_id="1", start=-200, end=-30, name="Amphora", era="Hellenistisch"):
    """Build an ExhibitionObject directly."""
    return ExhibitionObject(
        id=object_id,
        preview_url=f"http://localhost:3000/{object_id}.jpg",
        start=start,
        end=end,
        era=era,
        date="",
        inventory_id=f"Inv. {object_id}",
        name=name,
        location="Rome",
        materials=("Ton",),
        technology=("gedreht", "bemalt", "poliert", "gebrannt", "geritzt"),
    )


@pytest.fixture
def raw_factory():
    """Factory for raw catalog records."""
    return make_raw


@pytest.fixture
def object_factory():
    """Factory for exhibition objects."""
    return make_object


@pytest.fixture
def collection():
    """A small start-sorted collection."""
    return (
        make_object("a", start=-500, end=-400, name="Amphora", era="Archaisch"),
        make_object("b", start=-200, end=-30, name="Öllampe", era="Hellenistisch"),
        make_object("c", start=150, end=250, name="Fibel", era="Kaiserzeit"),
        make_object("d", start=300, end=400, name="Amphorenständer", era="Spätantike"),
    )
