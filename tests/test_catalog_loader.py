from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from aquadex.catalog.loader import find_store_by_slug, generate_slug, load_stores
from aquadex.config.settings import get_settings


def test_default_catalog_loads_and_fills_missing_slugs():
    stores = load_stores(get_settings().catalog.path)

    assert len(stores) == 8
    assert len({s.slug for s in stores}) == len(stores)
    pending = find_store_by_slug(stores, "prairie-cichlid-supply")
    assert pending is not None
    assert pending.id == "00000000-0000-0000-0000-000000000007"


def test_store_without_coordinates_has_no_location():
    stores = load_stores(get_settings().catalog.path)
    store = find_store_by_slug(stores, "springfield-fish-room")

    assert store is not None
    assert store.location is None


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("Aqua World Emporium", "aqua-world-emporium"),
        ("Planted Aquatics & More", "planted-aquatics-more"),
        ("  --Reef   Corner--  ", "reef-corner"),
        ("Fish!!! 4 Less", "fish-4-less"),
    ],
)
def test_generate_slug(name, slug):
    assert generate_slug(name) == slug


def test_find_store_by_slug_is_case_insensitive_and_returns_none_when_missing():
    stores = load_stores(get_settings().catalog.path)

    assert find_store_by_slug(stores, "Reef-And-River-Boston").city == "Boston"
    assert find_store_by_slug(stores, "does-not-exist") is None


def test_catalog_rows_with_out_of_range_coordinates_are_rejected(tmp_path):
    path = tmp_path / "stores.json"
    path.write_text(
        json.dumps([{"id": "1", "business_name": "Swapped", "latitude": -122.4, "longitude": 37.7}]),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        load_stores(path)


def test_catalog_rejects_unknown_categories(tmp_path):
    path = tmp_path / "stores.json"
    path.write_text(json.dumps([{"id": "1", "business_name": "A", "categories": ["birds"]}]), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_stores(path)
