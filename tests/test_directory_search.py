from __future__ import annotations

import pytest

from aquadex.catalog.loader import load_stores
from aquadex.config.settings import get_settings
from aquadex.core.errors import InvalidCoordinate, InvalidRadius
from aquadex.domain.models import StoreRecord, StoreSearchParams
from aquadex.search.directory import is_listed, matches_categories, matches_text, search_directory

SPRINGFIELD = {"lat": 39.799017, "lng": -89.643957}


@pytest.fixture(scope="module")
def stores() -> list[StoreRecord]:
    return load_stores(get_settings().catalog.path)


def _slugs(page) -> list[str]:
    return [hit.store.slug for hit in page.results]


def test_located_search_returns_nearby_listed_stores_nearest_first(stores):
    page = search_directory(StoreSearchParams(**SPRINGFIELD), stores, settings=get_settings())

    # Default radius is 25 mi: the pending Springfield store and the one without coordinates drop out.
    assert _slugs(page) == ["aqua-world-emporium-springfield", "planted-aquatics-capital-city"]
    assert page.unit == "mi"
    assert page.results[0].distance == 0.0
    assert page.results[1].distance == pytest.approx(1.2, abs=0.1)


def test_larger_radius_reaches_the_next_town(stores):
    page = search_directory(StoreSearchParams(**SPRINGFIELD, radius=100), stores, settings=get_settings())

    assert _slugs(page)[-1] == "the-reef-corner-shelbyville"
    assert page.total_count == 3


def test_search_without_location_keeps_catalog_order_without_distances(stores):
    page = search_directory(StoreSearchParams(q="springfield"), stores, settings=get_settings())

    assert _slugs(page) == ["aqua-world-emporium-springfield", "springfield-fish-room"]
    assert all(hit.distance is None for hit in page.results)


def test_text_query_is_case_insensitive_and_trimmed(stores):
    page = search_directory(StoreSearchParams(q="  REEF "), stores, settings=get_settings())

    assert _slugs(page) == ["the-reef-corner-shelbyville", "reef-and-river-boston"]


def test_category_filter_keeps_any_overlap(stores):
    page = search_directory(StoreSearchParams(categories="reptiles,plants"), stores, settings=get_settings())

    assert _slugs(page) == [
        "aqua-world-emporium-springfield",
        "planted-aquatics-capital-city",
        "seattle-plants-and-fins",
        "miami-reptiles-and-aquatics",
    ]


def test_pagination_reports_total_and_has_more(stores):
    settings = get_settings()

    first = search_directory(StoreSearchParams(page_size=6), stores, settings=settings)
    second = search_directory(StoreSearchParams(page_size=6, page=2), stores, settings=settings)

    assert first.total_count == second.total_count == 7
    assert len(first.results) == 6 and first.has_more
    assert len(second.results) == 1 and not second.has_more
    assert first.page_size == 6


def test_unit_override_reports_kilometers(stores):
    page = search_directory(StoreSearchParams(**SPRINGFIELD, radius=5, unit="km"), stores, settings=get_settings())

    assert page.unit == "km"
    assert page.results[1].distance == pytest.approx(2.0, abs=0.1)


def test_listed_only_can_be_disabled(stores):
    settings = get_settings().model_copy(deep=True)
    settings.search.listed_only = False

    page = search_directory(StoreSearchParams(q="springfield"), stores, settings=settings)

    assert "prairie-cichlid-supply" in _slugs(page)


def test_radius_above_configured_cap_is_rejected(stores):
    settings = get_settings().model_copy(deep=True)
    settings.search.max_radius = 50

    with pytest.raises(InvalidRadius):
        search_directory(StoreSearchParams(**SPRINGFIELD, radius=100), stores, settings=settings)


def test_out_of_range_query_location_is_rejected(stores):
    with pytest.raises(InvalidCoordinate):
        search_directory(StoreSearchParams(lat=120, lng=0), stores, settings=get_settings())


def test_params_require_lat_and_lng_together():
    with pytest.raises(ValueError, match="lat and lng"):
        StoreSearchParams(lat=39.8)


def test_filters_on_single_records():
    store = StoreRecord(
        id="x",
        business_name="Coral Cove",
        city="Tampa",
        state="FL",
        zip="33602",
        categories=["Saltwater", "saltwater"],
        is_active=True,
        verification_status="verified",
    )

    assert store.categories == ["saltwater"]
    assert is_listed(store)
    assert matches_text(store, "cove") and matches_text(store, "336") and matches_text(store, None)
    assert not matches_text(store, "reptile")
    assert matches_categories(store, ["saltwater", "plants"]) and matches_categories(store, [])
    assert not matches_categories(store, ["plants"])


def test_radius_above_250_is_allowed_when_the_configured_cap_is_higher(stores):
    settings = get_settings().model_copy(deep=True)
    settings.search.max_radius = 2000

    page = search_directory(StoreSearchParams(**SPRINGFIELD, radius=1050), stores, settings=settings)

    # Boston is about 980 mi from Springfield; Miami (about 1110 mi) stays out.
    assert _slugs(page)[-1] == "reef-and-river-boston"
    assert page.total_count == 4
