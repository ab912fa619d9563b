"""
API routes.

Endpoints:
- GET `/api/stores`: directory search (text, categories, optional location + radius, paging).
- GET `/api/stores/{slug}`: a single store.
- GET `/api/distance`: great-circle distance between two points.
- GET `/api/catalog/meta`: catalog counts for the directory UI.
- GET `/api/settings`: public search defaults.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, HTTPException

from aquadex.catalog.loader import find_store_by_slug, load_stores
from aquadex.config.settings import get_settings
from aquadex.core.geo import Coordinate, DistanceUnit, distance
from aquadex.domain.models import StoreRecord, StoreSearchPage, StoreSearchParams
from aquadex.search.directory import is_listed, search_directory

router = APIRouter()


@lru_cache
def _stores() -> list[StoreRecord]:
    settings = get_settings()
    return load_stores(settings.catalog.resolved_path())


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"code": "VALIDATION_ERROR", "message": str(e)},
    )


@router.get("/api/stores", response_model=StoreSearchPage)
def get_stores(
    q: str | None = None,
    categories: str | None = None,
    lat: float | None = None,
    lng: float | None = None,
    radius: float | None = None,
    unit: DistanceUnit | None = None,
    page: int = 1,
    page_size: int | None = None,
) -> StoreSearchPage:
    """Search the store directory; results are nearest-first when lat/lng are given."""
    settings = get_settings()
    try:
        params = StoreSearchParams(
            q=q,
            categories=categories or [],
            lat=lat,
            lng=lng,
            radius=radius,
            unit=unit,
            page=page,
            page_size=page_size,
        )
        return search_directory(params, _stores(), settings=settings)
    except ValueError as e:
        raise _bad_request(e) from e


@router.get("/api/stores/{slug}", response_model=StoreRecord)
def get_store(slug: str) -> StoreRecord:
    """Return one store by slug (unlisted stores are hidden when `search.listed_only` is on)."""
    settings = get_settings()
    store = find_store_by_slug(_stores(), slug)
    if store is None or (settings.search.listed_only and not is_listed(store)):
        raise HTTPException(
            status_code=404,
            detail={"code": "NOT_FOUND", "message": f"Store '{slug}' not found"},
        )
    return store


@router.get("/api/distance")
def get_distance(
    from_lat: float,
    from_lng: float,
    to_lat: float,
    to_lng: float,
    unit: DistanceUnit = "km",
) -> dict:
    """Return the Haversine distance between two points."""
    try:
        d = distance(Coordinate(lat=from_lat, lon=from_lng), Coordinate(lat=to_lat, lon=to_lng), unit)
    except ValueError as e:
        raise _bad_request(e) from e
    return {"distance": d, "unit": unit}


@router.get("/api/catalog/meta")
def get_catalog_meta() -> dict:
    """Return catalog counts (categories, states, listing and location coverage)."""
    settings = get_settings()
    resolved = settings.catalog.resolved_path()
    stores = _stores()

    category_counts: dict[str, int] = {}
    state_counts: dict[str, int] = {}
    for s in stores:
        for c in s.categories:
            category_counts[c] = category_counts.get(c, 0) + 1
        if s.state:
            state_counts[s.state] = state_counts.get(s.state, 0) + 1

    return {
        "catalog_path": str(settings.catalog.path),
        "updated_at_unix": int(resolved.stat().st_mtime) if resolved.exists() else None,
        "store_count": len(stores),
        "listed_count": sum(1 for s in stores if is_listed(s)),
        "missing_location_count": sum(1 for s in stores if s.location is None),
        "category_counts": dict(sorted(category_counts.items(), key=lambda kv: (-kv[1], kv[0]))),
        "state_counts": dict(sorted(state_counts.items(), key=lambda kv: (-kv[1], kv[0]))),
    }


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return search defaults for the directory UI."""
    settings = get_settings()
    return {"app": {"name": settings.app.name}, "search": settings.search.model_dump(mode="json")}
