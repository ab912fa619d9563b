"""
Local fish store directory query.

Pipeline (in order):
1) keep listed stores only (active + verified), when `search.listed_only` is on
2) text match on name / city / state / zip / categories
3) category overlap
4) optional geo radius + nearest-first ranking (`aquadex.search.geosearch`)
5) pagination

Without a query location the catalog order is kept and distances are None.
"""

from __future__ import annotations

import logging
from typing import Sequence

from aquadex.config.settings import Settings
from aquadex.core.errors import InvalidRadius
from aquadex.domain.models import StoreRecord, StoreSearchHit, StoreSearchPage, StoreSearchParams
from aquadex.search.geosearch import search

logger = logging.getLogger(__name__)


def is_listed(store: StoreRecord) -> bool:
    """Whether a store is visible in the public directory."""
    return store.is_active and store.verification_status == "verified"


def matches_text(store: StoreRecord, q: str | None) -> bool:
    needle = (q or "").strip().lower()
    if not needle:
        return True
    fields = [store.business_name, store.city, store.state, store.zip, *store.categories]
    return any(needle in (f or "").lower() for f in fields)


def matches_categories(store: StoreRecord, categories: Sequence[str]) -> bool:
    if not categories:
        return True
    return bool(set(store.categories) & set(categories))


def search_directory(
    params: StoreSearchParams,
    stores: Sequence[StoreRecord],
    *,
    settings: Settings,
) -> StoreSearchPage:
    """Run a directory query against an in-memory store list."""
    cfg = settings.search
    unit = params.unit or cfg.default_unit
    page_size = params.page_size or cfg.page_size_default

    filtered = [
        s
        for s in stores
        if (not cfg.listed_only or is_listed(s))
        and matches_text(s, params.q)
        and matches_categories(s, params.categories)
    ]

    origin = params.origin
    if origin is not None:
        radius = params.radius if params.radius is not None else cfg.default_radius
        if radius > cfg.max_radius:
            raise InvalidRadius(f"radius {radius} exceeds the maximum of {cfg.max_radius}{unit}")
        ranked = search(origin, radius, filtered, unit=unit)
        hits = [StoreSearchHit(store=r.store, distance=round(r.distance, 1)) for r in ranked]
    else:
        hits = [StoreSearchHit(store=s) for s in filtered]

    total = len(hits)
    start = (params.page - 1) * page_size
    page_hits = hits[start : start + page_size]

    logger.info(
        "Directory search q=%r categories=%s located=%s total=%d page=%d",
        params.q,
        params.categories,
        origin is not None,
        total,
        params.page,
    )
    return StoreSearchPage(
        results=page_hits,
        total_count=total,
        page=params.page,
        page_size=page_size,
        has_more=total > params.page * page_size,
        unit=unit,
    )
