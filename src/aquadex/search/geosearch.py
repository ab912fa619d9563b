"""
Radius search over store records.

`search()` keeps the candidates within `radius` of the query point and ranks them
nearest-first. It is a pure function: no I/O, no shared state, inputs are never
mutated, so callers can run it concurrently.
"""

from __future__ import annotations

import logging
from math import isfinite
from typing import Sequence

from aquadex.core.errors import InvalidRadius
from aquadex.core.geo import Coordinate, DistanceUnit, as_coordinate, distance, validate_unit
from aquadex.domain.models import RankedResult, StoreRecord

logger = logging.getLogger(__name__)


def _validate_radius(radius: float) -> float:
    try:
        r = float(radius)
    except (TypeError, ValueError) as e:
        raise InvalidRadius(f"radius must be numeric, got {radius!r}") from e
    if not isfinite(r) or r <= 0:
        raise InvalidRadius(f"radius must be a positive number, got {radius!r}")
    return r


def search(
    query: Coordinate,
    radius: float,
    candidates: Sequence[StoreRecord],
    *,
    unit: DistanceUnit = "km",
) -> list[RankedResult]:
    """Return candidates within `radius` (inclusive) of `query`, nearest first.

    `radius` and the returned distances are both expressed in `unit`. Candidates
    without a location are skipped. Equal distances keep their input order.
    """
    r = _validate_radius(radius)
    query = as_coordinate(query)
    validate_unit(unit)

    hits: list[tuple[float, StoreRecord]] = []
    skipped = 0
    for store in candidates:
        location = store.location
        if location is None:
            skipped += 1
            continue
        d = distance(query, location, unit)
        if d <= r:
            hits.append((d, store))

    # list.sort is stable, so ties stay in candidate order.
    hits.sort(key=lambda pair: pair[0])

    logger.debug(
        "Geo search radius=%s%s candidates=%d without_location=%d matched=%d",
        r,
        unit,
        len(candidates),
        skipped,
        len(hits),
    )
    return [RankedResult(store=store, distance=d, unit=unit) for d, store in hits]
