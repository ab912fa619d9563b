from __future__ import annotations
from dataclasses import dataclass
from math import atan2, cos, isfinite, radians, sin, sqrt
from typing import Literal

from aquadex.core.errors import InvalidCoordinate

"""
Geospatial helpers.

A tiny geometry layer for the store directory: a validated coordinate type and
Haversine great-circle distance in kilometers or miles.
"""

DistanceUnit = Literal["km", "mi"]

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371


def validate_coordinate(lat: float, lon: float) -> None:
    """Raise `InvalidCoordinate` unless lat/lon are finite and within range."""
    try:
        lat_f = float(lat)
        lon_f = float(lon)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"coordinate must be numeric, got ({lat!r}, {lon!r})") from e
    if not (isfinite(lat_f) and isfinite(lon_f)):
        raise InvalidCoordinate(f"coordinate must be finite, got ({lat_f}, {lon_f})")
    if not -90.0 <= lat_f <= 90.0:
        raise InvalidCoordinate(f"latitude {lat_f} is outside [-90, 90]")
    if not -180.0 <= lon_f <= 180.0:
        raise InvalidCoordinate(f"longitude {lon_f} is outside [-180, 180]")


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        validate_coordinate(self.lat, self.lon)


def as_coordinate(value: Coordinate) -> Coordinate:
    """Return `value` as a checked `Coordinate`; anything else raises `InvalidCoordinate`.

    Instances are re-checked since `object.__setattr__` can bypass `__post_init__`;
    other objects with `lat`/`lon` attributes are converted.
    """
    if isinstance(value, Coordinate):
        validate_coordinate(value.lat, value.lon)
        return value
    try:
        return Coordinate(lat=value.lat, lon=value.lon)
    except AttributeError as e:
        raise InvalidCoordinate(f"expected a coordinate with lat/lon, got {value!r}") from e


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Compute great-circle distance in kilometers between two points."""
    lat1 = radians(a.lat)
    lon1 = radians(a.lon)
    lat2 = radians(b.lat)
    lon2 = radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))


def validate_unit(unit: str) -> None:
    if unit not in ("km", "mi"):
        raise ValueError(f"Unknown distance unit '{unit}', expected 'km' or 'mi'")


def convert_km(value_km: float, unit: DistanceUnit) -> float:
    """Convert a kilometer value to `unit`."""
    validate_unit(unit)
    return value_km * KM_TO_MILES if unit == "mi" else value_km


def distance(a: Coordinate, b: Coordinate, unit: DistanceUnit = "km") -> float:
    """Great-circle distance between `a` and `b` in `unit` (kilometers by default)."""
    return convert_km(haversine_km(as_coordinate(a), as_coordinate(b)), unit)


def format_coordinates(lat: float, lon: float, precision: int = 6) -> str:
    """Format a coordinate pair as `"lat, lon"` with fixed decimal places."""
    return f"{float(lat):.{precision}f}, {float(lon):.{precision}f}"
