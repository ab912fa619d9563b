"""
Error types for the store geo search.

All of them derive from `ValueError` so API and CLI layers can treat them like
any other bad-input error (HTTP 400 / exit status 2).
"""

from __future__ import annotations


class GeoSearchError(ValueError):
    """Base error for invalid geo search input."""


class InvalidCoordinate(GeoSearchError):
    """Latitude outside [-90, 90], longitude outside [-180, 180], or not a finite number."""


class InvalidRadius(GeoSearchError):
    """Search radius is not a positive finite number (or exceeds the configured cap)."""
