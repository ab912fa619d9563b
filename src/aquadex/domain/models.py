"""
Domain models (Pydantic).

These types are the contract between the catalog, the search code and the
API/CLI layers:
- catalog entities (`StoreRecord`)
- geo search output (`RankedResult`)
- directory queries and pages (`StoreSearchParams`, `StoreSearchPage`)
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from aquadex.core.geo import Coordinate, DistanceUnit

StoreCategory = Literal["freshwater", "saltwater", "plants", "reptiles", "general"]
VerificationStatus = Literal["pending", "verified", "rejected"]


class StoreRecord(BaseModel):
    """A local fish store as listed in the directory catalog."""

    id: str
    slug: str = ""
    business_name: str

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    street: str | None = None
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    description: str | None = None

    categories: list[StoreCategory] = Field(default_factory=list)
    gallery_images: list[str] = Field(default_factory=list)
    verification_status: VerificationStatus = "pending"
    is_active: bool = False
    business_hours: dict[str, Any] | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def _normalize_categories(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        out: list[str] = []
        for c in value:
            c = str(c).strip().lower()
            if c and c not in out:
                out.append(c)
        return out

    @property
    def location(self) -> Coordinate | None:
        """The store's coordinate, or None when either half is unknown."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(lat=self.latitude, lon=self.longitude)


class RankedResult(BaseModel):
    """A store within the search radius and its distance from the query point."""

    store: StoreRecord
    distance: float = Field(..., ge=0)
    unit: DistanceUnit


class StoreSearchParams(BaseModel):
    """Directory query: text/category filters, optional location + radius, paging."""

    q: str | None = None
    categories: list[StoreCategory] = Field(default_factory=list)
    lat: float | None = None
    lng: float | None = None
    radius: float | None = Field(default=None, gt=0)
    unit: DistanceUnit | None = None
    page: int = Field(1, ge=1)
    page_size: int | None = Field(default=None, ge=6, le=60)

    @field_validator("categories", mode="before")
    @classmethod
    def _split_categories(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(c).strip().lower() for c in value if str(c).strip()]
        return value

    @model_validator(mode="after")
    def _validate_location_pair(self) -> "StoreSearchParams":
        if (self.lat is None) != (self.lng is None):
            raise ValueError("lat and lng must be provided together")
        return self

    @property
    def origin(self) -> Coordinate | None:
        if self.lat is None or self.lng is None:
            return None
        return Coordinate(lat=self.lat, lon=self.lng)


class StoreSearchHit(BaseModel):
    """One directory row: a store plus its rounded distance (None without a query location)."""

    store: StoreRecord
    distance: float | None = None


class StoreSearchPage(BaseModel):
    """A page of directory results plus paging metadata."""

    results: list[StoreSearchHit]
    total_count: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    has_more: bool
    unit: DistanceUnit
