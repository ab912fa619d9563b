"""
Store catalog loader.

The catalog is a local JSON file (default: `data/catalogs/stores.json`) holding an
array of store objects. We validate it into typed Pydantic models so the search
code can assume a consistent shape.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter

from aquadex.config.settings import resolve_path
from aquadex.domain.models import StoreRecord


_STORES_ADAPTER = TypeAdapter(list[StoreRecord])


def generate_slug(name: str) -> str:
    """Build a URL-safe slug from a store name ("Reef & River" -> "reef-river")."""
    slug = name.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def load_stores(path: str | Path) -> list[StoreRecord]:
    """Load and validate a store catalog JSON file."""
    resolved = resolve_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    stores = _STORES_ADAPTER.validate_python(payload)
    return [s if s.slug else s.model_copy(update={"slug": generate_slug(s.business_name)}) for s in stores]


def find_store_by_slug(stores: Sequence[StoreRecord], slug: str) -> StoreRecord | None:
    wanted = slug.strip().lower()
    for store in stores:
        if store.slug == wanted:
            return store
    return None
