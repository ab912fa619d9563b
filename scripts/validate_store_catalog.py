from __future__ import annotations

import argparse

from aquadex.catalog.loader import load_stores
from aquadex.config.settings import resolve_path
from aquadex.core.geo import Coordinate
from aquadex.search.directory import is_listed
from aquadex.search.geosearch import search


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Validate the AquaDex store catalog (offline).")
    p.add_argument("--catalog", type=str, default="data/catalogs/stores.json")
    p.add_argument("--lat", type=float, default=None, help="Optional sample search latitude")
    p.add_argument("--lon", type=float, default=None, help="Optional sample search longitude")
    p.add_argument("--radius", type=float, default=25.0)
    p.add_argument("--unit", choices=["km", "mi"], default="mi")
    args = p.parse_args(argv)

    catalog_path = resolve_path(args.catalog)
    stores = load_stores(catalog_path)

    seen: dict[str, str] = {}
    duplicate_slugs = []
    for s in stores:
        if s.slug in seen:
            duplicate_slugs.append(s.slug)
        seen.setdefault(s.slug, s.id)

    missing_location = [s.slug for s in stores if s.location is None]
    unlisted = [s.slug for s in stores if not is_listed(s)]

    print("Catalog:", catalog_path)
    print("Stores:", len(stores))
    print("Listed (active + verified):", len(stores) - len(unlisted))
    if unlisted:
        print("Unlisted:", len(unlisted), "example:", ", ".join(unlisted[:8]))
    if missing_location:
        print("Missing coordinates:", len(missing_location), "example:", ", ".join(missing_location[:8]))
    if duplicate_slugs:
        print("Duplicate slugs:", len(duplicate_slugs), "example:", ", ".join(sorted(duplicate_slugs)[:8]))

    if args.lat is not None and args.lon is not None:
        results = search(Coordinate(lat=args.lat, lon=args.lon), args.radius, stores, unit=args.unit)
        print(f"Sample search within {args.radius} {args.unit}: {len(results)} store(s)")
        for r in results[:5]:
            print(f"  {r.store.slug}: {r.distance:.1f} {r.unit}")

    if duplicate_slugs:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
