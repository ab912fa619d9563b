"""
AquaDex CLI entrypoint.

Quick local access to the store directory without the web UI:
- `distance`: great-circle distance between two points
- `search`: directory search over the configured store catalog
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from aquadex.catalog.loader import load_stores
from aquadex.config.settings import get_settings
from aquadex.core.geo import Coordinate, distance, format_coordinates
from aquadex.core.logging import configure_logging
from aquadex.domain.models import StoreSearchParams
from aquadex.search.directory import search_directory


def _cmd_distance(args: argparse.Namespace) -> int:
    a = Coordinate(lat=float(args.from_lat), lon=float(args.from_lon))
    b = Coordinate(lat=float(args.to_lat), lon=float(args.to_lon))
    d = distance(a, b, args.unit)
    print(f"{format_coordinates(a.lat, a.lon)} -> {format_coordinates(b.lat, b.lon)}: {d:.3f} {args.unit}")
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    """Handle the `search` subcommand."""
    settings = get_settings()
    params = StoreSearchParams(
        q=args.q,
        categories=args.category or [],
        lat=args.lat,
        lng=args.lon,
        radius=args.radius,
        unit=args.unit,
        page=int(args.page),
        page_size=args.page_size,
    )
    stores = load_stores(args.catalog or settings.catalog.path)
    page = search_directory(params, stores, settings=settings)

    if args.json:
        print(json.dumps(page.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    print(f"{page.total_count} store(s) found (page {page.page}, more: {'yes' if page.has_more else 'no'})")
    start = (page.page - 1) * page.page_size
    for i, hit in enumerate(page.results, start=start + 1):
        store = hit.store
        dist = f"  {hit.distance:.1f} {page.unit}" if hit.distance is not None else ""
        cats = ", ".join(store.categories)
        print(f"{i:>2}. {store.business_name} ({store.city}, {store.state}){dist}  [{cats}]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the AquaDex CLI."""
    parser = argparse.ArgumentParser(prog="aquadex")
    parser.add_argument("--log-level", default=None, help="Override app.log_level (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Great-circle distance between two coordinates.")
    dist.add_argument("--from-lat", required=True, type=float)
    dist.add_argument("--from-lon", required=True, type=float)
    dist.add_argument("--to-lat", required=True, type=float)
    dist.add_argument("--to-lon", required=True, type=float)
    dist.add_argument("--unit", choices=["km", "mi"], default="km")
    dist.set_defaults(func=_cmd_distance)

    srch = sub.add_parser("search", help="Search the local fish store directory.")
    srch.add_argument("--lat", type=float, default=None)
    srch.add_argument("--lon", type=float, default=None)
    srch.add_argument("--radius", type=float, default=None, help="Search radius (default from config)")
    srch.add_argument("--unit", choices=["km", "mi"], default=None)
    srch.add_argument("--q", type=str, default=None, help="Match name, city, state, zip or category")
    srch.add_argument(
        "--category",
        action="append",
        default=[],
        choices=["freshwater", "saltwater", "plants", "reptiles", "general"],
        help="Repeatable. Stores matching any given category are kept.",
    )
    srch.add_argument("--page", type=int, default=1)
    srch.add_argument("--page-size", dest="page_size", type=int, default=None)
    srch.add_argument("--catalog", type=str, default=None, help="Catalog JSON path (default from config)")
    srch.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    srch.set_defaults(func=_cmd_search)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m aquadex.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        configure_logging(args.log_level)
        return int(func(args))
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
