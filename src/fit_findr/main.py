"""Command-line entry point for browsing the gym catalog."""

import argparse
import logging
import sys
from collections.abc import Sequence

from fit_findr.browser import ComparisonError, DirectoryBrowser
from fit_findr.config import Settings
from fit_findr.data.gyms import KNOWN_CITIES
from fit_findr.filters.comparison import ToggleResult
from fit_findr.logging import configure_logging, get_logger
from fit_findr.models import SORT_ALIASES, AmenityTag, FacilityRecord, SortKey, VisibleSet

logger = get_logger(__name__)


def _format_distance(record: FacilityRecord) -> str:
    return f"{record.distance_km:.1f} km" if record.distance_km is not None else "distance unknown"


def print_results(visible: VisibleSet) -> None:
    """Print the result count and one block per visible gym."""
    noun = "gym" if visible.count == 1 else "gyms"
    print(f"{visible.count} {noun} found")
    print()
    for record in visible.records:
        tags = ", ".join(tag.display_name for tag in sorted(record.amenities)) or "none"
        print(f"[{record.id}] {record.name}")
        print(f"  Rating: {record.rating:.1f} {record.review_count}".rstrip())
        print(f"  Location: {record.location} ({_format_distance(record)})")
        print(f"  Monthly: {record.monthly_price_label}")
        print(f"  Amenities: {tags}")
        print()


def print_detail(record: FacilityRecord) -> None:
    """Print everything known about one gym."""
    print(record.name)
    print(f"  Rating: {record.rating:.1f} {record.review_count}".rstrip())
    print(f"  Location: {record.location}")
    if record.coordinates:
        print(f"  Coordinates: {record.coordinates.lat}, {record.coordinates.lng}")
    if record.description:
        print()
        print(f"  {record.description}")
    print()
    print("  Hours:")
    for day, time_range in record.hours.items():
        print(f"    {day}: {time_range}")
    print("  Contact:")
    print(f"    Phone: {record.contact.phone}")
    print(f"    Email: {record.contact.email}")
    print(f"    Website: {record.contact.website}")
    print("  Facilities:")
    for label in record.facility_labels:
        print(f"    - {label}")
    print("  Pricing:")
    for tier in record.pricing:
        print(f"    {tier.duration}: {tier.amount} ({tier.period})")


def print_comparison(records: Sequence[FacilityRecord]) -> None:
    """Print selected gyms as labelled rows, one column per gym."""
    rows: list[tuple[str, list[str]]] = [
        ("Gym", [r.name for r in records]),
        ("Rating", [f"{r.rating:.1f}" for r in records]),
        ("Location", [r.location for r in records]),
        ("Monthly Price", [r.monthly_price_label for r in records]),
        (
            "Hours",
            ["; ".join(f"{day}: {t}" for day, t in r.hours.items()) for r in records],
        ),
        ("Phone", [r.contact.phone for r in records]),
        ("Facilities", [", ".join(r.facility_labels) for r in records]),
        (
            "All Prices",
            ["; ".join(f"{p.duration}: {p.amount}" for p in r.pricing) for r in records],
        ),
    ]
    for label, values in rows:
        print(f"{label}:")
        for record, value in zip(records, values, strict=True):
            print(f"  [{record.id}] {value}")
        print()


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitfindr",
        description="FitFindr - search, filter and compare gyms in Cebu and Bohol",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="List gyms matching the given filters")
    search.add_argument("--query", "-q", default="", help="Text to find in name or description")
    search.add_argument(
        "--city",
        default=None,
        help=f"Only gyms in this city (e.g. {', '.join(KNOWN_CITIES)})",
    )
    search.add_argument(
        "--max-price",
        type=int,
        default=settings.default_max_price,
        help=f"Monthly price ceiling in pesos (default: {settings.default_max_price})",
    )
    search.add_argument(
        "--min-rating",
        type=float,
        action="append",
        default=[],
        help="Minimum rating; repeat to accept any of several minimums",
    )
    search.add_argument(
        "--amenity",
        choices=[t.value for t in AmenityTag],
        action="append",
        default=[],
        help="Required amenity; repeat to require several",
    )
    search.add_argument(
        "--hours",
        action="append",
        default=[],
        help="Required hours category (e.g. 24h); repeat to require several",
    )
    search.add_argument(
        "--sort",
        choices=[k.value for k in SortKey] + list(SORT_ALIASES),
        default=SortKey.NONE.value,
        help="Result ordering",
    )

    show = subparsers.add_parser("show", help="Show full details for one gym")
    show.add_argument("facility_id", help="Gym id as shown in search results")

    compare = subparsers.add_parser("compare", help="Compare up to three gyms side by side")
    compare.add_argument("facility_ids", nargs="+", help="Gym ids to compare")

    return parser


def run_search(browser: DirectoryBrowser, args: argparse.Namespace) -> int:
    visible = browser.update(
        search_text=args.query,
        city=args.city,
        max_price=args.max_price,
        min_ratings=args.min_rating,
        required_amenities=args.amenity,
        required_hours=args.hours,
        sort_key=args.sort,
    )
    print_results(visible)
    return 0


def run_show(browser: DirectoryBrowser, args: argparse.Namespace) -> int:
    record = browser.detail(args.facility_id)
    if record is None:
        print(f"No gym with id {args.facility_id!r}.")
        return 1
    print_detail(record)
    return 0


def run_compare(browser: DirectoryBrowser, args: argparse.Namespace) -> int:
    for facility_id in args.facility_ids:
        result = browser.toggle_compare(facility_id)
        if result is ToggleResult.UNKNOWN:
            print(f"Skipping unknown gym {facility_id!r}.")
        elif result is ToggleResult.REJECTED_AT_CAPACITY:
            print(
                f"Skipping {facility_id!r}: you can only compare up to "
                f"{browser.selection.capacity} gyms at a time."
            )

    try:
        records = browser.comparison()
    except ComparisonError as e:
        print(str(e))
        return 1
    print_comparison(records)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    try:
        settings = Settings()
    except Exception as e:
        configure_logging()
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}")
        sys.exit(1)

    args = _build_parser(settings).parse_args(argv)
    configure_logging(
        json_output=settings.log_json,
        level=logging.DEBUG if args.debug else logging.INFO,
    )

    try:
        browser = DirectoryBrowser.from_settings(settings)
    except (OSError, ValueError) as e:
        logger.error("failed_to_load_catalog", path=settings.catalog_path, error=str(e))
        print(f"Error: Failed to load gym catalog. {e}")
        sys.exit(1)

    handlers = {"search": run_search, "show": run_show, "compare": run_compare}
    sys.exit(handlers[args.command](browser, args))


if __name__ == "__main__":
    main()
