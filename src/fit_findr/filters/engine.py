"""Filtering and ordering of gym records.

Everything here is a pure function of its arguments: no logging, no clock,
no shared state. The same criteria and records always give the same result.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Final

from fit_findr.filters.criteria import CriteriaSnapshot
from fit_findr.models import FacilityRecord, SortKey, VisibleSet, parse_sort_key

Predicate = Callable[[CriteriaSnapshot, FacilityRecord], bool]


def matches_text(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    """Case-insensitive substring match against name or description."""
    query = criteria.search_text
    return (
        not query
        or query in record.name.lower()
        or query in record.description.lower()
    )


def matches_city(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    return criteria.city is None or criteria.city == record.city


def matches_price(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    """Inclusive price ceiling. Gyms without a monthly price count as 0."""
    return criteria.max_price is None or record.monthly_price <= criteria.max_price


def matches_rating(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    """Rating meets at least one of the selected minimums."""
    return not criteria.min_ratings or any(
        record.rating >= minimum for minimum in criteria.min_ratings
    )


def matches_amenities(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    """Gym has every selected amenity."""
    return criteria.required_amenities <= record.amenities


def matches_hours(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    """Gym has every selected hours category.

    Hours categories are checked against the derived amenity tags (the
    ``24h`` tag comes from "24/7" facility labels), matching the search page.
    """
    return all(hour in record.amenities for hour in criteria.required_hours)


PREDICATES: Final[tuple[Predicate, ...]] = (
    matches_text,
    matches_city,
    matches_price,
    matches_rating,
    matches_amenities,
    matches_hours,
)


def matches_all(criteria: CriteriaSnapshot, record: FacilityRecord) -> bool:
    return all(predicate(criteria, record) for predicate in PREDICATES)


def evaluate(criteria: CriteriaSnapshot, records: Iterable[FacilityRecord]) -> VisibleSet:
    """Select the records passing every active filter.

    Args:
        criteria: Current filter selections.
        records: Records in display order.

    Returns:
        VisibleSet with matching records in their input order (no sorting).
    """
    return VisibleSet(records=tuple(r for r in records if matches_all(criteria, r)))


def _distance_key(record: FacilityRecord) -> tuple[bool, float]:
    # Unknown distances go last; sorted() keeps their relative order
    if record.distance_km is None:
        return (True, 0.0)
    return (False, record.distance_km)


def sort_records(records: Sequence[FacilityRecord], sort_key: SortKey | str) -> list[FacilityRecord]:
    """Order records by the given key.

    The sort is stable: records that tie on the key keep their input order.
    An unknown key, or ``SortKey.NONE``, returns the records unchanged.
    """
    key = parse_sort_key(sort_key)
    if key is SortKey.PRICE_ASC:
        return sorted(records, key=lambda r: r.monthly_price)
    if key is SortKey.PRICE_DESC:
        return sorted(records, key=lambda r: -r.monthly_price)
    if key is SortKey.RATING_DESC:
        return sorted(records, key=lambda r: -r.rating)
    if key is SortKey.DISTANCE_ASC:
        return sorted(records, key=_distance_key)
    return list(records)


def apply(criteria: CriteriaSnapshot, records: Iterable[FacilityRecord]) -> VisibleSet:
    """Filter, then order by the snapshot's sort key."""
    visible = evaluate(criteria, records)
    return VisibleSet(records=tuple(sort_records(visible.records, criteria.sort_key)))
