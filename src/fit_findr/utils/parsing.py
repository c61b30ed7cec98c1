"""Parsing helpers for raw catalog fields.

Every helper here is total: malformed input yields ``None`` (or ``0`` where the
caller needs a number) instead of raising, so records with bad numeric fields
still load and still filter.
"""

import math
import re
from collections.abc import Iterable
from typing import Final

# Ordered (label substring, canonical tag) pairs scanned against facility labels
AMENITY_KEYWORDS: Final[tuple[tuple[str, str], ...]] = (
    ("pool", "pool"),
    ("sauna", "sauna"),
    ("parking", "parking"),
    ("classes", "classes"),
    ("trainer", "trainer"),
    ("24/7", "24h"),
)

MONTHLY_DURATIONS: Final = frozenset({"monthly"})
MONTHLY_PERIODS: Final = frozenset({"per month"})

# Leading decimal number, with the same prefix rules as JavaScript's parseFloat
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

EARTH_RADIUS_KM: Final = 6371.0


def parse_amount(text: object) -> int | None:
    """Extract a whole currency amount from display text.

    Args:
        text: Amount text (e.g., "₱2,000", "2500", "PHP 1,300 / month").

    Returns:
        The amount as an int, or None if no digits are present.
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    if isinstance(text, float):
        return int(text) if math.isfinite(text) else None
    if not isinstance(text, str) or not text:
        return None

    match = re.search(r"(\d[\d,]*)", text)
    if not match:
        return None
    value = int(match.group(1).replace(",", ""))
    # Leading minus sign is significant
    return -value if text.lstrip().startswith("-") else value


def parse_leading_float(text: object) -> float | None:
    """Parse the leading number of a string, ignoring any trailing text.

    Examples:
        >>> parse_leading_float("2.5 km away")
        2.5
        >>> parse_leading_float("near the mall") is None
        True
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, int | float):
        value = float(text)
        return None if math.isnan(value) else value
    if not isinstance(text, str):
        return None
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None
    value = float(match.group(1))
    return None if math.isinf(value) else value


def coerce_rating(value: object) -> float:
    """Coerce a raw rating to a float, treating anything unparsable as 0."""
    parsed = parse_leading_float(value)
    return parsed if parsed is not None else 0.0


def is_monthly_tier(duration: str, period: str) -> bool:
    """Whether a pricing tier is billed per month."""
    return (
        duration.strip().lower() in MONTHLY_DURATIONS
        or period.strip().lower() in MONTHLY_PERIODS
    )


def derive_amenity_tags(labels: Iterable[str]) -> frozenset[str]:
    """Derive canonical amenity tags from free-text facility labels.

    A label contributes every tag whose keyword it contains, so
    "Sauna & Pool Area" yields both ``sauna`` and ``pool``.
    """
    tags: set[str] = set()
    for label in labels:
        text = label.lower()
        for keyword, tag in AMENITY_KEYWORDS:
            if keyword in text:
                tags.add(tag)
    return frozenset(tags)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c
