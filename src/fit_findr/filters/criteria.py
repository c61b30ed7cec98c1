"""Criteria snapshot model and coercion of raw filter inputs."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from fit_findr.models import AmenityTag, SortKey, parse_sort_key
from fit_findr.utils.parsing import parse_amount, parse_leading_float

VALID_AMENITIES = frozenset(t.value for t in AmenityTag)


def _parse_optional_int(value: object) -> int | None:
    """Parse a value to int, returning None for empty/whitespace/non-numeric values."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    return parse_amount(value)


def _as_iterable(value: object) -> Iterable[Any]:
    """Treat a lone scalar as a one-item selection."""
    if value is None:
        return ()
    if isinstance(value, str | int | float):
        return (value,)
    if isinstance(value, Iterable):
        return value
    return ()


class CriteriaSnapshot(BaseModel):
    """Every active filter and sort selection at one point in time.

    All fields default to "no constraint". Validators coerce raw UI values
    (strings from text boxes, checkbox values) and silently discard the ones
    that cannot be interpreted.
    """

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    city: str | None = None
    max_price: int | None = None
    min_ratings: frozenset[float] = frozenset()
    required_amenities: frozenset[AmenityTag] = frozenset()
    required_hours: frozenset[str] = frozenset()
    sort_key: SortKey = SortKey.NONE

    # --- validators ---

    @field_validator("search_text", mode="before")
    @classmethod
    def clean_search_text(cls, v: object) -> str:
        if v is None:
            return ""
        return str(v).lower()

    @field_validator("city", mode="before")
    @classmethod
    def clean_city(cls, v: object) -> str | None:
        if v is None:
            return None
        s = str(v).strip().lower()
        return s if s else None

    @field_validator("max_price", mode="before")
    @classmethod
    def coerce_max_price(cls, v: object) -> int | None:
        return _parse_optional_int(v)

    @field_validator("min_ratings", mode="before")
    @classmethod
    def coerce_min_ratings(cls, v: object) -> frozenset[float]:
        ratings: set[float] = set()
        for item in _as_iterable(v):
            parsed = parse_leading_float(item)
            if parsed is not None and math.isfinite(parsed):
                ratings.add(parsed)
        return frozenset(ratings)

    @field_validator("required_amenities", mode="before")
    @classmethod
    def filter_amenities(cls, v: object) -> frozenset[AmenityTag]:
        tags: set[AmenityTag] = set()
        for item in _as_iterable(v):
            cleaned = str(item).strip().lower()
            if cleaned in VALID_AMENITIES:
                tags.add(AmenityTag(cleaned))
        return frozenset(tags)

    @field_validator("required_hours", mode="before")
    @classmethod
    def clean_hours(cls, v: object) -> frozenset[str]:
        # Unknown hour categories are kept: they match no gym rather than being ignored
        return frozenset(
            cleaned for item in _as_iterable(v) if (cleaned := str(item).strip().lower())
        )

    @field_validator("sort_key", mode="before")
    @classmethod
    def resolve_sort_key(cls, v: object) -> SortKey:
        return parse_sort_key(v)

    # --- convenience methods ---

    def with_changes(self, **changes: Any) -> CriteriaSnapshot:
        """Return a new validated snapshot with the given fields replaced."""
        return CriteriaSnapshot.model_validate({**self.model_dump(), **changes})

    @property
    def is_unconstrained(self) -> bool:
        """Whether no filter is active (sorting does not count)."""
        return not any(
            [
                self.search_text,
                self.city,
                self.max_price is not None,
                self.min_ratings,
                self.required_amenities,
                self.required_hours,
            ]
        )

    def active_filter_chips(self) -> list[dict[str, str]]:
        """Build filter chip descriptors for display."""
        chips: list[dict[str, str]] = []
        if self.search_text:
            chips.append({"key": "search_text", "label": f'"{self.search_text}"'})
        if self.city:
            chips.append({"key": "city", "label": self.city.title()})
        if self.max_price is not None:
            chips.append({"key": "max_price", "label": f"Max ₱{self.max_price:,}"})
        for rating in sorted(self.min_ratings):
            chips.append({"key": "min_rating", "label": f"{rating:.1f}+ stars"})
        for tag in sorted(self.required_amenities):
            chips.append({"key": "amenity", "label": tag.display_name, "value": tag.value})
        for hour in sorted(self.required_hours):
            chips.append({"key": "hours", "label": hour, "value": hour})
        return chips
