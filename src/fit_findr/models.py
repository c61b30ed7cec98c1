"""Pydantic models for gym records and result sets."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Final

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from fit_findr.utils.parsing import (
    coerce_rating,
    derive_amenity_tags,
    haversine_km,
    is_monthly_tier,
    parse_amount,
    parse_leading_float,
)

# Cebu City centre, the default map centre and the origin for distance sorting
DEFAULT_ORIGIN_LAT: Final = 10.3157
DEFAULT_ORIGIN_LNG: Final = 123.8854


class AmenityTag(StrEnum):
    """Canonical amenity categories derived from facility labels."""

    POOL = "pool"
    SAUNA = "sauna"
    PARKING = "parking"
    CLASSES = "classes"
    TRAINER = "trainer"
    OPEN_24H = "24h"

    @property
    def display_name(self) -> str:
        """Human-readable label for this tag."""
        return _AMENITY_LABELS[self.value]


_AMENITY_LABELS: Final[dict[str, str]] = {
    "pool": "Swimming pool",
    "sauna": "Sauna",
    "parking": "Parking",
    "classes": "Group classes",
    "trainer": "Personal trainer",
    "24h": "24/7 access",
}


class SortKey(StrEnum):
    """Result ordering options."""

    NONE = "none"
    PRICE_ASC = "price-ascending"
    PRICE_DESC = "price-descending"
    RATING_DESC = "rating-descending"
    DISTANCE_ASC = "distance-ascending"


# Option values used by the original sort dropdown
SORT_ALIASES: Final[dict[str, SortKey]] = {
    "price-low": SortKey.PRICE_ASC,
    "price-high": SortKey.PRICE_DESC,
    "rating": SortKey.RATING_DESC,
    "distance": SortKey.DISTANCE_ASC,
}


def parse_sort_key(value: object) -> SortKey:
    """Resolve a raw sort option, falling back to no sorting for unknown values."""
    if isinstance(value, SortKey):
        return value
    if not isinstance(value, str):
        return SortKey.NONE
    cleaned = value.strip().lower()
    if cleaned in SORT_ALIASES:
        return SORT_ALIASES[cleaned]
    try:
        return SortKey(cleaned)
    except ValueError:
        return SortKey.NONE


class Coordinates(BaseModel):
    """A latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Contact(BaseModel):
    """Contact details shown on the detail and comparison views."""

    model_config = ConfigDict(frozen=True)

    phone: str = ""
    email: str = ""
    website: str = ""


class FacilityItem(BaseModel):
    """One facility/amenity label as displayed on a gym card."""

    model_config = ConfigDict(frozen=True)

    icon: str = ""
    name: str


class PricingTier(BaseModel):
    """A membership pricing option (e.g. Monthly, ₱2,000, per month)."""

    model_config = ConfigDict(frozen=True)

    duration: str
    amount: str
    period: str = ""

    @property
    def amount_value(self) -> int | None:
        """Parsed amount, or None if the display text has no digits."""
        return parse_amount(self.amount)

    @property
    def is_monthly(self) -> bool:
        return is_monthly_tier(self.duration, self.period)


class FacilityRecord(BaseModel):
    """A gym in the catalog.

    ``monthly_price``, ``amenities``, ``open_24_7`` and ``distance_km`` are
    derived from the descriptive fields when the record is built and are
    always recomputed, so they cannot drift from the labels they come from.
    Pass ``context={"origin": Coordinates(...)}`` to ``model_validate`` to
    measure distances from somewhere other than Cebu City centre.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    city: str
    rating: float = 0.0
    review_count: str = ""
    image: str = ""
    location: str = ""
    coordinates: Coordinates | None = None
    distance_label: str | None = None
    hours: dict[str, str] = Field(default_factory=dict)
    contact: Contact = Field(default_factory=Contact)
    facilities: tuple[FacilityItem, ...] = ()
    pricing: tuple[PricingTier, ...] = ()

    # Derived at load time
    monthly_price: int = Field(default=0, ge=0)
    amenities: frozenset[AmenityTag] = frozenset()
    open_24_7: bool = False
    distance_km: float | None = None

    @model_validator(mode="before")
    @classmethod
    def derive_fields(cls, data: Any, info: ValidationInfo) -> Any:
        """Compute the derived filter and sort fields from the raw record."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        raw_facilities = data.get("facilities") or ()
        raw_pricing = data.get("pricing") or ()
        hours = data.get("hours") or {}
        if not (
            isinstance(raw_facilities, list | tuple)
            and isinstance(raw_pricing, list | tuple)
            and isinstance(hours, Mapping)
        ):
            # Wrong shapes are left for field validation to reject
            return data

        facilities = tuple(FacilityItem.model_validate(f) for f in raw_facilities)
        pricing = tuple(PricingTier.model_validate(p) for p in raw_pricing)
        raw_coords = data.get("coordinates")
        coords = Coordinates.model_validate(raw_coords) if raw_coords is not None else None

        monthly = [
            value
            for tier in pricing
            if tier.is_monthly and (value := tier.amount_value) is not None
        ]

        data["facilities"] = facilities
        data["pricing"] = pricing
        data["coordinates"] = coords
        data["monthly_price"] = max(min(monthly), 0) if monthly else 0
        data["amenities"] = frozenset(
            AmenityTag(tag) for tag in derive_amenity_tags(f.name for f in facilities)
        )
        data["open_24_7"] = any("24/7" in str(text) for text in hours.values())
        data["distance_km"] = _derive_distance(data.get("distance_label"), coords, info)
        return data

    @field_validator("rating", mode="before")
    @classmethod
    def coerce_rating_value(cls, v: object) -> float:
        return coerce_rating(v)

    @field_validator("city", mode="before")
    @classmethod
    def normalize_city(cls, v: object) -> str:
        """Normalize city to lowercase without surrounding whitespace."""
        return str(v or "").strip().lower()

    @property
    def monthly_tier(self) -> PricingTier | None:
        """The first monthly pricing tier, if any."""
        return next((tier for tier in self.pricing if tier.is_monthly), None)

    @property
    def monthly_price_label(self) -> str:
        tier = self.monthly_tier
        return tier.amount if tier else "N/A"

    @property
    def facility_labels(self) -> list[str]:
        return [f.name for f in self.facilities]


def _derive_distance(
    label: object, coords: Coordinates | None, info: ValidationInfo
) -> float | None:
    """Distance from an explicit label, else from coordinates, else unknown."""
    if label is not None:
        parsed = parse_leading_float(label)
        if parsed is not None:
            return parsed
    if coords is None:
        return None
    origin = (info.context or {}).get("origin")
    if isinstance(origin, Coordinates):
        return haversine_km(origin.lat, origin.lng, coords.lat, coords.lng)
    return haversine_km(DEFAULT_ORIGIN_LAT, DEFAULT_ORIGIN_LNG, coords.lat, coords.lng)


class VisibleSet(BaseModel):
    """Ordered facilities passing every active filter."""

    model_config = ConfigDict(frozen=True)

    records: tuple[FacilityRecord, ...] = ()

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(r.id for r in self.records)

    @property
    def count(self) -> int:
        return len(self.records)
