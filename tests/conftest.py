"""Shared pytest fixtures."""

import os
import sys
from collections.abc import Callable, Iterator
from typing import Any

import pytest
from hypothesis import HealthCheck, settings
from structlog.testing import capture_logs

from fit_findr.catalog import CatalogStore, load_catalog
from fit_findr.config import Settings
from fit_findr.models import FacilityRecord

RecordFactory = Callable[..., FacilityRecord]


def pytest_configure(config: pytest.Config) -> None:
    """Force line-buffered stdout when piped."""
    if hasattr(sys.stdout, "reconfigure") and not sys.stdout.isatty():
        sys.stdout.reconfigure(line_buffering=True)
    if hasattr(sys.stderr, "reconfigure") and not sys.stderr.isatty():
        sys.stderr.reconfigure(line_buffering=True)


# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=10)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def captured_logs() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events instead of printing them to stdout."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


def build_record(
    facility_id: str,
    *,
    name: str | None = None,
    description: str = "",
    city: str = "cebu",
    price: int | str | None = 1000,
    rating: Any = 4.0,
    facilities: list[str] | None = None,
    coordinates: dict[str, float] | None = None,
    distance_label: str | None = None,
    hours: dict[str, str] | None = None,
) -> FacilityRecord:
    """Build a record from the handful of fields a test cares about."""
    pricing: list[dict[str, str]] = []
    if price is not None:
        amount = f"₱{price:,}" if isinstance(price, int) else price
        pricing.append({"duration": "Monthly", "amount": amount, "period": "per month"})
    return FacilityRecord.model_validate(
        {
            "id": facility_id,
            "name": name or f"Gym {facility_id}",
            "description": description,
            "city": city,
            "rating": rating,
            "facilities": [{"name": label} for label in facilities or []],
            "pricing": pricing,
            "coordinates": coordinates,
            "distance_label": distance_label,
            "hours": hours or {},
        }
    )


@pytest.fixture
def make_record() -> RecordFactory:
    return build_record


@pytest.fixture
def sample_records() -> list[FacilityRecord]:
    """The three-gym example: R1 cheap Cebu, R2 premium Cebu, R3 Bohol."""
    return [
        build_record("r1", price=800, rating=3.0, city="cebu", facilities=["Free Parking"]),
        build_record(
            "r2",
            price=2000,
            rating=4.8,
            city="cebu",
            facilities=["Swimming Pool", "Sauna & Steam Room"],
        ),
        build_record("r3", price=1300, rating=3.7, city="bohol", facilities=["Parking Space"]),
    ]


@pytest.fixture
def catalog() -> CatalogStore:
    """The built-in gym catalog."""
    return load_catalog()
