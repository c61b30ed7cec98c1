"""Tests for raw field parsing helpers."""

import math

import pytest

from fit_findr.utils.parsing import (
    coerce_rating,
    derive_amenity_tags,
    haversine_km,
    is_monthly_tier,
    parse_amount,
    parse_leading_float,
)


class TestParseAmount:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("₱2,000", 2000),
            ("₱800", 800),
            ("PHP 1,300 / month", 1300),
            ("2500", 2500),
            (1500, 1500),
            (1500.0, 1500),
            ("₱1,000 - ₱2,000", 1000),
        ],
    )
    def test_parses(self, text: object, expected: int) -> None:
        assert parse_amount(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("-500", -500), (" -1,200", -1200), (-500, -500)],
    )
    def test_leading_minus_is_negative(self, text: object, expected: int) -> None:
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "Call us", None, True, math.nan, math.inf, [1]])
    def test_unparsable_is_none(self, text: object) -> None:
        assert parse_amount(text) is None


class TestParseLeadingFloat:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2.5 km away", 2.5),
            ("  12km", 12.0),
            (".5 km", 0.5),
            ("-1.5", -1.5),
            ("4", 4.0),
            (3, 3.0),
        ],
    )
    def test_parses_leading_number(self, text: object, expected: float) -> None:
        assert parse_leading_float(text) == expected

    @pytest.mark.parametrize("text", ["km 2.5", "", "nan", None, math.nan, False])
    def test_no_leading_number(self, text: object) -> None:
        assert parse_leading_float(text) is None


class TestCoerceRating:
    def test_valid(self) -> None:
        assert coerce_rating("4.8") == 4.8
        assert coerce_rating(3) == 3.0

    def test_invalid_is_zero(self) -> None:
        assert coerce_rating("unrated") == 0.0
        assert coerce_rating(None) == 0.0


class TestIsMonthlyTier:
    def test_by_duration(self) -> None:
        assert is_monthly_tier("Monthly", "")
        assert is_monthly_tier(" monthly ", "one-time")

    def test_by_period(self) -> None:
        assert is_monthly_tier("1 Month", "per month")

    def test_other_tiers(self) -> None:
        assert not is_monthly_tier("3 Months", "one-time")
        assert not is_monthly_tier("Daily", "per day")


class TestDeriveAmenityTags:
    def test_known_labels(self) -> None:
        labels = [
            "Swimming Pool",
            "Sauna & Steam Room",
            "Valet Parking",
            "Group Classes",
            "Certified Trainers",
            "24/7 Club Access",
        ]
        assert derive_amenity_tags(labels) == frozenset(
            {"pool", "sauna", "parking", "classes", "trainer", "24h"}
        )

    def test_near_misses_do_not_match(self) -> None:
        # Substring scan only: "Training" is not "trainer", "Class Scheduling" is not "classes"
        assert derive_amenity_tags(["Personal Training", "Class Scheduling"]) == frozenset()

    def test_one_label_many_tags(self) -> None:
        assert derive_amenity_tags(["Pool & Sauna"]) == frozenset({"pool", "sauna"})

    def test_empty(self) -> None:
        assert derive_amenity_tags([]) == frozenset()


class TestHaversineKm:
    def test_same_point(self) -> None:
        assert haversine_km(10.3, 123.9, 10.3, 123.9) == 0.0

    def test_symmetric(self) -> None:
        a = haversine_km(10.3157, 123.8854, 9.6477, 123.8516)
        b = haversine_km(9.6477, 123.8516, 10.3157, 123.8854)
        assert a == pytest.approx(b)

    def test_cebu_to_tagbilaran(self) -> None:
        # Roughly 74 km across the Bohol Strait
        assert haversine_km(10.3157, 123.8854, 9.6477, 123.8516) == pytest.approx(74.3, abs=1.0)
