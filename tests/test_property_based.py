"""Property-based tests using Hypothesis.

Invariants of the filter engine and comparison selection: purity,
monotonicity of constraints, sort stability, capacity bound.
"""

from hypothesis import given
from hypothesis import strategies as st

from fit_findr.filters.comparison import MAX_COMPARE, ComparisonSelection, ToggleResult
from fit_findr.filters.criteria import CriteriaSnapshot
from fit_findr.filters.engine import evaluate, sort_records
from fit_findr.models import AmenityTag, FacilityRecord, SortKey

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

FACILITY_LABELS = [
    "Swimming Pool",
    "Sauna",
    "Free Parking",
    "Group Classes",
    "Certified Trainers",
    "24/7 Access",
    "Free WiFi",
    "Juice Bar",
]

prices = st.integers(min_value=0, max_value=5000)
ratings = st.floats(min_value=0, max_value=5, allow_nan=False)
words = st.sampled_from(["gym", "fitness", "spa", "crossfit", "yoga", "box", "club"])


@st.composite
def records(draw: st.DrawFn) -> list[FacilityRecord]:
    count = draw(st.integers(min_value=0, max_value=8))
    result = []
    for i in range(count):
        result.append(
            FacilityRecord.model_validate(
                {
                    "id": f"gym-{i}",
                    "name": " ".join(draw(st.lists(words, min_size=1, max_size=3))),
                    "description": " ".join(draw(st.lists(words, max_size=5))),
                    "city": draw(st.sampled_from(["cebu", "bohol"])),
                    "rating": draw(ratings),
                    "facilities": [
                        {"name": label}
                        for label in draw(st.lists(st.sampled_from(FACILITY_LABELS), max_size=4))
                    ],
                    "pricing": [
                        {
                            "duration": "Monthly",
                            "amount": f"₱{draw(prices):,}",
                            "period": "per month",
                        }
                    ],
                    "distance_label": draw(
                        st.one_of(st.none(), st.just("unknown"), prices.map(lambda d: f"{d} km"))
                    ),
                }
            )
        )
    return result


criteria_snapshots = st.builds(
    CriteriaSnapshot,
    search_text=st.one_of(st.just(""), words),
    city=st.one_of(st.none(), st.sampled_from(["cebu", "bohol"])),
    max_price=st.one_of(st.none(), prices),
    min_ratings=st.frozensets(st.sampled_from([3.0, 3.5, 4.0, 4.5]), max_size=2),
    required_amenities=st.frozensets(st.sampled_from(list(AmenityTag)), max_size=2),
    required_hours=st.frozensets(st.just("24h"), max_size=1),
    sort_key=st.sampled_from(list(SortKey)),
)

# One additional constraint to layer on top of an existing snapshot
extra_constraints = st.one_of(
    words.map(lambda w: {"search_text": w}),
    st.sampled_from(["cebu", "bohol"]).map(lambda c: {"city": c}),
    prices.map(lambda p: {"max_price": p}),
    st.sampled_from(list(AmenityTag)).map(lambda t: {"required_amenities": {t}}),
    st.just({"required_hours": {"24h"}}),
)


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------


class TestEvaluateProperties:
    @given(criteria_snapshots, records())
    def test_idempotent(self, criteria: CriteriaSnapshot, recs: list[FacilityRecord]) -> None:
        assert evaluate(criteria, recs) == evaluate(criteria, recs)

    @given(records())
    def test_empty_criteria_is_identity(self, recs: list[FacilityRecord]) -> None:
        assert evaluate(CriteriaSnapshot(), recs).ids == tuple(r.id for r in recs)

    @given(criteria_snapshots, records())
    def test_result_is_ordered_subsequence(
        self, criteria: CriteriaSnapshot, recs: list[FacilityRecord]
    ) -> None:
        ids = [r.id for r in recs]
        visible = evaluate(criteria, recs).ids
        positions = [ids.index(i) for i in visible]
        assert positions == sorted(positions)

    @given(criteria_snapshots, extra_constraints, records())
    def test_adding_constraint_never_grows_result(
        self,
        criteria: CriteriaSnapshot,
        extra: dict,
        recs: list[FacilityRecord],
    ) -> None:
        # Only add the constraint where the field is currently unconstrained
        field = next(iter(extra))
        if getattr(criteria, field) not in (None, "", frozenset()):
            return
        stricter = criteria.with_changes(**extra)
        assert set(evaluate(stricter, recs).ids) <= set(evaluate(criteria, recs).ids)


# ---------------------------------------------------------------------------
# sort_records
# ---------------------------------------------------------------------------


def _sort_value(record: FacilityRecord, key: SortKey) -> object:
    if key in (SortKey.PRICE_ASC, SortKey.PRICE_DESC):
        return record.monthly_price
    if key is SortKey.RATING_DESC:
        return record.rating
    if key is SortKey.DISTANCE_ASC:
        return record.distance_km
    return None


class TestSortProperties:
    @given(records(), st.sampled_from(list(SortKey)))
    def test_is_permutation(self, recs: list[FacilityRecord], key: SortKey) -> None:
        assert sorted(r.id for r in sort_records(recs, key)) == sorted(r.id for r in recs)

    @given(records(), st.sampled_from(list(SortKey)))
    def test_stable_for_ties(self, recs: list[FacilityRecord], key: SortKey) -> None:
        original = {r.id: i for i, r in enumerate(recs)}
        ordered = sort_records(recs, key)
        for a, b in zip(ordered, ordered[1:], strict=False):
            if _sort_value(a, key) == _sort_value(b, key):
                assert original[a.id] < original[b.id]

    @given(records())
    def test_price_ascending_is_non_decreasing(self, recs: list[FacilityRecord]) -> None:
        prices_in_order = [r.monthly_price for r in sort_records(recs, SortKey.PRICE_ASC)]
        assert prices_in_order == sorted(prices_in_order)

    @given(records())
    def test_known_distances_before_unknown(self, recs: list[FacilityRecord]) -> None:
        ordered = sort_records(recs, SortKey.DISTANCE_ASC)
        unknown_seen = False
        for record in ordered:
            if record.distance_km is None:
                unknown_seen = True
            else:
                assert not unknown_seen


# ---------------------------------------------------------------------------
# ComparisonSelection
# ---------------------------------------------------------------------------


class TestComparisonSelectionProperties:
    @given(st.lists(st.sampled_from([f"gym-{i}" for i in range(6)]), max_size=30))
    def test_never_exceeds_capacity(self, toggles: list[str]) -> None:
        selection = ComparisonSelection()
        for facility_id in toggles:
            before = selection.selected
            result = selection.toggle(facility_id)
            assert len(selection) <= MAX_COMPARE
            if result is ToggleResult.REJECTED_AT_CAPACITY:
                assert selection.selected == before
