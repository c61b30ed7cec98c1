"""Directory browser: owns the current filters and comparison selection."""

import time
from collections.abc import Callable
from typing import Any

from fit_findr.catalog import CatalogStore, load_catalog
from fit_findr.config import Settings
from fit_findr.filters.comparison import (
    MAX_COMPARE,
    MIN_COMPARE,
    ComparisonSelection,
    ToggleResult,
)
from fit_findr.filters.criteria import CriteriaSnapshot
from fit_findr.filters.engine import apply
from fit_findr.logging import get_logger
from fit_findr.models import FacilityRecord, VisibleSet
from fit_findr.utils.debounce import Debouncer

logger = get_logger(__name__)


class ComparisonError(Exception):
    """Raised when a comparison is opened with too few gyms selected."""


class DirectoryBrowser:
    """State holder between user input events and the filter engine.

    Each input event replaces the criteria snapshot and recomputes the
    visible set from scratch. Typed search text is held back by a debouncer
    and applied by ``poll()``.
    """

    def __init__(
        self,
        store: CatalogStore,
        *,
        default_max_price: int | None = None,
        debounce_seconds: float = 0.3,
        clock: Callable[[], float] = time.monotonic,
        compare_capacity: int = MAX_COMPARE,
    ) -> None:
        """Initialize the browser.

        Args:
            store: Catalog to browse.
            default_max_price: Price ceiling restored by ``reset()`` (None for no ceiling).
            debounce_seconds: Quiet period before typed search text is applied.
            clock: Monotonic clock used by the search debouncer.
            compare_capacity: Maximum gyms in the comparison selection.
        """
        self._store = store
        self._default_max_price = default_max_price
        self._criteria = CriteriaSnapshot(max_price=default_max_price)
        self._selection = ComparisonSelection(compare_capacity)
        self._search = Debouncer[str](debounce_seconds, clock=clock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DirectoryBrowser":
        store = load_catalog(settings.get_catalog_path(), origin=settings.get_origin())
        return cls(
            store,
            default_max_price=settings.default_max_price,
            debounce_seconds=settings.search_debounce_seconds,
        )

    @property
    def store(self) -> CatalogStore:
        return self._store

    @property
    def criteria(self) -> CriteriaSnapshot:
        return self._criteria

    @property
    def selection(self) -> ComparisonSelection:
        return self._selection

    # --- filtering ---

    def results(self) -> VisibleSet:
        """Visible gyms for the current criteria, in display order."""
        visible = apply(self._criteria, self._store.get_all())
        logger.debug(
            "criteria_applied",
            total_facilities=len(self._store),
            visible=visible.count,
            sort_key=self._criteria.sort_key.value,
            unconstrained=self._criteria.is_unconstrained,
        )
        return visible

    def update(self, **changes: Any) -> VisibleSet:
        """Replace some criteria fields and recompute the visible set."""
        self._criteria = self._criteria.with_changes(**changes)
        return self.results()

    def set_criteria(self, criteria: CriteriaSnapshot) -> VisibleSet:
        self._criteria = criteria
        self._search.cancel()
        return self.results()

    def type_search(self, text: str) -> None:
        """Queue search text; it takes effect on the first ``poll()`` after the quiet period."""
        self._search.push(text)

    def poll(self) -> VisibleSet | None:
        """Apply queued search text if it is due. Returns None when nothing changed."""
        text = self._search.ready()
        if text is None:
            return None
        return self.update(search_text=text)

    def reset(self) -> VisibleSet:
        """Clear every filter and restore the default price ceiling.

        The comparison selection is left alone.
        """
        self._search.cancel()
        self._criteria = CriteriaSnapshot(
            max_price=self._default_max_price,
            sort_key=self._criteria.sort_key,
        )
        logger.info("filters_cleared", max_price=self._default_max_price)
        return self.results()

    # --- details & comparison ---

    def detail(self, facility_id: str) -> FacilityRecord | None:
        return self._store.get_by_id(facility_id)

    def toggle_compare(self, facility_id: str) -> ToggleResult:
        """Add or remove a gym from the comparison selection."""
        if facility_id not in self._store:
            logger.warning("compare_unknown_facility", facility_id=facility_id)
            return ToggleResult.UNKNOWN

        result = self._selection.toggle(facility_id)
        if result is ToggleResult.REJECTED_AT_CAPACITY:
            logger.info(
                "compare_rejected",
                facility_id=facility_id,
                capacity=self._selection.capacity,
            )
        else:
            logger.debug(
                "compare_toggled",
                facility_id=facility_id,
                result=result.value,
                selected=len(self._selection),
            )
        return result

    def remove_from_comparison(self, facility_id: str) -> bool:
        return self._selection.remove(facility_id)

    def clear_comparison(self) -> None:
        self._selection.clear()

    def comparison(self) -> list[FacilityRecord]:
        """Selected gyms for side-by-side display.

        Raises:
            ComparisonError: If fewer than two gyms are selected.
        """
        if not self._selection.can_compare:
            raise ComparisonError(f"Please select at least {MIN_COMPARE} gyms to compare.")
        return self._selection.records(self._store)
