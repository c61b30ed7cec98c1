"""Bounded selection of gyms for side-by-side comparison."""

from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from fit_findr.catalog import CatalogStore
    from fit_findr.models import FacilityRecord

MAX_COMPARE: Final = 3
MIN_COMPARE: Final = 2


class ToggleResult(StrEnum):
    """Outcome of toggling a gym in the comparison selection."""

    ADDED = "added"
    REMOVED = "removed"
    REJECTED_AT_CAPACITY = "rejected_at_capacity"
    UNKNOWN = "unknown"


class ComparisonSelection:
    """Ordered set of selected gym ids, never holding more than MAX_COMPARE."""

    def __init__(self, capacity: int = MAX_COMPARE) -> None:
        self._capacity = capacity
        self._selected: list[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(self._selected)

    @property
    def is_full(self) -> bool:
        return len(self._selected) >= self._capacity

    @property
    def can_compare(self) -> bool:
        """Whether enough gyms are selected to open the comparison."""
        return len(self._selected) >= MIN_COMPARE

    def toggle(self, facility_id: str) -> ToggleResult:
        """Select an unselected gym or deselect a selected one.

        Selecting beyond capacity is rejected and leaves the selection as it was.
        """
        if facility_id in self._selected:
            self._selected.remove(facility_id)
            return ToggleResult.REMOVED
        if self.is_full:
            return ToggleResult.REJECTED_AT_CAPACITY
        self._selected.append(facility_id)
        return ToggleResult.ADDED

    def remove(self, facility_id: str) -> bool:
        """Deselect a gym. Returns False if it was not selected."""
        if facility_id not in self._selected:
            return False
        self._selected.remove(facility_id)
        return True

    def clear(self) -> None:
        self._selected.clear()

    def records(self, store: "CatalogStore") -> list["FacilityRecord"]:
        """Selected records in selection order, skipping ids no longer in the store."""
        return [
            record
            for facility_id in self._selected
            if (record := store.get_by_id(facility_id)) is not None
        ]

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, facility_id: object) -> bool:
        return facility_id in self._selected
