"""Read-only store of gym records."""

import json
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from fit_findr.data.gyms import GYM_CATALOG
from fit_findr.logging import get_logger
from fit_findr.models import Coordinates, FacilityRecord

logger = get_logger(__name__)


class DuplicateFacilityError(ValueError):
    """Raised when two catalog records share an id."""

    def __init__(self, facility_id: str) -> None:
        super().__init__(f"Duplicate facility id in catalog: {facility_id!r}")
        self.facility_id = facility_id


class CatalogStore:
    """Immutable, insertion-ordered collection of facility records keyed by id."""

    def __init__(self, records: Iterable[FacilityRecord]) -> None:
        """Initialize the store.

        Args:
            records: Records in display order.

        Raises:
            DuplicateFacilityError: If two records share an id.
        """
        by_id: dict[str, FacilityRecord] = {}
        for record in records:
            if record.id in by_id:
                raise DuplicateFacilityError(record.id)
            by_id[record.id] = record
        self._records = tuple(by_id.values())
        self._by_id: Mapping[str, FacilityRecord] = MappingProxyType(by_id)

    @classmethod
    def from_raw(
        cls,
        raw_records: Iterable[Any],
        *,
        origin: Coordinates | None = None,
    ) -> "CatalogStore":
        """Validate raw record dicts and build a store from them."""
        context = {"origin": origin} if origin is not None else None
        return cls(
            FacilityRecord.model_validate(
                dict(raw) if isinstance(raw, Mapping) else raw, context=context
            )
            for raw in raw_records
        )

    def get_all(self) -> tuple[FacilityRecord, ...]:
        """All records in catalog order."""
        return self._records

    def get_by_id(self, facility_id: str) -> FacilityRecord | None:
        """Look up a record, returning None for unknown (e.g. stale) ids."""
        return self._by_id.get(facility_id)

    def cities(self) -> list[str]:
        """Distinct cities in order of first appearance."""
        return list(dict.fromkeys(r.city for r in self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FacilityRecord]:
        return iter(self._records)

    def __contains__(self, facility_id: object) -> bool:
        return facility_id in self._by_id


def load_catalog(path: Path | None = None, *, origin: Coordinates | None = None) -> CatalogStore:
    """Load the catalog from a JSON file, or the built-in gym list when no path is given.

    Args:
        path: Optional JSON file holding a list of raw gym records.
        origin: Reference point for distance sorting (default: Cebu City centre).

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON, a record fails validation,
            or ids are duplicated.
    """
    if path is None:
        store = CatalogStore.from_raw(GYM_CATALOG, origin=origin)
        logger.debug("catalog_loaded", source="builtin", facilities=len(store))
        return store

    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Catalog file must contain a JSON list of records: {path}")
    store = CatalogStore.from_raw(raw, origin=origin)
    logger.info("catalog_loaded", source=str(path), facilities=len(store))
    return store
