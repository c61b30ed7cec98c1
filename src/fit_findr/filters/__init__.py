"""Gym filtering, ordering and comparison selection."""

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fit_findr.filters.comparison import (  # noqa: F401
        ComparisonSelection,
        ToggleResult,
    )
    from fit_findr.filters.criteria import CriteriaSnapshot  # noqa: F401
    from fit_findr.filters.engine import apply, evaluate, sort_records  # noqa: F401

__all__ = [
    "apply",
    "ComparisonSelection",
    "CriteriaSnapshot",
    "evaluate",
    "sort_records",
    "ToggleResult",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "apply": (".engine", "apply"),
    "ComparisonSelection": (".comparison", "ComparisonSelection"),
    "CriteriaSnapshot": (".criteria", "CriteriaSnapshot"),
    "evaluate": (".engine", "evaluate"),
    "sort_records": (".engine", "sort_records"),
    "ToggleResult": (".comparison", "ToggleResult"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr = _LAZY_IMPORTS[name]
        mod = importlib.import_module(module_path, __name__)
        val = getattr(mod, attr)
        globals()[name] = val  # Cache so __getattr__ is only called once
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
