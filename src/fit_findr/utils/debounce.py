"""Trailing-edge debounce for bursts of input values."""

import time
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Hold the latest pushed value until input has been quiet for ``wait_seconds``.

    Nothing runs on a timer: the caller polls with ``ready()``. The clock is
    injectable so tests can drive time explicitly.
    """

    def __init__(
        self,
        wait_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if wait_seconds < 0:
            raise ValueError("wait_seconds must be >= 0")
        self._wait = wait_seconds
        self._clock = clock
        self._pending: T | None = None
        self._has_pending = False
        self._deadline = 0.0

    @property
    def has_pending(self) -> bool:
        return self._has_pending

    def push(self, value: T) -> None:
        """Replace any pending value and restart the quiet period."""
        self._pending = value
        self._has_pending = True
        self._deadline = self._clock() + self._wait

    def ready(self) -> T | None:
        """Return and clear the pending value once the quiet period has elapsed."""
        if not self._has_pending or self._clock() < self._deadline:
            return None
        return self.flush()

    def flush(self) -> T | None:
        """Return and clear the pending value immediately."""
        value = self._pending
        self._pending = None
        self._has_pending = False
        return value

    def cancel(self) -> None:
        self._pending = None
        self._has_pending = False
