"""Tests for the input debouncer."""

import pytest

from fit_findr.utils.debounce import Debouncer


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestDebouncer:
    def test_nothing_pending(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0.3, clock=clock)
        assert debouncer.ready() is None
        assert not debouncer.has_pending

    def test_value_held_until_quiet(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0.3, clock=clock)
        debouncer.push("hol")
        clock.advance(0.2)
        assert debouncer.ready() is None
        clock.advance(0.15)
        assert debouncer.ready() == "hol"
        assert debouncer.ready() is None

    def test_push_restarts_window_and_keeps_latest(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0.3, clock=clock)
        debouncer.push("h")
        clock.advance(0.2)
        debouncer.push("ho")
        clock.advance(0.2)
        assert debouncer.ready() is None
        clock.advance(0.15)
        assert debouncer.ready() == "ho"

    def test_empty_string_is_a_value(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0.3, clock=clock)
        debouncer.push("")
        clock.advance(1)
        assert debouncer.ready() == ""

    def test_flush_ignores_clock(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0.3, clock=clock)
        debouncer.push("spa")
        assert debouncer.flush() == "spa"
        assert not debouncer.has_pending

    def test_cancel(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0.3, clock=clock)
        debouncer.push("spa")
        debouncer.cancel()
        clock.advance(1)
        assert debouncer.ready() is None

    def test_zero_wait(self, clock: FakeClock) -> None:
        debouncer: Debouncer[str] = Debouncer(0, clock=clock)
        debouncer.push("gym")
        assert debouncer.ready() == "gym"

    def test_negative_wait_rejected(self) -> None:
        with pytest.raises(ValueError):
            Debouncer(-1)
