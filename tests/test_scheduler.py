"""Tests for the manual scheduler."""

import pytest

from hex_territory.core.exceptions import SimulationError, RangeValidationError
from hex_territory.game.scheduler import ManualScheduler


def test_callbacks_fire_once_per_tick():
    scheduler = ManualScheduler()
    calls = []
    scheduler.schedule_repeating(lambda: calls.append("a"), 100)
    scheduler.schedule_repeating(lambda: calls.append("b"), 250)

    scheduler.advance(3)

    assert calls == ["a", "b"] * 3
    assert scheduler.ticks_elapsed == 3


def test_cancel_stops_callback():
    scheduler = ManualScheduler()
    calls = []
    handle = scheduler.schedule_repeating(lambda: calls.append(1), 100)
    scheduler.advance()
    scheduler.cancel(handle)
    scheduler.advance(2)

    assert calls == [1]
    assert scheduler.is_idle
    # unknown handles are ignored
    scheduler.cancel(handle)


def test_cancel_during_tick_skips_later_callback():
    scheduler = ManualScheduler()
    calls = []
    handles = {}
    handles["first"] = scheduler.schedule_repeating(lambda: scheduler.cancel(handles["second"]), 100)
    handles["second"] = scheduler.schedule_repeating(lambda: calls.append(1), 100)

    scheduler.advance()

    assert calls == []
    assert scheduler.pending == 1


def test_run_until_idle_counts_ticks():
    scheduler = ManualScheduler()
    state = {"left": 4}
    handle = None

    def countdown():
        state["left"] -= 1
        if state["left"] == 0:
            scheduler.cancel(handle)

    handle = scheduler.schedule_repeating(countdown, 100)
    assert scheduler.run_until_idle() == 4


def test_run_until_idle_gives_up():
    scheduler = ManualScheduler()
    scheduler.schedule_repeating(lambda: None, 100)
    with pytest.raises(SimulationError):
        scheduler.run_until_idle(max_ticks=10)


def test_interval_must_be_positive():
    with pytest.raises(RangeValidationError):
        ManualScheduler().schedule_repeating(lambda: None, 0)
