"""Tests for the discrete-event scheduler."""

import pytest

from rgbbeam.scheduler import ProcessKind, Scheduler


def _drain(scheduler, until_ms):
    fired = []
    while (process := scheduler.pop_due(until_ms)) is not None:
        fired.append((scheduler.now_ms, process.kind))
    scheduler.advance_to(until_ms)
    return fired


def test_periodic_process_rearms():
    scheduler = Scheduler()
    scheduler.schedule(ProcessKind.TARGET_TICK, 50)
    fired = _drain(scheduler, 160)
    assert [t for t, _ in fired] == [50, 100, 150]
    assert scheduler.now_ms == 160
    assert scheduler.next_fire_time() == 200


def test_nothing_due_before_fire_time():
    scheduler = Scheduler()
    scheduler.schedule(ProcessKind.SPAWN, 1000)
    assert scheduler.pop_due(999) is None


def test_cancelled_process_never_fires():
    scheduler = Scheduler()
    spawn = scheduler.schedule(ProcessKind.SPAWN, 100)
    scheduler.schedule(ProcessKind.ACCELERATE, 100)
    scheduler.cancel(spawn)
    fired = _drain(scheduler, 100)
    assert [kind for _, kind in fired] == [ProcessKind.ACCELERATE]
    assert len(scheduler) == 1


def test_same_instant_fires_in_scheduling_order():
    scheduler = Scheduler()
    scheduler.schedule(ProcessKind.ACCELERATE, 10)
    scheduler.schedule(ProcessKind.TARGET_TICK, 5)
    fired = _drain(scheduler, 10)
    assert fired == [
        (5, ProcessKind.TARGET_TICK),
        (10, ProcessKind.ACCELERATE),
        (10, ProcessKind.TARGET_TICK),
    ]


def test_cancel_all():
    scheduler = Scheduler()
    scheduler.schedule(ProcessKind.SPAWN, 10)
    scheduler.schedule(ProcessKind.COUNTDOWN, 20)
    scheduler.cancel_all()
    assert scheduler.next_fire_time() is None


def test_invalid_arguments():
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.schedule(ProcessKind.SPAWN, 0)
    scheduler.advance_to(100)
    with pytest.raises(ValueError):
        scheduler.advance_to(50)
