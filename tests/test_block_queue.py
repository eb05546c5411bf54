"""Tests for the block queue and target selection."""

from rgbbeam.block_queue import BlockQueue
from rgbbeam.models import Color


def test_target_is_bottom_most_block():
    queue = BlockQueue(floor=540)
    queue.spawn(Color.RED, 10)
    lowest = queue.spawn(Color.GREEN, 50)
    queue.spawn(Color.BLUE, 30)
    assert queue.current_target() is lowest


def test_empty_queue_has_no_target():
    assert BlockQueue().current_target() is None
    assert BlockQueue().distance_to_floor() is None


def test_tie_goes_to_earliest_spawn():
    queue = BlockQueue(floor=540)
    first = queue.spawn(Color.RED, 100, spawn_time_ms=0)
    queue.spawn(Color.BLUE, 100, spawn_time_ms=10)
    assert queue.current_target() is first


def test_remove_by_identity():
    queue = BlockQueue(floor=540)
    a = queue.spawn(Color.RED, 0)
    b = queue.spawn(Color.RED, 0)
    assert queue.remove(b)
    assert list(queue) == [a]
    assert not queue.remove(b)


def test_advance_all_signals_floor():
    queue = BlockQueue(floor=100)
    queue.spawn(Color.RED, 0)
    queue.spawn(Color.GREEN, 60)
    assert not queue.advance_all(30)
    assert [b.position for b in queue] == [30, 90]
    assert queue.distance_to_floor() == 10
    assert queue.advance_all(10)


def test_ids_keep_counting_after_clear():
    queue = BlockQueue()
    first = queue.spawn(Color.RED, 0)
    removed = queue.clear()
    assert removed == [first]
    assert len(queue) == 0
    assert queue.spawn(Color.BLUE, 0).id != first.id
