import time

import pytest

from linksocket.clock import Instant
from linksocket.time_queue import TimeQueue


@pytest.fixture
def clock(monkeypatch):
    now = [100.0]
    monkeypatch.setattr(time, "monotonic", lambda: now[0])
    return now


def test_empty_queue(clock):
    queue = TimeQueue()
    assert not queue.has_item()
    assert queue.pop_item() is None
    assert queue.peek_entry() is None
    assert len(queue) == 0


def test_future_item_is_held(clock):
    queue = TimeQueue()
    queue.add_item(Instant(clock[0] + 1.0), "later")
    assert not queue.has_item()
    assert queue.pop_item() is None
    assert len(queue) == 1


def test_item_due_now_is_released(clock):
    queue = TimeQueue()
    queue.add_item(Instant(clock[0]), "now")
    assert queue.has_item()
    assert queue.pop_item() == "now"
    assert len(queue) == 0


def test_items_released_in_time_order(clock):
    queue = TimeQueue()
    queue.add_item(Instant(clock[0] + 0.3), "c")
    queue.add_item(Instant(clock[0] + 0.1), "a")
    queue.add_item(Instant(clock[0] + 0.2), "b")
    clock[0] += 1.0
    assert [queue.pop_item() for _ in range(4)] == ["a", "b", "c", None]


def test_release_follows_clock(clock):
    queue = TimeQueue()
    queue.add_item(Instant(clock[0] + 0.5), "x")
    queue.add_item(Instant(clock[0] + 2.0), "y")
    clock[0] += 1.0
    assert queue.pop_item() == "x"
    assert queue.pop_item() is None
    assert len(queue) == 1


def test_peek_entry_shows_earliest(clock):
    queue = TimeQueue()
    late = Instant(clock[0] + 5.0)
    early = Instant(clock[0] + 1.0)
    queue.add_item(late, "late")
    queue.add_item(early, "early")
    entry = queue.peek_entry()
    assert entry.item == "early"
    assert entry.instant == early
    assert len(queue) == 2


def test_equal_instants_keep_insertion_order(clock):
    queue = TimeQueue()
    for name in ["first", "second", "third"]:
        queue.add_item(Instant(clock[0]), name)
    assert [queue.pop_item() for _ in range(3)] == ["first", "second", "third"]