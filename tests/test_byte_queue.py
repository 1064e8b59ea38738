import pytest
from hypothesis import given
from hypothesis import strategies as st

from iqpacket.byte_queue import ByteQueue, QueueFullError


def test_new_queue_is_empty():
    queue = ByteQueue(4)
    assert queue.is_empty()
    assert not queue.is_full()
    assert len(queue) == 0


def test_holds_one_less_than_size():
    queue = ByteQueue(4)
    for value in (1, 2, 3):
        queue.put(value)
    assert queue.is_full()
    assert len(queue) == 3
    with pytest.raises(QueueFullError):
        queue.put(4)
    assert len(queue) == 3


def test_fifo_order():
    queue = ByteQueue(8)
    for value in (10, 20, 30):
        queue.put(value)
    assert [queue.get(), queue.get(), queue.get()] == [10, 20, 30]
    assert queue.is_empty()


def test_peek_does_not_remove():
    queue = ByteQueue(3)
    queue.put(7)
    assert queue.peek() == 7
    assert len(queue) == 1
    assert queue.get() == 7


def test_get_and_peek_on_empty_raise():
    queue = ByteQueue(3)
    with pytest.raises(IndexError):
        queue.get()
    with pytest.raises(IndexError):
        queue.peek()


def test_size_one_is_always_full():
    queue = ByteQueue(1)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.put(0)


def test_rejects_invalid_size_and_values():
    with pytest.raises(ValueError):
        ByteQueue(0)
    queue = ByteQueue(4)
    with pytest.raises(ValueError):
        queue.put(256)
    with pytest.raises(ValueError):
        queue.put(-1)


@given(st.lists(st.lists(st.integers(0, 255), max_size=5), max_size=20))
def test_repeated_fill_and_drain_preserves_order(rounds):
    queue = ByteQueue(6)
    for items in rounds:
        for item in items:
            queue.put(item)
        assert len(queue) == len(items)
        drained = [queue.get() for _ in items]
        assert drained == items
        assert queue.is_empty()