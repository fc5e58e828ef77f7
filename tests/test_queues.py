import pytest

from lineards.queues import CircularQueue, LinearQueue, QueueEmptyError, QueueFullError


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_fifo_order(cls):
    values = [4, 5, 6]
    queue = cls(len(values))
    for value in values:
        queue.enqueue(value)
    assert queue.items() == values
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_new_queue_empty(cls):
    queue = cls(2)
    assert queue.is_empty()
    assert not queue.is_full()
    assert len(queue) == 0
    assert queue.items() == []


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_dequeue_empty_raises(cls):
    queue = cls(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_enqueue_full_raises(cls):
    queue = cls(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert queue.items() == [1, 2]


def test_linear_queue_does_not_reuse_front_slots():
    queue = LinearQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert len(queue) == 2
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(4)


def test_linear_queue_resets_when_drained():
    queue = LinearQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    queue.dequeue()
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(7)
    queue.enqueue(8)
    assert queue.items() == [7, 8]


def test_linear_queue_zero_capacity():
    queue = LinearQueue(0)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(1)


def test_linear_queue_negative_capacity():
    with pytest.raises(ValueError):
        LinearQueue(-1)


def test_circular_queue_reuses_freed_slots():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert not queue.is_full()
    queue.enqueue(4)
    assert queue.is_full()
    assert queue.items() == [2, 3, 4]


def test_circular_queue_wraps_many_times():
    queue = CircularQueue(2)
    received = []
    for value in range(10):
        queue.enqueue(value)
        received.append(queue.dequeue())
    assert received == list(range(10))
    assert queue.is_empty()


def test_circular_queue_capacity_one():
    queue = CircularQueue(1)
    queue.enqueue("a")
    assert queue.is_full()
    assert len(queue) == 1
    assert queue.dequeue() == "a"
    assert queue.is_empty()


@pytest.mark.parametrize("capacity", [0, -3])
def test_circular_queue_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        CircularQueue(capacity)


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_len_matches_items(cls):
    queue = cls(4)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.enqueue(3)
    queue.dequeue()
    assert len(queue) == len(queue.items())
    assert queue.items() == [2, 3]


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_items_returns_copy(cls):
    queue = cls(2)
    queue.enqueue(1)
    snapshot = queue.items()
    snapshot.append(99)
    assert queue.items() == [1]