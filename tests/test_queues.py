import pytest

from algokit.queues import CircularQueue, LinkedQueue, QueueEmptyError, QueueFullError


def _filled_circular(values, capacity=100):
    q = CircularQueue(capacity)
    for value in values:
        q.enqueue(value)
    return q


def test_circular_fifo_order():
    values = [10, 20, 30, 40, 50]
    q = _filled_circular(values)
    assert len(q) == 5
    assert q.peek() == 10
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_circular_full_and_wraparound():
    q = _filled_circular([1, 2, 3], capacity=3)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(4)
    assert q.dequeue() == 1
    q.enqueue(4)
    assert list(q) == [2, 3, 4]
    assert q.is_full()


def test_circular_empty_errors():
    q = CircularQueue(4)
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.peek()
    with pytest.raises(QueueEmptyError):
        q.reverse_prefix(1)
    assert q.render() == "Queue is Empty"


def test_circular_render():
    q = _filled_circular([10, 20, 30])
    assert q.render() == "Queue (front -> rear): [ 10 20 30 ]"


def test_reverse_prefix_example():
    q = _filled_circular([10, 20, 30, 40, 50])
    q.reverse_prefix(3)
    assert list(q) == [30, 20, 10, 40, 50]


def test_reverse_prefix_after_wraparound():
    q = _filled_circular([0, 0, 1, 2], capacity=4)
    q.dequeue()
    q.dequeue()
    q.enqueue(3)
    q.enqueue(4)
    q.reverse_prefix(4)
    assert list(q) == [4, 3, 2, 1]


def test_reverse_prefix_full_and_zero():
    values = [5, 6, 7, 8]
    q = _filled_circular(values)
    q.reverse_prefix(0)
    assert list(q) == values
    q.reverse_prefix(len(values))
    assert list(q) == values[::-1]


def test_reverse_prefix_rejects_too_large():
    q = _filled_circular([1, 2])
    with pytest.raises(ValueError):
        q.reverse_prefix(3)


def test_circular_rejects_bad_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_queue_example():
    q = LinkedQueue()
    for value in (10, 20, 30, 40, 50):
        q.enqueue(value)
    assert q.dequeue() == 10
    assert q.peek() == 20
    assert len(q) == 4
    assert list(q) == [20, 30, 40, 50]


def test_linked_queue_render():
    q = LinkedQueue()
    assert q.render() == "Front -> Rear\n[ NULL ]"
    q.enqueue(1)
    q.enqueue(2)
    assert q.render() == "Front -> Rear\n[ 1 -> 2 -> NULL ]"


def test_linked_queue_empty_after_draining_and_reuse():
    q = LinkedQueue()
    q.enqueue(7)
    assert q.dequeue() == 7
    assert q.is_empty()
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.peek()
    q.enqueue(8)
    assert list(q) == [8]
    assert len(q) == 1