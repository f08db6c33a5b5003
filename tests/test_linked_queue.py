import pytest

from dslab.queues.errors import QueueEmptyError, QueueOverflowError
from dslab.queues.linked_queue import LIST_QUEUE_SIZE, FreeMemory, LinkedQueue


def test_default_capacity_matches_source_constant():
    assert LinkedQueue().capacity == LIST_QUEUE_SIZE == 15000


def test_fifo_order():
    queue = LinkedQueue(10)
    for value in (3.0, 1.0, 2.0):
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == [3.0, 1.0, 2.0]


def test_pop_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinkedQueue(2).pop()


def test_overflow():
    queue = LinkedQueue(2)
    queue.push(1.0)
    queue.push(2.0)
    with pytest.raises(QueueOverflowError):
        queue.push(3.0)
    assert len(queue) == 2


def test_pop_records_free_address():
    memory = FreeMemory()
    queue = LinkedQueue(5, memory)
    queue.push(1.0)
    queue.push(2.0)
    queue.pop()
    assert len(memory) == 1
    assert queue.memory is memory


def test_clear_records_every_node():
    queue = LinkedQueue(5)
    for value in (1.0, 2.0, 3.0):
        queue.push(value)
    queue.clear()
    assert len(queue) == 0
    assert list(queue) == []
    assert len(queue.memory) == 3


def test_reuse_after_emptying():
    queue = LinkedQueue(3)
    queue.push(1.0)
    assert queue.pop() == 1.0
    queue.push(4.0)
    queue.push(5.0)
    assert list(queue) == [4.0, 5.0]


def test_free_memory_add_and_discard():
    memory = FreeMemory()
    for address in (1, 2, 3, 2):
        memory.add(address)
    memory.discard(2)
    assert list(memory) == [1, 3, 2]
    memory.discard(99)
    assert list(memory) == [1, 3, 2]


def test_free_memory_format():
    memory = FreeMemory()
    memory.add(255)
    memory.add(0)
    memory.add(16)
    assert memory.format() == "Free addresses:\nff\n10"


def test_free_memory_format_empty():
    assert FreeMemory().format() == "Free addresses:"


def test_format():
    queue = LinkedQueue(3)
    assert queue.format() == "Queue is empty!"
    queue.push(1.0)
    queue.push(2.5)
    assert queue.format() == "<- 1.00 <- 2.50 <-"
    assert list(queue) == [1.0, 2.5]