"""Fixed-capacity circular queue backed by a preallocated list."""

from __future__ import annotations

from collections.abc import Iterator

from dslab.queues.errors import QueueEmptyError, QueueOverflowError

ARR_QUEUE_SIZE = 1500


def format_items(items: list[float]) -> str:
    """Render queue contents the way both queue kinds print themselves."""
    if not items:
        return "Queue is empty!"
    return "".join(f"<- {value:.2f} " for value in items) + "<-"


class ArrayQueue:
    """Ring buffer of arrival times with a fixed capacity."""

    def __init__(self, capacity: int = ARR_QUEUE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[float] = [0.0] * capacity
        self._head = 0
        self._count = 0

    def push(self, value: float) -> None:
        """Append a value to the tail; raise QueueOverflowError when full."""
        if self._count == self.capacity:
            raise QueueOverflowError("array queue is full")
        tail = (self._head + self._count) % self.capacity
        self._items[tail] = value
        self._count += 1

    def pop(self) -> float:
        """Remove and return the head value; raise QueueEmptyError when empty."""
        if self._count == 0:
            raise QueueEmptyError("array queue is empty")
        value = self._items[self._head]
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value

    def clear(self) -> None:
        """Drop every element."""
        self._head = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[float]:
        for offset in range(self._count):
            yield self._items[(self._head + offset) % self.capacity]

    def format(self) -> str:
        """Return the printable form of the queue, head first."""
        return format_items(list(self))