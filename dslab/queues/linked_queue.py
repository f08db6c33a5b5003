"""Linked-list queue that records the addresses of released nodes."""

from __future__ import annotations

from collections.abc import Iterator

from dslab.queues.array_queue import format_items
from dslab.queues.errors import QueueEmptyError, QueueOverflowError

LIST_QUEUE_SIZE = 15000


class FreeMemory:
    """Ordered record of node addresses that have been released."""

    def __init__(self) -> None:
        self._addresses: list[int] = []

    def add(self, address: int) -> None:
        """Record a released address."""
        self._addresses.append(address)

    def discard(self, address: int) -> None:
        """Forget the first record of an address if present."""
        try:
            self._addresses.remove(address)
        except ValueError:
            pass

    def __iter__(self) -> Iterator[int]:
        return iter(self._addresses)

    def __len__(self) -> int:
        return len(self._addresses)

    def format(self) -> str:
        """Return the list of free addresses in hexadecimal."""
        lines = ["Free addresses:"]
        lines.extend(f"{address:x}" for address in self._addresses if address != 0)
        return "\n".join(lines)


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: float) -> None:
        self.data = data
        self.next: _Node | None = None


class LinkedQueue:
    """Singly linked queue with a capacity limit."""

    def __init__(
        self, capacity: int = LIST_QUEUE_SIZE, memory: FreeMemory | None = None
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.memory = memory if memory is not None else FreeMemory()
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0

    def push(self, value: float) -> None:
        """Append a value; raise QueueOverflowError at capacity."""
        if self._count == self.capacity:
            raise QueueOverflowError("linked queue is full")
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self.memory.discard(id(node))
        self._count += 1

    def pop(self) -> float:
        """Remove and return the head value; raise QueueEmptyError when empty."""
        if self._head is None:
            raise QueueEmptyError("linked queue is empty")
        node = self._head
        self.memory.add(id(node))
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.data

    def clear(self) -> None:
        """Pop every element, recording each released node."""
        while self._count:
            self.pop()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[float]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def format(self) -> str:
        """Return the printable form of the queue, head first."""
        return format_items(list(self))