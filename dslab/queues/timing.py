"""Random service times and timing/storage comparison of the two queues."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable
from dataclasses import dataclass

from dslab.queues.array_queue import ARR_QUEUE_SIZE, ArrayQueue
from dslab.queues.linked_queue import LinkedQueue

INT_SIZE = 4
DOUBLE_SIZE = 8
POINTER_SIZE = 8
LIST_NODE_SIZE = DOUBLE_SIZE + POINTER_SIZE


def array_queue_bytes(capacity: int = ARR_QUEUE_SIZE) -> int:
    """Bytes occupied by an array queue of the given capacity."""
    return 4 * INT_SIZE + capacity * DOUBLE_SIZE


def linked_queue_bytes(elements: int) -> int:
    """Bytes occupied by a linked queue holding the given number of nodes."""
    return INT_SIZE + 2 * POINTER_SIZE + elements * LIST_NODE_SIZE


def random_time(left: float, right: float, rng: random.Random | None = None) -> float:
    """Random time in [left, right], truncated to three decimals."""
    source = rng if rng is not None else random
    value = (right - left) * source.random() + left
    return int(value * 1000) / 1000


@dataclass(frozen=True)
class TimingResult:
    """Average nanoseconds per operation for both queue kinds."""

    operation: str
    count: int
    array_average: int
    list_average: int


def _timed(action) -> int:
    start = time.perf_counter_ns()
    action()
    return time.perf_counter_ns() - start


def compare_queues(counts: Iterable[int] = (1000, 1_000_000)) -> list[TimingResult]:
    """Time push and pop on both queues, averaged over each count."""
    counts = list(counts)
    array_queue = ArrayQueue()
    linked_queue = LinkedQueue()
    results: list[TimingResult] = []

    for count in counts:
        array_total = list_total = 0
        for _ in range(count):
            array_total += _timed(lambda: array_queue.push(1.0))
            list_total += _timed(lambda: linked_queue.push(1.0))
            array_queue.pop()
            linked_queue.pop()
        results.append(
            TimingResult("push", count, array_total // count, list_total // count)
        )
        array_queue.clear()
        linked_queue.clear()

    for count in counts:
        array_total = list_total = 0
        for _ in range(count):
            array_queue.push(1.0)
            linked_queue.push(1.0)
            array_total += _timed(array_queue.pop)
            list_total += _timed(linked_queue.pop)
        results.append(
            TimingResult("pop", count, array_total // count, list_total // count)
        )

    return results


def storage_table(capacity: int = ARR_QUEUE_SIZE) -> list[tuple[int, int, int]]:
    """Rows of (elements, array bytes, list bytes) for doubling element counts."""
    rows = []
    elements = 10
    while elements <= capacity:
        rows.append((elements, array_queue_bytes(capacity), linked_queue_bytes(elements)))
        elements *= 2
    return rows


def _count_label(count: int) -> str:
    return f"{count:,}".replace(",", " ")


def format_report(
    results: Iterable[TimingResult], storage: Iterable[tuple[int, int, int]]
) -> str:
    """Render timing results and the storage table as text."""
    lines: list[str] = []
    current = None
    for result in results:
        if result.operation != current:
            if current is not None:
                lines.append("")
            lines.append(f"{result.operation.upper()}:")
            current = result.operation
        lines.append(f"AVERAGE ON {_count_label(result.count)}:")
        lines.append(f"Array queue : {result.array_average:10d}")
        lines.append(f"List queue  : {result.list_average:10d}")
    lines.append("")
    lines.append("STORAGE:")
    lines.append("Elems\tArray\tList")
    for elements, array_bytes, list_bytes in storage:
        lines.append(f"{elements:5d}\t{array_bytes:5d}\t{list_bytes:5d}")
    return "\n".join(lines)