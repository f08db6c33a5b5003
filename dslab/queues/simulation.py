"""Time-stepped model of two prioritised request queues and one service unit."""

from __future__ import annotations

import math
import random
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol, TextIO

from dslab.queues.array_queue import ArrayQueue
from dslab.queues.errors import QueueOverflowError
from dslab.queues.handler import EPS, Handler, RequestType
from dslab.queues.linked_queue import FreeMemory, LinkedQueue
from dslab.queues.timing import (
    LIST_NODE_SIZE,
    POINTER_SIZE,
    array_queue_bytes,
    random_time,
)

TIME_STEP = 0.0001
KINDS = ("array", "list")


class _Queue(Protocol):
    def push(self, value: float) -> None: ...

    def pop(self) -> float: ...

    def __len__(self) -> int: ...


@dataclass
class SimulationParams:
    """Number of type 1 requests to serve and the ranges of the random times."""

    requests_num: int = 1000
    min_t1: float = 1.0
    max_t1: float = 5.0
    min_t2: float = 0.0
    max_t2: float = 3.0
    min_pr1: float = 0.0
    max_pr1: float = 4.0
    min_pr2: float = 0.0
    max_pr2: float = 1.0


@dataclass(frozen=True)
class Snapshot:
    """Intermediate statistics taken when about every hundred type 1 requests are served."""

    processed1: int
    queue1_len: int
    avg_len1: float
    avg_time1: float
    processed2: int
    queue2_len: int
    avg_len2: float
    avg_time2: float


@dataclass(frozen=True)
class SimulationResult:
    """Final state and totals of a finished run."""

    model_time: float
    type1_processed: int
    type2_processed: int
    queue1_len: int
    queue2_len: int
    time_standby: float
    sum_process1: float
    sum_process2: float
    max_queue_len: int
    elapsed_usec: int
    storage_bytes: int = 0
    free_memory: FreeMemory | None = None

    @property
    def requests_in1(self) -> int:
        return self.type1_processed + self.queue1_len

    @property
    def requests_in2(self) -> int:
        return self.type2_processed + self.queue2_len

    @property
    def requests_in(self) -> int:
        return self.requests_in1 + self.requests_in2

    @property
    def requests_out(self) -> int:
        return self.type1_processed + self.type2_processed


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division that yields nan or inf instead of raising on zero."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def simulate(
    params: SimulationParams,
    queue_factory: Callable[[], _Queue] = ArrayQueue,
    rng: random.Random | None = None,
    on_progress: Callable[[Snapshot], None] | None = None,
) -> SimulationResult:
    """Run the model until the required number of type 1 requests is served.

    Raises QueueOverflowError when either queue cannot accept an arrival.
    """
    queue1 = queue_factory()
    queue2 = queue_factory()
    handler = Handler()

    cur_time = 0.0
    sum_len1 = sum_len2 = 0
    sum_line1 = sum_line2 = 0.0
    sum_process1 = sum_process2 = 0.0
    next_request1 = random_time(params.min_t1, params.max_t1, rng)
    next_request2 = random_time(params.min_t2, params.max_t2, rng)
    last_printed = 50
    max_size = 0
    excluded_ns = 0

    start = time.perf_counter_ns()
    while handler.type1_processed < params.requests_num:
        len1, len2 = len(queue1), len(queue2)
        sum_len1 += len1
        sum_len2 += len2
        max_size = max(max_size, len1, len2)

        if abs(next_request1 - cur_time) < EPS:
            next_request1 += random_time(params.min_t1, params.max_t1, rng)
            try:
                queue1.push(cur_time)
            except QueueOverflowError as exc:
                raise QueueOverflowError("The 1st queue is full!") from exc

        if abs(next_request2 - cur_time) < EPS:
            next_request2 += random_time(params.min_t2, params.max_t2, rng)
            try:
                queue2.push(cur_time)
            except QueueOverflowError as exc:
                raise QueueOverflowError("The 2nd queue is full!") from exc

        idle = handler.in_process is RequestType.NONE
        if len(queue1) == 0 and len(queue2) == 0 and idle:
            handler.time_standby += TIME_STEP
        elif abs(handler.time_finish - cur_time) < EPS:
            handler.in_process = RequestType.NONE
            done1 = handler.type1_processed
            if done1 % 100 < 5 and last_printed < done1:
                if on_progress is not None:
                    shown = time.perf_counter_ns()
                    on_progress(
                        Snapshot(
                            processed1=done1,
                            queue1_len=len(queue1),
                            avg_len1=_ratio(sum_len1, cur_time * 10000),
                            avg_time1=_ratio(sum_line1, done1),
                            processed2=handler.type2_processed,
                            queue2_len=len(queue2),
                            avg_len2=_ratio(sum_len2, cur_time * 10000),
                            avg_time2=_ratio(sum_line2, handler.type2_processed),
                        )
                    )
                    excluded_ns += time.perf_counter_ns() - shown
                last_printed = done1 + 50

        if handler.in_process is RequestType.NONE:
            if len(queue1):
                come_time = queue1.pop()
                process_time = random_time(params.min_pr1, params.max_pr1, rng)
                handler.add(RequestType.ONE, cur_time, process_time)
                sum_line1 += cur_time - come_time
                sum_process1 += process_time
            elif len(queue2):
                come_time = queue2.pop()
                process_time = random_time(params.min_pr2, params.max_pr2, rng)
                handler.add(RequestType.TWO, cur_time, process_time)
                sum_line2 += cur_time - come_time
                sum_process2 += process_time

        cur_time += TIME_STEP

    elapsed_ns = time.perf_counter_ns() - start - excluded_ns

    return SimulationResult(
        model_time=cur_time,
        type1_processed=handler.type1_processed,
        type2_processed=handler.type2_processed,
        queue1_len=len(queue1),
        queue2_len=len(queue2),
        time_standby=handler.time_standby,
        sum_process1=sum_process1,
        sum_process2=sum_process2,
        max_queue_len=max_size,
        elapsed_usec=max(elapsed_ns, 0) // 1000,
    )


def format_snapshot(snapshot: Snapshot) -> str:
    """Render an intermediate progress report."""
    return "\n".join(
        [
            "========================================",
            f"PROCESSED : {snapshot.processed1} requests from Queue 1!",
            "Queue 1:",
            f"Average queue len: {snapshot.avg_len1:f}",
            f"Current queue len: {snapshot.queue1_len}",
            f"Requests in:  {snapshot.processed1 + snapshot.queue1_len}",
            f"Requests out: {snapshot.processed1}",
            f"Average time in queue: {snapshot.avg_time1:f}",
            "",
            "Queue 2:",
            f"Average queue len: {snapshot.avg_len2:f}",
            f"Current queue len: {snapshot.queue2_len}",
            f"Requests in:  {snapshot.processed2 + snapshot.queue2_len}",
            f"Requests out: {snapshot.processed2}",
            f"Average time in queue: {snapshot.avg_time2:f}",
            "",
        ]
    )


def _percent(expected: float, real: float) -> float:
    return _ratio(abs(expected - real), expected) * 100


def format_report(result: SimulationResult, params: SimulationParams) -> str:
    """Render the final report with the comparison against expected times."""
    lines = [
        "=======================================",
        "FINISH!",
        f"Overall time: {result.elapsed_usec} usec",
        f"Storage: {result.storage_bytes} bytes",
        f"Overall time: {result.model_time:f} time equivalents",
        "Queue 1:",
        f"Requests in:  {result.requests_in1}",
        f"Requests out: {result.type1_processed}",
        "",
        "Queue 2:",
        f"Requests in:  {result.requests_in2}",
        f"Requests out: {result.type2_processed}",
        "",
        "TOTAL:",
        f"Requests in:  {result.requests_in}",
        f"Requests out: {result.requests_out}",
        "",
        "RESULTS CHECK:",
        "",
    ]

    mean_arrival1 = 0.5 * (params.max_t1 + params.min_t1)
    mean_process1 = 0.5 * (params.max_pr1 + params.min_pr1)

    if mean_process1 > mean_arrival1:
        expected_out = mean_process1 * params.requests_num
        lines += [
            "Queue 1:",
            "[OUT]:",
            f"Expected time : {expected_out:f}",
            f"Real time     : {result.model_time:f}",
            f"Difference    : {_percent(expected_out, result.model_time):.2f}%",
            "",
            "Queue 2:",
            "[OUT]:",
            f"Expected time : {0.0:f}",
            f"Real time     : {result.sum_process2:f}",
            f"Difference    : {0.0:.2f}%",
        ]
    else:
        expected_in1 = mean_arrival1 * params.requests_num
        expected_in2 = _ratio(expected_in1, 0.5 * (params.min_t2 + params.max_t2))
        real_in2 = float(result.requests_in2)
        lines += [
            "Queue 1:",
            "[IN]:",
            f"Expected time : {expected_in1:f}",
            f"Real time     : {result.model_time:f}",
            f"Difference    : {_percent(expected_in1, result.model_time):.2f}%",
            "Queue 2:",
            "[IN]:",
            f"Expected time : {expected_in2:f}",
            f"Real time     : {real_in2:f}",
            f"Difference    : {_percent(expected_in2, real_in2):.2f}%",
        ]
    return "\n".join(lines)


def run_modeling(
    params: SimulationParams,
    kind: str = "array",
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> SimulationResult | None:
    """Run the model on array or list queues and print progress and the report.

    Returns the result, or None when a queue overflowed. For list queues the
    result carries the record of released node addresses.
    """
    if kind not in KINDS:
        raise ValueError(f"unknown queue kind: {kind!r}")
    stream = out if out is not None else sys.stdout

    memory: FreeMemory | None = None
    if kind == "list":
        memory = FreeMemory()
        shared = memory

        def factory() -> _Queue:
            return LinkedQueue(memory=shared)

    else:
        factory = ArrayQueue

    def show(snapshot: Snapshot) -> None:
        stream.write(format_snapshot(snapshot) + "\n")

    try:
        result = simulate(params, factory, rng, show)
    except QueueOverflowError as exc:
        stream.write(f"{exc}\n")
        stream.write("One of the queues broke down! Error!\n")
        return None

    if kind == "list":
        storage = 2 * POINTER_SIZE + LIST_NODE_SIZE * result.max_queue_len
    else:
        storage = array_queue_bytes()
    result = replace(result, storage_bytes=storage, free_memory=memory)

    stream.write(format_report(result, params) + "\n")
    return result