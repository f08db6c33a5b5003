"""Interactive menu for the two-queue service model."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections import deque
from dataclasses import replace
from typing import TextIO

from dslab.queues import timing
from dslab.queues.simulation import SimulationParams, run_modeling

_WRONG_INPUT = "Wrong input!\n"

_RANGE_FIELDS = {
    2: ("min_t1", "max_t1", "Input time of 1st queue requests input [0, 10 000]: "),
    3: ("min_t2", "max_t2", "Input time of 2nd queue requests input [0, 10 000]: "),
    4: ("min_pr1", "max_pr1", "Input time of 1st queue processing [0, 10 000]: "),
    5: ("min_pr2", "max_pr2", "Input time of 2nd queue processing [0, 10 000]: "),
}


class _TokenReader:
    """Whitespace-separated tokens read lazily, line by line, from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()

    def read_line(self) -> str:
        self._pending.clear()
        return self._stream.readline()


def _as_reader(stream_in) -> _TokenReader:
    return stream_in if isinstance(stream_in, _TokenReader) else _TokenReader(stream_in)


def _read_int(reader: _TokenReader) -> int | None:
    try:
        return int(reader.next_token())
    except (EOFError, ValueError):
        return None


def _read_float(reader: _TokenReader) -> float | None:
    try:
        value = float(reader.next_token())
    except (EOFError, ValueError):
        return None
    return value if math.isfinite(value) else None


def welcome_text() -> str:
    """The greeting shown when the program starts."""
    return "\n".join(
        [
            "================= Welcome! =================",
            "This programme performs operations on queues.",
            "You can  solve the given  case, changing  the ",
            "values or measure time needed for operations.",
            "The  programme has two  queues and a handler. ",
            "The  requests  from  the 1st  queue are  more",
            "important so they are handled first. If there",
            "are no  requests from  the first  queue - the ",
            "requests from the second queue are handled.",
        ]
    )


def menu_text() -> str:
    """The main menu, ending with the choice prompt."""
    return "\n".join(
        [
            "",
            "+-------------------------------------------------------+",
            "| Choose your option!                                   |",
            "|                                                       |",
            "| 1 - Run programme (array)                             |",
            "| 2 - Run programme (list)                              |",
            "| 3 - Change data                                       |",
            "| 4 - Measure time and efficiency                       |",
            "|                                                       |",
            "| 0 - Exit                                              |",
            "+-------------------------------------------------------+",
            "",
            "Your choice: ",
        ]
    )


def _current_values(params: SimulationParams) -> str:
    p = params
    return "\n".join(
        [
            "Current values:",
            f"1 : Number of 1st queue requests      : {p.requests_num}",
            f"2 : Time of 1st queue requests input  : from {p.min_t1:.2f} to {p.max_t1:.2f}",
            f"3 : Time of 2nd queue requests input  : from {p.min_t2:.2f} to {p.max_t2:.2f}",
            f"4 : Time of 1st queue processing      : from {p.min_pr1:.2f} to {p.max_pr1:.2f}",
            f"5 : Time of 2nd queue processing      : from {p.min_pr2:.2f} to {p.max_pr2:.2f}",
            "",
        ]
    )


def change_data(params: SimulationParams, stream_in, stream_out: TextIO) -> SimulationParams:
    """Ask which parameter to change and return the updated parameters.

    Invalid input leaves the parameters unchanged and reports "Wrong input!".
    """
    reader = _as_reader(stream_in)
    stream_out.write(_current_values(params))
    stream_out.write("You want to change : ")

    choice = _read_int(reader)
    if choice is None:
        stream_out.write(_WRONG_INPUT)
        reader.discard_line()
        return params

    if choice == 1:
        stream_out.write("Input number of requests [1, 1 000 000]: ")
        n = _read_int(reader)
        if n is None or not 1 <= n <= 1_000_000:
            stream_out.write(_WRONG_INPUT)
            reader.discard_line()
            return params
        return replace(params, requests_num=n)

    if choice in _RANGE_FIELDS:
        low_name, high_name, prompt = _RANGE_FIELDS[choice]
        stream_out.write(prompt)
        low = _read_float(reader)
        high = _read_float(reader) if low is not None else None
        if low is None or high is None or not 0 <= low < high <= 10000:
            stream_out.write(_WRONG_INPUT)
            reader.discard_line()
            return params
        return replace(params, **{low_name: low, high_name: high})

    return params


def _measure(out: TextIO) -> None:
    report = timing.format_report(timing.compare_queues(), timing.storage_table())
    out.write(report + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive queue model menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Two-queue service model.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    params = SimulationParams()

    out.write(welcome_text() + "\n")
    while True:
        out.write(menu_text())
        try:
            token = reader.next_token()
        except EOFError:
            break
        try:
            choice = int(token)
        except ValueError:
            out.write(_WRONG_INPUT)
            reader.discard_line()
            continue

        if choice == 0:
            break
        if choice == 1:
            run_modeling(params, "array", rng, out)
        elif choice == 2:
            result = run_modeling(params, "list", rng, out)
            if result is not None and result.free_memory is not None:
                out.write("Do you want to see the free addresses? [Y / N] : ")
                answer = reader.read_line()
                if answer[:1] == "Y":
                    out.write(result.free_memory.format() + "\n")
        elif choice == 3:
            params = change_data(params, reader, out)
        elif choice == 4:
            _measure(out)
        else:
            out.write("Unknown command!\n")
    return 0