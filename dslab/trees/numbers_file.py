"""Reading whitespace-separated integers from a text stream and searching it."""

from __future__ import annotations

import re
from typing import TextIO

_INT_PREFIX = re.compile(r"[+-]?\d+")


def _scan(stream: TextIO) -> tuple[list[int], bool]:
    """Read integers from the start of stream until the first token that is not one.

    Returns the integers and whether the whole stream was read cleanly. A token
    that merely starts with an integer yields that integer and ends the scan.
    The stream is left at its start.
    """
    stream.seek(0)
    text = stream.read()
    stream.seek(0)

    numbers: list[int] = []
    for token in text.split():
        match = _INT_PREFIX.match(token)
        if match is None:
            return numbers, False
        numbers.append(int(match.group()))
        if match.end() != len(token):
            return numbers, False
    return numbers, True


def read_numbers(stream: TextIO) -> list[int]:
    """All integers from the start of stream up to the first non-integer token."""
    numbers, _ = _scan(stream)
    return numbers


def file_len(stream: TextIO) -> int:
    """Number of distinct integers in the stream; 0 if it holds anything else."""
    numbers, clean = _scan(stream)
    if not clean:
        return 0
    return len(set(numbers))


def read_distinct_prefix(stream: TextIO) -> list[int]:
    """The first file_len(stream) integers of the stream, in file order."""
    count = file_len(stream)
    return read_numbers(stream)[:count]


def file_search(stream: TextIO, num: int) -> tuple[bool, int]:
    """Scan the stream for num; return whether it was found and the comparisons made."""
    comparisons = 0
    for value in read_numbers(stream):
        comparisons += 1
        if value == num:
            return True, comparisons
    return False, comparisons