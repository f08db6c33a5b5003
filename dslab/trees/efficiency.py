"""Search time, memory use and collision measurements for trees, hashing and files."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from dslab.trees.avl import AVLTree
from dslab.trees.bst import BinarySearchTree
from dslab.trees.hashtable import HashTable
from dslab.trees.numbers_file import (
    file_len,
    file_search,
    read_distinct_prefix,
    read_numbers,
)

DATA_FILES = (
    "./data/10.txt",
    "./data/50.txt",
    "./data/100.txt",
    "./data/500.txt",
    "./data/1000.txt",
)

POINTER_SIZE = 8
BST_NODE_SIZE = 24
AVL_NODE_SIZE = 32
HASH_NODE_SIZE = 16

HASH_FOOTNOTE = "* - hash tables have less then 10% of collisions."


@dataclass(frozen=True)
class SearchTiming:
    """Outcome of a timed hash search and of the repeated search after restructuring."""

    found: bool
    comparisons: int
    average_ns: int
    restructured: bool = False
    restructure_ns: int = 0
    new_found: bool = False
    new_comparisons: int = 0
    new_average_ns: int = 0


@dataclass(frozen=True)
class TimeRow:
    """Average search time (ns) and comparisons per structure for one file."""

    n: int
    bst_time: int
    bst_comp: int
    avl_time: int
    avl_comp: int
    hash_time: int
    hash_comp: int
    file_time: int
    file_comp: int


@dataclass(frozen=True)
class MemoryRow:
    """Bytes taken by each structure for one file."""

    n: int
    bst_bytes: int
    avl_bytes: int
    hash_bytes: int


@dataclass(frozen=True)
class CollisionRow:
    """Search cost at one collision level and the restructure that followed."""

    level: int
    time: int
    comparisons: int
    storage: int
    restructure_ns: int


def _hash_bytes(table: HashTable, n: int) -> int:
    return table.size * POINTER_SIZE + n * HASH_NODE_SIZE


def _timed_search(
    search: Callable[[int], tuple[object, int]], num: int, repeats: int
) -> tuple[object, int, int]:
    result = None
    comparisons = 0
    total = 0
    for _ in range(repeats):
        start = time.perf_counter_ns()
        result, comparisons = search(num)
        total += time.perf_counter_ns() - start
    return result, comparisons, total // repeats


def search_with_time(
    table: HashTable, num: int, max_comp: int = 4, repeats: int = 10000
) -> SearchTiming:
    """Time a hash search; restructure the table and search again if it took too many comparisons."""
    if repeats < 1:
        raise ValueError("repeats must be positive")
    found, comparisons, average = _timed_search(table.search, num, repeats)
    if comparisons <= max_comp:
        return SearchTiming(bool(found), comparisons, average)

    start = time.perf_counter_ns()
    table.restructure()
    restructure_ns = time.perf_counter_ns() - start

    new_found, new_comparisons, new_average = _timed_search(table.search, num, repeats)
    return SearchTiming(
        found=bool(found),
        comparisons=comparisons,
        average_ns=average,
        restructured=True,
        restructure_ns=restructure_ns,
        new_found=bool(new_found),
        new_comparisons=new_comparisons,
        new_average_ns=new_average,
    )


def _reduce_collisions(table: HashTable, limit: int) -> None:
    while table.count_collisions() > limit:
        table.restructure()


def _measure_structure(
    search: Callable[[int], tuple[object, int]], values: list[int], repeats: int
) -> tuple[int, int]:
    """Average time per search and average comparisons over all values."""
    n = len(values)
    time_sum = 0
    comp_sum = 0
    for _ in range(repeats):
        elapsed = 0
        comps = 0
        for value in values:
            start = time.perf_counter_ns()
            _, count = search(value)
            elapsed += time.perf_counter_ns() - start
            comps += count
        time_sum += elapsed // n
        comp_sum += comps // n
    return time_sum // repeats, comp_sum // repeats


def measure_time(
    paths: Iterable[str] = DATA_FILES, repeats: int = 10000
) -> list[TimeRow]:
    """Average search time and comparisons in each structure, for each data file."""
    if repeats < 1:
        raise ValueError("repeats must be positive")
    rows: list[TimeRow] = []
    for path in paths:
        with open(path, encoding="utf-8") as stream:
            values = read_distinct_prefix(stream)
            numbers = read_numbers(stream)
            n = len(values)
            table = HashTable.from_numbers(numbers)
            if n == 0:
                raise ValueError(f"{path}: no usable numbers")
            bst = BinarySearchTree(numbers)
            avl = AVLTree.from_bst(bst)
            _reduce_collisions(table, n // 100 * 10)

            bst_time, bst_comp = _measure_structure(bst.search, values, repeats)
            avl_time, avl_comp = _measure_structure(avl.search, values, repeats)
            hash_time, hash_comp = _measure_structure(
                table.search, values, repeats * 10
            )
            file_time, file_comp = _measure_structure(
                lambda num: file_search(stream, num), values, 1
            )
        rows.append(
            TimeRow(
                n, bst_time, bst_comp, avl_time, avl_comp,
                hash_time, hash_comp, file_time, file_comp,
            )
        )
    return rows


def measure_memory(paths: Iterable[str] = DATA_FILES) -> list[MemoryRow]:
    """Bytes used by each structure for each data file."""
    rows: list[MemoryRow] = []
    for path in paths:
        with open(path, encoding="utf-8") as stream:
            n = file_len(stream)
            table = HashTable.from_numbers(read_numbers(stream))
        _reduce_collisions(table, n // 100 * 10)
        rows.append(
            MemoryRow(n, n * BST_NODE_SIZE, n * AVL_NODE_SIZE, _hash_bytes(table, n))
        )
    return rows


def collision_comparison(
    path: str = "./data/1000.txt", repeats: int = 1000
) -> list[CollisionRow]:
    """Search cost at each collision level while restructuring down to 2% of collisions."""
    if repeats < 1:
        raise ValueError("repeats must be positive")
    with open(path, encoding="utf-8") as stream:
        values = read_distinct_prefix(stream)
        table = HashTable.from_numbers(read_numbers(stream))
    n = len(values)
    if n == 0:
        raise ValueError(f"{path}: no usable numbers")

    rows: list[CollisionRow] = []
    while table.count_collisions() > n // 100 * 2:
        search_time, comparisons = _measure_structure(table.search, values, repeats)
        level = int(table.count_collisions() / n * 100.0)
        storage = _hash_bytes(table, n)

        start = time.perf_counter_ns()
        table.restructure()
        restructure_ns = time.perf_counter_ns() - start

        rows.append(CollisionRow(level, search_time, comparisons, storage, restructure_ns))
    return rows


def format_time_table(rows: Iterable[TimeRow]) -> str:
    """Render the search time table."""
    lines = [
        "=========================== SEARCH TIME ===========================",
        " \tBST \t\tAVL \t\tHASH*\t\tFILE",
        "N\tTIME\tCOMP\tTIME\tCOMP\tTIME\tCOMP\tTIME\tCOMP",
    ]
    for r in rows:
        lines.append(
            f"{r.n}\t{r.bst_time}\t{r.bst_comp}\t{r.avl_time}\t{r.avl_comp}\t"
            f"{r.hash_time}\t{r.hash_comp}\t{r.file_time}\t{r.file_comp}\t"
        )
    lines.append(HASH_FOOTNOTE)
    return "\n".join(lines)


def format_memory_table(rows: Iterable[MemoryRow]) -> str:
    """Render the memory use table."""
    lines = [
        "========================== MEMORY USE =============================",
        "N\tBST \tAVL \tHASH*",
    ]
    for r in rows:
        lines.append(f"{r.n}\t{r.bst_bytes}\t{r.avl_bytes}\t{r.hash_bytes}\t")
    lines.append(HASH_FOOTNOTE)
    return "\n".join(lines)


def format_collision_table(rows: Iterable[CollisionRow]) -> str:
    """Render the collision comparison table and the average restructure time."""
    rows = list(rows)
    lines = [
        "===================== COLLISION COMPARISON ========================",
        "LEVEL\tTIME \tCOMP\tSTORAGE",
    ]
    for r in rows:
        lines.append(f"{r.level}%\t{r.time}\t{r.comparisons}\t{r.storage}")
    if rows:
        average = sum(r.restructure_ns for r in rows) // len(rows)
        lines.append(f"Average restructure time = {average}")
    return "\n".join(lines)