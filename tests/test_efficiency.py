import pytest

from dslab.trees.efficiency import (
    AVL_NODE_SIZE,
    BST_NODE_SIZE,
    CollisionRow,
    MemoryRow,
    TimeRow,
    collision_comparison,
    format_collision_table,
    format_memory_table,
    format_time_table,
    measure_memory,
    measure_time,
    search_with_time,
)
from dslab.trees.hashtable import HashTable
from dslab.trees.numbers_file import file_search


def _write(tmp_path, name, values):
    path = tmp_path / name
    path.write_text(" ".join(map(str, values)) + "\n", encoding="utf-8")
    return str(path)


def test_search_with_time_no_restructure():
    table = HashTable(11)
    for value in range(5):
        table.add(value)
    result = search_with_time(table, 3, max_comp=4, repeats=3)
    assert result.found is True
    assert result.comparisons == table.search(3)[1]
    assert result.restructured is False


def test_search_with_time_restructures_on_many_comparisons():
    table = HashTable(5)
    values = [5 * i for i in range(8)]
    for value in values:
        table.add(value)
    before = table.count_collisions()
    result = search_with_time(table, values[-1], max_comp=2, repeats=2)
    assert result.restructured is True
    assert result.comparisons == len(values)
    assert result.new_found is True
    assert result.new_comparisons == table.search(values[-1])[1]
    assert table.count_collisions() < before


def test_search_with_time_missing_value():
    table = HashTable(7)
    table.add(1)
    result = search_with_time(table, 100, max_comp=4, repeats=1)
    assert result.found is False
    assert result.comparisons == table.search(100)[1]


def test_search_with_time_rejects_zero_repeats():
    with pytest.raises(ValueError):
        search_with_time(HashTable(3), 1, repeats=0)


def test_measure_time_rows(tmp_path):
    values = [15, 3, 22, 8, 1, 30, 11, 19, 4, 27]
    path = _write(tmp_path, "numbers.txt", values)
    (row,) = measure_time([path], repeats=1)
    assert row.n == len(values)
    assert row.bst_comp >= 1 and row.avl_comp >= 1 and row.hash_comp >= 1
    with open(path, encoding="utf-8") as stream:
        total = sum(file_search(stream, v)[1] for v in values)
    assert row.file_comp == total // len(values)


def test_measure_time_avl_not_worse_than_degenerate_bst(tmp_path):
    values = list(range(1, 41))
    path = _write(tmp_path, "sorted.txt", values)
    (row,) = measure_time([path], repeats=1)
    assert row.avl_comp < row.bst_comp


def test_measure_time_empty_file_raises(tmp_path):
    path = _write(tmp_path, "empty.txt", [])
    with pytest.raises(ValueError):
        measure_time([path], repeats=1)


def test_measure_memory_rows(tmp_path):
    values = list(range(0, 60, 3))
    path = _write(tmp_path, "mem.txt", values)
    (row,) = measure_memory([path])
    assert row.n == len(values)
    assert row.bst_bytes == row.n * BST_NODE_SIZE
    assert row.avl_bytes == row.n * AVL_NODE_SIZE
    assert row.hash_bytes > 0


def test_collision_comparison_progresses(tmp_path):
    values = [73 * i for i in range(100)]
    path = _write(tmp_path, "coll.txt", values)
    rows = collision_comparison(path, repeats=1)
    assert rows
    levels = [r.level for r in rows]
    assert levels == sorted(levels, reverse=True)
    storages = [r.storage for r in rows]
    assert storages == sorted(storages)


def test_collision_comparison_without_collisions(tmp_path):
    path = _write(tmp_path, "few.txt", [1, 2, 3])
    assert collision_comparison(path, repeats=1) == []


def test_format_time_table():
    rows = [TimeRow(10, 1, 2, 3, 4, 5, 6, 7, 8)]
    lines = format_time_table(rows).splitlines()
    assert lines[3] == "10\t1\t2\t3\t4\t5\t6\t7\t8\t"
    assert lines[-1] == "* - hash tables have less then 10% of collisions."


def test_format_memory_table():
    lines = format_memory_table([MemoryRow(10, 240, 320, 200)]).splitlines()
    assert lines[1] == "N\tBST \tAVL \tHASH*"
    assert lines[2] == "10\t240\t320\t200\t"


def test_format_collision_table_average():
    rows = [CollisionRow(40, 5, 2, 100, 10), CollisionRow(20, 4, 1, 120, 30)]
    lines = format_collision_table(rows).splitlines()
    assert lines[2] == "40%\t5\t2\t100"
    assert lines[-1] == "Average restructure time = 20"


def test_format_collision_table_empty_has_no_average():
    text = format_collision_table([])
    assert "Average" not in text
    assert text.splitlines()[1] == "LEVEL\tTIME \tCOMP\tSTORAGE"