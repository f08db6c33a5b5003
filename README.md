# dslab

A console workbench for three classic data-structure exercises:

- **queues**: a single-server system fed by two request queues, simulated
  with either a fixed-capacity ring buffer (`ArrayQueue`) or a linked queue
  (`LinkedQueue`).
- **trees**: binary search trees, AVL trees, chained hash tables and a
  plain file of numbers, compared by search comparisons, time and memory.
- **mincut**: the minimum edge cut of an undirected graph, found with
  Karger's randomised contraction algorithm.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

All three commands are interactive menus that read from standard input and
write to standard output. They stop on choice `0` or at the end of input.

### `dslab-queues [--seed N]`

Simulates a server that takes requests from two queues in steps of 0.0001
time units. Requests from the first queue have priority; the second queue is
served only when the first is empty. From the menu you can:

1. run the simulation with the array (ring buffer, 1500 places) queue,
2. run it with the linked queue (15000 places),
3. change the number of requests (1 to 1 000 000) or one of the time ranges
   (both ends in `[0, 10 000]`, the lower one smaller),
4. time push and pop on both queues (averaged over 1 000 and 1 000 000
   operations, in nanoseconds) and print their storage sizes.

Progress is reported about every hundred requests served from the first
queue, followed by a summary comparing observed and expected totals. If a
queue fills up, the run stops with "One of the queues broke down! Error!".
After a linked-queue run, answering `Y` lists the node addresses that were
released and not reused.

Defaults: 1000 requests; first-queue arrivals every 1–5 time units, second
queue 0–3; service time 0–4 for the first queue and 0–1 for the second.
`--seed` makes the random times reproducible.

### `dslab-trees`

Works on a file of whitespace-separated integers. After choosing a file you
can build a binary search tree from it, balance it into an AVL tree, build a
hash table, add and delete values in each, search them and in the file
itself, and see how many comparisons a search took. A timed hash-table
search that needs more comparisons than the configured limit (4 by default,
menu item 10) restructures the table to a larger prime size and searches
again. Either tree can be written in Graphviz DOT form to `graph.gv` in the
working directory.

Menu item 19 compares search time, memory and hash collisions. It expects the
sample files `data/10.txt`, `data/50.txt`, `data/100.txt`, `data/500.txt` and
`data/1000.txt` relative to the working directory; if they are missing it
prints "Cannot measure" and returns to the menu.

### `dslab-mincut [--seed N]`

Reads a graph from the keyboard (number of vertices, at least 2; number of
edges, at least 1; then each edge as two vertex numbers in `[0, V - 1]`),
writes it as DOT to `graph.gv`, and reports the smallest set of edges whose
removal disconnects the graph. Karger's algorithm is repeated about
`V² · ln V` times to make a wrong answer unlikely. `--seed` makes the random
choices reproducible.

## Library use

The building blocks can be used directly:

```python
import random

from dslab.queues.array_queue import ArrayQueue
from dslab.queues.errors import QueueEmptyError
from dslab.queues.simulation import SimulationParams, simulate
from dslab.trees.bst import BinarySearchTree
from dslab.trees.avl import AVLTree
from dslab.trees.dot import avl_export_to_dot
from dslab.trees.hashtable import HashTable, closest_prime
from dslab.mincut.graph import Edge, Graph
from dslab.mincut.karger import karger, format_mincut

queue = ArrayQueue(1500)
queue.push(1.5)
queue.push(2.0)
print(queue.pop(), len(queue))
try:
    ArrayQueue(10).pop()
except QueueEmptyError:
    print("empty")

result = simulate(SimulationParams(requests_num=100), rng=random.Random(1))
print(result.requests_in, result.requests_out)

bst = BinarySearchTree([8, 3, 10, 1, 6])
avl = AVLTree.from_bst(bst)
print(list(avl), avl.height())
print(avl_export_to_dot(avl))

table = HashTable.from_numbers([8, 3, 10, 1, 6])
print(table.format())
print(closest_prime(20))

graph = Graph(4, [Edge(0, 1), Edge(1, 2), Edge(2, 3), Edge(3, 0), Edge(0, 2)])
print(format_mincut(karger(graph, random.Random(1), 50)))
```

## What it does not do

- The "view graph" menu items only write DOT text to `graph.gv`; nothing
  renders it to an image or opens a viewer. Use Graphviz (`dot -Tpng
  graph.gv -o graph.png`) for that.
- The sample data files for the efficiency comparison are not included.
- Time measurements use the Python clock in nanoseconds, not processor
  cycle counts.
- Graphs for the minimum cut can only be entered interactively; there is no
  command for loading one from a file.