# dsalab

A small collection of classic data structures with plain, Pythonic
interfaces, plus a few exercises built on top of them. No third-party
libraries are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

| Module                   | Class           | What it is                                              |
|--------------------------|-----------------|---------------------------------------------------------|
| `dsalab.array`           | `Array`         | Fixed-size array; new slots hold `None`                 |
| `dsalab.vector`          | `Vector`        | Resizable array; slots added by `resize` hold `None`    |
| `dsalab.linked_list`     | `LinkedList`    | Doubly linked list of `Item` nodes                      |
| `dsalab.stack`           | `Stack`         | LIFO stack built on `Vector`                            |
| `dsalab.fifo`            | `Queue`         | FIFO queue built on `LinkedList`, O(1) insert and remove |
| `dsalab.priority_queue`  | `PriorityQueue` | Binary min-heap keyed by an integer priority            |
| `dsalab.splay_tree`      | `SplayTree`     | Self-adjusting binary search tree mapping keys to values |

Behaviour worth knowing:

- `Array` and `Vector` support `len()`, iteration, `==`, indexing and
  `copy()`. Indices must lie in `0 .. len-1`; anything else (negative
  indices too) raises `IndexError`. A negative size raises `ValueError`.
- `LinkedList.insert(data)` adds at the front; `insert_after(item, data)`
  adds after an item (`None` means the front). `erase_first()` and
  `erase_next(item)` return the item that follows the removed one, or
  `None`. `first()` gives the head `Item`, whose `data`, `next` and `prev`
  attributes can be followed; `items()` yields the nodes and iterating the
  list yields the values. Passing an item from another list raises
  `ValueError`.
- `Stack.top()` peeks and `Stack.pop()` removes and returns the top value;
  `Queue.get()` peeks and `Queue.remove()` removes and returns the front
  value. On an empty stack or queue they raise `IndexError`.
- `PriorityQueue.extract_min()` returns the item with the lowest priority
  and raises `IndexError` when the queue is empty.
- `SplayTree.find(key)` returns the stored value or `None`; `add` replaces
  an existing value; `remove` ignores absent keys; `key in tree` tests
  membership. Keys only need to support `<` and `>`.

### Example

```python
from dsalab.array import Array
from dsalab.vector import Vector
from dsalab.linked_list import LinkedList
from dsalab.stack import Stack
from dsalab.fifo import Queue
from dsalab.priority_queue import PriorityQueue
from dsalab.splay_tree import SplayTree

arr = Array(10)
arr[3] = 6
print(len(arr), arr[3])          # 10 6

vec = Vector()
vec.resize(5)
vec[4] = 42
print(list(vec))                 # [None, None, None, None, 42]

lst = LinkedList()
lst.insert(1)
lst.insert(2)
lst.insert_after(lst.first(), 4)
print(list(lst))                 # [2, 4, 1]

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.top(), stack.pop())  # 2 2

queue = Queue()
queue.insert(1)
queue.insert(2)
print(queue.get(), queue.remove())  # 1 1

pq = PriorityQueue()
pq.insert("later", 2)
pq.insert("sooner", 1)
print(pq.extract_min())          # sooner

tree = SplayTree()
tree.add("key", "value")
print(tree.find("key"), "key" in tree)  # value True
tree.remove("key")
```

## Exercises

### Shortest route between cities

`dsalab.routes` finds the route with the fewest hops between two cities
using breadth-first search over an undirected graph.

- `CityIndex` gives each city name a consecutive integer id (`id_of`,
  `name_of`).
- `build_graph(lines, index)` turns lines of whitespace-separated city
  pairs into an adjacency list; a line may hold several pairs and an odd
  trailing name is ignored.
- `bfs_shortest_path(graph, start, end)` returns the list of vertex ids
  along the path, or `[]` if there is none.
- `find_route(lines)` takes the roads from every line but the last, and
  the start and end cities from the last line; it returns the city names
  along the route, or `[]`. Empty input, or a last line without two names,
  raises `ValueError`.

The command runs it over files:

```
dsalab-route [INPUT] [OUTPUT]
```

`INPUT` defaults to `input.txt` and `OUTPUT` to `output.txt`. The route
is written as city names each followed by a space, or `No path found.`
when the cities are not connected. On empty input an error message goes
to standard error and the exit status is 1.

### Random-array tasks

`dsalab.lab1` fills arrays with random digits, prints the mean of the
non-zero ones, and moves the values lying outside a range `[a, b]` to the
front in order, filling the rest with zeros.

- `random_digits(count, rng=None)` returns an `Array` of digits 0–9.
- `mean_of_nonzero(values)` returns the mean of the non-zero values, or
  NaN if there are none.
- `compact_outside(values, low, high)` returns the compacted list.

```
dsalab-lab1 [--seed N]
```

reads from standard input the size of the first array, then the size of
the second array followed by the bounds `a` and `b`. It prints the mean
on one line and the compacted second array, values separated by spaces,
on the next. `--seed` makes the random digits reproducible. Missing input
gives an error on standard error and exit status 1.

### Practice helpers

`dsalab.practice` holds small exercises:

- `total(values)` — sum of the values.
- `zero_last_in_place(values)` — set the last element to zero in the
  caller's sequence (`IndexError` if empty).
- `zero_last_copy(values)` — a new list with the last element zeroed.
- `prepend_all(values)` — insert each value at the front in turn, so the
  result is reversed.
- `lookup_definitions(pairs, queries)` — look up each query among
  `(word, definition)` pairs; the first definition wins and unknown words
  give `"Not found"`.
- `below_threshold(values, limit)` — the values less than `limit`, in
  order.

## What this package does not do

- The route finder counts hops only; there is no shortest path over
  weighted roads.
- There is no text compression or encoding module.
- Nothing is persisted: all structures live in memory only.