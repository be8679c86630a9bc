# dslib

Building blocks for classic data structures, plus a few helpers for filtering
and ordering territorial units such as towns and regions.

## Modules

### `dslib.memory`

- `MemoryBlock` is a dataclass holding one value in `data`.
- `MemoryManager(block_type=MemoryBlock)` creates blocks with
  `allocate_memory()` and counts the live ones. `release_memory(block)`
  lowers the count. It raises `ValueError` when no blocks are allocated.
  `allocated_block_count()` returns the count.
- `CompactMemoryManager(size=4, block_type=MemoryBlock)` keeps its blocks in
  order within a capacity. The capacity doubles when the store is full.
  - `allocate_memory()` and `allocate_memory_at(index)` create blocks.
  - `release_memory(block)` releases that block and every block after it.
  - `release_memory_at(index)` and `release_last()` release single blocks.
  - `change_capacity(n)` changes the capacity and drops blocks that no
    longer fit. `shrink_memory()` shrinks the capacity, but never below 4.
  - Other methods: `capacity()`, `clear()`, `assign(other)`, `copy()`,
    `equals(other)`, `calculate_index(block)`, `get_block_at(index)`,
    `swap(i, j)` and `dump(out)`.
  - `calculate_index` returns `INVALID_INDEX` when the block is not held by
    the manager.
  - A bad index raises `IndexError`.

### `dslib.sequence`

- `Sequence` is an abstract base for linear structures. Subclasses provide
  the access, insert and remove methods. In return they get
  `process_all_blocks_forward`, `process_all_blocks_backward`,
  `process_blocks_forward`, `process_blocks_backward`,
  `find_block_with_property` and `find_previous_to_block_with_property`.
- `Network` is an abstract interface for graph-like structures: nodes,
  relations and a gate.

### `dslib.hierarchy`

- `Hierarchy` is an abstract tree. It provides `process_post_order(node, op)`
  and `node_count(node=None)`.
- `ImplicitHierarchy(k)` is a complete K-way tree stored level by level.
  - `insert_last_leaf()` adds a leaf and `remove_last_leaf()` removes one.
  - Access methods: `access_root()`, `access_parent(node)`,
    `access_son(node, order)` and `access_last_leaf()`.
  - Index and shape methods: `level`, `degree`, `index_of_parent` and
    `index_of_son`. Each takes a node or an index.
  - Other methods: `node_count`, `copy`, `assign` and `equals`.
  - `emplace_root`, `change_root`, `emplace_son`, `change_son` and
    `remove_son` raise `UnavailableFunctionCall`.
- `BinaryImplicitHierarchy()` is the case `k = 2`.

```python
from dslib.hierarchy import ImplicitHierarchy

h = ImplicitHierarchy(3)
for i in range(9):
    h.insert_last_leaf().data = i

root = h.access_root()
two = h.access_son(root, 1)
print(two.data)                        # 2
print(h.degree(two))                   # 2
print(h.node_count(two))               # 3
print(h.level(h.access_son(two, 1)))   # 2
```

### `dslib.explicit_hierarchy`

These are trees of linked blocks. Each block knows its `parent`.

- `MultiWayExplicitHierarchy` keeps any number of ordered sons.
  - `emplace_son` inserts a son and shifts the later sons to the right.
  - `remove_son` removes a son and closes the gap.
- `KWayExplicitHierarchy(k)` gives each node `k` slots, and a slot may be
  empty.
- `BinaryExplicitHierarchy` adds methods for the left and right sons:
  - `insert_left_son` and `insert_right_son`
  - `change_left_son` and `change_right_son`
  - `remove_left_son` and `remove_right_son`
  - `access_left_son` and `access_right_son`
  - `is_left_son` and `is_right_son`
  - `has_left_son` and `has_right_son`

All of these hierarchies also support the following:

- `emplace_root()` and `change_root(node)`
- `len()`, `is_empty()` and `clear()`
- `copy()`, which makes a deep copy, and `assign(other)`
- `equals(other)`, which compares shape and data

```python
from dslib.explicit_hierarchy import BinaryExplicitHierarchy

tree = BinaryExplicitHierarchy()
root = tree.emplace_root()
root.data = "root"
left = tree.insert_left_son(root)
left.data = "left"
print(len(tree), tree.is_left_son(left))  # 2 True
```

### `dslib.sorting` and `dslib.filters`

A territorial unit can be any object with these members:

- a `name` attribute
- a `type` attribute
- `population(year, gender=Gender.TOTAL)`
- `format(year)`
- `format_all_years()`

`TerritorySorter` orders units in two ways:

- By name, using Slovak alphabetical order (`ALPHABET_ORDER`). Unknown
  characters sort last, and on a tie the shorter name comes first.
- By population for the year and `Gender` chosen with
  `set_population_sort_criteria`.

`dslib.filters` offers the following:

- Predicates: `contains_str`, `max_residents`, `min_residents` and
  `has_type`.
- Filters: `filter_items`, `filter_with_contains_str`,
  `filter_with_max_residents` and `filter_with_min_residents`.
- Sorting: `sort_items(items, sorter, year, sort_type)`. The sort types are:
  - `"A"` for name
  - `"M"`/`"m"` for male population
  - `"Z"`/`"z"` for female population
  - `"P"`/`"p"` for total population

  Any other value leaves the order unchanged.
- Output: `print_items` and `filter_sort_and_print`.

```python
import sys
from dataclasses import dataclass
from dslib.filters import filter_with_min_residents, filter_sort_and_print
from dslib.sorting import Gender, TerritorySorter

@dataclass
class Town:
    name: str
    type: str
    residents: dict  # year -> (male, female)

    def population(self, year, gender=Gender.TOTAL):
        male, female = self.residents[year]
        return {Gender.MALE: male, Gender.FEMALE: female,
                Gender.TOTAL: male + female}[gender]

    def format(self, year):
        return f"{self.name}: {self.population(year)}"

    def format_all_years(self):
        return "; ".join(self.format(y) for y in sorted(self.residents))

towns = [
    Town("Žilina", "town", {2020: (39000, 41000)}),
    Town("Čadca", "town", {2020: (11000, 12000)}),
    Town("Zvolen", "town", {2020: (20000, 21000)}),
]
large = filter_with_min_residents(towns, 2020, 20000)
filter_sort_and_print(large, TerritorySorter(), 2020, "A", sys.stdout)
# Zvolen: 41000
# Žilina: 80000
```

## What it does not do

- `Sequence` and `Network` are abstract. The package has no concrete list,
  array, queue, table or graph built on them.
- There is no reader for population data. You supply your own unit objects.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```