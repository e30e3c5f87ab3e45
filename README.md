# algonotes

Textbook algorithms and data structures written as plain Python:

- `algonotes.insertion`: insertion sort that grows a sorted prefix
  (`insertion_sort`), the classic shifting form (`insertion_sort_book`) and
  the `insert` step that places one value into a sorted prefix.
- `algonotes.merge`: a top-down merge sort that sorts copies of each half
  (`merge_sort`, built on `merge`, which returns a new stable merged list) and
  the index-range form that works in place (`merge_sort_book`, with
  `merge_book`). Invalid ranges raise `ValueError`.
- `algonotes.heap`: a max `BinaryHeap` addressed from index 1, laid out over
  the sequence it is given, and `heap_sort`.
- `algonotes.bst`: an unbalanced `BinarySearchTree` of `Node`s with `insert`,
  `search`, `minimum`, `maximum`, `predecessor`, `successor` and an
  `in_order_walk` generator. Values already in the tree are not added twice.
- `algonotes.utils`: `shuffle` (in-place Fisher-Yates) and
  `generate_random_list` for making test input.

All sorting functions sort the given mutable sequence in place and return
`None`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sorting:

```python
from algonotes.insertion import insertion_sort_book
from algonotes.merge import merge_sort_book
from algonotes.heap import heap_sort

data = [42, 7, 19, 3, 25, 14, 88, 1, 56, 30]

values = list(data)
insertion_sort_book(values)      # sorts in place

values = [20, 1, 7, 2, 10, 5, 3, 4]
merge_sort_book(values, 0, len(values))

values = list(data)
heap_sort(values)                # [1, 3, 7, 14, 19, 25, 30, 42, 56, 88]
```

A binary search tree:

```python
from algonotes.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (5, 3, 7, 2, 4, 6, 8):
    tree.insert(value)

list(tree.in_order_walk())                            # [2, 3, 4, 5, 6, 7, 8]
tree.minimum().data                                   # 2
tree.maximum().data                                   # 8
BinarySearchTree.successor(tree.root).data            # 6
BinarySearchTree.predecessor(tree.root).data          # 4
tree.search(4) is not None                            # True
```

Random input:

```python
import random
from algonotes.utils import generate_random_list

generate_random_list(10, random.Random(1))   # a permutation of 0..9
```

## What it does not do

The package is a library only: it has no command-line program, and it does
not measure running time or memory use of the algorithms.