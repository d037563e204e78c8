# algokit

A small library of classic data structures and algorithms, each written
plainly enough to read alongside a textbook:

- `algokit.arrays`: `array_max`, `array_intersect`, `array_reverse`, `insert_at`
- `algokit.linked_list`: `LinkedList` with `append`, `reverse` and `render`
- `algokit.stacks`: `TwoStack` (two stacks sharing one fixed-size store) and `MinStack`
- `algokit.queues`: `CircularQueue` (fixed-capacity ring buffer, with `reverse_prefix`) and `LinkedQueue`
- `algokit.queue_stack`: `QueueStack`, a stack built from two queues
- `algokit.hashtable`: `HashTable`, separate chaining with integer keys and string values
- `algokit.hash_problems`: `most_frequent`, `count_pairs_with_diff`, `two_sum`
- `algokit.bst`: `BinarySearchTree` with in-, pre-, post- and level-order traversals, `size`, `count_leaves`, `maximum`
- `algokit.avl`: `AVLTree` and the `insert`, `rotate_left`, `rotate_right`, `height` and `balance_factor` functions
- `algokit.searching`: `linear_search`, `binary_search`, `timed_search`

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.linked_list import LinkedList
from algokit.searching import binary_search
from algokit.hash_problems import two_sum
from algokit.avl import AVLTree

items = LinkedList([10, 20, 30, 40])
items.reverse()
print(items.render())          # 40 ->30 ->20 ->10 ->NULL

print(binary_search([1, 3, 5, 7, 9, 11, 13, 15], 9))   # 4
print(two_sum([2, 7, 11, 15], 9))                      # (0, 1)

tree = AVLTree()
for key in (30, 15, 18, 10, 16, 7, 8):
    tree.insert(key)
print(tree.inorder())          # [7, 8, 10, 15, 16, 18, 30]
print(tree.render())
```

Operations that fail, such as popping an empty stack or enqueueing into a
full queue, raise exceptions (`StackUnderflowError`, `StackOverflowError`,
`QueueEmptyError`, `QueueFullError`) instead of returning sentinel values.
The search functions return `-1` when the target is absent.

## What it does not do

- There is no command-line program; everything is used by importing the modules.
- There are no sorting functions. `binary_search` expects a list that is
  already in ascending order; use Python's own `sorted` or `list.sort`.