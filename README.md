# dsakit

Small, readable implementations of classic data structures and algorithms:
sorting, searching, array helpers, stacks, queues, a singly linked list and a
binary search tree. There are no runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Sorting (`dsakit.sorting`)

Each sort takes any iterable and returns a new sorted list; the input is left
alone.

```python
from dsakit.sorting import (
    bubble_sort, insertion_sort, selection_sort, merge_sort, quick_sort, format_array,
)

data = [12, 54, 65, 7, 23, 9]
insertion_sort(data)                         # [7, 9, 12, 23, 54, 65]
selection_sort([3, 5, 2, 13, 12])            # [2, 3, 5, 12, 13]
merge_sort([9, 1, 4, 14, 4, 15, 6])          # [1, 4, 4, 6, 9, 14, 15]
quick_sort([9, 4, 4, 8, 7, 5, 6])            # [4, 4, 5, 6, 7, 8, 9]
bubble_sort(data, adaptive=True)             # stops early once a pass makes no swap
format_array([3, 5, 2])                      # "3 5 2"
```

`bubble_sort` logs each pass number at DEBUG level on the `dsakit.sorting`
logger.

## Searching (`dsakit.searching`)

Both functions return the index of the key and raise `ValueError` when it is
absent.

```python
from dsakit.searching import linear_search, binary_search

linear_search([2, 3, 4, 10, 40], 10)         # 3
binary_search([1, 3, 5, 7], 7)               # 3 (input must be in ascending order)
```

## Array helpers (`dsakit.arrays`)

```python
from dsakit.arrays import (
    is_even, describe_parity, largest_two, sum_and_mean,
    smallest_position, number_from_digits, pyramid,
)

is_even(4)                                   # True
describe_parity(7)                           # "7 is odd number"
largest_two([4, 9, 2, 7])                    # (9, 7)
sum_and_mean([1, 2, 3, 4])                   # (10, 2.5)
smallest_position([5, 3, 8])                 # (3, 1)
number_from_digits([3, 2, 1])                # 123, first digit is the units place
```

`largest_two` needs at least two items; when all items are equal both results
are that value. `sum_and_mean` and `smallest_position` raise `ValueError` on an
empty sequence.

`pyramid(rows)` returns a string of `rows` lines, each ending in a newline.
Line `i` (from 1) is indented by `rows - i` spaces and holds the characters
with codes 1 to `2 * i - 1`.

## Stacks (`dsakit.stack`)

`ArrayStack(size)` holds at most `size` values; `LinkedStack()` is unbounded.
Both offer `push`, `pop`, `peek`, `is_empty`, `len()` and iteration from top
to bottom; `ArrayStack` also has `is_full`.

```python
from dsakit.stack import ArrayStack, LinkedStack, StackOverflowError, StackUnderflowError

stack = ArrayStack(10)
stack.push(1)
stack.push(23)
stack.pop()                                  # 23
list(stack)                                  # [1]
```

Pushing onto a full `ArrayStack` raises `StackOverflowError`; popping or
peeking into an empty stack raises `StackUnderflowError` (a subclass of
`IndexError`).

## Queues (`dsakit.queues`)

All three queues offer `enqueue`, `dequeue`, `is_empty`, `len()` and iteration
from front to rear; the bounded ones also have `is_full`.

- `CircularQueue(size)` is a ring buffer holding up to `size - 1` values.
- `ArrayQueue(size)` is a linear queue that accepts at most `size - 1` values
  over its whole life: slots freed by dequeueing are not reused, so it can be
  empty and full at the same time.
- `LinkedQueue()` is unbounded.

```python
from dsakit.queues import ArrayQueue, CircularQueue, LinkedQueue, QueueFullError, QueueEmptyError

queue = CircularQueue(4)
queue.enqueue(12)
queue.enqueue(15)
queue.dequeue()                              # 12
```

Enqueueing onto a full queue raises `QueueFullError`; dequeueing from an empty
one raises `QueueEmptyError` (a subclass of `IndexError`).

## Linked list (`dsakit.linked_list`)

`LinkedList` is built from `Node` objects (`data`, `next`). Insertion and
deletion positions count from 1; `node_at` counts from 0. Out-of-range
positions and deleting from an empty list raise `IndexError`.

```python
from dsakit.linked_list import LinkedList

items = LinkedList([10, 20, 30])
items.insert_at_position(15, 2)              # positions count from 1
items.delete_from_end()                      # 30
str(items)                                   # "10 -> 15 -> 20 -> NULL"
list(items.alternate())                      # [10, 20]
items.insert_after(items.node_at(0), 12)     # insert after a given node
```

Other methods: `insert_at_beginning`, `insert_at_end`,
`delete_from_beginning`, `delete_from_position`, `len()` and iteration.

## Binary search tree (`dsakit.bst`)

```python
from dsakit.bst import BinarySearchTree, DuplicatePolicy

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
list(tree.inorder())                         # [20, 30, 40, 50, 60, 70, 80]
list(tree.preorder())                        # [50, 30, 20, 40, 70, 60, 80]
list(tree.postorder())                       # [20, 40, 30, 60, 80, 70, 50]
tree.delete(50)                              # True
40 in tree                                   # True
tree.minimum()                               # 20
```

`delete` returns whether a node was removed; a node with two children takes
the key of its in-order successor. `minimum` raises `ValueError` on an empty
tree. `search` returns the `TreeNode` holding a key, or `None`.

The `DuplicatePolicy` passed to `BinarySearchTree` sets what happens when a key
is inserted twice: `IGNORE` (the default) leaves the tree unchanged, `RIGHT`
puts it in the right subtree, and `REJECT` raises `DuplicateKeyError`.

The free functions `preorder`, `inorder`, `postorder`, `is_bst` and `search`
work on any tree of `TreeNode` objects, including trees built by hand.

## What this package does not do

`dsakit` is a library only. It has no command-line program and does not read
input from the keyboard or print results; callers pass values in and get
values back.