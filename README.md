# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies.

## Installation

```
pip install .
```

## What is inside

### Stacks and queues

- `dsakit.stacks`
  - `ArrayStack(capacity)`: fixed capacity; `push` raises `StackFullError`
    when full. Iterates bottom to top.
  - `DynamicArrayStack(capacity=1)`: doubles its `capacity` when a push finds
    it full. Iterates bottom to top.
  - `LinkedStack()`: unbounded, built from linked cells. Iterates top to
    bottom.
  - All three offer `push`, `pop`, `top`, `is_empty`, `clear` and `len()`;
    `pop` and `top` on an empty stack raise `StackEmptyError`.
- `dsakit.queues`
  - `LinearQueue(capacity=50)`: `enqueue` only; `render()` joins the items
    from front to rear with `" <- "`.
  - `CircularQueue(capacity)`: a ring buffer with `enqueue`, `dequeue`,
    `front`, `rear`, `is_full` and `is_empty`.
  - Overflow raises `QueueFullError`, reading or removing from an empty queue
    raises `QueueEmptyError`.
- `dsakit.min_stack`: `MinStack` keeps the running minimum beside every
  value; `CompactMinStack` records a value as a minimum only when it ties or
  lowers the current one. Both have `push`, `pop`, `get_min` and `len()`.
- `dsakit.two_stacks`: `TwoStacks(capacity)`, a left and a right stack
  sharing one array (`push_left`, `push_right`, `pop_left`, `pop_right`,
  `top_left`, `top_right`, `is_full`, `is_empty_left`, `is_empty_right`).
  A push fails with `StackFullError` only once every slot is in use.

### Hashing

- `dsakit.hashing`: `ChainedHashTable(size)` is a set of integers in chained
  buckets. It starts with `size // 20` buckets (so `size` must be at least
  20) and doubles them when the average chain grows past 20. It has
  `insert` and `delete` (each returning whether anything changed), `in`,
  `len()`, `buckets()` and `render()`. `hash_number(data, size)` is the
  bucket function it uses.

### Binary trees

- `dsakit.binary_tree`: `Node(data, left=None, right=None)` with
  `insert_left`, `insert_right`, `delete_left` and `delete_right`, and
  functions that take a root node:
  - traversals returning lists: `inorder_recursive`, `inorder_iterative`,
    `postorder_recursive`, `postorder_iterative`, `levelorder`;
  - `find_max_recursive`, `find_max_iterative` (an empty tree raises
    `ValueError`);
  - `contains_recursive`, `contains_iterative`;
  - `insert_level_order`, which fills the first free child slot in level
    order;
  - `size_recursive`, `size_iterative`.

### Problems solved with a stack

- `dsakit.stack_problems`: `first_unbalanced_index` and `is_balanced` for
  `()[]{}`; `stack_permutation` (push/pop sequence as `S`/`X`, or `None`);
  `spans_naive` and `spans`; `largest_rectangle` under a histogram;
  `remove_adjacent_duplicates`; `next_greater`; `is_marked_palindrome`.
- `dsakit.expressions`: `infix_to_postfix`, `evaluate_postfix` and
  `evaluate_infix` for expressions of single-digit operands and
  `+ - * / ( )`, plus `is_operator` and `operator_precedence`. Division
  truncates toward zero; malformed expressions raise `ValueError`.

### Sorting

Every sort takes an iterable and returns a new list, leaving the input
untouched.

- `dsakit.sorting.simple`: `bubble_sort`, `comb_sort` (with `find_next_gap`),
  `insertion_sort`, `odd_even_sort`, `heap_sort`.
- `dsakit.sorting.distribution`: `bead_sort` (non-negative integers),
  `bucket_sort` (numbers in `[0, 1)`), `pigeonhole_sort` (integers), and
  `counting_sort_string`, which returns a string of the characters reordered
  by code point.
- `dsakit.sorting.merging`: `merge_sort`, `non_recursive_merge_sort`, and
  `numeric_string_sort` with its key `numeric_key`, which orders digit
  strings by value, ignoring leading zeros.
- `dsakit.sorting.quick`: `quick_sort`, `random_pivot_quick_sort(values,
  rng=None)`, `partition(values, low, high)` (in place), and
  `generate_unsorted_array(size, low, high, rng=None)` for random non-zero
  test data.
- `dsakit.sorting.selection`: `selection_sort`, `selection_sort_recursive`
  with `find_min_index`, `recursive_bubble_sort`.
- `dsakit.sorting.radix`: `radix_sort` for non-negative integers.
- `dsakit.sorting.hybrid`: `shell_sort`, `strand_sort`, `tim_sort`, and
  `wave_sort`, which returns the values arranged as
  `a[0] >= a[1] <= a[2] >= ...` rather than sorted.

## Examples

```python
from dsakit.stacks import DynamicArrayStack
from dsakit.min_stack import MinStack
from dsakit.binary_tree import Node, inorder_iterative, levelorder
from dsakit.stack_problems import largest_rectangle, next_greater
from dsakit.expressions import infix_to_postfix, evaluate_postfix
from dsakit.sorting.simple import heap_sort
from dsakit.sorting.hybrid import wave_sort

stack = DynamicArrayStack()
for value in (1, 2, 3):
    stack.push(value)
stack.pop()                                  # 3

mins = MinStack()
for value in (10, 12, -1, -19, 20):
    mins.push(value)
mins.get_min()                               # -19

root = Node(1)
root.insert_left(2)
root.insert_right(3)
inorder_iterative(root)                      # [2, 1, 3]
levelorder(root)                             # [1, 2, 3]

largest_rectangle([3, 1, 5, 6, 2, 3])        # 10
next_greater([6, 3, 4, 5, 2, 4, 4, 7])       # [7, 4, 5, 7, 4, 7, 7, 7]

infix_to_postfix("A*B-(C+D)+E")              # "AB*CD+-E+"
evaluate_postfix("123*+5-")                  # 2

heap_sort([-10, 78, -1, -6, 7])              # [-10, -6, -1, 7, 78]
wave_sort([10, 90, 49, 2, 1, 5, 23])         # [2, 1, 10, 5, 49, 23, 90]
```

## What it does not do

This is a library only: it has no command-line program and no interactive
prompts. Expression evaluation handles single-digit operands only.

## Running the tests

```
pip install .[test]
pytest
```