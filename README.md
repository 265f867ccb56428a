# dsakit

Classic data structures and algorithms in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `cocktail_sort`, `quick_sort`, `insertion_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `radix_sort` (non-negative integers only), `merge_sorted`, `count_inversions` |
| `dsakit.searching` | `binary_search` (index or `None`), `count_at_most` |
| `dsakit.quickbench` | `first_pivot_quicksort`, `best_case`, `average_case`, `worst_case`, `benchmark`, `format_table` |
| `dsakit.linked_list` | `Node` and free functions on a head: `from_values`, `to_list`, `length`, `insert_at_head`, `insert_at_tail`, `delete_head`, `delete`, `search`, `reverse`, `reverse_k`, `rotate`, `make_cycle`, `detect_cycle`, `remove_cycle`, `intersect`, `intersection_point`, `display` |
| `dsakit.circular_list` | `CircularList` with `insert_at_front` and `view` |
| `dsakit.bst` | `BinarySearchTree`: insert, search, delete, minimum, maximum, successor, predecessor, in/pre/post-order |
| `dsakit.binary_tree` | `TreeNode` with `preorder`, `inorder`, `postorder`, `tree_to_str`, `level_order`, `sum_at_level`, `count_nodes`, `sum_nodes`, `height`, `diameter` |
| `dsakit.stack` | `BoundedStack`, `StackFullError`, `StackEmptyError` |
| `dsakit.queues` | `CircularQueue` (capacity 6 by default), `ArrayDeque` (capacity 7 by default), `QueueFullError`, `QueueEmptyError` |
| `dsakit.expressions` | `is_balanced`, `evaluate_postfix` (single digits, `+ - * /`, division truncates toward zero) |
| `dsakit.graphs` | `Graph` with `add_edge` and `bfs`, `bellman_ford`, `NegativeCycleError`, `is_bipartite`, `topological_sort` |
| `dsakit.spanning_tree` | `Edge`, `kruskal`, `prim`, `format_spanning_tree` |
| `dsakit.numeric` | `power_mod`, `determinant`, `distance`, `factorial_digits`, `gcd`, `matrix_multiply` |
| `dsakit.bits` | `checksum` and `verify_checksum` (bitwise complement of the sum), `longest_zero_run`, `numbers_with_longest_zero_run` |
| `dsakit.combinatorics` | `four_sum`, `next_permutation`, `permutations` (a generator), `fractional_knapsack` |
| `dsakit.text` | `is_palindrome` (case-insensitive), `reverse`, `remove_k_duplicates`, `count_keys` |
| `dsakit.arrays` | `maximum`, `swap_arrays`, `swap_pair`, `count_up` |
| `dsakit.producer_consumer` | `BoundedBuffer` with `produce` and `consume`, `BufferFullError`, `BufferEmptyError` |
| `dsakit.factorial_threads` | `factorial`, `sum_of_factorials`, `run_threads` |
| `dsakit.employees` | `Employee`, `highest_paid` |
| `dsakit.billing` | `Item`, `Order`, `render_header`, `render_item`, `render_footer`, `render_invoice`, `InvoiceStore` |

All sorts take any iterable and return a new list; the input is left alone.
Linked-list functions that may change the front of the list return the new
head. Functions that walk a whole linked list (`length`, `to_list`,
`display`) do not finish on a list that has a cycle.

## Examples

```python
from dsakit.numeric import gcd, power_mod
from dsakit.expressions import is_balanced, evaluate_postfix
from dsakit.bst import BinarySearchTree
from dsakit.spanning_tree import kruskal, format_spanning_tree

gcd(12, 18)                               # 6
power_mod(2, 10, 1000)                    # 24
is_balanced("[4-6]((8){(9-8)})")          # True
evaluate_postfix("235*+")                 # 17

tree = BinarySearchTree()
for key in (5, 1, 3, 4, 2, 7):
    tree.insert(key)
3 in tree                                 # True
tree.minimum(), tree.maximum()            # (1, 7)
tree.successor(5)                         # 7

edges = kruskal([[0, 2, 3], [2, 0, 1], [3, 1, 0]])
print(format_spanning_tree(edges))        # lettered edges, then the total cost
```

Operations that cannot proceed, such as pushing onto a full `BoundedStack`
or taking from an empty `CircularQueue`, raise an exception
(`StackFullError`, `QueueEmptyError` and so on) instead of printing a message.
`bellman_ford` raises `NegativeCycleError` when a negative cycle is reachable
from the source, and `prim` raises `ValueError` on a disconnected graph.

## Command-line tools

Interactive binary search tree session (insert, delete, inorder traversal,
predecessor, successor, search, maximum, minimum; choice 9 quits):

```
dsakit-bst
```

Time the first-pivot quicksort on sorted, random and reverse-sorted input.
Sizes default to 1000, 10000 and 100000; others can be given as arguments.
Times are reported in microseconds:

```
dsakit-quickbench
dsakit-quickbench 500 5000
```

Restaurant billing: create an invoice (10% discount, then 9% CGST and 9% SGST
on the net total), list saved invoices and search them by customer name.
Invoices are appended to `invoices.txt` in the current directory, one JSON
record per line; `--store` names another file:

```
dsakit-billing
dsakit-billing --store my-invoices.txt
```

## What it does not do

The library functions return values and strings; they do not read from the
terminal or write files. `format_spanning_tree` and `format_table` give back
text for the caller to print or save, and `permutations` yields each
arrangement rather than writing it anywhere. `format_spanning_tree` names
vertices with the letters A to Z, so it handles at most 26 vertices. The only
persistent storage is the billing invoice file.