# codekata

A collection of classic data structures, recursion and backtracking
exercises, and small algorithm puzzles, written as ordinary Python with no
third-party dependencies. Every function takes its input as arguments and
returns its result; nothing reads from the keyboard or prints.

## What is inside

| Module | Contents |
| --- | --- |
| `codekata.linked_list` | `LinkedList`, a singly linked list with `append`, `insert`, `pop`, `clear`, indexing, `len` and iteration |
| `codekata.binary_tree` | `TreeNode`, `BinaryTree`, `preorder_values`, `sideways_lines` |
| `codekata.bst` | `BinarySearchTree` with `add`, `remove`, `min`, `in`, `preorder` and `sideways` |
| `codekata.graph` | `Graph`, `Node`, `Edge` and `GraphError` for a weighted directed graph |
| `codekata.hash_sort` | `FrequencyTable` and `sort_by_frequency` |
| `codekata.lru_cache` | `Cache`, `LRUCache` and `run_commands` |
| `codekata.swap_nodes` | `swap_nodes`, the subtree-swapping puzzle |
| `codekata.spells` | `Spell`, `Fireball`, `Frostbite`, `Thunderstorm`, `Waterbolt`, `cast`, `counterspell`, `longest_common_subsequence` |
| `codekata.arrays` | `hourglass_sum`, `minimum_bribes`, `sliding_max`, `parse_ints`, `Matrix`, `TooChaoticError` |
| `codekata.box` | `Box`, ordered by length, breadth, then height |
| `codekata.server` | `Server`, `run_compute`, `check_username`, `username_report`, `BadLengthException` |
| `codekata.people` | `Person`, `Professor`, `Student` and a numbering `Registry` |
| `codekata.pretty` | `format_values`, fixed-width number formatting |
| `codekata.magic` | `is_magic_square`, `rotated_square` |
| `codekata.containers` | `check_balance`, `stutter`, `mirror`, `count_in_range`, `remove_all` |
| `codekata.morse` | `encode`, `decode`, `translate` for a small Morse alphabet (E, M, R, U, L, A, H) |
| `codekata.recursion` | `power`, `is_palindrome`, `binary_digits`, `stars`, `reverse_lines`, `binary_strings`, `decimal_strings`, `permutations`, `sublists`, `format_sublist` |
| `codekata.file_reading` | `read_block`, `read_ints`, `read_until_sentinel` |
| `codekata.text` | `letter_frequency`, `capitalize_sentences`, `parse_decimal` |
| `codekata.matrix` | `snake_matrix`, `boustrophedon`, `run_length`, `compression_ratio` |
| `codekata.fleet` | `Board`, a ship-placement game board |
| `codekata.grades` | `Gradebook`, a growable list of grades with an average |
| `codekata.modern` | `add`, `factorial`, `make_vector`, `counter`, `even_squares`, `Point`, `compare_points` |

## Examples

A linked list that acts like a Python sequence:

```python
from codekata.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.insert(1, 4)
items.pop(0)
print(items)        # {4, 2, 3}
print(len(items))   # 3
```

A binary search tree:

```python
from codekata.bst import BinarySearchTree

tree = BinarySearchTree([55, 29, 87, -3, 42, 60, 91])
print(tree.min())       # -3
print(42 in tree)       # True
tree.remove(55)
print(tree.sideways())  # one value per line, largest on top
```

`remove` raises `KeyError` for a value that is not in the tree, and `min`
raises `ValueError` on an empty tree.

A least-recently-set cache:

```python
from codekata.lru_cache import LRUCache

cache = LRUCache(2)
cache.set(1, 10)
cache.set(2, 20)
print(cache.get(1))     # 10
print(cache.get(5))     # -1
```

Recursion and backtracking; the generators are turned into lists here:

```python
from codekata.recursion import permutations, power, sublists, format_sublist

print(list(permutations("ABC")))   # ['ABC', 'ACB', 'BAC', 'BCA', 'CAB', 'CBA']
print(power(3, 4))                 # 81
for subset in sublists(["Em", "Rul", "Lah"]):
    print(format_sublist(subset))  # {Em, Rul, Lah} first, {} last
```

Bracket balance and Morse translation:

```python
from codekata.containers import check_balance
from codekata.morse import translate

print(check_balance("if (a(4) > 9) { foo(a(2)); }"))   # -1 when balanced
print(check_balance("if (x) {"))                      # 8, the length: a bracket stays open
print(translate("EMRE"))                              # ". __ ._. . "
```

Errors are reported with exceptions: for instance `codekata.graph.GraphError`
when a node is missing or added twice, `codekata.arrays.TooChaoticError` when
someone in a queue moved forward more than two places, and
`codekata.server.BadLengthException` for a username shorter than five
characters.

## What it does not do

The package is a library only. It has no command-line programs and no
interactive prompts; to read numbers from a file, pass an open text stream to
the functions in `codekata.file_reading`.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```