# drillbook

A small library of classic programming exercises. Each exercise is a plain
Python function or data structure. It has no dependencies beyond the standard
library.

## Installation

```
pip install drillbook
```

## What is inside

- `drillbook.arithmetic` holds the number drills:
  - `octal_to_binary` reads the digits of an integer as octal and returns the
    binary digits as an integer.
  - `decimal_to_binary` returns the binary digits as a string.
  - `factorial`, `gcd` (positive integers only), `is_prime`, `is_armstrong`
    (sum of the cubes of the digits) and `binary_power`.
  - `fibonacci_triangle` returns rows of Fibonacci numbers.
  - `basic_operations` returns an `ArithmeticResult` with the sum, difference,
    product and quotient.
  - `calculate` applies `+`, `-`, `*` or `/`. Division truncates toward zero.
    Any other operator raises `ValueError`.
  - `determinant_2x2` and `max_subarray_sum` (Kadane's algorithm).
- `drillbook.sorting` has `exchange_sort`, `insertion_sort`, `bubble_sort` and
  `selection_sort`. Each one returns a new ascending list and leaves its input
  unchanged.
- `drillbook.searching` has `binary_search` and `fibonacci_search`. Both work
  on ascending sequences and return an index, or `None` when the key is
  missing.
- `drillbook.strings` has the following functions:
  - `reverse_sentence` reverses the first line of a text.
  - `concatenate` and `string_length`.
  - `truncated_concat` appends at most `len(text) - 1` characters of the
    second string.
  - `reverse_string`.
  - `replace_characters` does a character-by-character replacement. It
    requires words of equal length.
  - `substring` takes a 1-based position.
  - `longest_common_subsequence`.
- `drillbook.singly` has `Node` and `SinglyLinkedList`:
  - Insertion: `push_front`, `append`, `insert_at`, `insert_after` and
    `insert_sorted`.
  - Removal and lookup: `pop_front` and `node_at`.
  - `format` joins the values with a separator, `"-->"` by default.
  - The module also has `has_cycle`, which detects a loop with a slow and a
    fast pointer, and `merge_sorted`.
- `drillbook.doubly` has `DoublyNode` and `DoublyLinkedList`:
  - Insertion: `push_front`, `append` and `insert_at`.
  - Removal: `pop_front`, `pop_back` and `remove_at`.
  - `reverse` reverses the list in place.
  - The list can be iterated forwards, and backwards with `reversed()`.
- `drillbook.circular` has `SortedCircularList`:
  - It is an ascending ring of `Node` objects.
  - `insert` puts a value at its sorted place.
  - `take(count)` walks round the ring any number of steps.
  - Iterating over the list gives one lap.
- `drillbook.vector` has `Vector`, a growable array:
  - Its `capacity()` starts at 4. It doubles when the vector is full, and
    halves when a deletion leaves it a quarter full.
  - `get` returns `None` for an index out of range.
  - `set` and `delete` raise `IndexError` for an index out of range.

## Examples

```python
from drillbook.arithmetic import gcd, octal_to_binary
from drillbook.sorting import insertion_sort
from drillbook.searching import fibonacci_search
from drillbook.strings import longest_common_subsequence
from drillbook.singly import SinglyLinkedList

gcd(12, 18)                                   # 6
octal_to_binary(17)                           # 1111
insertion_sort([12, 11, 13, 5, 6])            # [5, 6, 11, 12, 13]
fibonacci_search([10, 22, 35, 40, 45], 40)    # 3
longest_common_subsequence("ACADB", "CBDA")   # "CB"

items = SinglyLinkedList([7, 11, 41, 66])
items.insert_at(2, 100)
list(items)                                   # [7, 11, 100, 41, 66]
```

## What it does not do

drillbook is a library only. It has no command-line program and does not
prompt for input. To use an exercise, import its function and pass it the
values to work on.

## Running the tests

```
pip install drillbook[test]
pytest
```