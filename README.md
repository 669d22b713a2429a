# algolab

A small collection of classic algorithms used for teaching: recursive and
iterative factorial, the Towers of Hanoi, and in-place sorting routines
(selection sort, merge sort, quicksort and heap sort).

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

Print a factorial computed both recursively and iteratively (the number
defaults to 8):

```
algolab-factorial
algolab-factorial 5
```

List the moves that solve the Towers of Hanoi, moving disks from peg A to
peg C (the number of disks defaults to 3; fewer than 1 is an error):

```
algolab-hanoi
algolab-hanoi 4
```

Pick a sorting algorithm from a menu and watch it sort the sample
`c, a, f, b, f, g`:

```
algolab-sort
```

The menu offers `1` (mergesort), `2` (quicksort) and `3` (heapsort). Each
round reads one character as the selection and discards the rest of that
line; any other character prints `Invalid selection.` and leaves the sample
unsorted. The menu repeats until standard input ends.

## Library use

```python
from algolab.factorial import factr, facti
from algolab.hanoi import hanoi, format_moves
from algolab.sorting import quicksort, merge_sort, heap_sort, selectsort, format_items

factr(5)   # 120
facti(5)   # 120

moves = hanoi(3, "A", "B", "C")
print(format_moves(moves), end="")
# 1: Move from A to C
# 2: Move from A to B
# ...

data = list("cafbfg")
quicksort(data, 0, len(data) - 1)
print(format_items(data))   # a, b, c, f, f, g
```

### `algolab.factorial`

- `factr(n)` – recursive factorial; any `n` below 2 gives 1.
- `facti(n)` – iterative factorial; the product starts at `n` itself, so
  values of `n` below 1 are returned unchanged (`facti(0) == 0`).

### `algolab.hanoi`

- `hanoi(n, source="A", spare="B", target="C")` returns a list of `Move`
  objects; raises `ValueError` if `n` is less than 1.
- `Move` is a frozen dataclass with `number`, `source` and `target`;
  `str(move)` gives `"<number>: Move from <source> to <target>"`.
- `format_moves(moves)` joins moves one per line, each ending in a newline.

### `algolab.sorting`

`selectsort`, `merge_sort`, `quicksort` and `heap_sort` each take
`(items, lo=0, hi=None)` and sort the slice `items[lo..hi]` (both bounds
inclusive) in place; `hi=None` means the last index. A range outside the
sequence raises `IndexError`. `merge_sort` is stable.

`format_items(items)` joins items with `", "`.

`algolab.sort_menu.run(input_stream, output_stream)` runs the interactive
menu on any pair of text streams.

## What it does not do

Selection sort is available from the library only; the `algolab-sort` menu
does not offer it. The menu always sorts the same built-in sample and cannot
take data of your own.