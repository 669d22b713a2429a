"""Interactive menu that demonstrates mergesort, quicksort and heapsort."""

from __future__ import annotations

import sys
from typing import TextIO

from algolab.sorting import format_items, heap_sort, merge_sort, quicksort

_SAMPLE = ("c", "a", "f", "b", "f", "g")

_ALGORITHMS = {
    "1": merge_sort,
    "2": quicksort,
    "3": heap_sort,
}

_MENU = (
    "Please select sorting algorithm:\n"
    "1 = Mergesort\n"
    "2 = Quicksort\n"
    "3 = Heapsort\n"
)

_SEPARATOR = "-" * 32


def _discard_line(stream: TextIO) -> None:
    while (char := stream.read(1)) not in ("\n", ""):
        pass


def run(input_stream: TextIO, output_stream: TextIO) -> None:
    """Repeat the menu, reading one selection per round, until input ends."""
    while True:
        data = list(_SAMPLE)
        output_stream.write(_MENU)
        selection = input_stream.read(1)
        if not selection:
            return
        output_stream.write(f"Original: {format_items(data)}\n")
        sort = _ALGORITHMS.get(selection)
        if sort is None:
            output_stream.write("Invalid selection.\n")
        else:
            sort(data, 0, len(data) - 1)
        output_stream.write(f"Sorted:   {format_items(data)}\n")
        output_stream.write(f"{_SEPARATOR}\n")
        _discard_line(input_stream)


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())