"""Towers of Hanoi solver."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One numbered move of the top disk from one peg to another."""

    number: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.number}: Move from {self.source} to {self.target}"


def _steps(n: int, source: str, spare: str, target: str) -> Iterator[tuple[str, str]]:
    if n == 1:
        yield source, target
        return
    yield from _steps(n - 1, source, target, spare)
    yield from _steps(1, source, spare, target)
    yield from _steps(n - 1, spare, source, target)


def hanoi(n: int, source: str = "A", spare: str = "B", target: str = "C") -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError(f"number of disks must be at least 1, got {n}")
    return [
        Move(number, src, dst)
        for number, (src, dst) in enumerate(_steps(n, source, spare, target), start=1)
    ]


def format_moves(moves: Iterable[Move]) -> str:
    """Render moves one per line, each line ending in a newline."""
    return "".join(f"{move}\n" for move in moves)


def main(argv: list[str] | None = None) -> int:
    """Print the solution for a number of disks (default 3)."""
    parser = argparse.ArgumentParser(description="Solve the Towers of Hanoi.")
    parser.add_argument("disks", nargs="?", type=int, default=3, help="number of disks")
    args = parser.parse_args(argv)
    try:
        moves = hanoi(args.disks, "A", "B", "C")
    except ValueError as exc:
        parser.error(str(exc))
    print(format_moves(moves), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())