"""Recursive and iterative factorial."""

from __future__ import annotations

import argparse


def factr(n: int) -> int:
    """Return n! computed recursively; values of n below 2 give 1."""
    if n <= 1:
        return 1
    return n * factr(n - 1)


def facti(n: int) -> int:
    """Return n! computed with a loop.

    The running product starts at ``n`` itself, so ``n`` values below 1
    are returned unchanged.
    """
    result = n
    for factor in range(n - 1, 0, -1):
        result *= factor
    return result


def main(argv: list[str] | None = None) -> int:
    """Print the factorial of a number with both implementations."""
    parser = argparse.ArgumentParser(description="Compute a factorial two ways.")
    parser.add_argument("n", nargs="?", type=int, default=8, help="number (default: 8)")
    args = parser.parse_args(argv)
    print(f"Recursive: {factr(args.n)}")
    print(f"Iterative: {facti(args.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())