"""Count palindromic integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

DEFAULT_NUMBERS = (11, 101, 101, 101, 101)


def is_palindrome(k: int) -> bool:
    """True if the decimal form of k reads the same both ways."""
    digits = str(k)
    return digits == digits[::-1]


def count_palindromes(numbers: Iterable[int]) -> int:
    """Number of palindromes among numbers."""
    return sum(1 for k in numbers if is_palindrome(k))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count palindromic integers.")
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)
    numbers = args.numbers or DEFAULT_NUMBERS
    print(f"count = {count_palindromes(numbers)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())