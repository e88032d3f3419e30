"""Duplicate the numbers from a range inside a file of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_PATH = "file39_test.txt"
LOW = 5
HIGH = 10


def parse_numbers(text: str) -> list[int]:
    """Whitespace-separated integers of text."""
    return [int(token) for token in text.split()]


def duplicate_in_range(numbers: Iterable[int], low: int = LOW, high: int = HIGH) -> list[int]:
    """Return numbers with every value in [low, high] written twice in a row."""
    result: list[int] = []
    for n in numbers:
        result.append(n)
        if low <= n <= high:
            result.append(n)
    return result


def duplicate_file(path: str | Path) -> list[int]:
    """Rewrite the file at path with numbers in range duplicated; return the new numbers.

    Raises ValueError if the file is empty.
    """
    path = Path(path)
    text = path.read_text()
    if not text:
        raise ValueError("Failed to read data from file")
    numbers = duplicate_in_range(parse_numbers(text))
    path.write_text("".join(f"{n} " for n in numbers))
    return numbers


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Duplicate numbers from 5 to 10 in a file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        numbers = duplicate_file(args.path)
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("".join(f"Written value: {n} " for n in numbers))
    return 0


if __name__ == "__main__":
    sys.exit(main())