"""Count and sum the integers written one per line in a text file."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_PATH = "file_text44.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def count_and_sum(lines: Iterable[str]) -> tuple[int, int]:
    """Return (count, sum) of the integers in lines, stopping at the first blank line.

    A line that does not start with an integer counts as zero.
    """
    count = 0
    total = 0
    for line in lines:
        if not line.strip():
            break
        match = _LEADING_INT.match(line)
        count += 1
        total += int(match.group(1)) if match else 0
    return count, total


def count_and_sum_file(path: str | Path) -> tuple[int, int]:
    """Return (count, sum) of the integers in the file at path."""
    with open(path) as handle:
        return count_and_sum(handle)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count and sum integers, one per line.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        count, total = count_and_sum_file(args.path)
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 1

    print(f"sum = {total}, count = {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())