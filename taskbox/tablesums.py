"""Sum the three integer columns of a delimited text table, row by row."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

DEFAULT_SOURCE = "file_text52.txt"
DEFAULT_TARGET = "res_file.txt"
COLUMNS = 3

_RUN = re.compile(r"[0-9-]+")
_INT_PREFIX = re.compile(r"-?\d+")


def _run_value(run: str) -> int:
    match = _INT_PREFIX.match(run)
    return int(match.group()) if match else 0


def row_sum(line: str) -> int | None:
    """Sum of the first three numbers of a table row, or None if it has fewer."""
    runs = _RUN.findall(line)[:COLUMNS]
    if len(runs) < COLUMNS:
        return None
    return sum(_run_value(run) for run in runs)


def row_sums(lines: Iterable[str]) -> Iterator[int]:
    """Yield the sum of each row that holds three numbers; other rows are skipped."""
    for line in lines:
        total = row_sum(line)
        if total is not None:
            yield total


def write_row_sums(source: str | Path, target: str | Path) -> list[int]:
    """Write the row sums of the table at source to target, one per line."""
    with open(source) as src, open(target, "w") as dst:
        sums = list(row_sums(src))
        dst.writelines(f"{total}\n" for total in sums)
    return sums


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write the row sums of a 3-column table.")
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE)
    parser.add_argument("target", nargs="?", default=DEFAULT_TARGET)
    args = parser.parse_args(argv)

    try:
        write_row_sums(args.source, args.target)
    except OSError as exc:
        print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())