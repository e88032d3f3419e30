"""Check that round, square and curly brackets in a line are balanced."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

MAX_LINE = 49

_OPENERS = "([{"
_CLOSERS = {")": "(", "]": "[", "}": "{"}


class BracketError(ValueError):
    """A misplaced bracket; position is 1-based, or -1 when closers are missing."""

    def __init__(self, position: int, message: str) -> None:
        super().__init__(message)
        self.position = position
        self.message = message

    def __str__(self) -> str:
        if self.position == -1:
            return f"Error: {self.message}"
        return f"Error: {self.message} (err bracket position: {self.position})"


def check_brackets(text: str) -> None:
    """Raise BracketError at the first wrong bracket in text, or if closers are missing."""
    levels = dict.fromkeys(_OPENERS, 0)
    last_open: str | None = None

    for position, char in enumerate(text, start=1):
        if char in levels:
            levels[char] += 1
            last_open = char
        elif char in _CLOSERS:
            opener = _CLOSERS[char]
            if not levels[opener]:
                raise BracketError(position, f"Missed '{opener}'")
            others_open = any(level for kind, level in levels.items() if kind != opener)
            if others_open and last_open != opener:
                raise BracketError(position, "Missed bracket")
            levels[opener] -= 1

    if any(levels.values()):
        raise BracketError(-1, "Missed close bracket")


def bracket_status(text: str) -> int:
    """Return 0 if balanced, the position of the first wrong bracket, or -1."""
    try:
        check_brackets(text)
    except BracketError as exc:
        return exc.position
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check bracket balance in a line.")
    parser.add_argument("text", nargs="?", help="line to check (default: read stdin)")
    args = parser.parse_args(argv)

    if args.text is not None:
        text = args.text
    else:
        text = sys.stdin.readline()
        if not text:
            print("End of input reached", file=sys.stderr)
    text = text[:MAX_LINE]

    try:
        check_brackets(text)
    except BracketError as exc:
        if exc.position == -1:
            print(f"{exc}\n-1")
            return 0
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())