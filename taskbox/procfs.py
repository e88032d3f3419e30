"""Inspect the process tree through a procfs directory."""

from __future__ import annotations

import argparse
import os
import sys
from collections import defaultdict, deque
from collections.abc import Iterator, Sequence
from pathlib import Path

PROC_ROOT = "/proc"
INIT_PID = 1
DEFAULT_NAME = "genenv"


def list_pids(proc_root: str | Path = PROC_ROOT) -> list[int]:
    """Return, in ascending order, the pids that have a directory under proc_root."""
    return sorted(
        int(entry.name)
        for entry in Path(proc_root).iterdir()
        if entry.name[:1].isdigit() and entry.name.isdigit()
    )


def read_ppid(pid: int, proc_root: str | Path = PROC_ROOT) -> int:
    """Return the parent pid recorded in the status file of pid.

    Raises OSError if the status file cannot be read and ValueError if it
    has no PPid line.
    """
    status = Path(proc_root) / str(pid) / "status"
    with open(status) as handle:
        for line in handle:
            if line.startswith("PPid:"):
                digits = "".join(ch for ch in line if ch.isdigit())
                return int(digits) if digits else 0
    raise ValueError(f"{status}: no PPid line")


def _walk_to_init(pid: int, proc_root: str | Path) -> Iterator[int]:
    seen = {pid}
    yield pid
    current = pid
    while current != INIT_PID:
        current = read_ppid(current, proc_root)
        if current in seen:
            raise ValueError(f"cycle in process tree at pid {current}")
        seen.add(current)
        yield current


def path_to_init(pid: int, proc_root: str | Path = PROC_ROOT) -> list[int]:
    """Return the pids from pid up through its ancestors to pid 1, both ends included."""
    return list(_walk_to_init(pid, proc_root))


def process_name(pid: int, proc_root: str | Path = PROC_ROOT) -> str:
    """Return the command name of pid, as given in parentheses in its stat file."""
    text = (Path(proc_root) / str(pid) / "stat").read_text()
    start = text.find("(")
    end = text.rfind(")")
    if start == -1 or end < start:
        raise ValueError(f"malformed stat file for pid {pid}")
    return text[start + 1 : end]


def count_by_name(name: str, proc_root: str | Path = PROC_ROOT) -> int:
    """Number of processes whose command name is name."""
    count = 0
    for pid in list_pids(proc_root):
        try:
            if process_name(pid, proc_root) == name:
                count += 1
        except FileNotFoundError:
            continue  # the process exited while the table was being read
    return count


def count_subtree(pid: int, proc_root: str | Path = PROC_ROOT) -> int:
    """Number of processes in the subtree rooted at pid, pid itself included."""
    children: defaultdict[int, list[int]] = defaultdict(list)
    for candidate in list_pids(proc_root):
        try:
            parent = read_ppid(candidate, proc_root)
        except FileNotFoundError:
            continue
        children[parent].append(candidate)

    count = 1
    visited = {pid}
    queue = deque([pid])
    while queue:
        for child in children.get(queue.popleft(), ()):
            if child not in visited:
                visited.add(child)
                count += 1
                queue.append(child)
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query the process tree.")
    parser.add_argument("--proc-root", default=PROC_ROOT)
    commands = parser.add_subparsers(dest="command", required=True)

    ppid_cmd = commands.add_parser("ppid", help="print the parent pid of a process")
    ppid_cmd.add_argument("pid", nargs="?", type=int, default=None)

    path_cmd = commands.add_parser("path", help="print the path from a pid to init")
    path_cmd.add_argument("pid", type=int)

    count_cmd = commands.add_parser("count", help="count processes with a given name")
    count_cmd.add_argument("name", nargs="?", default=DEFAULT_NAME)

    subtree_cmd = commands.add_parser("subtree", help="count processes in a subtree")
    subtree_cmd.add_argument("pid", type=int)

    args = parser.parse_args(argv)
    root = args.proc_root

    if args.command == "ppid":
        pid = os.getpid() if args.pid is None else args.pid
        try:
            print(read_ppid(pid, root))
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            return 1
        return 0

    if args.command == "path":
        try:
            for pid in _walk_to_init(args.pid, root):
                print(pid)
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            print("failed")
        return 0

    if args.command == "count":
        try:
            print(count_by_name(args.name, root))
        except OSError as exc:
            print(exc, file=sys.stderr)
            return 1
        return 0

    try:
        total = count_subtree(args.pid, root)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        print("fail")
        return 1
    print(f"child_procs_count = {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())