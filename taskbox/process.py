"""Start a daemon, or fork a child and report how it exited."""

from __future__ import annotations

import argparse
import os
import sys
import time
import traceback
from collections.abc import Callable, Sequence

DAEMON_SLEEP = 1000


def _flush_std() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass


def daemonize(workdir: str = "/") -> int:
    """Detach into a background daemon and return its pid.

    The calling process exits; the child changes to workdir, starts a new
    session and closes the standard streams. Raises OSError on failure.
    """
    _flush_std()
    if os.fork() > 0:
        os._exit(0)

    os.chdir(workdir)
    os.setsid()
    for fd in (2, 1, 0):
        os.close(fd)
    return os.getpid()


def spawn_and_wait(child: Callable[[], int | None]) -> int:
    """Run child in a forked process, wait for it and return its exit code.

    A child that returns None exits with 0 and one that raises exits with 1.
    A child killed by a signal gives the negated signal number.
    """
    _flush_std()
    pid = os.fork()
    if pid == 0:
        code = 1
        try:
            result = child()
            code = 0 if result is None else int(result)
        except SystemExit as exc:
            code = exc.code if isinstance(exc.code, int) else (0 if exc.code is None else 1)
        except BaseException:
            traceback.print_exc()
            code = 1
        finally:
            _flush_std()
            os._exit(code)
    _, status = os.waitpid(pid, 0)
    return os.waitstatus_to_exitcode(status)


def _interactive_child() -> int:
    print("CHILD:")
    print(f"pid = {os.getpid()}, ppid = {os.getppid()}")
    _flush_std()
    if sys.stdin.read(1) == "1":
        time.sleep(1)
        return 0
    time.sleep(3)
    return 10


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Process creation demos.")
    commands = parser.add_subparsers(dest="command", required=True)
    daemon_cmd = commands.add_parser("daemon", help="start a background daemon")
    daemon_cmd.add_argument("--workdir", default="/")
    commands.add_parser("fork", help="fork a child and report its exit code")
    args = parser.parse_args(argv)

    if args.command == "daemon":
        try:
            daemonize(args.workdir)
        except OSError as exc:
            print(f"errno {exc.errno}: {exc.strerror}", file=sys.stderr)
            return 1
        time.sleep(DAEMON_SLEEP)
        return 0

    print("Creating new process...")
    try:
        code = spawn_and_wait(_interactive_child)
    except OSError as exc:
        print(f"failed to create process: {exc.strerror}", file=sys.stderr)
        return 1

    print("PARENT:")
    print(f"pid = {os.getpid()}, ppid = {os.getppid()}")
    if code >= 0:
        if code == 0:
            print(f"child_exit_code(FAILED) = {code}", end="")
        else:
            print(f"child_exit_code = {code}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())