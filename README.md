# taskbox

A small collection of command-line and library utilities:

- **taskbox.geometry**: finds the point in a set whose total distance to the other points is smallest (`Point`, `distance`, `min_distance_point`). Points that occur more than once are not candidates; fewer than three points raise `ValueError`.
- **taskbox.brackets**: checks that `()`, `[]` and `{}` are balanced and properly nested (`check_brackets`, `bracket_status`, `BracketError`). `bracket_status` returns 0 for a balanced line, the 1-based position of the first wrong bracket, or -1 when closing brackets are missing.
- **taskbox.palindrome**: tests whether integers read the same both ways and counts them (`is_palindrome`, `count_palindromes`).
- **taskbox.numfile**: writes every number in the range 5–10 twice in a file of whitespace-separated integers (`parse_numbers`, `duplicate_in_range`, `duplicate_file`).
- **taskbox.textstats**: counts and sums integers written one per line with surrounding spaces, stopping at the first blank line (`count_and_sum`, `count_and_sum_file`).
- **taskbox.tablesums**: sums the three integer columns of each row of a delimited table and writes one sum per line (`row_sum`, `row_sums`, `write_row_sums`).
- **taskbox.procfs**: reads a procfs directory (default `/proc`): pids, parent pids, the path from a process up to pid 1, process names, counting processes by name, and counting a process together with its descendants (`list_pids`, `read_ppid`, `path_to_init`, `process_name`, `count_by_name`, `count_subtree`).
- **taskbox.process**: detaches into a background daemon, or runs a callable in a forked child and returns its exit code (`daemonize`, `spawn_and_wait`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line use

| Command | What it does |
| --- | --- |
| `taskbox-geometry [x y ...]` | Prints the point with the minimal sum of distances and that sum; uses a built-in set of four points when no coordinates are given. |
| `taskbox-brackets [text]` | Checks one line (from the argument or stdin, first 49 characters) and prints an error for a misplaced or missing bracket. |
| `taskbox-palindrome [n ...]` | Prints `count = N` for the palindromes among the numbers. |
| `taskbox-numfile [path]` | Rewrites the file (default `file39_test.txt`) with numbers from 5 to 10 duplicated. |
| `taskbox-textstats [path]` | Prints `sum = S, count = C` for the file (default `file_text44.txt`). |
| `taskbox-tablesums [source] [target]` | Writes row sums of `source` (default `file_text52.txt`) to `target` (default `res_file.txt`). |
| `taskbox-procfs [--proc-root DIR] ppid [pid]` | Prints the parent pid (of this process when no pid is given). |
| `taskbox-procfs [--proc-root DIR] path pid` | Prints each pid from `pid` up to pid 1, one per line. |
| `taskbox-procfs [--proc-root DIR] count [name]` | Prints how many processes have the given name (default `genenv`). |
| `taskbox-procfs [--proc-root DIR] subtree pid` | Prints `child_procs_count = N`, the process and all its descendants. |
| `taskbox-process daemon [--workdir DIR]` | Detaches into a daemon that sleeps in the background. |
| `taskbox-process fork` | Forks a child that reads one character from stdin and exits with 0 on `1`, otherwise 10; the parent prints the exit code. |

Run any command with `--help` to see its arguments.

## Library use

```python
from taskbox.brackets import bracket_status
from taskbox.palindrome import count_palindromes

bracket_status("a(b[c]{d})")       # 0 when the brackets are balanced
count_palindromes([11, 101, 123])  # 2
```

## Limitations

`taskbox.procfs` needs a Linux-style procfs layout, and `taskbox.process` needs a POSIX system with `fork`. The daemon started by `taskbox-process daemon` only sleeps; it does no other work and writes no pid file.