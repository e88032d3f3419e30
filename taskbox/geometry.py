"""Find the point of a set whose summed distance to the other points is smallest."""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_POINTS = ((10.0, 5.0), (0.0, 0.0), (100.0, 14.0), (-15.0, 0.0))


@dataclass(frozen=True)
class Point:
    """A point on the plane."""

    x: float
    y: float


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def min_distance_point(points: Iterable[Point]) -> tuple[Point, float] | None:
    """Return the point with the smallest sum of distances to the others, and that sum.

    Points that occur more than once are not candidates. Returns None when
    every point has a duplicate. Raises ValueError for fewer than three points.
    """
    points = list(points)
    if len(points) <= 2:
        raise ValueError("Number of points must be greater than 2.")

    occurrences = Counter(points)
    best: tuple[Point, float] | None = None
    for candidate in points:
        if occurrences[candidate] > 1:
            continue
        # The candidate is unique, so its distance to itself is the only zero term.
        total = sum(distance(candidate, other) for other in points)
        if best is None or total < best[1]:
            best = (candidate, total)
    return best


def _parse_points(values: Sequence[float]) -> list[Point]:
    if len(values) % 2:
        raise ValueError("coordinates must come in x y pairs")
    pairs = zip(values[::2], values[1::2])
    return [Point(x, y) for x, y in pairs]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the point with the minimal sum of distances to the others."
    )
    parser.add_argument("coords", nargs="*", type=float, help="x y pairs")
    args = parser.parse_args(argv)

    try:
        if args.coords:
            points = _parse_points(args.coords)
        else:
            points = [Point(x, y) for x, y in DEFAULT_POINTS]
        result = min_distance_point(points)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    if result is None:
        print("All points are identical.")
        return 0

    point, total = result
    print(f"Minimal sum of distances = {total:.2f}")
    print(f"Point coordinates: x = {point.x:.2f}, y = {point.y:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())