"""Planar geometry judge problems."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from itertools import islice


def hidden_lights(lights: Sequence[tuple[int, int, int]]) -> list[tuple[int, int]]:
    """(x, y) of lights hidden behind nearer, taller lights on the same ray, sorted."""
    entries = sorted(
        ((math.atan2(y, x), x * x + y * y, x, y, z) for x, y, z in lights),
        key=lambda e: (e[0], e[1]),
    )
    hidden: list[tuple[int, int]] = []
    if not entries:
        return hidden
    max_height = entries[0][4]
    for prev, cur in zip(entries, entries[1:]):
        if cur[0] == prev[0] and cur[4] <= max_height:
            hidden.append((cur[2], cur[3]))
        else:
            max_height = cur[4]
    return sorted(hidden)


def is_symmetric(points: Sequence[tuple[int, int]]) -> bool:
    """Whether the points are mirror-symmetric about a vertical line."""
    if not points:
        return True
    xs = [x for x, _ in points]
    mid = max(xs) + min(xs)
    ordered = sorted(points, key=lambda p: (p[0], -p[1] if 2 * p[0] < mid else p[1]))
    i, j = 0, len(ordered) - 1
    while i <= j:
        (xi, yi), (xj, yj) = ordered[i], ordered[j]
        if xi + xj != mid:
            return False
        if xi != xj and yi != yj:
            return False
        i += 1
        j -= 1
    return True


def _read(values: Iterator[int], count: int) -> list[int]:
    items = list(islice(values, count))
    if len(items) != count:
        raise ValueError("unexpected end of input")
    return items


def _solve(problem: str, text: str) -> Iterator[str]:
    values = (int(token) for token in text.split())
    if problem == "10927":
        dataset = 1
        while (n := next(values, 0)) != 0:
            flat = _read(values, 3 * n)
            hidden = hidden_lights(list(zip(flat[::3], flat[1::3], flat[2::3])))
            yield f"Data set {dataset}:"
            if not hidden:
                yield "All the lights are visible."
            else:
                yield "Some lights are not visible:"
                for k, (x, y) in enumerate(hidden, 1):
                    yield f"x = {x}, y = {y}{'.' if k == len(hidden) else ';'}"
            dataset += 1
    elif problem == "1595":
        for _ in range(next(values, 0)):
            n = _read(values, 1)[0]
            flat = _read(values, 2 * n)
            yield "YES" if is_symmetric(list(zip(flat[::2], flat[1::2]))) else "NO"
    else:
        raise ValueError(f"unknown problem: {problem}")


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    return "".join(line + "\n" for line in _solve(problem, text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a geometry judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())