"""Largest product of a contiguous run of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

_END = -999999


def max_subsequence_product(numbers: Sequence[int]) -> int:
    """Largest product over all non-empty contiguous runs of numbers."""
    values = list(numbers)
    if not values:
        raise ValueError("at least one number is required")
    maximum = cur_max = cur_min = values[0]
    for value in values[1:]:
        if value < 0:
            cur_max, cur_min = cur_min, cur_max
        cur_max = max(cur_max * value, value)
        cur_min = min(cur_min * value, value)
        maximum = max(maximum, cur_max)
    return maximum


def _solve(text: str) -> Iterator[str]:
    tokens = iter(text.split())
    while True:
        numbers = []
        for token in tokens:
            value = int(token)
            if value == _END:
                break
            numbers.append(value)
        if not numbers:
            return
        yield str(max_subsequence_product(numbers))


def run(text: str) -> str:
    """Solve every case in text; each case ends with -999999."""
    return "".join(line + "\n" for line in _solve(text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Largest contiguous product.")
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())