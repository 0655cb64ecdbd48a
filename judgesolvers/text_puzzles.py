"""String-processing judge problems."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterator, Sequence

_WORD_LIMIT = 2 ** 32


def _fibonacci_indices() -> dict[int, int]:
    indices: dict[int, int] = {}
    prev, curr, index = 0, 1, 0
    while prev + curr < _WORD_LIMIT:
        indices.setdefault(prev + curr, index)
        index += 1
        prev, curr = curr, prev + curr
    return indices


_FIBONACCI = _fibonacci_indices()


def _repeated(sequence: str, length: int) -> Counter[str]:
    return Counter(sequence[i:i + length] for i in range(len(sequence) - length + 1))


def gattaca(sequence: str) -> tuple[str, int] | None:
    """Smallest longest repeated substring and its occurrence count, or None."""
    low, high = 0, len(sequence) - 1
    while low < high:
        mid = (low + high + 1) // 2
        if any(c >= 2 for c in _repeated(sequence, mid).values()):
            low = mid
        else:
            high = mid - 1
    if low == 0:
        return None
    counts = _repeated(sequence, low)
    best = min(sub for sub, c in counts.items() if c >= 2)
    return best, counts[best]


def buzzwords(line: str) -> list[int]:
    """Largest repeat counts for substrings of length 1, 2, ... while above one."""
    s = line.replace(" ", "")
    n = len(s)
    if n == 0:
        return []
    suffixes = sorted(range(n), key=lambda a: s[a:])
    lcp = [0]
    for prev, cur in zip(suffixes, suffixes[1:]):
        length = 0
        while cur + length < n and prev + length < n and s[cur + length] == s[prev + length]:
            length += 1
        lcp.append(length)
    counts = []
    for size in range(1, n):
        longest = current = 1
        for value in lcp:
            if value < size:
                current = 1
            else:
                current += 1
                longest = max(longest, current)
        if longest == 1:
            break
        counts.append(longest)
    return counts


def min_rotation(text: str) -> str:
    """Lexicographically smallest rotation of a circular sequence."""
    n = len(text)
    doubled = text + text
    best = 0
    i = 1
    while i < n:
        for j in range(n):
            if doubled[best + j] < doubled[i + j]:
                i += j
                break
            if doubled[best + j] > doubled[i + j]:
                best = i
                break
        i += 1
    return doubled[best:best + n]


def _digit(c: str) -> int:
    return ord(c) - ord("0") if "0" <= c <= "9" else ord(c) - ord("A") + 10


def _min_base(text: str) -> int:
    return max([2, *(_digit(c) + 1 for c in text)])


def _value(text: str, base: int) -> int:
    result = 0
    for c in text:
        result = result * base + _digit(c)
    return result


def match_bases(first: str, second: str) -> tuple[int, int] | None:
    """Smallest bases 2..36 in which the two numerals are equal, or None."""
    for base1 in range(_min_base(first), 37):
        value = _value(first, base1)
        for base2 in range(_min_base(second), 37):
            if value == _value(second, base2):
                return base1, base2
    return None


def da_vinci_decode(numbers: Sequence[int], text: str) -> str:
    """Place the capital letters of text at the Fibonacci indices of numbers."""
    try:
        indices = [_FIBONACCI[n] for n in numbers]
    except KeyError as exc:
        raise ValueError(f"not a Fibonacci number: {exc.args[0]}") from None
    output = [" "] * (max(indices, default=-1) + 1)
    letters = (c for c in text.split("\n", 1)[0] if c.isalpha() and c.isupper())
    for index, letter in zip(indices, letters):
        output[index] = letter
    return "".join(output)


def _da_vinci_cases(text: str) -> Iterator[str]:
    lines = iter(text.split("\n"))
    pending: list[str] = []

    def next_int() -> int:
        while not pending:
            line = next(lines, None)
            if line is None:
                raise ValueError("unexpected end of input")
            pending.extend(line.split())
        return int(pending.pop(0))

    for _ in range(next_int()):
        n = next_int()
        numbers = [next_int() for _ in range(n)]
        pending.clear()
        yield da_vinci_decode(numbers, next(lines, ""))


def _solve(problem: str, text: str) -> Iterator[str]:
    if problem in ("11512", "1584"):
        tokens = iter(text.split())
        count = int(next(tokens, "0"))
        for _ in range(count):
            token = next(tokens)
            if problem == "1584":
                yield min_rotation(token)
                continue
            result = gattaca(token)
            yield "No repetitions found!" if result is None else f"{result[0]} {result[1]}"
    elif problem == "11855":
        for line in text.splitlines():
            if not line.replace(" ", ""):
                continue
            yield from map(str, buzzwords(line))
            yield ""
    elif problem == "343":
        tokens = text.split()
        for first, second in zip(tokens[::2], tokens[1::2]):
            bases = match_bases(first, second)
            if bases is None:
                yield f"{first} is not equal to {second} in any base 2..36"
            else:
                yield f"{first} (base {bases[0]}) = {second} (base {bases[1]})"
    elif problem == "11385":
        yield from _da_vinci_cases(text)
    else:
        raise ValueError(f"unknown problem: {problem}")


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    return "".join(line + "\n" for line in _solve(problem, text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a string judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())