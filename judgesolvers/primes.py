"""Judge problems built on prime sieves and fractions."""

from __future__ import annotations

import argparse
import math
import sys
from bisect import bisect_right
from collections.abc import Iterator, Sequence
from fractions import Fraction
from functools import lru_cache

_LIMIT = 1_000_000
_GAP_LIMIT = int((math.sqrt(1299709) + 1) ** 2)
_LONG_MAX = 2 ** 63 - 1
_MOD = 1_000_000


@lru_cache(maxsize=None)
def _sieve(limit: int) -> tuple[bool, ...]:
    flags = bytearray([1]) * limit
    flags[: min(2, limit)] = bytes(min(2, limit))
    for i in range(2, math.isqrt(max(limit - 1, 0)) + 1):
        if flags[i]:
            flags[i * i::i] = bytes(len(range(i * i, limit, i)))
    return tuple(bool(f) for f in flags)


def prime_sieve(limit: int) -> list[bool]:
    """Primality flags for 0..limit-1."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return list(_sieve(limit))


@lru_cache(maxsize=None)
def _primes_below(limit: int) -> tuple[int, ...]:
    return tuple(i for i, flag in enumerate(_sieve(limit)) if flag)


def _is_prime(n: int) -> bool:
    flags = _sieve(_LIMIT)
    return 0 <= n < _LIMIT and flags[n]


def _gap_ends_run(n: int, gap: int) -> bool:
    """Whether n + gap is the prime right after (or before) n."""
    if not _is_prime(n + gap):
        return False
    step = 1 if gap > 0 else -1
    return not any(_is_prime(c) for c in range(n + step, n + gap, step))


def _run(last: int, gap: int, length: int) -> list[int] | None:
    if _gap_ends_run(last, gap):
        return None
    first = last - gap * (length - 1)
    if _gap_ends_run(first, -gap):
        return None
    return [first + gap * k for k in range(length)]


def determinate_prime_runs(left: int, right: int) -> list[list[int]]:
    """Maximal runs of at least three equally spaced consecutive primes in range."""
    if left > right:
        left, right = right, left
    runs: list[list[int]] = []
    gap = last = consecutive = 0
    for n in range(max(left, 0), min(right, _LIMIT - 1) + 1):
        if not _is_prime(n):
            continue
        if last:
            current = n - last
            if current == gap:
                consecutive += 1
            else:
                if consecutive > 0 and (run := _run(last, gap, consecutive + 2)):
                    runs.append(run)
                gap, consecutive = current, 0
        last = n
    if consecutive > 0 and (run := _run(last, gap, consecutive + 2)):
        runs.append(run)
    return runs


@lru_cache(maxsize=None)
def _prime_powers() -> tuple[tuple[int, ...], tuple[int, ...]]:
    pairs = []
    for p in _primes_below(_LIMIT):
        power = p
        while power < _LIMIT:
            pairs.append((power, p))
            power *= p
    pairs.sort()
    return tuple(n for n, _ in pairs), tuple(p for _, p in pairs)


def lcm_last_digit(n: int) -> int:
    """Last non-zero digit of lcm(1..n)."""
    numbers, bases = _prime_powers()
    result = 1
    for base in bases[: bisect_right(numbers, n)]:
        result = result // 2 if base == 5 else result * base
        result %= _MOD
    return result % 10


def prime_gap(n: int) -> int:
    """Length of the prime gap containing n, or 0 if n is prime."""
    if not 0 <= n < _GAP_LIMIT:
        raise ValueError(f"n must be below {_GAP_LIMIT}")
    if n <= 1:
        return 0
    flags = _sieve(_GAP_LIMIT)
    left = right = n
    while not flags[left]:
        left -= 1
    while not flags[right]:
        right += 1
    return right - left


def goldbach(n: int) -> tuple[int, int] | None:
    """Primes a <= b with a + b == n and b - a largest, or None."""
    primes = _primes_below(_LIMIT)
    start, end = 0, bisect_right(primes, n) - 1
    while start <= end:
        total = primes[start] + primes[end]
        if total == n:
            return primes[start], primes[end]
        if total < n:
            start += 1
        else:
            end -= 1
    return None


def largest_perfect_power(n: int) -> int:
    """Largest p such that n is a perfect p-th power."""
    negative = n < 0
    n = abs(n)
    largest = 1
    p = 2
    while True:
        root = round(float(n) ** (1.0 / p))
        if root ** p == n and (not negative or p % 2 == 1):
            largest = p
        if root < 2:
            return largest
        p += 1


def dead_fraction(text: str) -> tuple[int, int]:
    """Fraction with the smallest denominator for a '0.ddd...' decimal."""
    decimals = text[2:-3]
    best = Fraction(1, _LONG_MAX)
    for i in reversed(range(len(decimals))):
        repeating, other = decimals[i:], decimals[:i]
        denominator = 10 ** len(other) if other else 1
        value = Fraction(int(other), denominator) if other else Fraction(0)
        value += Fraction(int(repeating), denominator * (10 ** len(repeating) - 1))
        if value.denominator < best.denominator:
            best = value
    return best.numerator, best.denominator


def _solve(problem: str, text: str) -> Iterator[str]:
    tokens = iter(text.split())
    if problem == "10555":
        for token in tokens:
            if token == "0":
                return
            num, den = dead_fraction(token)
            yield f"{num}/{den}"
        return
    values = (int(t) for t in tokens)
    if problem == "10650":
        for left in values:
            right = next(values, 0)
            if left == 0 and right == 0:
                return
            for run in determinate_prime_runs(left, right):
                yield " ".join(map(str, run))
        return
    handlers = {"10680": lcm_last_digit, "1644": prime_gap,
                "10622": largest_perfect_power}
    if problem == "543":
        for n in values:
            if n == 0:
                return
            pair = goldbach(n)
            if pair:
                yield f"{n} = {pair[0]} + {pair[1]}"
        return
    if problem not in handlers:
        raise ValueError(f"unknown problem: {problem}")
    for n in values:
        if n == 0:
            return
        yield str(handlers[problem](n))


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    return "".join(line + "\n" for line in _solve(problem, text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a prime-number judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())