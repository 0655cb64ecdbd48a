"""Small arithmetic and number-theory judge problems."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Iterable, Iterator, Sequence

_ANAGRAMMATIC_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 31, 37, 71, 73, 79, 97,
    113, 131, 199, 311, 337, 373, 733, 919, 991,
)

_HOMEWORK = re.compile(r"(-?\d+)\s*([+-])\s*(-?\d+)\s*=\s*(\S+)")

_cycle_cache: dict[int, int] = {1: 1}


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def double_displacement(v: int, t: int) -> int:
    """Displacement after twice the time at the given velocity."""
    return 2 * v * t


def compare(a: int, b: int) -> str:
    """Relational operator between two integers."""
    if a < b:
        return "<"
    if a > b:
        return ">"
    return "="


def automatic_answer(n: int) -> int:
    """Tens digit of the fixed sequence of operations applied to n."""
    n = _cdiv(n * 567, 9)
    n = _cdiv((n + 7492) * 235, 47)
    n = _cdiv(n - 498, 10)
    return abs(n) % 10


def back_to_the_past() -> str:
    """The fixed answer line."""
    return "May 29, 2013 Wednesday"


def gcd_sum(n: int) -> int:
    """Sum of gcd(i, j) over all 1 <= i < j <= n."""
    return sum(math.gcd(i, j) for i in range(1, n) for j in range(i + 1, n + 1))


def isqrt(value: int) -> int:
    """Integer square root."""
    if value < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(value)


def warrior_rows(n: int) -> int:
    """Largest number of complete triangular rows from n warriors."""
    return (isqrt(8 * n + 1) - 1) // 2


def smallest_factor_number(n: int) -> int:
    """Smallest number of the form 2^i * 3^j that is at least n."""
    test = 1
    while test < n:
        test <<= 1
    best = test
    while test % 2 == 0:
        if test >= n:
            best = min(best, test)
            test >>= 1
        else:
            test *= 3
    if test >= n:
        best = min(best, test)
    return best


def anagrammatic_prime_after(n: int) -> int:
    """Smallest anagrammatic prime above n in n's decade, or 0."""
    if n < 10:
        limit = 4
    elif n < 100:
        limit = 13
    else:
        limit = 22
    answer = 0
    for prime in reversed(_ANAGRAMMATIC_PRIMES[:limit]):
        if prime <= n:
            break
        answer = prime
    return answer


def chessboard_distance(n: int) -> float:
    """Length of the shortest closed tour through the centres of an n x n board."""
    if n == 1:
        return 0.0
    return n * n + (n - 2) * (n - 2) * (math.sqrt(2) - 1)


def ant_position(n: int) -> tuple[int, int]:
    """Column and row of the ant after n seconds."""
    root = math.isqrt(n)
    if root * root != n:
        root += 1
    if n > root * root - root:
        x, y = root, root * root - n + 1
    else:
        x, y = n - (root - 1) * (root - 1), root
    if root % 2 == 1:
        x, y = y, x
    return x, y


def snail(height: int, up: int, down: int, fatigue: int) -> tuple[bool, int]:
    """Whether the snail escapes the well, and on which day it is decided."""
    progress = 0.0
    day = 1
    while True:
        distance = up * (1 - (day - 1) * (fatigue / 100.0))
        if distance > 0:
            progress += distance
            if progress > height:
                return True, day
        progress -= down
        if progress < 0:
            return False, day
        day += 1


def homework_correct(expression: str) -> bool:
    """Whether an expression like '3+4=7' is correct; '?' answers are wrong."""
    match = _HOMEWORK.search(expression)
    if match is None:
        raise ValueError(f"not an expression: {expression!r}")
    left, op, right, result = match.groups()
    if result == "?":
        return False
    value = int(left) + int(right) if op == "+" else int(left) - int(right)
    return value == int(result)


def is_jolly(numbers: Sequence[int]) -> bool:
    """Whether consecutive differences cover every value 1..n-1."""
    n = len(numbers)
    seen = {abs(b - a) for a, b in zip(numbers, numbers[1:])}
    return all(d in seen for d in range(1, n))


def cycle_length(n: int) -> int:
    """Number of terms in the 3n+1 sequence starting at n."""
    if n < 1:
        raise ValueError("cycle length is defined for positive integers")
    path = []
    while n not in _cycle_cache:
        path.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    length = _cycle_cache[n]
    for value in reversed(path):
        length += 1
        _cycle_cache[value] = length
    return _cycle_cache[path[0]] if path else length


def max_cycle_length(i: int, j: int) -> int:
    """Largest cycle length over the inclusive range between i and j."""
    return max(cycle_length(n) for n in range(min(i, j), max(i, j) + 1))


def modular_fibonacci(n: int, m: int) -> int:
    """The n-th Fibonacci number modulo 2**m."""
    mod = 2 ** m

    def mul(x: tuple[int, ...], y: tuple[int, ...]) -> tuple[int, ...]:
        a, b, c, d = x
        e, f, g, h = y
        return ((a * e + b * g) % mod, (a * f + b * h) % mod,
                (c * e + d * g) % mod, (c * f + d * h) % mod)

    def power(base: tuple[int, ...], exponent: int) -> tuple[int, ...]:
        if exponent == 1:
            return base
        half = power(mul(base, base), exponent // 2)
        return half if exponent % 2 == 0 else mul(base, half)

    if n < 2:
        return n % mod
    return power((1, 1, 1, 0), n - 1)[0]


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _until_zero(values: Iterable[int]) -> Iterator[int]:
    for value in values:
        if value == 0:
            return
        yield value


def _pairs(values: Iterator[int]) -> Iterator[tuple[int, int]]:
    for first in values:
        second = next(values, None)
        if second is None:
            return
        yield first, second


def _solve(problem: str, text: str) -> Iterator[str]:
    values = _ints(text) if problem not in ("11878", "13025") else iter(())
    if problem == "10071":
        for v, t in _pairs(values):
            yield str(double_displacement(v, t))
    elif problem == "11172":
        count = next(values, 0)
        for _ in range(count):
            yield compare(next(values), next(values))
    elif problem == "11547":
        count = next(values, 0)
        for _ in range(count):
            yield str(automatic_answer(next(values)))
    elif problem == "13025":
        yield back_to_the_past()
    elif problem == "11417":
        for n in _until_zero(values):
            yield str(gcd_sum(n))
    elif problem == "11614":
        count = next(values, 0)
        for _ in range(count):
            yield str(warrior_rows(next(values)))
    elif problem == "11621":
        for n in _until_zero(values):
            yield str(smallest_factor_number(n))
    elif problem == "897":
        for n in _until_zero(values):
            yield str(anagrammatic_prime_after(n))
    elif problem == "10751":
        count = next(values, 0)
        results = [f"{chessboard_distance(next(values)):.3f}" for _ in range(count)]
        yield "\n\n".join(results) if results else None  # type: ignore[misc]
    elif problem == "10161":
        for n in _until_zero(values):
            x, y = ant_position(n)
            yield f"{x} {y}"
    elif problem == "573":
        while True:
            try:
                height, up, down, fatigue = (next(values) for _ in range(4))
            except (StopIteration, RuntimeError):
                return
            if height == 0:
                return
            success, day = snail(height, up, down, fatigue)
            yield f"{'success' if success else 'failure'} on day {day}"
    elif problem == "11878":
        yield str(sum(homework_correct(m.group(0)) for m in _HOMEWORK.finditer(text)))
    elif problem == "10038":
        for n in values:
            numbers = [next(values) for _ in range(n)]
            yield "Jolly" if is_jolly(numbers) else "Not jolly"
    elif problem == "100":
        for i, j in _pairs(values):
            yield f"{i} {j} {max_cycle_length(i, j)}"
    elif problem == "10229":
        for n, m in _pairs(values):
            yield str(modular_fibonacci(n, m))
    else:
        raise ValueError(f"unknown problem: {problem}")


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    lines = [line for line in _solve(problem, text) if line is not None]
    return "".join(line + "\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve an arithmetic judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())