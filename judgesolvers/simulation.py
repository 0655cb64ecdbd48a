"""Judge problems solved by direct simulation or greedy search."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from itertools import islice

_COW_PERIOD = 2 * 3 * 2 * 5 * 7 * 2 * 3


def cargo_time(capacity: int, queue_limit: int,
               stations: Sequence[Sequence[int]]) -> int:
    """Minutes the carrier needs to deliver every cargo to its 1-based station."""
    queues = [deque(s) for s in stations]
    n = len(queues)
    if any(not 1 <= cargo <= n for q in queues for cargo in q):
        raise ValueError("cargo destination outside the stations")
    if not any(queues):
        return 0
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    carrier: list[int] = []
    pos = 0
    time = 0
    while any(queues) or carrier:
        queue = queues[pos]
        while carrier:
            if carrier[-1] == pos + 1:
                carrier.pop()
            elif len(queue) < queue_limit:
                queue.append(carrier.pop())
            else:
                break
            time += 1
        while queue and len(carrier) < capacity:
            carrier.append(queue.popleft())
            time += 1
        time += 2
        pos = (pos + 1) % n
    return time - 2


def surviving_cows(cycles: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Cows alive once no more are eaten, and the day the last one was eaten."""
    herd = [list(c) for c in cycles]
    alive = [i for i, c in enumerate(herd) if c]
    remaining = len(herd)
    last_day = 0
    count = day = 0
    while count < _COW_PERIOD:
        lowest = math.inf
        victim: int | None = None
        for index in alive:
            milk = herd[index][day % len(herd[index])]
            if milk == lowest:
                victim = None
            if milk < lowest:
                victim = index
                lowest = milk
        count += 1
        day += 1
        if victim is not None:
            alive.remove(victim)
            count = 0
            remaining -= 1
            last_day = day
    return remaining, last_day


def set_stack(operations: Sequence[str]) -> list[int]:
    """Size of the top set after each PUSH, DUP, UNION, INTERSECT or ADD."""
    stack: list[frozenset[int]] = []
    ids: dict[frozenset[int], int] = {}
    sizes = []
    for op in operations:
        if op == "PUSH":
            stack.append(frozenset())
        elif op == "DUP":
            if not stack:
                raise ValueError("DUP on an empty stack")
            stack.append(stack[-1])
        elif op in ("UNION", "INTERSECT", "ADD"):
            if len(stack) < 2:
                raise ValueError(f"{op} needs two sets on the stack")
            first = stack.pop()
            second = stack.pop()
            if op == "UNION":
                stack.append(first | second)
            elif op == "INTERSECT":
                stack.append(first & second)
            else:
                stack.append(second | {ids.setdefault(first, len(ids))})
        else:
            raise ValueError(f"unknown operation: {op}")
        sizes.append(len(stack[-1]))
    return sizes


def exhibition_shares(collections: Sequence[Sequence[int]]) -> list[float]:
    """Percentage of all unique stamps owned by each friend."""
    owned = [set(c) for c in collections]
    holders: dict[int, int] = {}
    for stamps in owned:
        for stamp in stamps:
            holders[stamp] = holders.get(stamp, 0) + 1
    uniques = [sum(1 for s in stamps if holders[s] == 1) for stamps in owned]
    total = sum(uniques)
    if total == 0:
        return [math.nan] * len(owned)
    return [100.0 * u / total for u in uniques]


def exact_sum(prices: Sequence[int], money: int) -> tuple[int, int] | None:
    """Two prices summing to at most money, closest to it and to each other."""
    ordered = sorted(prices)
    start, end = 0, len(ordered) - 1
    best: tuple[int, int] | None = None
    max_price = 0
    while start < end:
        price = ordered[start] + ordered[end]
        if price <= money:
            if price >= max_price:
                best = (ordered[start], ordered[end])
                max_price = price
            start += 1
        else:
            end -= 1
    return best


def copy_books(pages: Sequence[int], scribers: int) -> list[list[int]]:
    """Split books among scribers minimising the largest share, early ones light."""
    books = list(pages)
    m = len(books)
    if m == 0:
        raise ValueError("there are no books")
    if not 1 <= scribers <= m:
        raise ValueError("scribers must be between 1 and the number of books")

    def fits(limit: int) -> bool:
        load = books[-1]
        people = scribers - 1
        for page in reversed(books[:-1]):
            if load + page <= limit:
                load += page
            else:
                people -= 1
                if people < 0:
                    return False
                load = page
        return True

    left, right = max(books), max(books) * m
    while left < right:
        mid = (left + right) // 2
        if fits(mid):
            right = mid
        else:
            left = mid + 1

    cuts: set[int] = set()
    load = books[-1]
    people = scribers - 1
    for i in range(m - 2, -1, -1):
        if load + books[i] <= left and i >= people:
            load += books[i]
        else:
            if people >= 1:
                cuts.add(i)
            people -= 1
            if people < 0:
                break
            load = books[i]

    groups: list[list[int]] = []
    current: list[int] = []
    for i, page in enumerate(books):
        current.append(page)
        if i in cuts:
            groups.append(current)
            current = []
    groups.append(current)
    return groups


def _read(values: Iterator[int], count: int) -> list[int]:
    items = list(islice(values, count))
    if len(items) != count:
        raise ValueError("unexpected end of input")
    return items


def _solve(problem: str, text: str) -> Iterator[str]:
    if problem == "12096":
        tokens = iter(text.split())
        for _ in range(int(next(tokens, "0"))):
            n = int(next(tokens))
            ops = list(islice(tokens, n))
            yield from map(str, set_stack(ops))
            yield "***"
        return
    values = (int(token) for token in text.split())
    if problem == "10172":
        for _ in range(next(values, 0)):
            n, capacity, limit = _read(values, 3)
            stations = [_read(values, _read(values, 1)[0]) for _ in range(n)]
            yield str(cargo_time(capacity, limit, stations))
    elif problem == "10273":
        for _ in range(next(values, 0)):
            n = _read(values, 1)[0]
            cows = [_read(values, _read(values, 1)[0]) for _ in range(n)]
            alive, day = surviving_cows(cows)
            yield f"{alive} {day}"
    elif problem == "11348":
        for case in range(1, next(values, 0) + 1):
            n = _read(values, 1)[0]
            friends = [_read(values, _read(values, 1)[0]) for _ in range(n)]
            shares = "".join(f" {share:.6f}%" for share in exhibition_shares(friends))
            yield f"Case {case}:{shares}"
    elif problem == "11057":
        for n in values:
            prices = _read(values, n)
            money = _read(values, 1)[0]
            first, second = exact_sum(prices, money) or (0, 0)
            yield f"Peter should buy books whose prices are {first} and {second}."
            yield ""
    elif problem == "714":
        for _ in range(next(values, 0)):
            m, k = _read(values, 2)
            groups = copy_books(_read(values, m), k)
            yield " / ".join(" ".join(map(str, g)) for g in groups)
    else:
        raise ValueError(f"unknown problem: {problem}")


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    return "".join(line + "\n" for line in _solve(problem, text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a simulation judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())