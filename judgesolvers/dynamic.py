"""Judge problems solved with dynamic programming."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from functools import lru_cache
from itertools import islice

_STATES = ("NNN", "NNY", "NYN", "NYY", "YNN", "YNY", "YYN", "YYY")
_BITSET_MASK = (1 << 128) - 1
_CENTRE = 64
_INT_MAX = 2 ** 31 - 1
_COLOURS = 9


def lcs_length(a: str, b: str) -> int:
    """Length of the longest common subsequence of a and b."""
    if not a or not b:
        return 0
    previous = [0] * (len(b) + 1)
    for ca in a:
        current = [0]
        for j, cb in enumerate(b):
            if ca == cb:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def beeper_tour(start: tuple[int, int], beepers: Sequence[tuple[int, int]]) -> int:
    """Shortest Manhattan tour from start through every beeper and back."""
    points = [tuple(start), *(tuple(b) for b in beepers)]
    dist = [[abs(px - qx) + abs(py - qy) for qx, qy in points] for px, py in points]

    @lru_cache(maxsize=None)
    def tour(mask: int, here: int) -> int:
        if mask == 0:
            return dist[here][0]
        best = math.inf
        remaining = mask
        while remaining:
            bit = remaining & -remaining
            nxt = bit.bit_length()
            best = min(best, dist[here][nxt] + tour(mask ^ bit, nxt))
            remaining ^= bit
        return int(best)

    return tour((1 << (len(points) - 1)) - 1, 0)


def _choose(pref: Sequence[int], candidates: Sequence[int]) -> int:
    first, second, third = candidates
    c1, c2, c3 = pref[first], pref[second], pref[third]
    if c1 < c2:
        return first if c1 < c3 else third
    return second if c2 < c3 else third


def uxuhul_vote(preferences: Sequence[Sequence[int]]) -> str:
    """Outcome of the three-issue vote; voters listed in voting order."""
    prefs = [tuple(p) for p in preferences]
    if not prefs:
        raise ValueError("at least one voter is required")
    if any(len(p) != 8 for p in prefs):
        raise ValueError("each voter ranks exactly 8 outcomes")
    outcome = list(range(8))
    for pref in reversed(prefs):
        outcome = [
            _choose(pref, (outcome[s ^ 1], outcome[s ^ 2], outcome[s ^ 4]))
            for s in range(8)
        ]
    return _STATES[outcome[0]]


Matrix = list[list["int | None"]]


def _max_plus(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return [
        [
            max((x + y for x, y in zip(row, col) if x is not None and y is not None),
                default=None)
            for col in columns
        ]
        for row in a
    ]


def travelling_profit(profits: Sequence[Sequence[int]], start: int,
                      ends: Sequence[int], trips: int) -> int:
    """Best profit of exactly `trips` legs from start to one of ends, at least 0."""
    matrix: Matrix = [[p if p != 0 else None for p in row] for row in profits]
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("profit matrix must be square")
    if trips < 0:
        raise ValueError("trips must not be negative")
    if trips == 0:
        return 0
    result: Matrix | None = None
    base = matrix
    while trips:
        if trips & 1:
            result = base if result is None else _max_plus(result, base)
        trips >>= 1
        if trips:
            base = _max_plus(base, base)
    assert result is not None
    row = result[start - 1]
    best = max((row[e - 1] for e in ends if row[e - 1] is not None), default=None)
    return max(best, 0) if best is not None else 0


def box_stack_height(boxes: Sequence[tuple[int, int]]) -> int:
    """Tallest stack of (weight, load) boxes, kept in order from bottom to top."""
    boxes = list(boxes)
    loads: list[float] = [math.inf] + [-1] * (len(boxes) + 1)
    top = 0
    for weight, load in boxes:
        j = top + 1
        while loads[j] < load:
            loads[j] = max(min(loads[j - 1] - weight, load), loads[j])
            j -= 1
        if loads[top + 1] != -1:
            top += 1
    return top


def _cuts(weights: Sequence[int], offset: int, depth: int,
          max_cuts: int) -> list[int | None]:
    weight = weights[offset]
    if depth == 0:
        return [weight]
    size = (1 << depth) - 1
    left = _cuts(weights, offset + 1, depth - 1, max_cuts)
    right = _cuts(weights, offset + 1 + size, depth - 1, max_cuts)
    cuts: list[int | None] = [None] * min(len(left) * 2, max_cuts)
    cuts[0] = weight
    for i, lv in enumerate(left):
        for j, rv in enumerate(right):
            k = i + j + 1
            if k < max_cuts and lv is not None and rv is not None:
                total = lv + rv
                current = cuts[k]
                if current is None or total > current:
                    cuts[k] = total
    return cuts


def optimal_cut(weights: Sequence[int], height: int, max_cuts: int) -> int:
    """Best weight of a cut of at most max_cuts nodes through a full binary tree."""
    weights = list(weights)
    if height < 0:
        raise ValueError("height must not be negative")
    if len(weights) != (1 << (height + 1)) - 1:
        raise ValueError("weights do not fill a tree of that height")
    if max_cuts < 1:
        raise ValueError("max_cuts must be at least 1")
    return max(v for v in _cuts(weights, 0, height, max_cuts) if v is not None)


def can_divide(counts: Sequence[int]) -> bool:
    """Whether marbles valued 1..6 in these counts split into equal halves."""
    counts = list(counts)
    if len(counts) != 6:
        raise ValueError("exactly six counts are required")
    if any(c < 0 for c in counts):
        raise ValueError("counts must not be negative")
    states = 1 << _CENTRE
    for value in range(1, 7):
        c = counts[value - 1]
        if c > 0:
            if value <= 3:
                counts[2 * value - 1] += (c - 1) // 2
                c = (c - 1) % 2 + 1
            else:
                c = c % 2 + 2 * min(c // 2, 7)
        for _ in range(c):
            states = ((states << value) | (states >> value)) & _BITSET_MASK
    return bool((states >> _CENTRE) & 1)


def arborescence_cost(children: Sequence[Sequence[int]]) -> int:
    """Least colour sum (colours 1..9) with every node unlike its children."""
    kids = [list(c) for c in children]
    if not kids:
        raise ValueError("the tree has no nodes")
    parents = {child: node for node, cs in enumerate(kids) for child in cs}
    root = 0
    seen = {root}
    while root in parents:
        root = parents[root]
        if root in seen:
            raise ValueError("the tree contains a cycle")
        seen.add(root)

    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(kids[node])

    best: dict[int, tuple[int, int, int]] = {}
    for node in reversed(order):
        minimum, index, second = _INT_MAX, 0, 0
        for colour in range(_COLOURS):
            total = colour + 1
            for child in kids[node]:
                c_min, c_index, c_second = best[child]
                total += c_second if colour == c_index else c_min
            if minimum >= total:
                index, second, minimum = colour, minimum, total
            elif second > total:
                second = total
        best[node] = (minimum, index, second)
    return best[root][0]


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _read(values: Iterator[int], count: int) -> list[int]:
    items = list(islice(values, count))
    if len(items) != count:
        raise ValueError("unexpected end of input")
    return items


def _arborescence_cases(text: str) -> Iterator[list[list[int]]]:
    lines = (line for line in text.splitlines() if line.strip())
    for header in lines:
        n = int(header)
        children: list[list[int]] = [[] for _ in range(n)]
        for _ in range(n):
            line = next(lines, None)
            if line is None:
                raise ValueError("unexpected end of input")
            head, _, rest = line.partition(":")
            children[int(head)] = [int(t) for t in rest.split()]
        if n:
            yield children


def _solve(problem: str, text: str) -> Iterator[str]:
    values = _ints(text) if problem not in ("10405", "11307") else iter(())
    if problem == "10405":
        lines = text.splitlines()
        for first, second in zip(lines[::2], lines[1::2]):
            yield str(lcs_length(first, second))
    elif problem == "10496":
        for _ in range(next(values, 0)):
            _read(values, 2)
            x0, y0, n = _read(values, 3)
            coords = _read(values, 2 * n)
            beepers = list(zip(coords[::2], coords[1::2]))
            yield f"The shortest path has length {beeper_tour((x0, y0), beepers)}"
    elif problem == "10654":
        for _ in range(next(values, 0)):
            m = _read(values, 1)[0]
            prefs = [_read(values, 8) for _ in range(m)]
            yield uxuhul_vote(prefs)
    elif problem == "10702":
        while (c := next(values, None)) is not None:
            s, e, t = _read(values, 3)
            if c + s + e + t == 0:
                return
            flat = _read(values, c * c)
            matrix = [flat[i * c:(i + 1) * c] for i in range(c)]
            ends = _read(values, e)
            yield str(travelling_profit(matrix, s, ends, t))
    elif problem == "11003":
        while (n := next(values, 0)) != 0:
            flat = _read(values, 2 * n)
            yield str(box_stack_height(list(zip(flat[::2], flat[1::2]))))
    elif problem == "11782":
        while (h := next(values, None)) is not None:
            k = _read(values, 1)[0]
            if h == -1:
                return
            weights = _read(values, (1 << (h + 1)) - 1)
            yield str(optimal_cut(weights, h, k))
    elif problem == "711":
        collection = 1
        while True:
            counts = list(islice(values, 6))
            if len(counts) < 6 or sum(counts) == 0:
                return
            yield f"Collection #{collection}:"
            yield "Can be divided." if can_divide(counts) else "Can't be divided."
            yield ""
            collection += 1
    elif problem == "11307":
        for children in _arborescence_cases(text):
            yield str(arborescence_cost(children))
    else:
        raise ValueError(f"unknown problem: {problem}")


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    return "".join(line + "\n" for line in _solve(problem, text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a dynamic-programming judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())