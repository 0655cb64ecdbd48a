"""Army redistribution to strengthen the weakest border region."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice

_INT_MAX = 2 ** 31 - 1


@dataclass
class _Territory:
    armies: list[int]
    connections: list[list[int]]
    borders: list[int]


def _territory(armies: Sequence[int], adjacency: Sequence[str]) -> _Territory:
    n = len(armies)
    if len(adjacency) != n:
        raise ValueError("adjacency must have one row per region")
    if any(len(row) != n for row in adjacency):
        raise ValueError("every adjacency row must have one entry per region")
    connections: list[list[int]] = []
    borders: list[int] = []
    for i, row in enumerate(adjacency):
        if not armies[i]:
            continue
        here = len(connections)
        links: list[int] = []
        connections.append(links)
        target = 0
        for j, mark in enumerate(row):
            if not armies[j]:
                if mark == "Y" and (not borders or borders[-1] != here):
                    borders.append(here)
                continue
            if mark == "Y" or here == target:
                links.append(target)
            target += 1
    owned = [a for a in armies if a]
    return _Territory(owned, connections, borders)


@dataclass
class _FlowState:
    territory: _Territory
    flow: list[list[int]]
    supplied: list[int]
    demand: list[int]

    @property
    def size(self) -> int:
        return len(self.territory.armies)

    def find_path(self, start: int) -> tuple[int, list[int]] | None:
        """Breadth-first search for an augmenting path to a right node with demand."""
        n = self.size
        parents = [-1] * (2 * n)
        visited = [False] * (2 * n)
        visited[start] = True
        queue = deque([start])
        while queue:
            here = queue.popleft()
            forward = here < n
            if not forward and self.demand[here - n]:
                return here, parents
            index = here if forward else here - n
            for link in self.territory.connections[index]:
                nxt = link + n if forward else link
                if visited[nxt]:
                    continue
                if not forward and self.flow[nxt][here - n] == 0:
                    continue
                parents[nxt] = here
                visited[nxt] = True
                queue.append(nxt)
        return None

    def augment(self, start: int, end: int, parents: list[int]) -> None:
        n = self.size
        amount = min(self.territory.armies[start] - self.supplied[start],
                     self.demand[end - n])
        prev, node = end, parents[end]
        while node != start:
            if node > prev:
                amount = min(self.flow[prev][node - n], amount)
            prev, node = node, parents[node]

        prev, node = end, parents[end]
        self.supplied[start] += amount
        self.flow[node][prev - n] += amount
        while node != start:
            prev, node = node, parents[node]
            if node > prev:
                self.flow[prev][node - n] -= amount
            else:
                self.flow[node][prev - n] += amount
        self.demand[end - n] -= amount


def _can_hold(territory: _Territory, border_demand: int) -> bool:
    n = len(territory.armies)
    demand = [1] * n
    for border in territory.borders:
        demand[border] = border_demand
    state = _FlowState(territory, [[0] * n for _ in range(n)], [0] * n, demand)
    updated = True
    while updated:
        updated = False
        for i in range(n):
            if state.supplied[i] == territory.armies[i]:
                continue
            found = state.find_path(i)
            if found is not None:
                end, parents = found
                state.augment(i, end, parents)
                updated = True
    return not any(state.demand)


def max_border_armies(armies: Sequence[int], adjacency: Sequence[str]) -> int:
    """Largest army count every border region can be given at once."""
    territory = _territory(list(armies), list(adjacency))
    if not territory.borders:
        return _INT_MAX
    owned = territory.armies
    low = min(owned[b] for b in territory.borders)
    high = min(owned[b] + sum(owned[c] for c in territory.connections[b])
               for b in territory.borders)
    while low != high:
        mid = low + (high - low + 1) // 2
        if _can_hold(territory, mid):
            low = mid
        elif high == mid:
            high = low
        else:
            high = mid
    return low


def _solve(text: str) -> Iterator[str]:
    tokens = iter(text.split())
    count = int(next(tokens, "0"))
    for _ in range(count):
        n = int(next(tokens))
        armies = [int(t) for t in islice(tokens, n)]
        rows = list(islice(tokens, n))
        if len(armies) != n or len(rows) != n:
            raise ValueError("unexpected end of input")
        yield str(max_border_armies(armies, rows))


def run(text: str) -> str:
    """Solve every case in text."""
    return "".join(line + "\n" for line in _solve(text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Strengthen the weakest border.")
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())