"""Shortest-path and spanning-tree judge problems."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Iterator, Sequence
from itertools import combinations, islice


class UnionFind:
    """Disjoint sets over 0..n-1 with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n
        self.components = n

    def find(self, x: int) -> int:
        """Representative of the set holding x."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def same(self, x: int, y: int) -> bool:
        """Whether x and y are in the same set."""
        return self.find(x) == self.find(y)

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding x and y."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return
        if self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_x] = root_y
            if self.rank[root_x] == self.rank[root_y]:
                self.rank[root_y] += 1
        self.components -= 1


def _dijkstra(adjacency: Sequence[Sequence[tuple[int, int]]], source: int,
              target: int | None = None, limit: int | None = None) -> dict[int, int]:
    dist: dict[int, int] = {}
    heap = [(0, source)]
    while heap:
        weight, node = heapq.heappop(heap)
        if limit is not None and weight > limit:
            break
        if node in dist:
            continue
        dist[node] = weight
        if node == target:
            break
        for neighbour, cost in adjacency[node]:
            total = weight + cost
            if neighbour not in dist or dist[neighbour] > total:
                heapq.heappush(heap, (total, neighbour))
    return dist


def shortest_path(n: int, edges: Sequence[tuple[int, int, int]],
                  source: int, target: int) -> int | None:
    """Length of the shortest path in an undirected graph, or None."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
    return _dijkstra(adjacency, source, target=target).get(target)


def mice_escaping(n: int, exit_cell: int, limit: int,
                  passages: Sequence[tuple[int, int, int]]) -> int:
    """Number of cells (1-based) whose mouse reaches the exit within limit."""
    reverse: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, t in passages:
        reverse[b - 1].append((a - 1, t))
    return len(_dijkstra(reverse, exit_cell - 1, limit=limit))


def _kruskal(n: int, edges: Sequence[tuple[int, int, int]]) -> tuple[list[int], UnionFind]:
    """Indices (into edges, in cost order) of a minimum spanning forest."""
    order = sorted(range(len(edges)), key=lambda i: edges[i][2])
    uf = UnionFind(n)
    chosen: list[int] = []
    for i in order:
        if len(chosen) == n - 1:
            break
        u, v, _ = edges[i]
        if uf.same(u, v):
            continue
        uf.unite(u, v)
        chosen.append(i)
    return chosen, uf


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def transportation(cities: Sequence[tuple[int, int]],
                   threshold: int) -> tuple[int, int, int]:
    """States, rounded road length and rounded railroad length."""
    points = sorted(tuple(c) for c in cities)
    edges = [
        (i, j, (points[i][0] - points[j][0]) ** 2 + (points[i][1] - points[j][1]) ** 2)
        for i, j in combinations(range(len(points)), 2)
    ]
    chosen, _ = _kruskal(len(points), edges)
    states = UnionFind(len(points))
    roads = railroads = 0.0
    for index in chosen:
        u, v, squared = edges[index]
        distance = math.sqrt(squared)
        if distance <= threshold:
            roads += distance
            states.unite(u, v)
        else:
            railroads += distance
    return states.components, _round_half_up(roads), _round_half_up(railroads)


def dark_roads_savings(junctions: int, roads: Sequence[tuple[int, int, int]]) -> int:
    """Cost saved by lighting only a minimum spanning set of roads."""
    edges = [tuple(r) for r in roads]
    chosen, _ = _kruskal(junctions, edges)
    return sum(cost for _, _, cost in edges) - sum(edges[i][2] for i in chosen)


def heavy_cycle_edges(nodes: int, edges: Sequence[tuple[int, int, int]]) -> list[int]:
    """Sorted costs of the edges left out of a minimum spanning forest."""
    edge_list = [tuple(e) for e in edges]
    chosen = set(_kruskal(nodes, edge_list)[0])
    return sorted(cost for i, (_, _, cost) in enumerate(edge_list) if i not in chosen)


def _read(values: Iterator[int], count: int) -> list[int]:
    items = list(islice(values, count))
    if len(items) != count:
        raise ValueError("unexpected end of input")
    return items


def _triples(values: Iterator[int], count: int) -> list[tuple[int, int, int]]:
    flat = _read(values, 3 * count)
    return list(zip(flat[::3], flat[1::3], flat[2::3]))


def _solve(problem: str, text: str) -> Iterator[str]:
    values = (int(token) for token in text.split())
    if problem == "10986":
        for case in range(1, next(values, 0) + 1):
            n, m, source, target = _read(values, 4)
            dist = shortest_path(n, _triples(values, m), source, target)
            yield f"Case #{case}: {'unreachable' if dist is None else dist}"
    elif problem == "1112":
        count = next(values, 0)
        for case in range(count):
            n, exit_cell, limit, m = _read(values, 4)
            yield str(mice_escaping(n, exit_cell, limit, _triples(values, m)))
            if case < count - 1:
                yield ""
    elif problem == "11228":
        for case in range(1, next(values, 0) + 1):
            n, threshold = _read(values, 2)
            flat = _read(values, 2 * n)
            states, roads, rails = transportation(list(zip(flat[::2], flat[1::2])), threshold)
            yield f"Case #{case}: {states} {roads} {rails}"
    elif problem == "11631":
        while (m := next(values, None)) is not None:
            n = _read(values, 1)[0]
            if m == 0 and n == 0:
                return
            yield str(dark_roads_savings(m, _triples(values, n)))
    elif problem == "11747":
        while (n := next(values, None)) is not None:
            m = _read(values, 1)[0]
            if m == 0 and n == 0:
                return
            heavy = heavy_cycle_edges(n, _triples(values, m))
            yield " ".join(map(str, heavy)) if heavy else "forest"
    else:
        raise ValueError(f"unknown problem: {problem}")


def run(problem: str, text: str) -> str:
    """Solve every case of the given problem number in text."""
    return "".join(line + "\n" for line in _solve(problem, text))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a graph judge problem.")
    parser.add_argument("problem", help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())