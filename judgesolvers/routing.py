"""Shortest road routes between named cities, printed as a trip table."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from collections.abc import Sequence
from dataclasses import dataclass

_WIDTHS = (21, 21, 11)


@dataclass
class _Road:
    miles: int
    name: str


def _row(first: str, second: str, route: str, miles: str) -> str:
    return f"{first:<21}{second:<21}{route:<11}{miles:>5}"


class RoadMap:
    """Undirected map of named roads between cities."""

    def __init__(self) -> None:
        self._roads: dict[str, dict[str, _Road]] = {}

    def add_route(self, line: str) -> None:
        """Add a 'city,city,route,miles' line, keeping the shorter of duplicates."""
        parts = line.rstrip("\r\n").split(",", 3)
        if len(parts) != 4:
            raise ValueError(f"not a route: {line!r}")
        first, second, name, miles_text = parts
        miles = int(miles_text)
        self._roads.setdefault(first, {})
        self._roads.setdefault(second, {})
        existing = self._roads[first].get(second)
        if existing is None or existing.miles > miles:
            road = _Road(miles, name)
            self._roads[first][second] = road
            self._roads[second][first] = road

    def route(self, start: str, end: str) -> list[tuple[str, str, str, int]]:
        """Legs (from, to, route, miles) of a shortest route; empty if none."""
        if start not in self._roads or end not in self._roads:
            return []
        counter = itertools.count()
        heap = [(0, next(counter), start, None)]
        previous: dict[str, str | None] = {}
        while heap:
            dist, _, city, came_from = heapq.heappop(heap)
            if city in previous:
                continue
            previous[city] = came_from
            if city == end:
                break
            for neighbour, road in self._roads[city].items():
                if neighbour not in previous:
                    heapq.heappush(heap, (dist + road.miles, next(counter), neighbour, city))
        if end not in previous:
            return []
        path = [end]
        while (before := previous[path[-1]]) is not None:
            path.append(before)
        path.reverse()
        legs = []
        for a, b in zip(path, path[1:]):
            road = self._roads[a][b]
            legs.append((a, b, road.name, road.miles))
        return legs

    def report(self, line: str) -> str:
        """Trip table for a 'start,end' request line."""
        parts = line.rstrip("\r\n").split(",")
        if len(parts) < 2:
            raise ValueError(f"not a request: {line!r}")
        legs = self.route(parts[0], parts[1])
        lines = [
            _row("From", "To", "Route", "Miles"),
            _row("-" * 20, "-" * 20, "-" * 10, "-" * 5),
        ]
        lines.extend(_row(a, b, name, str(miles)) for a, b, name, miles in legs)
        total = sum(miles for *_, miles in legs)
        lines.append(" " * sum(_WIDTHS) + "-----")
        lines.append(" " * (_WIDTHS[0] + _WIDTHS[1]) + "Total" + f"{total:>11}")
        return "\n\n" + "\n".join(lines) + "\n"


def run(text: str) -> str:
    """Read routes, a blank line, then requests; return all trip tables."""
    lines = iter(line.rstrip("\r") for line in text.split("\n"))
    road_map = RoadMap()
    for line in lines:
        if not line:
            break
        road_map.add_route(line)
    reports = []
    for line in lines:
        if not line:
            break
        reports.append(road_map.report(line))
    return "".join(reports)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print shortest trip routes.")
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())