"""Pushing a box to its target in a walled maze."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

Cell = tuple[int, int]

_MOVES = {"N": (-1, 0), "E": (0, 1), "S": (1, 0), "W": (0, -1)}
_ORDER = "ENSW"
_WALK_WEIGHT = 0.000001


def _step(cell: Cell, direction: str) -> Cell:
    dr, dc = _MOVES[direction]
    return cell[0] + dr, cell[1] + dc


def _back(cell: Cell, direction: str) -> Cell:
    dr, dc = _MOVES[direction]
    return cell[0] - dr, cell[1] - dc


@dataclass(frozen=True)
class Maze:
    """A maze grid with walls, the player, the box and the target cell."""

    rows: int
    columns: int
    walls: frozenset[Cell]
    player: Cell
    box: Cell
    goal: Cell

    def _is_open(self, cell: Cell) -> bool:
        row, col = cell
        return (0 <= row < self.rows and 0 <= col < self.columns
                and cell not in self.walls)


def parse_maze(lines: Iterable[str]) -> Maze:
    """Build a maze from rows of '#', '.', 'S' (player), 'B' (box) and 'T' (target)."""
    grid = ["".join(line.split()) for line in lines]
    if not grid or not grid[0]:
        raise ValueError("the maze is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("maze rows differ in length")
    walls = set()
    found: dict[str, Cell] = {}
    for r, row in enumerate(grid):
        for c, symbol in enumerate(row):
            if symbol == "#":
                walls.add((r, c))
            elif symbol in "SBT":
                found[symbol] = (r, c)
    missing = [s for s in "SBT" if s not in found]
    if missing:
        raise ValueError(f"maze lacks {', '.join(missing)}")
    return Maze(len(grid), width, frozenset(walls), found["S"], found["B"], found["T"])


def _walk(maze: Maze, start: Cell, goal: Cell,
          box: Cell) -> tuple[int, dict[Cell, str | None]] | None:
    """Breadth-first walk around the box; steps taken and arrival directions."""
    came: dict[Cell, str | None] = {start: None}
    queue = deque([(start, 0)])
    while queue:
        cell, steps = queue.popleft()
        if cell == goal:
            return steps, came
        for direction in _ORDER:
            nxt = _step(cell, direction)
            if nxt == box or not maze._is_open(nxt) or nxt in came:
                continue
            came[nxt] = direction
            queue.append((nxt, steps + 1))
    return None


def _walk_back(maze: Maze, start: Cell, goal: Cell, box: Cell) -> list[str]:
    """Walk moves from goal back to start, lower case, last move first."""
    walked = _walk(maze, start, goal, box)
    if walked is None:
        raise RuntimeError("recorded walk is not possible")
    came = walked[1]
    moves = []
    cell = goal
    while cell != start:
        direction = came[cell]
        assert direction is not None
        moves.append(direction.lower())
        cell = _back(cell, direction)
    return moves


def push_boxes(maze: Maze) -> str | None:
    """Moves with fewest pushes, then fewest walks; None if impossible.

    Pushes are upper case, walking steps lower case.
    """
    origins: dict[tuple[str, Cell], str] = {}
    best_steps: dict[tuple[str, Cell], float] = {}
    max_step = math.inf
    queue = deque([(maze.box, maze.player, "P", 0.0)])
    while queue:
        box, player, origin, steps = queue.popleft()
        if steps >= max_step:
            continue
        if box == maze.goal:
            max_step = steps
            origins[("N", box)] = origin
            continue
        for direction in _ORDER:
            new_box = _step(box, direction)
            behind = _back(box, direction)
            if not maze._is_open(new_box) or not maze._is_open(behind):
                continue
            walked = _walk(maze, player, behind, box)
            if walked is None:
                continue
            key = (direction, box)
            if best_steps.get(key, math.inf) < steps:
                continue
            walk_steps = walked[0]
            origins[key] = origin
            best_steps[key] = steps + _WALK_WEIGHT * walk_steps
            queue.append((new_box, box, direction, steps + 1 + _WALK_WEIGHT * walk_steps))

    if max_step == math.inf:
        return None

    direction = origins[("N", maze.goal)]
    if direction == "P":
        return ""
    output: list[str] = []
    pos = maze.goal
    while True:
        output.append(direction)
        pos = _back(pos, direction)
        previous = origins[(direction, pos)]
        player_start = _back(pos, direction)
        if pos != maze.box:
            output.extend(_walk_back(maze, _back(pos, previous), player_start, pos))
        elif _walk(maze, maze.player, player_start, pos) is not None:
            output.extend(_walk_back(maze, maze.player, player_start, pos))
            break
        else:
            output.extend(_walk_back(maze, _back(pos, previous), player_start, pos))
        direction = previous
    return "".join(reversed(output))


def push_boxes_by_states(maze: Maze) -> str | None:
    """Moves with fewest single steps in total; None if impossible."""
    start = (maze.box, maze.player)
    previous: dict[tuple[Cell, Cell], tuple[tuple[Cell, Cell], str] | None] = {start: None}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        box, player = state
        if box == maze.goal:
            moves = []
            while (link := previous[state]) is not None:
                state, move = link
                moves.append(move)
            return "".join(reversed(moves))
        for direction in _ORDER:
            new_player = _step(player, direction)
            if not maze._is_open(new_player):
                continue
            new_box = box
            move = direction.lower()
            if new_player == box:
                new_box = _step(box, direction)
                if not maze._is_open(new_box):
                    continue
                move = direction
            key = (new_box, new_player)
            if key in previous:
                continue
            previous[key] = (state, move)
            queue.append(key)
    return None


def _mazes(text: str) -> Iterator[Maze]:
    tokens = iter(text.split())
    for token in tokens:
        rows = int(token)
        columns_token = next(tokens, None)
        if columns_token is None:
            raise ValueError("unexpected end of input")
        columns = int(columns_token)
        if rows == 0 and columns == 0:
            return
        need = rows * columns
        chars: list[str] = []
        while len(chars) < need:
            chunk = next(tokens, None)
            if chunk is None:
                raise ValueError("unexpected end of input")
            chars.extend(chunk)
        if len(chars) != need:
            raise ValueError("maze row does not match the column count")
        yield parse_maze("".join(chars[r * columns:(r + 1) * columns])
                         for r in range(rows))


def run(text: str) -> str:
    """Solve every maze in text, numbered from 1."""
    parts = []
    for number, maze in enumerate(_mazes(text), 1):
        path = push_boxes(maze)
        parts.append(f"Maze #{number}\n{'Impossible.' if path is None else path}\n\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Push the box to its target.")
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())