"""Perfect-maze generation over a node lattice.

The character grid is ``width x height`` (both odd). Node ``(i, j)`` of the
``(width // 2) x (height // 2)`` lattice sits at grid cell ``(2i+1, 2j+1)``;
even coordinates hold walls. A generator fills ``nodes[j][i]`` with the
direction each node connects to (``None`` for no edge) and ``carve`` turns
that lattice into Path cells.

Two lattice builders:
    * ``depth_first_lattice`` - randomized depth-first carving with a visited
      flag per node; every node except the root points at its parent, so the
      result is always a spanning tree.
    * ``random_walk_lattice`` - a bounded random walk where each node keeps the
      direction it was last left by. Nodes the walk never reached keep ``None``
      and become isolated cells; the count is reported so callers can flag it.
"""

from __future__ import annotations

import random
import time
from typing import List, NamedTuple, Optional

from .cells import Coord2D, Direction
from .config import MazeConfig
from .grid import Grid

Lattice = List[List[Optional[Direction]]]


class MazeError(Exception):
    """Base class for maze errors."""


class MazeGenerationError(MazeError):
    """Generation reached a state that the lattice bounds should make impossible."""


class GenerationOutputs(NamedTuple):
    grid: Grid
    nodes: Lattice
    last_node: Coord2D
    visited: int
    steps: int
    runtime_ms: float


def new_lattice(maze_width: int, maze_height: int) -> Lattice:
    return [[None for _ in range(maze_width)] for _ in range(maze_height)]


def valid_directions(i: int, j: int, maze_width: int, maze_height: int) -> List[Direction]:
    directions = []
    if i > 0:
        directions.append(Direction.LEFT)
    if j > 0:
        directions.append(Direction.UP)
    if i < maze_width - 1:
        directions.append(Direction.RIGHT)
    if j < maze_height - 1:
        directions.append(Direction.DOWN)
    return directions


def random_walk_lattice(maze_width: int, maze_height: int, rng, steps: int):
    """Walk ``steps`` random moves from node (0, 0).

    Returns ``(nodes, last_node, visited)``. The node the walk stops on keeps no
    edge. A single-node lattice has nowhere to go, so no steps are taken.
    """
    nodes = new_lattice(maze_width, maze_height)
    seen = {(0, 0)}
    rx, ry = 0, 0
    if maze_width * maze_height > 1:
        for _ in range(steps):
            directions = valid_directions(rx, ry, maze_width, maze_height)
            if not directions:
                raise MazeGenerationError(f"no direction available from node ({rx}, {ry})")
            direction = rng.choice(directions)
            nodes[ry][rx] = direction
            rx, ry = direction.step(rx, ry)
            seen.add((rx, ry))
    nodes[ry][rx] = None
    return nodes, (rx, ry), len(seen)


def depth_first_lattice(maze_width: int, maze_height: int, rng):
    """Randomized depth-first spanning tree rooted at node (0, 0).

    Returns ``(nodes, last_node, visited)`` where ``last_node`` is the root.
    """
    nodes = new_lattice(maze_width, maze_height)
    visited = [[False for _ in range(maze_width)] for _ in range(maze_height)]
    visited[0][0] = True
    stack = [(0, 0)]
    count = 1
    while stack:
        i, j = stack[-1]
        options = []
        for direction in valid_directions(i, j, maze_width, maze_height):
            ni, nj = direction.step(i, j)
            if not visited[nj][ni]:
                options.append(direction)
        if not options:
            stack.pop()
            continue
        direction = rng.choice(options)
        ni, nj = direction.step(i, j)
        visited[nj][ni] = True
        # child points back at its parent
        nodes[nj][ni] = direction.opposite
        stack.append((ni, nj))
        count += 1
    return nodes, (0, 0), count


def carve(grid: Grid, nodes: Lattice) -> Grid:
    """Open every node cell, plus the connector towards its recorded direction."""
    for j, row in enumerate(nodes):
        for i, direction in enumerate(row):
            x, y = 2 * i + 1, 2 * j + 1
            grid.carve(x, y)
            if direction is None:
                continue
            cx, cy = direction.step(x, y)
            grid.carve(cx, cy)
    return grid


class Generator:
    def __init__(self, config: MazeConfig, rng: random.Random):
        self.config = config
        self.rng = rng

    def init_grid(self) -> Grid:
        return Grid(self.config.width, self.config.height)

    def walk_budget(self) -> int:
        return self.config.width * self.config.height * self.config.walk_factor

    def build_lattice(self):
        mw, mh = self.config.maze_width, self.config.maze_height
        if self.config.algorithm == "random_walk":
            steps = self.walk_budget() if mw * mh > 1 else 0
            nodes, last, visited = random_walk_lattice(mw, mh, self.rng, steps)
            return nodes, last, visited, steps
        if self.config.algorithm == "depth_first":
            nodes, last, visited = depth_first_lattice(mw, mh, self.rng)
            return nodes, last, visited, 0
        raise ValueError(f"unknown algorithm {self.config.algorithm!r}")

    def run(self) -> GenerationOutputs:
        t0 = time.perf_counter()
        grid = self.init_grid()
        nodes, last, visited, steps = self.build_lattice()
        carve(grid, nodes)
        runtime_ms = (time.perf_counter() - t0) * 1000.0
        return GenerationOutputs(grid, nodes, last, visited, steps, runtime_ms)


__all__ = [
    "Generator",
    "GenerationOutputs",
    "MazeError",
    "MazeGenerationError",
    "carve",
    "depth_first_lattice",
    "random_walk_lattice",
    "valid_directions",
]
