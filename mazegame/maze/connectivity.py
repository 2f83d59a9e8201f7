"""Flood fill and lattice edge counting over a carved grid."""
from __future__ import annotations

from collections import deque
from typing import Set

from .cells import Coord2D
from .grid import Grid

START: Coord2D = (1, 1)


def flood_reachable(grid: Grid, start: Coord2D = START) -> Set[Coord2D]:
    """Return every Path cell reachable from ``start`` through 4-connected Path cells."""
    if not grid.is_path(*start):
        return set()
    visited = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = cx + dx, cy + dy
            if (nx, ny) not in visited and grid.is_path(nx, ny):
                visited.add((nx, ny))
                q.append((nx, ny))
    return visited


def node_cells(grid: Grid):
    for y in range(1, grid.height, 2):
        for x in range(1, grid.width, 2):
            yield x, y


def reachable_nodes(grid: Grid, start: Coord2D = START) -> int:
    reach = flood_reachable(grid, start)
    return sum(1 for c in node_cells(grid) if c in reach)


def count_connections(grid: Grid) -> int:
    """Number of open connectors between orthogonally adjacent node cells."""
    total = 0
    for x, y in node_cells(grid):
        if x + 2 < grid.width and grid.is_path(x + 1, y):
            total += 1
        if y + 2 < grid.height and grid.is_path(x, y + 1):
            total += 1
    return total


__all__ = ["START", "flood_reachable", "node_cells", "reachable_nodes", "count_connections"]
