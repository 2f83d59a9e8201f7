from collections import deque

from mazegame.maze import Cell


def bfs_reachable(grid, start=(1, 1)):
    """Return set of (x,y) Path cells reachable from start."""
    sx, sy = start
    if grid.get(sx, sy) != Cell.PATH:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < grid.width and 0 <= ny < grid.height and (nx, ny) not in vis:
                if grid.get(nx, ny) == Cell.PATH:
                    vis.add((nx, ny))
                    q.append((nx, ny))
    return vis


def node_coords(grid):
    return [(x, y) for y in range(1, grid.height, 2) for x in range(1, grid.width, 2)]


def path_set(grid):
    return {(x, y) for y in range(grid.height) for x in range(grid.width) if grid.get(x, y) == Cell.PATH}


def adjacency_count(grid):
    """Count Path-to-Path connections between neighbouring odd/odd cells."""
    edges = 0
    for x, y in node_coords(grid):
        if x + 2 < grid.width and grid.get(x + 1, y) == Cell.PATH:
            edges += 1
        if y + 2 < grid.height and grid.get(x, y + 1) == Cell.PATH:
            edges += 1
    return edges


class ScriptedRng:
    """Returns scripted directions from choice(); raises if one is not on offer."""

    def __init__(self, script):
        self.script = list(script)

    def choice(self, options):
        want = self.script.pop(0)
        assert want in options, f"{want} not among {options}"
        return want


def moves_between(grid, start, goal):
    """Direction sequence along the unique Path route from start to goal."""
    from mazegame.maze import Direction

    parents = {start: None}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            break
        for d in Direction:
            nx, ny = d.step(*cur)
            if (nx, ny) not in parents and grid.is_path(nx, ny):
                parents[(nx, ny)] = (cur, d)
                q.append((nx, ny))
    moves = []
    cur = goal
    while parents[cur] is not None:
        cur, d = parents[cur]
        moves.append(d)
    return list(reversed(moves))
