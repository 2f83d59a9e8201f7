"""Maze facade: seeded generation, goal placement and move validation.

Public contract consumed by the game loop and renderer:
    Maze(MazeConfig(...)) OR Maze(seed=..., size=(W, H))
    Attributes: grid, config, seed, start, goal, metrics (dict), width, height
    Methods: is_walkable(x, y), target((x, y), direction), render_rows()

The grid is never mutated after construction.
"""

from __future__ import annotations

import dataclasses
import random
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .cells import Coord2D, Direction
from .config import MazeConfig
from .connectivity import START, count_connections, reachable_nodes
from .generator import Generator
from .glyphs import render_rows
from .metrics import init_metrics

log = get_logger("mazegame.maze")


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
        algorithm: str | None = None,
    ):
        if config is None:
            width, height = size if size is not None else (MazeConfig.width, MazeConfig.height)
            config = MazeConfig(width=width, height=height, seed=seed, algorithm=algorithm or "depth_first")
        elif algorithm is not None:
            # replace() re-runs MazeConfig validation on the override
            config = dataclasses.replace(config, algorithm=algorithm, seed=seed if seed is not None else config.seed)
        elif seed is not None:
            config.seed = seed
        self.config = config
        if self.config.seed is None:
            self.config.seed = random.randint(0, 2**31 - 1)
        self.seed = self.config.seed
        # Local RNG so outside random usage does not affect generation
        self._rng = random.Random(self.seed)
        self.width = self.config.width
        self.height = self.config.height
        self.start: Coord2D = START
        self.metrics: Dict[str, Any] = init_metrics()
        self._generate()
        self.goal: Coord2D = self._choose_goal()
        self._rows: Optional[List[str]] = None

    def _generate(self):
        out = Generator(self.config, self._rng).run()
        self.grid = out.grid
        nodes = self.config.maze_width * self.config.maze_height
        self.metrics.update(
            algorithm=self.config.algorithm,
            nodes=nodes,
            visited_nodes=out.visited,
            unvisited_nodes=nodes - out.visited,
            connections=count_connections(self.grid),
            reachable_nodes=reachable_nodes(self.grid, self.start),
            walk_steps=out.steps,
            runtime_ms=round(out.runtime_ms, 3),
        )
        log.info(
            event="maze_generated",
            seed=self.seed,
            width=self.width,
            height=self.height,
            algorithm=self.config.algorithm,
            runtime_ms=self.metrics["runtime_ms"],
        )
        if self.metrics["unvisited_nodes"]:
            log.warn(
                event="maze_unvisited_nodes",
                seed=self.seed,
                unvisited=self.metrics["unvisited_nodes"],
                reachable=self.metrics["reachable_nodes"],
                nodes=nodes,
            )

    def _choose_goal(self) -> Coord2D:
        mw, mh = self.config.maze_width, self.config.maze_height
        while True:
            goal = (self._rng.randrange(mw) * 2 + 1, self._rng.randrange(mh) * 2 + 1)
            if goal != self.start or mw * mh == 1:
                return goal

    def is_walkable(self, x: int, y: int) -> bool:
        return self.grid.is_path(x, y)

    def target(self, position: Coord2D, direction: Direction) -> Optional[Coord2D]:
        """Neighbour of ``position`` in ``direction``, or None past the grid edge."""
        nx, ny = direction.step(*position)
        if not self.grid.in_bounds(nx, ny):
            return None
        return nx, ny

    def render_rows(self) -> List[str]:
        if self._rows is None:
            self._rows = render_rows(self.grid)
        return self._rows


__all__ = ["Maze"]
