"""Game loop state machine.

One player starts on the origin node cell ``(1, 1)`` and walks one cell per
directional key. The loop is driven from outside (the Textual app forwards key
presses), so everything here is synchronous and clock-injectable for tests.

States: RUNNING -> WON (player reached the goal) or GAVE_UP (quit key). Both
terminal states carry the elapsed time since ``start()``; the transition
happens once and later input is ignored.
"""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .logging_utils import get_logger
from .maze import Coord2D, Direction, Maze

log = get_logger("mazegame.game")

# Textual key names; arrow key first, then the WASD and vi aliases
KEY_BINDINGS: Dict[Direction, Tuple[str, ...]] = {
    Direction.RIGHT: ("right", "d", "l"),
    Direction.UP: ("up", "w", "k"),
    Direction.LEFT: ("left", "a", "h"),
    Direction.DOWN: ("down", "s", "j"),
}
QUIT_KEYS: Tuple[str, ...] = ("escape", "q")

_KEY_TO_DIRECTION = {key: d for d, keys in KEY_BINDINGS.items() for key in keys}


class GameState(enum.Enum):
    RUNNING = "running"
    WON = "won"
    GAVE_UP = "gave_up"


@dataclass(frozen=True)
class GameResult:
    state: GameState
    elapsed: float
    position: Coord2D

    @property
    def won(self) -> bool:
        return self.state is GameState.WON


def direction_for_key(key: str) -> Optional[Direction]:
    return _KEY_TO_DIRECTION.get(key)


class Game:
    def __init__(self, maze: Maze, clock: Callable[[], float] = time.monotonic):
        self.maze = maze
        self.clock = clock
        self.position: Coord2D = maze.start
        self.state = GameState.RUNNING
        self.result: Optional[GameResult] = None
        self._started_at: Optional[float] = None

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def elapsed(self) -> float:
        if self.result is not None:
            return self.result.elapsed
        if self._started_at is None:
            return 0.0
        return self.clock() - self._started_at

    def start(self) -> GameState:
        """Start the timer. A goal on the start cell wins straight away."""
        if self._started_at is None:
            self._started_at = self.clock()
            log.info(event="game_start", seed=self.maze.seed, goal=self.maze.goal)
        self._check_goal()
        return self.state

    def move(self, direction: Direction) -> bool:
        """Step one cell; returns False (and changes nothing) when blocked."""
        if not self.running:
            return False
        target = self.maze.target(self.position, direction)
        if target is None or not self.maze.is_walkable(*target):
            log.debug(event="move_blocked", x=self.position[0], y=self.position[1], direction=direction.name)
            return False
        self.position = target
        self._check_goal()
        return True

    def give_up(self) -> GameState:
        if self.running:
            self._finish(GameState.GAVE_UP)
        return self.state

    def handle_key(self, key: str) -> GameState:
        if not self.running:
            return self.state
        direction = direction_for_key(key)
        if direction is not None:
            self.move(direction)
        elif key in QUIT_KEYS:
            self.give_up()
        return self.state

    def _check_goal(self):
        if self.running and self.position == self.maze.goal:
            self._finish(GameState.WON)

    def _finish(self, state: GameState):
        if self._started_at is None:
            self._started_at = self.clock()
        elapsed = max(0.0, self.clock() - self._started_at)
        self.state = state
        self.result = GameResult(state, elapsed, self.position)
        log.info(event="game_end", state=state.value, elapsed=round(elapsed, 3), seed=self.maze.seed)


__all__ = ["Game", "GameResult", "GameState", "KEY_BINDINGS", "QUIT_KEYS", "direction_for_key"]
