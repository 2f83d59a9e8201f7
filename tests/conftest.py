import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegame.maze import Maze, MazeConfig  # noqa: E402


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def make_maze():
    def _make(width=11, height=9, seed=1234, algorithm="depth_first"):
        return Maze(MazeConfig(width=width, height=height, seed=seed, algorithm=algorithm))

    return _make


@pytest.fixture(autouse=True)
def _clean_maze_env(monkeypatch):
    for name in (
        "MAZE_WIDTH",
        "MAZE_HEIGHT",
        "MAZE_SEED",
        "MAZE_ALGORITHM",
        "MAZE_WALK_FACTOR",
        "MAZE_LOG_LEVEL",
        "MAZE_LOG_JSON",
        "MAZE_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
