"""Public maze package interface."""

from .cells import Cell, Coord2D, Direction
from .config import MazeConfig, odd_floor, terminal_dimension
from .generator import MazeError, MazeGenerationError
from .grid import Grid
from .maze import Maze

__all__ = [
    "Cell",
    "Coord2D",
    "Direction",
    "Grid",
    "Maze",
    "MazeConfig",
    "MazeError",
    "MazeGenerationError",
    "odd_floor",
    "terminal_dimension",
]
