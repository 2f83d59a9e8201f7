from dataclasses import dataclass
from typing import Optional

ALGORITHMS = ("depth_first", "random_walk")
MIN_DIMENSION = 3


def terminal_dimension(n: int) -> int:
    """Fit a terminal extent (columns or rows) to an odd maze dimension >= 3."""
    return max(MIN_DIMENSION, (n - 1) | 1)


def odd_floor(n: int) -> int:
    """Largest odd value <= n, but never below the minimum dimension."""
    return max(MIN_DIMENSION, n if n % 2 else n - 1)


@dataclass
class MazeConfig:
    width: int = 79
    height: int = 23
    seed: Optional[int] = None
    algorithm: str = "depth_first"
    walk_factor: int = 10

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if value < MIN_DIMENSION or value % 2 == 0:
                raise ValueError(f"{name} must be an odd integer >= {MIN_DIMENSION}, got {value}")
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"unknown algorithm {self.algorithm!r}; expected one of {', '.join(ALGORITHMS)}")
        if self.walk_factor < 1:
            raise ValueError(f"walk_factor must be >= 1, got {self.walk_factor}")

    @property
    def maze_width(self) -> int:
        return self.width // 2

    @property
    def maze_height(self) -> int:
        return self.height // 2


__all__ = ["MazeConfig", "ALGORITHMS", "MIN_DIMENSION", "terminal_dimension", "odd_floor"]
