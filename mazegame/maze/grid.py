from __future__ import annotations

from typing import Iterator, List

from .cells import Cell, Coord2D


class Grid:
    """Fixed-size 2D store of cells, row-major (``cells[y][x]``), all walls at construction.

    No bounds checking beyond what Python lists do; callers work within the
    known dimensions.
    """

    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[Cell.WALL for _ in range(width)] for _ in range(height)]

    def get(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        self.cells[y][x] = cell

    def carve(self, x: int, y: int) -> None:
        self.cells[y][x] = Cell.PATH

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_path(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[y][x] == Cell.PATH

    def neighbor(self, x: int, y: int) -> Cell:
        """Cell at (x, y), with anything outside the grid reading as PATH."""
        if not self.in_bounds(x, y):
            return Cell.PATH
        return self.cells[y][x]

    def path_cells(self) -> Iterator[Coord2D]:
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell == Cell.PATH:
                    yield x, y

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


__all__ = ["Grid"]
