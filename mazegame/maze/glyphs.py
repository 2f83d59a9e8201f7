"""Wall glyph selection.

Each wall cell is drawn with the box-drawing character that joins it to its
wall neighbours. The four neighbour states (right, up, left, down) are packed
into a 4-bit index, ``right`` being the high bit and ``Cell.WALL == 1``, so the
16-entry table below covers every pattern and needs no fallback. Neighbours
outside the grid count as PATH.

A few single-neighbour patterns deliberately draw a straight bar rather than a
stub, e.g. a wall with only a right neighbour is ``═``.
"""

from __future__ import annotations

from typing import List

from .cells import Cell
from .grid import Grid

PATH_GLYPH = " "

# index: right<<3 | up<<2 | left<<1 | down
GLYPHS = (
    "·",  # 0000 isolated
    "║",  # 0001 down
    "═",  # 0010 left
    "╗",  # 0011 left+down
    "║",  # 0100 up
    "║",  # 0101 up+down
    "╝",  # 0110 up+left
    "╣",  # 0111 up+left+down
    "═",  # 1000 right
    "╔",  # 1001 right+down
    "═",  # 1010 right+left
    "╦",  # 1011 right+left+down
    "╚",  # 1100 right+up
    "╠",  # 1101 right+up+down
    "╩",  # 1110 right+up+left
    "╬",  # 1111 all
)


def pattern_index(right: Cell, up: Cell, left: Cell, down: Cell) -> int:
    return int(right) << 3 | int(up) << 2 | int(left) << 1 | int(down)


def wall_glyph(right: Cell, up: Cell, left: Cell, down: Cell) -> str:
    return GLYPHS[pattern_index(right, up, left, down)]


def neighbor_pattern(grid: Grid, x: int, y: int):
    """(right, up, left, down) neighbour states of (x, y)."""
    return (
        grid.neighbor(x + 1, y),
        grid.neighbor(x, y - 1),
        grid.neighbor(x - 1, y),
        grid.neighbor(x, y + 1),
    )


def cell_glyph(grid: Grid, x: int, y: int) -> str:
    if grid.get(x, y) == Cell.PATH:
        return PATH_GLYPH
    return wall_glyph(*neighbor_pattern(grid, x, y))


def render_rows(grid: Grid) -> List[str]:
    return ["".join(cell_glyph(grid, x, y) for x in range(grid.width)) for y in range(grid.height)]


__all__ = ["GLYPHS", "PATH_GLYPH", "pattern_index", "wall_glyph", "neighbor_pattern", "cell_glyph", "render_rows"]
