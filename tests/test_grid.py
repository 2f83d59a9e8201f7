from mazegame.maze import Cell, Grid


def test_new_grid_is_all_wall():
    g = Grid(7, 5)
    assert (g.width, g.height) == (7, 5)
    assert len(g.cells) == 5
    assert all(len(row) == 7 for row in g.cells)
    assert all(c == Cell.WALL for row in g.cells for c in row)


def test_set_and_get_are_row_major():
    g = Grid(5, 3)
    g.set(4, 1, Cell.PATH)
    assert g.cells[1][4] == Cell.PATH
    assert g.get(4, 1) == Cell.PATH
    assert g.get(1, 1) == Cell.WALL
    g.carve(0, 2)
    assert list(g.path_cells()) == [(4, 1), (0, 2)]


def test_neighbor_outside_grid_reads_as_path():
    g = Grid(3, 3)
    assert g.neighbor(-1, 0) == Cell.PATH
    assert g.neighbor(3, 1) == Cell.PATH
    assert g.neighbor(1, -1) == Cell.PATH
    assert g.neighbor(1, 1) == Cell.WALL


def test_is_path_checks_bounds():
    g = Grid(3, 3)
    g.carve(1, 1)
    assert g.is_path(1, 1)
    assert not g.is_path(0, 1)
    assert not g.is_path(5, 5)
    assert not g.is_path(-1, 1)
