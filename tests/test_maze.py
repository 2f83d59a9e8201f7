import pytest

from mazegame.maze import Direction, Maze, MazeConfig


def test_goal_sits_on_a_reachable_node(make_maze):
    for seed in range(20):
        m = make_maze(width=13, height=9, seed=seed)
        gx, gy = m.goal
        assert gx % 2 == 1 and gy % 2 == 1
        assert 0 < gx < m.width and 0 < gy < m.height
        assert m.goal != m.start
        assert m.is_walkable(gx, gy)


def test_single_node_maze_goal_is_start():
    m = Maze(MazeConfig(width=3, height=3, seed=4))
    assert m.goal == m.start == (1, 1)


def test_seed_reproduces_grid_and_goal(make_maze):
    a = make_maze(seed=777)
    b = make_maze(seed=777)
    assert a.render_rows() == b.render_rows()
    assert a.goal == b.goal


def test_missing_seed_is_generated():
    m = Maze(MazeConfig(width=9, height=7))
    assert isinstance(m.seed, int)
    assert m.config.seed == m.seed


def test_legacy_keyword_construction():
    m = Maze(seed=5, size=(9, 7), algorithm="random_walk")
    assert (m.width, m.height) == (9, 7)
    assert m.config.algorithm == "random_walk"
    assert m.metrics["algorithm"] == "random_walk"


def test_metrics_describe_a_spanning_tree(make_maze):
    m = make_maze(width=21, height=11, seed=3)
    nodes = 10 * 5
    assert m.metrics["nodes"] == nodes
    assert m.metrics["visited_nodes"] == nodes
    assert m.metrics["unvisited_nodes"] == 0
    assert m.metrics["reachable_nodes"] == nodes
    assert m.metrics["connections"] == nodes - 1
    assert m.metrics["walk_steps"] == 0
    assert m.metrics["runtime_ms"] >= 0


def test_random_walk_metrics_count_steps(make_maze):
    m = make_maze(width=7, height=5, seed=1, algorithm="random_walk")
    assert m.metrics["walk_steps"] == 7 * 5 * 10
    assert m.metrics["connections"] == m.metrics["visited_nodes"] - 1


def test_target_stops_at_grid_edge(make_maze):
    m = make_maze(width=5, height=5)
    assert m.target((0, 2), Direction.LEFT) is None
    assert m.target((2, 0), Direction.UP) is None
    assert m.target((4, 2), Direction.RIGHT) is None
    assert m.target((2, 4), Direction.DOWN) is None
    assert m.target((1, 1), Direction.RIGHT) == (2, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 4, "height": 5},
        {"width": 5, "height": 1},
        {"width": 5, "height": 5, "algorithm": "kruskal"},
        {"width": 5, "height": 5, "walk_factor": 0},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        MazeConfig(**kwargs)


def test_dimension_fitting():
    from mazegame.maze import odd_floor, terminal_dimension

    assert terminal_dimension(80) == 79
    assert terminal_dimension(24) == 23
    assert terminal_dimension(81) == 81
    assert terminal_dimension(2) == 3
    assert odd_floor(20) == 19
    assert odd_floor(21) == 21
    assert odd_floor(1) == 3


def test_algorithm_override_is_validated():
    with pytest.raises(ValueError):
        Maze(MazeConfig(width=9, height=7, seed=3), algorithm="kruskal")


def test_algorithm_override_is_applied():
    m = Maze(MazeConfig(width=9, height=7, seed=3), algorithm="random_walk")
    assert m.config.algorithm == "random_walk"
    assert m.metrics["algorithm"] == "random_walk"
    assert m.metrics["walk_steps"] == 9 * 7 * 10
    assert m.seed == 3


def test_generator_rejects_unknown_algorithm():
    import random

    from mazegame.maze.generator import Generator

    cfg = MazeConfig(width=9, height=7, seed=3)
    cfg.algorithm = "kruskal"
    with pytest.raises(ValueError):
        Generator(cfg, random.Random(3)).run()


def test_public_surface():
    import mazegame.maze as pkg

    assert sorted(pkg.__all__) == sorted(
        [
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
    )
    for name in pkg.__all__:
        assert getattr(pkg, name) is not None
