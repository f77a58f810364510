import random
import sys

import pytest

from mazegame.maze import Grid, Maze, MazeGenerator, OutOfBounds, shuffle_directions
from mazegame.maze.generator import base_directions, exit_for
from tests.maze_test_utils import ScriptedRng, recursive_reference, wall_mask


@pytest.mark.parametrize("w,h,seed", [(7, 7, 1), (15, 11, 2), (21, 21, 3), (12, 9, 4), (31, 17, 5)])
def test_iterative_generator_matches_recursive_reference(w, h, seed):
    iterative = Maze.generate(w, h, rng=random.Random(seed))
    reference = recursive_reference(w, h, random.Random(seed))
    assert wall_mask(iterative, w, h) == wall_mask(reference, w, h)


@pytest.mark.parametrize("passes", [3, 4])
def test_shuffle_pass_count_matches_reference(passes):
    iterative = Maze.generate(19, 13, rng=random.Random(8), shuffle_passes=passes)
    reference = recursive_reference(19, 13, random.Random(8), passes=passes)
    assert wall_mask(iterative, 19, 13) == wall_mask(reference, 19, 13)


def test_large_maze_exceeds_recursion_limit_without_failing():
    size = 401
    m = Maze.generate(size, size, rng=12)
    sub = (size // 2) ** 2
    assert sub > sys.getrecursionlimit()
    assert m.metrics["cells_visited"] == sub
    assert m.metrics["max_stack_depth"] >= 1
    assert not m.is_wall(size - 2, size - 2)


def test_shuffle_is_a_permutation():
    rng = random.Random(0)
    for passes in (3, 4):
        for _ in range(50):
            dirs = shuffle_directions(rng, passes)
            assert sorted(dirs) == sorted(base_directions())


def test_shuffle_covers_all_orderings():
    rng = random.Random(314)
    seen = {tuple(shuffle_directions(rng, 4)) for _ in range(2000)}
    assert len(seen) == 24


def test_shuffle_with_zero_passes_is_identity():
    assert shuffle_directions(ScriptedRng("high"), 0) == base_directions()


def test_generator_rejects_bad_pass_count():
    with pytest.raises(ValueError):
        MazeGenerator(Grid(5, 5), random.Random(1), shuffle_passes=5)


def test_generator_run_reports_exit_and_metrics():
    grid = Grid(9, 7)
    out = MazeGenerator(grid, random.Random(3)).run()
    assert out.exit == exit_for(9, 7) == (7, 5)
    assert out.metrics["cells_visited"] == 4 * 3
    assert "runtime_ms" in out.metrics
    assert not grid.is_wall(7, 5)


def test_carve_from_outside_grid_raises():
    with pytest.raises(OutOfBounds):
        MazeGenerator(Grid(5, 5), random.Random(1)).carve(start=(9, 9))


def test_visited_flags_are_cleared_after_generation():
    m = Maze.generate(9, 9, rng=2)
    grid = m._grid
    assert not any(grid.is_visited(x, y) for x, y in grid.coords())
