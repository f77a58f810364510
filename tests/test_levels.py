import pytest

from mazegame.maze.levels import catalog, grid_size_for, settings_for, wall_color_for


@pytest.mark.parametrize(
    "difficulty,cell,color",
    [("easy", 50, "LIGHTGRAY"), ("medium", 40, "DARKGRAY"), ("hard", 30, "LIGHTGRAY")],
)
def test_difficulty_table(difficulty, cell, color):
    s = settings_for(difficulty, "mouse", (1920, 1080))
    assert s.cell_size == cell
    assert s.wall_color == color
    assert (s.width, s.height) == (1920 // cell, 1080 // cell)


def test_skins_pick_exit_icon():
    assert settings_for("easy", "mouse").exit_icon == "exit_jnn"
    assert settings_for("easy", "man").exit_icon == "exit_fm"
    assert settings_for("easy", "cat").exit_icon == "exit_sc"
    assert settings_for("hard", "Cat").player_icon == "cat"


def test_unknown_names_rejected():
    with pytest.raises(ValueError):
        settings_for("nightmare")
    with pytest.raises(ValueError):
        settings_for("easy", "dragon")


def test_grid_size_helpers():
    assert grid_size_for(350, 350, 50) == (7, 7)
    assert grid_size_for(100, 90, 30) == (3, 3)
    with pytest.raises(ValueError):
        grid_size_for(100, 100, 0)
    assert wall_color_for(2) == "DARKGRAY"
    assert wall_color_for(1) == "LIGHTGRAY"


def test_catalog_lists_everything():
    c = catalog()
    assert set(c["difficulties"]) == {"easy", "medium", "hard"}
    assert set(c["skins"]) == {"mouse", "man", "cat"}
    assert settings_for("medium").to_dict()["level"] == 2
