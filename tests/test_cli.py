import importlib
import json
import sys

import pytest

# Import run.py as a module and exercise parse_args + main with a patched
# start_server so no networking happens.


@pytest.fixture()
def run_module():
    # Fresh import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "Maze Runner" in out


def test_default_command_is_server(run_module):
    assert run_module.parse_args([]).command == "server"


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    import mazegame.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_flags_override_env(monkeypatch, run_module):
    calls = {}
    import mazegame.server as server_mod

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setattr(server_mod, "start_server", lambda host, port, debug: calls.update(port=port, debug=debug))
    run_module.main(["server", "--port", "6006", "--debug"])
    assert calls == {"port": 6006, "debug": True}


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / ".env"
    env_file.write_text("MAZE_TEST_ENV_FILE=loaded\n")
    monkeypatch.delenv("MAZE_TEST_ENV_FILE", raising=False)
    assert run_module.main(["--env-file", str(env_file), "levels"]) == 0
    import os

    assert os.environ.get("MAZE_TEST_ENV_FILE") == "loaded"
    monkeypatch.delenv("MAZE_TEST_ENV_FILE", raising=False)


def test_generate_prints_ascii(run_module, capsys):
    assert run_module.main(["generate", "--width", "9", "--height", "7", "--seed", "4"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("# seed=4 size=9x7")
    grid = lines[1:]
    assert len(grid) == 7 and all(len(r) == 9 for r in grid)
    assert grid[5][7] == "E"


def test_generate_json_matches_api_seed(run_module, capsys):
    run_module.main(["generate", "--width", "9", "--height", "9", "--seed", "12", "--json"])
    payload = json.loads(capsys.readouterr().out)
    from mazegame.maze import Maze

    assert payload["rows"] == Maze.generate(9, 9, rng=12).rows()


def test_generate_from_difficulty(run_module, capsys):
    run_module.main(["generate", "--difficulty", "hard", "--seed", "1", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert (payload["width"], payload["height"]) == (1920 // 30, 1080 // 30)


def test_generate_invalid_dimensions(run_module, capsys):
    assert run_module.main(["generate", "--width", "2"]) == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_solve_draws_path(run_module, capsys):
    assert run_module.main(["solve", "--width", "11", "--height", "11", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "path length:" in out
    grid = out.strip().splitlines()[1:12]
    assert grid[1][1] == "@"
    assert grid[9][9] == "E"
    assert any("." in row for row in grid)


def test_levels_listing(run_module, capsys):
    assert run_module.main(["levels"]) == 0
    out = capsys.readouterr().out
    assert "easy" in out and "hard" in out
    assert "exit_sc" in out
