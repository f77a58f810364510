import json
import logging

import pytest

from mazegame import logging_utils


@pytest.fixture(autouse=True)
def _restore_level(monkeypatch):
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.CURRENT_LEVEL)
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)


def test_key_value_format(capsys):
    logging_utils.set_level("info")
    logging_utils.get_logger("mazegame.test").info(event="maze_generated", width=7, note="two words", skip=None)
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=info ts=")
    assert "event=maze_generated" in out
    assert "width=7" in out
    assert "note=two_words" in out
    assert "skip=" not in out
    assert "logger=mazegame.test" in out


def test_json_mode(capsys, monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    logging_utils.set_level("debug")
    logging_utils.get_logger("mazegame.test").debug(event="x", pos=(1, 2))
    rec = json.loads(capsys.readouterr().out)
    assert rec["level"] == "debug"
    assert rec["event"] == "x"
    assert rec["logger"] == "mazegame.test"


def test_threshold_filters_and_errors_go_to_stderr(capsys):
    logging_utils.set_level("warn")
    log = logging_utils.get_logger("mazegame.test")
    log.info(event="hidden")
    log.error(event="boom")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=boom" in captured.err


def test_coordinates_render_compactly(capsys):
    logging_utils.set_level("info")
    logging_utils.get_logger("mazegame.test").info(event="level_complete", exit=(5, 5), path=[1, 2, 3])
    out = capsys.readouterr().out
    assert "exit=5,5" in out
    assert "path=1,2,3" in out


def test_bound_fields_appear_on_every_line(capsys):
    logging_utils.set_level("info")
    base = logging_utils.get_logger("mazegame.test")
    bound = base.bind(session_id="abc")
    bound.info(event="session_start")
    bound.bind(stage=2).info(event="level_complete", session_id="override")
    base.info(event="unbound")
    lines = capsys.readouterr().out.strip().splitlines()
    assert "session_id=abc" in lines[0]
    assert "session_id=override" in lines[1] and "stage=2" in lines[1]
    assert "session_id" not in lines[2]
    assert base.context == {}


def test_session_start_is_logged_with_session_id(capsys, fake_clock):
    from mazegame.services import session_service

    logging_utils.set_level("info")
    sess = session_service.start_session("easy", seed=5, screen=(350, 350))
    out = capsys.readouterr().out
    assert f"session_id={sess.id}" in out
    assert "event=session_start" in out


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        logging_utils.set_level("loud")


def test_get_logger_is_cached():
    assert logging_utils.get_logger("a") is logging_utils.get_logger("a")


def test_configure_logging_writes_rotating_file(tmp_path, monkeypatch):
    from mazegame import app
    from mazegame.server import _configure_logging

    root = logging.getLogger()
    saved = list(root.handlers)
    monkeypatch.setattr(app, "instance_path", str(tmp_path))
    try:
        _configure_logging()
        path = _configure_logging()
        assert len(root.handlers) == 2
        logging.getLogger("mazegame.test").info("hello file")
        for h in root.handlers:
            h.flush()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
    log_file = tmp_path / "app.log"
    assert str(log_file) == path
    assert "hello file" in log_file.read_text()
