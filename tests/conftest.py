import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegame import create_app  # noqa: E402
from mazegame.services import session_service  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


class FakeClock:
    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


@pytest.fixture()
def fake_clock():
    clock = FakeClock()
    session_service.set_clock(clock)
    try:
        yield clock
    finally:
        session_service.set_clock(None)


@pytest.fixture(autouse=True)
def _clear_sessions():
    """Session store is process-global; keep tests independent."""
    session_service.clear_sessions()
    yield
    session_service.clear_sessions()
