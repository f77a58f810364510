"""
project: Maze Runner
module: __init__.py
License: MIT

Flask application setup.

Wires the JSON API blueprints around the maze core. Configuration is sourced
from environment variables (optionally loaded from a .env file) with
reasonable defaults for development. A local `instance/` directory holds the
server log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so `MAZE_MOVE_COOLDOWN`, `MAZE_MAX_DIMENSION`, etc. can be
# supplied without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # In some constrained environments this might fail; ignore
    pass

app.config.update(
    MAZE_MAX_DIMENSION=int(os.getenv("MAZE_MAX_DIMENSION", "201")),
)


def _load_version() -> str:
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    try:
        with open(os.path.join(root, "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()

# Register HTTP blueprints (import after app is created)
from mazegame.routes import main  # noqa: E402
from mazegame.routes.maze_api import bp_maze  # noqa: E402

app.register_blueprint(main.bp)
app.register_blueprint(bp_maze)


def create_app():
    """Return the configured Flask app instance."""
    return app


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "not found"}), 404


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal server error", "error_id": error_id}), 500
