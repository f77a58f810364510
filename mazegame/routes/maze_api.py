"""
project: Maze Runner
module: maze_api.py
License: MIT

Maze generation and play-session API routes.

Stateless generation lives under /api/maze/generate; stateful play goes
through /api/maze/session/<id>, backed by the in-process session service.
"""

from flask import Blueprint, current_app, jsonify, request

from mazegame.maze import InvalidDimensions, Maze, MazeConfig
from mazegame.maze.connectivity import shortest_path
from mazegame.services import session_service

bp_maze = Blueprint("maze", __name__)


def _bad_request(message: str, **extra):
    body = {"error": message}
    body.update(extra)
    return jsonify(body), 400


def _session_not_found(session_id: str):
    return jsonify({"error": "unknown session", "session_id": session_id}), 404


@bp_maze.route("/api/maze/generate", methods=["POST"])
def generate():
    """Generate a maze without creating a session.

    Body JSON (all optional):
      { "width": <int>, "height": <int>, "seed": <int|str|null>, "solve": <bool> }
    Response: maze payload (rows use '#' wall, ' ' passage, 'E' exit) plus
    "path" when solve is true.
    """
    data = request.get_json(silent=True) or {}
    width = data.get("width", 21)
    height = data.get("height", 21)
    if not isinstance(width, int) or not isinstance(height, int) or isinstance(width, bool) or isinstance(height, bool):
        return _bad_request("width and height must be integers")
    limit = current_app.config.get("MAZE_MAX_DIMENSION", 201)
    if width > limit or height > limit:
        return _bad_request(f"dimensions above {limit} are not served", max_dimension=limit)
    try:
        seed = session_service.coerce_seed(data.get("seed"))
        maze = Maze(MazeConfig(width=width, height=height, seed=seed))
    except InvalidDimensions as e:
        return _bad_request(str(e), code="invalid_dimensions")
    except ValueError as e:
        return _bad_request(str(e))
    payload = maze.to_dict()
    if data.get("solve"):
        path = shortest_path(maze, maze.start, maze.exit)
        payload["path"] = [list(p) for p in path] if path else None
    return jsonify(payload)


@bp_maze.route("/api/maze/session", methods=["POST"])
def create_session():
    """Start a play session.

    Body JSON (all optional):
      { "difficulty": "easy|medium|hard", "skin": "mouse|man|cat",
        "seed": <int|str|null>, "screen": [<w>, <h>] }
    """
    data = request.get_json(silent=True) or {}
    screen = data.get("screen")
    if screen is not None:
        if not isinstance(screen, (list, tuple)) or len(screen) != 2 or not all(isinstance(v, int) for v in screen):
            return _bad_request("screen must be [width, height]")
        screen = (screen[0], screen[1])
    try:
        sess = session_service.start_session(
            difficulty=data.get("difficulty", "easy"),
            skin=data.get("skin", "mouse"),
            seed=data.get("seed"),
            screen=screen,
            max_dimension=current_app.config.get("MAZE_MAX_DIMENSION", 201),
        )
    except InvalidDimensions as e:
        if e.maximum is not None:
            return _bad_request(str(e), code="invalid_dimensions", max_dimension=e.maximum)
        return _bad_request(str(e), code="invalid_dimensions")
    except ValueError as e:
        return _bad_request(str(e))
    return jsonify(sess.to_dict()), 201


@bp_maze.route("/api/maze/session/<session_id>", methods=["GET"])
def session_state(session_id):
    try:
        state = session_service.session_state(session_id)
    except KeyError:
        return _session_not_found(session_id)
    return jsonify(state)


@bp_maze.route("/api/maze/session/<session_id>", methods=["DELETE"])
def delete_session(session_id):
    try:
        session_service.end_session(session_id)
    except KeyError:
        return _session_not_found(session_id)
    return jsonify({"session_id": session_id, "ended": True})


@bp_maze.route("/api/maze/session/<session_id>/move", methods=["POST"])
def move(session_id):
    """Apply a directional intent: { "dir": "up|down|left|right" } (n/s/w/e accepted)."""
    data = request.get_json(silent=True) or {}
    direction = data.get("dir")
    if not isinstance(direction, str):
        return _bad_request("dir is required")
    try:
        result = session_service.move(session_id, direction)
    except KeyError:
        return _session_not_found(session_id)
    except ValueError as e:
        return _bad_request(str(e))
    return jsonify(result)


@bp_maze.route("/api/maze/session/<session_id>/hint", methods=["GET"])
def hint(session_id):
    try:
        path = session_service.hint(session_id)
    except KeyError:
        return _session_not_found(session_id)
    return jsonify({"session_id": session_id, "path": path})
