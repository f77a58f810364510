"""
project: Maze Runner
module: main.py
License: MIT

Service-level routes: health check and the level catalog.
"""

from flask import Blueprint, jsonify

from mazegame.maze.levels import catalog

bp = Blueprint("main", __name__)


@bp.route("/healthz")
def healthz():
    from mazegame import __version__

    return jsonify({"status": "ok", "version": __version__})


@bp.route("/api/maze/levels")
def levels():
    """Difficulties (cell size, label) and skins (player / exit icons) for the menu."""
    return jsonify(catalog())
