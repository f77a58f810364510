"""Maze Runner CLI entry point.

Provides subcommands for running the JSON API server and for generating,
solving and listing mazes from the terminal. Accepts configuration via flags
and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()  # pragma: no cover
_COLOR_ENABLED = True

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    if not sys.stdout.isatty():  # pragma: no cover - environment dependent
        _COLOR_ENABLED = False
except (AttributeError, ValueError):  # pragma: no cover
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze Runner

    Generate perfect mazes (randomized depth-first search), solve them, or
    run the JSON API server that hosts play sessions. Configuration can be
    provided via CLI flags or environment variables. If both are present, CLI
    flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                 Bind address for the web server (default: 0.0.0.0)
          PORT                 Port for the web server (default: 5000)
          MAZE_MOVE_COOLDOWN   Seconds between accepted moves (default: 0.2)
          MAZE_LOG_LEVEL       debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a 31x21 maze for seed 42
          python run.py generate --width 31 --height 21 --seed 42

          # Size the grid from a difficulty level instead
          python run.py generate --difficulty hard

          # Show the route from the start to the exit
          python run.py solve --seed 42
        """
    )

    parser = argparse.ArgumentParser(
        prog="MazeRunner",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Maze Runner {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask server hosting maze generation and play sessions",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # generate / solve share the sizing flags
    def add_maze_flags(p):
        p.add_argument("--width", type=int, default=None, help="Grid width in cells (default: 21)")
        p.add_argument("--height", type=int, default=None, help="Grid height in cells (default: 21)")
        p.add_argument("--seed", default=None, help="Integer or text seed (default: random)")
        p.add_argument(
            "--difficulty",
            choices=["easy", "medium", "hard"],
            default=None,
            help="Size the grid from a difficulty level (overridden by --width/--height)",
        )
        p.add_argument(
            "--shuffle-passes",
            dest="shuffle_passes",
            type=int,
            choices=[3, 4],
            default=4,
            help="Direction shuffle passes per cell (default: 4)",
        )
        p.add_argument("--json", action="store_true", help="Emit JSON instead of ASCII")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Print a generated maze",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_maze_flags(gen_parser)
    gen_parser.set_defaults(command="generate")

    solve_parser = subparsers.add_parser(
        "solve",
        help="Print a generated maze with its shortest start-to-exit path",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_maze_flags(solve_parser)
    solve_parser.set_defaults(command="solve")

    levels_parser = subparsers.add_parser(
        "levels",
        help="List difficulty levels and skins",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    levels_parser.set_defaults(command="levels")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _build_maze(args):
    from mazegame.maze import Maze, MazeConfig
    from mazegame.maze.levels import settings_for
    from mazegame.services.session_service import coerce_seed

    width, height = 21, 21
    if args.difficulty:
        s = settings_for(args.difficulty)
        width, height = s.width, s.height
    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    return Maze(
        MazeConfig(width=width, height=height, seed=coerce_seed(args.seed), shuffle_passes=args.shuffle_passes)
    )


def _cmd_generate(args) -> int:
    from mazegame.maze import InvalidDimensions

    try:
        maze = _build_maze(args)
    except InvalidDimensions as e:
        print(f"[ERROR] {e}")
        return 1
    if args.json:
        print(json.dumps(maze.to_dict()))
    else:
        print(f"# seed={maze.seed} size={maze.width}x{maze.height} exit={maze.exit}")
        print(maze.to_ascii())
    return 0


def _cmd_solve(args) -> int:
    from mazegame.maze import InvalidDimensions
    from mazegame.maze.connectivity import shortest_path

    try:
        maze = _build_maze(args)
    except InvalidDimensions as e:
        print(f"[ERROR] {e}")
        return 1
    path = shortest_path(maze, maze.start, maze.exit)
    if args.json:
        payload = maze.to_dict()
        payload["path"] = [list(p) for p in path] if path else None
        print(json.dumps(payload))
        return 0 if path else 2
    print(f"# seed={maze.seed} size={maze.width}x{maze.height} exit={maze.exit}")
    if path is None:
        print(maze.to_ascii(player=maze.start))
        print("[WARN] exit is not reachable from the start")
        return 2
    print(maze.to_ascii(player=maze.start, path=path[1:-1]))
    print(f"path length: {len(path) - 1} steps")
    return 0


def _cmd_levels() -> int:
    from mazegame.maze.levels import DIFFICULTIES, SKINS, settings_for

    for name, d in DIFFICULTIES.items():
        s = settings_for(name)
        print(f"{name:8} level={d['level']} cell={d['cell_size']}px grid={s.width}x{s.height} walls={s.wall_color}")
    for name, s in SKINS.items():
        print(f"skin {name:6} player={s['player_icon']} exit={s['exit_icon']}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    if mode == "generate":
        return _cmd_generate(args)
    if mode == "solve":
        return _cmd_solve(args)
    if mode == "levels":
        return _cmd_levels()

    # Resolve configuration from CLI flags or env vars
    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))
    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from mazegame.logging_utils import log
    from mazegame.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Maze Runner Server Bootup{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Maze Runner Server Bootup"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Version:'):12} {value(__version__)}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Cooldown:'):12} {value(os.getenv('MAZE_MOVE_COOLDOWN', '0.2'))}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
