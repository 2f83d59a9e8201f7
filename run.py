"""Terminal maze CLI entry point.

Provides subcommands for playing a maze in the terminal and for printing a
generated maze as plain text. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import shutil
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from mazegame import logging_utils
from mazegame.maze import Maze, MazeConfig, MazeGenerationError, odd_floor, terminal_dimension
from mazegame.maze.config import ALGORITHMS, MIN_DIMENSION

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except Exception:  # pragma: no cover
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        from mazegame import __version__ as pkg_version

        return pkg_version


__version__ = _load_version()


def odd_dimension(raw: str) -> int:
    """argparse type: an odd integer >= 3."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}")
    if value < MIN_DIMENSION or value % 2 == 0:
        raise argparse.ArgumentTypeError(f"must be an odd integer >= {MIN_DIMENSION}, got {value}")
    return value


def _add_maze_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=odd_dimension, default=None, help="Maze width in cells (default: env MAZE_WIDTH or terminal columns)")
    p.add_argument("--height", type=odd_dimension, default=None, help="Maze height in cells (default: env MAZE_HEIGHT or terminal rows)")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: env MAZE_SEED or random)")
    p.add_argument(
        "--algorithm",
        choices=ALGORITHMS,
        default=None,
        help="Generation algorithm (default: env MAZE_ALGORITHM or depth_first)",
    )


TOP_LEVEL_FLAGS = ("-h", "--help", "--version")


def _with_default_command(argv: list[str], command: str) -> list[str]:
    """Insert ``command`` before the first argument the top-level parser does not own."""
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--env-file":
            i += 2
        elif arg.startswith("--env-file=") or arg in TOP_LEVEL_FLAGS:
            i += 1
        else:
            break
    i = min(i, len(argv))
    return [*argv[:i], command, *argv[i:]]


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Terminal Maze

    Generate a perfect maze sized to your terminal and race from the top-left
    corner to the red goal square. Configuration can be provided via CLI flags
    or environment variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_WIDTH        Maze width, fitted to an odd value >= 3 (default: terminal columns)
          MAZE_HEIGHT       Maze height, fitted to an odd value >= 3 (default: terminal rows)
          MAZE_SEED         Integer seed for reproducible mazes
          MAZE_ALGORITHM    depth_first (default) or random_walk
          MAZE_WALK_FACTOR  Random walk budget multiplier (default: 10)
          MAZE_LOG_LEVEL    debug, info, warn (default) or error
          MAZE_LOG_JSON     Emit JSON log lines when set to 1/true/yes/on
          MAZE_LOG_FILE     Append log lines to this file instead of stderr

        Controls:
          Arrow keys, WASD or hjkl   Move
          q or Esc                   Give up

        Examples:
          # Play a maze the size of the terminal
          python run.py

          # Replay a known maze
          python run.py play --seed 1234

          # Print a small maze made by the random walk generator
          python run.py print --width 21 --height 11 --algorithm random_walk
        """
    )

    parser = argparse.ArgumentParser(
        prog="terminal-maze",
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
        version=f"Terminal Maze {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    play_parser = subparsers.add_parser(
        "play",
        help="Play a maze in full-screen mode",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Play a maze in the terminal; your time is printed when you finish or give up.",
    )
    _add_maze_options(play_parser)
    play_parser.set_defaults(command="play")

    print_parser = subparsers.add_parser(
        "print",
        help="Print a generated maze to stdout",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a maze and write its glyph rows to stdout without entering full-screen mode.",
    )
    _add_maze_options(print_parser)
    print_parser.add_argument(
        "--markers",
        action="store_true",
        help="Overlay the start (∲) and goal (■) markers",
    )
    print_parser.set_defaults(command="print")

    # If no subcommand provided, default to play (placed after the top-level options)
    if not any(a in ("play", "print") for a in argv):
        argv = _with_default_command(argv, "play")

    args = parser.parse_args(argv)
    return args


def _env_int(name: str):
    raw = os.getenv(name)
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def resolve_config(args: argparse.Namespace) -> MazeConfig:
    """Merge CLI flags, environment variables and the terminal size into a MazeConfig."""
    cols, rows = shutil.get_terminal_size()

    width = getattr(args, "width", None)
    if width is None:
        env_width = _env_int("MAZE_WIDTH")
        width = odd_floor(env_width) if env_width is not None else terminal_dimension(cols)
    height = getattr(args, "height", None)
    if height is None:
        env_height = _env_int("MAZE_HEIGHT")
        height = odd_floor(env_height) if env_height is not None else terminal_dimension(rows)

    seed = getattr(args, "seed", None)
    if seed is None:
        seed = _env_int("MAZE_SEED")
    algorithm = getattr(args, "algorithm", None) or os.getenv("MAZE_ALGORITHM") or "depth_first"
    walk_factor = _env_int("MAZE_WALK_FACTOR")
    if walk_factor is None:
        walk_factor = 10
    return MazeConfig(width=width, height=height, seed=seed, algorithm=algorithm, walk_factor=walk_factor)


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.3f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}:{rest:06.3f}"


def summary_lines(result) -> list[str]:
    elapsed = format_duration(result.elapsed)
    if result.won:
        head = "Congrats!!! You are a winner in life!"
        if _COLOR_ENABLED:
            head = f"{Fore.GREEN}{Style.BRIGHT}{head}{Style.RESET_ALL}"
        return [head, f"It took {elapsed} to beat the maze..."]
    head = f"You gave up after {elapsed} :("
    if _COLOR_ENABLED:
        head = f"{Fore.YELLOW}{head}{Style.RESET_ALL}"
    return [head, "Maybe try again later..."]


def render_text(maze: Maze, markers: bool = False) -> str:
    rows = list(maze.render_rows())
    if markers:
        from mazegame.tui import GOAL_GLYPH, PLAYER_GLYPH

        for (x, y), glyph in ((maze.goal, GOAL_GLYPH), (maze.start, PLAYER_GLYPH)):
            rows[y] = rows[y][:x] + glyph + rows[y][x + 1 :]
    return "\n".join(rows)


def _error(message: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {message}", file=sys.stderr)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if _COLOR_ENABLED:  # pragma: no cover - environment dependent
        _color_init()
    # Load .env if requested, otherwise a default .env if present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    try:
        logging_utils.configure()
        config = resolve_config(args)
    except ValueError as e:
        _error(str(e))
        return 2

    mode = (getattr(args, "command", None) or "play").lower()
    log = logging_utils.get_logger("mazegame.cli")
    log.info(
        event="startup",
        mode=mode,
        width=config.width,
        height=config.height,
        seed=config.seed,
        algorithm=config.algorithm,
    )

    try:
        maze = Maze(config)
    except MazeGenerationError as e:
        log.error(event="generation_failed", error=str(e), seed=config.seed)
        _error(f"Maze generation failed: {e}")
        return 1

    if mode == "print":
        print(render_text(maze, markers=bool(getattr(args, "markers", False))))
        return 0

    from mazegame.tui import play

    result, code = play(maze)
    if code:
        return code
    print("\n".join(summary_lines(result)))
    return 0


def entrypoint() -> None:  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
