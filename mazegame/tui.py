"""Textual front end: draws the maze once and moves the player glyph around it.

Textual owns the terminal while the app runs (raw input, alternate screen,
hidden cursor, synchronized output) and restores it on every exit path,
including an exception inside a handler, before anything is printed.

Run with: ``python run.py play``
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from rich.segment import Segment
from rich.style import Style
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.geometry import Region, Size
from textual.strip import Strip
from textual.widget import Widget

from .game import KEY_BINDINGS, QUIT_KEYS, Game, GameResult
from .maze import Coord2D, Direction, Maze

PLAYER_GLYPH = "∲"
GOAL_GLYPH = "■"
PLAYER_STYLE = Style(color="blue", bold=True)
GOAL_STYLE = Style(color="red")


def build_bindings() -> List[Binding]:
    bindings = [
        Binding(",".join(keys), f"move('{direction.name.lower()}')", direction.name.title(), show=False, priority=True)
        for direction, keys in KEY_BINDINGS.items()
    ]
    bindings.append(Binding(",".join(QUIT_KEYS), "give_up", "Give up", show=False, priority=True))
    return bindings


class MazeView(Widget):
    """Line-API widget holding the pre-rendered glyph rows.

    Rows are computed once from the finished grid; each line only overlays the
    goal and player markers, and a move refreshes just the two cells involved.
    """

    DEFAULT_CSS = """
    MazeView { width: auto; height: auto; }
    """

    def __init__(self, game: Game, **kwargs) -> None:
        super().__init__(**kwargs)
        self.game = game
        self.glyph_rows = game.maze.render_rows()

    def get_content_width(self, container: Size, viewport: Size) -> int:
        return self.game.maze.width

    def get_content_height(self, container: Size, viewport: Size, width: int) -> int:
        return self.game.maze.height

    def _markers(self, y: int) -> dict:
        found = {}
        gx, gy = self.game.maze.goal
        if gy == y:
            found[gx] = (GOAL_GLYPH, GOAL_STYLE)
        px, py = self.game.position
        if py == y:
            found[px] = (PLAYER_GLYPH, PLAYER_STYLE)
        return found

    def render_line(self, y: int) -> Strip:
        if y >= len(self.glyph_rows):
            return Strip.blank(self.size.width, self.rich_style)
        row = self.glyph_rows[y]
        base = self.rich_style
        segments = []
        cursor = 0
        for x, (glyph, style) in sorted(self._markers(y).items()):
            if x > cursor:
                segments.append(Segment(row[cursor:x], base))
            segments.append(Segment(glyph, base + style))
            cursor = x + 1
        if cursor < len(row):
            segments.append(Segment(row[cursor:], base))
        return Strip(segments, len(row))

    def move_player(self, old: Coord2D, new: Coord2D) -> None:
        self.refresh(Region(old[0], old[1], 1, 1), Region(new[0], new[1], 1, 1))


class MazeApp(App[GameResult]):
    """Full-screen maze session; exits with the ``GameResult`` once the game ends."""

    CSS = """
    Screen { overflow: hidden; }
    """

    BINDINGS = build_bindings()

    def __init__(self, game: Game) -> None:
        super().__init__()
        self.game = game
        self.maze_view: Optional[MazeView] = None

    def compose(self) -> ComposeResult:  # type: ignore[override]
        self.maze_view = MazeView(self.game)
        yield self.maze_view

    def on_mount(self) -> None:
        self.game.start()
        self._exit_if_finished()

    def action_move(self, direction: str) -> None:
        old = self.game.position
        if self.game.move(Direction[direction.upper()]) and self.maze_view is not None:
            self.maze_view.move_player(old, self.game.position)
        self._exit_if_finished()

    def action_give_up(self) -> None:
        self.game.give_up()
        self._exit_if_finished()

    def _exit_if_finished(self) -> None:
        if self.game.result is not None:
            self.exit(self.game.result)


def session_outcome(game: Game, result: Optional[GameResult], return_code: int) -> Tuple[Optional[GameResult], int]:
    """Turn what ``App.run`` handed back into ``(result, return_code)``.

    A crashed app passes its return code through with no result. An app closed
    through Textual's own quit binding counts as giving up.
    """
    if return_code:
        return None, return_code
    if result is None:
        game.give_up()
        result = game.result
    return result, 0


def play(maze: Maze) -> Tuple[Optional[GameResult], int]:  # pragma: no cover (interactive)
    """Run one interactive session. Returns ``(result, return_code)``."""
    game = Game(maze)
    app = MazeApp(game)
    result = app.run(mouse=False)
    return session_outcome(game, result, app.return_code or 0)


__all__ = ["MazeApp", "MazeView", "build_bindings", "play", "session_outcome", "PLAYER_GLYPH", "GOAL_GLYPH"]
