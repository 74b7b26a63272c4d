"""Key dispatch shared by the terminal frontends.

Maps normalised key actions from ``input_handler`` onto ``GamePlay`` calls
and reports what happened, leaving styling to each frontend.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from backend.config import COLUMNS, ROLL_DELAY, ROWS
from backend.engine.gameplay import GamePlay
from backend.models.stats import StatsManager

_DIE_GLYPHS = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}


class Outcome(StrEnum):
    NONE = "none"
    ROLLED = "rolled"
    LOST = "lost"
    WON = "won"
    SHUT = "shut"
    REJECTED = "rejected"
    MISMATCH = "mismatch"
    HINT = "hint"
    NO_HINT = "no_hint"
    DICE = "dice"
    HELP = "help"
    RESTART = "restart"
    QUIT = "quit"


@dataclass
class Cursor:
    """Highlighted tile. Up moves toward the back row, drawn at the top."""

    row: int = 0
    col: int = 0

    def move(self, action: str) -> None:
        if action == "up":
            self.row = min(ROWS - 1, self.row + 1)
        elif action == "down":
            self.row = max(0, self.row - 1)
        elif action == "left":
            self.col = max(0, self.col - 1)
        elif action == "right":
            self.col = min(COLUMNS - 1, self.col + 1)

    @property
    def pos(self) -> tuple[int, int]:
        return (self.row, self.col)


def format_dice(values: tuple[int, ...]) -> str:
    return " ".join(_DIE_GLYPHS[v] for v in values)


def do_roll(game: GamePlay, on_rolling: Callable[[GamePlay], None]) -> Outcome:
    """Roll with the reveal delay in between; input is not read meanwhile."""
    if not game.begin_roll():
        return Outcome.NONE
    on_rolling(game)
    time.sleep(ROLL_DELAY)
    game.resolve_roll()
    return Outcome.LOST if game.is_lost else Outcome.ROLLED


def handle_key(
    game: GamePlay,
    cursor: Cursor,
    key: str,
    on_rolling: Callable[[GamePlay], None],
) -> Outcome:
    if key == "quit":
        return Outcome.QUIT
    if key == "restart":
        game.reset()
        return Outcome.RESTART
    if key == "help":
        return Outcome.HELP
    if key in ("up", "down", "left", "right"):
        cursor.move(key)
        return Outcome.NONE

    if game.is_over:
        if key == "enter":
            game.reset()
            return Outcome.RESTART
        return Outcome.NONE

    state = game.state
    if state.accepts_selection:
        if key == "toggle":
            return Outcome.NONE if game.select(*cursor.pos) else Outcome.REJECTED
        if key in ("confirm", "enter"):
            if not game.confirm():
                return Outcome.MISMATCH
            return Outcome.WON if game.is_won else Outcome.SHUT
        if key == "hint":
            picks = game.hint()
            if picks is None:
                return Outcome.NO_HINT
            for pos in sorted(state.selection, reverse=True):
                if pos in game.state.selection:
                    game.select(*pos)
            for pos in picks:
                game.select(*pos)
            return Outcome.HINT
        return Outcome.NONE

    if key in ("1", "2"):
        return Outcome.DICE if game.set_dice_count(int(key)) else Outcome.NONE
    if key in ("enter", "toggle"):
        return do_roll(game, on_rolling)
    return Outcome.NONE


def record_if_finished(game: GamePlay, manager: StatsManager, recorded: bool) -> bool:
    """Save the result once per finished game. Returns the new recorded flag."""
    if game.is_over and not recorded:
        manager.record_game(game.state.score or 0, game.is_won)
        return True
    return recorded and game.is_over
