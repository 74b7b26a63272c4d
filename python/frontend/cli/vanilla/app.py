"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for play, statistics, and help.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.config import ROWS, STATS_FILENAME
from backend.engine.gamegenerator import Dice
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameStatus, TurnPhase
from backend.models.stats import StatsManager
from frontend.cli.controls import (
    Cursor,
    Outcome,
    format_dice,
    handle_key,
    record_if_finished,
)
from frontend.cli.input_handler import get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_REV = "\033[7m"     # reverse video
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected tile)

_ROW_COLOURS = {0: "\033[35;1m", 1: "\033[34;1m", 2: "\033[36;1m"}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: Cursor) -> str:
    """Return an ANSI-coloured text representation of the board."""
    state = game.state
    sep = "+" + ("---+" * 9)

    lines: list[str] = [sep]
    for row in reversed(range(ROWS)):
        cells: list[str] = []
        for tile in state.board.tiles_by_row(row):
            if tile.is_shut:
                cell = f"{_DIM} · {_R}"
            elif tile.pos in state.selection:
                cell = f"{_BG_SEL} {tile.value} {_R}"
            elif state.is_selectable(tile):
                cell = f"{_ROW_COLOURS[row]} {tile.value} {_R}"
            else:
                cell = f"{_DIM} {tile.value} {_R}"
            if cursor.pos == tile.pos and not state.is_over:
                cell = f"{_REV}{cell}{_R}"
            cells.append(cell)
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _dice_line(game: GamePlay) -> str:
    state = game.state
    if state.rolling:
        line = f"  {_Y}Rolling…{_R}"
    elif state.dice:
        line = f"  {format_dice(state.dice)}  = {_Y}{sum(state.dice)}{_R}"
    else:
        line = ""
    if state.can_roll_one_die and state.phase is TurnPhase.ROLL:
        line += f"    {_DIM}Dice ({_R}1{_DIM}/{_R}2{_DIM}):{_R} {_G}{state.dice_count}{_R}"
    return line


def _banner(game: GamePlay) -> str:
    state = game.state
    if state.status is GameStatus.WON:
        return f"  {_G}★ You shut the box! ★{_R}"
    if state.status is GameStatus.LOST:
        return f"  {_RED}Game over — no moves available.{_R} Score: {_Y}{state.score}{_R}"
    if state.phase is TurnPhase.SELECT and state.target is not None:
        selected = state.selected_sum
        colour = _G if selected == state.target else _RED if selected > state.target else _Y
        return f"  Selected: {colour}{selected}{_R} / {state.target}"
    if state.status is GameStatus.START:
        return "  Roll the dice to start!"
    return "  Roll again!"


_MESSAGES = {
    Outcome.REJECTED: f"{_Y}That tile is not available.{_R}",
    Outcome.MISMATCH: f"{_RED}Selection does not match the dice.{_R}",
    Outcome.HINT: f"{_C}Hint applied.{_R}",
    Outcome.NO_HINT: f"{_Y}No hint available.{_R}",
    Outcome.DICE: f"{_C}Dice count changed.{_R}",
    Outcome.RESTART: f"{_C}New game.{_R}",
}


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, cursor: Cursor, status: str = "") -> None:
    _clear()
    print(f"  {_BOLD}=== Shut the Box: Triple Trouble ==={_R}")
    print()
    print(_render_board(game, cursor))
    print()
    print(_dice_line(game))
    print(_banner(game))
    if status:
        print(f"  {status}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}Space{_R}: select  |  "
        f"{_C}Enter{_R}: roll/confirm  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: back"
    )
    sys.stdout.flush()


def _show_help() -> None:
    _clear()
    print(f"\n  {_BOLD}=== HOW TO PLAY ==={_R}\n")
    print("  - Roll the dice to get a target sum.")
    print("  - Select available tiles that add up to that sum.")
    print(
        f"  - Rows: {_ROW_COLOURS[0]}front{_R} -> "
        f"{_ROW_COLOURS[1]}middle{_R} -> {_ROW_COLOURS[2]}back{_R}."
    )
    print("  - A tile is available if the one in front of it is shut or selected.")
    print("  - Shut all tiles to win!")
    print("  - On the final row, with every open tile 6 or less, press 1 for one die.")
    print("  - Open tiles score value x3 (front), x2 (middle), x1 (back) if you lose.")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


def _show_stats(manager: StatsManager) -> None:
    _clear()
    stats = manager.stats
    best = "-" if stats.best_score is None else str(stats.best_score)
    print()
    print(f"  {_BOLD}=== STATISTICS ==={_R}")
    print()
    print(f"  Games played   {_Y}{stats.games_played:>6}{_R}")
    print(f"  Wins           {_Y}{stats.wins:>6}{_R}")
    print(f"  Win rate       {_Y}{stats.win_rate:>6.0%}{_R}")
    print(f"  Average score  {_Y}{stats.average_score:>6.1f}{_R}")
    print(f"  Best score     {_Y}{best:>6}{_R}")
    for threshold, count in stats.milestones.items():
        print(f"  {_DIM}Score <= {threshold:<5}{_R} {_Y}{count:>6}{_R}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


def _show_menu() -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}       S H U T   T H E   B O X        {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    {_C}1{_R}  Play")
    print(f"    {_Y}2{_R}  Statistics")
    print(f"    {_DIM}H{_R}  Help")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


# -- game loop ----------------------------------------------------------------


def _play_game(manager: StatsManager, dice: Dice) -> None:
    game = GamePlay(dice)
    cursor = Cursor()
    status = ""
    recorded = False

    def on_rolling(g: GamePlay) -> None:
        _show_game(g, cursor)

    while True:
        _show_game(game, cursor, status)
        outcome = handle_key(game, cursor, get_key(), on_rolling)
        if outcome is Outcome.QUIT:
            return
        if outcome is Outcome.HELP:
            _show_help()
        status = _MESSAGES.get(outcome, "")
        recorded = record_if_finished(game, manager, recorded)
        if outcome in (Outcome.WON, Outcome.LOST):
            status = f"{_DIM}Result saved. Press Enter to play again, Q to go back.{_R}"


# -- menu loop ----------------------------------------------------------------


def _menu_loop(data_dir: Path, dice: Dice) -> None:
    manager = StatsManager(data_dir / STATS_FILENAME)

    while True:
        _show_menu()
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in ("1", "enter"):
            _play_game(manager, dice)
        elif key == "2":
            _show_stats(manager)
        elif key == "help":
            _show_help()


# -- public entry point -------------------------------------------------------


def run(data_dir: Path, dice: Dice | None = None) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(data_dir, dice if dice is not None else Dice())
