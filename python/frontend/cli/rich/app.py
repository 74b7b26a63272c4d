"""Rich terminal frontend — styled board, dice and statistics panels.

Uses the ``rich`` library for styled output while sharing the same
input handler, key dispatch, and backend as the vanilla CLI.  Includes a
built-in menu for play, statistics, and help.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import COLUMNS, ROWS, STATS_FILENAME
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

console = Console()

# Front row purple, middle blue, back teal.
_ROW_STYLES = {0: "magenta", 1: "blue", 2: "cyan"}


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: Cursor | None = None) -> Table:
    """Return a Rich Table of the board, back row at the top."""
    state = game.state
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="#8d6e63",
        padding=(0, 1),
    )
    for _ in range(COLUMNS):
        table.add_column(width=3, justify="center")

    for row in reversed(range(ROWS)):
        colour = _ROW_STYLES[row]
        cells: list[str] = []
        for tile in state.board.tiles_by_row(row):
            if tile.is_shut:
                cell = "[dim]·[/dim]"
            elif tile.pos in state.selection:
                cell = f"[bold black on green]{tile.value}[/bold black on green]"
            elif state.is_selectable(tile):
                cell = f"[bold {colour}]{tile.value}[/bold {colour}]"
            else:
                cell = f"[dim {colour}]{tile.value}[/dim {colour}]"
            if cursor is not None and cursor.pos == tile.pos and not state.is_over:
                cell = f"[reverse]{cell}[/reverse]"
            cells.append(cell)
        table.add_row(*cells)

    return table


def _dice_line(game: GamePlay) -> Text:
    state = game.state
    text = Text()
    if state.rolling:
        text.append("  Rolling…", style="bold yellow")
    elif state.dice:
        text.append(f"  {format_dice(state.dice)}  ", style="bold white")
        text.append(f"= {sum(state.dice)}", style="bold yellow")
    if state.can_roll_one_die and state.phase is TurnPhase.ROLL:
        text.append("    Dice: ", style="dim")
        for n in (1, 2):
            style = "bold green" if state.dice_count == n else "dim"
            text.append(f" {n} ", style=style)
    return text


def _banner(game: GamePlay) -> Text:
    state = game.state
    if state.status is GameStatus.WON:
        return Text("  ★ You shut the box! ★", style="bold green")
    if state.status is GameStatus.LOST:
        return Text(
            f"  Game over — no moves available. Score: {state.score}",
            style="bold red",
        )
    if state.phase is TurnPhase.SELECT and state.target is not None:
        selected = state.selected_sum
        if selected == state.target:
            style = "bold green"
        elif selected > state.target:
            style = "bold red"
        else:
            style = "bold yellow"
        return Text(f"  Selected: {selected} / {state.target}", style=style)
    if state.status is GameStatus.START:
        return Text("  Roll the dice to start!", style="bold #eecfa1")
    return Text("  Roll again!", style="#eecfa1")


def _status_message(outcome: Outcome) -> str:
    return {
        Outcome.REJECTED: "[yellow]That tile is not available.[/yellow]",
        Outcome.MISMATCH: "[red]Selection does not match the dice.[/red]",
        Outcome.HINT: "[cyan]Hint applied.[/cyan]",
        Outcome.NO_HINT: "[yellow]No hint available.[/yellow]",
        Outcome.DICE: "[cyan]Dice count changed.[/cyan]",
        Outcome.RESTART: "[cyan]New game.[/cyan]",
    }.get(outcome, "")


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, cursor: Cursor, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  roll/confirm   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    border = {
        GameStatus.WON: "bold green",
        GameStatus.LOST: "red",
    }.get(game.state.status, "#eecfa1")

    panel = Panel(
        Group(
            Align.center(_render_board(game, cursor)),
            Text(""),
            Align.center(_dice_line(game)),
        ),
        title="[bold #eecfa1]Shut the Box: Triple Trouble[/bold #eecfa1]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_banner(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_help() -> None:
    console.clear()
    rules = Text()
    rules.append("  • Roll the dice to get a target sum.\n")
    rules.append("  • Select available tiles that add up to that sum.\n")
    rules.append("  • Rows: ")
    rules.append("front", style="magenta")
    rules.append(" → ")
    rules.append("middle", style="blue")
    rules.append(" → ")
    rules.append("back", style="cyan")
    rules.append(".\n")
    rules.append(
        "  • A tile is available if the one in front of it is shut "
        "or currently selected.\n"
    )
    rules.append("  • Shut all tiles to win!\n")
    rules.append(
        "  • On the final row, with every open tile 6 or less, "
        "press 1 to roll one die.\n"
    )
    rules.append(
        "  • If you lose, open tiles score their value ×3 (front), "
        "×2 (middle), ×1 (back). Lower is better."
    )
    console.print()
    console.print(
        Align.center(
            Panel(rules, title="[bold]How to Play[/bold]", border_style="#eecfa1")
        )
    )
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _draw_stats(manager: StatsManager) -> None:
    """Full-screen statistics view (used from the menu)."""
    console.clear()
    stats = manager.stats

    table = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    table.add_column(style="dim")
    table.add_column(justify="right", style="yellow")
    table.add_row("Games played", str(stats.games_played))
    table.add_row("Wins", str(stats.wins))
    table.add_row("Win rate", f"{stats.win_rate:.0%}")
    table.add_row("Average score", f"{stats.average_score:.1f}")
    table.add_row("Best score", "-" if stats.best_score is None else str(stats.best_score))
    for threshold, count in stats.milestones.items():
        table.add_row(f"Score ≤ {threshold}", str(count))

    panel = Panel(
        Align.center(table),
        title="[bold]STATISTICS[/bold]",
        border_style="#eecfa1",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _draw_menu() -> None:
    console.clear()

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Stats    ")
    opts.append("H", style="dim bold")
    opts.append("  Help    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    panel = Panel(
        Group(Text(""), Align.center(opts), Text("")),
        title="[bold]S H U T   T H E   B O X[/bold]",
        border_style="#eecfa1",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _play_game(manager: StatsManager, dice: Dice) -> None:
    game = GamePlay(dice)
    cursor = Cursor()
    status = ""
    recorded = False

    def on_rolling(g: GamePlay) -> None:
        _draw_game(g, cursor)

    while True:
        _draw_game(game, cursor, status)
        outcome = handle_key(game, cursor, get_key(), on_rolling)
        if outcome is Outcome.QUIT:
            return
        if outcome is Outcome.HELP:
            _draw_help()
        status = _status_message(outcome)
        recorded = record_if_finished(game, manager, recorded)
        if outcome in (Outcome.WON, Outcome.LOST):
            status = "[dim]Result saved. Press Enter to play again, Q to go back.[/dim]"


# -- menu loop ----------------------------------------------------------------


def _menu_loop(data_dir: Path, dice: Dice) -> None:
    manager = StatsManager(data_dir / STATS_FILENAME)

    while True:
        _draw_menu()
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key in ("1", "enter"):
            _play_game(manager, dice)
        elif key == "2":
            _draw_stats(manager)
        elif key == "help":
            _draw_help()


# -- public entry point -------------------------------------------------------


def run(data_dir: Path, dice: Dice | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(data_dir, dice if dice is not None else Dice())
