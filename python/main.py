#!/usr/bin/env python3
"""Shut the Box: Triple Trouble.

Usage::

    python main.py                # interactive menu
    python main.py -f rich        # Rich terminal
    python main.py -f vanilla     # plain ANSI terminal
    python main.py --seed 7       # reproducible dice
    python main.py --stats        # view play statistics
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_stats(data_dir: Path) -> None:
    from backend.config import STATS_FILENAME
    from backend.models.stats import StatsManager

    stats = StatsManager(data_dir / STATS_FILENAME).stats

    print("\n  === STATISTICS ===")
    if not stats.games_played:
        print("  No games played yet.\n")
        return
    best = "-" if stats.best_score is None else stats.best_score
    print(f"  Games played:  {stats.games_played}")
    print(f"  Wins:          {stats.wins}  ({stats.win_rate:.0%})")
    print(f"  Average score: {stats.average_score:.1f}")
    print(f"  Best score:    {best}")
    for threshold, count in stats.milestones.items():
        print(f"  Score <= {threshold}: {count}")
    print()


def _menu_loop(data_dir: Path, seed: Optional[int]) -> None:
    from backend.engine.gamegenerator import Dice

    while True:
        print()
        print("  ====================================")
        print("       S H U T   T H E   B O X        ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  View Statistics")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            mod = importlib.import_module(
                {"1": _RUNNERS[Frontend.vanilla], "2": _RUNNERS[Frontend.rich]}[choice]
            )
            mod.run(data_dir=data_dir, dice=Dice(seed))

        elif choice == "3":
            _print_stats(data_dir)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the dice for a reproducible game.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Directory holding the statistics file.",
    ),
    stats: bool = typer.Option(
        False, "--stats",
        help="Show play statistics and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine events to stderr.",
    ),
) -> None:
    """Shut the Box: Triple Trouble."""
    _configure_logging(verbose)

    if stats:
        _print_stats(data_dir)
        return

    if frontend is None:
        _menu_loop(data_dir, seed)
        return

    from backend.engine.gamegenerator import Dice

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(data_dir=data_dir, dice=Dice(seed))


if __name__ == "__main__":
    app()
