"""Fresh boards and dice rolls."""

from __future__ import annotations

import random

from backend.config import DIE_FACES
from backend.models.board import Board


def create_board() -> Board:
    """Return a fresh board with all 27 tiles open."""
    return Board.create()


class Dice:
    """Uniform six-sided dice backed by a seedable ``random.Random``.

    Pass a seed (or a prepared generator) to make rolls reproducible.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def roll_die(self) -> int:
        return self._rng.randint(1, DIE_FACES)

    def roll(self, count: int) -> tuple[int, ...]:
        """Roll *count* independent dice."""
        if count not in (1, 2):
            raise ValueError(f"Can only roll 1 or 2 dice, not {count}.")
        return tuple(self.roll_die() for _ in range(count))


_default_dice = Dice()


def roll_die() -> int:
    """Roll a single die using the module-level generator."""
    return _default_dice.roll_die()
