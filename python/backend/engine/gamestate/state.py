"""Immutable snapshot of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gamerules.rules import can_roll_one_die, is_available
from backend.models.board import Board, Position, Tile


class GameStatus(StrEnum):
    START = "start"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class TurnPhase(StrEnum):
    ROLL = "roll"
    SELECT = "select"


TERMINAL = frozenset({GameStatus.WON, GameStatus.LOST})


@dataclass(frozen=True)
class GameState:
    """Holds the board, turn phase, selection, and the current roll.

    Every transition in ``backend.engine.gameplay`` returns a new snapshot.
    ``target`` is ``None`` outside the select phase, and ``score`` is only
    set once the game has ended.
    """

    board: Board = field(default_factory=Board.create)
    status: GameStatus = GameStatus.START
    phase: TurnPhase = TurnPhase.ROLL
    selection: frozenset[Position] = frozenset()
    dice: tuple[int, ...] = ()
    target: int | None = None
    rolling: bool = False
    dice_count: int = 2
    score: int | None = None

    @classmethod
    def from_board(cls, board: Board) -> GameState:
        """Start mid-game from an existing board, ready to roll."""
        return cls(board=board, status=GameStatus.PLAYING)

    # -- queries --------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.status in TERMINAL

    @property
    def selected_sum(self) -> int:
        return self.board.value_of(self.selection)

    @property
    def can_roll_one_die(self) -> bool:
        return not self.is_over and can_roll_one_die(self.board)

    @property
    def effective_dice_count(self) -> int:
        """Dice the next roll uses; falls back to 2 once 1 is not allowed."""
        if self.dice_count == 1 and self.can_roll_one_die:
            return 1
        return 2

    @property
    def accepts_selection(self) -> bool:
        return (
            self.status is GameStatus.PLAYING
            and self.phase is TurnPhase.SELECT
            and not self.rolling
        )

    def is_selectable(self, tile: Tile) -> bool:
        """True if *tile* can be added to the selection right now."""
        return self.accepts_selection and is_available(
            tile, self.board, self.selection
        )
