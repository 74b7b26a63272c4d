"""Core gameplay logic — rolls, selections, confirmations and win/loss.

The transition functions are pure: each takes a ``GameState`` and returns
a new one. Events that are not allowed in the current state return the
input unchanged. ``GamePlay`` wraps them for a single interactive session.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from backend.config import DIE_FACES
from backend.engine.gamegenerator import Dice, create_board
from backend.engine.gamerules import is_available, remove_with_dependents
from backend.engine.gamescore import score
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, GameStatus, TurnPhase
from backend.models.board import Board, Position

logger = logging.getLogger(__name__)


# -- transitions --------------------------------------------------------------


def new_game() -> GameState:
    return GameState(board=create_board())


def reset(state: GameState | None = None) -> GameState:
    """Discard the board and start over. Allowed from any state.

    *state* is not read; it only keeps the signature in line with the
    other transitions.
    """
    return new_game()


def set_dice_count(state: GameState, count: int) -> GameState:
    """Choose how many dice the next roll uses.

    One die is only accepted while ``state.can_roll_one_die`` holds.
    """
    if state.is_over or state.rolling or state.phase is not TurnPhase.ROLL:
        return state
    if count == 2 or (count == 1 and state.can_roll_one_die):
        return replace(state, dice_count=count)
    return state


def begin_roll(state: GameState) -> GameState:
    """Start a roll. Further input is ignored until ``resolve_roll``."""
    if state.is_over or state.rolling or state.phase is not TurnPhase.ROLL:
        return state
    return replace(
        state,
        status=GameStatus.PLAYING,
        rolling=True,
        selection=frozenset(),
        target=None,
    )


def resolve_roll(state: GameState, values: tuple[int, ...]) -> GameState:
    """Reveal the dice and decide whether the turn can be played.

    If no legal selection matches the total, the game is lost and the
    board is scored as it stands.
    """
    if not state.rolling:
        return state
    values = tuple(values)
    if len(values) != state.effective_dice_count:
        raise ValueError(
            f"Expected {state.effective_dice_count} dice, got {len(values)}."
        )
    if any(not 1 <= v <= DIE_FACES for v in values):
        raise ValueError(f"Dice values must be 1-{DIE_FACES}, got {values}.")

    total = sum(values)
    rolled = replace(
        state, rolling=False, dice=values, dice_count=len(values)
    )
    if not Solver.can_make_sum(total, state.board):
        final = score(state.board)
        logger.info("Rolled %s (%d): no moves left, score %d", values, total, final)
        return replace(rolled, status=GameStatus.LOST, score=final)

    logger.debug("Rolled %s, target %d", values, total)
    return replace(rolled, phase=TurnPhase.SELECT, target=total)


def roll(state: GameState, dice: Dice) -> GameState:
    """Begin and resolve a roll in one step."""
    rolling = begin_roll(state)
    if rolling is state:
        return state
    return resolve_roll(rolling, dice.roll(rolling.effective_dice_count))


def toggle_tile(state: GameState, pos: Position) -> GameState:
    """Select or deselect the tile at *pos*.

    Unavailable tiles are rejected. Deselecting also drops any tile behind
    it that is no longer reachable.
    """
    if not state.accepts_selection:
        return state
    tile = state.board.tile_at(*pos)

    if tile.pos in state.selection:
        selection = remove_with_dependents(state.selection, tile, state.board)
    elif is_available(tile, state.board, state.selection):
        selection = state.selection | {tile.pos}
    else:
        return state
    return replace(state, selection=selection)


def confirm(state: GameState) -> GameState:
    """Shut the selected tiles if they match the target; otherwise no-op."""
    if not state.accepts_selection or not state.selection:
        return state
    if state.selected_sum != state.target:
        return state

    board = state.board.shut(state.selection)
    if board.is_fully_shut():
        logger.info("Box shut, game won")
        return replace(
            state,
            board=board,
            selection=frozenset(),
            status=GameStatus.WON,
            score=0,
        )
    return replace(
        state,
        board=board,
        selection=frozenset(),
        phase=TurnPhase.ROLL,
        target=None,
    )


# -- session ------------------------------------------------------------------


class GamePlay:
    """Orchestrates a single game session.

    Holds the current snapshot and the dice. Each action returns True if
    the event was accepted.
    """

    def __init__(self, dice: Dice | None = None) -> None:
        self.dice = dice if dice is not None else Dice()
        self.state = new_game()

    @classmethod
    def from_board(cls, board: Board, dice: Dice | None = None) -> "GamePlay":
        """Create a session from an existing board (e.g. for a test setup)."""
        obj = cls(dice)
        obj.state = GameState.from_board(board)
        return obj

    def _apply(self, new_state: GameState) -> bool:
        changed = new_state is not self.state
        if changed and new_state.status is not self.state.status:
            logger.debug("Status %s -> %s", self.state.status, new_state.status)
        self.state = new_state
        return changed

    # -- actions ---------------------------------------------------------------

    def roll(self) -> bool:
        return self._apply(roll(self.state, self.dice))

    def begin_roll(self) -> bool:
        return self._apply(begin_roll(self.state))

    def resolve_roll(self, values: tuple[int, ...] | None = None) -> bool:
        """Finish a roll, rolling the dice unless *values* are given."""
        if not self.state.rolling:
            return False
        if values is None:
            values = self.dice.roll(self.state.effective_dice_count)
        return self._apply(resolve_roll(self.state, values))

    def select(self, row: int, col: int) -> bool:
        return self._apply(toggle_tile(self.state, (row, col)))

    def confirm(self) -> bool:
        return self._apply(confirm(self.state))

    def set_dice_count(self, count: int) -> bool:
        return self._apply(set_dice_count(self.state, count))

    def hint(self) -> tuple[Position, ...] | None:
        """Return a selection matching the current target, front to back."""
        if not self.state.accepts_selection or self.state.target is None:
            return None
        return Solver.find_selection(self.state.target, self.state.board)

    def reset(self) -> None:
        self._apply(reset(self.state))

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.status is GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self.state.status is GameStatus.LOST

    @property
    def is_over(self) -> bool:
        return self.state.is_over
