from backend.engine.gameplay.game import (
    GamePlay,
    begin_roll,
    confirm,
    new_game,
    reset,
    resolve_roll,
    roll,
    set_dice_count,
    toggle_tile,
)

__all__ = [
    "GamePlay",
    "begin_roll",
    "confirm",
    "new_game",
    "reset",
    "resolve_roll",
    "roll",
    "set_dice_count",
    "toggle_tile",
]
