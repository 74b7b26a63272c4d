"""
Triple Shut the Box rule engine.
Pure rules over immutable board snapshots; frontends drive it through GamePlay.
"""

from backend.engine.gamegenerator import Dice, create_board, roll_die
from backend.engine.gameplay import GamePlay
from backend.engine.gamerules import is_available
from backend.engine.gamescore import score
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, GameStatus, TurnPhase

can_make_sum = Solver.can_make_sum

__all__ = [
    "Dice",
    "GamePlay",
    "GameState",
    "GameStatus",
    "Solver",
    "TurnPhase",
    "can_make_sum",
    "create_board",
    "is_available",
    "roll_die",
    "score",
]
