from backend.engine.gamestate.state import TERMINAL, GameState, GameStatus, TurnPhase

__all__ = ["TERMINAL", "GameState", "GameStatus", "TurnPhase"]
