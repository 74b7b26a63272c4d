from backend.engine.gamescore.score import score

__all__ = ["score"]
