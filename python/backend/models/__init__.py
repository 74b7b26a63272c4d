from backend.models.board import Board, Position, Tile, TileStatus
from backend.models.stats import PlayStats, StatsManager

__all__ = ["Board", "PlayStats", "Position", "StatsManager", "Tile", "TileStatus"]
