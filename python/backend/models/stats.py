"""Play statistics persistence and management."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from backend.config import SCORE_MILESTONES, STATS_KEY

logger = logging.getLogger(__name__)


def _zero_milestones() -> dict[str, int]:
    return {str(m): 0 for m in SCORE_MILESTONES}


@dataclass
class PlayStats:
    games_played: int = 0
    wins: int = 0
    total_score: int = 0
    best_score: int | None = None
    # Games finished with a score at or below each threshold.
    milestones: dict[str, int] = field(default_factory=_zero_milestones)

    @property
    def losses(self) -> int:
        return self.games_played - self.wins

    @property
    def average_score(self) -> float:
        if not self.games_played:
            return 0.0
        return self.total_score / self.games_played

    @property
    def win_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.wins / self.games_played

    @classmethod
    def from_dict(cls, data: dict) -> PlayStats:
        milestones = _zero_milestones()
        for key, count in dict(data.get("milestones", {})).items():
            if key in milestones:
                milestones[key] = int(count)
        best = data.get("best_score")
        return cls(
            games_played=int(data.get("games_played", 0)),
            wins=int(data.get("wins", 0)),
            total_score=int(data.get("total_score", 0)),
            best_score=None if best is None else int(best),
            milestones=milestones,
        )


class StatsManager:
    """Loads, saves, and updates play statistics in a JSON file.

    The file holds one object under ``STATS_KEY``. Anything that cannot be
    read falls back to zeroed statistics.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self.stats = PlayStats()
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
            self.stats = PlayStats.from_dict(data[STATS_KEY])
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as exc:
            logger.warning(
                "Could not read stats from %s (%s); starting fresh.",
                self.filepath,
                exc,
            )
            self.stats = PlayStats()

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {STATS_KEY: asdict(self.stats)}
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- updates --------------------------------------------------------------

    def record_game(self, score: int, won: bool) -> PlayStats:
        """Add a finished game and save."""
        stats = self.stats
        stats.games_played += 1
        stats.total_score += score
        if won:
            stats.wins += 1
        if stats.best_score is None or score < stats.best_score:
            stats.best_score = score
        for threshold in SCORE_MILESTONES:
            if score <= threshold:
                stats.milestones[str(threshold)] += 1
        self.save()
        logger.debug("Recorded game: score=%d won=%s", score, won)
        return stats
