"""Penalty scoring for finished boards. Lower is better."""

from __future__ import annotations

from backend.config import ROW_WEIGHTS
from backend.models.board import Board


def score(board: Board) -> int:
    """Sum the open tiles, weighting the front row x3, middle x2, back x1.

    A fully shut board scores 0.
    """
    return sum(t.value * ROW_WEIGHTS[t.row] for t in board.open_tiles())
