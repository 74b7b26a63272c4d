"""Tile availability and dice-count rules."""

from __future__ import annotations

from collections.abc import Set

from backend.config import ONE_DIE_MAX_VALUE
from backend.models.board import Board, Position, Tile


def is_available(
    tile: Tile, board: Board, selection: Set[Position] = frozenset()
) -> bool:
    """Return True if *tile* may be added to *selection*.

    A tile is available if it is open and the tile directly in front of it
    (same column, row - 1) is shut or already selected. Front-row tiles are
    available whenever they are open.
    """
    if tile.is_shut:
        return False
    if tile.row == 0:
        return True

    front = board.tile_at(tile.row - 1, tile.col)
    return front.is_shut or front.pos in selection


def remove_with_dependents(
    selection: Set[Position], tile: Tile, board: Board
) -> frozenset[Position]:
    """Drop *tile* from *selection* along with the tiles that relied on it.

    Walks back through the tile's column and removes every selected tile
    that is no longer available once its front neighbour is gone.
    """
    remaining = set(selection)
    remaining.discard(tile.pos)
    for behind in board.tiles_by_column(tile.col)[tile.row + 1 :]:
        if behind.pos in remaining and not is_available(behind, board, remaining):
            remaining.discard(behind.pos)
    return frozenset(remaining)


def can_roll_one_die(board: Board) -> bool:
    """Return True if the player may choose to roll a single die.

    Only allowed on the back row: rows 0 and 1 fully shut, and no open
    tile above ``ONE_DIE_MAX_VALUE``.
    """
    front_rows = board.tiles_by_row(0) + board.tiles_by_row(1)
    if any(t.is_open for t in front_rows):
        return False
    max_open = max((t.value for t in board.open_tiles()), default=0)
    return max_open <= ONE_DIE_MAX_VALUE
