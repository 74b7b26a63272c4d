"""Board model for the triple shut-the-box game."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Iterable

from backend.config import COLUMNS, MAX_TILE_VALUE, ROWS

Position = tuple[int, int]


class TileStatus(StrEnum):
    OPEN = "open"
    SHUT = "shut"


@dataclass(frozen=True)
class Tile:
    """A single numbered tile. Row 0 is the front row, row 2 the back row."""

    row: int
    col: int
    value: int
    status: TileStatus = TileStatus.OPEN

    @property
    def pos(self) -> Position:
        return (self.row, self.col)

    @property
    def is_open(self) -> bool:
        return self.status is TileStatus.OPEN

    @property
    def is_shut(self) -> bool:
        return self.status is TileStatus.SHUT


def default_value(row: int, col: int) -> int:
    """Face value of the tile at (row, col) on a fresh board.

    The front and back rows run 1-9 left to right, the middle row 9-1.
    """
    if row == 1:
        return COLUMNS - col
    return col + 1


@dataclass(frozen=True)
class Board:
    """Snapshot of all 27 tiles, stored row-major.

    Boards are never mutated; ``shut`` returns a new board.
    """

    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        if len(self.tiles) != ROWS * COLUMNS:
            raise ValueError(
                f"Expected {ROWS * COLUMNS} tiles for a {ROWS}×{COLUMNS} board, "
                f"got {len(self.tiles)}."
            )
        for index, tile in enumerate(self.tiles):
            expected = divmod(index, COLUMNS)
            if tile.pos != expected:
                raise ValueError(
                    f"Tile at index {index} has position {tile.pos}, "
                    f"expected {expected}."
                )
            if not 1 <= tile.value <= MAX_TILE_VALUE:
                raise ValueError(
                    f"Tile {tile.pos} has value {tile.value}, "
                    f"expected 1-{MAX_TILE_VALUE}."
                )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create(cls) -> Board:
        """Return a fresh board with every tile open."""
        return cls(
            tiles=tuple(
                Tile(row=r, col=c, value=default_value(r, c))
                for r in range(ROWS)
                for c in range(COLUMNS)
            )
        )

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> Board:
        """Build a board from tiles in any order.

        Example::

            Board.from_tiles(Tile(r, c, 1) for r in range(3) for c in range(9))
        """
        ordered = sorted(tiles, key=lambda t: t.pos)
        return cls(tiles=tuple(ordered))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Build a board from three rows of face values, 0 marking a shut tile.

        Shut tiles keep their default face value.
        """
        if len(rows) != ROWS or any(len(row) != COLUMNS for row in rows):
            raise ValueError(f"Expected {ROWS} rows of {COLUMNS} values.")
        tiles: list[Tile] = []
        for r, row in enumerate(rows):
            for c, val in enumerate(row):
                if val == 0:
                    tiles.append(
                        Tile(r, c, default_value(r, c), TileStatus.SHUT)
                    )
                else:
                    tiles.append(Tile(r, c, val))
        return cls(tiles=tuple(tiles))

    # -- queries --------------------------------------------------------------

    def tile_at(self, row: int, col: int) -> Tile:
        if not (0 <= row < ROWS and 0 <= col < COLUMNS):
            raise ValueError(f"No tile at ({row}, {col}).")
        return self.tiles[row * COLUMNS + col]

    def tiles_by_row(self, row: int) -> tuple[Tile, ...]:
        if not 0 <= row < ROWS:
            raise ValueError(f"No row {row}.")
        return self.tiles[row * COLUMNS : (row + 1) * COLUMNS]

    def tiles_by_column(self, col: int) -> tuple[Tile, ...]:
        """Tiles of one column, front to back."""
        if not 0 <= col < COLUMNS:
            raise ValueError(f"No column {col}.")
        return self.tiles[col::COLUMNS]

    def open_tiles(self) -> list[Tile]:
        return [t for t in self.tiles if t.is_open]

    def is_fully_shut(self) -> bool:
        """Check if every tile is shut."""
        return all(t.is_shut for t in self.tiles)

    def value_of(self, positions: Iterable[Position]) -> int:
        return sum(self.tile_at(r, c).value for r, c in positions)

    # -- transitions ----------------------------------------------------------

    def shut(self, positions: Iterable[Position]) -> Board:
        """Return a new board with the tiles at *positions* shut."""
        targets = set(positions)
        for r, c in targets:
            self.tile_at(r, c)
        return Board(
            tiles=tuple(
                replace(t, status=TileStatus.SHUT) if t.pos in targets else t
                for t in self.tiles
            )
        )
