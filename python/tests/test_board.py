"""Board model tests — layout, queries, validation and immutability."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from backend.engine.gamegenerator import create_board
from backend.models.board import Board, Tile, TileStatus


# -- layout -------------------------------------------------------------------


def test_fresh_board_has_27_open_tiles() -> None:
    board = create_board()
    assert len(board.tiles) == 27
    assert all(t.is_open for t in board.tiles)
    assert {t.pos for t in board.tiles} == {(r, c) for r in range(3) for c in range(9)}


def test_fresh_board_layout() -> None:
    board = create_board()
    assert [t.value for t in board.tiles_by_row(0)] == list(range(1, 10))
    assert [t.value for t in board.tiles_by_row(1)] == list(range(9, 0, -1))
    assert [t.value for t in board.tiles_by_row(2)] == list(range(1, 10))


def test_tile_at() -> None:
    board = create_board()
    tile = board.tile_at(1, 2)
    assert tile.pos == (1, 2)
    assert tile.value == 7


def test_tiles_by_column_runs_front_to_back() -> None:
    column = create_board().tiles_by_column(4)
    assert [t.row for t in column] == [0, 1, 2]
    assert all(t.col == 4 for t in column)


@pytest.mark.parametrize("row, col", [(-1, 0), (3, 0), (0, 9), (0, -1)])
def test_tile_at_out_of_range(row: int, col: int) -> None:
    with pytest.raises(ValueError):
        create_board().tile_at(row, col)


# -- validation ---------------------------------------------------------------


def test_wrong_tile_count_rejected() -> None:
    tiles = create_board().tiles[:-1]
    with pytest.raises(ValueError, match="Expected 27 tiles"):
        Board(tiles=tiles)


def test_duplicate_position_rejected() -> None:
    tiles = list(create_board().tiles)
    tiles[1] = tiles[0]
    with pytest.raises(ValueError):
        Board(tiles=tuple(tiles))


@pytest.mark.parametrize("value", [0, 10])
def test_face_value_out_of_range_rejected(value: int) -> None:
    tiles = list(create_board().tiles)
    tiles[5] = replace(tiles[5], value=value)
    with pytest.raises(ValueError):
        Board(tiles=tuple(tiles))


def test_from_tiles_sorts_any_order() -> None:
    tiles = [Tile(r, c, 1) for r in range(3) for c in range(9)]
    board = Board.from_tiles(reversed(tiles))
    assert board.tile_at(2, 8).pos == (2, 8)


def test_from_rows_marks_zero_as_shut() -> None:
    board = Board.from_rows([[1] + [0] * 8, [2] + [0] * 8, [3] + [0] * 8])
    assert [t.value for t in board.tiles_by_column(0)] == [1, 2, 3]
    assert board.tile_at(0, 1).status is TileStatus.SHUT
    assert len(board.open_tiles()) == 3


# -- transitions --------------------------------------------------------------


def test_shut_returns_new_board() -> None:
    board = create_board()
    after = board.shut([(0, 0), (1, 0)])

    assert board.tile_at(0, 0).is_open, "original board must not change"
    assert after.tile_at(0, 0).is_shut
    assert after.tile_at(1, 0).is_shut
    assert len(after.open_tiles()) == 25


def test_shut_unknown_position_rejected() -> None:
    with pytest.raises(ValueError):
        create_board().shut([(5, 5)])


def test_is_fully_shut() -> None:
    board = create_board()
    assert not board.is_fully_shut()
    everything = [t.pos for t in board.tiles]
    assert board.shut(everything).is_fully_shut()
    assert not board.shut(everything[:-1]).is_fully_shut()


def test_value_of() -> None:
    board = create_board()
    assert board.value_of([(0, 0), (1, 0), (2, 0)]) == 11
    assert board.value_of([]) == 0


def test_tiles_are_frozen() -> None:
    tile = create_board().tile_at(0, 0)
    with pytest.raises(FrozenInstanceError):
        tile.status = TileStatus.SHUT  # type: ignore[misc]
