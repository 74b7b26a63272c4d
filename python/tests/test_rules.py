"""Availability, cascading deselection and the one-die rule."""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import create_board
from backend.engine.gamerules import (
    can_roll_one_die,
    is_available,
    remove_with_dependents,
)
from backend.models.board import Board

_SHUT_ROW = [0] * 9


# -- fixtures -----------------------------------------------------------------


def _boards() -> list[Board]:
    fresh = create_board()
    return [
        fresh,
        fresh.shut([(0, 0), (1, 0), (0, 4)]),
        fresh.shut([(1, c) for c in range(9)]),
    ]


_SELECTIONS = [
    frozenset(),
    frozenset({(0, 3)}),
    frozenset({(0, 1), (1, 1), (2, 1)}),
]


# -- availability -------------------------------------------------------------


@pytest.mark.parametrize("board", _boards())
@pytest.mark.parametrize("selection", _SELECTIONS)
def test_open_front_row_always_available(board: Board, selection: frozenset) -> None:
    for tile in board.tiles_by_row(0):
        if tile.is_open:
            assert is_available(tile, board, selection), tile.pos


@pytest.mark.parametrize("board", _boards())
@pytest.mark.parametrize("selection", _SELECTIONS)
def test_back_rows_follow_front_neighbour(board: Board, selection: frozenset) -> None:
    for row in (1, 2):
        for tile in board.tiles_by_row(row):
            if tile.is_shut:
                continue
            front = board.tile_at(row - 1, tile.col)
            expected = front.is_shut or front.pos in selection
            assert is_available(tile, board, selection) is expected, tile.pos


def test_shut_tile_never_available() -> None:
    board = create_board().shut([(0, 2), (1, 2), (2, 2)])
    everything = frozenset(t.pos for t in board.tiles)
    for row in range(3):
        assert not is_available(board.tile_at(row, 2), board, everything)


def test_middle_tile_blocked_by_open_front() -> None:
    board = create_board()
    assert not is_available(board.tile_at(1, 5), board)


def test_middle_tile_unblocked_by_selected_front() -> None:
    board = create_board()
    assert is_available(board.tile_at(1, 5), board, {(0, 5)})


def test_back_tile_unblocked_by_shut_middle() -> None:
    board = create_board().shut([(0, 5), (1, 5)])
    assert is_available(board.tile_at(2, 5), board)


def test_back_tile_needs_middle_not_front() -> None:
    board = create_board()
    assert not is_available(board.tile_at(2, 5), board, {(0, 5)})


# -- cascading deselection ----------------------------------------------------


def test_remove_front_drops_whole_chain() -> None:
    board = create_board()
    selection = frozenset({(0, 3), (1, 3), (2, 3), (0, 4)})
    result = remove_with_dependents(selection, board.tile_at(0, 3), board)
    assert result == {(0, 4)}


def test_remove_middle_keeps_front() -> None:
    board = create_board()
    selection = frozenset({(0, 3), (1, 3), (2, 3)})
    result = remove_with_dependents(selection, board.tile_at(1, 3), board)
    assert result == {(0, 3)}


def test_remove_back_only_drops_itself() -> None:
    board = create_board().shut([(0, 3)])
    selection = frozenset({(1, 3), (2, 3)})
    result = remove_with_dependents(selection, board.tile_at(2, 3), board)
    assert result == {(1, 3)}


def test_remove_keeps_tiles_reachable_through_shut_gap() -> None:
    board = create_board().shut([(1, 3)])
    selection = frozenset({(0, 3), (2, 3)})
    result = remove_with_dependents(selection, board.tile_at(0, 3), board)
    assert result == {(2, 3)}


def test_remove_leaves_other_columns_alone() -> None:
    board = create_board()
    selection = frozenset({(0, 1), (1, 1), (0, 2), (1, 2)})
    result = remove_with_dependents(selection, board.tile_at(0, 1), board)
    assert result == {(0, 2), (1, 2)}


# -- one-die rule -------------------------------------------------------------


def test_one_die_not_offered_on_fresh_board() -> None:
    assert not can_roll_one_die(create_board())


def test_one_die_offered_on_low_back_row() -> None:
    board = Board.from_rows([_SHUT_ROW, _SHUT_ROW, [1, 2, 3, 4, 5, 6, 0, 0, 0]])
    assert can_roll_one_die(board)


def test_one_die_not_offered_with_high_back_tile() -> None:
    board = Board.from_rows([_SHUT_ROW, _SHUT_ROW, [1, 0, 0, 0, 0, 0, 7, 0, 0]])
    assert not can_roll_one_die(board)


@pytest.mark.parametrize("row", [0, 1])
def test_one_die_not_offered_with_front_rows_open(row: int) -> None:
    rows = [list(_SHUT_ROW), list(_SHUT_ROW), [1, 2, 0, 0, 0, 0, 0, 0, 0]]
    rows[row][0] = 1
    assert not can_roll_one_die(Board.from_rows(rows))
