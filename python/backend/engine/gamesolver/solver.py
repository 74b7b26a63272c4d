"""Feasibility solver — can a dice total be matched by a legal selection?"""

from __future__ import annotations

from itertools import product

from backend.config import COLUMNS
from backend.models.board import Board, Position

Choice = tuple[int, tuple[Position, ...]]


class Solver:
    """Stateless solver — all methods are static.

    A player may select a tile together with the tiles behind it in the
    same turn, and a shut tile unblocks the tile behind it. Each column is
    therefore a run of chain segments split by shut tiles, and a legal pick
    from the column takes a front-to-back prefix of every segment.
    """

    @staticmethod
    def column_choices(board: Board, col: int) -> list[Choice]:
        """Return ``(sum, positions)`` for each distinct sum, ascending.

        Positions run front to back. The empty pick comes first.
        """
        segments: list[list[Position]] = []
        values: list[list[int]] = []
        previous_open = False
        for tile in board.tiles_by_column(col):
            if tile.is_shut:
                previous_open = False
                continue
            if not previous_open:
                segments.append([])
                values.append([])
            segments[-1].append(tile.pos)
            values[-1].append(tile.value)
            previous_open = True

        prefix_ranges = [range(len(seg) + 1) for seg in segments]
        best: dict[int, tuple[Position, ...]] = {}
        for lengths in product(*prefix_ranges):
            total = sum(sum(vals[:n]) for vals, n in zip(values, lengths))
            if total in best:
                continue
            best[total] = tuple(
                pos for seg, n in zip(segments, lengths) for pos in seg[:n]
            )
        return sorted(best.items())

    @staticmethod
    def column_options(board: Board) -> list[list[int]]:
        """Return the sums each column can contribute, ascending, 0 first."""
        return [
            [total for total, _ in Solver.column_choices(board, col)]
            for col in range(COLUMNS)
        ]

    @staticmethod
    def can_make_sum(target: int | None, board: Board) -> bool:
        """Return True if some legal selection sums exactly to *target*.

        A missing or zero target needs nothing and is always satisfiable.
        """
        if not target:
            return True
        if target < 0:
            return False
        return Solver._search(target, Solver.column_options(board)) is not None

    @staticmethod
    def find_selection(target: int, board: Board) -> tuple[Position, ...] | None:
        """Return one legal selection summing to *target*, or ``None``.

        Positions are ordered front to back within each column so they can
        be selected one after another.
        """
        if target <= 0:
            return None
        choices = [Solver.column_choices(board, col) for col in range(COLUMNS)]
        picks = Solver._search(
            target, [[total for total, _ in col] for col in choices]
        )
        if picks is None:
            return None

        selection: list[Position] = []
        for col, index in enumerate(picks):
            selection.extend(choices[col][index][1])
        return tuple(selection)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _search(target: int, options: list[list[int]]) -> list[int] | None:
        """Depth-first search over columns.

        Returns, per column, the index of the option taken, or ``None``.
        """
        picks: list[int] = []

        def check(col: int, current: int) -> bool:
            if current == target:
                picks.extend([0] * (len(options) - col))
                return True
            if col >= len(options):
                return False
            for index, val in enumerate(options[col]):
                if current + val > target:
                    break
                picks.append(index)
                if check(col + 1, current + val):
                    return True
                picks.pop()
            return False

        return picks if check(0, 0) else None
