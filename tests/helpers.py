"""Board builders shared by the tests."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from connect4_engine.games.connect4 import COLUMN_SIZE, ROW_SIZE, Board

A = [1, 2, 1, 2, 1, 2, 1]
B = [2, 1, 2, 1, 2, 1, 2]


def empty_grid() -> List[List[int]]:
    return [[0] * COLUMN_SIZE for _ in range(ROW_SIZE)]


def draw_grid() -> List[List[int]]:
    """Full board with no four in a row (longest run is 2 in every direction)."""
    return [list(A), list(A), list(B), list(B), list(A), list(A)]


def board_with(pieces: Iterable[Tuple[int, int, int]]) -> Board:
    """Board with ``(row, column, piece)`` cells set, everything else empty."""
    grid = empty_grid()
    for row, column, piece in pieces:
        grid[row][column] = piece
    return Board.from_grid(grid)
