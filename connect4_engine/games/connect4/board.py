"""Fixed-size Connect4 grid with gravity placement."""

from __future__ import annotations

import json
from typing import List, Sequence

import numpy as np

from .constants import CELL_VALUES, COLUMN_SIZE, EMPTY, ROW_SIZE
from .errors import IllegalMoveError, MalformedInputError, OutOfBoundsError
from .player import Player

_RENDER_SYMBOLS = {0: ".", 1: "X", 2: "O"}


class Board:
    """
    ``ROW_SIZE`` x ``COLUMN_SIZE`` grid of cell values.

    Row 0 is the top of the board, row ``ROW_SIZE - 1`` the bottom.
    Cells hold ``EMPTY``, ``PLAYER_ONE_PIECE`` or ``PLAYER_TWO_PIECE``.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray | None = None) -> None:
        if cells is None:
            cells = np.zeros((ROW_SIZE, COLUMN_SIZE), dtype=np.int8)
        if cells.shape != (ROW_SIZE, COLUMN_SIZE):
            raise MalformedInputError(
                f"Board must be {ROW_SIZE}x{COLUMN_SIZE}, got shape {cells.shape}"
            )
        self._cells = cells

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "Board":
        """Build a board from a nested ``rows x columns`` list of 0/1/2."""
        if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
            raise MalformedInputError("Board must be a list of rows")
        if any(isinstance(row, (str, bytes)) or not isinstance(row, Sequence) for row in grid):
            raise MalformedInputError("Each board row must be a list of cells")
        if len(grid) != ROW_SIZE or any(len(row) != COLUMN_SIZE for row in grid):
            raise MalformedInputError(
                f"Board must be {ROW_SIZE} rows of {COLUMN_SIZE} cells"
            )
        for row in grid:
            for value in row:
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise MalformedInputError(f"Cell value must be an integer, got {value!r}")
                if value not in CELL_VALUES:
                    raise MalformedInputError(f"Unknown cell value: {value}")
        return cls(np.array(grid, dtype=np.int8))

    def to_grid(self) -> List[List[int]]:
        return self._cells.tolist()

    def duplicate(self) -> "Board":
        """Independent, writable copy."""
        return Board(self._cells.copy())

    def freeze(self) -> "Board":
        """Make the cells read-only; returns ``self``."""
        self._cells.flags.writeable = False
        return self

    @property
    def is_frozen(self) -> bool:
        return not self._cells.flags.writeable

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def at(self, row: int, column: int) -> int:
        if not (0 <= row < ROW_SIZE and 0 <= column < COLUMN_SIZE):
            raise OutOfBoundsError(row, column)
        return int(self._cells[row, column])

    def is_open_space(self, row: int, column: int) -> bool:
        try:
            return self.at(row, column) == EMPTY
        except OutOfBoundsError as exc:
            raise OutOfBoundsError(row, column, f"Space is not open: {exc}") from exc

    def is_column_open(self, column: int) -> bool:
        return self.is_open_space(0, column)

    def is_full(self) -> bool:
        return not np.any(self._cells[0] == EMPTY)

    def lowest_open_row(self, column: int) -> int | None:
        for row in range(ROW_SIZE - 1, -1, -1):
            if self._cells[row, column] == EMPTY:
                return row
        return None

    def place_piece(self, player: Player, column: int) -> int:
        """Drop ``player``'s piece into ``column``; returns the landing row."""
        if self.is_frozen:
            raise IllegalMoveError("Board is frozen; place pieces on a duplicate()")
        if not 0 <= column < COLUMN_SIZE:
            raise IllegalMoveError(f"Illegal column: {column}")
        row = self.lowest_open_row(column)
        if row is None:
            raise IllegalMoveError(f"Column {column} is full")
        self._cells[row, column] = player.piece
        return row

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def render(self) -> str:
        header = " " + " ".join(str(c) for c in range(COLUMN_SIZE))
        rows = [
            "|" + "|".join(_RENDER_SYMBOLS[int(v)] for v in row) + "|"
            for row in self._cells
        ]
        return "\n".join([header, *rows])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        return json.dumps(self.to_grid())

    def __repr__(self) -> str:
        return f"Board({self})"
