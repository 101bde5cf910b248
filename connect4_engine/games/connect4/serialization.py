"""JSON grid (de)serialization for boards."""

from __future__ import annotations

import json

from .board import Board
from .errors import MalformedInputError


def board_from_json(serialized_board: str) -> Board:
    """
    Parse a nested JSON list of rows into a :class:`Board`.

    Raises:
        MalformedInputError: on invalid JSON, wrong dimensions or unknown cells.
    """
    try:
        grid = json.loads(serialized_board)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Board is not valid JSON: {exc}") from exc
    if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
        raise MalformedInputError("Board must be a JSON list of rows")
    return Board.from_grid(grid)


def board_to_json(board: Board) -> str:
    return str(board)
