"""Connect4 error types."""

from __future__ import annotations


class Connect4Error(Exception):
    """Base class for engine errors."""


class OutOfBoundsError(Connect4Error, IndexError):
    """A (row, column) pair outside the fixed grid."""

    def __init__(self, row: int, column: int, message: str | None = None) -> None:
        self.row = row
        self.column = column
        super().__init__(message or f"row={row} column={column} is out of bounds!")


class IllegalMoveError(Connect4Error, ValueError):
    """Dropping into a full or nonexistent column."""


class MalformedInputError(Connect4Error, ValueError):
    """Serialized board or player token that cannot be decoded."""
