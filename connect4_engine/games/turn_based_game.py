"""Rules interface the minimax search is written against."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

S = TypeVar("S")
Action = int  # column index


class TurnBasedGame(ABC, Generic[S]):
    """
    Move generation and outcome queries for an immutable game state ``S``.

    Implementations never mutate a state: ``apply_action`` returns a new one
    with its own board, so sibling branches of a search stay independent.
    Players are identified by their piece value.
    """

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """Playable columns, ascending. Empty once the board is full."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Child state after the player to move drops into ``action``."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """Piece of the player to move; value functions score for this piece."""

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """True once someone has four in a row or the board is full."""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Outcome of ``state``:

        * winning piece (``PLAYER_ONE_PIECE`` or ``PLAYER_TWO_PIECE``)
        * ``EMPTY`` (0) for a draw
        * None while the game is still running
        """
