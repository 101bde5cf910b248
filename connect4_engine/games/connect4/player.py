"""Player identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .constants import PIECES, PLAYER_ONE_PIECE, PLAYER_TWO_PIECE
from .errors import MalformedInputError

_SYMBOLS = {PLAYER_ONE_PIECE: "X", PLAYER_TWO_PIECE: "O"}


@dataclass(frozen=True)
class Player:
    """One of the two participants, identified by its piece value."""

    piece: int

    def __post_init__(self) -> None:
        if self.piece not in PIECES:
            raise ValueError(f"Invalid player piece: {self.piece!r}")

    @classmethod
    def from_token(cls, token: Union[int, str]) -> "Player":
        """Decode a player token (``1``/``2`` or ``"1"``/``"2"``)."""
        if isinstance(token, bool):
            raise MalformedInputError(f"Unrecognized player token: {token!r}")
        try:
            piece = int(str(token).strip())
        except ValueError as exc:
            raise MalformedInputError(f"Unrecognized player token: {token!r}") from exc
        if piece not in PIECES:
            raise MalformedInputError(f"Unrecognized player token: {token!r}")
        return cls(piece)

    def next_player(self) -> "Player":
        return next_player(self)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.piece]

    def __str__(self) -> str:
        return f"Player {self.piece} ({self.symbol})"


def next_player(player: Player) -> Player:
    """Swap the two fixed identities; anything else is rejected."""
    if player.piece == PLAYER_ONE_PIECE:
        return PLAYER_TWO
    if player.piece == PLAYER_TWO_PIECE:
        return PLAYER_ONE
    raise ValueError(f"Invalid player piece: {player.piece!r}")


PLAYER_ONE = Player(PLAYER_ONE_PIECE)
PLAYER_TWO = Player(PLAYER_TWO_PIECE)
