from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from ..games.turn_based_game import Action, TurnBasedGame

S = TypeVar("S")


class ActionPolicy(ABC, Generic[S]):
    """
    Chooses a move for the player to move in ``state``.

    A policy holds configuration only; each call starts from scratch, so
    nothing learned while choosing one move leaks into the next.
    """

    @abstractmethod
    def select_action(
        self,
        game: TurnBasedGame[S],
        state: S,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        """
        Choose an action for ``state``.

        Args:
            game: transition rules.
            state: position to move from.
            legal_actions: precomputed legal moves; ``game.legal_actions`` is
                used when ``None``.
        """
        raise NotImplementedError
