"""Abstract state value function for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..games.turn_based_game import TurnBasedGame

StateT = TypeVar("StateT")


class StateValueFn(Generic[StateT], ABC):
    """
    State evaluator that returns value for ``game.current_player(state)``.

    Terminal states must score wins with a positive value and losses with a
    negative one so the search can rank them by distance.
    """

    @abstractmethod
    def evaluate(self, game: TurnBasedGame[StateT], state: StateT) -> float:
        """
        Higher is better for ``game.current_player(state)``.
        """
        ...
