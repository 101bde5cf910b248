"""Connect4 rules over immutable GameState (for search algorithms)."""

from __future__ import annotations

from typing import Optional, Sequence

from ..turn_based_game import Action, TurnBasedGame
from .board import Board
from .player import PLAYER_ONE, Player
from .state import GameState


class Connect4Game(TurnBasedGame[GameState]):
    """Pure Connect4 transitions: every action yields a new GameState."""

    def initial_state(self, player: Player = PLAYER_ONE) -> GameState:
        return GameState(Board.empty(), player)

    def legal_actions(self, state: GameState) -> Sequence[Action]:
        return state.legal_moves

    def apply_action(self, state: GameState, action: Action) -> GameState:
        if state.is_over():
            raise ValueError("Cannot apply action in terminal state")
        return state.child_state(action)

    def current_player(self, state: GameState) -> int:
        return state.current_player.piece

    def is_terminal(self, state: GameState) -> bool:
        return state.is_over()

    def winner(self, state: GameState) -> Optional[int]:
        if not state.is_over():
            return None
        return state.winner
