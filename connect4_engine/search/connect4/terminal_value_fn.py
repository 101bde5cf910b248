"""Terminal-only value function for Connect4 minimax."""

from __future__ import annotations

from ...games.connect4 import WIN_SCORE, GameState, connect4_terminal_evaluator
from ...games.turn_based_game import TurnBasedGame
from ..value_fn import StateValueFn


class Connect4TerminalValueFn(StateValueFn[GameState]):
    """Uses connect4_terminal_evaluator for terminal states, 0.0 otherwise."""

    def __init__(self, win_score: float = WIN_SCORE) -> None:
        self.win_score = win_score

    def evaluate(
        self,
        game: TurnBasedGame[GameState],
        state: GameState,
    ) -> float:
        if not game.is_terminal(state):
            return 0.0
        current_piece = game.current_player(state)
        return connect4_terminal_evaluator(state, root_piece=current_piece, win_score=self.win_score)
