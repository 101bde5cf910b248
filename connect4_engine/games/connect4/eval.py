"""Connect4 evaluation functions for search algorithms."""

from __future__ import annotations

from .state import GameState

WIN_SCORE = 1_000_000.0


def connect4_terminal_evaluator(
    state: GameState,
    root_piece: int,
    win_score: float = WIN_SCORE,
) -> float:
    """``win_score`` if ``root_piece`` won, ``-win_score`` if the other piece won, else 0."""
    if not state.is_over():
        return 0.0

    winner = state.winner
    if winner == root_piece:
        return win_score
    if winner != 0:
        return -win_score
    return 0.0
