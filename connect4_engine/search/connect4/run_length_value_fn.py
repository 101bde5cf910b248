"""Longest-run heuristic for Connect4 minimax."""

from __future__ import annotations

from ...games.connect4 import (
    COLUMN_SIZE,
    PIECE_COUNT_TO_WIN,
    ROW_SIZE,
    WIN_SCORE,
    GameState,
    connect4_terminal_evaluator,
)
from ...games.turn_based_game import TurnBasedGame
from ..value_fn import StateValueFn

HEURISTIC_SCALE = 100.0


def min_win_score(heuristic_scale: float) -> float:
    """
    Largest ``win_score`` that is still too small.

    Covers the widest heuristic gap (a run of 3 against nothing) plus the
    ply adjustment applied to terminal scores during search.
    """
    return abs(heuristic_scale) * (PIECE_COUNT_TO_WIN - 1) + ROW_SIZE * COLUMN_SIZE


def check_win_score(win_score: float, heuristic_scale: float) -> None:
    floor = min_win_score(heuristic_scale)
    if win_score <= floor:
        raise ValueError(
            f"win_score must be greater than {floor} for heuristic_scale="
            f"{heuristic_scale}, got {win_score}"
        )


class Connect4RunLengthValueFn(StateValueFn[GameState]):
    """
    Scores a position by how close each side is to four in a row.

    Terminal states score ``+/- win_score``. Otherwise the value is
    ``heuristic_scale * (own longest run - opponent longest run)``, using the
    run lengths the GameState collected at construction. ``win_score`` must
    exceed :func:`min_win_score` so any win outranks any heuristic value.
    """

    def __init__(
        self,
        win_score: float = WIN_SCORE,
        heuristic_scale: float = HEURISTIC_SCALE,
    ) -> None:
        check_win_score(win_score, heuristic_scale)
        self.win_score = win_score
        self.heuristic_scale = heuristic_scale

    def evaluate(
        self,
        game: TurnBasedGame[GameState],
        state: GameState,
    ) -> float:
        if game.is_terminal(state):
            return connect4_terminal_evaluator(
                state,
                root_piece=game.current_player(state),
                win_score=self.win_score,
            )
        own = state.attempt.contiguous_count
        other = state.opponent_attempt.contiguous_count
        return self.heuristic_scale * (own - other)
