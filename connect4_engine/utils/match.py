"""Utilities for playing matches between policies."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple, Union

from ..games.connect4 import PLAYER_ONE, Connect4Game, GameState
from ..search.action_policy import ActionPolicy

logger = logging.getLogger(__name__)


def play_game(
    first: ActionPolicy[GameState],
    second: ActionPolicy[GameState],
    start_state: Optional[GameState] = None,
) -> Tuple[GameState, List[int]]:
    """
    Play one game, ``first`` moving in ``start_state``.

    Returns:
        Final state and the list of columns played.
    """
    game = Connect4Game()
    state = start_state or GameState.initial(PLAYER_ONE)
    first_piece = state.current_player.piece
    moves: List[int] = []

    while not state.is_over():
        policy = first if state.current_player.piece == first_piece else second
        column = state.make_move(policy)
        moves.append(column)
        state = game.apply_action(state, column)

    return state, moves


def play_match(
    policy1: ActionPolicy[GameState],
    policy2: ActionPolicy[GameState],
    num_games: int = 10,
    seed: Optional[int] = None,
    randomize_first_player: bool = False,
    collect_episode_lengths: bool = False,
) -> Union[Tuple[int, int, int], Tuple[int, int, int, List[int]]]:
    """
    Play a match between two policies.

    Args:
        policy1: First policy
        policy2: Second policy
        num_games: Number of games to play
        seed: Random seed for choosing who starts
        randomize_first_player: If True, randomly choose who goes first each game.
                               If False, policy1 always goes first (as player 1).
        collect_episode_lengths: If True, also return episode lengths.

    Returns:
        Tuple of (policy1_wins, draws, policy2_wins). If ``collect_episode_lengths``
        is True, also returns the number of plies for every game played.
    """
    rng = random.Random(seed)
    policy1_wins = 0
    draws = 0
    policy2_wins = 0
    episode_lengths: List[int] | None = [] if collect_episode_lengths else None

    for game_idx in range(num_games):
        policy1_first = rng.random() < 0.5 if randomize_first_player else True
        if policy1_first:
            final_state, moves = play_game(policy1, policy2)
            policy1_piece = PLAYER_ONE.piece
        else:
            final_state, moves = play_game(policy2, policy1)
            policy1_piece = PLAYER_ONE.next_player().piece

        if final_state.is_draw():
            draws += 1
        elif final_state.winner == policy1_piece:
            policy1_wins += 1
        else:
            policy2_wins += 1

        logger.info(
            "Game %d: result=%s in %d plies", game_idx, final_state.result.name, len(moves)
        )
        if episode_lengths is not None:
            episode_lengths.append(len(moves))

    if episode_lengths is not None:
        return policy1_wins, draws, policy2_wins, episode_lengths
    return policy1_wins, draws, policy2_wins
