"""CLI for playing engine vs engine at different search depths."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import numpy as np
import tyro

from ..utils.match import play_match
from .common import configure_logging, resolve_config


def play_engine_vs_engine(
    depth1: int = 4,
    depth2: int = 2,
    num_games: int = 4,
    randomize_first_player: bool = True,
    random_tiebreak: bool = True,
    config: Optional[Path] = None,
    seed: int = 42,
    log_level: Optional[str] = None,
):
    """
    Play a match between two minimax engines.

    Args:
        depth1: Search depth of engine 1
        depth2: Search depth of engine 2
        num_games: Number of games to play
        randomize_first_player: Randomly choose who starts each game
        random_tiebreak: Break equal scores randomly so games differ
        config: YAML engine config for the remaining search settings
        seed: Random seed
        log_level: Logging level override
    """
    engine_config = resolve_config(config, log_level=log_level, seed=seed)
    configure_logging(engine_config.log_level)

    policies = []
    for offset, depth in enumerate((depth1, depth2)):
        search = replace(engine_config.search, depth=depth, random_tiebreak=random_tiebreak)
        policies.append(search.make_policy(np.random.default_rng(seed + offset)))

    wins1, draws, wins2, lengths = play_match(
        policies[0],
        policies[1],
        num_games=num_games,
        seed=seed,
        randomize_first_player=randomize_first_player,
        collect_episode_lengths=True,
    )

    print("=" * 50)
    print(f"Engine depth {depth1} vs engine depth {depth2}")
    print("=" * 50)
    print(f"Engine 1 wins: {wins1}")
    print(f"Draws:         {draws}")
    print(f"Engine 2 wins: {wins2}")
    if lengths:
        print(f"Average game length: {sum(lengths) / len(lengths):.1f} plies")


def main() -> None:
    tyro.cli(play_engine_vs_engine)


if __name__ == "__main__":
    main()
