"""Minimax policy factory for Connect4."""

from __future__ import annotations

from typing import Literal, Optional

import numpy as np

from ...games.connect4 import WIN_SCORE, GameState
from ..minimax_policy import MinimaxConfig, MinimaxPolicy
from ..value_fn import StateValueFn
from .run_length_value_fn import HEURISTIC_SCALE, Connect4RunLengthValueFn
from .terminal_value_fn import Connect4TerminalValueFn

Heuristic = Literal["run_length", "terminal"]


def make_connect4_value_fn(
    heuristic: Heuristic = "run_length",
    *,
    win_score: float = WIN_SCORE,
    heuristic_scale: float = HEURISTIC_SCALE,
) -> StateValueFn[GameState]:
    if heuristic == "run_length":
        return Connect4RunLengthValueFn(win_score=win_score, heuristic_scale=heuristic_scale)
    if heuristic == "terminal":
        return Connect4TerminalValueFn(win_score=win_score)
    raise ValueError(f"Unknown heuristic: {heuristic!r}")


def make_connect4_minimax_policy(
    *,
    depth: Optional[int] = 6,
    heuristic: Heuristic = "run_length",
    use_alpha_beta: bool = True,
    random_tiebreak: bool = False,
    win_score: float = WIN_SCORE,
    heuristic_scale: float = HEURISTIC_SCALE,
    rng: Optional[np.random.Generator] = None,
) -> MinimaxPolicy[GameState]:
    value_fn = make_connect4_value_fn(
        heuristic, win_score=win_score, heuristic_scale=heuristic_scale
    )
    config = MinimaxConfig(
        depth=depth,
        use_alpha_beta=use_alpha_beta,
        random_tiebreak=random_tiebreak,
    )
    return MinimaxPolicy[GameState](
        value_fn=value_fn,
        config=config,
        rng=rng or np.random.default_rng(),
    )
