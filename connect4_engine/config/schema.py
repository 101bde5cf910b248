"""Configuration schema for the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml

from ..games.connect4 import WIN_SCORE, GameState
from ..search import MinimaxPolicy
from ..search.connect4 import make_connect4_minimax_policy
from ..search.connect4.run_length_value_fn import HEURISTIC_SCALE, check_win_score

HEURISTICS = ("run_length", "terminal")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SearchConfig:
    depth: Optional[int] = 6
    heuristic: str = "run_length"
    use_alpha_beta: bool = True
    random_tiebreak: bool = False
    win_score: float = WIN_SCORE
    heuristic_scale: float = HEURISTIC_SCALE

    def __post_init__(self) -> None:
        if self.depth is not None and int(self.depth) <= 0:
            raise ValueError(f"search.depth must be >= 1 or null, got {self.depth}")
        if self.heuristic not in HEURISTICS:
            raise ValueError(
                f"search.heuristic must be one of {HEURISTICS}, got {self.heuristic!r}"
            )
        check_win_score(self.win_score, self.heuristic_scale)

    def make_policy(self, rng: Optional[np.random.Generator] = None) -> MinimaxPolicy[GameState]:
        return make_connect4_minimax_policy(
            depth=self.depth,
            heuristic=self.heuristic,  # type: ignore[arg-type]
            use_alpha_beta=self.use_alpha_beta,
            random_tiebreak=self.random_tiebreak,
            win_score=self.win_score,
            heuristic_scale=self.heuristic_scale,
            rng=rng,
        )


@dataclass
class EngineConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        search_data = data.get("search", {}) or {}
        depth = search_data.get("depth", 6)
        search = SearchConfig(
            depth=None if depth is None else int(depth),
            heuristic=str(search_data.get("heuristic", "run_length")),
            use_alpha_beta=bool(search_data.get("use_alpha_beta", True)),
            random_tiebreak=bool(search_data.get("random_tiebreak", False)),
            win_score=float(search_data.get("win_score", WIN_SCORE)),
            heuristic_scale=float(search_data.get("heuristic_scale", HEURISTIC_SCALE)),
        )

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {log_level!r}")

        return cls(search=search, seed=seed, log_level=log_level)

    def make_policy(self) -> MinimaxPolicy[GameState]:
        """Build a minimax policy from the ``search`` section."""
        return self.search.make_policy(np.random.default_rng(self.seed))


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Load EngineConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return EngineConfig.from_dict(data)
