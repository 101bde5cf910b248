"""Search algorithms (minimax) and value functions."""

from .action_policy import ActionPolicy
from .value_fn import StateValueFn
from .minimax_policy import MinimaxPolicy, MinimaxConfig, SearchResult

__all__ = [
    "ActionPolicy",
    "StateValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchResult",
]
