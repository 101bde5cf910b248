"""Config package exports."""

from .schema import EngineConfig, SearchConfig, load_config

__all__ = [
    "EngineConfig",
    "SearchConfig",
    "load_config",
]
