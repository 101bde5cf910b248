"""Helpers shared by the CLIs."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..config import EngineConfig, load_config


def resolve_config(
    config: Optional[Path] = None,
    depth: Optional[int] = None,
    log_level: Optional[str] = None,
    seed: Optional[int] = None,
) -> EngineConfig:
    """Load ``config`` (or defaults) and apply command-line overrides."""
    engine_config = load_config(config) if config is not None else EngineConfig()
    if depth is not None:
        engine_config.search = replace(engine_config.search, depth=depth)
    if log_level is not None:
        engine_config.log_level = log_level.upper()
    if seed is not None:
        engine_config.seed = seed
    return engine_config


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
