"""Minimax decision engine for Connect Four."""

from .games.connect4 import Board, GameResult, GameState, Player
from .search import MinimaxConfig, MinimaxPolicy, SearchResult

__all__ = [
    "Board",
    "GameResult",
    "GameState",
    "MinimaxConfig",
    "MinimaxPolicy",
    "Player",
    "SearchResult",
]
