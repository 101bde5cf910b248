from __future__ import annotations

from .board import Board
from .constants import (
    COLUMN_SIZE,
    EMPTY,
    PIECE_COUNT_TO_WIN,
    PLAYER_ONE_PIECE,
    PLAYER_TWO_PIECE,
    ROW_SIZE,
)
from .errors import Connect4Error, IllegalMoveError, MalformedInputError, OutOfBoundsError
from .eval import WIN_SCORE, connect4_terminal_evaluator
from .game import Connect4Game
from .lines import Attempt, BoardScan, scan_board
from .player import PLAYER_ONE, PLAYER_TWO, Player, next_player
from .serialization import board_from_json, board_to_json
from .state import GameResult, GameState

__all__ = [
    "Attempt",
    "Board",
    "BoardScan",
    "COLUMN_SIZE",
    "Connect4Error",
    "Connect4Game",
    "EMPTY",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "MalformedInputError",
    "OutOfBoundsError",
    "PIECE_COUNT_TO_WIN",
    "PLAYER_ONE",
    "PLAYER_ONE_PIECE",
    "PLAYER_TWO",
    "PLAYER_TWO_PIECE",
    "Player",
    "ROW_SIZE",
    "WIN_SCORE",
    "board_from_json",
    "board_to_json",
    "connect4_terminal_evaluator",
    "next_player",
    "scan_board",
]
