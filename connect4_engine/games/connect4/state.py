"""Immutable Connect4 game state."""

from __future__ import annotations

import logging
from enum import IntEnum
from functools import cached_property
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .board import Board
from .constants import COLUMN_SIZE, EMPTY, PLAYER_ONE_PIECE, PLAYER_TWO_PIECE
from .errors import IllegalMoveError
from .lines import Attempt, BoardScan, scan_board
from .player import PLAYER_ONE, Player, next_player
from .serialization import board_from_json

if TYPE_CHECKING:
    from ...search.action_policy import ActionPolicy

logger = logging.getLogger(__name__)


class GameResult(IntEnum):
    NONE = 0
    PLAYER_ONE_WINS = PLAYER_ONE_PIECE
    PLAYER_TWO_WINS = PLAYER_TWO_PIECE
    DRAW = 3


def resolve_result(scan: BoardScan, board: Board) -> GameResult:
    """
    Combine a board scan into a single result.

    If both pieces show four in a row (only possible on malformed input),
    player one takes precedence.
    """
    if PLAYER_ONE_PIECE in scan.winners:
        return GameResult.PLAYER_ONE_WINS
    if PLAYER_TWO_PIECE in scan.winners:
        return GameResult.PLAYER_TWO_WINS
    if board.is_full():
        return GameResult.DRAW
    return GameResult.NONE


class GameState:
    """
    Snapshot of (board, player to move).

    The result and run-length attempts are computed once at construction.
    A writable board is copied and the copy frozen, so the caller keeps a
    board it can still play on and the state never changes afterwards.
    An already frozen board is shared as is.
    """

    def __init__(self, board: Board, current_player: Player) -> None:
        if not board.is_frozen:
            board = board.duplicate().freeze()
        self._board = board
        self._current_player = current_player
        self._opponent = next_player(current_player)
        self._scan = scan_board(board.cells)
        self._result = resolve_result(self._scan, board)

    @classmethod
    def initial(cls, player: Player = PLAYER_ONE) -> "GameState":
        return cls(Board.empty(), player)

    @classmethod
    def from_json(cls, serialized_board: str, player_token: Union[int, str]) -> "GameState":
        return cls(board_from_json(serialized_board), Player.from_token(player_token))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def opponent(self) -> Player:
        return self._opponent

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def winner(self) -> int:
        """Winning piece, or ``EMPTY`` when nobody has won (including draws)."""
        if self._result in (GameResult.PLAYER_ONE_WINS, GameResult.PLAYER_TWO_WINS):
            return int(self._result)
        return EMPTY

    @property
    def attempt(self) -> Attempt:
        """Longest run for the player to move."""
        return self._scan.attempt(self._current_player.piece)

    @property
    def opponent_attempt(self) -> Attempt:
        return self._scan.attempt(self._opponent.piece)

    def is_over(self) -> bool:
        return self._result != GameResult.NONE

    def is_draw(self) -> bool:
        return self._result == GameResult.DRAW

    def is_winner(self, player: Player) -> bool:
        return self.winner == player.piece

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    @cached_property
    def legal_moves(self) -> Tuple[int, ...]:
        """Columns whose top cell is open, ascending."""
        return tuple(c for c in range(COLUMN_SIZE) if self._board.is_column_open(c))

    def is_legal_move(self, column: int) -> bool:
        return column in self.legal_moves

    def child_state(self, column: int) -> "GameState":
        """State after the player to move drops into ``column``."""
        if not self.is_legal_move(column):
            raise IllegalMoveError(f"Column {column} is not a legal move")
        next_board = self._board.duplicate()
        next_board.place_piece(self._current_player, column)
        return GameState(next_board.freeze(), self._opponent)

    def make_move(self, policy: Optional["ActionPolicy[GameState]"] = None) -> int:
        """
        Run a fresh search from this position and return the chosen column.

        Falls back to the first legal column if the search comes back with a
        column that is not legal here.
        """
        from ...search.connect4 import make_connect4_minimax_policy
        from .game import Connect4Game

        if self.is_over():
            raise IllegalMoveError(f"Game is already over ({self._result.name})")
        if policy is None:
            policy = make_connect4_minimax_policy()
        best_move = policy.select_action(Connect4Game(), self, self.legal_moves)
        if best_move not in self.legal_moves:
            logger.warning(
                "Search returned illegal column %s; falling back to %s",
                best_move,
                self.legal_moves[0],
            )
            return self.legal_moves[0]
        return best_move

    def __repr__(self) -> str:
        return (
            f"GameState(current_player={self._current_player.piece}, "
            f"result={self._result.name}, board={self._board})"
        )
