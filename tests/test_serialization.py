"""Tests for JSON board (de)serialization."""

from __future__ import annotations

import json

import pytest

from connect4_engine.games.connect4 import (
    PLAYER_TWO,
    GameState,
    MalformedInputError,
    board_from_json,
    board_to_json,
)

from .helpers import draw_grid, empty_grid


def test_round_trip():
    grid = draw_grid()
    board = board_from_json(json.dumps(grid))
    assert board.to_grid() == grid
    assert board_to_json(board) == json.dumps(grid)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "{}",
        "[1, 2, 3]",
        json.dumps(empty_grid()[:-1]),
        json.dumps([[0] * 6 for _ in range(6)]),
        json.dumps([[0] * 7 for _ in range(5)] + [[0, 0, 0, 0, 0, 0, 9]]),
    ],
)
def test_malformed_board(text):
    with pytest.raises(MalformedInputError):
        board_from_json(text)


def test_game_state_from_json():
    grid = empty_grid()
    grid[5][3] = 1
    state = GameState.from_json(json.dumps(grid), "2")
    assert state.current_player == PLAYER_TWO
    assert state.board.at(5, 3) == 1
    assert not state.is_over()
