"""Tests for Player identity and token parsing."""

from __future__ import annotations

import pytest

from connect4_engine.games.connect4 import (
    PLAYER_ONE,
    PLAYER_ONE_PIECE,
    PLAYER_TWO,
    PLAYER_TWO_PIECE,
    MalformedInputError,
    Player,
    next_player,
)


def test_next_player_swaps():
    assert next_player(PLAYER_ONE) == PLAYER_TWO
    assert next_player(PLAYER_TWO) == PLAYER_ONE
    assert PLAYER_ONE.next_player().next_player() == PLAYER_ONE


def test_player_rejects_third_piece():
    with pytest.raises(ValueError):
        Player(3)
    with pytest.raises(ValueError):
        Player(0)


@pytest.mark.parametrize(
    "token, piece",
    [(1, PLAYER_ONE_PIECE), (2, PLAYER_TWO_PIECE), ("1", PLAYER_ONE_PIECE), (" 2 ", PLAYER_TWO_PIECE)],
)
def test_from_token(token, piece):
    assert Player.from_token(token).piece == piece


@pytest.mark.parametrize("token", ["3", "0", "X", "", True, 1.5])
def test_from_token_rejects_unknown(token):
    with pytest.raises(MalformedInputError):
        Player.from_token(token)


def test_symbols():
    assert PLAYER_ONE.symbol == "X"
    assert PLAYER_TWO.symbol == "O"
