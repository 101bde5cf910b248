"""Tests for GameState: win detection, legal moves and transitions."""

from __future__ import annotations

import pytest

from connect4_engine.games.connect4 import (
    COLUMN_SIZE,
    EMPTY,
    PIECE_COUNT_TO_WIN,
    PLAYER_ONE,
    PLAYER_TWO,
    ROW_SIZE,
    Board,
    Connect4Game,
    GameResult,
    GameState,
    IllegalMoveError,
    scan_board,
)

from .helpers import board_with, draw_grid

VERTICAL = [(2, 0), (3, 0), (4, 0), (5, 0)]
HORIZONTAL = [(5, 1), (5, 2), (5, 3), (5, 4)]
DIAGONAL = [(2, 0), (3, 1), (4, 2), (5, 3)]
DIAGONAL_UPPER = [(0, 3), (1, 4), (2, 5), (3, 6)]
ANTI_DIAGONAL = [(2, 6), (3, 5), (4, 4), (5, 3)]
ANTI_DIAGONAL_UPPER = [(0, 3), (1, 2), (2, 1), (3, 0)]


def test_empty_board():
    state = GameState.initial()
    assert not state.is_over()
    assert state.winner == EMPTY
    assert state.result == GameResult.NONE
    assert state.legal_moves == tuple(range(COLUMN_SIZE))


@pytest.mark.parametrize(
    "cells",
    [VERTICAL, HORIZONTAL, DIAGONAL, DIAGONAL_UPPER, ANTI_DIAGONAL, ANTI_DIAGONAL_UPPER],
    ids=["vertical", "horizontal", "diagonal", "diagonal_upper", "anti_diagonal", "anti_diagonal_upper"],
)
@pytest.mark.parametrize("winner", [PLAYER_ONE, PLAYER_TWO])
def test_four_in_a_line_wins(cells, winner):
    board = board_with((row, column, winner.piece) for row, column in cells)
    state = GameState(board, winner.next_player())
    assert state.is_over()
    assert state.winner == winner.piece
    assert state.is_winner(winner)
    assert not state.is_winner(winner.next_player())


def test_three_in_a_line_is_not_a_win():
    board = board_with((5, column, PLAYER_ONE.piece) for column in range(3))
    state = GameState(board, PLAYER_TWO)
    assert not state.is_over()
    assert state.winner == EMPTY


def test_broken_line_is_not_a_win():
    pieces = [(5, 0, 1), (5, 1, 1), (5, 2, 2), (5, 3, 1), (5, 4, 1)]
    state = GameState(board_with(pieces), PLAYER_ONE)
    assert not state.is_over()


def test_full_board_without_line_is_draw():
    state = GameState(Board.from_grid(draw_grid()), PLAYER_ONE)
    assert state.is_over()
    assert state.is_draw()
    assert state.result == GameResult.DRAW
    assert state.winner == EMPTY
    assert state.legal_moves == ()


def test_both_players_with_four_resolves_to_player_one():
    pieces = [(5, c, PLAYER_ONE.piece) for c in range(4)]
    pieces += [(0, c, PLAYER_TWO.piece) for c in range(3, 7)]
    state = GameState(board_with(pieces), PLAYER_TWO)
    assert state.result == GameResult.PLAYER_ONE_WINS


def test_vertical_drops_by_one_player():
    board = Board.empty()
    player_a = PLAYER_TWO
    player_b = PLAYER_ONE
    for _ in range(PIECE_COUNT_TO_WIN):
        board.place_piece(player_a, 0)

    state = GameState(board, player_b)
    assert not state.is_winner(player_b)
    assert state.is_winner(player_a)
    assert state.is_over()


def test_attempt_tracks_longest_runs():
    pieces = [(5, 0, 1), (5, 1, 1), (5, 2, 1), (5, 4, 2)]
    state = GameState(board_with(pieces), PLAYER_ONE)
    assert state.attempt.piece == PLAYER_ONE.piece
    assert state.attempt.contiguous_count == 3
    assert state.opponent_attempt.piece == PLAYER_TWO.piece
    assert state.opponent_attempt.contiguous_count == 1


def test_attempt_counts_run_at_board_edge():
    pieces = [(5, 4, 1), (5, 5, 1), (5, 6, 1)]
    scan = scan_board(board_with(pieces).cells)
    assert scan.longest_runs[PLAYER_ONE.piece] == 3
    assert scan.longest_runs[PLAYER_TWO.piece] == 0
    assert not scan.winners


def test_runs_do_not_wrap_between_rows():
    pieces = [(4, 5, 1), (4, 6, 1), (5, 0, 1), (5, 1, 1)]
    scan = scan_board(board_with(pieces).cells)
    assert scan.longest_runs[PLAYER_ONE.piece] == 2
    assert not scan.winners


def test_legal_moves_skip_full_columns():
    board = Board.empty()
    for i in range(ROW_SIZE):
        board.place_piece(PLAYER_ONE if i % 2 == 0 else PLAYER_TWO, 3)
    state = GameState(board, PLAYER_ONE)
    assert 3 not in state.legal_moves
    assert state.legal_moves == (0, 1, 2, 4, 5, 6)
    assert state.legal_moves is state.legal_moves


def test_child_state_swaps_roles_and_copies_board():
    parent = GameState.initial(PLAYER_ONE)
    child = parent.child_state(4)

    assert child.current_player == PLAYER_TWO
    assert child.opponent == PLAYER_ONE
    assert child.board.at(ROW_SIZE - 1, 4) == PLAYER_ONE.piece
    assert parent.board.at(ROW_SIZE - 1, 4) == EMPTY

    grandchild = child.child_state(4)
    assert grandchild.board.at(ROW_SIZE - 2, 4) == PLAYER_TWO.piece
    assert child.board.at(ROW_SIZE - 2, 4) == EMPTY


def test_child_state_rejects_full_column():
    board = Board.empty()
    for i in range(ROW_SIZE):
        board.place_piece(PLAYER_ONE if i % 2 == 0 else PLAYER_TWO, 0)
    state = GameState(board, PLAYER_ONE)
    with pytest.raises(IllegalMoveError):
        state.child_state(0)


def test_state_board_is_read_only():
    state = GameState.initial()
    with pytest.raises(IllegalMoveError):
        state.board.place_piece(PLAYER_ONE, 0)


def test_caller_board_stays_writable():
    board = Board.empty()
    state = GameState(board, PLAYER_ONE)

    assert board.place_piece(PLAYER_ONE, 3) == ROW_SIZE - 1
    assert state.board.at(ROW_SIZE - 1, 3) == EMPTY
    assert state.board.is_frozen and not board.is_frozen


def test_frozen_board_is_shared():
    board = Board.empty().freeze()
    assert GameState(board, PLAYER_ONE).board is board


def test_rules_adapter_outcomes():
    game = Connect4Game()
    start = game.initial_state()
    assert game.legal_actions(start) == tuple(range(COLUMN_SIZE))
    assert game.current_player(start) == PLAYER_ONE.piece
    assert game.winner(start) is None

    child = game.apply_action(start, 2)
    assert game.current_player(child) == PLAYER_TWO.piece
    assert start.board.at(ROW_SIZE - 1, 2) == EMPTY

    won = GameState(board_with([(5, c, PLAYER_TWO.piece) for c in range(4)]), PLAYER_ONE)
    assert game.is_terminal(won)
    assert game.winner(won) == PLAYER_TWO.piece
    with pytest.raises(ValueError):
        game.apply_action(won, 5)

    drawn = GameState(Board.from_grid(draw_grid()), PLAYER_ONE)
    assert game.winner(drawn) == EMPTY
    assert game.legal_actions(drawn) == ()
