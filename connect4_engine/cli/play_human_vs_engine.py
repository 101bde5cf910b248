"""CLI for playing against the engine."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import tyro

from ..games.connect4 import PLAYER_ONE, Connect4Game, GameState
from .common import configure_logging, resolve_config


def _read_column(state: GameState) -> int:
    legal_moves = list(state.legal_moves)
    print(f"Your turn! Legal columns: {legal_moves}")
    while True:
        try:
            column = int(input(f"Enter column ({legal_moves[0]}-{legal_moves[-1]}): "))
        except ValueError:
            print("Please enter a valid number!")
            continue
        if column in legal_moves:
            return column
        print(f"Invalid column! Legal columns: {legal_moves}")


def play_human_vs_engine(
    human_first: bool = True,
    depth: Optional[int] = None,
    config: Optional[Path] = None,
    log_level: Optional[str] = None,
):
    """
    Play a game against the minimax engine.

    Args:
        human_first: Whether human plays first (X)
        depth: Search depth override
        config: YAML engine config
        log_level: Logging level override
    """
    engine_config = resolve_config(config, depth=depth, log_level=log_level)
    configure_logging(engine_config.log_level)
    policy = engine_config.make_policy()

    game = Connect4Game()
    state = game.initial_state(PLAYER_ONE)
    human_piece = PLAYER_ONE.piece if human_first else PLAYER_ONE.next_player().piece

    print("=" * 50)
    print("Connect Four - Human vs Engine")
    print("=" * 50)
    print(f"Search depth: {engine_config.search.depth or 'full'}")
    print(f"Human plays: {'first (X)' if human_first else 'second (O)'}")
    print("=" * 50)
    print()

    while not state.is_over():
        print(state.board.render())
        if state.current_player.piece == human_piece:
            column = _read_column(state)
        else:
            print("Engine's turn...")
            column = state.make_move(policy)
            print(f"Engine chose column: {column}")
        state = game.apply_action(state, column)
        print()

    print(state.board.render())
    if state.is_draw():
        print("It's a draw!")
    elif state.winner == human_piece:
        print("You win!")
    else:
        print("Engine wins!")


def main() -> None:
    tyro.cli(play_human_vs_engine)


if __name__ == "__main__":
    main()
