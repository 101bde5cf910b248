"""CLI that picks a move for a serialized board."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import tyro

from ..games.connect4 import Connect4Error, GameState, Player, board_from_json
from .common import configure_logging, resolve_config


def choose_move(
    player: str,
    board: Optional[str] = None,
    board_file: Optional[Path] = None,
    config: Optional[Path] = None,
    depth: Optional[int] = None,
    log_level: Optional[str] = None,
    render: bool = False,
) -> int:
    """
    Print the column the engine plays for ``player``.

    Args:
        player: Player to move ('1' or '2')
        board: Board as a JSON list of rows (0 = empty, 1/2 = pieces)
        board_file: File holding the JSON board (alternative to --board)
        config: YAML engine config (defaults to built-in settings)
        depth: Search depth override
        log_level: Logging level override
        render: Also print the board before the move
    """
    if (board is None) == (board_file is None):
        print("Error: exactly one of --board or --board-file is required")
        sys.exit(1)

    engine_config = resolve_config(config, depth=depth, log_level=log_level)
    configure_logging(engine_config.log_level)

    serialized = board if board is not None else board_file.read_text()
    try:
        state = GameState(board_from_json(serialized), Player.from_token(player))
        if render:
            print(state.board.render())
        column = state.make_move(engine_config.make_policy())
    except Connect4Error as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    print(column)
    return column


def main() -> None:
    tyro.cli(choose_move)


if __name__ == "__main__":
    main()
