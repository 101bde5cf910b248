"""Connect4-specific value functions and policy factories."""

from ...games.connect4 import Connect4Game
from .minimax import make_connect4_minimax_policy, make_connect4_value_fn
from .run_length_value_fn import Connect4RunLengthValueFn, min_win_score
from .terminal_value_fn import Connect4TerminalValueFn

__all__ = [
    "Connect4Game",
    "Connect4RunLengthValueFn",
    "Connect4TerminalValueFn",
    "make_connect4_minimax_policy",
    "make_connect4_value_fn",
    "min_win_score",
]
