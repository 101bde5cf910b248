"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Optional, Sequence, TypeVar

import math
import numpy as np

from ..games.turn_based_game import Action, TurnBasedGame
from .action_policy import ActionPolicy
from .value_fn import StateValueFn

StateT = TypeVar("StateT")

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    # None expands the full tree.
    depth: Optional[int] = 6
    use_alpha_beta: bool = True
    random_tiebreak: bool = False
    value_epsilon: float = 1e-6
    prefer_faster_wins: bool = True


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one root search.

    ``scores`` holds the exact value of the best column; with alpha-beta on,
    other columns may only carry an upper bound.
    """

    column: Action
    score: float
    scores: Dict[Action, float] = field(default_factory=dict)
    nodes: int = 0


class MinimaxPolicy(ActionPolicy[StateT], Generic[StateT]):
    """Negamax-based minimax policy over TurnBasedGame + StateValueFn."""

    def __init__(
        self,
        value_fn: StateValueFn[StateT],
        config: Optional[MinimaxConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.value_fn = value_fn
        self.config = config or MinimaxConfig()
        self.rng = rng or np.random.default_rng()
        self._nodes = 0

    def select_action(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        return self.search(game, state, legal_actions).column

    def search(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> SearchResult:
        depth = self.config.depth
        if depth is not None and depth <= 0:
            raise ValueError("Minimax depth must be >= 1")

        if game.is_terminal(state):
            raise ValueError("Cannot search from a terminal state")

        if legal_actions is None:
            legal_actions = game.legal_actions(state)
        legal_actions = sorted(legal_actions)

        if not legal_actions:
            raise ValueError("No legal actions available for minimax")

        self._nodes = 1
        eps = self.config.value_epsilon
        best_value = -math.inf
        best_actions: list[Action] = []
        scores: Dict[Action, float] = {}
        root_alpha = -math.inf  # Track best value for root-level pruning

        # Random tie-breaks need equal siblings scored exactly, so the
        # child window is widened just below the current best.
        margin = 2 * eps if self.config.random_tiebreak else 0.0

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            value = -self._search(
                game=game,
                state=next_state,
                depth=None if depth is None else depth - 1,
                ply=1,
                alpha=-math.inf,
                beta=-(root_alpha - margin),  # Tell child: beat -root_alpha or I don't care
            )
            scores[action] = value

            if value > best_value + eps:
                best_value = value
                best_actions = [action]
            elif abs(value - best_value) <= eps:
                best_actions.append(action)

            if self.config.use_alpha_beta:
                root_alpha = max(root_alpha, value)

        # Fallback if all values were -inf (edge case)
        if not best_actions:
            column = legal_actions[0]
        elif len(best_actions) == 1 or not self.config.random_tiebreak:
            column = best_actions[0]
        else:
            column = int(self.rng.choice(best_actions))

        logger.debug(
            "Minimax chose column %s (score=%.1f, nodes=%d, depth=%s)",
            column,
            best_value,
            self._nodes,
            depth,
        )
        return SearchResult(column=column, score=best_value, scores=scores, nodes=self._nodes)

    def _search(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: Optional[int],
        ply: int,
        alpha: float,
        beta: float,
    ) -> float:
        self._nodes += 1

        if game.is_terminal(state):
            return self._terminal_value(game, state, ply)

        if depth == 0:
            return self.value_fn.evaluate(game, state)

        legal_actions = list(game.legal_actions(state))
        if not legal_actions:
            return self.value_fn.evaluate(game, state)

        value = -math.inf

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            child_value = -self._search(
                game=game,
                state=next_state,
                depth=None if depth is None else depth - 1,
                ply=ply + 1,
                alpha=-beta,
                beta=-alpha,
            )

            if child_value > value:
                value = child_value

            if self.config.use_alpha_beta:
                if value > alpha:
                    alpha = value
                if alpha >= beta:
                    break

        return value

    def _terminal_value(self, game: TurnBasedGame[StateT], state: StateT, ply: int) -> float:
        value = self.value_fn.evaluate(game, state)
        if not self.config.prefer_faster_wins:
            return value
        # Shift wins and losses towards zero by distance from the root.
        if value > 0:
            return value - ply
        if value < 0:
            return value + ply
        return value
