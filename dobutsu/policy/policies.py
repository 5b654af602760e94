from __future__ import annotations

from typing import Optional

import numpy as np

from dobutsu.core import Action, GameAlreadyOver, GameState, NoLegalActions, enumerate_legal_actions

from .heuristic import select_action


class Policy:
    """Policy interface choosing one action for the side to move."""

    name = "policy"

    def act(self, state: GameState) -> Action:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return a copy of this policy with an independent random source."""
        return self


class RandomPolicy(Policy):
    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState) -> Action:
        if state.is_terminal:
            raise GameAlreadyOver("Cannot select an action once the game is over.")
        legal = enumerate_legal_actions(state)
        if not legal:
            raise NoLegalActions(f"{state.current_player.name} has no legal action.")
        return legal[int(self.rng.integers(len(legal)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class HeuristicPolicy(Policy):
    name = "heuristic"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState) -> Action:
        return select_action(state, self.rng)

    def spawn(self, seed: Optional[int] = None) -> "HeuristicPolicy":
        return HeuristicPolicy(np.random.default_rng(seed))


POLICIES = {
    RandomPolicy.name: RandomPolicy,
    HeuristicPolicy.name: HeuristicPolicy,
}


def make_policy(name: str, seed: Optional[int] = None) -> Policy:
    try:
        factory = POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown policy {name!r}; expected one of {sorted(POLICIES)}.") from None
    return factory(np.random.default_rng(seed))
