"""Shallow one-ply opponent: take the lion, else take something, else anything."""

from __future__ import annotations

from typing import List

import numpy as np

from dobutsu.core import (
    Action,
    GameAlreadyOver,
    GameState,
    Move,
    NoLegalActions,
    PieceKind,
    enumerate_legal_actions,
)


def select_action(state: GameState, rng: np.random.Generator) -> Action:
    if state.is_terminal:
        raise GameAlreadyOver("Cannot select an action once the game is over.")
    candidates = enumerate_legal_actions(state)
    if not candidates:
        raise NoLegalActions(f"{state.current_player.name} has no legal action.")

    # Candidates are already in scan order, so the first lion capture wins ties.
    captures: List[Action] = []
    for action in candidates:
        if not isinstance(action, Move):
            continue
        victim = state.piece_at(action.target)
        if victim is None:
            continue
        if victim.kind == PieceKind.LION:
            return action
        captures.append(action)

    choices = captures or candidates
    return choices[int(rng.integers(len(choices)))]
