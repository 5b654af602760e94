"""Click-driven selection state for a board UI.

The engine never sees a selection. A UI keeps one of the three variants
below and feeds clicks through :func:`select_square` and :func:`select_pool`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional, Union

from dobutsu.core import (
    GameState,
    MoveError,
    PieceKind,
    Position,
    apply_drop,
    apply_move,
    in_bounds,
    legal_drops,
    legal_moves,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class BoardSelection:
    position: Position


@dataclass(frozen=True)
class PoolSelection:
    kind: PieceKind


Selection = Union[NoSelection, BoardSelection, PoolSelection]

NO_SELECTION = NoSelection()


@dataclass(frozen=True)
class SelectionOutcome:
    state: GameState
    selection: Selection
    error: Optional[MoveError] = None


def select_square(state: GameState, selection: Selection, position: Position) -> SelectionOutcome:
    if state.is_terminal:
        return SelectionOutcome(state, NO_SELECTION)

    piece = state.piece_at(position) if in_bounds(position) else None
    own_piece = piece is not None and piece.owner == state.current_player

    if isinstance(selection, BoardSelection):
        if position == selection.position:
            return SelectionOutcome(state, NO_SELECTION)
        if own_piece:
            return SelectionOutcome(state, BoardSelection(position))
        try:
            next_state = apply_move(state, selection.position, position)
        except MoveError as error:
            return SelectionOutcome(state, NO_SELECTION, error)
        return SelectionOutcome(next_state, NO_SELECTION)

    if isinstance(selection, PoolSelection):
        try:
            next_state = apply_drop(state, position, selection.kind)
        except MoveError as error:
            return SelectionOutcome(state, NO_SELECTION, error)
        return SelectionOutcome(next_state, NO_SELECTION)

    if own_piece:
        return SelectionOutcome(state, BoardSelection(position))
    return SelectionOutcome(state, NO_SELECTION)


def select_pool(state: GameState, selection: Selection, kind: PieceKind) -> Selection:
    if state.is_terminal:
        return NO_SELECTION
    if isinstance(selection, PoolSelection) and selection.kind == kind:
        return NO_SELECTION
    if state.pool(state.current_player).get(kind, 0) <= 0:
        logger.debug("%s holds no %s; selection unchanged", state.current_player.name, kind.name)
        return selection
    return PoolSelection(kind)


def highlights(state: GameState, selection: Selection) -> FrozenSet[Position]:
    if state.is_terminal:
        return frozenset()
    if isinstance(selection, BoardSelection):
        return legal_moves(state, selection.position)
    if isinstance(selection, PoolSelection):
        return legal_drops(state)
    return frozenset()
