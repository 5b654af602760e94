"""Board symmetries.

Every move template is left-right symmetric, so reflecting the board across
its middle file maps legal moves onto legal moves. Rotating the board by 180
degrees while swapping every piece's owner maps a position onto the same
position seen from the other side.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

import numpy as np

from dobutsu.core import (
    Action,
    ActionRecord,
    BOARD_SHAPE,
    Drop,
    GameResult,
    GameState,
    Move,
    Player,
    Position,
)
from dobutsu.core.state import BoardArray

ROWS, COLS = BOARD_SHAPE


class Transform(Enum):
    IDENTITY = auto()
    FLIP_H = auto()
    ROTATE = auto()


def swaps_players(transform: Transform) -> bool:
    return transform == Transform.ROTATE


def transform_position(transform: Transform, position: Position) -> Position:
    r, c = position
    if transform == Transform.FLIP_H:
        return r, COLS - 1 - c
    if transform == Transform.ROTATE:
        return ROWS - 1 - r, COLS - 1 - c
    return r, c


def transform_player(transform: Transform, player: Optional[Player]) -> Optional[Player]:
    if player is None or not swaps_players(transform):
        return player
    return player.opponent


def transform_board(board: BoardArray, transform: Transform) -> BoardArray:
    if transform == Transform.FLIP_H:
        return np.ascontiguousarray(board[:, ::-1])
    if transform == Transform.ROTATE:
        # Negating a piece code hands the piece to the other player.
        return np.ascontiguousarray(-board[::-1, ::-1])
    return np.array(board)


def transform_action(transform: Transform, action: Action) -> Action:
    if isinstance(action, Move):
        return Move(
            transform_position(transform, action.origin),
            transform_position(transform, action.target),
        )
    return Drop(transform_position(transform, action.target), action.kind)


def transform_state(state: GameState, transform: Transform) -> GameState:
    swapped = swaps_players(transform)
    record = state.last_action
    if record is not None:
        resulted_in = record.resulted_in
        if swapped and resulted_in != GameResult.ONGOING:
            resulted_in = GameResult.GOTE_WIN if resulted_in == GameResult.SENTE_WIN else GameResult.SENTE_WIN
        record = ActionRecord(
            action=transform_action(transform, record.action),
            captured=record.captured,
            promoted=record.promoted,
            resulted_in=resulted_in,
        )
    return GameState(
        board=transform_board(state.board, transform),
        pools=state.pools[::-1] if swapped else state.pools,
        current_player=transform_player(transform, state.current_player),
        winner=transform_player(transform, state.winner),
        in_check=state.in_check,
        ply_count=state.ply_count,
        last_action=record,
    )
