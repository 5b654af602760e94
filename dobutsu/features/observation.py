from __future__ import annotations

from typing import Tuple

import numpy as np

from dobutsu.core import BOARD_SHAPE, GameState, PieceKind, Player

KIND_COUNT = len(PieceKind)
BOARD_CHANNELS = len(Player) * KIND_COUNT  # one plane per (owner, kind)
AUX_VECTOR_SIZE = 11  # current player one-hot (2) + pool counts (2 x 4) + in-check flag


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (10, 4, 3) channel-first."""
    tensor = np.zeros((BOARD_CHANNELS,) + BOARD_SHAPE, dtype=np.float32)
    for (row, col), value in np.ndenumerate(state.board):
        if value == 0:
            continue
        owner = Player.SENTE if value > 0 else Player.GOTE
        channel = int(owner) * KIND_COUNT + abs(int(value)) - 1
        tensor[channel, row, col] = 1.0
    return tensor


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(state.current_player)] = 1.0
    # At most two of any base kind exist, so counts scale into [0, 1].
    aux[2:10] = state.pools.reshape(-1).astype(np.float32) / len(Player)
    aux[10] = 1.0 if state.in_check else 0.0
    return aux


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)
