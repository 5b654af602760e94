"""Feature extraction helpers for Dobutsu."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
)
from .symmetry import (
    Transform,
    swaps_players,
    transform_action,
    transform_board,
    transform_player,
    transform_position,
    transform_state,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
    "Transform",
    "swaps_players",
    "transform_action",
    "transform_board",
    "transform_player",
    "transform_position",
    "transform_state",
]
