import numpy as np

from dobutsu.core import (
    Player,
    apply_action,
    apply_move,
    is_attacked,
    legal_moves,
    new_game,
)
from dobutsu.core.board import positions
from dobutsu.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    Transform,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
    transform_board,
    transform_position,
    transform_state,
)
from dobutsu.policy import RandomPolicy


def sample_states(count: int = 40, seed: int = 0):
    policy = RandomPolicy(np.random.default_rng(seed))
    states = []
    state = new_game()
    while len(states) < count:
        states.append(state)
        state = new_game() if state.is_terminal else apply_action(state, policy.act(state))
    return states


def test_state_to_numpy_initial_board_counts():
    board, aux = state_to_numpy(new_game())

    assert board.shape == (BOARD_CHANNELS, 4, 3)
    assert aux.shape == (AUX_VECTOR_SIZE,)
    # 8 initial pieces
    assert board.sum() == 8
    # SENTE lion plane is channel 0, at (3, 1)
    assert board[0, 3, 1] == 1.0
    # GOTE chick plane is channel 5 + 3, at (1, 1)
    assert board[8, 1, 1] == 1.0
    assert aux[0] == 1.0 and aux[1] == 0.0


def test_aux_vector_tracks_pools_and_check():
    state = apply_move(new_game(), (2, 1), (1, 1))
    aux = build_aux_vector(state)

    assert aux[1] == 1.0
    # SENTE pool, chick column
    assert aux[2 + 3] == 0.5
    assert aux[10] == 1.0


def test_rotation_maps_initial_board_onto_itself():
    state = new_game()
    rotated = transform_state(state, Transform.ROTATE)

    assert np.array_equal(rotated.board, state.board)
    assert rotated.current_player == Player.GOTE


def test_attacks_are_symmetric_under_rotation():
    for state in sample_states():
        rotated = transform_board(state.board, Transform.ROTATE)
        for pos in positions():
            mirrored = transform_position(Transform.ROTATE, pos)
            for player in Player:
                assert is_attacked(state.board, pos, player) == is_attacked(rotated, mirrored, player.opponent)


def test_legal_moves_commute_with_transforms():
    for state in sample_states(seed=1):
        for transform in (Transform.FLIP_H, Transform.ROTATE):
            transformed = transform_board(state.board, transform)
            for pos in positions():
                expected = {transform_position(transform, target) for target in legal_moves(state.board, pos)}
                assert legal_moves(transformed, transform_position(transform, pos)) == expected


def test_board_tensor_of_rotated_state_swaps_planes():
    state = apply_move(new_game(), (2, 1), (1, 1))
    rotated = transform_state(state, Transform.ROTATE)

    tensor = build_board_tensor(rotated)
    # SENTE's chick on (1, 1) becomes GOTE's chick on (2, 1).
    assert tensor[5 + 3, 2, 1] == 1.0
    assert rotated.pool(Player.GOTE) == state.pool(Player.SENTE)
