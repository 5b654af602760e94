import numpy as np
import pytest

from dobutsu import DobutsuEnv
from dobutsu.core import ACTION_VECTOR_SIZE, Move, decode_action, encode_action, enumerate_legal_actions


def test_reset_returns_valid_observation():
    env = DobutsuEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (10, 4, 3)
    assert obs["aux"].shape == (11,)
    assert "legal_action_mask" in info
    assert info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)


def test_legal_mask_matches_enumeration():
    env = DobutsuEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = enumerate_legal_actions(env.state)
    ones = np.count_nonzero(mask)
    assert ones == len(legal) == 4
    for action in legal:
        assert mask[encode_action(action)] == 1


def test_action_index_round_trip_covers_drops():
    for index in (0, 143, 144, ACTION_VECTOR_SIZE - 1):
        assert encode_action(decode_action(index)) == index


def test_step_advances_state_and_returns_reward():
    env = DobutsuEnv()
    obs, info = env.reset()
    legal_actions = np.flatnonzero(info["legal_action_mask"])
    action = int(legal_actions[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs["board"] != obs["board"])
    assert next_info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)


def test_illegal_action_is_rejected():
    env = DobutsuEnv()
    env.reset()

    with pytest.raises(ValueError):
        env.step(encode_action(Move((3, 1), (2, 1))))


def test_max_ply_truncates():
    env = DobutsuEnv(max_ply=1)
    env.reset()

    _, _, terminated, truncated, _ = env.step(encode_action(Move((3, 1), (2, 0))))

    assert not terminated
    assert truncated


def test_render_ansi():
    env = DobutsuEnv(render_mode="ansi")
    env.reset()

    assert env.render() == "gote hand: -\ngle\n.c.\n.C.\nELG\nsente hand: -"
