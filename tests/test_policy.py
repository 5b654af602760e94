import numpy as np
import pytest

from dobutsu.core import (
    Drop,
    GameAlreadyOver,
    Move,
    apply_action,
    apply_move,
    enumerate_legal_actions,
    new_game,
    state_from_layout,
)
from dobutsu.policy import HeuristicPolicy, RandomPolicy, make_policy, select_action


def test_lion_capture_is_first_in_scan_order() -> None:
    state = state_from_layout(["...", ".l.", "EG.", "..L"], sente_hand="C", gote_hand="GEC")

    for seed in range(10):
        assert select_action(state, np.random.default_rng(seed)) == Move((2, 0), (1, 1))


def test_only_capture_is_taken_from_initial_position() -> None:
    state = new_game()

    for seed in range(10):
        assert select_action(state, np.random.default_rng(seed)) == Move((2, 1), (1, 1))


def test_capturing_moves_are_chosen_uniformly() -> None:
    state = state_from_layout(["l..", "e.g", ".EG", "L.."], sente_hand="C", gote_hand="C")
    captures = {Move((2, 1), (1, 0)), Move((2, 1), (1, 2)), Move((2, 2), (1, 2))}

    chosen = {select_action(state, np.random.default_rng(seed)) for seed in range(50)}

    assert chosen == captures


def test_quiet_positions_choose_among_moves_and_drops() -> None:
    state = state_from_layout(["l..", "...", "...", "..L"], sente_hand="GEC", gote_hand="GEC")
    legal = set(enumerate_legal_actions(state))

    chosen = [select_action(state, np.random.default_rng(seed)) for seed in range(200)]

    assert set(chosen) <= legal
    assert any(isinstance(action, Drop) for action in chosen)
    assert any(isinstance(action, Move) for action in chosen)


def test_selection_is_reproducible_for_a_seed() -> None:
    def play(seed: int):
        rng = np.random.default_rng(seed)
        state = new_game()
        actions = []
        while not state.is_terminal and len(actions) < 40:
            action = select_action(state, rng)
            actions.append(action)
            state = apply_action(state, action)
        return actions

    assert play(7) == play(7)


def test_terminal_state_has_no_action() -> None:
    state = state_from_layout(["gl.", ".L.", "...", "..."], sente_hand="EC", gote_hand="EC")
    final = apply_move(state, (1, 1), (0, 1))

    with pytest.raises(GameAlreadyOver):
        select_action(final, np.random.default_rng(0))
    with pytest.raises(GameAlreadyOver):
        RandomPolicy(np.random.default_rng(0)).act(final)


def test_random_policy_returns_legal_actions() -> None:
    policy = RandomPolicy(np.random.default_rng(3))
    state = new_game()
    for _ in range(20):
        if state.is_terminal:
            break
        action = policy.act(state)
        assert action in enumerate_legal_actions(state)
        state = apply_action(state, action)


def test_spawned_policies_are_independent_and_seeded() -> None:
    base = HeuristicPolicy(np.random.default_rng(0))
    a = base.spawn(11)
    b = base.spawn(11)
    state = state_from_layout(["l..", "...", "...", "..L"], sente_hand="GEC", gote_hand="GEC")

    assert [a.act(state) for _ in range(5)] == [b.act(state) for _ in range(5)]


def test_make_policy_rejects_unknown_names() -> None:
    assert isinstance(make_policy("heuristic", 0), HeuristicPolicy)
    assert isinstance(make_policy("random", 0), RandomPolicy)
    with pytest.raises(ValueError):
        make_policy("minimax")
