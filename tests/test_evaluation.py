import numpy as np

from dobutsu.core import GameResult, apply_action, new_game
from dobutsu.evaluation import EvaluationResult, evaluate_policies, play_game
from dobutsu.policy import HeuristicPolicy, RandomPolicy


def test_evaluate_random_vs_random_small():
    policy_a = RandomPolicy(np.random.default_rng(0))
    policy_b = RandomPolicy(np.random.default_rng(1))
    result = evaluate_policies(policy_a, policy_b, episodes=2, max_ply=60)
    assert result.games_played == 2
    assert result.sente_wins + result.gote_wins + result.draws == 2
    assert result.first_policy_wins + result.second_policy_wins + result.draws == 2
    assert result.average_length > 0


def test_play_game_record_replays_to_its_result():
    record = play_game(
        HeuristicPolicy(np.random.default_rng(2)),
        RandomPolicy(np.random.default_rng(3)),
        max_ply=100,
    )

    state = new_game()
    for action in record.actions:
        state = apply_action(state, action)

    assert state.result == record.result
    assert record.length == state.ply_count
    assert record.truncated == (record.result == GameResult.ONGOING)


def test_winrates():
    result = EvaluationResult(
        games_played=10,
        sente_wins=6,
        gote_wins=3,
        draws=1,
        average_length=12.0,
        first_policy_wins=7,
        second_policy_wins=2,
    )
    assert result.winrate_sente() == 0.6
    assert result.winrate_gote() == 0.3
    assert result.winrate_first_policy() == 0.7


def test_progress_sees_every_game():
    records = []
    result = evaluate_policies(
        HeuristicPolicy(np.random.default_rng(4)),
        RandomPolicy(np.random.default_rng(5)),
        episodes=4,
        max_ply=40,
        progress=records.append,
    )

    assert len(records) == result.games_played == 4
    assert result.average_length == sum(record.length for record in records) / 4
    assert result.draws == sum(record.result == GameResult.ONGOING for record in records)
