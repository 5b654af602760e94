import json
from pathlib import Path

from dobutsu import PlayConfig
from dobutsu.core import Move, NoLegalActions, apply_action, decode_action, encode_action, enumerate_legal_actions, new_game
from dobutsu.policy import Policy

import scripts.play_vs_ai as play_vs_ai
from scripts.play_vs_ai import play_interactive, replay_logged_game


def create_sample_log(path: Path) -> None:
    moves = []
    action1 = encode_action(Move((2, 1), (1, 1)))
    moves.append({
        "move_index": 0,
        "actor": "human",
        "player": "SENTE",
        "action_index": action1,
        "action": "(2,1)->(1,1)",
    })
    action2 = encode_action(Move((0, 1), (1, 1)))
    moves.append({
        "move_index": 1,
        "actor": "ai",
        "player": "GOTE",
        "action_index": action2,
        "action": "(0,1)->(1,1)",
    })
    log = {"metadata": {}, "moves": moves}
    path.write_text(json.dumps(log))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)
    summary = replay_logged_game(log_path, verbose=False)
    assert summary["moves"] == 2
    assert summary["result"] == "ongoing"
    assert summary["board"] == ["g.e", ".l.", "...", "ELG"]


def test_play_interactive_writes_replayable_log(tmp_path, monkeypatch):
    def first_legal(state, prompt=input):
        return encode_action(enumerate_legal_actions(state)[0])

    monkeypatch.setattr(play_vs_ai, "prompt_human_move", first_legal)
    log_path = tmp_path / "logs" / "game.json"
    config = PlayConfig(opponent="heuristic", think_delay=0.0, seed=3, max_ply=6, log_file=str(log_path))

    log = play_interactive(config)

    assert log_path.exists()
    assert json.loads(log_path.read_text()) == log
    moves = log["moves"]
    assert 0 < len(moves) <= 6
    assert [entry["move_index"] for entry in moves] == list(range(len(moves)))
    assert {entry["actor"] for entry in moves} == {"human", "ai"}
    assert moves[0]["actor"] == "human" and moves[0]["player"] == "SENTE"

    summary = replay_logged_game(log_path, verbose=False)
    assert summary["result"] == log["metadata"]["result"]


def test_human_can_play_gote(tmp_path, monkeypatch):
    def first_legal(state, prompt=input):
        return encode_action(enumerate_legal_actions(state)[0])

    monkeypatch.setattr(play_vs_ai, "prompt_human_move", first_legal)
    config = PlayConfig(human_player="gote", opponent="random", seed=1, max_ply=4)

    log = play_interactive(config)

    assert log["moves"][0]["actor"] == "ai"
    state = new_game()
    for entry in log["moves"]:
        state = apply_action(state, decode_action(entry["action_index"]))
    assert state.result.value == log["metadata"]["result"]


def test_prompt_accepts_listed_index():
    state = new_game()
    answers = iter(["abc", "999", str(encode_action(Move((3, 1), (2, 0))))])

    index = play_vs_ai.prompt_human_move(state, prompt=lambda _: next(answers))

    assert decode_action(index) == Move((3, 1), (2, 0))


class StuckPolicy(Policy):
    def act(self, state):
        raise NoLegalActions("No legal actions available.")


def test_play_interactive_stops_when_opponent_fails(monkeypatch):
    def first_legal(state, prompt=input):
        return encode_action(enumerate_legal_actions(state)[0])

    monkeypatch.setattr(play_vs_ai, "prompt_human_move", first_legal)
    monkeypatch.setattr(play_vs_ai, "make_policy", lambda name, seed=None: StuckPolicy())
    config = PlayConfig(max_ply=10)

    log = play_interactive(config)

    assert [entry["actor"] for entry in log["moves"]] == ["human"]
    assert log["metadata"]["result"] == "ongoing"
