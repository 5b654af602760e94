#!/usr/bin/env python3
"""Play Dobutsu shogi against an automated opponent in the console, with optional logging & replay."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List

from dobutsu import PlayConfig, load_play_config, make_policy
from dobutsu.core import (
    GameResult,
    GameState,
    Player,
    apply_action,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    format_action,
    format_board,
    format_hand,
    new_game,
)
from dobutsu.session import LocalMatch

Prompt = Callable[[str], str]


def format_state(state: GameState) -> str:
    gote_hand = format_hand(state.pools[int(Player.GOTE)]).lower() or "-"
    sente_hand = format_hand(state.pools[int(Player.SENTE)]) or "-"
    return f"後手の持ち駒: {gote_hand}\n{format_board(state.board)}\n先手の持ち駒: {sente_hand}"


def mover_of(state: GameState) -> Player:
    """Who played ``state.last_action``."""
    return state.current_player if state.is_terminal else state.current_player.opponent


def prompt_human_move(state: GameState, prompt: Prompt = input) -> int:
    moves = [(encode_action(action), action) for action in enumerate_legal_actions(state)]
    move_indices = {idx for idx, _ in moves}
    print("合法手:")
    for idx, action in moves:
        print(f"  {idx}: {format_action(action)}")
    while True:
        raw = prompt("指す手の index (q で終了): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("ゲームを終了します。")
            sys.exit(0)
        if not raw.isdigit():
            print("数字を入力してください。")
            continue
        idx = int(raw)
        if idx in move_indices:
            return idx
        print("不正な index です。もう一度。")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"ログを {path} に保存しました。")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    state = new_game()
    if verbose:
        print("ログリプレイを開始します。")
        print(format_state(state))
    for entry in moves:
        action = decode_action(entry["action_index"])
        state = apply_action(state, action)
        if verbose:
            actor = entry.get("actor", "unknown")
            player = entry.get("player", "?")
            print(f"{actor} ({player}) の手: {format_action(action)}")
            print(format_state(state))
    summary = {
        "result": state.result.value,
        "moves": len(moves),
        "board": format_board(state.board).splitlines(),
    }
    if verbose:
        print("リプレイ終了。")
        print(f"結果: {summary['result']}")
    return summary


async def _play(config: PlayConfig, prompt: Prompt) -> Dict[str, object]:
    opponent = make_policy(config.opponent, config.seed)
    match = LocalMatch(opponent, human=config.human, think_delay=config.think_delay)
    records: List[Dict] = []
    try:
        await match.start()
        while True:
            update = await match.updates.get()
            if not update.accepted:
                print(f"AI が手を指せませんでした: {update.error}")
                break
            state = update.state
            if state.last_action is not None:
                mover = mover_of(state)
                action = state.last_action.action
                actor = "human" if mover == config.human else "ai"
                if actor == "ai":
                    print(f"AI ({mover.name}) の手: {format_action(action)}")
                records.append(
                    {
                        "move_index": state.ply_count - 1,
                        "actor": actor,
                        "player": mover.name,
                        "action_index": encode_action(action),
                        "action": format_action(action),
                    }
                )

            print("\n現在の盤面:")
            print(format_state(state))
            if state.is_terminal or state.ply_count >= config.max_ply:
                break
            print(f"手番: {state.current_player.name}" + (" (王手)" if state.in_check else ""))

            if state.current_player == config.human:
                while True:
                    action_index = prompt_human_move(state, prompt)
                    response = await match.submit(decode_action(action_index))
                    if response.accepted:
                        break
                    print(f"その手は指せません: {response.error}")
    finally:
        match.close()

    final = match.state
    if final.result == GameResult.SENTE_WIN:
        print("先手の勝利！")
    elif final.result == GameResult.GOTE_WIN:
        print("後手の勝利！")
    else:
        print("引き分け。")

    metadata = {
        "human_player": config.human_player,
        "opponent": config.opponent,
        "seed": config.seed,
        "result": final.result.value,
    }
    return {"metadata": metadata, "moves": records}


def play_interactive(config: PlayConfig, prompt: Prompt = input) -> Dict[str, object]:
    log = asyncio.run(_play(config, prompt))
    if config.log_file:
        save_log(log, Path(config.log_file))
    return log


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Dobutsu shogi in the console against AI.")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--human-player", choices=["sente", "gote"])
    parser.add_argument("--opponent", choices=["heuristic", "random"])
    parser.add_argument("--think-delay", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--max-ply", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    config = load_play_config(
        args.config,
        human_player=args.human_player,
        opponent=args.opponent,
        think_delay=args.think_delay,
        seed=args.seed,
        max_ply=args.max_ply,
        log_file=args.log_file,
    )
    play_interactive(config)


if __name__ == "__main__":
    main()
