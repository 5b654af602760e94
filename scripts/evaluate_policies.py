#!/usr/bin/env python3
"""Pit two automated policies against each other and report win rates."""

import argparse
import json
import logging

from tqdm.auto import tqdm

from dobutsu.evaluation import evaluate_policies
from dobutsu.policy import POLICIES, make_policy


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--first", choices=sorted(POLICIES), default="heuristic")
    parser.add_argument("--second", choices=sorted(POLICIES), default="random")
    parser.add_argument("--episodes", type=int, default=100)
    parser.add_argument("--max-ply", type=int, default=200)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    first = make_policy(args.first, args.seed)
    second = make_policy(args.second, args.seed + 1)

    with tqdm(total=args.episodes, desc="Games") as bar:
        result = evaluate_policies(
            first,
            second,
            episodes=args.episodes,
            max_ply=args.max_ply,
            progress=lambda _record: bar.update(1),
        )

    summary = {
        "first": args.first,
        "second": args.second,
        "episodes": result.games_played,
        "first_wins": result.first_policy_wins,
        "second_wins": result.second_policy_wins,
        "draws": result.draws,
        "first_winrate": result.winrate_first_policy(),
        "average_length": result.average_length,
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
