from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dobutsu.core import Action, GameResult, Player, encode_action
from dobutsu.env import DobutsuEnv
from dobutsu.policy import Policy

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    result: GameResult
    actions: List[Action] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.actions)

    @property
    def truncated(self) -> bool:
        return self.result == GameResult.ONGOING


@dataclass
class EvaluationResult:
    games_played: int
    sente_wins: int
    gote_wins: int
    draws: int
    average_length: float
    first_policy_wins: int = 0
    second_policy_wins: int = 0

    def winrate_sente(self) -> float:
        return self.sente_wins / max(1, self.games_played)

    def winrate_gote(self) -> float:
        return self.gote_wins / max(1, self.games_played)

    def winrate_first_policy(self) -> float:
        return self.first_policy_wins / max(1, self.games_played)


def play_game(
    policy_sente: Policy,
    policy_gote: Policy,
    *,
    max_ply: int = 200,
    env_factory: Optional[Callable[[], DobutsuEnv]] = None,
) -> GameRecord:
    env = env_factory() if env_factory is not None else DobutsuEnv(max_ply=max_ply)
    env.reset()
    record = GameRecord(result=GameResult.ONGOING)
    terminated = truncated = False

    while not (terminated or truncated):
        state = env.state
        policy = policy_sente if state.current_player == Player.SENTE else policy_gote
        action = policy.act(state)
        _, _, terminated, truncated, _ = env.step(encode_action(action))
        record.actions.append(action)

    record.result = env.state.result
    logger.debug("Game finished after %d plies: %s", record.length, record.result.value)
    return record


def evaluate_policies(
    first: Policy,
    second: Policy,
    *,
    episodes: int,
    max_ply: int = 200,
    swap_sides: bool = True,
    env_factory: Optional[Callable[[], DobutsuEnv]] = None,
    progress: Optional[Callable[[GameRecord], None]] = None,
) -> EvaluationResult:
    """Play ``episodes`` games; with ``swap_sides`` the policies alternate who moves first.

    ``progress`` is called with each finished ``GameRecord``.
    """
    sente_wins = 0
    gote_wins = 0
    draws = 0
    first_wins = 0
    second_wins = 0
    total_ply = 0

    for episode in range(episodes):
        first_is_sente = not swap_sides or episode % 2 == 0
        sente, gote = (first, second) if first_is_sente else (second, first)
        record = play_game(sente, gote, max_ply=max_ply, env_factory=env_factory)
        total_ply += record.length
        if progress is not None:
            progress(record)

        if record.result == GameResult.SENTE_WIN:
            sente_wins += 1
            winner_is_first = first_is_sente
        elif record.result == GameResult.GOTE_WIN:
            gote_wins += 1
            winner_is_first = not first_is_sente
        else:
            draws += 1
            continue
        if winner_is_first:
            first_wins += 1
        else:
            second_wins += 1

    average_length = total_ply / max(1, episodes)
    logger.info(
        "Evaluated %d games: sente %d, gote %d, draws %d", episodes, sente_wins, gote_wins, draws
    )
    return EvaluationResult(
        games_played=episodes,
        sente_wins=sente_wins,
        gote_wins=gote_wins,
        draws=draws,
        average_length=average_length,
        first_policy_wins=first_wins,
        second_policy_wins=second_wins,
    )
