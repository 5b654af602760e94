"""Dobutsu shogi rules engine, automated opponents and play tooling."""

from . import core, env, evaluation, features, policy, session
from .config import PlayConfig, load_play_config
from .core import (
    Action,
    Drop,
    GameResult,
    GameState,
    Move,
    MoveError,
    Piece,
    PieceKind,
    Player,
    apply_action,
    apply_drop,
    apply_move,
    in_check,
    is_attacked,
    legal_drops,
    legal_moves,
    new_game,
)
from .env import DobutsuEnv
from .evaluation import EvaluationResult, evaluate_policies, play_game
from .features import Transform, build_aux_vector, build_board_tensor, transform_state
from .policy import HeuristicPolicy, Policy, RandomPolicy, make_policy, select_action
from .session import LocalMatch, MatchResponse

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "policy",
    "session",
    "PlayConfig",
    "load_play_config",
    "Action",
    "Drop",
    "GameResult",
    "GameState",
    "Move",
    "MoveError",
    "Piece",
    "PieceKind",
    "Player",
    "apply_action",
    "apply_drop",
    "apply_move",
    "in_check",
    "is_attacked",
    "legal_drops",
    "legal_moves",
    "new_game",
    "DobutsuEnv",
    "EvaluationResult",
    "evaluate_policies",
    "play_game",
    "Transform",
    "build_aux_vector",
    "build_board_tensor",
    "transform_state",
    "HeuristicPolicy",
    "Policy",
    "RandomPolicy",
    "make_policy",
    "select_action",
    "LocalMatch",
    "MatchResponse",
]
