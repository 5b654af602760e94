"""Evaluation helpers for Dobutsu policies."""

from .match import EvaluationResult, GameRecord, evaluate_policies, play_game

__all__ = ["EvaluationResult", "GameRecord", "evaluate_policies", "play_game"]
