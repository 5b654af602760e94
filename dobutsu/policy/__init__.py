"""Automated opponents."""

from .heuristic import select_action
from .policies import POLICIES, HeuristicPolicy, Policy, RandomPolicy, make_policy

__all__ = [
    "select_action",
    "Policy",
    "RandomPolicy",
    "HeuristicPolicy",
    "POLICIES",
    "make_policy",
]
