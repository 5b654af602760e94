"""Collaborators that drive the engine: UI selection state and a local match channel."""

from .channel import LocalMatch, MatchRequest, MatchResponse, ResetGame, SubmitAction
from .selection import (
    NO_SELECTION,
    BoardSelection,
    NoSelection,
    PoolSelection,
    Selection,
    SelectionOutcome,
    highlights,
    select_pool,
    select_square,
)

__all__ = [
    "LocalMatch",
    "MatchRequest",
    "MatchResponse",
    "ResetGame",
    "SubmitAction",
    "NO_SELECTION",
    "BoardSelection",
    "NoSelection",
    "PoolSelection",
    "Selection",
    "SelectionOutcome",
    "highlights",
    "select_pool",
    "select_square",
]
