"""Core game logic for Dobutsu."""

from .board import BOARD_CELLS, BOARD_SHAPE, INITIAL_LAYOUT, MOVE_VECTORS, back_rank, in_bounds
from .errors import (
    GameAlreadyOver,
    IllegalDestination,
    InvariantViolation,
    MoveError,
    MoveErrorCode,
    NoLegalActions,
    NoPieceAtSource,
    NotOwnedByMover,
    NotYourTurn,
    OffBoard,
    PieceNotInCapturedPool,
    SquareOccupiedOnDrop,
)
from .notation import format_action, format_board, format_hand, parse_board, parse_hand
from .state import (
    BASE_KINDS,
    Action,
    ActionRecord,
    Drop,
    GameResult,
    GameState,
    Move,
    Piece,
    PieceKind,
    Player,
    Position,
)
from .rules import (
    ACTION_VECTOR_SIZE,
    apply_action,
    apply_drop,
    apply_move,
    check_invariants,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    find_lion,
    in_check,
    is_attacked,
    legal_drops,
    legal_moves,
    new_game,
    piece_totals,
    state_from_layout,
)

__all__ = [
    "GameState",
    "GameResult",
    "Player",
    "PieceKind",
    "Piece",
    "Position",
    "Action",
    "ActionRecord",
    "Move",
    "Drop",
    "BASE_KINDS",
    "BOARD_CELLS",
    "BOARD_SHAPE",
    "INITIAL_LAYOUT",
    "MOVE_VECTORS",
    "ACTION_VECTOR_SIZE",
    "back_rank",
    "in_bounds",
    "MoveError",
    "MoveErrorCode",
    "NoPieceAtSource",
    "NotOwnedByMover",
    "IllegalDestination",
    "SquareOccupiedOnDrop",
    "PieceNotInCapturedPool",
    "GameAlreadyOver",
    "OffBoard",
    "NoLegalActions",
    "NotYourTurn",
    "InvariantViolation",
    "format_action",
    "format_board",
    "format_hand",
    "parse_board",
    "parse_hand",
    "apply_action",
    "apply_drop",
    "apply_move",
    "check_invariants",
    "decode_action",
    "encode_action",
    "enumerate_legal_actions",
    "find_lion",
    "in_check",
    "is_attacked",
    "legal_drops",
    "legal_moves",
    "new_game",
    "piece_totals",
    "state_from_layout",
]
