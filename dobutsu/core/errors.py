from __future__ import annotations

from enum import Enum


class MoveErrorCode(Enum):
    NO_PIECE_AT_SOURCE = "no_piece_at_source"
    NOT_OWNED_BY_MOVER = "not_owned_by_mover"
    ILLEGAL_DESTINATION = "illegal_destination"
    SQUARE_OCCUPIED_ON_DROP = "square_occupied_on_drop"
    PIECE_NOT_IN_CAPTURED_POOL = "piece_not_in_captured_pool"
    GAME_ALREADY_OVER = "game_already_over"
    OFF_BOARD = "off_board"
    NO_LEGAL_ACTIONS = "no_legal_actions"
    NOT_YOUR_TURN = "not_your_turn"


class MoveError(ValueError):
    """A rejected action. The state it was applied to is left untouched."""

    code: MoveErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoPieceAtSource(MoveError):
    code = MoveErrorCode.NO_PIECE_AT_SOURCE


class NotOwnedByMover(MoveError):
    code = MoveErrorCode.NOT_OWNED_BY_MOVER


class IllegalDestination(MoveError):
    code = MoveErrorCode.ILLEGAL_DESTINATION


class SquareOccupiedOnDrop(MoveError):
    code = MoveErrorCode.SQUARE_OCCUPIED_ON_DROP


class PieceNotInCapturedPool(MoveError):
    code = MoveErrorCode.PIECE_NOT_IN_CAPTURED_POOL


class GameAlreadyOver(MoveError):
    code = MoveErrorCode.GAME_ALREADY_OVER


class OffBoard(MoveError):
    code = MoveErrorCode.OFF_BOARD


class NoLegalActions(MoveError):
    code = MoveErrorCode.NO_LEGAL_ACTIONS


class NotYourTurn(MoveError):
    code = MoveErrorCode.NOT_YOUR_TURN


class InvariantViolation(RuntimeError):
    """Raised when a state is structurally corrupt. Not recoverable."""
