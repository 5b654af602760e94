"""Static board geometry, piece move templates and copy-on-write board helpers."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from .state import BOARD_COLS, BOARD_ROWS, BoardArray, Piece, PieceKind, Player, Position

BOARD_SHAPE = (BOARD_ROWS, BOARD_COLS)
BOARD_CELLS = BOARD_ROWS * BOARD_COLS

Vector = Tuple[int, int]

# (dr, dc) in SENTE's frame, where forward is row - 1. GOTE negates both deltas.
MOVE_VECTORS: Dict[PieceKind, Tuple[Vector, ...]] = {
    PieceKind.LION: (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1), (0, 1),
        (1, -1), (1, 0), (1, 1),
    ),
    PieceKind.GIRAFFE: ((-1, 0), (0, -1), (0, 1), (1, 0)),
    PieceKind.ELEPHANT: ((-1, -1), (-1, 1), (1, -1), (1, 1)),
    PieceKind.CHICK: ((-1, 0),),
    PieceKind.HEN: (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1), (0, 1),
        (1, 0),
    ),
}

# Row 0 is GOTE's home rank, row 3 is SENTE's.
INITIAL_LAYOUT: Tuple[str, ...] = (
    "gle",
    ".c.",
    ".C.",
    "ELG",
)


def in_bounds(position: Position) -> bool:
    row, col = position
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def positions() -> Iterator[Position]:
    """All squares in scan order: ascending row, then column."""
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLS):
            yield row, col


def square_index(position: Position) -> int:
    return position[0] * BOARD_COLS + position[1]


def square_at(index: int) -> Position:
    return divmod(index, BOARD_COLS)


def back_rank(player: Player) -> int:
    """The rank ``player`` advances towards, i.e. the opponent's home rank."""
    return 0 if player == Player.SENTE else BOARD_ROWS - 1


def oriented(vector: Vector, player: Player) -> Vector:
    if player == Player.SENTE:
        return vector
    return -vector[0], -vector[1]


def empty_board() -> BoardArray:
    return np.zeros(BOARD_SHAPE, dtype=np.int8)


def piece_at(board: BoardArray, position: Position) -> Optional[Piece]:
    return Piece.from_code(int(board[position]))


def with_piece(board: BoardArray, position: Position, piece: Optional[Piece]) -> BoardArray:
    updated = np.array(board, dtype=np.int8)
    updated[position] = 0 if piece is None else piece.code
    return updated


def without_piece(board: BoardArray, position: Position) -> BoardArray:
    return with_piece(board, position, None)
