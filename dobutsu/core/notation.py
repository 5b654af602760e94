"""Plain-text board notation.

A board is four strings of three characters, row 0 first. ``.`` is an empty
square; ``L G E C H`` are lion, giraffe, elephant, chick and hen. Upper case
belongs to SENTE, lower case to GOTE. A hand is a string of upper-case
letters, e.g. ``"GC"``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .board import BOARD_SHAPE, empty_board
from .state import (
    BASE_KINDS,
    BOARD_COLS,
    BOARD_ROWS,
    Action,
    BoardArray,
    Move,
    Piece,
    PieceKind,
    Player,
    PoolArray,
)

EMPTY = "."

LETTERS = {
    PieceKind.LION: "L",
    PieceKind.GIRAFFE: "G",
    PieceKind.ELEPHANT: "E",
    PieceKind.CHICK: "C",
    PieceKind.HEN: "H",
}
KINDS = {letter: kind for kind, letter in LETTERS.items()}


def piece_symbol(piece: Piece) -> str:
    letter = LETTERS[piece.kind]
    return letter if piece.owner == Player.SENTE else letter.lower()


def parse_piece(symbol: str) -> Piece:
    kind = KINDS.get(symbol.upper())
    if kind is None:
        raise ValueError(f"Unknown piece symbol {symbol!r}.")
    owner = Player.SENTE if symbol.isupper() else Player.GOTE
    return Piece(kind, owner)


def parse_board(rows: Sequence[str]) -> BoardArray:
    if len(rows) != BOARD_ROWS:
        raise ValueError(f"Expected {BOARD_ROWS} rows, got {len(rows)}.")
    board = empty_board()
    for r, row in enumerate(rows):
        if len(row) != BOARD_COLS:
            raise ValueError(f"Row {r} must have {BOARD_COLS} squares: {row!r}.")
        for c, symbol in enumerate(row):
            if symbol != EMPTY:
                board[r, c] = parse_piece(symbol).code
    return board


def format_board(board: BoardArray) -> str:
    rows = []
    for r in range(BOARD_SHAPE[0]):
        cells = []
        for c in range(BOARD_SHAPE[1]):
            piece = Piece.from_code(int(board[r, c]))
            cells.append(EMPTY if piece is None else piece_symbol(piece))
        rows.append("".join(cells))
    return "\n".join(rows)


def parse_hand(text: str) -> np.ndarray:
    counts = np.zeros(len(BASE_KINDS), dtype=np.int16)
    for symbol in text:
        kind = KINDS.get(symbol.upper())
        if kind is None or kind not in BASE_KINDS:
            raise ValueError(f"{symbol!r} cannot be held in hand.")
        counts[BASE_KINDS.index(kind)] += 1
    return counts


def format_hand(pool_row: PoolArray) -> str:
    return "".join(LETTERS[kind] * int(pool_row[i]) for i, kind in enumerate(BASE_KINDS))


def format_action(action: Action) -> str:
    """``(2,1)->(1,1)`` for a move, ``C@(0,1)`` for a drop."""
    if isinstance(action, Move):
        (fr, fc), (tr, tc) = action.origin, action.target
        return f"({fr},{fc})->({tr},{tc})"
    row, col = action.target
    return f"{LETTERS[action.kind]}@({row},{col})"
