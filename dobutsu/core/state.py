from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvariantViolation

BoardArray = NDArray[np.int8]
PoolArray = NDArray[np.int16]

# Convenient tuple alias used across modules
Position = Tuple[int, int]

BOARD_ROWS = 4
BOARD_COLS = 3


class Player(IntEnum):
    SENTE = 0
    GOTE = 1

    @property
    def opponent(self) -> "Player":
        return Player.GOTE if self == Player.SENTE else Player.SENTE

    @property
    def sign(self) -> int:
        return 1 if self == Player.SENTE else -1


class PieceKind(IntEnum):
    LION = 1
    GIRAFFE = 2
    ELEPHANT = 3
    CHICK = 4
    HEN = 5

    @property
    def demoted(self) -> "PieceKind":
        return PieceKind.CHICK if self == PieceKind.HEN else self

    @property
    def promoted(self) -> "PieceKind":
        return PieceKind.HEN if self == PieceKind.CHICK else self

    @property
    def is_promoted(self) -> bool:
        return self == PieceKind.HEN


# Kinds a pool can hold, in pool column order.
BASE_KINDS: Tuple[PieceKind, ...] = (
    PieceKind.LION,
    PieceKind.GIRAFFE,
    PieceKind.ELEPHANT,
    PieceKind.CHICK,
)
POOL_SHAPE = (len(Player), len(BASE_KINDS))


def pool_index(kind: PieceKind) -> int:
    if kind not in BASE_KINDS:
        raise ValueError(f"{kind.name} cannot be held in a pool.")
    return BASE_KINDS.index(kind)


class GameResult(Enum):
    ONGOING = "ongoing"
    SENTE_WIN = "sente_win"
    GOTE_WIN = "gote_win"


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    owner: Player

    @property
    def code(self) -> int:
        return int(self.kind) * self.owner.sign

    @staticmethod
    def from_code(code: int) -> Optional["Piece"]:
        if code == 0:
            return None
        owner = Player.SENTE if code > 0 else Player.GOTE
        return Piece(PieceKind(abs(int(code))), owner)


@dataclass(frozen=True)
class Move:
    origin: Position
    target: Position


@dataclass(frozen=True)
class Drop:
    target: Position
    kind: PieceKind


Action = Union[Move, Drop]


@dataclass(frozen=True)
class ActionRecord:
    action: Action
    captured: Optional[PieceKind] = None  # as it stood on the board, before demotion
    promoted: bool = False
    resulted_in: GameResult = GameResult.ONGOING


@dataclass(frozen=True, eq=False)
class GameState:
    board: BoardArray  # shape (4, 3), int8: 0 empty, +kind for SENTE, -kind for GOTE
    pools: PoolArray  # shape (2, 4), int16: captured counts per player and base kind
    current_player: Player = Player.SENTE
    winner: Optional[Player] = None
    in_check: bool = False
    ply_count: int = 0
    last_action: Optional[ActionRecord] = None

    def __post_init__(self) -> None:
        board = np.array(self.board, dtype=np.int8)
        pools = np.array(self.pools, dtype=np.int16)
        _validate_structure(board, pools, self.winner)
        board.setflags(write=False)
        pools.setflags(write=False)
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "pools", pools)
        object.__setattr__(self, "current_player", Player(self.current_player))
        if self.winner is not None:
            object.__setattr__(self, "winner", Player(self.winner))
        object.__setattr__(self, "in_check", bool(self.in_check))

    def copy(self) -> "GameState":
        return GameState(
            board=self.board,
            pools=self.pools,
            current_player=self.current_player,
            winner=self.winner,
            in_check=self.in_check,
            ply_count=self.ply_count,
            last_action=self.last_action,
        )

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None

    @property
    def result(self) -> GameResult:
        if self.winner is None:
            return GameResult.ONGOING
        return GameResult.SENTE_WIN if self.winner == Player.SENTE else GameResult.GOTE_WIN

    def piece_at(self, position: Position) -> Optional[Piece]:
        return Piece.from_code(int(self.board[position]))

    def pool(self, player: Player) -> Dict[PieceKind, int]:
        row = self.pools[int(player)]
        return {kind: int(row[i]) for i, kind in enumerate(BASE_KINDS) if row[i] > 0}

    def hand(self, player: Player) -> Tuple[PieceKind, ...]:
        """Pool contents as a flat multiset, in base-kind order."""
        row = self.pools[int(player)]
        return tuple(kind for i, kind in enumerate(BASE_KINDS) for _ in range(int(row[i])))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and np.array_equal(self.pools, other.pools)
            and self.current_player == other.current_player
            and self.winner == other.winner
            and self.in_check == other.in_check
            and self.ply_count == other.ply_count
            and self.last_action == other.last_action
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        board_str = "\n".join(" ".join(f"{int(cell):+d}" for cell in row) for row in self.board)
        return (
            f"GameState(current={self.current_player.name}, result={self.result}, ply={self.ply_count})\n"
            f"{board_str}"
        )


def _validate_structure(board: np.ndarray, pools: np.ndarray, winner: Optional[Player]) -> None:
    if board.shape != (BOARD_ROWS, BOARD_COLS):
        raise InvariantViolation(f"Board must be {BOARD_ROWS}x{BOARD_COLS}, got {board.shape}.")
    if np.any(np.abs(board.astype(np.int16)) > max(PieceKind)):
        raise InvariantViolation("Board contains an unknown piece code.")
    if pools.shape != POOL_SHAPE:
        raise InvariantViolation(f"Pools must have shape {POOL_SHAPE}, got {pools.shape}.")
    if np.any(pools < 0):
        raise InvariantViolation("Pool counts must be non-negative.")
    for player in Player:
        lions = int(np.count_nonzero(board == int(PieceKind.LION) * player.sign))
        if lions > 1:
            raise InvariantViolation(f"{player.name} has {lions} lions on the board.")
        if lions == 0 and winner is None:
            raise InvariantViolation(f"{player.name} has no lion but the game is not over.")
