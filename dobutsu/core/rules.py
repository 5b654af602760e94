from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .board import (
    BOARD_CELLS,
    INITIAL_LAYOUT,
    MOVE_VECTORS,
    back_rank,
    in_bounds,
    oriented,
    piece_at,
    positions,
    square_at,
    square_index,
    with_piece,
    without_piece,
)
from .errors import (
    GameAlreadyOver,
    IllegalDestination,
    InvariantViolation,
    MoveError,
    NoPieceAtSource,
    NotOwnedByMover,
    OffBoard,
    PieceNotInCapturedPool,
    SquareOccupiedOnDrop,
)
from .notation import parse_board, parse_hand
from .state import (
    BASE_KINDS,
    POOL_SHAPE,
    Action,
    ActionRecord,
    BoardArray,
    Drop,
    GameResult,
    GameState,
    Move,
    Piece,
    PieceKind,
    Player,
    Position,
    pool_index,
)

logger = logging.getLogger(__name__)

MOVE_SLOTS = BOARD_CELLS * BOARD_CELLS
DROP_SLOTS = len(BASE_KINDS) * BOARD_CELLS
ACTION_VECTOR_SIZE = MOVE_SLOTS + DROP_SLOTS

BoardLike = Union[GameState, BoardArray]


def encode_action(action: Action) -> int:
    if isinstance(action, Move):
        if not (in_bounds(action.origin) and in_bounds(action.target)):
            raise ValueError("Move coordinates are off the board.")
        return square_index(action.origin) * BOARD_CELLS + square_index(action.target)
    if isinstance(action, Drop):
        if not in_bounds(action.target):
            raise ValueError("Drop target is off the board.")
        return MOVE_SLOTS + pool_index(action.kind) * BOARD_CELLS + square_index(action.target)
    raise TypeError(f"Not an action: {action!r}")


def decode_action(index: int) -> Action:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    if index < MOVE_SLOTS:
        origin, target = divmod(index, BOARD_CELLS)
        return Move(square_at(origin), square_at(target))
    kind_index, square = divmod(index - MOVE_SLOTS, BOARD_CELLS)
    return Drop(square_at(square), BASE_KINDS[kind_index])


def new_game() -> GameState:
    return GameState(
        board=parse_board(INITIAL_LAYOUT),
        pools=np.zeros(POOL_SHAPE, dtype=np.int16),
        current_player=Player.SENTE,
    )


def state_from_layout(
    rows: Sequence[str],
    *,
    current_player: Player = Player.SENTE,
    sente_hand: str = "",
    gote_hand: str = "",
    winner: Optional[Player] = None,
) -> GameState:
    board = parse_board(rows)
    pools = np.stack([parse_hand(sente_hand), parse_hand(gote_hand)])
    checked = winner is None and in_check(board, current_player)
    return GameState(
        board=board,
        pools=pools,
        current_player=current_player,
        winner=winner,
        in_check=checked,
    )


def legal_moves(board: BoardLike, origin: Position) -> FrozenSet[Position]:
    board = _board_of(board)
    origin = _as_position(origin)
    if not in_bounds(origin):
        return frozenset()
    piece = piece_at(board, origin)
    if piece is None:
        return frozenset()
    return frozenset(_reach(board, origin, piece))


def legal_drops(board: BoardLike) -> FrozenSet[Position]:
    board = _board_of(board)
    return frozenset(pos for pos in positions() if board[pos] == 0)


def find_lion(board: BoardLike, player: Player) -> Optional[Position]:
    board = _board_of(board)
    code = int(PieceKind.LION) * player.sign
    for pos in positions():
        if board[pos] == code:
            return pos
    return None


def is_attacked(board: BoardLike, target: Position, by_player: Player) -> bool:
    board = _board_of(board)
    target = _as_position(target)
    for origin, piece in _pieces(board, by_player):
        if target in _reach(board, origin, piece):
            return True
    return False


def in_check(board: BoardLike, player: Player) -> bool:
    lion = find_lion(board, player)
    if lion is None:
        return True
    return is_attacked(board, lion, player.opponent)


def apply_move(state: GameState, origin: Position, target: Position) -> GameState:
    _ensure_ongoing(state)
    origin = _as_position(origin)
    target = _as_position(target)
    if not in_bounds(origin) or not in_bounds(target):
        raise _reject(OffBoard(f"Move {origin} -> {target} leaves the board."))

    piece = piece_at(state.board, origin)
    if piece is None:
        raise _reject(NoPieceAtSource(f"No piece at {origin}."))
    mover = state.current_player
    if piece.owner != mover:
        raise _reject(NotOwnedByMover(f"Piece at {origin} belongs to {piece.owner.name}, not {mover.name}."))
    if target not in legal_moves(state.board, origin):
        raise _reject(IllegalDestination(f"{piece.kind.name} cannot move {origin} -> {target}."))

    pools = np.array(state.pools, dtype=np.int16)
    captured = piece_at(state.board, target)
    if captured is not None:
        pools[int(mover), pool_index(captured.kind.demoted)] += 1

    promoted = piece.kind == PieceKind.CHICK and target[0] == back_rank(mover)
    moved = Piece(piece.kind.promoted, mover) if promoted else piece
    board = with_piece(without_piece(state.board, origin), target, moved)

    return _conclude(
        state,
        Move(origin, target),
        board,
        pools,
        captured=None if captured is None else captured.kind,
        promoted=promoted,
        lion_target=target if piece.kind == PieceKind.LION else None,
    )


def apply_drop(state: GameState, target: Position, kind: PieceKind) -> GameState:
    _ensure_ongoing(state)
    target = _as_position(target)
    kind = PieceKind(kind)
    if not in_bounds(target):
        raise _reject(OffBoard(f"Drop target {target} is off the board."))

    mover = state.current_player
    if kind not in BASE_KINDS or state.pools[int(mover), pool_index(kind)] <= 0:
        raise _reject(PieceNotInCapturedPool(f"{mover.name} holds no {kind.name}."))
    if state.board[target] != 0:
        raise _reject(SquareOccupiedOnDrop(f"Cannot drop onto occupied square {target}."))

    pools = np.array(state.pools, dtype=np.int16)
    pools[int(mover), pool_index(kind)] -= 1
    # Drops never promote, even onto the back rank.
    board = with_piece(state.board, target, Piece(kind, mover))

    return _conclude(state, Drop(target, kind), board, pools, captured=None, promoted=False, lion_target=None)


def apply_action(state: GameState, action: Action) -> GameState:
    if isinstance(action, Move):
        return apply_move(state, action.origin, action.target)
    if isinstance(action, Drop):
        return apply_drop(state, action.target, action.kind)
    raise TypeError(f"Not an action: {action!r}")


def enumerate_legal_actions(state: GameState) -> List[Action]:
    if state.is_terminal:
        return []
    player = state.current_player
    legal: List[Action] = []
    for origin, _ in _pieces(state.board, player):
        for target in sorted(legal_moves(state.board, origin)):
            legal.append(Move(origin, target))
    drop_targets = sorted(legal_drops(state.board))
    for kind in state.pool(player):
        for target in drop_targets:
            legal.append(Drop(target, kind))
    return legal


def piece_totals(state: GameState) -> Dict[PieceKind, int]:
    """Count of every base kind across the board and both pools, hens counted as chicks."""
    totals = {kind: int(state.pools[:, i].sum()) for i, kind in enumerate(BASE_KINDS)}
    for pos in positions():
        piece = piece_at(state.board, pos)
        if piece is not None:
            totals[piece.kind.demoted] += 1
    return totals


def check_invariants(state: GameState) -> None:
    totals = piece_totals(state)
    for kind, count in totals.items():
        if count != len(Player):
            raise InvariantViolation(f"Expected {len(Player)} {kind.name} pieces in play, found {count}.")
    if state.winner is None and state.pools[:, pool_index(PieceKind.LION)].any():
        raise InvariantViolation("A lion is held in a pool while the game is ongoing.")


def _conclude(
    state: GameState,
    action: Action,
    board: BoardArray,
    pools: np.ndarray,
    *,
    captured: Optional[PieceKind],
    promoted: bool,
    lion_target: Optional[Position],
) -> GameState:
    mover = state.current_player
    opponent = mover.opponent
    ply_count = state.ply_count + 1

    won = find_lion(board, opponent) is None
    if not won and lion_target is not None and lion_target[0] == back_rank(mover):
        won = not is_attacked(board, lion_target, opponent)

    if won:
        record = ActionRecord(action, captured, promoted, _win_result(mover))
        logger.info("%s wins with %s at ply %d", mover.name, action, ply_count)
        return GameState(
            board=board,
            pools=pools,
            current_player=mover,
            winner=mover,
            in_check=state.in_check,
            ply_count=ply_count,
            last_action=record,
        )

    return GameState(
        board=board,
        pools=pools,
        current_player=opponent,
        in_check=in_check(board, opponent),
        ply_count=ply_count,
        last_action=ActionRecord(action, captured, promoted),
    )


def _win_result(player: Player) -> GameResult:
    return GameResult.SENTE_WIN if player == Player.SENTE else GameResult.GOTE_WIN


def _reach(board: BoardArray, origin: Position, piece: Piece) -> List[Position]:
    targets: List[Position] = []
    for vector in MOVE_VECTORS[piece.kind]:
        dr, dc = oriented(vector, piece.owner)
        target = (origin[0] + dr, origin[1] + dc)
        if not in_bounds(target):
            continue
        occupant = piece_at(board, target)
        if occupant is None or occupant.owner != piece.owner:
            targets.append(target)
    return targets


def _pieces(board: BoardArray, player: Player) -> Iterator[Tuple[Position, Piece]]:
    for pos in positions():
        piece = piece_at(board, pos)
        if piece is not None and piece.owner == player:
            yield pos, piece


def _ensure_ongoing(state: GameState) -> None:
    if state.is_terminal:
        raise _reject(GameAlreadyOver(f"Game is over; {state.winner.name} has won."))


def _reject(error: MoveError) -> MoveError:
    logger.debug("Rejected action (%s): %s", error.code.value, error)
    return error


def _board_of(board: BoardLike) -> BoardArray:
    return board.board if isinstance(board, GameState) else board


def _as_position(position: Sequence[int]) -> Position:
    return int(position[0]), int(position[1])
