"""In-process match against an automated opponent.

Requests go in one at a time, responses come back with the canonical state
or the rejection. Every accepted state is also published on ``updates`` as a
``MatchResponse`` so a display can follow the opponent's replies, which are
delivered after ``think_delay`` seconds through a cancellable
``loop.call_later`` handle. An opponent that fails to move is published as a
response carrying the error.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

from dobutsu.core import (
    Action,
    GameState,
    MoveError,
    NotYourTurn,
    Player,
    apply_action,
    new_game,
)
from dobutsu.policy import Policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitAction:
    action: Action


@dataclass(frozen=True)
class ResetGame:
    pass


MatchRequest = Union[SubmitAction, ResetGame]


@dataclass(frozen=True)
class MatchResponse:
    state: GameState
    error: Optional[Exception] = None

    @property
    def accepted(self) -> bool:
        return self.error is None


class LocalMatch:
    def __init__(
        self,
        opponent: Policy,
        *,
        human: Player = Player.SENTE,
        think_delay: float = 2.0,
    ) -> None:
        self.opponent = opponent
        self.human = human
        self.think_delay = think_delay
        self.updates: "asyncio.Queue[MatchResponse]" = asyncio.Queue()
        self._state = new_game()
        self._lock = asyncio.Lock()
        self._pending: Optional[asyncio.TimerHandle] = None
        self._reply: Optional[asyncio.Task] = None
        self._generation = 0
        self._closed = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def opponent_pending(self) -> bool:
        return self._pending is not None

    async def start(self) -> GameState:
        async with self._lock:
            self._publish()
            self._schedule_opponent()
            return self._state

    async def request(self, request: MatchRequest) -> MatchResponse:
        if self._closed:
            raise RuntimeError("Match is closed.")
        async with self._lock:
            if isinstance(request, ResetGame):
                return self._reset()
            if isinstance(request, SubmitAction):
                return self._submit(request.action)
            raise TypeError(f"Unknown request: {request!r}")

    async def submit(self, action: Action) -> MatchResponse:
        return await self.request(SubmitAction(action))

    async def reset(self) -> MatchResponse:
        return await self.request(ResetGame())

    def close(self) -> None:
        self._cancel_pending()
        self._generation += 1
        self._closed = True
        logger.debug("Match closed")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _submit(self, action: Action) -> MatchResponse:
        state = self._state
        if not state.is_terminal and state.current_player != self.human:
            error = NotYourTurn(f"Waiting for {state.current_player.name} to move.")
            return MatchResponse(state, error)
        try:
            self._state = apply_action(state, action)
        except MoveError as error:
            return MatchResponse(state, error)
        self._publish()
        self._schedule_opponent()
        return MatchResponse(self._state)

    def _reset(self) -> MatchResponse:
        self._cancel_pending()
        self._generation += 1
        self._state = new_game()
        logger.info("Match reset")
        self._publish()
        self._schedule_opponent()
        return MatchResponse(self._state)

    def _publish(self, error: Optional[Exception] = None) -> None:
        self.updates.put_nowait(MatchResponse(self._state, error))

    def _schedule_opponent(self) -> None:
        state = self._state
        if state.is_terminal or state.current_player == self.human:
            return
        self._cancel_pending()
        loop = asyncio.get_running_loop()
        generation = self._generation
        self._pending = loop.call_later(self.think_delay, self._fire_opponent, generation)
        logger.debug("Opponent reply scheduled in %.2fs", self.think_delay)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.debug("Pending opponent reply cancelled")

    def _fire_opponent(self, generation: int) -> None:
        self._reply = asyncio.get_running_loop().create_task(self._play_opponent(generation))
        self._reply.add_done_callback(self._reply_done)

    def _reply_done(self, task: asyncio.Task) -> None:
        if task is self._reply:
            self._reply = None
        if task.cancelled():
            return
        error = task.exception()
        if error is None:
            return
        logger.error("Opponent failed to produce a legal action", exc_info=error)
        if not self._closed:
            self._publish(error)

    async def _play_opponent(self, generation: int) -> None:
        async with self._lock:
            # A reset or close since scheduling makes this reply stale.
            if generation != self._generation:
                return
            self._pending = None
            state = self._state
            if state.is_terminal or state.current_player == self.human:
                return
            action = self.opponent.act(state)
            self._state = apply_action(state, action)
            logger.info("Opponent played %s", action)
            self._publish()
