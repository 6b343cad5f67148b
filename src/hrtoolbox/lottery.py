"""Prize draw state machine.

Draws are sequential and, unless repeats are allowed, without replacement.
The module is split in two layers:

* Pure transition functions taking a :class:`LotteryState` and returning a
  new one.
* :class:`LotteryEngine`, which holds the only mutable reference to the
  state, drives the reveal animation and notifies subscribers with every new
  snapshot.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import replace
from typing import Any, Callable, List, Sequence, Tuple

from .clock import AsyncioFrameScheduler, Clock, FrameScheduler, MonotonicClock
from .config import get_settings
from .exceptions import NoEligibleParticipantsError
from .logging import logger
from .models import LotteryState, Participant

StateListener = Callable[[LotteryState], None]


def initial_state(roster: Sequence[Participant], allow_repeat: bool = False) -> LotteryState:
    return LotteryState(allow_repeat=allow_repeat, available=tuple(roster))


def eligible_pool(state: LotteryState, roster: Sequence[Participant]) -> Tuple[Participant, ...]:
    """Return the participants the next draw may pick from."""

    return tuple(roster) if state.allow_repeat else state.available


def begin_draw(state: LotteryState, roster: Sequence[Participant]) -> LotteryState:
    """Enter the rolling state.

    A second call while rolling returns ``state`` unchanged. An empty pool
    raises :class:`NoEligibleParticipantsError` and leaves the state alone.
    """

    if state.is_rolling:
        return state
    if not eligible_pool(state, roster):
        raise NoEligibleParticipantsError()
    return replace(state, is_rolling=True, current_winner=None)


def sample_display_names(
    pool: Sequence[Participant], rng: random.Random, count: int = 6
) -> Tuple[str, ...]:
    if not pool:
        return ()
    return tuple(rng.choice(pool).name for _ in range(count))


def complete_draw(
    state: LotteryState, roster: Sequence[Participant], rng: random.Random
) -> LotteryState:
    """Pick the winner from the pool as it is now and settle the draw."""

    pool = eligible_pool(state, roster)
    if not pool:
        return replace(state, is_rolling=False, display_names=())

    winner = pool[rng.randrange(len(pool))]
    available = state.available
    if not state.allow_repeat:
        index = next(i for i, p in enumerate(available) if p.id == winner.id)
        available = available[:index] + available[index + 1 :]
    return replace(
        state,
        available=available,
        current_winner=winner,
        history=(winner,) + state.history,
        is_rolling=False,
        display_names=(winner.name,),
    )


def reset(state: LotteryState, roster: Sequence[Participant]) -> LotteryState:
    return LotteryState(allow_repeat=state.allow_repeat, available=tuple(roster))


def clear_history(state: LotteryState) -> LotteryState:
    if not state.history:
        return state
    return replace(state, history=())


def set_allow_repeat(state: LotteryState, allow_repeat: bool) -> LotteryState:
    if state.is_rolling or state.allow_repeat == allow_repeat:
        return state
    return replace(state, allow_repeat=allow_repeat)


class LotteryEngine:
    """Runs animated draws over a roster and publishes state snapshots."""

    def __init__(
        self,
        roster: Sequence[Participant] = (),
        *,
        allow_repeat: bool = False,
        settings=None,
        clock: Clock | None = None,
        frames: FrameScheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._roster: Tuple[Participant, ...] = tuple(roster)
        self._state = initial_state(self._roster, allow_repeat)
        self._clock = clock or MonotonicClock()
        self._frames = frames or AsyncioFrameScheduler(self.settings.frame_interval_ms)
        self._rng = rng or random.Random()
        self._listeners: List[StateListener] = []
        self._frame_handle: Any = None
        self._started_at = 0.0
        self._waiters: List[asyncio.Future] = []

    @property
    def state(self) -> LotteryState:
        return self._state

    @property
    def roster(self) -> Tuple[Participant, ...]:
        return self._roster

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start_draw(self) -> LotteryState:
        """Start a draw and return immediately.

        The animation proceeds on the frame scheduler; completion is observed
        through subscribers or :meth:`wait_until_idle`.
        """

        if self._state.is_rolling:
            logger.debug("Draw already in progress, ignoring start request")
            return self._state
        rolling = begin_draw(self._state, self._roster)
        self._started_at = self._clock.now()
        self._frame_handle = self._frames.request_frame(self._tick)
        self._set_state(rolling)
        logger.bind(event="draw_started", pool=len(self.eligible())).info("draw_started")
        return self._state

    def eligible(self) -> Tuple[Participant, ...]:
        return eligible_pool(self._state, self._roster)

    def reset(self, confirm: Callable[[], bool] | None = None) -> LotteryState:
        if self._state.is_rolling:
            return self._state
        if confirm is not None and not confirm():
            return self._state
        self._set_state(reset(self._state, self._roster))
        logger.bind(event="lottery_reset", pool=len(self._roster)).info("lottery_reset")
        return self._state

    def clear_history(self) -> LotteryState:
        self._set_state(clear_history(self._state))
        return self._state

    def set_allow_repeat(self, allow_repeat: bool) -> LotteryState:
        self._set_state(set_allow_repeat(self._state, allow_repeat))
        return self._state

    def on_roster_changed(self, roster: Sequence[Participant]) -> None:
        """Adopt a new roster and fully reset, even in the middle of a roll."""

        if self._frame_handle is not None:
            self._frames.cancel(self._frame_handle)
            self._frame_handle = None
        self._roster = tuple(roster)
        self._set_state(initial_state(self._roster, self._state.allow_repeat))
        self._release_waiters()

    async def wait_until_idle(self) -> Participant | None:
        """Wait for the in-flight draw to settle and return the winner."""

        if not self._state.is_rolling:
            return self._state.current_winner
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._waiters.append(future)
        return await future

    def _tick(self) -> None:
        self._frame_handle = None
        if not self._state.is_rolling:
            return
        elapsed = self._clock.now() - self._started_at
        if elapsed < self.settings.draw_duration_ms:
            names = sample_display_names(
                self.eligible(), self._rng, self.settings.display_sample_size
            )
            self._frame_handle = self._frames.request_frame(self._tick)
            self._set_state(replace(self._state, display_names=names))
            return

        self._set_state(complete_draw(self._state, self._roster, self._rng))
        winner = self._state.current_winner
        logger.bind(
            event="draw_completed",
            winner_id=winner.id if winner else None,
            remaining=len(self._state.available),
            draws=len(self._state.history),
        ).info("draw_completed")
        self._release_waiters()

    def _release_waiters(self) -> None:
        waiters, self._waiters = self._waiters, []
        for future in waiters:
            if not future.done():
                future.set_result(self._state.current_winner)

    def _set_state(self, state: LotteryState) -> None:
        if state is self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:
                logger.exception("Lottery listener {!r} failed: {}", listener, exc)
