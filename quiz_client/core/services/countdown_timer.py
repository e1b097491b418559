"""Countdown clock that drives the quiz time limit."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from quiz_client.constants.quiz_constants import (
    TIMER_TICK_INTERVAL_SECONDS,
    TIMER_WARNING_THRESHOLD_SECONDS,
)

logger = logging.getLogger(__name__)


class CancelHandle(Protocol):
    """Handle returned by a scheduler; cancelling stops further callbacks."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Something that can invoke a callback repeatedly at a fixed interval."""

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> CancelHandle: ...


class CountdownTimer:
    """Ticks once per second and fires ``on_expire`` exactly once at zero."""

    def __init__(
        self,
        total_seconds: int,
        on_expire: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        if total_seconds < 0:
            raise ValueError("Countdown length cannot be negative.")
        self._total_seconds = total_seconds
        self._remaining_seconds = total_seconds
        self._on_expire = on_expire
        self._on_tick = on_tick
        self._handle: CancelHandle | None = None
        self._started = False
        self._stopped = False

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def is_running(self) -> bool:
        return self._started and not self._stopped

    def start(self, scheduler: Scheduler) -> None:
        if self._started:
            raise RuntimeError("Countdown has already been started.")
        self._started = True
        logger.debug("Countdown started with %ss", self._total_seconds)
        if self._remaining_seconds == 0:
            self._expire()
            return
        self._handle = scheduler.schedule_repeating(TIMER_TICK_INTERVAL_SECONDS, self.tick)

    def tick(self) -> None:
        """Advance the clock by one second."""
        if self._stopped:
            return
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        if self._on_tick is not None:
            self._on_tick(self._remaining_seconds)
        if self._remaining_seconds == 0:
            self._expire()

    def cancel(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug("Countdown cancelled with %ss remaining", self._remaining_seconds)

    def _expire(self) -> None:
        self.cancel()
        logger.info("Countdown reached zero after %ss", self._total_seconds)
        self._on_expire()


def format_clock(seconds: int) -> str:
    """Format a second count as ``MM:SS``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def is_warning(seconds: int) -> bool:
    return seconds <= TIMER_WARNING_THRESHOLD_SECONDS
