"""Playback timer - drives one story item's progress from 0 to 1.

Progress is kept as an integer tick count so that it lands exactly on 1.0
after ``duration_ms / tick_interval_ms`` ticks. The periodic schedule is a
single asyncio task owned by the timer; completion is posted to the next
turn of the event loop instead of being delivered from inside the tick
that produced it.

All public methods must be called from within a running event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS = 50
DEFAULT_DURATION_MS = 5000


class PlaybackTimer:
    """Single-owner repeating timer for the active story item."""

    def __init__(
        self,
        on_complete: Callable[[], None],
        on_progress: Callable[[float], None] | None = None,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        default_duration_ms: int = DEFAULT_DURATION_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {tick_interval_ms}")
        if default_duration_ms <= 0:
            raise ValueError(f"default_duration_ms must be positive, got {default_duration_ms}")
        self._on_complete = on_complete
        self._on_progress = on_progress
        self._tick_interval_ms = tick_interval_ms
        self._default_duration_ms = default_duration_ms
        self._sleep = sleep

        self._duration_ms = default_duration_ms
        self._ticks = 0
        self._paused = False
        self._completed = False
        self._task: asyncio.Task | None = None
        self._pending_completion: asyncio.Handle | None = None

    # ── State ───────────────────────────────────────────────────

    @property
    def progress(self) -> float:
        return min(1.0, self._ticks * self._tick_interval_ms / self._duration_ms)

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def default_duration_ms(self) -> int:
        return self._default_duration_ms

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def is_scheduled(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def remaining_ticks(self) -> int:
        total = -(-self._duration_ms // self._tick_interval_ms)
        return max(0, total - self._ticks)

    # ── Control ─────────────────────────────────────────────────

    def start(self, duration_ms: int | None = None) -> None:
        """Begin a new item from zero, replacing any previous schedule."""
        self.cancel()
        if duration_ms is not None and duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self._duration_ms = duration_ms if duration_ms is not None else self._default_duration_ms
        self._ticks = 0
        self._paused = False
        self._completed = False
        self._schedule()
        logger.debug("Timer started: %dms at %dms/tick", self._duration_ms, self._tick_interval_ms)

    def pause(self) -> None:
        if self._paused or self._completed:
            return
        self._paused = True
        self._drop_schedule()
        logger.debug("Timer paused at %.2f", self.progress)

    def resume(self) -> None:
        if not self._paused:
            return
        self._paused = False
        if not self._completed:
            self._schedule()
            logger.debug("Timer resumed at %.2f (%d ticks left)", self.progress, self.remaining_ticks)

    def cancel(self) -> None:
        """Stop ticking and discard a completion that has not been delivered yet."""
        self._drop_schedule()
        if self._pending_completion is not None:
            self._pending_completion.cancel()
            self._pending_completion = None
        self._paused = False

    def tick(self) -> None:
        """Advance progress by one tick interval."""
        if self._completed or self._paused:
            return
        self._ticks += 1
        progress = self.progress
        if self._on_progress is not None:
            self._on_progress(progress)
        if progress >= 1.0:
            self._completed = True
            self._drop_schedule()
            loop = asyncio.get_running_loop()
            self._pending_completion = loop.call_soon(self._deliver_completion)

    # ── Internals ───────────────────────────────────────────────

    def _schedule(self) -> None:
        self._drop_schedule()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run())

    def _drop_schedule(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        # The tick loop may drop its own schedule on completion; it exits by itself then.
        if task is not asyncio.current_task():
            task.cancel()

    async def _run(self) -> None:
        interval = self._tick_interval_ms / 1000
        me = asyncio.current_task()
        while self._task is me:
            await self._sleep(interval)
            if self._task is not me:
                return
            self.tick()

    def _deliver_completion(self) -> None:
        self._pending_completion = None
        logger.debug("Item complete after %d ticks", self._ticks)
        self._on_complete()
