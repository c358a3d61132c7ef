"""Session controller - the story viewer's state machine.

States: closed -> viewing(roster_index, item_index) -> closed.

The controller owns the roster snapshot it was given, the one playback
timer, and the session state. It asks the navigation resolver where to go
and tells the rendering surface what to draw.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from stories.models import Roster
from viewer.frames import Frame, RenderSurface, build_frame

from . import navigation
from .errors import InvalidIndexError, SessionStateError
from .timer import DEFAULT_DURATION_MS, DEFAULT_TICK_INTERVAL_MS, PlaybackTimer

logger = logging.getLogger(__name__)

# Intents sent by the rendering surface
INTENT_ADVANCE = "advance"
INTENT_RETREAT = "retreat"
INTENT_PAUSE_BEGIN = "pause_begin"
INTENT_PAUSE_END = "pause_end"
INTENT_CLOSE = "close"

INTENTS = (INTENT_ADVANCE, INTENT_RETREAT, INTENT_PAUSE_BEGIN, INTENT_PAUSE_END, INTENT_CLOSE)


@dataclass
class SessionState:
    """Ephemeral position of an open viewing session."""

    roster_index: int
    item_index: int
    progress: float = 0.0
    is_paused: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.roster_index, self.item_index)


class SessionController:
    """Plays a roster of story collections one item at a time."""

    def __init__(
        self,
        roster: Roster,
        surface: RenderSurface | None = None,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        default_duration_ms: int = DEFAULT_DURATION_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._roster = roster
        self._surface = surface or RenderSurface()
        self._state: SessionState | None = None
        self._closed_event: asyncio.Event | None = None
        self._timer = PlaybackTimer(
            on_complete=self._on_item_complete,
            on_progress=self._on_progress,
            tick_interval_ms=tick_interval_ms,
            default_duration_ms=default_duration_ms,
            sleep=sleep,
        )

    # ── State ───────────────────────────────────────────────────

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def state(self) -> SessionState | None:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is not None

    @property
    def position(self) -> tuple[int, int] | None:
        return self._state.position if self._state else None

    @property
    def timer(self) -> PlaybackTimer:
        return self._timer

    def current_frame(self) -> Frame:
        state = self._require_open()
        return build_frame(
            self._roster[state.roster_index],
            state.roster_index,
            state.item_index,
            state.progress,
            is_paused=state.is_paused,
        )

    # ── Transitions ─────────────────────────────────────────────

    def open_session(self, roster_index: int) -> None:
        """Closed -> viewing(roster_index, 0)."""
        if self._state is not None:
            raise SessionStateError("A session is already open; close it first")
        if not 0 <= roster_index < len(self._roster):
            raise InvalidIndexError(roster_index, 0)
        self._closed_event = asyncio.Event()
        logger.info("Opening stories of %s", self._roster[roster_index].owner_name)
        self._enter(roster_index, 0)

    def advance(self) -> None:
        state = self._require_open()
        outcome = navigation.resolve_intent(
            state.roster_index,
            state.item_index,
            len(self._roster[state.roster_index]),
            len(self._roster),
            navigation.ADVANCE,
        )
        self._apply(outcome)

    def retreat(self) -> None:
        state = self._require_open()
        outcome = navigation.resolve_intent(
            state.roster_index,
            state.item_index,
            len(self._roster[state.roster_index]),
            len(self._roster),
            navigation.RETREAT,
        )
        self._apply(outcome)

    def pause(self) -> None:
        state = self._require_open()
        if state.is_paused:
            return
        self._timer.pause()
        state.is_paused = True
        self._render()

    def resume(self) -> None:
        state = self._require_open()
        if not state.is_paused:
            return
        state.is_paused = False
        self._timer.resume()
        self._render()

    def close(self) -> None:
        """Viewing -> closed. Closing an already closed session does nothing."""
        self._timer.cancel()
        if self._state is None:
            return
        logger.info("Closing story session at %s", self._state.position)
        self._state = None
        if self._closed_event is not None:
            self._closed_event.set()
        self._surface.closed()

    def handle_intent(self, intent: str) -> None:
        """Dispatch one of the surface intents."""
        if intent == INTENT_ADVANCE:
            self.advance()
        elif intent == INTENT_RETREAT:
            self.retreat()
        elif intent == INTENT_PAUSE_BEGIN:
            self.pause()
        elif intent == INTENT_PAUSE_END:
            self.resume()
        elif intent == INTENT_CLOSE:
            self.close()
        else:
            raise ValueError(f"Unknown intent: {intent!r}")

    async def wait_closed(self) -> None:
        if self._closed_event is None:
            return
        await self._closed_event.wait()

    # ── Internals ───────────────────────────────────────────────

    def _require_open(self) -> SessionState:
        if self._state is None:
            raise SessionStateError("No story session is open")
        return self._state

    def _apply(self, outcome: navigation.Outcome) -> None:
        state = self._require_open()
        if outcome.kind in (navigation.NEXT_ITEM, navigation.PREV_ITEM):
            self._enter(state.roster_index, outcome.index)
        elif outcome.kind in (navigation.NEXT_USER, navigation.PREV_USER):
            logger.info("Switching to stories of %s", self._roster[outcome.index].owner_name)
            self._enter(outcome.index, 0)
        elif outcome.kind == navigation.CLOSE:
            self.close()
        elif outcome.kind == navigation.NOOP:
            logger.debug("Already at the first story; nothing to go back to")
        else:
            raise SessionStateError(f"Unresolved navigation outcome: {outcome.kind}")

    def _enter(self, roster_index: int, item_index: int) -> None:
        if not 0 <= roster_index < len(self._roster):
            raise InvalidIndexError(roster_index, item_index)
        collection = self._roster[roster_index]
        collection.require_items()
        if not 0 <= item_index < len(collection):
            raise InvalidIndexError(roster_index, item_index)

        item = collection.items[item_index]
        self._timer.start(item.effective_duration(self._timer.default_duration_ms))
        self._state = SessionState(roster_index=roster_index, item_index=item_index)
        logger.debug("Viewing %s item %d/%d", collection.owner_name, item_index + 1, len(collection))
        self._render()

    def _render(self) -> None:
        self._surface.render(self.current_frame())

    def _on_progress(self, progress: float) -> None:
        if self._state is None:
            return
        self._state.progress = progress
        self._render()

    def _on_item_complete(self) -> None:
        if self._state is None:
            return
        self.advance()
