"""Shared fixtures: a manual clock for driving timers in virtual time, roster factory."""

from __future__ import annotations

import asyncio

import pytest

from stories.models import Roster, StoryCollection, StoryItem


class ManualClock:
    """Stand-in for ``asyncio.sleep`` whose time only moves on ``advance``."""

    def __init__(self) -> None:
        self.now_ms = 0
        self._sleepers: list[tuple[int, asyncio.Future]] = []

    @property
    def live_sleepers(self) -> int:
        return sum(1 for _, fut in self._sleepers if not fut.done())

    async def sleep(self, seconds: float) -> None:
        fut = asyncio.get_running_loop().create_future()
        self._sleepers.append((self.now_ms + round(seconds * 1000), fut))
        await fut

    async def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            self._sleepers = [(t, f) for t, f in self._sleepers if not f.done()]
            due = [entry for entry in self._sleepers if entry[0] <= target]
            if not due:
                break
            entry = min(due, key=lambda e: e[0])
            self._sleepers.remove(entry)
            self.now_ms = entry[0]
            entry[1].set_result(None)
            await _settle()
        self.now_ms = target


async def _settle(turns: int = 10) -> None:
    """Let woken tasks and call_soon callbacks run."""
    for _ in range(turns):
        await asyncio.sleep(0)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def settle():
    """Coroutine function that yields the event loop a few turns."""
    return _settle


@pytest.fixture
def make_roster():
    """Factory: one collection per item count, users named A, B, C..."""
    return _make_roster


def _make_roster(*item_counts: int) -> Roster:
    collections = []
    for idx, count in enumerate(item_counts):
        owner = chr(ord("A") + idx)
        collections.append(
            StoryCollection(
                id=str(idx + 1),
                owner_name=f"user{owner}",
                owner_avatar_ref=f"avatar://{owner}",
                items=tuple(
                    StoryItem(id=f"{idx + 1}-{n + 1}", media_ref=f"media://{owner}/{n}", timestamp_label=f"{n}h ago")
                    for n in range(count)
                ),
            )
        )
    return Roster(tuple(collections))
