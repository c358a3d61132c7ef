"""Frames and previews handed to the rendering surface."""

from __future__ import annotations

from dataclasses import dataclass, field

from stories.models import StoryCollection


@dataclass(frozen=True)
class ProgressBar:
    filled: bool
    fraction: float


@dataclass(frozen=True)
class Frame:
    """Everything a surface needs to draw the current story item."""

    roster_index: int
    item_index: int
    media_ref: str
    media_kind: str
    owner_name: str
    owner_avatar_ref: str
    timestamp_label: str
    progress_bars: list[ProgressBar] = field(default_factory=list)
    is_paused: bool = False


@dataclass(frozen=True)
class StoryPreview:
    """Grid tile for one user's collection on the roster view."""

    owner_name: str
    owner_avatar_ref: str
    thumbnail_ref: str
    count_label: str


def build_progress_bars(item_count: int, item_index: int, progress: float) -> list[ProgressBar]:
    """One bar per item: full before the active item, partial at it, empty after."""
    bars = []
    for idx in range(item_count):
        if idx < item_index:
            bars.append(ProgressBar(filled=True, fraction=1.0))
        elif idx == item_index:
            bars.append(ProgressBar(filled=progress >= 1.0, fraction=progress))
        else:
            bars.append(ProgressBar(filled=False, fraction=0.0))
    return bars


def build_frame(
    collection: StoryCollection,
    roster_index: int,
    item_index: int,
    progress: float,
    is_paused: bool = False,
) -> Frame:
    item = collection.items[item_index]
    return Frame(
        roster_index=roster_index,
        item_index=item_index,
        media_ref=item.media_ref,
        media_kind=item.media_kind,
        owner_name=collection.owner_name,
        owner_avatar_ref=collection.owner_avatar_ref,
        timestamp_label=item.timestamp_label,
        progress_bars=build_progress_bars(len(collection.items), item_index, progress),
        is_paused=is_paused,
    )


def count_label(count: int) -> str:
    return f"{count} story" if count == 1 else f"{count} stories"


def build_preview(collection: StoryCollection) -> StoryPreview:
    collection.require_items()
    return StoryPreview(
        owner_name=collection.owner_name,
        owner_avatar_ref=collection.owner_avatar_ref,
        thumbnail_ref=collection.items[0].media_ref,
        count_label=count_label(len(collection.items)),
    )


class RenderSurface:
    """No-op rendering surface. Subclass and override what you need."""

    def render(self, frame: Frame) -> None:
        pass

    def closed(self) -> None:
        pass
