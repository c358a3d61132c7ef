"""Data models for story collections supplied by the roster provider."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator

from playback.errors import EmptyCollectionError, RosterFormatError

MEDIA_KINDS = ("image", "video")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _as_duration(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        duration = int(value)
    except (TypeError, ValueError) as exc:
        raise RosterFormatError(f"Invalid duration: {value!r}") from exc
    if duration <= 0:
        raise RosterFormatError(f"Duration must be positive, got {duration}")
    return duration


@dataclass(frozen=True)
class StoryItem:
    id: str
    media_ref: str
    media_kind: str = "image"  # "image" | "video"
    timestamp_label: str = ""
    duration_ms: int | None = None  # None -> configured default

    def __post_init__(self) -> None:
        if self.media_kind not in MEDIA_KINDS:
            raise RosterFormatError(f"Unknown media kind: {self.media_kind!r}")

    def effective_duration(self, default_ms: int) -> int:
        return self.duration_ms if self.duration_ms is not None else default_ms

    @classmethod
    def from_dict(cls, data: dict) -> StoryItem:
        if not isinstance(data, dict):
            raise RosterFormatError(f"Story item must be a mapping, got {data!r}")
        return cls(
            id=_as_text(data.get("id", "")),
            media_ref=_as_text(data.get("media_ref", data.get("url", ""))),
            media_kind=_as_text(data.get("media_kind", data.get("type", "image"))) or "image",
            timestamp_label=_as_text(data.get("timestamp_label", data.get("timestamp", ""))),
            duration_ms=_as_duration(data.get("duration_ms", data.get("duration"))),
        )


@dataclass(frozen=True)
class StoryCollection:
    """One user's stories, shown back to back in the viewer."""

    id: str
    owner_name: str
    owner_avatar_ref: str = ""
    items: tuple[StoryItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def require_items(self) -> None:
        if not self.items:
            raise EmptyCollectionError(f"Story collection {self.id!r} has no items")

    @classmethod
    def from_dict(cls, data: dict) -> StoryCollection:
        if not isinstance(data, dict):
            raise RosterFormatError(f"Story collection must be a mapping, got {data!r}")
        raw_items = data.get("items", data.get("stories")) or []
        if not isinstance(raw_items, list):
            raise RosterFormatError(f"Items of collection {data.get('id')!r} must be a list")
        collection = cls(
            id=_as_text(data.get("id", "")),
            owner_name=_as_text(data.get("owner_name", data.get("username", ""))),
            owner_avatar_ref=_as_text(data.get("owner_avatar_ref", data.get("avatar", ""))),
            items=tuple(StoryItem.from_dict(item) for item in raw_items),
        )
        collection.require_items()
        return collection


@dataclass(frozen=True)
class Roster:
    """Ordered, immutable snapshot of story collections.

    Display order is insertion order and every collection has at least one
    item. Adding a story never mutates a
    roster in place; ``with_story`` and ``with_collection`` return a new
    snapshot, so an open viewing session keeps the roster it started with.
    """

    collections: tuple[StoryCollection, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for collection in self.collections:
            collection.require_items()

    def __len__(self) -> int:
        return len(self.collections)

    def __getitem__(self, index: int) -> StoryCollection:
        return self.collections[index]

    def __iter__(self) -> Iterator[StoryCollection]:
        return iter(self.collections)

    def index_of(self, collection_id: str) -> int:
        for idx, collection in enumerate(self.collections):
            if collection.id == collection_id:
                return idx
        raise KeyError(collection_id)

    def with_story(self, collection_id: str, item: StoryItem) -> Roster:
        idx = self.index_of(collection_id)
        target = self.collections[idx]
        updated = replace(target, items=target.items + (item,))
        return Roster(self.collections[:idx] + (updated,) + self.collections[idx + 1:])

    def with_collection(self, collection: StoryCollection) -> Roster:
        collection.require_items()
        if any(c.id == collection.id for c in self.collections):
            raise RosterFormatError(f"Duplicate collection id: {collection.id!r}")
        return Roster(self.collections + (collection,))

    @classmethod
    def from_list(cls, data: list[dict]) -> Roster:
        roster = cls()
        for raw in data:
            roster = roster.with_collection(StoryCollection.from_dict(raw))
        return roster
