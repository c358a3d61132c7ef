"""Terminal rendering surface for the story viewer."""

from __future__ import annotations

from typing import Callable

import click

from .frames import Frame, ProgressBar, RenderSurface, StoryPreview
from .theme import DEFAULT_THEME, palette

BAR_WIDTH = 10


def format_bar(bar: ProgressBar, width: int = BAR_WIDTH) -> str:
    cells = width if bar.filled else int(bar.fraction * width)
    return "█" * cells + "·" * (width - cells)


def format_preview(preview: StoryPreview, index: int) -> str:
    return f"{index:>3}. {preview.owner_name} ({preview.count_label}) {preview.thumbnail_ref}"


class ConsoleSurface(RenderSurface):
    """Draws one header line per story item and redraws the progress line in place."""

    def __init__(self, theme_mode: str = DEFAULT_THEME, echo: Callable[..., None] | None = None):
        self._colors = palette(theme_mode)
        self._echo = echo or click.echo
        self._last_key: tuple[int, int, bool] | None = None
        self.frames_rendered = 0

    def render(self, frame: Frame) -> None:
        self.frames_rendered += 1
        key = (frame.roster_index, frame.item_index, frame.is_paused)
        if key != self._last_key:
            if self._last_key is not None:
                self._echo("")
            self._echo(self._header(frame))
            self._last_key = key
        bars = " ".join(format_bar(bar) for bar in frame.progress_bars)
        self._echo("\r  " + click.style(bars, fg=self._colors["bar"]), nl=False)

    def closed(self) -> None:
        self._last_key = None
        self._echo("")
        self._echo(click.style("Stories closed.", fg=self._colors["muted"]))

    def _header(self, frame: Frame) -> str:
        owner = click.style(frame.owner_name, fg=self._colors["accent"], bold=True)
        stamp = click.style(frame.timestamp_label, fg=self._colors["muted"])
        state = click.style(" [paused]", fg=self._colors["muted"]) if frame.is_paused else ""
        media = click.style(f"{frame.media_kind}: {frame.media_ref}", fg=self._colors["text"])
        return f"{owner} {stamp}{state}\n  {media}"
