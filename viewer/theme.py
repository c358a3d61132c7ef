"""Colour palettes for the console surface, one per theme mode."""

from __future__ import annotations

THEME_MODES = ("light", "dark", "solarized")
DEFAULT_THEME = "light"

# click.style colour names
_PALETTES = {
    "light": {"text": "black", "muted": "bright_black", "accent": "blue", "bar": "blue"},
    "dark": {"text": "white", "muted": "bright_black", "accent": "cyan", "bar": "bright_white"},
    "solarized": {"text": "yellow", "muted": "bright_black", "accent": "magenta", "bar": "green"},
}


def palette(mode: str) -> dict[str, str]:
    return _PALETTES.get(mode, _PALETTES[DEFAULT_THEME])
