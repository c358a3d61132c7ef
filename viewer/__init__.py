"""Presentation side of the story viewer: frames, previews, theme, console surface."""
