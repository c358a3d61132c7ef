"""Entry point for the story viewer.

Usage:
    python main.py --list                          # Show the roster
    python main.py --open 0                        # Play from the first user
    python main.py --open 1 -i advance -i close    # Scripted intents
    python main.py --theme dark                    # Persist theme preference
    python main.py --open 0 --verbose              # Verbose logging
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from playback.config import load_config, roster_file
from playback.errors import StoryViewerError
from playback.session import INTENTS, SessionController
from stories.roster import load_roster
from viewer.console import ConsoleSurface, format_preview
from viewer.frames import build_preview
from viewer.preferences import PreferencesStore
from viewer.theme import THEME_MODES

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    fmt = "%(asctime)s — %(name)s — %(levelname)s — %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=fmt, handlers=handlers)


async def _play(
    controller: SessionController,
    roster_index: int,
    intents: tuple[str, ...],
    intent_delay: float,
) -> None:
    controller.open_session(roster_index)
    for intent in intents:
        await asyncio.sleep(intent_delay)
        if not controller.is_open:
            break
        logger.info("Scripted intent: %s", intent)
        controller.handle_intent(intent)
    try:
        await controller.wait_closed()
    finally:
        controller.close()


@click.command()
@click.option("--list", "list_roster", is_flag=True, help="List story collections and exit")
@click.option("--open", "open_index", type=int, default=None, help="Open the viewer at this roster index")
@click.option("--intent", "-i", "intents", multiple=True, type=click.Choice(INTENTS), help="Scripted intent (repeatable)")
@click.option("--intent-delay", type=float, default=1.0, show_default=True, help="Seconds between scripted intents")
@click.option("--theme", type=click.Choice(THEME_MODES), default=None, help="Set and persist the theme")
@click.option("--roster", "roster_path", type=click.Path(), default=None, help="Roster YAML file")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.option("--config-dir", type=click.Path(), default=None, help="Config directory")
def main(
    list_roster: bool,
    open_index: int | None,
    intents: tuple[str, ...],
    intent_delay: float,
    theme: str | None,
    roster_path: str | None,
    verbose: bool,
    config_dir: str | None,
) -> None:
    """Story viewer: auto-advancing stories with pause, resume and multi-user traversal."""

    if not list_roster and open_index is None and theme is None:
        click.echo("Specify --list, --open or --theme. Use --help for details.")
        sys.exit(1)

    cfg = load_config(config_dir)
    log_file = cfg.get("storage", {}).get("log_file")
    _setup_logging(verbose=verbose, log_file=log_file)

    root = Path(__file__).resolve().parent
    prefs_store = PreferencesStore(root / cfg["storage"]["preferences_file"])
    if theme:
        prefs_store.set_theme(theme)
        click.echo(f"Theme set to {theme}.")
    theme_mode = cfg["_env"]["theme"] or prefs_store.load().theme_mode

    try:
        roster = load_roster(roster_path or roster_file(cfg) or None)
    except (FileNotFoundError, StoryViewerError) as exc:
        raise click.ClickException(str(exc)) from exc

    if list_roster:
        for idx, collection in enumerate(roster):
            click.echo(format_preview(build_preview(collection), idx))

    if open_index is None:
        return

    playback_cfg = cfg.get("playback", {})
    controller = SessionController(
        roster,
        surface=ConsoleSurface(theme_mode=theme_mode),
        tick_interval_ms=playback_cfg.get("tick_interval_ms", 50),
        default_duration_ms=playback_cfg.get("default_duration_ms", 5000),
    )
    try:
        asyncio.run(_play(controller, open_index, intents, intent_delay))
    except StoryViewerError as exc:
        raise click.ClickException(str(exc)) from exc
    except KeyboardInterrupt:
        click.echo("\nStories closed.")


if __name__ == "__main__":
    main()
