"""
CLI Utilities - Shared helpers for the command line host.

Printing helpers, canvas loading, and the terminal implementations of the
notifier and tag picker collaborators.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

import click

from ..canvas_file import CanvasDocument, FileCanvasHost, load_canvas
from ..commands import CanvasFilterCommands
from ..config import Settings, load_settings
from ..core.exceptions import CanvasLoadError, ConfigError, EmptySelectionError
from ..core.session import FilterSession
from ..core.types import DisplayMode
from ..vault import VaultMetadataSource

logger = logging.getLogger(__name__)


def echo_error(message: str) -> None:
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


class EchoNotifier:
    """Notifier that prints each message as a warning line."""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
        echo_warning(message)


class ScriptedTagPicker:
    """
    Tag picker for the terminal.

    With preset tags it chooses each of them in order. Without, it prompts
    once with the candidates.
    """

    def __init__(self, tags: Sequence[str] = ()):
        self.tags = list(tags)

    def open(self, candidates: Sequence[str], on_choose: Callable[[str], None]) -> None:
        if self.tags:
            for tag in self.tags:
                on_choose(tag)
            return
        if not candidates:
            echo_error("No tags found on this canvas")
            return
        tag = click.prompt("Tag", type=click.Choice(list(candidates)), show_choices=True)
        on_choose(tag)


def load_document(canvas_path: str) -> Optional[CanvasDocument]:
    try:
        return load_canvas(Path(canvas_path))
    except CanvasLoadError as e:
        echo_error(str(e))
        return None


def resolve_settings() -> Settings:
    try:
        return load_settings(Path.cwd())
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)


def resolve_mode(mode: Optional[str], settings: Settings) -> DisplayMode:
    return DisplayMode(mode or settings.display_mode)


def resolve_vault(vault: Optional[str], settings: Settings, canvas_path: str) -> VaultMetadataSource:
    """Explicit --vault wins, then settings, then the canvas file's folder."""
    if vault:
        root = Path(vault)
    elif settings.vault is not None:
        root = settings.vault
    else:
        root = Path(canvas_path).parent
    logger.debug("Using vault root %s", root)
    return VaultMetadataSource(root)


def build_commands(
    document: CanvasDocument,
    selection: Iterable[str],
    mode: DisplayMode,
    metadata: VaultMetadataSource,
    picker: Optional[ScriptedTagPicker] = None,
) -> tuple[CanvasFilterCommands, FileCanvasHost]:
    host = FileCanvasHost(document, selection)
    for unknown in host.unknown_selection():
        echo_warning(f"Selected id not on canvas: {unknown}")
    commands = CanvasFilterCommands(
        host=host,
        metadata=metadata,
        notifier=EchoNotifier(),
        picker=picker or ScriptedTagPicker(),
        session=FilterSession(mode),
    )
    return commands, host


def run_or_exit(commands: CanvasFilterCommands, command_id: str):
    """Execute a command; print the error and exit 1 on failure."""
    result = commands.execute(command_id)
    if result.is_err():
        # Empty selections were already reported through the notifier
        if not isinstance(result.error, EmptySelectionError):
            echo_error(str(result.error))
        raise SystemExit(1)
    return result.unwrap()
