"""
Selection-driven filter commands: connected, same-color, hide-selected, show-all.
"""

import logging
from typing import Optional, Tuple

import click

from ..formatting import render_json, render_table
from ..utils import build_commands, load_document, resolve_mode, resolve_settings, resolve_vault, run_or_exit

logger = logging.getLogger(__name__)

DIRECTION_COMMANDS = {
    "both": "show-connected-nodes-from-to",
    "downstream": "show-connected-nodes-from",
    "upstream": "show-connected-nodes-to",
}


def canvas_options(func):
    """Options shared by every filter command."""
    func = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(func)
    func = click.option(
        "--mode", type=click.Choice(["hide", "fade"]), default=None,
        help="Hide or fade filtered-out elements (default from settings)",
    )(func)
    func = click.option(
        "-s", "--select", "selection", multiple=True,
        help="Id of a selected node or edge (repeatable)",
    )(func)
    func = click.argument("canvas", type=click.Path(exists=True, dir_okay=False))(func)
    return func


def _run(canvas: str, selection: Tuple[str, ...], mode: Optional[str], as_json: bool, command_id: str) -> None:
    settings = resolve_settings()
    document = load_document(canvas)
    if document is None:
        raise SystemExit(1)

    commands, host = build_commands(
        document,
        selection,
        resolve_mode(mode, settings),
        resolve_vault(None, settings, canvas),
    )
    run_or_exit(commands, command_id)

    if as_json:
        click.echo(render_json(host, commands.session))
    else:
        render_table(host, commands.session)


@click.command()
@canvas_options
@click.option(
    "--direction", type=click.Choice(list(DIRECTION_COMMANDS)), default="both",
    help="Follow arrows forward (downstream), backward (upstream) or both",
)
def connected(canvas: str, selection: Tuple[str, ...], mode: Optional[str], as_json: bool, direction: str):
    """
    Show the selected nodes and everything connected to them by arrows.
    """
    _run(canvas, selection, mode, as_json, DIRECTION_COMMANDS[direction])


@click.command("same-color")
@canvas_options
def same_color(canvas: str, selection: Tuple[str, ...], mode: Optional[str], as_json: bool):
    """
    Show every node sharing a color with the selected nodes.
    """
    _run(canvas, selection, mode, as_json, "show-only-same-color")


@click.command("hide-selected")
@canvas_options
@click.option("--with-connections", is_flag=True, help="Also hide arrows touching the selected nodes")
def hide_selected(
    canvas: str, selection: Tuple[str, ...], mode: Optional[str], as_json: bool, with_connections: bool,
):
    """
    Hide (or fade) just the selected elements.
    """
    _run(canvas, selection, mode, as_json, "show-hide-connected" if with_connections else "show-hide")


@click.command("show-all")
@canvas_options
def show_all(canvas: str, selection: Tuple[str, ...], mode: Optional[str], as_json: bool):
    """
    Reset every element to fully visible.
    """
    _run(canvas, selection, mode, as_json, "show-all")
