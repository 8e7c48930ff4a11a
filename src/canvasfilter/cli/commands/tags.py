"""
Tag commands: filter a canvas by tag, or list the tags available.
"""

import logging
from typing import Optional, Tuple

import click

from ...analysis.tags import TagMatchMode
from ...commands import tag_command_id
from ...filters.tag_choice import request_tag_choice
from ..formatting import console, render_json, render_table
from ..utils import (
    ScriptedTagPicker,
    build_commands,
    echo_info,
    load_document,
    resolve_mode,
    resolve_settings,
    resolve_vault,
    run_or_exit,
)

logger = logging.getLogger(__name__)


@click.command()
@click.argument("canvas", type=click.Path(exists=True, dir_okay=False))
@click.option("-t", "--tag", "tags", multiple=True, help="Tag to filter by, e.g. '#todo' (repeatable)")
@click.option("--exclude", is_flag=True, help="Show nodes that do NOT carry the tag")
@click.option("--additive", is_flag=True, help="Accumulate matches across repeated --tag")
@click.option("--vault", type=click.Path(exists=True, file_okay=False), help="Vault root for file nodes")
@click.option("--mode", type=click.Choice(["hide", "fade"]), default=None, help="Hide or fade filtered-out elements")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tag(
    canvas: str,
    tags: Tuple[str, ...],
    exclude: bool,
    additive: bool,
    vault: Optional[str],
    mode: Optional[str],
    as_json: bool,
):
    """
    Show only nodes matching a tag.

    Without --tag, prompts for one of the tags found on the canvas and in
    the vault. Repeating --tag without --additive keeps only the last pick.
    """
    if as_json and not tags:
        raise click.UsageError("--json requires at least one --tag")

    match_mode = TagMatchMode.EXCLUSIVE if exclude else TagMatchMode.INCLUSIVE
    settings = resolve_settings()
    document = load_document(canvas)
    if document is None:
        raise SystemExit(1)

    commands, host = build_commands(
        document,
        (),
        resolve_mode(mode, settings),
        resolve_vault(vault, settings, canvas),
        picker=ScriptedTagPicker(tags),
    )
    outcome = run_or_exit(commands, tag_command_id(match_mode, additive))
    if outcome.pending is not None:
        commands.close_tag_choice(outcome.pending.token)

    if as_json:
        click.echo(render_json(host, commands.session))
    else:
        render_table(host, commands.session)


@click.command("tags")
@click.argument("canvas", type=click.Path(exists=True, dir_okay=False))
@click.option("--vault", type=click.Path(exists=True, file_okay=False), help="Vault root for file nodes")
def list_tags(canvas: str, vault: Optional[str]):
    """
    List the tags a tag filter can choose from.
    """
    settings = resolve_settings()
    document = load_document(canvas)
    if document is None:
        raise SystemExit(1)

    metadata = resolve_vault(vault, settings, canvas)
    pending = request_tag_choice(document.snapshot(), metadata.all_tags(), TagMatchMode.INCLUSIVE, additive=False)
    if not pending.candidates:
        echo_info("No tags found")
        return
    for candidate in pending.candidates:
        console.print(candidate, highlight=False)
