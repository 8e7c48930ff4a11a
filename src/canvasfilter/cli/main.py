"""
canvasfilter CLI - Main entry point.

Each command is implemented in its own module under cli/commands/.
"""

import logging

import click

from .commands import filters, tags


@click.group()
@click.version_option(package_name="canvas-filter")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """canvasfilter: show only the parts of a canvas you care about.

    Loads a JSON Canvas file, applies a filter and reports which nodes
    and edges end up shown, faded or hidden.

    \b
    Quick Start:
      canvasfilter connected board.canvas -s node1 --direction downstream
      canvasfilter same-color board.canvas -s node1 --mode fade
      canvasfilter tag board.canvas --tag "#todo" --tag "#idea" --additive
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


main.add_command(filters.connected)
main.add_command(filters.same_color)
main.add_command(filters.hide_selected)
main.add_command(filters.show_all)
main.add_command(tags.tag)
main.add_command(tags.list_tags)

if __name__ == "__main__":
    main()
