"""Human and JSON renderings of the presentation state."""

import json
from typing import Any, Dict

from rich.console import Console
from rich.table import Table

from ..canvas_file import FileCanvasHost
from ..core.session import FilterSession
from ..presentation import Display

console = Console()

_DISPLAY_STYLES = {
    "shown": "green",
    "faded": "yellow",
    "hidden": "red",
}


def _label(display: Display, opacity: float) -> str:
    if display == Display.HIDDEN:
        return "hidden"
    return "shown" if opacity >= 1.0 else "faded"


def state_to_dict(host: FileCanvasHost, session: FilterSession) -> Dict[str, Any]:
    state = host.presentation.to_dict()
    return {
        "mode": str(session.mode),
        "shown": sorted(session.shown),
        "nodes": state["nodes"],
        "edges": state["edges"],
    }


def render_json(host: FileCanvasHost, session: FilterSession) -> str:
    return json.dumps(state_to_dict(host, session), indent=2)


def render_table(host: FileCanvasHost, session: FilterSession) -> None:
    table = Table(title=f"Canvas visibility (mode: {session.mode})", show_header=True, header_style="bold")
    table.add_column("Element", style="dim")
    table.add_column("Id", style="cyan")
    table.add_column("Kind")
    table.add_column("State")
    table.add_column("Opacity", justify="right")

    counts = {"shown": 0, "faded": 0, "hidden": 0}
    for node in host.document.nodes:
        view = host.presentation.nodes.get(node.id)
        if view is None:
            continue
        label = _label(view.display, view.opacity)
        counts[label] += 1
        style = _DISPLAY_STYLES[label]
        table.add_row("node", node.id, str(node.type), f"[{style}]{label}[/{style}]", f"{view.opacity:.1f}")

    for edge in host.document.edges:
        view = host.presentation.edges.get(edge.id)
        if view is None:
            continue
        label = _label(view.display, view.opacity)
        style = _DISPLAY_STYLES[label]
        table.add_row(
            "edge", edge.id, f"{edge.from_node} → {edge.to_node}",
            f"[{style}]{label}[/{style}]", f"{view.opacity:.1f}",
        )

    console.print(table)
    console.print(
        f"[bold]{counts['shown']}[/bold] nodes shown, "
        f"{counts['faded']} faded, {counts['hidden']} hidden"
    )
