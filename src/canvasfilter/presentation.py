"""
Visibility Applicator.

Writes the two presentation properties this engine owns (display state and
opacity) onto the host's live node and edge views. Structure is never
touched.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import AbstractSet, Dict, Mapping, Optional, Protocol

from .config import FADED_OPACITY, FULL_OPACITY
from .core.types import DisplayMode, GraphSnapshot

logger = logging.getLogger(__name__)


class Display(StrEnum):
    VISIBLE = "visible"
    HIDDEN = "hidden"


class ElementView(Protocol):
    """Live presentation object for one node or edge."""
    display: Display
    opacity: float


class PresentationSurface(Protocol):
    """
    Host-owned views keyed by element id.

    A key may map to ``None`` when the host holds a stale reference.
    """
    nodes: Mapping[str, Optional[ElementView]]
    edges: Mapping[str, Optional[ElementView]]


@dataclass
class ElementState:
    """Plain in-memory ``ElementView``."""
    display: Display = Display.VISIBLE
    opacity: float = FULL_OPACITY

    def to_dict(self) -> Dict[str, object]:
        return {"display": str(self.display), "opacity": self.opacity}


class InMemoryPresentation:
    """Presentation surface with one ``ElementState`` per snapshot element."""

    def __init__(self, snapshot: GraphSnapshot):
        self.nodes: Dict[str, Optional[ElementState]] = {
            node.id: ElementState() for node in snapshot.nodes
        }
        self.edges: Dict[str, Optional[ElementState]] = {
            edge.id: ElementState() for edge in snapshot.edges
        }

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, object]]]:
        return {
            "nodes": {k: v.to_dict() for k, v in self.nodes.items() if v is not None},
            "edges": {k: v.to_dict() for k, v in self.edges.items() if v is not None},
        }


def show_element(view: ElementView) -> None:
    view.display = Display.VISIBLE
    view.opacity = FULL_OPACITY


def dim_element(view: ElementView, mode: DisplayMode) -> None:
    """Hide or fade a single view according to ``mode``."""
    if mode == DisplayMode.HIDE:
        view.display = Display.HIDDEN
    else:
        view.display = Display.VISIBLE
        view.opacity = FADED_OPACITY


def _apply(
    views: Mapping[str, Optional[ElementView]],
    target: Optional[AbstractSet[str]],
    mode: DisplayMode,
    kind: str,
) -> None:
    for element_id, view in views.items():
        if view is None:
            logger.debug("Skipping %s %s: no live view", kind, element_id)
            continue
        if target is None or element_id in target:
            show_element(view)
        else:
            dim_element(view, mode)


def apply_node_visibility(
    views: Mapping[str, Optional[ElementView]],
    target: Optional[AbstractSet[str]],
    mode: DisplayMode,
) -> None:
    """
    Show the nodes in ``target`` and dim every other node.

    ``target=None`` shows every node.
    """
    _apply(views, target, mode, "node")


def apply_edge_visibility(
    views: Mapping[str, Optional[ElementView]],
    target: Optional[AbstractSet[str]],
    mode: DisplayMode,
) -> None:
    """Edge counterpart of :func:`apply_node_visibility`."""
    _apply(views, target, mode, "edge")
