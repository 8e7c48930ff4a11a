"""
JSON Canvas files and a headless host over them.

Loads ``.canvas`` documents (``{"nodes": [...], "edges": [...]}``) into
validated models and exposes them through the host protocols, with an
in-memory presentation surface standing in for a rendered canvas.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import CanvasLoadError
from .core.types import CanvasNode, Edge, GraphSnapshot
from .presentation import InMemoryPresentation

logger = logging.getLogger(__name__)


class CanvasDocument(BaseModel):
    """Parsed contents of a ``.canvas`` file."""
    nodes: List[CanvasNode] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def snapshot(self, selection: Iterable[str] = ()) -> GraphSnapshot:
        return GraphSnapshot(
            nodes=tuple(self.nodes),
            edges=tuple(self.edges),
            selection=frozenset(selection),
        )


def parse_canvas(text: str, source: str = "<string>") -> CanvasDocument:
    """
    Parse JSON Canvas text.

    Raises:
        CanvasLoadError: On malformed JSON, unknown node types or duplicate node ids.
    """
    try:
        document = CanvasDocument.model_validate_json(text)
    except ValidationError as e:
        raise CanvasLoadError(source, str(e)) from e

    duplicates = [node_id for node_id, count in Counter(n.id for n in document.nodes).items() if count > 1]
    if duplicates:
        raise CanvasLoadError(source, f"duplicate node ids: {', '.join(sorted(duplicates))}")

    node_ids = {node.id for node in document.nodes}
    dangling = [e.id for e in document.edges if e.from_node not in node_ids or e.to_node not in node_ids]
    if dangling:
        logger.debug("%s: %d edges reference missing nodes", source, len(dangling))

    return document


def load_canvas(path: Path) -> CanvasDocument:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CanvasLoadError(str(path), e.strerror or str(e)) from e
    return parse_canvas(text, source=str(path))


class FileCanvasHost:
    """
    Canvas host backed by a loaded document.

    Always reports an active canvas. Selection is a plain id set that
    ``deselect_all`` empties.
    """

    def __init__(self, document: CanvasDocument, selection: Iterable[str] = ()):
        self.document = document
        self.selection: Set[str] = set(selection)
        self._presentation = InMemoryPresentation(document.snapshot())

    @property
    def presentation(self) -> InMemoryPresentation:
        return self._presentation

    def is_canvas_active(self) -> bool:
        return True

    def snapshot(self) -> Optional[GraphSnapshot]:
        return self.document.snapshot(self.selection)

    def deselect_all(self) -> None:
        self.selection.clear()

    def unknown_selection(self) -> List[str]:
        """Selected ids that are neither nodes nor edges of the document."""
        known = {n.id for n in self.document.nodes} | {e.id for e in self.document.edges}
        return sorted(i for i in self.selection if i not in known)
