"""
Core type definitions for canvasfilter.

The canvas graph is a closed set of node variants (group, file, text, link)
discriminated on their ``type`` field, plus directed edges between them.
"""

from enum import StrEnum
from typing import Annotated, FrozenSet, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config import COLORLESS


class NodeKind(StrEnum):
    """Categories of nodes on a canvas."""
    GROUP = "group"
    FILE = "file"
    TEXT = "text"
    LINK = "link"


class DisplayMode(StrEnum):
    """How elements outside the shown-set are presented."""
    HIDE = "hide"
    FADE = "fade"

    def toggled(self) -> "DisplayMode":
        return DisplayMode.FADE if self is DisplayMode.HIDE else DisplayMode.HIDE


class Rect(BaseModel):
    """Axis-aligned rectangle given as origin plus size."""
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class _BaseNode(BaseModel):
    """Fields shared by every node variant."""
    id: str
    x: float
    y: float
    width: float
    height: float
    color: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def region(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)

    @property
    def color_key(self) -> str:
        """Color used for matching; absent and empty colors collapse to COLORLESS."""
        return self.color or COLORLESS


class GroupNode(_BaseNode):
    """Labeled bounding region over other nodes."""
    type: Literal["group"] = "group"
    label: str = ""


class FileNode(_BaseNode):
    """Node backed by a file in the surrounding vault."""
    type: Literal["file"] = "file"
    file: str
    subpath: Optional[str] = None


class TextNode(_BaseNode):
    """Free-text card."""
    type: Literal["text"] = "text"
    text: str = ""


class LinkNode(_BaseNode):
    """External URL card."""
    type: Literal["link"] = "link"
    url: str = ""


CanvasNode = Annotated[
    Union[GroupNode, FileNode, TextNode, LinkNode],
    Field(discriminator="type"),
]


class Edge(BaseModel):
    """
    Directed relationship between two nodes.

    Accepts both the JSON Canvas spelling (``fromNode``) and the
    snake_case field names.
    """
    id: str
    from_node: str = Field(alias="fromNode")
    to_node: str = Field(alias="toNode")
    color: Optional[str] = None
    label: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def touches(self, node_id: str) -> bool:
        return self.from_node == node_id or self.to_node == node_id


class GraphSnapshot(BaseModel):
    """
    Read-only view of the canvas captured at the start of a command.

    ``selection`` holds the ids (nodes and/or edges) that were selected
    when the snapshot was taken.
    """
    nodes: Tuple[CanvasNode, ...] = ()
    edges: Tuple[Edge, ...] = ()
    selection: FrozenSet[str] = frozenset()

    model_config = ConfigDict(frozen=True)

    @property
    def node_ids(self) -> FrozenSet[str]:
        return frozenset(node.id for node in self.nodes)

    def get_node(self, node_id: str) -> Optional[CanvasNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def with_selection(self, ids) -> "GraphSnapshot":
        return self.model_copy(update={"selection": frozenset(ids)})
