"""
Graph queries over a canvas snapshot.

Pure functions: nothing here touches presentation or session state.
"""

from typing import AbstractSet, Iterable, List, Sequence

from .geometry import encloses
from .types import CanvasNode, Edge, GraphSnapshot, GroupNode


def groups_for(
    all_nodes: Sequence[CanvasNode],
    target_nodes: Iterable[CanvasNode],
) -> List[GroupNode]:
    """
    Find every group whose region encloses at least one target node.

    Groups are structural members of a shown-set: once a node is chosen,
    any group visually containing it is shown as well. Order follows
    ``all_nodes``.
    """
    regions = [node.region for node in target_nodes]
    if not regions:
        return []
    return [
        node for node in all_nodes
        if isinstance(node, GroupNode)
        and any(encloses(node.region, region) for region in regions)
    ]


def edges_both_ends_in(all_edges: Iterable[Edge], node_ids: AbstractSet[str]) -> List[Edge]:
    """Edges whose source and target are both in ``node_ids``."""
    return [
        edge for edge in all_edges
        if edge.from_node in node_ids and edge.to_node in node_ids
    ]


def nodes_with_ids(snapshot: GraphSnapshot, node_ids: AbstractSet[str]) -> List[CanvasNode]:
    return [node for node in snapshot.nodes if node.id in node_ids]


def selected_nodes(snapshot: GraphSnapshot) -> List[CanvasNode]:
    """Selected entries that are nodes, in snapshot order."""
    return nodes_with_ids(snapshot, snapshot.selection)


def selected_edges(snapshot: GraphSnapshot) -> List[Edge]:
    return [edge for edge in snapshot.edges if edge.id in snapshot.selection]
