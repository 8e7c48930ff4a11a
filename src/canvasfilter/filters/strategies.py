"""
Filter Strategies.

Each strategy turns a snapshot (plus whatever the user chose) into a
``VisibilityPlan``. Strategies are pure: validating preconditions, applying
the plan and updating session state is the dispatcher's job.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Optional, Set, Tuple

from ..analysis.reachability import expand_closure
from ..analysis.tags import TagLookup, TagMatchMode, nodes_matching_tag
from ..config import COLORLESS
from ..core.query import edges_both_ends_in, groups_for, nodes_with_ids, selected_edges, selected_nodes
from ..core.types import GraphSnapshot, GroupNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibilityPlan:
    """
    Node and edge ids to keep visible.

    ``None`` on either side means "show everything of that kind".
    """
    node_ids: Optional[FrozenSet[str]]
    edge_ids: Optional[FrozenSet[str]]

    @property
    def shows_everything(self) -> bool:
        return self.node_ids is None and self.edge_ids is None


def show_all_plan() -> VisibilityPlan:
    return VisibilityPlan(node_ids=None, edge_ids=None)


def _with_groups(snapshot: GraphSnapshot, node_ids: AbstractSet[str]) -> Set[str]:
    ids = set(node_ids)
    groups = groups_for(snapshot.nodes, nodes_with_ids(snapshot, node_ids))
    ids.update(group.id for group in groups)
    return ids


# =========================================================================
# Reachability
# =========================================================================

def connected_plan(
    snapshot: GraphSnapshot,
    seeds: AbstractSet[str],
    upstream: bool,
    downstream: bool,
) -> VisibilityPlan:
    """
    Show the seeds, everything reachable from them and enclosing groups.

    Edges shown are exactly those traversed while expanding the closure.
    Edges pointing at ids missing from the canvas are ignored.
    """
    closure = expand_closure(snapshot.edges, seeds, upstream, downstream, known_nodes=snapshot.node_ids)
    node_ids = _with_groups(snapshot, closure.node_ids)
    logger.debug(
        "Connected plan: %d seeds -> %d nodes, %d edges",
        len(seeds), len(node_ids), len(closure.edge_ids),
    )
    return VisibilityPlan(node_ids=frozenset(node_ids), edge_ids=closure.edge_ids)


def selected_node_ids(snapshot: GraphSnapshot) -> FrozenSet[str]:
    return frozenset(node.id for node in selected_nodes(snapshot))


# =========================================================================
# Color
# =========================================================================

def selected_colors(snapshot: GraphSnapshot) -> Tuple[FrozenSet[str], bool]:
    """
    Distinct colors among the selected nodes.

    Returns the color set and whether any selected node is colorless.
    """
    colors = frozenset(node.color_key for node in selected_nodes(snapshot))
    return colors, COLORLESS in colors


def same_color_plan(snapshot: GraphSnapshot, colors: AbstractSet[str]) -> VisibilityPlan:
    """Show every non-group node whose color is in ``colors``, plus enclosing groups."""
    matching = [
        node for node in snapshot.nodes
        if not isinstance(node, GroupNode) and node.color_key in colors
    ]
    groups = groups_for(snapshot.nodes, matching)
    node_ids = frozenset(node.id for node in [*matching, *groups])
    edge_ids = frozenset(edge.id for edge in edges_both_ends_in(snapshot.edges, node_ids))
    return VisibilityPlan(node_ids=node_ids, edge_ids=edge_ids)


# =========================================================================
# Tags
# =========================================================================

def tag_plan(
    snapshot: GraphSnapshot,
    tag: str,
    mode: TagMatchMode,
    metadata: TagLookup,
) -> VisibilityPlan:
    """
    Show the nodes selected by ``tag`` plus enclosing groups.

    Edges are derived from the matched nodes only, before groups are added.
    """
    matched = nodes_matching_tag(snapshot.nodes, tag, mode, metadata)
    matched_ids = frozenset(node.id for node in matched)
    edge_ids = frozenset(edge.id for edge in edges_both_ends_in(snapshot.edges, matched_ids))
    groups = groups_for(snapshot.nodes, matched)
    node_ids = matched_ids | {group.id for group in groups}
    logger.debug("Tag plan %s (%s): %d nodes, %d edges", tag, mode, len(node_ids), len(edge_ids))
    return VisibilityPlan(node_ids=node_ids, edge_ids=edge_ids)


def additive_tag_ids(
    snapshot: GraphSnapshot,
    tag: str,
    mode: TagMatchMode,
    metadata: TagLookup,
) -> FrozenSet[str]:
    """Node ids an additive tag pick contributes: matches and their enclosing groups."""
    matched = nodes_matching_tag(snapshot.nodes, tag, mode, metadata)
    groups = groups_for(snapshot.nodes, matched)
    return frozenset(node.id for node in [*matched, *groups])


def accumulated_plan(snapshot: GraphSnapshot, shown: AbstractSet[str]) -> VisibilityPlan:
    """Show an accumulated shown-set with edges recomputed over all of it."""
    node_ids = frozenset(shown)
    edge_ids = frozenset(edge.id for edge in edges_both_ends_in(snapshot.edges, node_ids))
    return VisibilityPlan(node_ids=node_ids, edge_ids=edge_ids)


# =========================================================================
# Hide selected
# =========================================================================

def hide_selected_targets(
    snapshot: GraphSnapshot,
    with_connections: bool,
) -> Tuple[FrozenSet[str], FrozenSet[str]]:
    """
    Node and edge ids to dim directly for the hide-selected commands.

    Selected edges are always included. With ``with_connections`` every
    edge touching a selected node is included too. Groups are not expanded.
    """
    node_ids = selected_node_ids(snapshot)
    edge_ids = {edge.id for edge in selected_edges(snapshot)}
    if with_connections:
        edge_ids.update(
            edge.id for edge in snapshot.edges
            if edge.from_node in node_ids or edge.to_node in node_ids
        )
    return node_ids, frozenset(edge_ids)
