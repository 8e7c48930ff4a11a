"""
Reachability Engine.

Breadth-first, level-by-level expansion over directed edges from a seed
set. Downstream follows arrows forward (``from`` -> ``to``); upstream
follows them backwards.
"""

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, Optional, Set

from ..core.types import Edge


@dataclass(frozen=True)
class ReachabilityResult:
    """Closure of a seed set: reached node ids and traversed edge ids."""
    node_ids: FrozenSet[str]
    edge_ids: FrozenSet[str]


def expand_closure(
    edges: Iterable[Edge],
    seeds: AbstractSet[str],
    include_upstream: bool,
    include_downstream: bool,
    known_nodes: Optional[AbstractSet[str]] = None,
) -> ReachabilityResult:
    """
    Compute the closure of ``seeds`` under the chosen direction(s).

    Every edge examined from the frontier is recorded, even when its far
    endpoint was already reached. A node already in the closure is never
    expanded again, so cycles terminate. With both flags off the closure
    is exactly the seeds.

    When ``known_nodes`` is given, edges whose far endpoint is not in it
    are dangling: they are neither traversed nor recorded.

    Raises:
        ValueError: If ``seeds`` is empty. Callers reject empty selections first.
    """
    if not seeds:
        raise ValueError("Reachability requires at least one seed node")

    edges = list(edges)
    if known_nodes is not None:
        edges = [e for e in edges if e.from_node in known_nodes and e.to_node in known_nodes]

    closure: Set[str] = set(seeds)
    traversed: Set[str] = set()
    frontier: Set[str] = set(seeds)

    while frontier:
        added: Set[str] = set()

        if include_downstream:
            for edge in edges:
                if edge.from_node not in frontier:
                    continue
                traversed.add(edge.id)
                if edge.to_node not in closure:
                    closure.add(edge.to_node)
                    added.add(edge.to_node)

        if include_upstream:
            for edge in edges:
                if edge.to_node not in frontier:
                    continue
                traversed.add(edge.id)
                if edge.from_node not in closure:
                    closure.add(edge.from_node)
                    added.add(edge.from_node)

        frontier = added

    return ReachabilityResult(node_ids=frozenset(closure), edge_ids=frozenset(traversed))
