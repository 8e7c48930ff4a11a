"""Unit tests for the reachability engine."""

import pytest

from canvasfilter.analysis.reachability import ReachabilityResult, expand_closure
from canvasfilter.core.types import Edge


def _edge(src, dst):
    return Edge(id=f"{src}->{dst}", from_node=src, to_node=dst)


@pytest.fixture
def chain():
    """N1 -> N2 -> N3"""
    return [_edge("N1", "N2"), _edge("N2", "N3")]


class TestDirections:
    def test_downstream_follows_arrows(self, chain):
        result = expand_closure(chain, {"N1"}, include_upstream=False, include_downstream=True)
        assert result.node_ids == {"N1", "N2", "N3"}
        assert result.edge_ids == {"N1->N2", "N2->N3"}

    def test_upstream_from_chain_head_is_just_seed(self, chain):
        result = expand_closure(chain, {"N1"}, include_upstream=True, include_downstream=False)
        assert result.node_ids == {"N1"}
        assert result.edge_ids == frozenset()

    def test_upstream_from_tail(self, chain):
        result = expand_closure(chain, {"N3"}, include_upstream=True, include_downstream=False)
        assert result.node_ids == {"N1", "N2", "N3"}

    def test_both_directions_from_middle(self):
        edges = [_edge("a", "b"), _edge("b", "c"), _edge("x", "c")]
        result = expand_closure(edges, {"b"}, include_upstream=True, include_downstream=True)
        # x is reached through c going back upstream
        assert result.node_ids == {"a", "b", "c", "x"}
        assert result.edge_ids == {"a->b", "b->c", "x->c"}

    def test_no_direction_is_seed_only(self, chain):
        result = expand_closure(chain, {"N2"}, include_upstream=False, include_downstream=False)
        assert result == ReachabilityResult(node_ids=frozenset({"N2"}), edge_ids=frozenset())


class TestTermination:
    def test_cycle_terminates(self):
        edges = [_edge("a", "b"), _edge("b", "c"), _edge("c", "a")]
        result = expand_closure(edges, {"a"}, include_upstream=True, include_downstream=True)
        assert result.node_ids == {"a", "b", "c"}
        assert len(result.edge_ids) == 3

    def test_self_loop(self):
        result = expand_closure([_edge("a", "a")], {"a"}, include_upstream=False, include_downstream=True)
        assert result.node_ids == {"a"}
        assert result.edge_ids == {"a->a"}

    def test_idempotent(self, chain):
        first = expand_closure(chain, {"N2"}, True, True)
        second = expand_closure(chain, {"N2"}, True, True)
        assert first == second

    def test_closure_of_closure_is_stable(self, chain):
        first = expand_closure(chain, {"N1"}, False, True)
        second = expand_closure(chain, set(first.node_ids), False, True)
        assert second.node_ids == first.node_ids

    def test_dangling_edges_skipped_with_known_nodes(self):
        edges = [_edge("a", "ghost"), _edge("phantom", "a"), _edge("a", "b")]
        result = expand_closure(edges, {"a"}, True, True, known_nodes={"a", "b"})
        assert result.node_ids == {"a", "b"}
        assert result.edge_ids == {"a->b"}

    def test_empty_seeds_rejected(self, chain):
        with pytest.raises(ValueError):
            expand_closure(chain, set(), True, True)
