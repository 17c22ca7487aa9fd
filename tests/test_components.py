"""Tests for ComponentFinder: undirected partition, ids, subgraph extraction."""

import pytest

from flowscope.graph import (
    ComponentFinder,
    ConnectedComponent,
    GraphEdge,
    GraphInvariantError,
    GraphModel,
    GraphNode,
    build_graph,
    component_to_dict,
    find_components,
)
from flowscope.ingestion import make_node


def test_empty_graph_has_no_components():
    assert find_components(GraphModel()) == []


def test_three_islands():
    """n1->n2, n3->n4, isolated n5 -> 3 components of sizes 2, 2, 1."""
    nodes = [
        make_node("n1", "inject", [["n2"]]),
        make_node("n2", "debug"),
        make_node("n3", "inject", [["n4"]]),
        make_node("n4", "debug"),
        make_node("n5", "comment"),
    ]
    comps = find_components(build_graph(nodes, "tab1"))
    assert [c.id for c in comps] == [
        "tab1-component-0",
        "tab1-component-1",
        "tab1-component-2",
    ]
    assert [c.node_ids for c in comps] == [
        frozenset({"n1", "n2"}),
        frozenset({"n3", "n4"}),
        frozenset({"n5"}),
    ]
    assert all(c.flow_id == "tab1" for c in comps)


def test_direction_is_ignored():
    """b and c both feed a; all three are one component."""
    nodes = [
        make_node("a", "debug"),
        make_node("b", "inject", [["a"]]),
        make_node("c", "inject", [["a"]]),
    ]
    comps = find_components(build_graph(nodes, "tab1"))
    assert len(comps) == 1
    assert comps[0].node_ids == frozenset({"a", "b", "c"})


def test_subgraph_keeps_internal_edges_only():
    nodes = [
        make_node("a", "inject", [["b"]]),
        make_node("b", "function", [["b"]]),
        make_node("c", "debug"),
    ]
    comps = find_components(build_graph(nodes, "tab1"))
    first = comps[0].graph
    assert first.get_edges() == [GraphEdge("a", "b", 0), GraphEdge("b", "b", 0)]
    assert comps[1].graph.get_edge_count() == 0


def test_self_loop_component():
    comps = find_components(build_graph([make_node("n1", "function", [["n1"]])], "tab1"))
    assert len(comps) == 1
    assert comps[0].graph.get_node_count() == 1
    assert comps[0].graph.get_edge_count() == 1


def test_member_order_is_dfs_preorder():
    nodes = [
        make_node("a", "inject", [["b"], ["c"]]),
        make_node("b", "function", [["d"]]),
        make_node("c", "debug"),
        make_node("d", "debug"),
    ]
    comps = find_components(build_graph(nodes, "tab1"))
    assert comps[0].graph.get_node_ids() == ["a", "b", "d", "c"]


def test_flow_name_is_attached():
    comps = ComponentFinder().find_components(
        build_graph([make_node("a", "inject")], "tab1"), flow_name="Main"
    )
    assert comps[0].flow_name == "Main"


def test_long_chain_does_not_overflow_stack():
    """Thousands of chained nodes partition without recursion limits."""
    count = 5000
    nodes = [
        make_node(f"n{i}", "function", [[f"n{i + 1}"]] if i + 1 < count else [])
        for i in range(count)
    ]
    comps = find_components(build_graph(nodes, "tab1"))
    assert len(comps) == 1
    assert comps[0].graph.get_node_count() == count
    assert comps[0].graph.get_edge_count() == count - 1


def test_unknown_edge_endpoint_is_invariant_violation():
    """A hand-built graph with a dangling edge is rejected, not repaired."""
    g = GraphModel()
    g.add_node(GraphNode(id="a", type="inject", flow_id="tab1"))
    g.add_edge(GraphEdge("a", "ghost", 0))
    with pytest.raises(GraphInvariantError):
        find_components(g)


def test_component_to_dict():
    comps = find_components(build_graph([make_node("a", "inject")], "tab1"), "Main")
    d = component_to_dict(comps[0])
    assert d["id"] == "tab1-component-0"
    assert d["flow_name"] == "Main"
    assert d["node_count"] == 1
    assert d["graph"]["edges"] == []


def test_component_is_frozen_value():
    comp = ConnectedComponent(id="x", flow_id="f", graph=GraphModel())
    with pytest.raises(AttributeError):
        comp.id = "y"
