"""Tests for graph-adapted NPath complexity: branching, multicast, implicit paths, cycles."""

import pytest

from flowscope.graph import (
    ConnectedComponent,
    GraphBuilder,
    GraphEdge,
    GraphInvariantError,
    GraphModel,
    GraphNode,
    NodeClassifier,
)
from flowscope.ingestion import make_node
from flowscope.metrics import NPathComplexityMetric, NPathContext, find_entry_nodes, resolve_paths


def _component(*nodes, classifier=None) -> ConnectedComponent:
    graph = GraphBuilder(classifier).build(list(nodes), "tab1")
    return ConnectedComponent(id="tab1-component-0", flow_id="tab1", graph=graph)


def _npath(*nodes, classifier=None):
    return NPathComplexityMetric().compute(_component(*nodes, classifier=classifier))


def test_empty_graph_is_zero():
    component = ConnectedComponent(id="e", flow_id="tab1", graph=GraphModel())
    result = NPathComplexityMetric().compute(component)
    assert result.value == 0
    assert result.interpretation == "Empty flow - no execution paths"


def test_single_node_is_one():
    assert _npath(make_node("a", "inject")).value == 1


def test_linear_is_one():
    result = _npath(
        make_node("i", "inject", [["f"]]),
        make_node("f", "function", [["d"]]),
        make_node("d", "debug"),
    )
    assert result.value == 1
    assert result.details["entry_node_ids"] == ["i"]
    assert result.details["node_count"] == 3


def test_switch_two_ports_plus_implicit_drop():
    result = _npath(
        make_node("i", "inject", [["s"]]),
        make_node("s", "switch", [["d1"], ["d2"]]),
        make_node("d1", "debug"),
        make_node("d2", "debug"),
    )
    assert result.value == 3


def test_two_triggers_in_series():
    """pass-pass, pass-block, block."""
    result = _npath(
        make_node("i", "inject", [["t1"]]),
        make_node("t1", "trigger", [["t2"]]),
        make_node("t2", "trigger", [["d"]]),
        make_node("d", "debug"),
    )
    assert result.value == 3


def test_rbe_adds_suppressed_path():
    result = _npath(
        make_node("i", "inject", [["r"]]),
        make_node("r", "rbe", [["d"]]),
        make_node("d", "debug"),
    )
    assert result.value == 2


def test_multicast_is_additive_within_port():
    result = _npath(
        make_node("i", "inject", [["a", "b", "c"]]),
        make_node("a", "debug"),
        make_node("b", "debug"),
        make_node("c", "debug"),
    )
    assert result.value == 3


def test_ports_are_summed():
    result = _npath(
        make_node("f", "function", [["a"], ["b", "c"]]),
        make_node("a", "debug"),
        make_node("b", "debug"),
        make_node("c", "debug"),
    )
    assert result.value == 3


def test_generic_decision_has_no_implicit_path():
    classifier = NodeClassifier().with_decision_type("router")
    result = _npath(
        make_node("i", "inject", [["r"]]),
        make_node("r", "router", [["a"], ["b"]]),
        make_node("a", "debug"),
        make_node("b", "debug"),
        classifier=classifier,
    )
    assert result.value == 2


def test_terminal_decision_node_is_one():
    """A switch with no wires is a terminal node."""
    result = _npath(make_node("i", "inject", [["s"]]), make_node("s", "switch", [[]]))
    assert result.value == 1


def test_diamond_reuses_memoized_value():
    result = _npath(
        make_node("a", "function", [["b"], ["c"]]),
        make_node("b", "function", [["d"]]),
        make_node("c", "function", [["d"]]),
        make_node("d", "debug"),
    )
    assert result.value == 2
    assert result.details["per_node"] == {"d": 1, "b": 1, "c": 1, "a": 2}


def test_switch_then_switch_is_additive():
    result = _npath(
        make_node("s1", "switch", [["s2"], ["x"]]),
        make_node("s2", "switch", [["y"], ["z"]]),
        make_node("x", "debug"),
        make_node("y", "debug"),
        make_node("z", "debug"),
    )
    # s2 = 1 + 1 + 1; s1 = s2 + x + drop
    assert result.value == 5


def test_multiple_entries_take_maximum():
    result = _npath(
        make_node("e1", "inject", [["d1"]]),
        make_node("e2", "inject", [["s"]]),
        make_node("s", "switch", [["d1"], ["d2"]]),
        make_node("d1", "debug"),
        make_node("d2", "debug"),
    )
    assert result.details["entry_node_ids"] == ["e1", "e2"]
    assert result.value == 3
    assert "2 entry points" in result.interpretation


def test_self_loop_pure_cycle_is_one():
    result = _npath(make_node("n1", "function", [["n1"]]))
    assert result.value == 1
    assert result.details["entry_node_ids"] == []


def test_two_node_pure_cycle_is_one():
    result = _npath(make_node("a", "function", [["b"]]), make_node("b", "function", [["a"]]))
    assert result.value == 1


def test_back_edge_to_single_port_node_counts_one():
    """work has one port, so looping back to it has no alternative exit."""
    result = _npath(
        make_node("i", "inject", [["work"]]),
        make_node("work", "function", [["check"]]),
        make_node("check", "switch", [["work"], ["done"]]),
        make_node("done", "debug"),
    )
    # check = back edge 1 + done 1 + implicit 1
    assert result.value == 3


def test_back_edge_to_multi_port_node_counts_two():
    result = _npath(
        make_node("i", "inject", [["s"]]),
        make_node("s", "switch", [["w"], ["d"]]),
        make_node("w", "function", [["s"]]),
        make_node("d", "debug"),
    )
    # w = back edge to s (2 ports) = 2; s = 2 + 1 + implicit 1
    assert result.value == 4


def test_self_loop_with_entry_and_exit():
    result = _npath(
        make_node("i", "inject", [["f"]]),
        make_node("f", "function", [["f", "d"]]),
        make_node("d", "debug"),
    )
    assert result.value == 2


def test_long_chain_is_stack_safe():
    count = 10000
    nodes = [
        make_node(f"n{i}", "function", [[f"n{i + 1}"]] if i + 1 < count else [])
        for i in range(count)
    ]
    assert _npath(*nodes).value == 1


def test_long_cycle_is_stack_safe():
    count = 5000
    nodes = [make_node("i", "inject", [["n0"]])] + [
        make_node(f"n{i}", "function", [[f"n{(i + 1) % count}"]]) for i in range(count)
    ]
    assert _npath(*nodes).value == 1


def test_per_node_map_can_be_disabled():
    component = _component(make_node("a", "inject", [["b"]]), make_node("b", "debug"))
    result = NPathComplexityMetric(include_per_node=False).compute(component)
    assert "per_node" not in result.details
    assert result.details["algorithm"] == "memoized-iterative-dfs"


def test_resolve_paths_shares_context():
    component = _component(
        make_node("a", "inject", [["c"]]),
        make_node("b", "inject", [["c"]]),
        make_node("c", "switch", [["d"]]),
        make_node("d", "debug"),
    )
    ctx = NPathContext()
    assert resolve_paths(component.graph, "a", ctx) == 2
    assert ctx.resolved == {"d": 1, "c": 2, "a": 2}
    assert ctx.on_stack == set()
    assert resolve_paths(component.graph, "b", ctx) == 2


def test_find_entry_nodes():
    component = _component(
        make_node("a", "inject", [["b"]]),
        make_node("b", "function", [["b"]]),
        make_node("c", "inject"),
    )
    assert find_entry_nodes(component.graph) == ["a", "c"]


def test_unknown_target_is_fatal():
    g = GraphModel()
    g.add_node(GraphNode(id="a", type="inject", flow_id="tab1"))
    g.add_edge(GraphEdge("a", "ghost", 0))
    component = ConnectedComponent(id="bad", flow_id="tab1", graph=g)
    with pytest.raises(GraphInvariantError):
        NPathComplexityMetric().compute(component)
