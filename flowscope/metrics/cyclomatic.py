"""
Cyclomatic complexity adapted to dataflow graphs.

    CC(C) = 1 + sum over decision nodes n of branches(n)

where, with k = number of distinct output ports of n carrying at least one wire:
    switch          -> k        (the un-wired "no match" case is an extra branch)
    trigger, filter -> 1        (pass or suppress, whatever the port count)
    other decisions -> max(0, k - 1)
Non-decision nodes contribute nothing; multicast on a port is broadcast, not a decision.
Cycles do not affect the value.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowscope.graph.components import ConnectedComponent
from flowscope.graph.model import GraphModel
from flowscope.graph.nodes import DecisionKind, GraphNode
from flowscope.metrics.base import Metric, MetricResult

FORMULA = "1 + sum_{n in D} branches(n) where branches vary by node type"


def branches_for(kind: DecisionKind, connected_port_count: int) -> int:
    """Branch contribution of one node of the given decision kind."""
    if kind is DecisionKind.NON_DECISION:
        return 0
    if kind is DecisionKind.SWITCH:
        return connected_port_count
    if kind in (DecisionKind.TRIGGER, DecisionKind.FILTER):
        return 1
    return max(0, connected_port_count - 1)


@dataclass(frozen=True)
class DecisionNodeBranches:
    """Per-node breakdown reported in the metric details."""

    id: str
    type: str
    connected_port_count: int
    branches: int
    ports: tuple[int, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "connected_port_count": self.connected_port_count,
            "branches": self.branches,
            "ports": list(self.ports),
        }


def _node_branches(node: GraphNode, graph: GraphModel) -> DecisionNodeBranches:
    ports = graph.get_outgoing_ports(node.id)
    return DecisionNodeBranches(
        id=node.id,
        type=node.type,
        connected_port_count=len(ports),
        branches=branches_for(node.decision_kind, len(ports)),
        ports=tuple(ports),
    )


class CyclomaticComplexityMetric(Metric):
    id = "cyclomatic-complexity"
    name = "Cyclomatic Complexity"
    category = "complexity"
    description = (
        "Measure of independent decision-driven paths with node-type-specific branching rules"
    )

    def compute(self, component: ConnectedComponent) -> MetricResult:
        graph = component.graph
        per_node = [
            _node_branches(node, graph)
            for node in graph.get_nodes()
            if node.is_decision_node
        ]
        complexity = 1 + sum(info.branches for info in per_node)
        return MetricResult(
            value=complexity,
            details={
                "decision_node_count": len(per_node),
                "per_node": [info.to_dict() for info in per_node],
                "formula": FORMULA,
            },
            interpretation=(
                f"Cyclomatic complexity: {complexity} (decision nodes: {len(per_node)})"
            ),
        )
