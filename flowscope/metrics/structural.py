"""
Structural metrics: fan-in, fan-out, density.
"""

from __future__ import annotations

from flowscope.graph.components import ConnectedComponent
from flowscope.metrics.base import Metric, MetricResult


def _degree_summary(degrees: list[int], label: str) -> MetricResult:
    if not degrees:
        return MetricResult(value=0, details={"max": 0, "avg": 0.0})
    max_degree = max(degrees)
    avg = sum(degrees) / len(degrees)
    return MetricResult(
        value=max_degree,
        details={"max": max_degree, "avg": round(avg, 2)},
        interpretation=f"Maximum {label}: {max_degree}, Average {label}: {avg:.2f}",
    )


class FanInMetric(Metric):
    id = "fan-in"
    name = "Fan-In"
    category = "structural"
    description = "Maximum and average number of incoming edges per node"

    def compute(self, component: ConnectedComponent) -> MetricResult:
        graph = component.graph
        return _degree_summary(
            [len(graph.get_incoming(n)) for n in graph.get_node_ids()], "fan-in"
        )


class FanOutMetric(Metric):
    id = "fan-out"
    name = "Fan-Out"
    category = "structural"
    description = "Maximum and average number of outgoing edges per node"

    def compute(self, component: ConnectedComponent) -> MetricResult:
        graph = component.graph
        return _degree_summary(
            [len(graph.get_outgoing(n)) for n in graph.get_node_ids()], "fan-out"
        )


class DensityMetric(Metric):
    """E / (V * (V - 1)); a multigraph with parallel wires can exceed 1."""

    id = "density"
    name = "Graph Density"
    category = "structural"
    description = "Ratio of actual edges to possible edges in a directed graph"

    def compute(self, component: ConnectedComponent) -> MetricResult:
        v = component.graph.get_node_count()
        e = component.graph.get_edge_count()
        if v <= 1:
            return MetricResult(
                value=0,
                interpretation="Graph has 0 or 1 node, density is 0",
            )
        max_edges = v * (v - 1)
        density = e / max_edges
        return MetricResult(
            value=round(density, 4),
            details={"nodes": v, "edges": e, "max_possible_edges": max_edges},
            interpretation=(
                f"Density: {density * 100:.2f}% ({e} of {max_edges} possible edges)"
            ),
        )
