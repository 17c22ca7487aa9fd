"""Size metrics: vertex and edge counts."""

from __future__ import annotations

from flowscope.graph.components import ConnectedComponent
from flowscope.metrics.base import Metric, MetricResult, plural


class VertexCountMetric(Metric):
    id = "vertex-count"
    name = "Vertex Count"
    category = "size"
    description = "Total number of nodes (vertices) in the component"

    def compute(self, component: ConnectedComponent) -> MetricResult:
        value = component.graph.get_node_count()
        return MetricResult(
            value=value,
            interpretation=f"This component contains {plural(value, 'node')}",
        )


class EdgeCountMetric(Metric):
    id = "edge-count"
    name = "Edge Count"
    category = "size"
    description = "Total number of edges (connections) in the component"

    def compute(self, component: ConnectedComponent) -> MetricResult:
        value = component.graph.get_edge_count()
        return MetricResult(
            value=value,
            interpretation=f"This component contains {plural(value, 'edge')}",
        )
