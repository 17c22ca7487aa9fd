"""
Build a GraphModel from the nodes of one flow tab.
Nodes become GraphNodes (decision kind resolved by the classifier); wires become GraphEdges.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from flowscope.graph.classifier import NodeClassifier
from flowscope.graph.edges import GraphEdge
from flowscope.graph.model import GraphModel
from flowscope.graph.nodes import GraphNode, NodeMetadata, NodePosition
from flowscope.ingestion.records import FlowNode

logger = logging.getLogger(__name__)


def _iter_wire_edges(node: FlowNode) -> Iterable[GraphEdge]:
    """One candidate edge per target id per port; empty ports keep their index."""
    for port_index, port in enumerate(node.wires):
        for target_id in port:
            yield GraphEdge(source=node.id, target=target_id, source_port=port_index)


class GraphBuilder:
    """Turns flow nodes into a GraphModel using a fixed NodeClassifier."""

    def __init__(self, classifier: NodeClassifier | None = None) -> None:
        self.classifier = classifier if classifier is not None else NodeClassifier()

    def _make_graph_node(self, node: FlowNode, flow_id: str) -> GraphNode:
        position = None
        if node.x is not None and node.y is not None:
            position = NodePosition(x=node.x, y=node.y)
        return GraphNode(
            id=node.id,
            type=node.type,
            flow_id=flow_id,
            decision_kind=self.classifier.classify(node.type),
            metadata=NodeMetadata(name=node.name, position=position),
        )

    def build(self, nodes: Sequence[FlowNode], flow_id: str) -> GraphModel:
        """
        Build the graph of one flow.

        Edges whose source or target id is not among nodes are dropped
        (hand-edited exports often carry stale wires); this never raises.
        """
        graph = GraphModel()
        for node in nodes:
            graph.add_node(self._make_graph_node(node, flow_id))

        dropped = 0
        for node in nodes:
            for edge in _iter_wire_edges(node):
                if graph.has_node(edge.source) and graph.has_node(edge.target):
                    graph.add_edge(edge)
                else:
                    dropped += 1
                    logger.debug(
                        "flow %s: dropping wire %s[%d] -> %s (unknown node)",
                        flow_id,
                        edge.source,
                        edge.source_port,
                        edge.target,
                    )
        if dropped:
            logger.info("flow %s: dropped %d dangling wire(s)", flow_id, dropped)
        return graph

    def build_multiple(
        self, nodes_by_flow: Mapping[str, Sequence[FlowNode]]
    ) -> dict[str, GraphModel]:
        """Build one independent GraphModel per flow id (input order preserved)."""
        return {
            flow_id: self.build(nodes, flow_id)
            for flow_id, nodes in nodes_by_flow.items()
        }


def build_graph(
    nodes: Sequence[FlowNode],
    flow_id: str,
    classifier: NodeClassifier | None = None,
) -> GraphModel:
    """Convenience: GraphBuilder(classifier).build(nodes, flow_id)."""
    return GraphBuilder(classifier).build(nodes, flow_id)
