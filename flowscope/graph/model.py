"""
GraphModel: indexed directed multigraph of flow nodes and wires.
Built once by GraphBuilder (or ComponentFinder for subgraphs), read many times by metrics.
"""

from __future__ import annotations

from flowscope.graph.edges import GraphEdge
from flowscope.graph.nodes import GraphNode


class GraphModel:
    """
    Directed multigraph keyed by node id.

    Nodes and edges enumerate in insertion order. Re-adding a node id replaces
    the stored node (last write wins). Incoming/outgoing edge lists are indexed
    per node so incident-edge queries do not scan the whole edge list.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}
        self._edges: list[GraphEdge] = []
        self._outgoing: dict[str, list[GraphEdge]] = {}
        self._incoming: dict[str, list[GraphEdge]] = {}

    def add_node(self, node: GraphNode) -> None:
        self._nodes[node.id] = node

    def add_edge(self, edge: GraphEdge) -> None:
        self._edges.append(edge)
        self._outgoing.setdefault(edge.source, []).append(edge)
        self._incoming.setdefault(edge.target, []).append(edge)

    def get_node(self, node_id: str) -> GraphNode | None:
        return self._nodes.get(node_id)

    def get_nodes(self) -> list[GraphNode]:
        return list(self._nodes.values())

    def get_node_ids(self) -> list[str]:
        return list(self._nodes.keys())

    def get_node_count(self) -> int:
        return len(self._nodes)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_edges(self) -> list[GraphEdge]:
        return list(self._edges)

    def get_edge_count(self) -> int:
        return len(self._edges)

    def get_incoming(self, node_id: str) -> list[GraphEdge]:
        """Edges whose target is node_id, in insertion order."""
        return list(self._incoming.get(node_id, []))

    def get_outgoing(self, node_id: str) -> list[GraphEdge]:
        """Edges whose source is node_id, in insertion order."""
        return list(self._outgoing.get(node_id, []))

    def get_outgoing_ports(self, node_id: str) -> list[int]:
        """Distinct output ports of node_id that carry at least one edge (first-seen order)."""
        ports = dict.fromkeys(e.source_port for e in self._outgoing.get(node_id, []))
        return list(ports)

    def get_neighbors(self, node_id: str) -> list[str]:
        """
        Ids linked to node_id by any edge, ignoring direction.
        node_id itself is included only when it has a self-loop.
        Order follows edge insertion order, without duplicates.
        """
        seen: dict[str, None] = {}
        for e in self._outgoing.get(node_id, []):
            seen[e.target] = None
        for e in self._incoming.get(node_id, []):
            seen[e.source] = None
        return list(seen)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"GraphModel(nodes={len(self._nodes)}, edges={len(self._edges)})"


def node_to_dict(node: GraphNode) -> dict:
    position = node.metadata.position
    return {
        "id": node.id,
        "type": node.type,
        "flow_id": node.flow_id,
        "is_decision_node": node.is_decision_node,
        "decision_kind": node.decision_kind.value,
        "metadata": {
            "name": node.metadata.name,
            "position": None if position is None else {"x": position.x, "y": position.y},
        },
    }


def edge_to_dict(edge: GraphEdge) -> dict:
    return {
        "source": edge.source,
        "target": edge.target,
        "source_port": edge.source_port,
    }


def graph_model_to_dict(graph: GraphModel) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Nodes sorted by id; edges by (source, target, source_port).
    """
    nodes_sorted = sorted(graph.get_nodes(), key=lambda n: n.id)
    edges_sorted = sorted(
        graph.get_edges(), key=lambda e: (e.source, e.target, e.source_port)
    )
    return {
        "nodes": [node_to_dict(n) for n in nodes_sorted],
        "edges": [edge_to_dict(e) for e in edges_sorted],
    }
