"""
Connected components: partition a GraphModel into undirected connected subgraphs.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowscope.graph.model import GraphModel, graph_model_to_dict


class GraphInvariantError(RuntimeError):
    """A graph references a node id it does not contain."""


@dataclass(frozen=True)
class ConnectedComponent:
    """One maximal undirected-connected part of a flow, with its own subgraph."""

    id: str
    flow_id: str
    graph: GraphModel
    flow_name: str | None = None

    @property
    def node_ids(self) -> frozenset[str]:
        return frozenset(self.graph.get_node_ids())


def _collect_component(
    graph: GraphModel, start: str, visited: set[str]
) -> list[str]:
    """Iterative DFS over undirected neighbours; returns member ids in preorder."""
    members: list[str] = []
    stack = [start]
    while stack:
        node_id = stack.pop()
        if node_id in visited:
            continue
        visited.add(node_id)
        members.append(node_id)
        # reversed so the first neighbour is explored first
        for neighbor in reversed(graph.get_neighbors(node_id)):
            if not graph.has_node(neighbor):
                raise GraphInvariantError(
                    f"edge from {node_id!r} references unknown node {neighbor!r}"
                )
            if neighbor not in visited:
                stack.append(neighbor)
    return members


def extract_subgraph(graph: GraphModel, node_ids: list[str]) -> GraphModel:
    """Copy the given nodes and every edge with both endpoints among them."""
    members = set(node_ids)
    sub = GraphModel()
    for node_id in node_ids:
        node = graph.get_node(node_id)
        if node is None:
            raise GraphInvariantError(f"unknown node {node_id!r}")
        sub.add_node(node)
    for edge in graph.get_edges():
        if edge.source in members and edge.target in members:
            sub.add_edge(edge)
    return sub


class ComponentFinder:
    """Undirected connected-component partitioning in node-id order."""

    def find_components(
        self, graph: GraphModel, flow_name: str | None = None
    ) -> list[ConnectedComponent]:
        visited: set[str] = set()
        components: list[ConnectedComponent] = []

        for node_id in graph.get_node_ids():
            if node_id in visited:
                continue
            members = _collect_component(graph, node_id, visited)
            flow_id = graph.get_node(node_id).flow_id
            components.append(
                ConnectedComponent(
                    id=f"{flow_id}-component-{len(components)}",
                    flow_id=flow_id,
                    graph=extract_subgraph(graph, members),
                    flow_name=flow_name,
                )
            )
        return components


def find_components(
    graph: GraphModel, flow_name: str | None = None
) -> list[ConnectedComponent]:
    """Convenience: ComponentFinder().find_components(graph, flow_name)."""
    return ComponentFinder().find_components(graph, flow_name)


def component_to_dict(component: ConnectedComponent) -> dict:
    return {
        "id": component.id,
        "flow_id": component.flow_id,
        "flow_name": component.flow_name,
        "node_count": component.graph.get_node_count(),
        "graph": graph_model_to_dict(component.graph),
    }
