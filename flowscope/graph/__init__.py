"""Flow graph model, construction, and component partitioning."""

from flowscope.graph.builder import GraphBuilder, build_graph
from flowscope.graph.classifier import DEFAULT_DECISION_TYPES, NodeClassifier
from flowscope.graph.components import (
    ComponentFinder,
    ConnectedComponent,
    GraphInvariantError,
    component_to_dict,
    extract_subgraph,
    find_components,
)
from flowscope.graph.edges import GraphEdge
from flowscope.graph.model import GraphModel, graph_model_to_dict
from flowscope.graph.nodes import DecisionKind, GraphNode, NodeMetadata, NodePosition

__all__ = [
    "DEFAULT_DECISION_TYPES",
    "ComponentFinder",
    "ConnectedComponent",
    "DecisionKind",
    "GraphBuilder",
    "GraphEdge",
    "GraphInvariantError",
    "GraphModel",
    "GraphNode",
    "NodeClassifier",
    "NodeMetadata",
    "NodePosition",
    "build_graph",
    "component_to_dict",
    "extract_subgraph",
    "find_components",
    "graph_model_to_dict",
]
