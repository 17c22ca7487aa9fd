"""
NodeClassifier: decide which node types are decision points and which decision kind they carry.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from flowscope.graph.nodes import DecisionKind

# switch routes, trigger rate-gates, rbe suppresses unchanged values
DEFAULT_DECISION_TYPES = frozenset({"switch", "trigger", "rbe"})

_KIND_BY_TYPE: dict[str, DecisionKind] = {
    "switch": DecisionKind.SWITCH,
    "trigger": DecisionKind.TRIGGER,
    "rbe": DecisionKind.FILTER,
    "filter": DecisionKind.FILTER,
}


@dataclass(frozen=True)
class NodeClassifier:
    """
    Immutable classifier over a fixed set of decision type names.

    A type outside the set is NON_DECISION. A type inside the set maps to its
    well-known kind (switch, trigger, rbe/filter) or to GENERIC_DECISION for
    custom types such as a subflow configured as a decision point.
    """

    decision_types: frozenset[str] = DEFAULT_DECISION_TYPES

    @classmethod
    def from_types(cls, types: Iterable[str]) -> NodeClassifier:
        return cls(decision_types=frozenset(types))

    def is_decision_node(self, node_type: str) -> bool:
        return node_type in self.decision_types

    def classify(self, node_type: str) -> DecisionKind:
        if node_type not in self.decision_types:
            return DecisionKind.NON_DECISION
        return _KIND_BY_TYPE.get(node_type, DecisionKind.GENERIC_DECISION)

    def with_decision_type(self, node_type: str) -> NodeClassifier:
        """Return a new classifier that also treats node_type as a decision."""
        return NodeClassifier(decision_types=self.decision_types | {node_type})

    def without_decision_type(self, node_type: str) -> NodeClassifier:
        """Return a new classifier that no longer treats node_type as a decision."""
        return NodeClassifier(decision_types=self.decision_types - {node_type})

    def sorted_decision_types(self) -> list[str]:
        return sorted(self.decision_types)
