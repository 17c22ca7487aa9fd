"""Node types for the flow graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DecisionKind(str, Enum):
    """
    Closed set of decision semantics a node can carry.

    Resolved once when the graph is built; metrics dispatch on this value
    instead of comparing raw node type strings.
    """

    SWITCH = "switch"
    TRIGGER = "trigger"
    FILTER = "filter"
    GENERIC_DECISION = "generic_decision"
    NON_DECISION = "non_decision"


# Kinds that can drop or hold back a message without following a wire.
IMPLICIT_PATH_KINDS = frozenset(
    {DecisionKind.SWITCH, DecisionKind.TRIGGER, DecisionKind.FILTER}
)


@dataclass(frozen=True)
class NodePosition:
    """Canvas coordinates of a node."""

    x: float
    y: float


@dataclass(frozen=True)
class NodeMetadata:
    """Display-only node attributes."""

    name: str | None = None
    position: NodePosition | None = None


@dataclass(frozen=True)
class GraphNode:
    """A visual node of one flow tab, with its decision kind baked in."""

    id: str
    type: str
    flow_id: str
    decision_kind: DecisionKind = DecisionKind.NON_DECISION
    metadata: NodeMetadata = field(default_factory=NodeMetadata)

    @property
    def is_decision_node(self) -> bool:
        return self.decision_kind is not DecisionKind.NON_DECISION

    @property
    def has_implicit_path(self) -> bool:
        """True for switch, trigger and filter nodes (no-match drop or suppression)."""
        return self.decision_kind in IMPLICIT_PATH_KINDS
