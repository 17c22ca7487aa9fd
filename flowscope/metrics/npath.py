"""
NPath complexity adapted to possibly-cyclic dataflow graphs.

Counts terminating execution paths from an entry node (no incoming wires):
- a terminal node (no outgoing wires) is 1 path;
- otherwise, the sum over its output ports of the sum over each port's wires
  of the target's path count (ports are alternatives, multicast listeners
  are separate continuations);
- switch, trigger and filter nodes add 1 implicit path (drop / suppress);
- a wire back to a node still being resolved is a back edge and counts 2 if
  that node has more than one connected output port, else 1.

The component value is the maximum over entry nodes (separate triggers, not
parallel execution). No entries means a pure cycle, valued 1. Resolution is an
iterative DFS with a shared memo, so each node is expanded once: O(V + E).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flowscope.graph.components import ConnectedComponent, GraphInvariantError
from flowscope.graph.model import GraphModel
from flowscope.metrics.base import Metric, MetricResult, plural

ALGORITHM = "memoized-iterative-dfs"

PURE_CYCLE_VALUE = 1


@dataclass
class NPathContext:
    """Per-run traversal state: resolved path counts and the active DFS path."""

    resolved: dict[str, int] = field(default_factory=dict)
    on_stack: set[str] = field(default_factory=set)


@dataclass
class _Frame:
    node_id: str
    targets: list[str]
    implicit: int
    index: int = 0
    total: int = 0


def find_entry_nodes(graph: GraphModel) -> list[str]:
    """Ids of nodes with no incoming edge, in node order."""
    return [n for n in graph.get_node_ids() if not graph.get_incoming(n)]


def _ordered_targets(graph: GraphModel, node_id: str) -> list[str]:
    """Outgoing targets grouped by port (ports in first-seen order, wires in insertion order)."""
    by_port: dict[int, list[str]] = {}
    for edge in graph.get_outgoing(node_id):
        by_port.setdefault(edge.source_port, []).append(edge.target)
    return [target for targets in by_port.values() for target in targets]


def back_edge_value(graph: GraphModel, node_id: str) -> int:
    """2 when the looping node can also leave through another port, else 1."""
    return 2 if len(graph.get_outgoing_ports(node_id)) > 1 else 1


def _open_frame(graph: GraphModel, node_id: str, ctx: NPathContext) -> _Frame:
    node = graph.get_node(node_id)
    if node is None:
        raise GraphInvariantError(f"edge references unknown node {node_id!r}")
    ctx.on_stack.add(node_id)
    targets = _ordered_targets(graph, node_id)
    if not targets:
        return _Frame(node_id=node_id, targets=[], implicit=0, total=1)
    return _Frame(
        node_id=node_id,
        targets=targets,
        implicit=1 if node.has_implicit_path else 0,
    )


def resolve_paths(graph: GraphModel, start: str, ctx: NPathContext) -> int:
    """Path count from start, filling ctx.resolved for every node finished on the way."""
    if start in ctx.resolved:
        return ctx.resolved[start]

    stack = [_open_frame(graph, start, ctx)]
    value = 0
    while stack:
        frame = stack[-1]
        if frame.index < len(frame.targets):
            target = frame.targets[frame.index]
            frame.index += 1
            if target in ctx.resolved:
                frame.total += ctx.resolved[target]
            elif target in ctx.on_stack:
                frame.total += back_edge_value(graph, target)
            else:
                stack.append(_open_frame(graph, target, ctx))
            continue

        stack.pop()
        value = frame.total + frame.implicit
        ctx.on_stack.discard(frame.node_id)
        ctx.resolved[frame.node_id] = value
        if stack:
            stack[-1].total += value
    return value


def _interpretation(path_count: int, entry_count: int) -> str:
    entry_text = plural(entry_count, "entry point")
    if path_count == 0:
        return "Empty flow - no execution paths"
    if entry_count == 0:
        return "Pure cycle with no entry point; counted as a single path."
    if path_count == 1:
        return f"Linear flow with single execution path ({entry_text})."
    if path_count <= 5:
        return f"Simple flow with {path_count} distinct paths ({entry_text})."
    if path_count <= 20:
        return f"Moderate complexity with {path_count} distinct paths ({entry_text})."
    if path_count <= 100:
        return f"High complexity with {path_count} distinct paths ({entry_text})."
    return f"Very high complexity with {path_count} distinct paths ({entry_text})."


class NPathComplexityMetric(Metric):
    id = "npath-complexity"
    name = "NPATH Complexity"
    category = "complexity"
    description = "Counts distinct execution paths through the graph"

    def __init__(self, include_per_node: bool = True) -> None:
        self.include_per_node = include_per_node

    def compute(self, component: ConnectedComponent) -> MetricResult:
        graph = component.graph
        node_count = graph.get_node_count()
        if node_count == 0:
            return MetricResult(value=0, interpretation=_interpretation(0, 0))

        entries = find_entry_nodes(graph)
        details: dict = {
            "algorithm": ALGORITHM,
            "node_count": node_count,
            "entry_node_ids": entries,
        }
        if not entries:
            return MetricResult(
                value=PURE_CYCLE_VALUE,
                details=details,
                interpretation=_interpretation(PURE_CYCLE_VALUE, 0),
            )

        ctx = NPathContext()
        max_paths = max(resolve_paths(graph, entry, ctx) for entry in entries)
        if self.include_per_node:
            details["per_node"] = dict(ctx.resolved)
        return MetricResult(
            value=max_paths,
            details=details,
            interpretation=_interpretation(max_paths, len(entries)),
        )
