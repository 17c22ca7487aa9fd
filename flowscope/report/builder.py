"""
ReportBuilder: assemble components and their metric results into an AnalysisReport.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from flowscope.graph.components import ConnectedComponent
from flowscope.graph.model import graph_model_to_dict
from flowscope.metrics.base import ComponentMetrics, MetricResult

REPORT_SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class ReportSummary:
    flow_count: int
    total_components: int
    analyzed_at: str


@dataclass(frozen=True)
class ComponentReport:
    """One component: identity, serialized subgraph, and metric results by sorted id."""

    id: str
    flow_id: str
    flow_name: str | None
    node_count: int
    graph: dict
    metrics: dict[str, MetricResult]


@dataclass(frozen=True)
class AnalysisReport:
    summary: ReportSummary
    components: tuple[ComponentReport, ...]
    schema_version: str = REPORT_SCHEMA_VERSION


class ReportBuilder:
    """Builds deterministic reports; only analyzed_at varies between runs."""

    def build(
        self,
        components: Sequence[ConnectedComponent],
        metrics_by_component: Mapping[str, ComponentMetrics],
        analyzed_at: datetime | None = None,
    ) -> AnalysisReport:
        """
        Raises:
            ValueError: if a component has no entry in metrics_by_component.
        """
        reports = []
        for component in components:
            metrics = metrics_by_component.get(component.id)
            if metrics is None:
                raise ValueError(f"No metrics found for component {component.id}")
            reports.append(self._component_report(component, metrics))
        reports.sort(key=lambda r: r.id)

        when = analyzed_at if analyzed_at is not None else datetime.now(timezone.utc)
        summary = ReportSummary(
            flow_count=len({c.flow_id for c in components}),
            total_components=len(components),
            analyzed_at=when.isoformat(),
        )
        return AnalysisReport(summary=summary, components=tuple(reports))

    def _component_report(
        self, component: ConnectedComponent, metrics: ComponentMetrics
    ) -> ComponentReport:
        return ComponentReport(
            id=component.id,
            flow_id=component.flow_id,
            flow_name=component.flow_name,
            node_count=component.graph.get_node_count(),
            graph=graph_model_to_dict(component.graph),
            metrics={k: metrics.metrics[k] for k in sorted(metrics.metrics)},
        )


def report_to_dict(report: AnalysisReport) -> dict:
    """Return a JSON-serializable dict (metric ids and components already sorted)."""
    return {
        "schema_version": report.schema_version,
        "summary": {
            "flow_count": report.summary.flow_count,
            "total_components": report.summary.total_components,
            "analyzed_at": report.summary.analyzed_at,
        },
        "components": [
            {
                "id": c.id,
                "flow_id": c.flow_id,
                "flow_name": c.flow_name,
                "node_count": c.node_count,
                "graph": c.graph,
                "metrics": {k: r.to_dict() for k, r in c.metrics.items()},
            }
            for c in report.components
        ],
    }
