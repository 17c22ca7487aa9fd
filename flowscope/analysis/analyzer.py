"""
FlowAnalyzer: orchestrate parser, graph builder, component finder, metrics registry, report builder.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from flowscope.analysis.config import AnalyzerConfig, load_analyzer_config
from flowscope.graph.builder import GraphBuilder
from flowscope.graph.components import ComponentFinder, ConnectedComponent
from flowscope.ingestion.flow_parser import FlowParser
from flowscope.ingestion.records import FlowNode
from flowscope.metrics.base import ComponentMetrics
from flowscope.metrics.registry import MetricsRegistry, default_registry
from flowscope.report.builder import AnalysisReport, ReportBuilder

logger = logging.getLogger(__name__)


class FlowAnalyzer:
    """Analyze one flow export into a per-component metrics report."""

    def __init__(
        self,
        config: AnalyzerConfig | str | Path | dict | None = None,
        registry: MetricsRegistry | None = None,
    ) -> None:
        self.config = load_analyzer_config(config)
        self.parser = FlowParser()
        self.graph_builder = GraphBuilder(self.config.classifier())
        self.component_finder = ComponentFinder()
        self.registry = registry if registry is not None else default_registry()
        self.report_builder = ReportBuilder()

    def _compute(self, component: ConnectedComponent) -> ComponentMetrics:
        if self.config.metrics is None:
            return self.registry.compute_all(component)
        return self.registry.compute_metrics(component, self.config.metrics)

    def analyze(self, export: str | list | Any) -> AnalysisReport:
        """
        Parse the export and compute metrics for every component of every enabled tab.
        Parse errors propagate; a tab with no nodes contributes no components.
        """
        parsed = self.parser.parse(export)

        nodes_by_flow: dict[str, list[FlowNode]] = {}
        labels: dict[str, str] = {}
        for tab in parsed.tabs:
            nodes = self.parser.get_nodes_for_tab(parsed.nodes, tab.id)
            if self.config.exclude_disabled_nodes:
                nodes = self.parser.filter_active_nodes(nodes)
            nodes_by_flow[tab.id] = nodes
            labels[tab.id] = tab.label

        graphs = self.graph_builder.build_multiple(nodes_by_flow)

        components: list[ConnectedComponent] = []
        metrics: dict[str, ComponentMetrics] = {}
        for flow_id, graph in graphs.items():
            found = self.component_finder.find_components(graph, labels[flow_id])
            logger.debug(
                "flow %s: %d node(s), %d component(s)",
                flow_id,
                graph.get_node_count(),
                len(found),
            )
            for component in found:
                components.append(component)
                metrics[component.id] = self._compute(component)

        logger.info(
            "analyzed %d flow(s), %d component(s)", len(graphs), len(components)
        )
        return self.report_builder.build(components, metrics)


def analyze_flow(
    export: str | list | Any,
    config: AnalyzerConfig | str | Path | dict | None = None,
) -> AnalysisReport:
    """Convenience: FlowAnalyzer(config).analyze(export)."""
    return FlowAnalyzer(config).analyze(export)
