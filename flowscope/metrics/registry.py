"""
MetricsRegistry: id-keyed plugin registry that runs metrics over components.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from flowscope.graph.components import ConnectedComponent
from flowscope.metrics.base import ComponentMetrics, Metric, MetricCategory, MetricResult
from flowscope.metrics.cyclomatic import CyclomaticComplexityMetric
from flowscope.metrics.npath import NPathComplexityMetric
from flowscope.metrics.size import EdgeCountMetric, VertexCountMetric
from flowscope.metrics.structural import DensityMetric, FanInMetric, FanOutMetric

logger = logging.getLogger(__name__)


class DuplicateMetricIdError(ValueError):
    """A metric with the same id is already registered."""


class MetricsRegistry:
    """Registered metrics in registration order."""

    def __init__(self, metrics: Iterable[Metric] = ()) -> None:
        self._metrics: dict[str, Metric] = {}
        for metric in metrics:
            self.register(metric)

    def register(self, metric: Metric) -> None:
        """
        Register a metric.

        Raises:
            DuplicateMetricIdError: if metric.id is already registered.
        """
        if metric.id in self._metrics:
            raise DuplicateMetricIdError(
                f"Metric with id '{metric.id}' is already registered"
            )
        self._metrics[metric.id] = metric

    def get_metric(self, metric_id: str) -> Metric | None:
        return self._metrics.get(metric_id)

    def get_all_metrics(self) -> list[Metric]:
        return list(self._metrics.values())

    def get_metrics_by_category(self, category: MetricCategory) -> list[Metric]:
        return [m for m in self._metrics.values() if m.category == category]

    def compute_all(self, component: ConnectedComponent) -> ComponentMetrics:
        """Run every registered metric independently on component."""
        results: dict[str, MetricResult] = {}
        for metric in self._metrics.values():
            results[metric.id] = metric.compute(component)
        return ComponentMetrics(component_id=component.id, metrics=results)

    def compute_metrics(
        self, component: ConnectedComponent, metric_ids: Iterable[str]
    ) -> ComponentMetrics:
        """Run only the requested metrics; unknown ids are skipped."""
        results: dict[str, MetricResult] = {}
        for metric_id in metric_ids:
            metric = self._metrics.get(metric_id)
            if metric is None:
                logger.debug("skipping unknown metric id %r", metric_id)
                continue
            results[metric_id] = metric.compute(component)
        return ComponentMetrics(component_id=component.id, metrics=results)

    def clear(self) -> None:
        self._metrics.clear()

    def __len__(self) -> int:
        return len(self._metrics)

    def __contains__(self, metric_id: object) -> bool:
        return metric_id in self._metrics


def default_registry() -> MetricsRegistry:
    """Registry with the size, structural and complexity metrics."""
    return MetricsRegistry(
        [
            VertexCountMetric(),
            EdgeCountMetric(),
            FanInMetric(),
            FanOutMetric(),
            DensityMetric(),
            CyclomaticComplexityMetric(),
            NPathComplexityMetric(),
        ]
    )
