"""Component metrics: contract, registry, size, structural, and complexity metrics."""

from flowscope.metrics.base import (
    ComponentMetrics,
    Metric,
    MetricCategory,
    MetricResult,
)
from flowscope.metrics.cyclomatic import CyclomaticComplexityMetric, branches_for
from flowscope.metrics.npath import (
    NPathComplexityMetric,
    NPathContext,
    find_entry_nodes,
    resolve_paths,
)
from flowscope.metrics.registry import (
    DuplicateMetricIdError,
    MetricsRegistry,
    default_registry,
)
from flowscope.metrics.size import EdgeCountMetric, VertexCountMetric
from flowscope.metrics.structural import DensityMetric, FanInMetric, FanOutMetric

__all__ = [
    "ComponentMetrics",
    "CyclomaticComplexityMetric",
    "DensityMetric",
    "DuplicateMetricIdError",
    "EdgeCountMetric",
    "FanInMetric",
    "FanOutMetric",
    "Metric",
    "MetricCategory",
    "MetricResult",
    "MetricsRegistry",
    "NPathComplexityMetric",
    "NPathContext",
    "VertexCountMetric",
    "branches_for",
    "default_registry",
    "find_entry_nodes",
    "resolve_paths",
]
