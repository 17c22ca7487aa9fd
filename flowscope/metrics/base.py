"""
Metric contract and result types.
Every metric is a pure function of one ConnectedComponent.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal

from flowscope.graph.components import ConnectedComponent

MetricCategory = Literal["size", "structural", "complexity"]


@dataclass(frozen=True)
class MetricResult:
    """Value of one metric for one component, with optional explanation."""

    value: int | float
    details: dict[str, Any] | None = None
    interpretation: str | None = None

    def to_dict(self) -> dict:
        metadata: dict[str, Any] = {}
        if self.details is not None:
            metadata["details"] = self.details
        if self.interpretation is not None:
            metadata["interpretation"] = self.interpretation
        d: dict[str, Any] = {"value": self.value}
        if metadata:
            d["metadata"] = metadata
        return d


@dataclass(frozen=True)
class ComponentMetrics:
    """All computed metric results of one component, keyed by metric id."""

    component_id: str
    metrics: dict[str, MetricResult] = field(default_factory=dict)

    def value(self, metric_id: str) -> int | float:
        return self.metrics[metric_id].value

    def to_dict(self) -> dict:
        return {
            "component_id": self.component_id,
            "metrics": {
                metric_id: result.to_dict()
                for metric_id, result in sorted(self.metrics.items())
            },
        }


class Metric(ABC):
    """Base class for metrics; subclasses set the four class attributes."""

    id: str
    name: str
    category: MetricCategory
    description: str

    @abstractmethod
    def compute(self, component: ConnectedComponent) -> MetricResult:
        """Compute the metric. Must not raise for empty or edge-less graphs."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


def plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
