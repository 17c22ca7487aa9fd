"""
Analyzer configuration: supports YAML files, dicts, AnalyzerConfig instances, and defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from flowscope.graph.classifier import DEFAULT_DECISION_TYPES, NodeClassifier


@dataclass(frozen=True)
class AnalyzerConfig:
    """Immutable settings for one analysis run."""

    decision_types: frozenset[str] = DEFAULT_DECISION_TYPES
    metrics: tuple[str, ...] | None = None  # None = every registered metric
    exclude_disabled_nodes: bool = False

    def classifier(self) -> NodeClassifier:
        return NodeClassifier(decision_types=self.decision_types)


def default_analyzer_config() -> AnalyzerConfig:
    return AnalyzerConfig()


def load_analyzer_config(
    source: AnalyzerConfig | str | Path | dict | None,
) -> AnalyzerConfig:
    """
    Load an AnalyzerConfig from various sources.

    Args:
        source: Can be:
            - AnalyzerConfig instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys
            - None: returns default_analyzer_config()

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the YAML is invalid or a field has the wrong type
        TypeError: If source is of an unsupported type
    """
    if source is None:
        return default_analyzer_config()

    if isinstance(source, AnalyzerConfig):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_yaml_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_analyzer_config: {type(source).__name__}"
    )


def _load_from_yaml_file(path: str | Path) -> AnalyzerConfig:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e

    if data is None:
        return default_analyzer_config()
    if not isinstance(data, dict):
        raise ValueError(
            f"YAML file {file_path}: expected dict, got {type(data).__name__}"
        )
    return _load_from_dict(data)


def _string_list(data: dict, key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Config '{key}' must be a list of strings")
    return value


def _load_from_dict(data: dict) -> AnalyzerConfig:
    """
    Keys:
        decision_types: replaces the default decision type set
        extra_decision_types: added to the (default or given) set
        metrics: ids of the metrics to compute
        exclude_disabled_nodes: drop nodes marked 'd': true before building
    """
    decision_types = _string_list(data, "decision_types")
    extra = _string_list(data, "extra_decision_types") or []
    types = set(DEFAULT_DECISION_TYPES if decision_types is None else decision_types)
    types.update(extra)

    metrics = _string_list(data, "metrics")

    exclude = data.get("exclude_disabled_nodes", False)
    if not isinstance(exclude, bool):
        raise ValueError(
            f"Config 'exclude_disabled_nodes' must be a boolean, got {type(exclude).__name__}"
        )

    return AnalyzerConfig(
        decision_types=frozenset(types),
        metrics=None if metrics is None else tuple(metrics),
        exclude_disabled_nodes=exclude,
    )
