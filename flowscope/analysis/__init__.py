"""Analysis pipeline: configuration and FlowAnalyzer."""

from flowscope.analysis.analyzer import FlowAnalyzer, analyze_flow
from flowscope.analysis.config import (
    AnalyzerConfig,
    default_analyzer_config,
    load_analyzer_config,
)

__all__ = [
    "AnalyzerConfig",
    "FlowAnalyzer",
    "analyze_flow",
    "default_analyzer_config",
    "load_analyzer_config",
]
