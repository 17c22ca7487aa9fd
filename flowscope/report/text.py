"""Human-readable text rendering of an AnalysisReport."""

from __future__ import annotations

from flowscope.report.builder import AnalysisReport, ComponentReport


def _format_component(component: ComponentReport) -> list[str]:
    lines = [
        "",
        f"  Component: {component.id}",
        f"  Flow: {component.flow_name or component.flow_id}",
        "  Metrics:",
    ]
    for metric_id, result in component.metrics.items():
        lines.append(f"    {metric_id}: {result.value}")
    return lines


def format_report_text(report: AnalysisReport) -> str:
    lines = [
        "=== Data Flow Graph Analysis Report ===",
        f"Timestamp: {report.summary.analyzed_at}",
        "",
        "Summary:",
        f"  Flows: {report.summary.flow_count}",
        f"  Components: {report.summary.total_components}",
    ]
    if report.components:
        lines.append("")
        lines.append("Components:")
        for component in report.components:
            lines.extend(_format_component(component))
    return "\n".join(lines) + "\n"
