"""Analysis reports: structured builder and text rendering."""

from flowscope.report.builder import (
    REPORT_SCHEMA_VERSION,
    AnalysisReport,
    ComponentReport,
    ReportBuilder,
    ReportSummary,
    report_to_dict,
)
from flowscope.report.text import format_report_text

__all__ = [
    "REPORT_SCHEMA_VERSION",
    "AnalysisReport",
    "ComponentReport",
    "ReportBuilder",
    "ReportSummary",
    "format_report_text",
    "report_to_dict",
]
