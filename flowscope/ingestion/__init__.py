"""Flow export parsing: tabs, nodes, and validation."""

from flowscope.ingestion.flow_parser import (
    FlowParseError,
    FlowParser,
    ParsedFlow,
    parse_flow,
)
from flowscope.ingestion.records import FlowNode, FlowTab, make_node

__all__ = [
    "FlowNode",
    "FlowParseError",
    "FlowParser",
    "FlowTab",
    "ParsedFlow",
    "make_node",
    "parse_flow",
]
