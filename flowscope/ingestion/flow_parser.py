"""
FlowParser: validate a flow export and split it into enabled tabs and nodes.
Structural errors are fatal (FlowParseError); no partial result is returned.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from flowscope.ingestion.records import FlowNode, FlowTab

logger = logging.getLogger(__name__)


class FlowParseError(ValueError):
    """The export is not a structurally valid flow export."""


@dataclass(frozen=True)
class ParsedFlow:
    """Enabled tabs and the nodes that belong to them (or to no tab)."""

    tabs: tuple[FlowTab, ...]
    nodes: tuple[FlowNode, ...]


def _is_tab(item: dict) -> bool:
    return item["type"] == "tab"


def _has_valid_wires(item: dict) -> bool:
    wires = item.get("wires")
    if not isinstance(wires, list):
        return False
    return all(
        isinstance(port, list) and all(isinstance(t, str) for t in port)
        for port in wires
    )


def _number_or_none(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _to_tab(item: dict) -> FlowTab:
    label = item.get("label")
    info = item.get("info")
    return FlowTab(
        id=item["id"],
        label=label if isinstance(label, str) else item["id"],
        disabled=item.get("disabled") is True,
        info=info if isinstance(info, str) else None,
    )


def _to_node(item: dict) -> FlowNode:
    z = item.get("z")
    name = item.get("name")
    return FlowNode(
        id=item["id"],
        type=item["type"],
        wires=tuple(tuple(port) for port in item["wires"]),
        z=z if isinstance(z, str) and z else None,
        x=_number_or_none(item.get("x")),
        y=_number_or_none(item.get("y")),
        name=name if isinstance(name, str) and name else None,
        disabled=item.get("d") is True,
    )


class FlowParser:
    """Parser for flow exports (a flat JSON array of tab and node items)."""

    def parse(self, data: str | list | Any) -> ParsedFlow:
        """
        Parse an export given as a JSON string or an already-decoded list.

        Raises:
            FlowParseError: invalid JSON, non-array top level, or an item
                without string 'id' and 'type'.
        """
        items = self._validate(data)
        return self._extract(items)

    def _validate(self, data: Any) -> list[dict]:
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as e:
                raise FlowParseError(f"Invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise FlowParseError("Flow export must be an array")

        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise FlowParseError(f"Invalid item at index {i}: must be an object")
            if not isinstance(item.get("id"), str):
                raise FlowParseError(
                    f"Invalid item at index {i}: missing or invalid 'id' property"
                )
            if not isinstance(item.get("type"), str):
                raise FlowParseError(
                    f"Invalid item at index {i}: missing or invalid 'type' property"
                )
        return data

    def _extract(self, items: list[dict]) -> ParsedFlow:
        tabs: list[FlowTab] = []
        disabled_tab_ids: set[str] = set()
        for item in items:
            if not _is_tab(item):
                continue
            tab = _to_tab(item)
            if tab.disabled:
                disabled_tab_ids.add(tab.id)
                logger.debug("skipping disabled tab %s", tab.id)
                continue
            tabs.append(tab)

        nodes: list[FlowNode] = []
        for item in items:
            if _is_tab(item):
                continue
            if not _has_valid_wires(item):
                # config nodes and other wire-less items
                logger.debug("skipping non-node item %s (%s)", item["id"], item["type"])
                continue
            node = _to_node(item)
            if node.z is not None and node.z in disabled_tab_ids:
                continue
            nodes.append(node)

        return ParsedFlow(tabs=tuple(tabs), nodes=tuple(nodes))

    @staticmethod
    def get_nodes_for_tab(nodes: tuple[FlowNode, ...] | list[FlowNode], tab_id: str) -> list[FlowNode]:
        return [n for n in nodes if n.z == tab_id]

    @staticmethod
    def filter_active_nodes(nodes: tuple[FlowNode, ...] | list[FlowNode]) -> list[FlowNode]:
        """Drop nodes disabled individually ('d': true)."""
        return [n for n in nodes if not n.disabled]


def parse_flow(data: str | list | Any) -> ParsedFlow:
    """Convenience: FlowParser().parse(data)."""
    return FlowParser().parse(data)
