"""Typed records for items of a flow export."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlowTab:
    """A flow tab (workspace canvas)."""

    id: str
    label: str
    disabled: bool = False
    info: str | None = None


@dataclass(frozen=True)
class FlowNode:
    """
    A node item of a flow export.
    wires[i] lists the target ids connected to output port i.
    """

    id: str
    type: str
    wires: tuple[tuple[str, ...], ...] = ()
    z: str | None = None  # owning tab id
    x: float | None = None
    y: float | None = None
    name: str | None = None
    disabled: bool = False


def make_node(
    node_id: str,
    node_type: str,
    wires: list[list[str]] | None = None,
    **kwargs,
) -> FlowNode:
    """Build a FlowNode from plain lists (wires converted to nested tuples)."""
    return FlowNode(
        id=node_id,
        type=node_type,
        wires=tuple(tuple(port) for port in (wires or [])),
        **kwargs,
    )
