"""Edge types for the flow graph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphEdge:
    """A wire from output port source_port of source to target."""

    source: str
    target: str
    source_port: int = 0

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target
