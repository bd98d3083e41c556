"""In-memory graph holder for the web API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class GraphState:
    """The currently served artifact plus lookup tables derived from it."""
    graph: dict[str, Any] | None = None
    _nodes: dict[str, dict[str, Any]] = field(default_factory=dict)
    _incoming: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    _outgoing: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    def load(self, graph: dict[str, Any]) -> None:
        self.graph = graph
        self._nodes.clear()
        self._incoming.clear()
        self._outgoing.clear()

        elements = graph.get("elements", {})
        for node in elements.get("nodes", []):
            self._nodes[node["data"]["id"]] = node["data"]
        for edge in elements.get("edges", []):
            data = edge["data"]
            self._outgoing.setdefault(data["source"], []).append(data)
            self._incoming.setdefault(data["target"], []).append(data)

    def get_node(self, node_id: str) -> dict[str, Any] | None:
        return self._nodes.get(node_id)

    def incoming(self, node_id: str) -> list[dict[str, Any]]:
        return list(self._incoming.get(node_id, []))

    def outgoing(self, node_id: str) -> list[dict[str, Any]]:
        return list(self._outgoing.get(node_id, []))
