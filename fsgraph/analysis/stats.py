"""Summary statistics over a graph artifact."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any


@dataclass
class GraphSummary:
    nodes: int = 0
    real_nodes: int = 0
    virtual_nodes: int = 0
    edges: int = 0
    edges_by_kind: dict[str, int] = field(default_factory=dict)
    most_imported: list[tuple[str, int]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": self.nodes,
            "realNodes": self.real_nodes,
            "virtualNodes": self.virtual_nodes,
            "edges": self.edges,
            "edgesByKind": dict(self.edges_by_kind),
            "mostImported": [{"id": i, "incoming": n} for i, n in self.most_imported],
        }


def summarize(graph: dict[str, Any], top: int = 10) -> GraphSummary:
    """Summarize a serialized graph (the dict form written to disk).

    Works on the JSON shape rather than ``GraphOutput`` so it can be run
    against any artifact, including ones produced by an older indexer.
    """
    elements = graph.get("elements", {})
    nodes = [n["data"] for n in elements.get("nodes", [])]
    edges = [e["data"] for e in elements.get("edges", [])]

    virtual = sum(1 for n in nodes if n.get("isVirtual"))
    by_kind = Counter(e["kind"] for e in edges)
    incoming = Counter(e["target"] for e in edges)
    ranked = sorted(incoming.items(), key=lambda kv: (-kv[1], kv[0]))[:top]

    return GraphSummary(
        nodes=len(nodes),
        real_nodes=len(nodes) - virtual,
        virtual_nodes=virtual,
        edges=len(edges),
        edges_by_kind=dict(sorted(by_kind.items())),
        most_imported=ranked,
    )
