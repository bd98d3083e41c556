"""Exporter stage: source links and the on-disk graph artifact."""

from fsgraph.exporter.graph_writer import load_graph, write_graph
from fsgraph.exporter.source_links import build_source_url, load_source_links

__all__ = [
    "build_source_url",
    "load_graph",
    "load_source_links",
    "write_graph",
]
