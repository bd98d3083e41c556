"""Pipeline orchestrator: collect -> scan -> build graph -> write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from fsgraph.analysis.graph_builder import ModuleGraphBuilder
from fsgraph.errors import ConfigError
from fsgraph.exporter import load_source_links, write_graph
from fsgraph.models import GraphOutput, IndexConfig, ParsedFile, SourceLinkConfig
from fsgraph.scanner import collect_source_files, scan_file

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def validate_root(root: Path) -> Path:
    resolved = Path(root).expanduser().resolve()
    if not resolved.is_dir():
        raise ConfigError(f"Root path does not exist or is not a directory: {resolved}")
    return resolved


def build_graph(
    root: Path,
    extension: str = ".fs",
    source_links: SourceLinkConfig | None = None,
    progress: ProgressCallback | None = None,
) -> GraphOutput:
    """Index *root* and return the graph without writing anything."""
    root = validate_root(root)

    # Stage 1: Collect
    if progress:
        progress("Collecting", 0, 1)
    paths = collect_source_files(root, extension)
    if progress:
        progress("Collecting", 1, 1)

    # Stage 2: Scan
    parsed: list[ParsedFile] = []
    for i, path in enumerate(paths):
        if progress:
            progress("Scanning", i, len(paths))
        parsed.append(scan_file(root, path))
    if progress:
        progress("Scanning", len(paths), len(paths))

    # Stage 3: Build
    if progress:
        progress("Building graph", 0, 1)
    graph = ModuleGraphBuilder().build(str(root), parsed, source_links=source_links)
    if progress:
        progress("Building graph", 1, 1)
    return graph


def run_index(config: IndexConfig, progress: ProgressCallback | None = None) -> GraphOutput:
    """Run the full indexing pipeline and write the artifact to ``config.output``."""
    root = validate_root(config.root)

    source_links = None
    if config.source_map:
        source_links = load_source_links(
            config.source_map,
            document_id=config.document_id,
            workspace_id=config.workspace_id,
        )

    graph = build_graph(root, config.extension, source_links=source_links, progress=progress)

    # Stage 4: Write (only once the whole graph exists)
    if progress:
        progress("Writing", 0, 1)
    write_graph(graph, config.output)
    if progress:
        progress("Writing", 1, 1)

    logger.info("Wrote %s", config.output)
    return graph
