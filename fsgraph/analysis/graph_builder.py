"""Module graph builder: resolves declarations into nodes, edges and symbol usage."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fsgraph.analysis.aliases import AliasCounter
from fsgraph.analysis.resolver import SuffixIndex
from fsgraph.exporter.source_links import build_source_url
from fsgraph.models import (
    UNRESOLVED_FILE_PATH,
    EdgeData,
    EdgeKind,
    GraphOutput,
    NodeData,
    ParsedFile,
    SourceLinkConfig,
)
from fsgraph.paths import basename

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class _BuildState:
    """Everything one ``build`` call mutates. Created fresh per call."""
    files: dict[str, ParsedFile]
    suffix_index: SuffixIndex
    edges: list[EdgeData] = field(default_factory=list)
    edge_keys: set[tuple[EdgeKind, str, str]] = field(default_factory=set)
    virtual_nodes: dict[str, NodeData] = field(default_factory=dict)
    aliases: AliasCounter = field(default_factory=AliasCounter)
    consumers: dict[str, set[str]] = field(default_factory=dict)
    targets: dict[str, dict[EdgeKind, list[str]]] = field(default_factory=dict)


class ModuleGraphBuilder:
    """Build the module dependency graph from parsed files."""

    def build(
        self,
        root: str,
        files: Iterable[ParsedFile],
        source_links: SourceLinkConfig | None = None,
        generated_at: str | None = None,
    ) -> GraphOutput:
        parsed = list(files)
        state = _BuildState(
            files={f.id: f for f in parsed},
            suffix_index=SuffixIndex(f.file_path for f in parsed),
        )

        # Pass 1: resolve every declaration, in file order
        for f in parsed:
            state.targets[f.id] = {
                EdgeKind.IMPORT: [self._link(state, f, p, EdgeKind.IMPORT) for p in f.imports],
                EdgeKind.REEXPORT: [self._link(state, f, p, EdgeKind.REEXPORT) for p in f.reexports],
            }

        # Pass 2: real nodes, now that every consumer is known
        nodes = [self._file_node(state, f, source_links) for f in parsed]
        nodes.extend(state.virtual_nodes.values())
        nodes.sort(key=lambda n: n.id)

        edges = sorted(state.edges, key=lambda e: e.number)

        logger.info(
            "Built graph: %d node(s) (%d virtual), %d edge(s)",
            len(nodes), len(state.virtual_nodes), len(edges),
        )
        return GraphOutput(
            root=root,
            generated_at=generated_at or utc_timestamp(),
            nodes=nodes,
            edges=edges,
        )

    def _link(self, state: _BuildState, source: ParsedFile, module_path: str, kind: EdgeKind) -> str:
        """Resolve one declared path, record its edge and bookkeeping, return the target id."""
        resolved = state.suffix_index.resolve(module_path)
        target = resolved if resolved is not None else module_path

        key = (kind, source.id, target)
        if key not in state.edge_keys:
            state.edge_keys.add(key)
            state.edges.append(EdgeData(
                number=len(state.edges) + 1,
                source=source.id,
                target=target,
                kind=kind,
            ))

        if target in state.files:
            state.consumers.setdefault(target, set()).add(source.id)
            if target != module_path and target != source.id:
                state.aliases.record(target, module_path)
        elif target not in state.virtual_nodes:
            logger.debug("Unresolved %s in %s: %s", kind.value, source.id, module_path)
            state.virtual_nodes[target] = NodeData(
                id=target,
                label=basename(target),
                file_path=UNRESOLVED_FILE_PATH,
                module_path=module_path,
                is_virtual=True,
            )

        return target

    def _file_node(
        self,
        state: _BuildState,
        f: ParsedFile,
        source_links: SourceLinkConfig | None,
    ) -> NodeData:
        targets = state.targets[f.id]
        return NodeData(
            id=f.id,
            label=basename(f.file_path),
            file_path=f.file_path,
            module_path=state.aliases.choose(f.id),
            loc=f.loc,
            function_count=f.function_count,
            is_generated=f.is_generated,
            imports=list(f.imports),
            reexports=list(f.reexports),
            import_targets=targets[EdgeKind.IMPORT],
            reexport_targets=targets[EdgeKind.REEXPORT],
            exports=list(f.exported_symbols),
            symbol_users=self._symbol_users(state, f),
            source_url=build_source_url(source_links, f.file_path) if source_links else None,
        )

    @staticmethod
    def _symbol_users(state: _BuildState, f: ParsedFile) -> dict[str, list[str]]:
        """Direct consumers of *f* that mention each exported name as a token."""
        consumers = state.consumers.get(f.id, set())
        users: dict[str, list[str]] = {}
        for symbol in f.exported_symbols:
            found = sorted(c for c in consumers if symbol in state.files[c].tokens)
            if found:
                users[symbol] = found
        return users
