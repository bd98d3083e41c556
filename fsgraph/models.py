"""Data models for the fsgraph indexing pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

UNRESOLVED_FILE_PATH = "(unresolved module)"


class EdgeKind(enum.Enum):
    IMPORT = "import"
    REEXPORT = "reexport"


@dataclass(frozen=True)
class ParsedFile:
    """Result from the scanner stage, one per indexed file."""
    id: str
    file_path: str
    loc: int
    function_count: int
    is_generated: bool
    imports: tuple[str, ...] = ()
    reexports: tuple[str, ...] = ()
    exported_symbols: tuple[str, ...] = ()
    tokens: frozenset[str] = frozenset()


@dataclass
class NodeData:
    id: str
    label: str
    file_path: str
    module_path: str
    loc: int = 0
    function_count: int = 0
    is_generated: bool = False
    imports: list[str] = field(default_factory=list)
    reexports: list[str] = field(default_factory=list)
    import_targets: list[str] = field(default_factory=list)
    reexport_targets: list[str] = field(default_factory=list)
    exports: list[str] = field(default_factory=list)
    symbol_users: dict[str, list[str]] = field(default_factory=dict)
    source_url: str | None = None
    is_virtual: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "filePath": self.file_path,
            "modulePath": self.module_path,
        }
        if self.source_url:
            data["sourceUrl"] = self.source_url
        data.update({
            "loc": self.loc,
            "functionCount": self.function_count,
            "isGenerated": self.is_generated,
            "imports": list(self.imports),
            "reexports": list(self.reexports),
            "importTargets": list(self.import_targets),
            "reexportTargets": list(self.reexport_targets),
            "importCount": len(self.imports),
            "reexportCount": len(self.reexports),
            "exports": list(self.exports),
            "exportCount": len(self.exports),
            "symbolUsers": {k: list(v) for k, v in self.symbol_users.items()},
        })
        if self.is_virtual:
            data["isVirtual"] = True
        return data


@dataclass
class EdgeData:
    number: int
    source: str
    target: str
    kind: EdgeKind

    @property
    def id(self) -> str:
        return f"e{self.number}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "kind": self.kind.value,
        }


@dataclass
class GraphOutput:
    """The graph artifact handed to the visualization layer."""
    root: str
    generated_at: str
    nodes: list[NodeData] = field(default_factory=list)
    edges: list[EdgeData] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "generatedAt": self.generated_at,
            "elements": {
                "nodes": [{"data": node.to_dict()} for node in self.nodes],
                "edges": [{"data": edge.to_dict()} for edge in self.edges],
            },
        }


@dataclass
class SourceLinkConfig:
    """Where each module's source lives in the Onshape standard library document."""
    document_id: str
    workspace_id: str
    elements_by_name: dict[str, str] = field(default_factory=dict)


@dataclass
class IndexConfig:
    """Configuration for one indexing run."""
    root: Path = field(default_factory=lambda: Path("."))
    output: Path = field(default_factory=lambda: Path("public/graph.json"))
    extension: str = ".fs"
    source_map: Path | None = None
    document_id: str | None = None
    workspace_id: str | None = None
