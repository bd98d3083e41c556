"""Scanner stage: read each source file and extract its declarations."""

from __future__ import annotations

import logging
from pathlib import Path

from fsgraph.errors import ScanError
from fsgraph.models import ParsedFile
from fsgraph.paths import to_posix_relative
from fsgraph.scanner.collector import collect_source_files
from fsgraph.scanner.comments import strip_comments
from fsgraph.scanner.declarations import (
    count_functions,
    count_loc,
    extract_identifier_tokens,
    parse_exported_symbols,
    parse_imports,
)

logger = logging.getLogger(__name__)

GENERATED_SUFFIX = ".gen.fs"


def parse_source(file_id: str, source: str) -> ParsedFile:
    """Build a :class:`ParsedFile` from raw text already read from disk."""
    stripped = strip_comments(source)
    imports, reexports = parse_imports(stripped)
    return ParsedFile(
        id=file_id,
        file_path=file_id,
        loc=count_loc(stripped),
        function_count=count_functions(stripped),
        is_generated=file_id.lower().endswith(GENERATED_SUFFIX),
        imports=tuple(imports),
        reexports=tuple(reexports),
        exported_symbols=tuple(parse_exported_symbols(stripped)),
        tokens=extract_identifier_tokens(stripped),
    )


def scan_file(root: Path, file_path: Path) -> ParsedFile:
    """Read and parse one file; *file_path* must live under *root*."""
    try:
        source = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(f"Cannot read {file_path}: {e}") from e

    parsed = parse_source(to_posix_relative(root, file_path), source)
    logger.debug(
        "Scanned %s: %d import(s), %d re-export(s), %d export(s)",
        parsed.id, len(parsed.imports), len(parsed.reexports), len(parsed.exported_symbols),
    )
    return parsed


def scan_directory(root: Path, extension: str = ".fs") -> list[ParsedFile]:
    """Collect and parse every source file under *root*, in path order."""
    root = Path(root).resolve()
    return [scan_file(root, path) for path in collect_source_files(root, extension)]


__all__ = [
    "collect_source_files",
    "parse_source",
    "scan_directory",
    "scan_file",
    "strip_comments",
]
