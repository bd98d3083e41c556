"""Regex extraction of imports, exported symbols and identifier tokens.

All functions expect comment-stripped source (see ``comments.strip_comments``)
and never raise on malformed input: anything that does not match is ignored.
"""

from __future__ import annotations

import re

from fsgraph.paths import normalize_path

# import(path : "...", version : "...");  optionally preceded by ``export``
_IMPORT_RE = re.compile(
    r'\b(export\s+)?import\s*\(\s*path\s*:\s*"([^"]+)"\s*,\s*version\s*:\s*"[^"]*"\s*\)\s*;',
    re.ASCII,
)
_EXPORT_SYMBOL_RE = re.compile(
    r"\bexport\s+(?:function|type|predicate|enum|const)\s+([A-Za-z_][A-Za-z0-9_]*)",
    re.ASCII,
)
_FUNCTION_RE = re.compile(r"\b(?:export\s+)?function\s+[A-Za-z_][A-Za-z0-9_]*\b", re.ASCII)
_STRING_RE = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_IDENTIFIER_RE = re.compile(r"\b[A-Za-z_][A-Za-z0-9_]*\b", re.ASCII)
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_imports(source: str) -> tuple[list[str], list[str]]:
    """Return ``(imports, reexports)``, each deduplicated in first-seen order.

    The version string is matched but ignored. An import and a re-export of
    the same path are kept in their own lists.
    """
    imports: list[str] = []
    reexports: list[str] = []
    seen_imports: set[str] = set()
    seen_reexports: set[str] = set()

    for m in _IMPORT_RE.finditer(source):
        target = normalize_path(m.group(2).strip())
        if not target:
            continue
        if m.group(1):
            if target not in seen_reexports:
                seen_reexports.add(target)
                reexports.append(target)
        elif target not in seen_imports:
            seen_imports.add(target)
            imports.append(target)

    return imports, reexports


def parse_exported_symbols(source: str) -> list[str]:
    """Names declared as ``export function|type|predicate|enum|const NAME``."""
    symbols: list[str] = []
    seen: set[str] = set()
    for m in _EXPORT_SYMBOL_RE.finditer(source):
        name = m.group(1)
        if name not in seen:
            seen.add(name)
            symbols.append(name)
    return symbols


def extract_identifier_tokens(source: str) -> frozenset[str]:
    # String contents never count as identifiers.
    no_strings = _STRING_RE.sub(" ", source)
    return frozenset(_IDENTIFIER_RE.findall(no_strings))


def count_loc(source: str) -> int:
    return sum(1 for line in _LINE_SPLIT_RE.split(source) if line.strip())


def count_functions(source: str) -> int:
    return sum(1 for _ in _FUNCTION_RE.finditer(source))
