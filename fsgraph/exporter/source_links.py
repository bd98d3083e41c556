"""Links from indexed modules to their source in an Onshape document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from urllib.parse import quote

from fsgraph.errors import ConfigError
from fsgraph.models import SourceLinkConfig
from fsgraph.paths import basename, normalize_path

DEFAULT_DOCUMENT_ID = "12312312345abcabcabcdeff"
DEFAULT_WORKSPACE_ID = "a855e4161c814f2e9ab3698a"
ONSHAPE_BASE_URL = "https://cad.onshape.com/documents"


def _non_empty(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def load_source_links(
    path: Path,
    document_id: str | None = None,
    workspace_id: str | None = None,
) -> SourceLinkConfig:
    """Load an element map JSON file.

    Explicit *document_id* / *workspace_id* win over the file's values,
    which win over the standard library defaults.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Onshape map file does not exist: {path}")

    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read Onshape map {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Onshape map is not valid JSON: {path}: {e}") from e

    if not isinstance(parsed, dict):
        raise ConfigError(f"Onshape map must be a JSON object: {path}")

    elements = parsed.get("elementsByName")
    if elements is None:
        elements = {}
    elif not isinstance(elements, dict):
        raise ConfigError(f'Onshape map field "elementsByName" must be an object: {path}')

    for module_file, element_id in elements.items():
        if _non_empty(element_id) is None:
            raise ConfigError(f'Onshape map has invalid element id for "{module_file}" in {path}')

    return SourceLinkConfig(
        document_id=document_id or _non_empty(parsed.get("documentId")) or DEFAULT_DOCUMENT_ID,
        workspace_id=workspace_id or _non_empty(parsed.get("workspaceId")) or DEFAULT_WORKSPACE_ID,
        elements_by_name=dict(elements),
    )


def module_file_name(file_path: str) -> str | None:
    """Basename of a ``.fs`` path, the key used in ``elementsByName``."""
    normalized = normalize_path(file_path).strip()
    if not normalized:
        return None
    name = basename(normalized)
    return name if name.endswith(".fs") else None


def build_source_url(config: SourceLinkConfig, file_path: str) -> str | None:
    name = module_file_name(file_path)
    element_id = config.elements_by_name.get(name) if name else None
    if not element_id:
        return None
    return "/".join([
        ONSHAPE_BASE_URL,
        quote(config.document_id, safe=""),
        "w",
        quote(config.workspace_id, safe=""),
        "e",
        quote(element_id, safe=""),
    ])
