"""Write and read the graph JSON artifact."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from fsgraph.errors import ConfigError
from fsgraph.models import GraphOutput


def dump_graph(graph: GraphOutput) -> str:
    return json.dumps(graph.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_graph(graph: GraphOutput, output: Path) -> Path:
    """Write *graph* to *output*, replacing any previous file atomically."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    text = dump_graph(graph)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{output.name}.", suffix=".tmp", dir=output.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp_name, output)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return output


def load_graph(path: Path) -> dict[str, Any]:
    """Read a previously written artifact as a plain dict."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Graph file does not exist: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read graph file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Graph file is not valid JSON: {path}: {e}") from e
    if not isinstance(data, dict) or "elements" not in data:
        raise ConfigError(f"Not a graph artifact: {path}")
    return data
