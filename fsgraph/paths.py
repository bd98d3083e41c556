"""Path spelling helpers shared by the scanner and the resolver."""

from __future__ import annotations

import posixpath
import re
from pathlib import Path

_LEADING_DOT_SLASH_RE = re.compile(r"^\./+")
_MULTI_SLASH_RE = re.compile(r"/+")


def normalize_path(value: str) -> str:
    """Forward slashes, no leading ``./``, no repeated slashes."""
    value = value.replace("\\", "/")
    value = _LEADING_DOT_SLASH_RE.sub("", value)
    return _MULTI_SLASH_RE.sub("/", value)


def to_posix_relative(root: Path, file_path: Path) -> str:
    return normalize_path(file_path.relative_to(root).as_posix())


def basename(value: str) -> str:
    return posixpath.basename(value)
