"""Deterministic recursive enumeration of source files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fsgraph.errors import ScanError

logger = logging.getLogger(__name__)


def collect_source_files(root: Path, extension: str = ".fs") -> list[Path]:
    """Return absolute paths of every ``*extension`` file under *root*.

    Entries are visited in name order at every level and the final list is
    sorted by full path. Any directory that cannot be listed aborts the
    whole collection with :class:`ScanError`.
    """
    root = Path(root).resolve()
    suffix = extension.lower()
    files: list[Path] = []

    def walk(current: Path) -> None:
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise ScanError(f"Cannot list directory {current}: {e}") from e

        for entry in entries:
            full_path = current / entry.name
            if entry.is_dir(follow_symlinks=False):
                walk(full_path)
            elif entry.is_file(follow_symlinks=False) and entry.name.lower().endswith(suffix):
                files.append(full_path)

    walk(root)
    files.sort(key=str)
    logger.debug("Collected %d %s file(s) under %s", len(files), extension, root)
    return files
