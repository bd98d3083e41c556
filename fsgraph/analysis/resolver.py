"""Suffix-based resolution of declared import paths to indexed files."""

from __future__ import annotations

from collections.abc import Iterable

from fsgraph.paths import normalize_path


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


class SuffixIndex:
    """Map every trailing run of path segments to the files that end with it.

    ``a/b/c.fs`` registers ``a/b/c.fs``, ``b/c.fs`` and ``c.fs``. A key can
    belong to several files; only keys owned by exactly one file resolve.
    """

    def __init__(self, file_ids: Iterable[str] = ()):
        self._index: dict[str, list[str]] = {}
        for file_id in file_ids:
            self.add(file_id)

    def add(self, file_id: str) -> None:
        segments = _segments(file_id)
        for i in range(len(segments)):
            self._index.setdefault("/".join(segments[i:]), []).append(file_id)

    def candidates(self, suffix: str) -> list[str]:
        return list(self._index.get(suffix, []))

    def resolve(self, module_path: str) -> str | None:
        """Return the single file *module_path* points at, or None.

        The full normalized path is tried first, then the path with one,
        two, ... leading segments dropped. The first lookup that yields
        exactly one file wins; ambiguous and empty lookups keep searching.
        """
        normalized = normalize_path(module_path)

        direct = self._index.get(normalized)
        if direct is not None and len(direct) == 1:
            return direct[0]

        segments = _segments(normalized)
        for i in range(1, len(segments)):
            matches = self._index.get("/".join(segments[i:]))
            if matches is not None and len(matches) == 1:
                return matches[0]

        return None

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, suffix: object) -> bool:
        return suffix in self._index
