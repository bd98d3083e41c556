"""Pick one display path per module from the spellings other files import it by."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping


def choose_module_path(aliases: Mapping[str, int] | None, fallback: str) -> str:
    """Most frequent alias; ties go to the longest, then the lexically smallest.

    With no aliases observed, *fallback* (the file's own id) is returned.
    """
    if not aliases:
        return fallback
    return min(aliases.items(), key=lambda kv: (-kv[1], -len(kv[0]), kv[0]))[0]


class AliasCounter:
    """Occurrence counts of declared spellings, per resolved target."""

    def __init__(self) -> None:
        self._counts: dict[str, Counter[str]] = {}

    def record(self, target_id: str, spelling: str) -> None:
        self._counts.setdefault(target_id, Counter())[spelling] += 1

    def get(self, target_id: str) -> Counter[str] | None:
        return self._counts.get(target_id)

    def choose(self, target_id: str) -> str:
        return choose_module_path(self._counts.get(target_id), target_id)
