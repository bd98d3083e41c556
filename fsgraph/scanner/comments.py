"""Comment stripping that leaves string literals and line structure intact."""

from __future__ import annotations

import enum


class _Mode(enum.Enum):
    NORMAL = 0
    LINE_COMMENT = 1
    BLOCK_COMMENT = 2
    STRING = 3


def strip_comments(source: str) -> str:
    """Remove ``//`` and ``/* */`` comments from *source*.

    Newlines inside removed comments are kept so the result has the same
    line count as the input. Text between double quotes is copied verbatim,
    with ``\\"`` not ending the string. Unterminated strings or block
    comments simply run to the end of the input.
    """
    out: list[str] = []
    mode = _Mode.NORMAL
    escaped = False
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]
        nxt = source[i + 1] if i + 1 < n else ""

        if mode is _Mode.LINE_COMMENT:
            if ch == "\n":
                mode = _Mode.NORMAL
                out.append(ch)
            i += 1
            continue

        if mode is _Mode.BLOCK_COMMENT:
            if ch == "*" and nxt == "/":
                mode = _Mode.NORMAL
                i += 2
                continue
            if ch == "\n":
                out.append(ch)
            i += 1
            continue

        if mode is _Mode.STRING:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                mode = _Mode.NORMAL
            i += 1
            continue

        if ch == '"':
            mode = _Mode.STRING
            out.append(ch)
            i += 1
            continue

        if ch == "/" and nxt == "/":
            mode = _Mode.LINE_COMMENT
            i += 2
            continue

        if ch == "/" and nxt == "*":
            mode = _Mode.BLOCK_COMMENT
            i += 2
            continue

        out.append(ch)
        i += 1

    return "".join(out)
