# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path string parsing.

A path is a separator-joined list of segments, e.g. ``'foo.bar.0'``.
Each segment names a map key or, when the addressed node is a sequence,
a non-negative index written bare (``'0'``) or bracketed (``'[0]'``).
Indices have no leading zeros, so ``'007'`` is never an index.

Path Syntax:
    - Dotted paths: 'parent.child.grandchild'
    - Custom separator: 'networks@192.168.0.1' with separator='@'
    - Sequence index: 'items.0' or 'items.[0]'
    - Escaped separator (opt-in): 'a\\.b.c' with escape='\\' gives
      ('a.b', 'c')

Example:
    >>> parse_path('foo.bar')
    ('foo', 'bar')
    >>> parse_path('foo@192.168.0.1', separator='@')
    ('foo', '192.168.0.1')
    >>> join_path(('a.b', 'c'), escape='\\\\')
    'a\\\\.b.c'
"""

from __future__ import annotations

import re
from typing import Iterable

from .exceptions import InvalidPathError

DEFAULT_SEPARATOR = "."

_INDEX_RE = re.compile(r"\[(0|[1-9]\d*)\]|(0|[1-9]\d*)", re.ASCII)


def check_separator(separator: str, escape: str | None) -> None:
    """Validate a separator (and optional escape) before any path work."""
    if not isinstance(separator, str) or not separator:
        raise InvalidPathError("Separator must be a non-empty string")
    if escape is not None:
        if not isinstance(escape, str) or not escape:
            raise InvalidPathError("Escape must be a non-empty string")
        if escape == separator:
            raise InvalidPathError(
                f"Escape {escape!r} cannot be the same as the separator"
            )


def _split_escaped(path: str, separator: str, escape: str) -> list[str]:
    """Split on unescaped separators, resolving escape sequences."""
    pieces: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(path):
        if path.startswith(escape, i):
            nxt = i + len(escape)
            if nxt >= len(path):
                raise InvalidPathError(f"Dangling escape at end of path {path!r}", path)
            if path.startswith(separator, nxt):
                current.append(separator)
                i = nxt + len(separator)
            elif path.startswith(escape, nxt):
                current.append(escape)
                i = nxt + len(escape)
            else:
                # Unknown escape sequence, keep it as written
                current.append(escape)
                i = nxt
        elif path.startswith(separator, i):
            pieces.append(''.join(current))
            current = []
            i += len(separator)
        else:
            current.append(path[i])
            i += 1
    pieces.append(''.join(current))
    return pieces


def parse_path(
    path: str,
    separator: str = DEFAULT_SEPARATOR,
    escape: str | None = None,
) -> tuple[str, ...]:
    """Split a path string into its segments.

    Args:
        path: Path string, e.g. 'foo.bar'.
        separator: Segment delimiter (default '.').
        escape: Optional escape marker. When set, ``escape + separator``
            stands for a literal separator and ``escape + escape`` for a
            literal escape.

    Returns:
        Tuple of segments, first segment being a child of the root.

    Raises:
        InvalidPathError: If path is empty, contains an empty segment,
            ends with a dangling escape, or the separator is invalid.
    """
    check_separator(separator, escape)
    if not isinstance(path, str):
        raise InvalidPathError(f"Path must be a string, not {type(path).__name__}")
    if not path:
        raise InvalidPathError("Empty path", path)

    if escape is None:
        pieces = path.split(separator)
    else:
        pieces = _split_escaped(path, separator, escape)

    for position, piece in enumerate(pieces):
        if not piece:
            raise InvalidPathError(
                f"Empty segment at position {position} in path {path!r}", path
            )
    return tuple(pieces)


def as_segments(
    path: str | Iterable[str],
    separator: str = DEFAULT_SEPARATOR,
    escape: str | None = None,
) -> tuple[str, ...]:
    """Return path as a segment tuple, parsing it when it is a string."""
    if isinstance(path, str):
        return parse_path(path, separator, escape)
    segments = tuple(path)
    if not segments:
        raise InvalidPathError("Empty path")
    if not all(isinstance(s, str) and s for s in segments):
        raise InvalidPathError(f"Invalid segments {segments!r}")
    return segments


def join_path(
    segments: Iterable[str],
    separator: str = DEFAULT_SEPARATOR,
    escape: str | None = None,
) -> str:
    """Join segments into a path string that parse_path reads back.

    Without an escape, segments containing the separator are joined as is
    and cannot be parsed back into the same segments.
    """
    check_separator(separator, escape)
    return separator.join(escape_segment(s, separator, escape) for s in segments)


def escape_segment(segment: str, separator: str, escape: str | None) -> str:
    """Escape separator and escape markers inside a single segment."""
    if escape is None:
        return segment
    return segment.replace(escape, escape + escape).replace(separator, escape + separator)


def parse_index(segment: str) -> int | None:
    """Return the sequence index a segment names, or None.

    Example:
        >>> parse_index('3'), parse_index('[3]'), parse_index('-1'), parse_index('03')
        (3, 3, None, None)
    """
    match = _INDEX_RE.fullmatch(segment)
    if match is None:
        return None
    return int(match.group(1) or match.group(2))
