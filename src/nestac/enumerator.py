# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Enumerate every path reachable from a root node.

Paths come out depth-first, pre-order: each child path is immediately
followed by the paths of its own subtree. Maps are visited in insertion
order, sequences in index order. The root itself has no path and is never
emitted; an empty container or a scalar root yields nothing.

Example:
    >>> get_paths({'foo': {'bar': 'bingo!'}, 'hello': {'world': '!'}})
    ['foo', 'foo.bar', 'hello', 'hello.world']
    >>> get_paths({'items': ['a', {'b': 1}]})
    ['items', 'items.0', 'items.1', 'items.1.b']
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

from .paths import DEFAULT_SEPARATOR, check_separator, escape_segment
from .value import Value

if TYPE_CHECKING:
    from .adapters import TreeAdapter


def walk(
    root: Any,
    separator: str = DEFAULT_SEPARATOR,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> Iterator[tuple[str, Value]]:
    """Yield (path, value) for every node below root.

    Uses an explicit stack, so nesting depth is not bounded by the
    interpreter recursion limit. Each call starts from scratch.

    Raises:
        InvalidPathError: If separator or escape is invalid.
    """
    check_separator(separator, escape)
    start = Value(root, adapter)

    def _walk_gen() -> Iterator[tuple[str, Value]]:
        # None marks the root, which has no path of its own
        stack: list[tuple[str | None, Value]] = [(None, start)]
        while stack:
            prefix, node = stack.pop()
            if prefix is not None:
                yield prefix, node
            children = list(node.children())
            # Pushed in reverse so the first child is popped first
            for segment, child in reversed(children):
                segment = escape_segment(segment, separator, escape)
                path = segment if prefix is None else f"{prefix}{separator}{segment}"
                stack.append((path, child))

    return _walk_gen()


def iter_paths(
    root: Any,
    separator: str = DEFAULT_SEPARATOR,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> Iterator[str]:
    """Yield every path below root, lazily."""
    for path, _node in walk(root, separator, escape=escape, adapter=adapter):
        yield path


def get_paths(
    root: Any,
    separator: str = DEFAULT_SEPARATOR,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> list[str]:
    """Return the list of every path below root, in pre-order.

    Args:
        root: Tree to enumerate.
        separator: Delimiter used to join segments (default '.').
        escape: Optional escape marker; keys containing the separator are
            then escaped so that every returned path reads back.
        adapter: Tree adapter; detected from root when omitted.
    """
    return list(iter_paths(root, separator, escape=escape, adapter=adapter))
