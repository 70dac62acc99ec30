# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read and replace nodes of a tree by path.

Descent rules, applied one segment at a time from the root:
    - map: the segment is looked up as a key
    - sequence: the segment must be an index ('0' or '[0]') in range
    - scalar or null: nothing to descend into

A miss anywhere stops the descent. Misses are not errors: ``read`` and
``update`` return their ``default``. Only a malformed path raises
(InvalidPathError).

Example:
    >>> root = {'foo': {'bar': 'bingo!'}}
    >>> read('foo.bar', root)
    'bingo!'
    >>> update(root, 'foo.bar', 'updated!')
    'bingo!'
    >>> read('foo.bar', root)
    'updated!'
    >>> print(update(root, 'foo.missing', 'x'))
    None
"""

from __future__ import annotations

from typing import Any, Iterable, TYPE_CHECKING

from .paths import DEFAULT_SEPARATOR, as_segments
from .value import Value

if TYPE_CHECKING:
    from .adapters import TreeAdapter


def _descend(node: Value, segments: Iterable[str]) -> Value:
    """Follow segments from node.

    Raises:
        KeyError: At the first segment that does not resolve.
    """
    for segment in segments:
        node = node.get_child(segment)
    return node


def resolve(
    path: str | Iterable[str],
    root: Any,
    separator: str = DEFAULT_SEPARATOR,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> Value | None:
    """Return the Value at path, or None if the path does not resolve.

    Unlike :func:`read`, a present null node comes back as a Value whose
    kind is NULL, so the two cases stay distinct.

    Raises:
        InvalidPathError: If path is malformed.
    """
    segments = as_segments(path, separator, escape)
    try:
        return _descend(Value(root, adapter), segments)
    except KeyError:
        return None


def read(
    path: str | Iterable[str],
    root: Any,
    separator: str = DEFAULT_SEPARATOR,
    default: Any = None,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> Any:
    """Get the node at the given path.

    Args:
        path: Path string (or already split segments).
        root: Tree to read from (dict/list tree or tomlkit document).
        separator: Segment delimiter (default '.').
        default: Returned when the path does not resolve.
        escape: Optional escape marker for separators inside keys.
        adapter: Tree adapter; detected from root when omitted.

    Returns:
        The node stored in the tree (not a copy), or default.

    Raises:
        InvalidPathError: If path is malformed.

    Example:
        >>> read('networks@192.168.0.1', {'networks': {'192.168.0.1': 'up'}}, '@')
        'up'
    """
    value = resolve(path, root, separator, escape=escape, adapter=adapter)
    if value is None:
        return default
    return value.data


def contains(
    path: str | Iterable[str],
    root: Any,
    separator: str = DEFAULT_SEPARATOR,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> bool:
    """True if path resolves to a node (null nodes included)."""
    return resolve(path, root, separator, escape=escape, adapter=adapter) is not None


def update(
    root: Any,
    path: str | Iterable[str],
    new_value: Any,
    separator: str = DEFAULT_SEPARATOR,
    default: Any = None,
    *,
    escape: str | None = None,
    adapter: TreeAdapter | None = None,
) -> Any:
    """Replace the node at path and return the one it replaced.

    The node must already exist: no key is added and no intermediate
    container is created. When the path does not resolve the tree is left
    untouched and default is returned.

    Args:
        root: Tree to modify in place.
        path: Path string (or already split segments).
        new_value: Replacement node.
        separator: Segment delimiter (default '.').
        default: Returned when the path does not resolve.
        escape: Optional escape marker for separators inside keys.
        adapter: Tree adapter; detected from root when omitted.

    Returns:
        The previous node, or default.

    Raises:
        InvalidPathError: If path is malformed.
    """
    segments = as_segments(path, separator, escape)
    try:
        parent = _descend(Value(root, adapter), segments[:-1])
        return parent.set_child(segments[-1], new_value)
    except KeyError:
        return default
