# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Nestac - nested structure access with path strings.

Read, replace and enumerate nodes of parsed JSON or TOML trees using
paths such as ``'foo.bar'`` (or any other separator).

Example:
    >>> from nestac import read, update, get_paths
    >>> data = {'foo': {'bar': 'bingo!'}}
    >>> read('foo.bar', data)
    'bingo!'
    >>> update(data, 'foo.bar', 'updated!')
    'bingo!'
    >>> get_paths(data)
    ['foo', 'foo.bar']
"""

__version__ = "0.3.0"

from .adapters import JsonAdapter, TomlAdapter, TreeAdapter, adapter_for
from .documents import Document
from .enumerator import get_paths, iter_paths, walk
from .exceptions import (
    InvalidPathError,
    NestacError,
    UnsupportedFormatError,
    UnsupportedValueError,
)
from .navigator import contains, read, resolve, update
from .paths import DEFAULT_SEPARATOR, join_path, parse_index, parse_path
from .value import Value, ValueKind

__all__ = [
    # Path operations
    "read",
    "update",
    "contains",
    "resolve",
    "get_paths",
    "iter_paths",
    "walk",
    # Path strings
    "DEFAULT_SEPARATOR",
    "parse_path",
    "join_path",
    "parse_index",
    # Value abstraction
    "Value",
    "ValueKind",
    "TreeAdapter",
    "JsonAdapter",
    "TomlAdapter",
    "adapter_for",
    # Documents
    "Document",
    # Exceptions
    "NestacError",
    "InvalidPathError",
    "UnsupportedValueError",
    "UnsupportedFormatError",
]
