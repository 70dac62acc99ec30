# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Adapters between concrete document trees and the generic Value view.

Available adapters:
- JsonAdapter: plain Python trees, as produced by ``json`` or ``tomllib``
- TomlAdapter: ``tomlkit`` documents, written back without losing layout

Example:
    >>> import tomlkit
    >>> doc = tomlkit.parse('[foo]\\nbar = true\\n')
    >>> adapter_for(doc)
    TomlAdapter()
    >>> adapter_for({'foo': 1})
    JsonAdapter()
"""

from __future__ import annotations

import datetime
import numbers
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Iterator

import tomlkit.container
import tomlkit.items

from .exceptions import UnsupportedValueError
from .value import ValueKind


class TreeAdapter(ABC):
    """Capability set the navigator and enumerator rely on.

    Subclasses decide the kind of a node. The container accessors below
    default to the ``Mapping`` / ``Sequence`` protocols, which both
    supported tree families implement.
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def kind(self, node: Any) -> ValueKind:
        """Return the kind of node.

        Raises:
            UnsupportedValueError: If node has no known kind.
        """

    @abstractmethod
    def unwrap(self, node: Any) -> Any:
        """Return node as plain Python data."""

    def keys(self, node: Any) -> Iterator[str]:
        """Yield the keys of a map node.

        Raises:
            UnsupportedValueError: On a key that is not a string.
        """
        for key in node.keys():
            if not isinstance(key, str):
                raise UnsupportedValueError(
                    f"Map key {key!r} is not a string ({type(key).__name__})"
                )
            yield key

    def has_key(self, node: Any, key: str) -> bool:
        return key in node

    def get_key(self, node: Any, key: str) -> Any:
        return node[key]

    def set_key(self, node: Any, key: str, value: Any) -> None:
        """Replace the value of an existing key.

        Raises:
            KeyError: If node is a read-only mapping. Nothing is written.
        """
        if not isinstance(node, MutableMapping):
            raise KeyError(f"Key '{key}' of a {type(node).__name__} cannot be replaced")
        node[key] = value

    def length(self, node: Any) -> int:
        return len(node)

    def get_index(self, node: Any, index: int) -> Any:
        return node[index]

    def set_index(self, node: Any, index: int, value: Any) -> None:
        """Replace the item at an existing index.

        Raises:
            KeyError: If node is an immutable sequence (e.g. a tuple).
                Nothing is written.
        """
        if not isinstance(node, MutableSequence):
            raise KeyError(f"Index {index} of a {type(node).__name__} cannot be replaced")
        node[index] = value


class JsonAdapter(TreeAdapter):
    """Adapter for plain Python trees (dict, list, str, numbers, None)."""

    def kind(self, node: Any) -> ValueKind:
        if node is None:
            return ValueKind.NULL
        # bool before numbers: bool is an int subclass
        if isinstance(node, bool):
            return ValueKind.BOOLEAN
        if isinstance(node, numbers.Number):
            return ValueKind.NUMBER
        if isinstance(node, str):
            return ValueKind.STRING
        if isinstance(node, (datetime.date, datetime.time)):
            return ValueKind.DATETIME
        if isinstance(node, Mapping):
            return ValueKind.MAP
        if isinstance(node, Sequence) and not isinstance(node, (bytes, bytearray)):
            return ValueKind.SEQUENCE
        raise UnsupportedValueError(
            f"Unsupported node type {type(node).__name__} for {type(self).__name__}"
        )

    def unwrap(self, node: Any) -> Any:
        return node


class TomlAdapter(JsonAdapter):
    """Adapter for ``tomlkit`` documents.

    tomlkit containers and items subclass dict, list, str, int and float,
    so most of the work is inherited. Booleans are the exception: the
    ``Bool`` item is not a ``bool``.
    """

    def kind(self, node: Any) -> ValueKind:
        if isinstance(node, tomlkit.items.Bool):
            return ValueKind.BOOLEAN
        return super().kind(node)

    def unwrap(self, node: Any) -> Any:
        if isinstance(node, (tomlkit.items.Item, tomlkit.container.Container)):
            return node.unwrap()
        if isinstance(node, tomlkit.container.OutOfOrderTableProxy):
            return {key: self.unwrap(node[key]) for key in node}
        return node


_JSON_ADAPTER = JsonAdapter()
_TOML_ADAPTER = TomlAdapter()

_TOML_TYPES = (
    tomlkit.container.Container,
    tomlkit.container.OutOfOrderTableProxy,
    tomlkit.items.Item,
)


def adapter_for(node: Any) -> TreeAdapter:
    """Pick the adapter matching the tree family of node."""
    if isinstance(node, _TOML_TYPES):
        return _TOML_ADAPTER
    return _JSON_ADAPTER
