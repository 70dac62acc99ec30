# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Generic view over a node of a parsed document tree."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, TYPE_CHECKING

from .paths import parse_index

if TYPE_CHECKING:
    from .adapters import TreeAdapter


class ValueKind(Enum):
    """The closed set of node kinds a tree can hold."""

    NULL = 'null'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    DATETIME = 'datetime'
    SEQUENCE = 'sequence'
    MAP = 'map'

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.SEQUENCE, ValueKind.MAP)


class Value:
    """A node of a concrete tree seen through a TreeAdapter.

    The wrapper never copies: ``data`` is the very object stored in the
    tree, and writes through :meth:`set_child` land in the tree.

    Attributes:
        data: The concrete node (dict, list, tomlkit item, scalar...).
        adapter: The TreeAdapter that knows how to inspect ``data``.

    Example:
        >>> v = Value({'foo': {'bar': 'bingo!'}})
        >>> v.kind
        <ValueKind.MAP: 'map'>
        >>> v.get_child('foo').get_child('bar').data
        'bingo!'
    """

    __slots__ = ('data', 'adapter')

    def __init__(self, data: Any, adapter: TreeAdapter | None = None) -> None:
        """Wrap data, detecting the adapter from its type when not given."""
        if adapter is None:
            from .adapters import adapter_for
            adapter = adapter_for(data)
        self.data = data
        self.adapter = adapter

    def __repr__(self) -> str:
        kind = self.kind
        if kind is ValueKind.MAP:
            return f"Value(map, keys={list(self.keys())})"
        if kind is ValueKind.SEQUENCE:
            return f"Value(sequence, len={self.adapter.length(self.data)})"
        return f"Value({kind.value}, {self.data!r})"

    # ==================== Kind ====================

    @property
    def kind(self) -> ValueKind:
        return self.adapter.kind(self.data)

    @property
    def is_map(self) -> bool:
        return self.kind is ValueKind.MAP

    @property
    def is_sequence(self) -> bool:
        return self.kind is ValueKind.SEQUENCE

    @property
    def is_container(self) -> bool:
        """True for maps and sequences."""
        return self.kind.is_container

    @property
    def is_scalar(self) -> bool:
        """True for every non-container kind, null included."""
        return not self.kind.is_container

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    # ==================== Children ====================

    def _slot(self, segment: str) -> str | int:
        """Resolve segment to an existing key or index of this node.

        Raises:
            KeyError: If this node is a scalar or has no such child.
        """
        kind = self.kind
        if kind is ValueKind.MAP:
            if self.adapter.has_key(self.data, segment):
                return segment
            raise KeyError(f"Key '{segment}' not found")
        if kind is ValueKind.SEQUENCE:
            index = parse_index(segment)
            if index is None:
                raise KeyError(f"'{segment}' is not a sequence index")
            size = self.adapter.length(self.data)
            if index >= size:
                raise KeyError(f"Index {index} out of range (0-{size - 1})")
            return index
        raise KeyError(f"Cannot access '{segment}' on a {kind.value} value")

    def get_child(self, segment: str) -> Value:
        """Return the child named by segment.

        Raises:
            KeyError: If the child does not exist.
        """
        slot = self._slot(segment)
        if isinstance(slot, int):
            child = self.adapter.get_index(self.data, slot)
        else:
            child = self.adapter.get_key(self.data, slot)
        return Value(child, self.adapter)

    def set_child(self, segment: str, new_value: Any) -> Any:
        """Replace an existing child and return the previous one.

        The slot must already exist; nothing is inserted.

        Raises:
            KeyError: If the child does not exist or the node is read-only
                (a tuple, for example). The node is left untouched.
        """
        if isinstance(new_value, Value):
            new_value = new_value.data
        slot = self._slot(segment)
        if isinstance(slot, int):
            old = self.adapter.get_index(self.data, slot)
            self.adapter.set_index(self.data, slot, new_value)
        else:
            old = self.adapter.get_key(self.data, slot)
            self.adapter.set_key(self.data, slot, new_value)
        return old

    def keys(self) -> Iterator[str]:
        """Yield child segments in natural order (empty for scalars)."""
        kind = self.kind
        if kind is ValueKind.MAP:
            yield from self.adapter.keys(self.data)
        elif kind is ValueKind.SEQUENCE:
            for index in range(self.adapter.length(self.data)):
                yield str(index)

    def children(self) -> Iterator[tuple[str, Value]]:
        """Yield (segment, child) pairs in natural order.

        Maps follow insertion order, sequences index order.
        """
        kind = self.kind
        if kind is ValueKind.MAP:
            for key in self.adapter.keys(self.data):
                yield key, Value(self.adapter.get_key(self.data, key), self.adapter)
        elif kind is ValueKind.SEQUENCE:
            for index in range(self.adapter.length(self.data)):
                yield str(index), Value(self.adapter.get_index(self.data, index), self.adapter)

    # ==================== Conversion ====================

    def unwrap(self) -> Any:
        """Return the node as plain Python data (dict, list, scalars)."""
        return self.adapter.unwrap(self.data)
