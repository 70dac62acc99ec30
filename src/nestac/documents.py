# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - a parsed JSON or TOML file with path access.

Parsing and serialization are delegated to ``json`` and ``tomlkit``;
this module only ties them to the path operations so that many files can
be edited in a loop.

Example:
    Bulk edit::

        for filename in Path('configs').glob('*.toml'):
            doc = Document.load(filename)
            missed = doc.update_many({'server.port': 8080, 'server.debug': False})
            if not missed:
                doc.save()
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, Mapping

import tomlkit

from . import enumerator, navigator
from .adapters import TreeAdapter, adapter_for
from .exceptions import UnsupportedFormatError
from .log import get_logger
from .paths import DEFAULT_SEPARATOR
from .value import Value

logger = get_logger(__name__)

FORMATS = ('json', 'toml')

_MISSING = object()

_SUFFIXES = {
    '.json': 'json',
    '.toml': 'toml',
}


def _check_format(fmt: str) -> str:
    fmt = fmt.lower()
    if fmt not in FORMATS:
        raise UnsupportedFormatError(
            f"Unknown format '{fmt}', expected one of {', '.join(FORMATS)}"
        )
    return fmt


def format_for(path: str | Path) -> str:
    """Infer the document format from a file suffix.

    Raises:
        UnsupportedFormatError: If the suffix is not .json or .toml.
    """
    suffix = Path(path).suffix.lower()
    try:
        return _SUFFIXES[suffix]
    except KeyError:
        raise UnsupportedFormatError(
            f"Cannot infer document format from '{path}'"
        ) from None


class Document:
    """A parsed document plus the path settings used to address it.

    Attributes:
        data: The parsed tree (plain dict for JSON, TOMLDocument for TOML).
        fmt: 'json' or 'toml'.
        source: File the document was loaded from, if any.
        separator: Path separator used by the access methods.
        escape: Optional escape marker for separators inside keys.
        indent: Indentation of JSON output.

    Example:
        >>> doc = Document.loads('{"foo": {"bar": "bingo!"}}', 'json')
        >>> doc.update('foo.bar', 'updated!')
        'bingo!'
        >>> doc.dumps()
        '{\\n  "foo": {\\n    "bar": "updated!"\\n  }\\n}\\n'
    """

    __slots__ = ('data', 'fmt', 'source', 'separator', 'escape', 'indent')

    def __init__(
        self,
        data: Any,
        fmt: str,
        source: str | Path | None = None,
        separator: str = DEFAULT_SEPARATOR,
        escape: str | None = None,
        indent: int | None = 2,
    ) -> None:
        self.data = data
        self.fmt = _check_format(fmt)
        self.source = Path(source) if source is not None else None
        self.separator = separator
        self.escape = escape
        self.indent = indent

    def __repr__(self) -> str:
        where = f", source='{self.source}'" if self.source else ''
        return f"Document({self.fmt}{where})"

    # ==================== Loading ====================

    @classmethod
    def loads(cls, text: str, fmt: str, **options: Any) -> Document:
        """Parse text in the given format.

        Args:
            text: Document text.
            fmt: 'json' or 'toml'.
            **options: Passed to the constructor (separator, escape, indent).

        Raises:
            UnsupportedFormatError: If fmt is unknown.
        """
        fmt = _check_format(fmt)
        if fmt == 'json':
            data = json.loads(text)
        else:
            data = tomlkit.parse(text)
        return cls(data, fmt, **options)

    @classmethod
    def load(
        cls,
        path: str | Path,
        fmt: str | None = None,
        encoding: str = 'utf-8',
        **options: Any,
    ) -> Document:
        """Read and parse a file, inferring fmt from the suffix if omitted."""
        path = Path(path)
        if fmt is None:
            fmt = format_for(path)
        logger.debug("Loading %s document from %s", fmt, path)
        doc = cls.loads(path.read_text(encoding=encoding), fmt, **options)
        doc.source = path
        return doc

    # ==================== Saving ====================

    def dumps(self) -> str:
        """Serialize the tree back to text in its own format."""
        if self.fmt == 'json':
            text = json.dumps(self.data, indent=self.indent, ensure_ascii=False)
            return text + '\n' if self.indent is not None else text
        return tomlkit.dumps(self.data)

    def save(self, path: str | Path | None = None, encoding: str = 'utf-8') -> Path:
        """Write the document to path, or back to its source.

        Raises:
            ValueError: If no path is given and the document has no source.
        """
        if path is None:
            if self.source is None:
                raise ValueError("Document has no source, a path is required")
            path = self.source
        path = Path(path)
        path.write_text(self.dumps(), encoding=encoding)
        logger.debug("Saved %s document to %s", self.fmt, path)
        return path

    # ==================== Path access ====================

    @property
    def adapter(self) -> TreeAdapter:
        return adapter_for(self.data)

    def _options(self) -> dict[str, Any]:
        return {'escape': self.escape, 'adapter': self.adapter}

    def read(self, path: str, default: Any = None) -> Any:
        """Get the node at path, or default."""
        return navigator.read(path, self.data, self.separator, default, **self._options())

    def __getitem__(self, path: str) -> Any:
        """Get the node at path.

        Raises:
            KeyError: If path not found.
        """
        value = navigator.resolve(path, self.data, self.separator, **self._options())
        if value is None:
            raise KeyError(path)
        return value.data

    def __contains__(self, path: str) -> bool:
        return self.contains(path)

    def contains(self, path: str) -> bool:
        return navigator.contains(path, self.data, self.separator, **self._options())

    def update(self, path: str, new_value: Any, default: Any = None) -> Any:
        """Replace the node at path, returning the previous one or default."""
        old = navigator.update(
            self.data, path, new_value, self.separator, _MISSING, **self._options()
        )
        if old is _MISSING:
            logger.debug("Path '%s' not found in %r, nothing updated", path, self)
            return default
        return old

    def update_many(self, updates: Mapping[str, Any]) -> list[str]:
        """Apply several updates in order.

        Each update is applied independently; paths that do not resolve
        are skipped.

        Returns:
            The paths that were not found.
        """
        missed: list[str] = []
        for path, new_value in updates.items():
            if self.update(path, new_value, _MISSING) is _MISSING:
                missed.append(path)
        if missed:
            logger.debug("%d of %d paths not found in %r", len(missed), len(updates), self)
        return missed

    # ==================== Enumeration ====================

    def iter_paths(self) -> Iterator[str]:
        return enumerator.iter_paths(self.data, self.separator, **self._options())

    def get_paths(self) -> list[str]:
        """Return every path of the document, in pre-order."""
        return enumerator.get_paths(self.data, self.separator, **self._options())

    def walk(self) -> Iterator[tuple[str, Value]]:
        """Yield (path, value) for every node of the document."""
        return enumerator.walk(self.data, self.separator, **self._options())
