# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Nestac exceptions."""

from __future__ import annotations


class NestacError(Exception):
    """Base exception for nestac errors."""

    pass


class InvalidPathError(NestacError, ValueError):
    """Raised when a path string (or its separator) is malformed.

    Examples are an empty path, an empty segment produced by a leading,
    trailing or doubled separator, or an empty separator.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedValueError(NestacError, TypeError):
    """Raised when a tree node has a type no adapter kind covers."""

    pass


class UnsupportedFormatError(NestacError, ValueError):
    """Raised when a document format cannot be determined or is unknown."""

    pass
