# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class CollectionError(Exception):
    """Base class for structural and argument errors raised by the collection."""


class InvalidArgumentError(CollectionError, ValueError):
    """A required key or item was absent."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"{name} must not be empty")


class DuplicateKeyError(CollectionError, ValueError):
    """The key is already bound in the collection."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key already exists in collection: {key!r}")


class IndexOutOfRangeError(CollectionError, IndexError):
    """A positional access fell outside ``[0, count)``."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Index {index} is out of range for collection of size {count}")


class ErrorCategory(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException | None) -> ErrorCategory:
    """
    Map collection (and plain Python) exceptions to ErrorCategory.
    """
    if exc is None:
        return ErrorCategory.NONE
    if isinstance(exc, DuplicateKeyError):
        return ErrorCategory.DUPLICATE_KEY
    if isinstance(exc, InvalidArgumentError):
        return ErrorCategory.INVALID_ARGUMENT
    if isinstance(exc, IndexError):
        return ErrorCategory.INDEX_OUT_OF_RANGE
    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.INVALID_ARGUMENT: "Key or item was not supplied",
        ErrorCategory.DUPLICATE_KEY: "Key already exists in collection",
        ErrorCategory.INDEX_OUT_OF_RANGE: "Position is outside the collection",
        ErrorCategory.UNKNOWN_ERROR: "Unexpected collection error",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Collection operation failed")


__all__ = [
    "CollectionError",
    "DuplicateKeyError",
    "ErrorCategory",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "categorize_exception",
    "error_category_to_reason",
]
