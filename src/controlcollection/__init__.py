# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
controlcollection package entrypoint.

This package provides a keyed, insertion-ordered collection of client-control
references with item-added / item-removed observers. Controls themselves are
owned by the hosting application; the collection only tracks key, item and
position.
"""

from .collection import KeyedOrderedCollection
from .config import CollectionSettings, load_collection_settings
from .enumerator import CollectionEnumerator
from .errors import (
    CollectionError,
    DuplicateKeyError,
    ErrorCategory,
    IndexOutOfRangeError,
    InvalidArgumentError,
    categorize_exception,
    error_category_to_reason,
)
from .events import ObserverList
from .log import get_logger, set_log_level
from .models import Entry, EventKind, ItemEvent, ObserverHandle
from .store import OrderedStore
from .version import __version__

__all__ = [
    "CollectionEnumerator",
    "CollectionError",
    "CollectionSettings",
    "DuplicateKeyError",
    "Entry",
    "ErrorCategory",
    "EventKind",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "ItemEvent",
    "KeyedOrderedCollection",
    "ObserverHandle",
    "ObserverList",
    "OrderedStore",
    "categorize_exception",
    "error_category_to_reason",
    "load_collection_settings",
    "get_logger",
    "set_log_level",
    "__version__",
]
