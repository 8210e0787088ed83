# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Insertion-ordered, key-unique store."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from .errors import DuplicateKeyError, IndexOutOfRangeError
from .models import ClientControlRef, Entry

_MISSING = object()


class OrderedStore:
    """
    Ordered key/item store.

    Keys are kept in a list beside the bindings so positional access is O(1).
    The internal lock only keeps the two structures in step; it is not the
    collection's removal lock.
    """

    def __init__(self):
        self._keys: list[str] = []
        self._data: dict[str, ClientControlRef] = {}
        self._lock = threading.RLock()

    def _key_at(self, index: int) -> str:
        size = len(self._keys)
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < size:
            raise IndexOutOfRangeError(index, size)
        return self._keys[index]

    def add(self, key: str, item: ClientControlRef) -> None:
        """Bind ``key``; a slot holding ``None`` is filled in place, any other binding collides."""
        with self._lock:
            current = self._data.get(key, _MISSING)
            if current is _MISSING:
                self._keys.append(key)
            elif current is not None:
                raise DuplicateKeyError(key)
            self._data[key] = item

    def contains(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> ClientControlRef | None:
        return self._data.get(key)

    def set(self, key: str, item: ClientControlRef) -> None:
        with self._lock:
            if key not in self._data:
                self._keys.append(key)
            self._data[key] = item

    def key_at(self, index: int) -> str:
        with self._lock:
            return self._key_at(index)

    def get_at(self, index: int) -> ClientControlRef:
        with self._lock:
            return self._data[self._key_at(index)]

    def set_at(self, index: int, item: ClientControlRef) -> None:
        with self._lock:
            self._data[self._key_at(index)] = item

    def remove(self, key: str) -> tuple[bool, ClientControlRef | None]:
        with self._lock:
            item = self._data.pop(key, _MISSING)
            if item is _MISSING:
                return False, None
            self._keys.remove(key)
            return True, item

    def remove_at(self, index: int) -> Entry:
        with self._lock:
            key = self._key_at(index)
            del self._keys[index]
            return Entry(key, self._data.pop(key))

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._keys)

    def entries(self) -> list[Entry]:
        with self._lock:
            return [Entry(key, self._data[key]) for key in self._keys]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._keys)
