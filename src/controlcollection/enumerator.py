# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Restartable forward cursor over a collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import ClientControlRef

if TYPE_CHECKING:
    from .collection import KeyedOrderedCollection


class CollectionEnumerator:
    """
    Cursor positioned before the first item until ``move_next`` is called.

    Items are read from the live collection on every step. Removing entries that
    precede the cursor while iterating shifts later items under it; callers
    that mutate during iteration own the consequences.
    """

    def __init__(self, collection: KeyedOrderedCollection):
        self._collection = collection
        self._index = -1

    @property
    def position(self) -> int:
        return self._index

    @property
    def current(self) -> ClientControlRef:
        return self._collection[self._index]

    def move_next(self) -> bool:
        self._index += 1
        return self._index < self._collection.count

    def reset(self) -> None:
        self._index = -1

    def __iter__(self) -> CollectionEnumerator:
        return self

    def __next__(self) -> ClientControlRef:
        if not self.move_next():
            raise StopIteration
        return self.current
