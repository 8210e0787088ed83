# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Keyed, ordered collection of client controls.

Entries keep insertion order and each key is bound at most once. Observers
registered on ``item_added`` / ``item_removed`` are told about membership
changes synchronously, after the mutation has completed.

Indexer assignment (``collection[key] = item`` / ``collection[index] = item``)
is a raw overwrite primitive: it neither re-checks key uniqueness rules nor
fires ``item_added``, and it accepts ``None``. Use :meth:`add` for guarded
inserts.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

from .config import CollectionSettings, load_collection_settings
from .enumerator import CollectionEnumerator
from .errors import DuplicateKeyError, InvalidArgumentError
from .events import Observer, ObserverList
from .log import get_logger
from .models import ClientControlRef, Entry, EventKind, ItemEvent, ObserverHandle
from .store import OrderedStore

logger = get_logger(__name__)


def _require_key(key: object) -> str:
    if key is None or not isinstance(key, str) or not key:
        raise InvalidArgumentError("key")
    return key


class KeyedOrderedCollection:
    """Ordered mapping of string keys to client-control references."""

    def __init__(
        self,
        source: KeyedOrderedCollection | None = None,
        *,
        drop_last: bool | None = None,
        settings: CollectionSettings | None = None,
    ):
        self._store = OrderedStore()
        self._lock = threading.Lock()
        self.item_added = ObserverList(EventKind.ADDED)
        self.item_removed = ObserverList(EventKind.REMOVED)
        if source is not None:
            self._copy_from(source, drop_last=drop_last, settings=settings)

    def _copy_from(
        self,
        source: KeyedOrderedCollection,
        *,
        drop_last: bool | None,
        settings: CollectionSettings | None,
    ) -> None:
        if not isinstance(source, KeyedOrderedCollection):
            raise TypeError("source must be a KeyedOrderedCollection")
        if drop_last is None:
            drop_last = (settings or load_collection_settings()).copy_drops_last
        entries = source.entries()
        if drop_last:
            entries = entries[:-1]
        # Raw inserts: copies are built silently and never inherit observers.
        for entry in entries:
            self._store.set(entry.key, entry.item)
        logger.debug("Copied %d of %d entries (drop_last=%s)", len(entries), source.count, drop_last)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def add(self, key: str, item: ClientControlRef) -> None:
        """
        Append ``item`` under ``key`` and notify ``item_added`` observers.

        Raises InvalidArgumentError for a missing key or item and
        DuplicateKeyError when the key is already bound to an item. A key that
        was raw-assigned ``None`` holds no item, so ``add`` fills that slot in
        place and notifies as usual. The uniqueness check is
        not serialized with other writers; callers adding the same key from
        several threads must coordinate externally.
        """
        key = _require_key(key)
        if item is None:
            raise InvalidArgumentError("item")
        if self.exists(key):
            raise DuplicateKeyError(key)
        self._store.add(key, item)
        logger.debug("Added %r", key)
        self.item_added.notify(ItemEvent(sender=self, item=item, kind=EventKind.ADDED))

    def remove(self, key: str) -> None:
        """Remove the entry for ``key``; absent keys are ignored."""
        with self._lock:
            found, item = self._store.remove(key)
        if not found:
            return
        logger.debug("Removed %r", key)
        if item is not None:
            self.item_removed.notify(ItemEvent(sender=self, item=item, kind=EventKind.REMOVED))

    def remove_at(self, index: int) -> None:
        """Remove the entry at ``index``; raises IndexOutOfRangeError outside ``[0, count)``."""
        with self._lock:
            entry = self._store.remove_at(index)
        logger.debug("Removed %r at %d", entry.key, index)
        if entry.item is not None:
            self.item_removed.notify(ItemEvent(sender=self, item=entry.item, kind=EventKind.REMOVED))

    def exists(self, key: str) -> bool:
        """True when ``key`` is bound to an item; a slot holding ``None`` is not live."""
        return isinstance(key, str) and self._store.get(key) is not None

    @property
    def count(self) -> int:
        return len(self._store)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def __getitem__(self, key: int | str) -> ClientControlRef | None:
        if isinstance(key, bool):
            raise TypeError("collection indices must be int or str, not bool")
        if isinstance(key, int):
            return self._store.get_at(key)
        if isinstance(key, str):
            return self._store.get(key)
        if key is None:
            raise InvalidArgumentError("key")
        raise TypeError(f"collection indices must be int or str, not {type(key).__name__}")

    def __setitem__(self, key: int | str, item: ClientControlRef | None) -> None:
        if isinstance(key, bool):
            raise TypeError("collection indices must be int or str, not bool")
        if isinstance(key, int):
            self._store.set_at(key, item)
        elif isinstance(key, str):
            self._store.set(key, item)
        elif key is None:
            raise InvalidArgumentError("key")
        else:
            raise TypeError(f"collection indices must be int or str, not {type(key).__name__}")

    def key_at(self, index: int) -> str:
        return self._store.key_at(index)

    def keys(self) -> list[str]:
        return self._store.keys()

    def entries(self) -> list[Entry]:
        return self._store.entries()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def on_item_added(self, callback: Observer) -> ObserverHandle:
        return self.item_added.register(callback)

    def on_item_removed(self, callback: Observer) -> ObserverHandle:
        return self.item_removed.register(callback)

    def remove_observer(self, handle: ObserverHandle) -> bool:
        if handle.kind is EventKind.ADDED:
            return self.item_added.unregister(handle)
        return self.item_removed.unregister(handle)

    # ------------------------------------------------------------------
    # Iteration, copying, comparison
    # ------------------------------------------------------------------
    def get_enumerator(self) -> CollectionEnumerator:
        return CollectionEnumerator(self)

    def __iter__(self) -> Iterator[ClientControlRef]:
        return self.get_enumerator()

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return self.exists(key)  # type: ignore[arg-type]

    def copy(self, *, drop_last: bool | None = None) -> KeyedOrderedCollection:
        return KeyedOrderedCollection(self, drop_last=drop_last)

    def __copy__(self) -> KeyedOrderedCollection:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyedOrderedCollection):
            return NotImplemented
        mine, theirs = self.entries(), other.entries()
        if len(mine) != len(theirs):
            return False
        return all(a.key == b.key and a.item is b.item for a, b in zip(mine, theirs))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"KeyedOrderedCollection({self.keys()!r})"


__all__ = ["KeyedOrderedCollection"]
