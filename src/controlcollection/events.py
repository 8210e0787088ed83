# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Observer lists for item-added / item-removed notifications."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from contextlib import suppress

from .models import EventKind, ItemEvent, ObserverHandle

Observer = Callable[[ItemEvent], object]


class ObserverList:
    """
    Ordered registrations for a single event kind.

    Callbacks run synchronously on the notifying thread, in registration order.
    An exception raised by one callback is discarded and delivery continues with
    the next one; nothing is surfaced to the caller of ``notify``.
    """

    def __init__(self, kind: EventKind):
        self.kind = kind
        self._observers: list[tuple[ObserverHandle, Observer]] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def register(self, callback: Observer) -> ObserverHandle:
        if not callable(callback):
            raise TypeError("observer callback must be callable")
        with self._lock:
            handle = ObserverHandle(kind=self.kind, id=next(self._ids))
            self._observers.append((handle, callback))
        return handle

    def unregister(self, target: ObserverHandle | Observer) -> bool:
        """Remove a registration by handle, or the earliest one for a callback."""
        with self._lock:
            for position, (handle, callback) in enumerate(self._observers):
                if handle == target or (not isinstance(target, ObserverHandle) and callback == target):
                    del self._observers[position]
                    return True
        return False

    def notify(self, event: ItemEvent) -> None:
        with self._lock:
            snapshot = [callback for _, callback in self._observers]
        for callback in snapshot:
            with suppress(Exception):
                callback(event)

    def clear(self) -> None:
        with self._lock:
            self._observers.clear()

    def __contains__(self, target: object) -> bool:
        with self._lock:
            return any(handle == target or callback == target for handle, callback in self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ObserverList({self.kind.value!r}, observers={len(self)})"


__all__ = ["Observer", "ObserverList"]
