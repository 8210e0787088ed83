# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry and event models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Opaque reference to a client control owned by the hosting application.
ClientControlRef = Any


@dataclass(frozen=True)
class Entry:
    """One key/item slot in a collection."""

    key: str
    item: ClientControlRef


class EventKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class ItemEvent:
    """
    Payload delivered to observers when an item enters or leaves a collection.

    Carries the affected item reference only; keys and positions are not part
    of the payload since the collection may already have changed again by the
    time an observer runs.
    """

    sender: Any
    item: ClientControlRef
    kind: EventKind


@dataclass(frozen=True)
class ObserverHandle:
    """Token returned by observer registration; pass it back to unregister."""

    kind: EventKind
    id: int


__all__ = ["ClientControlRef", "Entry", "EventKind", "ItemEvent", "ObserverHandle"]
