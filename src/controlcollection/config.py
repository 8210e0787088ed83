# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for controlcollection."""

import os
from dataclasses import dataclass


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class CollectionSettings:
    """Collection defaults."""

    # Copy construction skips the source's last entry (legacy behaviour).
    copy_drops_last: bool = False

    @classmethod
    def from_env(cls) -> "CollectionSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            copy_drops_last=_bool_env("CONTROLCOLLECTION_COPY_DROPS_LAST", cls.copy_drops_last),
        )


def load_collection_settings() -> CollectionSettings:
    """Load collection settings from environment with sensible defaults."""
    return CollectionSettings.from_env()
