from __future__ import annotations

import threading
from dataclasses import dataclass

_GLOBAL_MHASH_SETTINGS: MhashSettings | None = None
_SETTINGS_LOCK = threading.RLock()


@dataclass(frozen=True)
class MhashSettings:
    """Configuration settings for mhash."""

    default_variant: str = "sha2-256"
    """
    Canonical name of the variant generated when callers do not pick one.

    Applied to registries built by ``create_generation_registry``; existing registries keep the
    default they were built with.
    """

    load_entry_points: bool = True
    """
    Whether registry factories load plugins advertised under the ``mhash.plugins`` entry point.

    If False, only the built-in hashlib plugin and explicitly passed plugins are used.
    """


def get_global_settings() -> MhashSettings:
    """
    Get the global mhash settings instance (thread-safe).

    If no global settings have been set, returns a default instance.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_MHASH_SETTINGS
        if _GLOBAL_MHASH_SETTINGS is None:
            _GLOBAL_MHASH_SETTINGS = MhashSettings()
        return _GLOBAL_MHASH_SETTINGS


def set_global_settings(settings: MhashSettings) -> None:
    """
    Set the global mhash settings instance (thread-safe).

    Note: Settings are read when registries are created. Registries created before the change keep
    their configuration.

    Args:
        settings (MhashSettings): Settings to set as global.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_MHASH_SETTINGS
        _GLOBAL_MHASH_SETTINGS = settings
