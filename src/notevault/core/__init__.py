"""notevault core - settings, configuration and error types."""

from notevault.core.errors import (
    DecodeError,
    InvalidNotePathError,
    NotFoundError,
    SettingsError,
    StorageError,
    StorageIOError,
)
from notevault.core.settings import Settings, default_settings, load_settings

__all__ = [
    # Settings
    "Settings",
    "default_settings",
    "load_settings",
    # Errors
    "DecodeError",
    "InvalidNotePathError",
    "NotFoundError",
    "SettingsError",
    "StorageError",
    "StorageIOError",
]
