"""Error types raised by notevault storage operations.

Every error carries a human-readable message; boundary surfaces (HTTP, CLI)
render ``str(error)`` and never expose a structured error code.
"""


class StorageError(Exception):
    """Base class for all notevault storage failures."""

    pass


class InvalidNotePathError(StorageError):
    """Raised when a note file name does not start with a YYYY-MM-DD token."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"invalid note path: {file_name}")


class StorageIOError(StorageError):
    """Raised when a filesystem read, write, list or delete fails."""

    def __init__(self, detail: object):
        super().__init__(f"io error: {detail}")


class DecodeError(StorageError):
    """Raised when an asset payload is not valid base64."""

    def __init__(self, detail: object):
        super().__init__(f"decode error: {detail}")


class NotFoundError(StorageError):
    """Raised when a file to open or read does not exist."""

    def __init__(self, path: object):
        self.path = path
        super().__init__(f"File not found: {path}")


class SettingsError(StorageError):
    """Raised when a settings file cannot be read or is not a mapping."""

    pass
