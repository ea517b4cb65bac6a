"""Path helpers shared by the vault operations."""

from pathlib import Path, PurePath
from uuid import uuid4

from notevault.core.errors import StorageIOError
from notevault.core.settings import Settings


def normalize_relative_path(path: PurePath | str) -> str:
    """
    Render a path as its components joined with "/".

    Native separators are converted, redundant separators and "." components
    collapse, and a path with no components becomes "".

    Args:
        path: Absolute or relative path

    Returns:
        Canonical forward-slash string used for comparison and storage
    """
    if not isinstance(path, PurePath):
        path = PurePath(path)
    posix = path.as_posix()
    return "" if posix == "." else posix


def vault_absolute_path(settings: Settings, relative: PurePath | str) -> Path:
    """Join a vault-relative path onto the vault root."""
    return settings.vault_root / relative


def ensure_parent_dir(path: Path) -> None:
    """Create the parent directory of ``path`` if missing."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(e) from e


def unique_asset_name(prefix: str, extension: str) -> str:
    """Build ``<prefix>_<uuid4>.<extension>`` without doubled dots."""
    clean_ext = extension.lstrip(".")
    return f"{prefix}_{uuid4()}.{clean_ext}"
