"""Open vault files with the operating system's default application."""

import logging
from pathlib import Path

import typer

from notevault.core.errors import NotFoundError, StorageIOError
from notevault.core.settings import Settings
from notevault.vault.paths import vault_absolute_path

logger = logging.getLogger(__name__)


def resolve_vault_file(settings: Settings, path: str) -> Path:
    """Resolve a vault-relative path; absolute paths pass through unchanged."""
    requested = Path(path)
    if requested.is_absolute():
        return requested
    return vault_absolute_path(settings, requested)


def open_file(settings: Settings, path: str) -> Path:
    """
    Open a file with the default handler.

    Args:
        settings: Vault settings
        path: Vault-relative or absolute path, e.g. a link target from a note

    Returns:
        The absolute path that was opened

    Raises:
        NotFoundError: If the file does not exist
        StorageIOError: If the launcher reports a failure
    """
    absolute = resolve_vault_file(settings, path)
    if not absolute.exists():
        raise NotFoundError(absolute)

    logger.info(f"Opening {absolute}")
    exit_code = typer.launch(str(absolute))
    if exit_code != 0:
        raise StorageIOError(f"failed to open {absolute} (exit code {exit_code})")
    return absolute
