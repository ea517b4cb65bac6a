"""Note persistence for the vault."""

import logging

from notevault.core.errors import NotFoundError, StorageIOError
from notevault.core.settings import Settings
from notevault.vault.attachments import cleanup_unused_assets
from notevault.vault.paths import ensure_parent_dir, vault_absolute_path

logger = logging.getLogger(__name__)


def save_note(settings: Settings, note_path: str, markdown: str) -> list[str]:
    """
    Write a note and, if enabled, reconcile its assets.

    Args:
        settings: Vault settings
        note_path: Vault-relative note path
        markdown: Full note text

    Returns:
        Asset paths removed by automatic cleanup (empty when disabled)

    Raises:
        StorageIOError: If the note cannot be written
        InvalidNotePathError: If cleanup is enabled and the note has no date prefix
    """
    note_absolute = vault_absolute_path(settings, note_path)
    ensure_parent_dir(note_absolute)

    try:
        note_absolute.write_bytes(markdown.encode("utf-8"))
    except OSError as e:
        raise StorageIOError(e) from e

    logger.info(f"Saved note {note_path} ({len(markdown)} chars)")

    if not settings.auto_cleanup_assets:
        return []

    return cleanup_unused_assets(settings, note_path, markdown)


def read_note(settings: Settings, note_path: str) -> str:
    """
    Read a note's markdown from the vault.

    Raises:
        NotFoundError: If the note does not exist
        StorageIOError: If the note cannot be read
    """
    note_absolute = vault_absolute_path(settings, note_path)
    if not note_absolute.is_file():
        raise NotFoundError(note_path)

    try:
        return note_absolute.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageIOError(e) from e
