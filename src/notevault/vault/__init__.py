"""Vault storage: notes, date-partitioned assets and their cleanup.

A vault is a plain directory tree. Notes live wherever the editor puts them;
every note file name starts with a ``YYYY-MM-DD`` date, and the note's images
and attachments are stored under ``<assets>/<year>/<date>/``. Assets the note
stops linking to are removed by ``cleanup_unused_assets``.
"""

from notevault.vault.attachments import (
    SavedAsset,
    cleanup_unused_assets,
    save_attachment,
    save_image,
)
from notevault.vault.files import open_file
from notevault.vault.layout import NoteContext, parse_date_token, resolve_note_context
from notevault.vault.markdown import extract_asset_paths
from notevault.vault.notes import read_note, save_note
from notevault.vault.paths import normalize_relative_path

__all__ = [
    "NoteContext",
    "SavedAsset",
    "cleanup_unused_assets",
    "extract_asset_paths",
    "normalize_relative_path",
    "open_file",
    "parse_date_token",
    "read_note",
    "resolve_note_context",
    "save_attachment",
    "save_image",
    "save_note",
]
