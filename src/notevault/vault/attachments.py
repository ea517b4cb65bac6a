"""Attachment handling for the vault.

Images and attachments are written into the note's date-partitioned asset
directory under generated names, and ``cleanup_unused_assets`` removes files
from that directory once the note no longer links to them.
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from pathlib import PurePath

from notevault.core.errors import DecodeError, StorageIOError
from notevault.core.settings import Settings
from notevault.vault.layout import resolve_note_context
from notevault.vault.markdown import extract_asset_paths
from notevault.vault.paths import normalize_relative_path, unique_asset_name

logger = logging.getLogger(__name__)

IMAGE_PREFIX = "img"
ATTACHMENT_PREFIX = "file"
DEFAULT_IMAGE_EXTENSION = "png"
DEFAULT_ATTACHMENT_EXTENSION = "bin"


@dataclass(frozen=True)
class SavedAsset:
    """Result of saving an image or attachment."""

    relative_path: str
    display_name: str
    markdown: str


def decode_payload(payload: str) -> bytes:
    """Decode a standard base64 payload, rejecting malformed input."""
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(e) from e


def _write_asset(
    settings: Settings,
    note_path: str,
    payload: str,
    prefix: str,
    extension: str,
) -> tuple[str, str]:
    """Write a decoded payload into the note's asset directory.

    Returns:
        (file_name, relative_path) of the new asset
    """
    context = resolve_note_context(settings, note_path)

    try:
        context.assets_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(e) from e

    file_name = unique_asset_name(prefix, extension)
    data = decode_payload(payload)

    try:
        (context.assets_dir / file_name).write_bytes(data)
    except OSError as e:
        raise StorageIOError(e) from e

    relative_path = normalize_relative_path(context.assets_dir_relative / file_name)
    logger.info(f"Saved asset {relative_path} ({len(data)} bytes) for {note_path}")
    return file_name, relative_path


def _link_label(name: str) -> str:
    """Link text for a display name; square brackets would end the label early."""
    return name.replace("[", "(").replace("]", ")")


def save_image(
    settings: Settings,
    note_path: str,
    base64_payload: str,
    extension: str,
) -> SavedAsset:
    """
    Save a pasted or dropped image next to a note.

    Args:
        settings: Vault settings
        note_path: Vault-relative note path
        base64_payload: Image bytes, base64 encoded
        extension: File extension, with or without a leading dot

    Returns:
        SavedAsset whose markdown is an image embed

    Raises:
        InvalidNotePathError: If the note has no date prefix
        DecodeError: If the payload is not valid base64
        StorageIOError: If the directory or file cannot be written
    """
    extension = extension.strip().lstrip(".") or DEFAULT_IMAGE_EXTENSION
    file_name, relative_path = _write_asset(
        settings, note_path, base64_payload, IMAGE_PREFIX, extension
    )
    return SavedAsset(
        relative_path=relative_path,
        display_name=file_name,
        markdown=f"![]({relative_path})",
    )


def save_attachment(
    settings: Settings,
    note_path: str,
    base64_payload: str,
    original_name: str,
) -> SavedAsset:
    """
    Save an arbitrary file next to a note.

    The stored name is generated; the extension is taken from
    ``original_name`` and falls back to ``bin``. Square brackets in the
    name become parentheses in the link label so the link stays parseable.

    Args:
        settings: Vault settings
        note_path: Vault-relative note path
        base64_payload: File bytes, base64 encoded
        original_name: Name the user picked, kept as the display name

    Returns:
        SavedAsset whose markdown is a link labelled with the original name

    Raises:
        InvalidNotePathError: If the note has no date prefix
        DecodeError: If the payload is not valid base64
        StorageIOError: If the directory or file cannot be written
    """
    extension = PurePath(original_name).suffix.lstrip(".")
    _, relative_path = _write_asset(
        settings,
        note_path,
        base64_payload,
        ATTACHMENT_PREFIX,
        extension or DEFAULT_ATTACHMENT_EXTENSION,
    )
    return SavedAsset(
        relative_path=relative_path,
        display_name=original_name,
        markdown=f"[📎 {_link_label(original_name)}]({relative_path})",
    )


def normalized_reference_set(settings: Settings, markdown: str) -> set[str]:
    """
    Referenced asset paths in the form used for comparison.

    Absolute references inside the vault are made vault-relative first;
    anything else is normalized as written.
    """
    vault_root = settings.vault_root
    referenced: set[str] = set()

    for reference in extract_asset_paths(markdown):
        path = PurePath(reference)
        if path.is_absolute():
            try:
                path = path.relative_to(vault_root)
            except ValueError:
                pass
        referenced.add(normalize_relative_path(path))

    return referenced


def cleanup_unused_assets(
    settings: Settings, note_path: str, markdown: str
) -> list[str]:
    """
    Delete files in the note's asset directory that the markdown no longer references.

    Only files directly inside the directory are considered; subdirectories
    are left alone. The pass is best-effort: the first I/O failure aborts it
    and files already deleted stay deleted.

    Args:
        settings: Vault settings
        note_path: Vault-relative note path
        markdown: Current note text

    Returns:
        Normalized vault-relative paths of the deleted files, sorted

    Raises:
        InvalidNotePathError: If the note has no date prefix
        StorageIOError: If listing or deleting fails, or a file name is not text
    """
    context = resolve_note_context(settings, note_path)
    referenced = normalized_reference_set(settings, markdown)
    logger.debug(f"Keeping {len(referenced)} referenced asset(s) for {note_path}")

    if not context.assets_dir.exists():
        return []

    removed: list[str] = []
    try:
        for entry in context.assets_dir.iterdir():
            if entry.is_dir():
                continue

            name = entry.name
            try:
                name.encode("utf-8")
            except UnicodeEncodeError as e:
                raise StorageIOError(f"invalid asset name: {name!r}") from e

            relative = normalize_relative_path(context.assets_dir_relative / name)
            if relative in referenced:
                continue

            entry.unlink()
            removed.append(relative)
            logger.info(f"Removed unused asset {relative}")
    except OSError as e:
        raise StorageIOError(e) from e

    return sorted(removed)
