"""Vault layout: where a note's assets live.

Assets are partitioned by the date token that starts every note file name::

    notes/2024/2024-01-05-trip.md  ->  assets/2024/2024-01-05/

The date token is the only structured data read from a note's identity.
"""

import logging
import string
from dataclasses import dataclass
from pathlib import Path, PurePath

from notevault.core.errors import InvalidNotePathError
from notevault.core.settings import Settings

logger = logging.getLogger(__name__)

_DATE_CHARS = frozenset(string.digits + "-")


@dataclass(frozen=True)
class DateToken:
    """Date prefix parsed from a note file name."""

    date: str
    year: str


@dataclass(frozen=True)
class NoteContext:
    """Asset directory resolved for one note."""

    assets_dir: Path
    assets_dir_relative: Path


def parse_date_token(file_name: str) -> DateToken | None:
    """
    Parse the ``YYYY-MM-DD`` token at the start of a note file name.

    The token is the first three hyphen-separated segments of the name with
    its final extension removed. Only ASCII digits and hyphens may appear in
    it, and its first four characters (the year) must all be digits. The
    calendar date itself is not validated.

    Args:
        file_name: Final path component of a note

    Returns:
        DateToken, or None if the name does not follow the convention
    """
    segments = PurePath(file_name).stem.split("-")
    if len(segments) < 3:
        return None

    date = "-".join(segments[:3])
    if not set(date) <= _DATE_CHARS:
        return None

    year = date[:4]
    if len(year) != 4 or not all(c in string.digits for c in year):
        return None

    return DateToken(date=date, year=year)


def resolve_note_context(settings: Settings, note_path: str) -> NoteContext:
    """
    Resolve the date-partitioned asset directory for a note.

    No I/O is performed; the directory need not exist.

    Args:
        settings: Vault settings
        note_path: Vault-relative note path

    Returns:
        NoteContext with absolute and vault-relative asset directories

    Raises:
        InvalidNotePathError: If the file name has no valid date token
    """
    file_name = PurePath(note_path).name
    if not file_name:
        raise InvalidNotePathError(note_path)

    token = parse_date_token(file_name)
    if token is None:
        logger.warning(f"Rejected note path without date prefix: {note_path!r}")
        raise InvalidNotePathError(file_name)

    assets_dir_relative = Path(settings.assets_folder) / token.year / token.date
    assets_dir = settings.vault_root / assets_dir_relative

    logger.debug(f"Resolved assets for {note_path} -> {assets_dir_relative}")
    return NoteContext(assets_dir=assets_dir, assets_dir_relative=assets_dir_relative)
