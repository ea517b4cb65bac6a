"""Configuration management for notevault."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


# Vault defaults (mirrors the editor's built-in settings)
DEFAULT_VAULT_PATH = Path(os.path.expanduser("~/Documents/MyNotesVault"))
DEFAULT_NOTES_FOLDER = "notes"
DEFAULT_ASSETS_FOLDER = "assets"
DEFAULT_NAMING_STRATEGY = "uuid"

# Settings file looked up at the vault root when no explicit path is given
SETTINGS_FILENAME = "notevault.yaml"

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO") or "INFO"

# API Server settings
NOTEVAULT_HOST = get_env("NOTEVAULT_HOST", "127.0.0.1")
NOTEVAULT_PORT = get_env_int("NOTEVAULT_PORT", 8421)
NOTEVAULT_CORS_ORIGINS = [
    origin.strip()
    for origin in (
        get_env("NOTEVAULT_CORS_ORIGINS", "http://localhost:1420")
        or "http://localhost:1420"
    ).split(",")
    if origin.strip()
]


def get_vault_path() -> Path:
    """Vault root from NOTEVAULT_VAULT_PATH, with ~ expanded."""
    raw = get_env("NOTEVAULT_VAULT_PATH")
    if not raw:
        return DEFAULT_VAULT_PATH
    return Path(raw).expanduser()


def get_settings_file() -> Path | None:
    """Explicit settings file from NOTEVAULT_SETTINGS_FILE, if any."""
    raw = get_env("NOTEVAULT_SETTINGS_FILE")
    return Path(raw).expanduser() if raw else None


def settings_defaults() -> dict[str, object]:
    """
    Build the raw settings mapping from the environment.

    Read at call time so tests and long-running processes see the
    current environment rather than the one present at import.

    Returns:
        Mapping of snake_case settings fields to values
    """
    return {
        "vault_path": str(get_vault_path()),
        "notes_folder": get_env("NOTEVAULT_NOTES_FOLDER", DEFAULT_NOTES_FOLDER),
        "assets_folder": get_env("NOTEVAULT_ASSETS_FOLDER", DEFAULT_ASSETS_FOLDER),
        "naming_strategy": get_env(
            "NOTEVAULT_NAMING_STRATEGY", DEFAULT_NAMING_STRATEGY
        ),
        "auto_cleanup_assets": get_env_bool("NOTEVAULT_AUTO_CLEANUP_ASSETS", True),
    }


def setup_logging() -> logging.Logger:
    """Configure and return logger."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    )
    return logging.getLogger(__name__)
