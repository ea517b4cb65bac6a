"""Settings - the configuration value passed into every storage operation.

Settings arrive from the UI as camelCase JSON (``vaultPath``, ``assetsFolder``,
...) or from a ``notevault.yaml`` file at the vault root. The model is frozen:
each operation receives an immutable value and nothing holds settings as
shared process state.
"""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from notevault.core.config import (
    SETTINGS_FILENAME,
    get_settings_file,
    settings_defaults,
)
from notevault.core.errors import SettingsError

logger = logging.getLogger(__name__)

NamingStrategy = Literal["uuid", "timestamp"]


class Settings(BaseModel):
    """Vault layout and behaviour for a single operation."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    vault_path: str = Field(alias="vaultPath")
    notes_folder: str = Field(default="notes", alias="notesFolder")
    assets_folder: str = Field(default="assets", alias="assetsFolder")
    # Accepted for compatibility with the editor; not interpreted here.
    naming_strategy: NamingStrategy = Field(default="uuid", alias="namingStrategy")
    auto_cleanup_assets: bool = Field(default=True, alias="autoCleanupAssets")

    @property
    def vault_root(self) -> Path:
        """Vault root as a path, with ~ expanded."""
        return Path(self.vault_path).expanduser()

    def with_vault(self, vault_path: Path | str) -> "Settings":
        """Return a copy pointing at a different vault root."""
        return self.model_copy(update={"vault_path": str(vault_path)})


def _field_name(key: str) -> str:
    """Map a camelCase alias to its field name; unknown keys pass through."""
    for name, field in Settings.model_fields.items():
        if key == field.alias:
            return name
    return key


def default_settings() -> Settings:
    """Build settings from environment variables and built-in defaults."""
    return Settings.model_validate(settings_defaults())


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Load settings from a YAML file, overlaying environment defaults.

    Lookup order for the file: the explicit ``path``, then
    NOTEVAULT_SETTINGS_FILE, then ``notevault.yaml`` in the default vault.
    A relative ``vaultPath`` in the file resolves against the file's folder.

    Args:
        path: Optional settings file path

    Returns:
        Settings value

    Raises:
        SettingsError: If the file is unreadable, invalid YAML or not a mapping
    """
    data: dict[str, Any] = settings_defaults()

    if path is not None:
        settings_file = Path(path).expanduser()
    else:
        settings_file = get_settings_file() or (
            Path(str(data["vault_path"])) / SETTINGS_FILENAME
        )

    if not settings_file.exists():
        logger.debug(f"No settings file at {settings_file}, using defaults")
        return Settings.model_validate(data)

    logger.debug(f"Loading settings from {settings_file}")

    try:
        with open(settings_file, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError(f"Failed to read {settings_file}: {e}") from e
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in {settings_file}: {e}")
        raise SettingsError(f"Invalid YAML in {settings_file}: {e}") from e

    if raw is None:
        return Settings.model_validate(data)

    if not isinstance(raw, dict):
        logger.error(f"Settings must be a mapping, got {type(raw).__name__}")
        raise SettingsError(
            f"{settings_file.name} must be a mapping, got {type(raw).__name__}"
        )

    for key, value in raw.items():
        data[_field_name(str(key))] = value

    vault = Path(str(data["vault_path"])).expanduser()
    if not vault.is_absolute():
        vault = settings_file.parent / vault
    data["vault_path"] = str(vault)

    settings = Settings.model_validate(data)
    logger.info(
        f"Settings loaded: vault={settings.vault_path}, "
        f"assets_folder={settings.assets_folder}, "
        f"auto_cleanup_assets={settings.auto_cleanup_assets}"
    )
    return settings
