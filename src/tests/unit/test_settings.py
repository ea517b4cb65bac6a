"""Tests for notevault.core.settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from notevault.core.errors import SettingsError
from notevault.core.settings import Settings, default_settings, load_settings


class TestSettingsModel:
    """Tests for the Settings value object."""

    def test_accepts_camel_case(self):
        """The editor's camelCase payload validates."""
        settings = Settings.model_validate(
            {
                "vaultPath": "/vault",
                "notesFolder": "notes",
                "assetsFolder": "media",
                "namingStrategy": "timestamp",
                "autoCleanupAssets": False,
            }
        )

        assert settings.vault_path == "/vault"
        assert settings.assets_folder == "media"
        assert settings.naming_strategy == "timestamp"
        assert settings.auto_cleanup_assets is False

    def test_accepts_snake_case(self):
        """Field names work as well as aliases."""
        settings = Settings(vault_path="/vault", assets_folder="media")
        assert settings.assets_folder == "media"

    def test_defaults(self):
        """Only the vault path is required."""
        settings = Settings(vault_path="/vault")

        assert settings.notes_folder == "notes"
        assert settings.assets_folder == "assets"
        assert settings.naming_strategy == "uuid"
        assert settings.auto_cleanup_assets is True

    def test_ignores_unknown_fields(self):
        """Extra keys sent by the editor are dropped."""
        settings = Settings.model_validate(
            {"vaultPath": "/vault", "assetFolder": "x", "theme": "dark"}
        )
        assert settings.assets_folder == "assets"
        assert not hasattr(settings, "theme")

    def test_rejects_unknown_naming_strategy(self):
        """Only uuid and timestamp are accepted."""
        with pytest.raises(ValidationError):
            Settings(vault_path="/vault", naming_strategy="random")

    def test_is_frozen(self):
        """Settings cannot be mutated."""
        settings = Settings(vault_path="/vault")
        with pytest.raises(ValidationError):
            settings.vault_path = "/other"

    def test_with_vault(self):
        """with_vault returns a copy with a new root."""
        settings = Settings(vault_path="/vault")
        other = settings.with_vault(Path("/other"))

        assert other.vault_root == Path("/other")
        assert settings.vault_root == Path("/vault")

    def test_serializes_to_camel_case(self):
        """Dumping by alias produces the editor's wire format."""
        dumped = Settings(vault_path="/vault").model_dump(by_alias=True)
        assert dumped["vaultPath"] == "/vault"
        assert dumped["autoCleanupAssets"] is True


class TestLoadSettings:
    """Tests for default_settings and load_settings."""

    def test_default_settings_from_env(self, mock_env, vault_dir):
        """Environment variables populate the defaults."""
        settings = default_settings()

        assert settings.vault_root == vault_dir
        assert settings.auto_cleanup_assets is True

    def test_env_can_disable_cleanup(self, mock_env, monkeypatch):
        """NOTEVAULT_AUTO_CLEANUP_ASSETS=false turns cleanup off."""
        monkeypatch.setenv("NOTEVAULT_AUTO_CLEANUP_ASSETS", "false")
        assert default_settings().auto_cleanup_assets is False

    def test_missing_file_uses_defaults(self, mock_env, vault_dir):
        """No settings file means environment defaults."""
        settings = load_settings(vault_dir / "absent.yaml")
        assert settings == default_settings()

    def test_vault_file_found_by_default(self, mock_env, vault_dir):
        """notevault.yaml at the vault root is picked up."""
        (vault_dir / "notevault.yaml").write_text("assetsFolder: _media\n")

        assert load_settings().assets_folder == "_media"

    def test_settings_file_env(self, mock_env, monkeypatch, tmp_path):
        """NOTEVAULT_SETTINGS_FILE points at an explicit file."""
        settings_file = tmp_path / "custom.yaml"
        settings_file.write_text("notes_folder: journal\n")
        monkeypatch.setenv("NOTEVAULT_SETTINGS_FILE", str(settings_file))

        assert load_settings().notes_folder == "journal"

    def test_mixed_key_styles(self, mock_env, tmp_path):
        """camelCase and snake_case keys may be mixed."""
        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text(
            "assetsFolder: media\nauto_cleanup_assets: false\nnamingStrategy: timestamp\n"
        )

        settings = load_settings(settings_file)

        assert settings.assets_folder == "media"
        assert settings.auto_cleanup_assets is False
        assert settings.naming_strategy == "timestamp"

    def test_relative_vault_path_resolves_against_file(self, mock_env, tmp_path):
        """A relative vaultPath is relative to the settings file."""
        settings_file = tmp_path / "conf" / "settings.yaml"
        settings_file.parent.mkdir()
        settings_file.write_text("vaultPath: ../my-vault\n")

        settings = load_settings(settings_file)

        assert settings.vault_root == tmp_path / "conf" / ".." / "my-vault"

    def test_absolute_vault_path_kept(self, mock_env, tmp_path):
        """An absolute vaultPath is used as-is."""
        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text(f"vaultPath: {tmp_path / 'abs'}\n")

        assert load_settings(settings_file).vault_root == tmp_path / "abs"

    def test_empty_file_uses_defaults(self, mock_env, tmp_path):
        """An empty YAML document means defaults."""
        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text("")

        assert load_settings(settings_file) == default_settings()

    def test_invalid_yaml(self, mock_env, tmp_path):
        """Broken YAML raises SettingsError."""
        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text("invalid: yaml: content: [")

        with pytest.raises(SettingsError, match="Invalid YAML"):
            load_settings(settings_file)

    def test_non_mapping(self, mock_env, tmp_path):
        """A YAML list is rejected."""
        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text("- a\n- b\n")

        with pytest.raises(SettingsError, match="must be a mapping"):
            load_settings(settings_file)

    def test_unknown_key_in_file(self, mock_env, tmp_path):
        """Unknown keys in the file are ignored."""
        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text("assetFolder: typo\nassetsFolder: files\n")

        settings = load_settings(settings_file)

        assert settings.assets_folder == "files"
