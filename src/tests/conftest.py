"""Shared test fixtures and configuration."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from notevault.core.settings import Settings

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
def vault_dir(tmp_path) -> Path:
    """Provide an empty vault root."""
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def make_settings(vault_dir):
    """Factory for Settings pointing at the temporary vault."""

    def _make_settings(**overrides) -> Settings:
        values = {
            "vault_path": str(vault_dir),
            "notes_folder": "notes",
            "assets_folder": "assets",
            "naming_strategy": "uuid",
            "auto_cleanup_assets": True,
        }
        values.update(overrides)
        return Settings(**values)

    return _make_settings


@pytest.fixture
def settings(make_settings) -> Settings:
    """Default settings for the temporary vault."""
    return make_settings()


@pytest.fixture
def png_bytes() -> bytes:
    """Raw bytes of a tiny PNG."""
    return PNG_BYTES


@pytest.fixture
def png_base64() -> str:
    """Base64 payload of a tiny PNG."""
    return base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def make_assets(vault_dir):
    """Factory that populates an asset directory with files."""

    def _make_assets(relative_dir: str, *names: str) -> Path:
        directory = vault_dir / relative_dir
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_bytes(b"data")
        return directory

    return _make_assets


@pytest.fixture
def mock_env(monkeypatch, vault_dir):
    """Point environment-driven defaults at the temporary vault."""
    env_vars = {
        "NOTEVAULT_VAULT_PATH": str(vault_dir),
        "NOTEVAULT_NOTES_FOLDER": "notes",
        "NOTEVAULT_ASSETS_FOLDER": "assets",
        "NOTEVAULT_AUTO_CLEANUP_ASSETS": "true",
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("NOTEVAULT_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("NOTEVAULT_NAMING_STRATEGY", raising=False)
    return env_vars
