"""API route modules."""

from notevault.api.routes import assets, files, health, notes

__all__ = ["assets", "files", "health", "notes"]
