"""User-facing interfaces to the vault."""
