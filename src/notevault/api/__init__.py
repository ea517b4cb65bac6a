"""HTTP bridge between the note editor UI and the vault."""
