"""notevault - filesystem-first storage for markdown notes and their assets."""
