"""Extract local asset references from note markdown.

Both image embeds ``![alt](target)`` and links ``[label](target)`` count as
references. A target ends at the first ``)``; nested parentheses inside a
target are not supported, so ``![a](x(1).png)`` references ``x(1``.
"""

import re

IMAGE_PATTERN = re.compile(r"!\[[^\]]*\]\(([^)]+)\)")
LINK_PATTERN = re.compile(r"\[[^\]]+\]\(([^)]+)\)")

REMOTE_PREFIXES = ("http://", "https://", "mailto:")


def normalize_link_target(target: str) -> str | None:
    """
    Clean a captured link target.

    Strips whitespace and one layer of ``<...>`` and converts backslashes to
    forward slashes.

    Returns:
        The cleaned target, or None for remote (http, https, mailto) targets
    """
    trimmed = target.strip().removeprefix("<").removesuffix(">").strip()

    if trimmed.startswith(REMOTE_PREFIXES):
        return None

    return trimmed.replace("\\", "/")


def extract_asset_paths(markdown: str) -> set[str]:
    """
    Collect every local target referenced by images and links.

    Args:
        markdown: Note text

    Returns:
        Unordered set of unique targets, relative to whatever the note used
    """
    paths: set[str] = set()

    for match in IMAGE_PATTERN.finditer(markdown):
        normalized = normalize_link_target(match.group(1))
        if normalized is not None:
            paths.add(normalized)

    for match in LINK_PATTERN.finditer(markdown):
        # The label of an image embed also matches the link pattern
        start = match.start()
        if start > 0 and markdown[start - 1] == "!":
            continue

        normalized = normalize_link_target(match.group(1))
        if normalized is not None:
            paths.add(normalized)

    return paths
