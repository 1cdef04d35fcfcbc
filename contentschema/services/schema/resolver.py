"""
Schema lookup in a content configuration.
"""

import re

from contentschema.models import ContentConfig, ContentEntry
from contentschema.utils.logger import logger

REPEATED_SLASHES_REGEX = re.compile(r"//+")


def normalize_path(path: str) -> str:
    """Wrap a path in slashes and collapse repeated slashes.

    Examples:
        >>> normalize_path("a//b/c.md")
        '/a/b/c.md/'
        >>> normalize_path("/posts/")
        '/posts/'
    """
    return REPEATED_SLASHES_REGEX.sub("/", f"/{path}/")


def get_schema_by_path(config: ContentConfig, path: str) -> ContentEntry | None:
    """Retrieve the deepest matching content schema for a file path.

    Entry paths and the file path are normalized before the prefix test, so
    slash duplication does not matter. Among equally deep matches the first
    entry in config order wins. Entries without a path never match.

    Args:
        config: Content configuration to search
        path: File path, relative to the repository root

    Returns:
        A copy of the matching entry with its path normalized, or None

    Examples:
        >>> get_schema_by_path(config, "content/posts/hello.md").path
        '/content/posts/'
    """
    normalized_path = normalize_path(path)

    matches = [
        entry.model_copy(update={"path": normalize_path(entry.path)})
        for entry in config.content
        if entry.path is not None and normalized_path.startswith(normalize_path(entry.path))
    ]
    # sorted() is stable, so config order breaks ties
    matches = sorted(matches, key=lambda entry: len(entry.path or ""), reverse=True)

    if not matches:
        logger.debug(f"No content schema matches path '{path}'")
        return None

    logger.debug(f"Path '{path}' resolved to content schema '{matches[0].name}'")
    return matches[0]


def get_schema_by_name(config: ContentConfig, name: str) -> ContentEntry | None:
    """Retrieve the first content schema called ``name``, or None."""
    return next((entry for entry in config.content if entry.name == name), None)
