"""
Output dialects for rendered documentation.

Each dialect implements the full ``Dialect`` capability set independently;
only the anchor and escape helpers in ``text`` are shared.
"""

from __future__ import annotations

from .asciidoc import Asciidoc
from .base import Dialect
from .markdown import GitHubFlavoredMarkdown
from .text import EMPTY_ANCHOR, anchor, plain_text

# Names accepted on the command line and in config files
DIALECTS: dict[str, type] = {
    "github": GitHubFlavoredMarkdown,
    "gfm": GitHubFlavoredMarkdown,
    "markdown": GitHubFlavoredMarkdown,
    "asciidoc": Asciidoc,
    "adoc": Asciidoc,
}


def get_dialect(name: str, default_language: str | None = None) -> Dialect:
    """Create a dialect by name.

    Args:
        name: Dialect name or alias (case-insensitive)
        default_language: Override for the dialect's default code language

    Returns:
        Dialect instance

    Raises:
        ValueError: If the name is not a known dialect
    """
    dialect_cls = DIALECTS.get(name.strip().lower())
    if dialect_cls is None:
        raise ValueError(
            f"Unknown dialect: {name!r}. "
            f"Available: {', '.join(sorted(DIALECTS))}"
        )
    return dialect_cls(default_language)


__all__ = [
    "Asciidoc",
    "DIALECTS",
    "Dialect",
    "EMPTY_ANCHOR",
    "GitHubFlavoredMarkdown",
    "anchor",
    "get_dialect",
    "plain_text",
]
