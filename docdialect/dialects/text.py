"""
Text helpers shared by every dialect.

Anchors are derived here rather than in the dialects so that a heading and
a link pointing at it agree on the same slug whichever dialect emitted them.
"""

from __future__ import annotations

import re

# Fallback anchor for heading text that has no identifier characters left
EMPTY_ANCHOR = "section"
ANCHOR_SEPARATOR = "-"

_MARKUP_RE = re.compile(
    r"\\(?P<escaped>[^\w\s])"
    r"|\[(?P<link>[^\]]*)\]\([^)]*\)"
    r"|(?:https?://|xref:|link:)[^\s\[]*\[(?P<macro>[^\]]*)\]"
    r"|</?[A-Za-z][^>]*>"
    r"|\*\*(?P<strong>.+?)\*\*"
    r"|\*(?P<emphasis>[^*\s][^*]*?)\*"
    r"|`(?P<code>[^`]+)`"
    r"|\{empty\}"
)
_MARKUP_GROUPS = ("link", "macro", "strong", "emphasis", "code")

_WHITESPACE_RE = re.compile(r"\s+")


def _strip_match(match: re.Match) -> str:
    escaped = match.group("escaped")
    if escaped is not None:
        return escaped

    for group in _MARKUP_GROUPS:
        value = match.group(group)
        if value is not None:
            return plain_text(value)

    # Bare HTML tag or {empty} attribute
    return ""


def plain_text(text: str) -> str:
    """Strip link, emphasis, code and tag markup as well as backslash escapes.

    Both markdown (``[text](href)``) and Asciidoc (``https://...[text]``,
    ``xref:id[text]``) links are reduced to their visible text.

    Args:
        text: Heading text, possibly escaped or containing markup

    Returns:
        The display text a reader would see
    """
    return _MARKUP_RE.sub(_strip_match, text)


def anchor(text: str, separator: str = ANCHOR_SEPARATOR) -> str:
    """Derive the reference slug for a heading.

    The markup is stripped, the text lower-cased and trimmed, whitespace
    runs are collapsed into ``separator`` and anything that is neither a
    word character nor the separator is dropped.

    Args:
        text: Heading text as passed to a header or local link
        separator: Replacement for whitespace runs

    Returns:
        A non-empty slug (``EMPTY_ANCHOR`` when nothing usable remains)
    """
    result = plain_text(text).lower().strip()
    result = _WHITESPACE_RE.sub(separator, result)
    result = re.sub(rf"[^\w{re.escape(separator)}]+", "", result)

    return result or EMPTY_ANCHOR


def escape(text: str, reserved: str) -> str:
    """Backslash-escape every character of ``reserved`` found in ``text``.

    Not idempotent: escaping the same text twice doubles the backslashes.
    """
    if not text:
        return ""
    return re.sub(f"([{re.escape(reserved)}])", r"\\\1", text)
