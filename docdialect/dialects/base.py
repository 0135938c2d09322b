"""
The capability set every output dialect provides.

Dialects are not subclasses of a shared base: each one implements every
primitive itself and satisfies this protocol structurally. The composer only
ever talks to a dialect through these operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models import Location


@runtime_checkable
class Dialect(Protocol):
    """Formatting primitives for one markup syntax.

    Inputs are plain, unescaped text unless stated otherwise. Operations that
    receive empty text return an empty string instead of an empty markup
    shell. Implementations hold no mutable state, so the same call always
    returns the same output.
    """

    name: str
    extension: str
    default_language: str

    def bold(self, text: str) -> str:
        """Emphasize text; empty text gives an empty string."""
        ...

    def code_block(self, language: str, code: str) -> str:
        """Wrap code in a block tagged with language (or the dialect default)."""
        ...

    def header(self, level: int, text: str) -> str:
        """Escape text and emit it as a header.

        Raises:
            InvalidLevelError: If level is less than 1
        """
        ...

    def raw_header(self, level: int, text: str) -> str:
        """Emit text, unescaped, as an anchored header clamped to level 6.

        Raises:
            InvalidLevelError: If level is less than 1
        """
        ...

    def local_href(self, header_text: str) -> str:
        """Link to the header generated from header_text in this document."""
        ...

    def code_href(self, location: Location | None) -> str:
        """Link to a source location, or an empty string when unsupported."""
        ...

    def link(self, text: str, href: str) -> str:
        """Link text to href, degrading to the bare text without an href."""
        ...

    def list_entry(self, depth: int, text: str) -> str:
        """Unordered list entry at a zero-indexed nesting depth."""
        ...

    def accordion(self, title: str, body: str) -> str:
        """Collapsible block; the body is inserted verbatim."""
        ...

    def accordion_header(self, title: str) -> str:
        """Opening half of accordion(), for bodies rendered separately."""
        ...

    def accordion_terminator(self) -> str:
        """Closing half of accordion()."""
        ...

    def paragraph(self, text: str) -> str:
        """Block-level paragraph followed by a blank line."""
        ...

    def escape(self, text: str) -> str:
        """Neutralize reserved characters. Apply once to raw text only."""
        ...

    def comment(self, text: str) -> str:
        """Single-line comment that does not show up in rendered output."""
        ...
