"""
Asciidoc dialect.

Produces markup compatible with the Asciidoctor/Antora toolchain.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..errors import InvalidLevelError
from .text import anchor, escape

if TYPE_CHECKING:
    from ..models import Location

# Lines opening a block delimiter, title, comment or list
_LINE_MARKUP_RE = re.compile(r"^(?=[=.\-]|//|\d+\.\s)", re.MULTILINE)
# Listing delimiters that would close a source block
_DELIMITER_RE = re.compile(r"^(-{4,})[ \t]*$", re.MULTILINE)


class Asciidoc:
    """Asciidoc markup.

    Headers are preceded by a ``[[id]]`` block anchor and local links use
    ``xref:``. Asciidoc has no notion of a hosted source link, so
    code_href() always returns an empty string.
    """

    name = "asciidoc"
    extension = ".adoc"

    DEFAULT_LANGUAGE = "go"
    MAX_LEVEL = 6
    RESERVED = "`*_#~^+[]{}<>"

    def __init__(self, default_language: str | None = None):
        """Initialize the dialect.

        Args:
            default_language: Source block language used when none is given
        """
        self.default_language = default_language or self.DEFAULT_LANGUAGE

    def bold(self, text: str) -> str:
        if not text.strip():
            return ""
        return f"*{text}*"

    def code_block(self, language: str, code: str) -> str:
        if not code.strip():
            return ""
        language = language or self.default_language
        code = code.rstrip("\n")

        # The delimiter must be longer than any delimiter line inside the code
        longest = max((len(run) for run in _DELIMITER_RE.findall(code)), default=3)
        delimiter = "-" * max(4, longest + 1)
        return f"[source,{language}]\n{delimiter}\n{code}\n{delimiter}\n\n"

    def header(self, level: int, text: str) -> str:
        return self.raw_header(level, self.escape(text))

    def raw_header(self, level: int, text: str) -> str:
        if level < 1:
            raise InvalidLevelError(level)
        if not text.strip():
            return ""

        # Only go up to 6 levels, anything deeper renders as level 6
        depth = min(level, self.MAX_LEVEL)
        return f"[[{anchor(text)}]]\n{'=' * depth} {text}\n\n"

    def local_href(self, header_text: str) -> str:
        if not header_text.strip():
            return ""
        return f"xref:{anchor(header_text)}[{header_text}]"

    def code_href(self, location: Location | None) -> str:
        return ""

    def link(self, text: str, href: str) -> str:
        if not text.strip():
            return ""
        if not href.strip():
            return text
        return f"link:{href}[{text}]"

    def list_entry(self, depth: int, text: str) -> str:
        if not text.strip():
            return ""
        return f"{'*' * (depth + 1)} {text}\n"

    def accordion(self, title: str, body: str) -> str:
        # The body is not escaped, a collapsible block can hold any element
        return self.accordion_header(title) + body + self.accordion_terminator()

    def accordion_header(self, title: str) -> str:
        title = title or "Description"
        return f".{title}\n[%collapsible]\n====\n"

    def accordion_terminator(self) -> str:
        return "\n====\n\n"

    def paragraph(self, text: str) -> str:
        if not text.strip():
            return ""
        return f"{text}\n\n"

    def escape(self, text: str) -> str:
        # {empty} keeps a leading marker from being read as block markup
        return _LINE_MARKUP_RE.sub("{empty}", escape(text, self.RESERVED))

    def comment(self, text: str) -> str:
        if not text.strip():
            return ""
        return f"// {text}\n\n"
