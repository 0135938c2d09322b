"""
GitHub-flavored markdown dialect.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..errors import InvalidLevelError
from .text import anchor, escape

if TYPE_CHECKING:
    from ..models import Location

# Backtick runs that would close a fenced block
_FENCE_RE = re.compile(r"^[ \t]*(`{3,})", re.MULTILINE)
# "1." at the start of a line opens an ordered list
_ORDERED_ITEM_RE = re.compile(r"^([ \t]*\d+)\.", re.MULTILINE)


class GitHubFlavoredMarkdown:
    """Markdown as rendered by GitHub.

    Headers carry an explicit ``<a name>`` anchor so local links resolve
    without relying on the host's own heading ids. Code links point at the
    ``blob`` view of the location's repository.
    """

    name = "github"
    extension = ".md"

    DEFAULT_LANGUAGE = "go"
    MAX_LEVEL = 6
    RESERVED = "\\`*_{}[]()<>#+-!~"

    def __init__(self, default_language: str | None = None):
        """Initialize the dialect.

        Args:
            default_language: Code block language used when none is given
        """
        self.default_language = default_language or self.DEFAULT_LANGUAGE

    def bold(self, text: str) -> str:
        if not text.strip():
            return ""
        return f"**{text}**"

    def code_block(self, language: str, code: str) -> str:
        if not code.strip():
            return ""
        language = language or self.default_language
        code = code.rstrip("\n")

        # The fence must be longer than any fence inside the code
        longest = max((len(run) for run in _FENCE_RE.findall(code)), default=2)
        fence = "`" * max(3, longest + 1)
        return f"{fence}{language}\n{code}\n{fence}\n\n"

    def header(self, level: int, text: str) -> str:
        return self.raw_header(level, self.escape(text))

    def raw_header(self, level: int, text: str) -> str:
        if level < 1:
            raise InvalidLevelError(level)
        if not text.strip():
            return ""

        # Only go up to 6 levels, anything deeper renders as level 6
        depth = min(level, self.MAX_LEVEL)
        return f'<a name="{anchor(text)}"></a>\n{"#" * depth} {text}\n\n'

    def local_href(self, header_text: str) -> str:
        if not header_text.strip():
            return ""
        return f"[{header_text}](#{anchor(header_text)})"

    def code_href(self, location: Location | None) -> str:
        """Link to the GitHub blob view of a location.

        Returns an empty string when the location has no repository or path.
        """
        if location is None or location.is_empty:
            return ""

        repo = location.repo
        href = f"{repo.remote.rstrip('/')}/blob/{repo.default_branch}/{location.path.lstrip('/')}"

        if location.start_line is None:
            return href
        if location.end_line is not None and location.end_line > location.start_line:
            return f"{href}#L{location.start_line}-L{location.end_line}"
        return f"{href}#L{location.start_line}"

    def link(self, text: str, href: str) -> str:
        if not text.strip():
            return ""
        if not href.strip():
            return text
        return f"[{text}]({href})"

    def list_entry(self, depth: int, text: str) -> str:
        if not text.strip():
            return ""
        return f"{'  ' * depth}- {text}\n"

    def accordion(self, title: str, body: str) -> str:
        return self.accordion_header(title) + body + self.accordion_terminator()

    def accordion_header(self, title: str) -> str:
        title = title or "Description"
        return f"<details><summary>{title}</summary>\n<p>\n\n"

    def accordion_terminator(self) -> str:
        return "\n\n</p>\n</details>\n\n"

    def paragraph(self, text: str) -> str:
        if not text.strip():
            return ""
        return f"{text}\n\n"

    def escape(self, text: str) -> str:
        return _ORDERED_ITEM_RE.sub(r"\1\\.", escape(text, self.RESERVED))

    def comment(self, text: str) -> str:
        if not text.strip():
            return ""
        return f"<!-- {text} -->\n\n"
