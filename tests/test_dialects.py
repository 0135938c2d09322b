"""Tests for properties every dialect must share."""

import re

import pytest

from docdialect.dialects import (
    Asciidoc,
    Dialect,
    GitHubFlavoredMarkdown,
    anchor,
    get_dialect,
)
from docdialect.errors import InvalidLevelError

# How each dialect embeds the anchor in headers and in local links
HEADER_ANCHOR = {
    GitHubFlavoredMarkdown: re.compile(r'<a name="([^"]+)"></a>'),
    Asciidoc: re.compile(r"^\[\[([^\]]+)\]\]"),
}
HREF_ANCHOR = {
    GitHubFlavoredMarkdown: re.compile(r"\]\(#([^)]+)\)$"),
    Asciidoc: re.compile(r"^xref:([^\[]+)\["),
}

HEADINGS = [
    "My Function",
    "func (p *Parser) Parse",
    "type Parser",
    "Ünïcode Heading",
    "  spaced   out  ",
    "!!!",
]


class TestContract:
    """Tests for the shared dialect contract."""

    def test_satisfies_protocol(self, dialect):
        assert isinstance(dialect, Dialect)

    def test_empty_inputs(self, dialect):
        """Test empty input never produces an empty markup shell."""
        assert dialect.bold("") == ""
        assert dialect.code_block("go", "") == ""
        assert dialect.list_entry(0, "") == ""
        assert dialect.list_entry(3, "") == ""
        assert dialect.paragraph("") == ""
        assert dialect.link("", "https://x.test") == ""
        assert dialect.local_href("") == ""
        assert dialect.raw_header(1, "") == ""
        assert dialect.escape("") == ""
        assert dialect.code_href(None) == ""

    def test_whitespace_inputs(self, dialect):
        """Test whitespace-only text is treated as empty."""
        assert dialect.bold("  ") == ""
        assert dialect.raw_header(1, "   ") == ""
        assert dialect.local_href(" ") == ""
        assert dialect.link(" \t", "https://x.test") == ""
        assert dialect.list_entry(0, " ") == ""
        assert dialect.paragraph("\n") == ""

    def test_whitespace_header_still_checks_level(self, dialect):
        with pytest.raises(InvalidLevelError):
            dialect.raw_header(0, "  ")

    @pytest.mark.parametrize("text", HEADINGS)
    @pytest.mark.parametrize("level", [1, 2, 6, 12])
    def test_local_href_targets_header(self, dialect, text, level):
        """Test a local link resolves to the anchor of the matching header."""
        header = dialect.raw_header(level, text)
        href = dialect.local_href(text)

        header_anchor = HEADER_ANCHOR[type(dialect)].search(header).group(1)
        href_anchor = HREF_ANCHOR[type(dialect)].search(href).group(1)

        assert header_anchor == href_anchor == anchor(text)

    def test_escaped_header_matches_raw_link(self, dialect):
        """Test header() and a link to the unescaped text share an anchor."""
        text = "func (p *Parser) Parse_all"
        header = dialect.header(2, text)
        href = dialect.local_href(text)

        assert (
            HEADER_ANCHOR[type(dialect)].search(header).group(1)
            == HREF_ANCHOR[type(dialect)].search(href).group(1)
        )

    @pytest.mark.parametrize("level", [0, -1, -7])
    def test_invalid_levels(self, dialect, level):
        with pytest.raises(InvalidLevelError):
            dialect.header(level, "Title")
        with pytest.raises(InvalidLevelError):
            dialect.raw_header(level, "Title")

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6, 7, 50, 10_000])
    def test_valid_levels(self, dialect, level):
        assert dialect.header(level, "Title")

    def test_deep_levels_render_like_max(self, dialect):
        assert dialect.header(7, "Title") == dialect.header(6, "Title")
        assert dialect.header(100, "Title") == dialect.header(6, "Title")

    @pytest.mark.parametrize("title", ["", "Example", "Example (Parse)"])
    @pytest.mark.parametrize(
        "body",
        ["", "plain", "```go\nx := 1\n```\n\n", "nested\n====\n", "<p>html</p>"],
    )
    def test_split_accordion(self, dialect, title, body):
        """Test the split accordion form equals the whole form."""
        split = dialect.accordion_header(title) + body + dialect.accordion_terminator()
        assert split == dialect.accordion(title, body)

    @pytest.mark.parametrize("href", ["", "https://x.test", "#anchor"])
    def test_link_without_text(self, dialect, href):
        assert dialect.link("", href) == ""

    @pytest.mark.parametrize("text", ["x", "Parser", "two words"])
    def test_link_without_href(self, dialect, text):
        assert dialect.link(text, "") == text

    def test_referential_transparency(self, dialect):
        """Test identical calls, on any instance, give identical output."""
        other = type(dialect)()

        assert dialect.header(2, "Same Title") == dialect.header(2, "Same Title")
        assert dialect.header(2, "Same Title") == other.header(2, "Same Title")
        assert dialect.local_href("Same Title") == other.local_href("Same Title")
        assert dialect.accordion("t", "b") == other.accordion("t", "b")


class TestGetDialect:
    """Tests for dialect lookup by name."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("github", GitHubFlavoredMarkdown),
            ("gfm", GitHubFlavoredMarkdown),
            ("Markdown", GitHubFlavoredMarkdown),
            ("asciidoc", Asciidoc),
            (" adoc ", Asciidoc),
        ],
    )
    def test_known_names(self, name, expected):
        assert isinstance(get_dialect(name), expected)

    def test_default_language_override(self):
        dialect = get_dialect("asciidoc", default_language="rust")
        assert dialect.default_language == "rust"

    def test_default_language_fallback(self):
        assert get_dialect("github").default_language == GitHubFlavoredMarkdown.DEFAULT_LANGUAGE

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown dialect"):
            get_dialect("rst")
