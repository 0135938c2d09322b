"""Tests for anchor generation and escaping."""

import pytest

from docdialect.dialects.text import EMPTY_ANCHOR, anchor, escape, plain_text


class TestPlainText:
    """Tests for markup stripping."""

    def test_markdown_link(self):
        """Test markdown links are reduced to their text."""
        assert plain_text("type [Parser](https://x.test/a.go#L3)") == "type Parser"

    def test_asciidoc_link(self):
        """Test Asciidoc link and xref macros are reduced to their text."""
        assert plain_text("type link:https://x.test/a.go[Parser]") == "type Parser"
        assert plain_text("see xref:type-parser[type Parser]") == "see type Parser"

    def test_emphasis_and_code(self):
        """Test emphasis and code markers are removed."""
        assert plain_text("**Bold** and *em* and `code`") == "Bold and em and code"

    def test_html_tags(self):
        """Test HTML tags are removed but comparisons are kept."""
        assert plain_text("<b>Tag</b>") == "Tag"
        assert plain_text("a < b > c") == "a < b > c"

    def test_backslash_escapes(self):
        """Test escaped characters are restored."""
        assert plain_text(r"func \(p \*Parser\) Parse") == "func (p *Parser) Parse"

    def test_escaped_brackets_are_not_links(self):
        """Test escaped link syntax stays literal text."""
        assert plain_text(r"\[a\]\(b\)") == "[a](b)"


class TestAnchor:
    """Tests for slug generation."""

    def test_simple_heading(self):
        assert anchor("My Function") == "my-function"

    def test_whitespace_runs_collapse(self):
        """Test surrounding whitespace is trimmed and runs collapse."""
        assert anchor("  Hello \t  World  ") == "hello-world"

    def test_punctuation_removed(self):
        assert anchor("fmt.Println!") == "fmtprintln"

    def test_escaped_and_raw_agree(self):
        """Test escaped heading text yields the same slug as the raw text."""
        raw = "func (p *Parser) Parse"
        escaped = r"func \(p \*Parser\) Parse"

        assert anchor(raw) == anchor(escaped) == "func-p-parser-parse"

    def test_linked_heading(self):
        """Test links in a heading don't leak into the slug."""
        assert anchor("type [Parser](https://x.test/a.go#L3)") == "type-parser"

    def test_empty_attribute_ignored(self):
        assert anchor("{empty}.Title") == anchor(".Title") == "title"

    def test_underscores_kept(self):
        assert anchor("foo_bar") == "foo_bar"
        assert anchor(r"foo\_bar") == "foo_bar"

    def test_unicode_letters_kept(self):
        assert anchor("Ünïcode Heading") == "ünïcode-heading"

    @pytest.mark.parametrize("text", ["", "   ", "!!!", "<br>"])
    def test_empty_fallback(self, text):
        """Test text without identifier characters falls back to a constant."""
        assert anchor(text) == EMPTY_ANCHOR

    def test_custom_separator(self):
        assert anchor("My Function", separator="_") == "my_function"

    def test_deterministic(self):
        assert anchor("Some Heading") == anchor("Some Heading")


class TestEscape:
    """Tests for reserved character escaping."""

    def test_reserved_characters(self):
        assert escape("a*b_c", "*_") == r"a\*b\_c"

    def test_other_characters_untouched(self):
        assert escape("plain text.", "*_") == "plain text."

    def test_empty(self):
        assert escape("", "*") == ""

    def test_not_idempotent(self):
        """Test escaping twice is not the same as escaping once."""
        once = escape("*", "\\*")
        twice = escape(once, "\\*")

        assert once == r"\*"
        assert twice != once
