"""
Page writer for rendered documentation.

Wraps composed package text in a Jinja2 page template and writes it to the
output directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .composer import render_package
from .config import RenderConfig
from .dialects import get_dialect

if TYPE_CHECKING:
    from .dialects import Dialect
    from .models import Package

logger = logging.getLogger(__name__)


class PageWriter:
    """Render packages into full pages using Jinja2 templates."""

    # Default template directory (relative to this file)
    DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

    GENERATED_NOTICE = "Code generated by docdialect. DO NOT EDIT."

    def __init__(self, config: RenderConfig | None = None, dialect: Dialect | None = None):
        """Initialize page writer.

        Args:
            config: Render configuration (uses defaults if None)
            dialect: Dialect to render with (built from config if None)
        """
        self.config = config or RenderConfig()
        self.dialect = dialect or get_dialect(self.config.dialect, self.config.default_language)

        template_dir = self.config.output.template_dir or self.DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def extension(self) -> str:
        """File extension for written pages, including the leading dot."""
        extension = self.config.output.extension or self.dialect.extension
        return extension if extension.startswith(".") else f".{extension}"

    @property
    def template_name(self) -> str:
        return f"page{self.dialect.extension}.j2"

    def render_page(self, package: Package) -> str:
        """Render a package into page text.

        Raises:
            InvalidLevelError: If any node in the tree has a level less than 1
            jinja2.TemplateNotFound: If the template directory lacks the page template
        """
        content = render_package(package, self.dialect, include_index=self.config.include_index)

        header_comment = ""
        if self.config.output.header_comment:
            header_comment = self.dialect.comment(self.GENERATED_NOTICE).rstrip("\n")

        template = self.env.get_template(self.template_name)
        page = template.render(
            content=content.rstrip("\n"),
            header_comment=header_comment,
            package=package,
            dialect=self.dialect,
        )
        return page.rstrip("\n") + "\n"

    def write_page(self, package: Package, output_dir: Path | str | None = None) -> Path:
        """Render a package and write it as ``<package-slug><extension>``.

        Args:
            package: Package tree
            output_dir: Output directory (uses config default if None)

        Returns:
            Path of the written file
        """
        # A failed render must not leave a file behind
        content = self.render_page(package)

        output_dir = Path(output_dir or self.config.output.dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        filepath = output_dir / f"{package.slug}{self.extension}"
        filepath.write_text(content, encoding="utf-8")
        logger.info("Generated: %s", filepath)

        return filepath
