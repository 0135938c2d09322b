"""
Configuration loader for docdialect.

Settings come from (highest priority first):
- Command line arguments
- A docdialect.yaml config file
- Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .dialects import DIALECTS

# Default config file name
DEFAULT_CONFIG_FILE = "docdialect.yaml"


class OutputConfig(BaseModel):
    """Where and how rendered pages are written."""

    dir: str = "docs"
    extension: str | None = None  # Defaults to the dialect's extension
    template_dir: str | None = None  # Overrides the bundled page templates
    header_comment: bool = True


class RenderConfig(BaseModel):
    """Root configuration model."""

    dialect: str = "github"
    default_language: str | None = None
    include_index: bool = False
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("dialect")
    @classmethod
    def known_dialect(cls, v: str) -> str:
        """Reject dialect names that have no implementation."""
        name = v.strip().lower()
        if name not in DIALECTS:
            raise ValueError(
                f"Unknown dialect: {v!r}. Available: {', '.join(sorted(DIALECTS))}"
            )
        return name

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RenderConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to the YAML config file

        Returns:
            RenderConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderConfig":
        """Create config from dictionary."""
        return cls.model_validate(data)

    @classmethod
    def load(
        cls,
        config_path: Path | str | None = None,
        search_paths: list[Path | str] | None = None,
    ) -> "RenderConfig":
        """Load configuration with fallback search.

        Args:
            config_path: Explicit path to config file
            search_paths: List of directories to search for docdialect.yaml

        Returns:
            RenderConfig instance (defaults if no config found)
        """
        if config_path:
            return cls.from_yaml(config_path)

        if search_paths is None:
            search_paths = [Path.cwd()]

        for search_dir in search_paths:
            config_file = Path(search_dir) / DEFAULT_CONFIG_FILE
            if config_file.exists():
                return cls.from_yaml(config_file)

        return cls()


def load_config(config_path: Path | str | None = None) -> RenderConfig:
    """Convenience function to load configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        RenderConfig instance
    """
    return RenderConfig.load(config_path)


# Default config template for users
DEFAULT_CONFIG_TEMPLATE = """# docdialect configuration

# Output dialect: github (aliases: gfm, markdown) or asciidoc (alias: adoc)
dialect: github

# Language tag for code blocks that don't name one (dialect default: go)
# default_language: go

# Emit an index of links to every function, type and method
include_index: false

output:
  dir: docs
  # File extension, defaults to .md for github and .adoc for asciidoc
  # extension: .md
  # Directory holding page.md.j2 / page.adoc.j2 to replace the bundled templates
  # template_dir: templates
  header_comment: true
"""


def create_default_config(path: Path | str) -> Path:
    """Create a default configuration file.

    Args:
        path: Path to write config file

    Returns:
        Path to created file
    """
    path = Path(path)
    path.write_text(DEFAULT_CONFIG_TEMPLATE)
    return path
