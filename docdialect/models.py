"""
Pydantic models for the documentation tree.

A tree is built once (by a source parser, or loaded from YAML/JSON) and then
treated as immutable input to the composer. Heading levels are assigned by
whoever builds the tree; the models do not renumber them.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Repo(BaseModel):
    """Hosted repository a source location belongs to."""

    model_config = ConfigDict(frozen=True)

    remote: str
    default_branch: str = "main"


class Location(BaseModel):
    """Where in the source a construct is defined."""

    model_config = ConfigDict(frozen=True)

    path: str = ""  # Relative to the repository root
    start_line: Optional[int] = Field(default=None, ge=1)
    end_line: Optional[int] = Field(default=None, ge=1)
    repo: Optional[Repo] = None

    @property
    def is_empty(self) -> bool:
        """Check if there is not enough information to link to the source."""
        return self.repo is None or not self.path.strip()


class DocNode(BaseModel):
    """Fields shared by every node of the documentation tree."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    doc: str = ""
    decl: str = ""
    level: int = 1
    location: Optional[Location] = None

    @field_validator("name", "doc", "decl", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat missing text as empty text."""
        return "" if v is None else v


class Value(DocNode):
    """A constant or variable declaration block."""


class Example(DocNode):
    """A runnable usage example."""

    code: str = ""
    output: str = ""

    @property
    def title(self) -> str:
        """Accordion title, e.g. ``Example`` or ``Example (Parse)``."""
        if self.name:
            return f"Example ({self.name})"
        return "Example"


class Func(DocNode):
    """A function, or a method when ``receiver`` is set."""

    receiver: Optional[str] = None
    examples: list[Example] = Field(default_factory=list)

    @property
    def is_method(self) -> bool:
        return bool(self.receiver)

    @property
    def title(self) -> str:
        if self.is_method:
            return f"func ({self.receiver}) {self.name}"
        return f"func {self.name}"


class Type(DocNode):
    """A type together with its constructors and methods."""

    consts: list[Value] = Field(default_factory=list)
    vars: list[Value] = Field(default_factory=list)
    examples: list[Example] = Field(default_factory=list)
    funcs: list[Func] = Field(default_factory=list)
    methods: list[Func] = Field(default_factory=list)

    @property
    def title(self) -> str:
        return f"type {self.name}"


class Package(DocNode):
    """Root of a documentation tree."""

    import_path: Optional[str] = None
    consts: list[Value] = Field(default_factory=list)
    vars: list[Value] = Field(default_factory=list)
    examples: list[Example] = Field(default_factory=list)
    funcs: list[Func] = Field(default_factory=list)
    types: list[Type] = Field(default_factory=list)

    @property
    def title(self) -> str:
        return f"package {self.name}"

    @property
    def slug(self) -> str:
        """File-name safe slug for the package."""
        slug = re.sub(r"[^a-z0-9_-]", "-", self.name.lower()).strip("-")
        return slug or "package"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Package":
        """Create a package tree from a dictionary."""
        return cls.model_validate(data)


def load_package(path: Path | str) -> Package:
    """Load a documentation tree from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        Package tree

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file extension is not supported
        pydantic.ValidationError: If the tree is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Documentation tree not found: {path}")

    suffix = path.suffix.lower()
    with open(path, "r", encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f) or {}
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported tree file type: {path.suffix!r} (expected .yaml, .yml or .json)"
            )

    return Package.from_dict(data)
