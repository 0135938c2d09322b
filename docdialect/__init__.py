"""
docdialect - Render documentation trees into markup dialects.

This package provides:
- A dialect contract with GitHub-flavored markdown and Asciidoc implementations
- Anchor generation shared by every dialect
- A composer that renders packages, types, functions, values and examples
- A Jinja2 page writer and a command line interface

Configuration is managed through docdialect.yaml or command line options.
"""

__version__ = "1.0.0"

from .composer import (
    render,
    render_doc,
    render_example,
    render_func,
    render_index,
    render_package,
    render_type,
    render_value,
)
from .config import RenderConfig, OutputConfig, load_config
from .dialects import (
    DIALECTS,
    Asciidoc,
    Dialect,
    GitHubFlavoredMarkdown,
    anchor,
    get_dialect,
    plain_text,
)
from .errors import InvalidLevelError
from .models import (
    DocNode,
    Example,
    Func,
    Location,
    Package,
    Repo,
    Type,
    Value,
    load_package,
)

__all__ = [
    # Dialects
    "Asciidoc",
    "DIALECTS",
    "Dialect",
    "GitHubFlavoredMarkdown",
    "anchor",
    "get_dialect",
    "plain_text",
    # Composer
    "render",
    "render_doc",
    "render_example",
    "render_func",
    "render_index",
    "render_package",
    "render_type",
    "render_value",
    # Models
    "DocNode",
    "Example",
    "Func",
    "Location",
    "Package",
    "Repo",
    "Type",
    "Value",
    "load_package",
    # Config
    "OutputConfig",
    "RenderConfig",
    "load_config",
    # Errors
    "InvalidLevelError",
]
