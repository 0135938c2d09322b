"""
CLI for rendering documentation trees.

Provides commands to:
- Render a documentation tree (YAML/JSON) into markdown or Asciidoc pages
- List the available output dialects
- Create a default configuration file

Supports configuration from:
- Command line arguments (highest priority)
- docdialect.yaml config file
- Default values (fallback)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from jinja2 import TemplateNotFound

from . import __version__
from .config import RenderConfig, create_default_config
from .dialects import DIALECTS, get_dialect
from .errors import InvalidLevelError
from .models import load_package
from .writer import PageWriter

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Load the config file and apply command line overrides."""
    config = RenderConfig.load(args.config)
    data = config.model_dump()

    if args.dialect:
        data["dialect"] = args.dialect
    if args.default_language:
        data["default_language"] = args.default_language
    if args.index:
        data["include_index"] = True
    if args.no_header_comment:
        data["output"]["header_comment"] = False

    return RenderConfig.model_validate(data)


def cmd_render(args: argparse.Namespace) -> int:
    """Render a documentation tree."""
    try:
        config = build_config(args)
        package = load_package(args.tree)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error loading input: {e}", file=sys.stderr)
        return 1

    logger.debug("Loaded %s from %s", package.title, args.tree)
    writer = PageWriter(config)

    try:
        if args.stdout:
            print(writer.render_page(package), end="")
        else:
            path = writer.write_page(package, args.output)
            print(f"Generated: {path}")
    except InvalidLevelError as e:
        print(f"Error rendering {package.title}: {e}", file=sys.stderr)
        return 1
    except TemplateNotFound as e:
        print(f"Error: page template not found: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_dialects(args: argparse.Namespace) -> int:
    """List available dialects."""
    print(f"{'Name':<12} {'Class':<24} {'Extension':<10} {'Default language'}")
    print("-" * 64)
    for name in sorted(DIALECTS):
        dialect = get_dialect(name)
        print(
            f"{name:<12} {type(dialect).__name__:<24} "
            f"{dialect.extension:<10} {dialect.default_language}"
        )
    return 0


def cmd_init_config(args: argparse.Namespace) -> int:
    """Create a default configuration file."""
    output_path = Path(args.output)

    if output_path.exists():
        print(f"Config file already exists: {output_path}")
        response = input("Overwrite? [y/N] ").strip().lower()
        if response != "y":
            print("Cancelled.")
            return 0

    try:
        create_default_config(output_path)
        print(f"Created config file: {output_path}")
    except OSError as e:
        print(f"Error creating config file: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="docdialect",
        description="Render documentation trees into markdown or Asciidoc",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render a tree to docs/<package>.md
  docdialect render tree.yaml

  # Render as Asciidoc with an index, to stdout
  docdialect render tree.json -d asciidoc --index --stdout

  # Use a config file
  docdialect render tree.yaml -c docdialect.yaml -o site/

  # Create a default config file
  docdialect init-config
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a documentation tree")
    render_parser.add_argument(
        "tree",
        help="Documentation tree file (.yaml, .yml or .json)",
    )
    render_parser.add_argument(
        "-d", "--dialect",
        choices=sorted(DIALECTS),
        help="Output dialect (default: from config, else github)",
    )
    render_parser.add_argument(
        "-c", "--config",
        help="YAML config file (default: ./docdialect.yaml if present)",
    )
    render_parser.add_argument(
        "-o", "--output",
        help="Output directory (default: from config, else docs)",
    )
    render_parser.add_argument(
        "--index",
        action="store_true",
        help="Include an index of functions, types and methods",
    )
    render_parser.add_argument(
        "--default-language",
        help="Language tag for code blocks without one",
    )
    render_parser.add_argument(
        "--no-header-comment",
        action="store_true",
        help="Omit the 'code generated' comment at the top of the page",
    )
    render_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the page instead of writing a file",
    )

    # Dialects command
    subparsers.add_parser("dialects", help="List available output dialects")

    # Init-config command
    init_config_parser = subparsers.add_parser(
        "init-config",
        help="Create a default configuration file",
    )
    init_config_parser.add_argument(
        "-o", "--output",
        default="docdialect.yaml",
        help="Output file path (default: docdialect.yaml)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "dialects":
        return cmd_dialects(args)
    elif args.command == "init-config":
        return cmd_init_config(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
