"""
Recursive composition of documentation trees.

Every function here is a pure function of a tree node and an explicit
dialect: output is built only from dialect primitives, children are rendered
in their original order, and levels are taken from the tree as-is. Parts are
collected and joined only once a whole subtree has rendered, so an
InvalidLevelError anywhere below a node leaves no partial output behind.
"""

from __future__ import annotations

import logging
import re
import textwrap
from typing import TYPE_CHECKING, Iterator

from .models import DocNode, Example, Func, Package, Type, Value

if TYPE_CHECKING:
    from .dialects import Dialect

logger = logging.getLogger(__name__)

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")
_LIST_ITEM_RE = re.compile(r"^[-*]\s+")


def _doc_blocks(doc: str) -> Iterator[tuple[str, list[str]]]:
    """Split doc text into ("code" | "list" | "paragraph", lines) blocks.

    Consecutive indented blocks are merged so that code containing blank
    lines stays in one block.
    """
    blocks: list[tuple[str, list[str]]] = []

    for chunk in _BLANK_LINE_RE.split(doc.strip("\n")):
        lines = [line for line in chunk.split("\n") if line.strip()]
        if not lines:
            continue

        if all(line[0] in " \t" for line in lines):
            kind = "code"
            lines = chunk.split("\n")
            while not lines[0].strip():
                lines.pop(0)
            while not lines[-1].strip():
                lines.pop()
        elif all(_LIST_ITEM_RE.match(line) for line in lines):
            kind = "list"
        else:
            kind = "paragraph"

        if kind == "code" and blocks and blocks[-1][0] == "code":
            blocks[-1][1].extend(["", *lines])
        else:
            blocks.append((kind, lines))

    yield from blocks


def render_doc(doc: str, dialect: Dialect) -> str:
    """Render free-form doc text.

    Indented blocks become code blocks in the dialect's default language,
    blocks made only of ``-``/``*`` items become list entries and everything
    else becomes an escaped paragraph.
    """
    parts = []

    for kind, lines in _doc_blocks(doc):
        if kind == "code":
            parts.append(dialect.code_block("", textwrap.dedent("\n".join(lines))))
        elif kind == "list":
            for line in lines:
                item = _LIST_ITEM_RE.sub("", line, count=1).strip()
                parts.append(dialect.list_entry(0, dialect.escape(item)))
            parts.append("\n")
        else:
            text = " ".join(line.strip() for line in lines)
            parts.append(dialect.paragraph(dialect.escape(text)))

    return "".join(parts)


def _node_header(node: DocNode, dialect: Dialect, prefix: str) -> str:
    """Header at the node's level: escaped prefix plus the linked name."""
    name = dialect.link(dialect.escape(node.name), dialect.code_href(node.location))
    return dialect.raw_header(node.level, dialect.escape(prefix) + name)


def render_value(value: Value, dialect: Dialect) -> str:
    """Render a constant or variable block: declaration, then doc."""
    logger.debug("Rendering value block %r", value.name)
    parts = [
        dialect.code_block("", value.decl),
        render_doc(value.doc, dialect),
    ]
    return "".join(parts)


def render_example(example: Example, dialect: Dialect) -> str:
    """Render an example as a collapsible block holding doc, code and output."""
    logger.debug("Rendering example %r", example.title)
    parts = [
        dialect.accordion_header(example.title),
        render_doc(example.doc, dialect),
        dialect.code_block("", example.code),
    ]

    if example.output.strip():
        parts.append(dialect.paragraph(dialect.bold("Output")))
        parts.append(dialect.code_block("text", example.output))

    parts.append(dialect.accordion_terminator())
    return "".join(parts)


def render_func(func: Func, dialect: Dialect) -> str:
    """Render a function or method.

    Args:
        func: Function node (a method when ``receiver`` is set)
        dialect: Output dialect

    Returns:
        Rendered text

    Raises:
        InvalidLevelError: If the function's level is less than 1
    """
    logger.debug("Rendering %s at level %d", func.title, func.level)

    prefix = f"func ({func.receiver}) " if func.is_method else "func "
    parts = [
        _node_header(func, dialect, prefix),
        render_doc(func.doc, dialect),
        dialect.code_block("", func.decl),
    ]
    parts.extend(render_example(example, dialect) for example in func.examples)

    return "".join(parts)


def render_type(type_: Type, dialect: Dialect) -> str:
    """Render a type and everything attached to it.

    Order: header, doc, declaration, consts, vars, examples, funcs (usually
    constructors), methods. Empty collections contribute nothing.

    Raises:
        InvalidLevelError: If the type or any of its children has a level
            less than 1
    """
    logger.debug("Rendering %s at level %d", type_.title, type_.level)

    parts = [
        _node_header(type_, dialect, "type "),
        render_doc(type_.doc, dialect),
        dialect.code_block("", type_.decl),
    ]
    parts.extend(render_value(value, dialect) for value in type_.consts)
    parts.extend(render_value(value, dialect) for value in type_.vars)
    parts.extend(render_example(example, dialect) for example in type_.examples)
    parts.extend(render_func(func, dialect) for func in type_.funcs)
    parts.extend(render_func(method, dialect) for method in type_.methods)

    return "".join(parts)


def render_index(package: Package, dialect: Dialect) -> str:
    """Render a list of local links to every function, type and method."""
    entries = []

    for func in package.funcs:
        entries.append(dialect.list_entry(0, dialect.local_href(dialect.escape(func.title))))

    for type_ in package.types:
        entries.append(dialect.list_entry(0, dialect.local_href(dialect.escape(type_.title))))
        for func in [*type_.funcs, *type_.methods]:
            entries.append(dialect.list_entry(1, dialect.local_href(dialect.escape(func.title))))

    if not entries:
        return ""

    return dialect.paragraph(dialect.bold("Index")) + "".join(entries) + "\n"


def render_package(package: Package, dialect: Dialect, *, include_index: bool = False) -> str:
    """Render a whole package.

    Order: header, import statement, doc, optional index, consts, vars,
    examples, funcs, types.

    Args:
        package: Root of the documentation tree
        dialect: Output dialect
        include_index: Whether to emit an index of local links

    Returns:
        Rendered document text

    Raises:
        InvalidLevelError: If any node in the tree has a level less than 1
    """
    logger.debug("Rendering %s with %s", package.title, dialect.name)

    parts = [_node_header(package, dialect, "package ")]
    if package.import_path:
        parts.append(dialect.code_block("", f'import "{package.import_path}"'))
    parts.append(render_doc(package.doc, dialect))

    if include_index:
        parts.append(render_index(package, dialect))

    parts.extend(render_value(value, dialect) for value in package.consts)
    parts.extend(render_value(value, dialect) for value in package.vars)
    parts.extend(render_example(example, dialect) for example in package.examples)
    parts.extend(render_func(func, dialect) for func in package.funcs)
    parts.extend(render_type(type_, dialect) for type_ in package.types)

    return "".join(parts)


def render(node: DocNode, dialect: Dialect, *, include_index: bool = False) -> str:
    """Render any documentation node with the matching composer.

    Raises:
        TypeError: If the node is not a known documentation node type
    """
    if isinstance(node, Package):
        return render_package(node, dialect, include_index=include_index)
    if isinstance(node, Type):
        return render_type(node, dialect)
    if isinstance(node, Func):
        return render_func(node, dialect)
    if isinstance(node, Example):
        return render_example(node, dialect)
    if isinstance(node, Value):
        return render_value(node, dialect)
    raise TypeError(f"Cannot render node of type {type(node).__name__}")
