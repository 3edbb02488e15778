"""Find and parse the Go source file that declares the API types.

Only files named exactly SOURCE_NAME are read; everything else in the
directory is ignored. Parsed files are grouped by their package clause.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from .errors import ParseError

SOURCE_NAME = "ipinfo.go"

GO_LANGUAGE = Language(tree_sitter_go.language())

logger = logging.getLogger(__name__)


@dataclass
class ParsedFile:
    """One parsed Go file."""

    filename: str
    package: str
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node


def new_parser() -> Parser:
    """Return a tree-sitter parser for Go."""
    return Parser(GO_LANGUAGE)


def first_error(node: Node) -> Node | None:
    """Return the first ERROR or missing node under node, in source order."""
    if not node.has_error:
        return None
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        found = first_error(child)
        if found is not None:
            return found
    # has_error is set but no child carries it
    return node


def _package_clause(root: Node, filename: str) -> Node:
    """Return the package clause, which must be the first declaration."""
    decls = [child for child in root.named_children if child.type != "comment"]
    if not decls or decls[0].type != "package_clause":
        raise ParseError(f"{filename}:1:1: expected 'package' clause")
    for extra in decls[1:]:
        if extra.type == "package_clause":
            line, column = extra.start_point
            raise ParseError(f"{filename}:{line + 1}:{column + 1}: expected declaration, found 'package'")
    return decls[0]


def _package_name(clause: Node) -> str:
    # package_identifier is the clause's only named child
    return clause.named_children[0].text.decode()


def parse_source(source: bytes, filename: str = SOURCE_NAME) -> ParsedFile:
    """Parse Go source and return it with its package name."""
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        line = source.count(b"\n", 0, e.start) + 1
        raise ParseError(f"{filename}:{line}: invalid UTF-8 encoding") from e

    tree = new_parser().parse(source)
    bad = first_error(tree.root_node)
    if bad is not None:
        line, column = bad.start_point
        raise ParseError(f"{filename}:{line + 1}:{column + 1}: syntax error")

    package = _package_name(_package_clause(tree.root_node, filename))
    return ParsedFile(filename=filename, package=package, tree=tree)


def scan_directory(
    directory: Path | str = ".",
    source_name: str = SOURCE_NAME,
) -> dict[str, list[ParsedFile]]:
    """Parse every file named source_name in directory, grouped by package."""
    packages: dict[str, list[ParsedFile]] = {}
    try:
        paths = sorted(Path(directory).iterdir())
    except OSError as e:
        raise ParseError(f"cannot list {directory}: {e}") from e
    for path in paths:
        if path.name != source_name or not path.is_file():
            continue
        logger.info("Processing %s...", path.name)
        try:
            source = path.read_bytes()
        except OSError as e:
            raise ParseError(f"cannot read {path}: {e}") from e
        parsed = parse_source(source, path.name)
        packages.setdefault(parsed.package, []).append(parsed)
    return packages
