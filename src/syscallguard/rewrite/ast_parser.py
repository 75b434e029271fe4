"""Parse Go source bytes into tree-sitter syntax trees."""

from __future__ import annotations

import importlib
from pathlib import Path

import tree_sitter

from syscallguard.config import GRAMMAR_MODULE
from syscallguard.resilience.errors import ParseError
from syscallguard.rewrite.schemas import SourceFile, SourcePosition
from syscallguard.text import split_lines


def parse_source(path: Path | str, content: bytes) -> SourceFile:
    """Parse one file's bytes, keeping comments and byte positions.

    Raises :class:`ParseError` at the first syntax error. tree-sitter
    recovers from errors instead of failing, so the tree is checked
    explicitly.
    """
    parser = _get_parser()
    tree = parser.parse(content)

    if tree.root_node.has_error:
        bad = _first_error_node(tree.root_node) or tree.root_node
        if bad.is_missing:
            detail = f"expected {bad.type!r}"
        else:
            snippet = content[bad.start_byte:bad.end_byte].split(b"\n", 1)[0]
            detail = f"unexpected {snippet.decode('utf-8', 'replace')[:40]!r}"
        raise ParseError(
            path,
            bad.start_point[0] + 1,
            bad.start_point[1] + 1,
            f"syntax error: {detail}",
        )

    return SourceFile(
        path=Path(path),
        content=content,
        lines=split_lines(content),
        tree=tree,
    )


def position_of(node: tree_sitter.Node) -> SourcePosition:
    """Resolve a node's start to a position in the original content."""
    row, column = node.start_point
    return SourcePosition(
        byte_offset=node.start_byte, line=row + 1, column=column
    )


def _first_error_node(node: tree_sitter.Node) -> tree_sitter.Node | None:
    """Return the first ERROR or missing node in document order."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None


# ---------------------------------------------------------------------------
# Parser cache
# ---------------------------------------------------------------------------

_parser_cache: dict[str, tree_sitter.Parser] = {}


def _get_parser() -> tree_sitter.Parser:
    """Get or create the cached Go parser."""
    if GRAMMAR_MODULE in _parser_cache:
        return _parser_cache[GRAMMAR_MODULE]

    mod = importlib.import_module(GRAMMAR_MODULE)
    capsule: object = mod.language()
    lang = tree_sitter.Language(capsule)
    parser = tree_sitter.Parser(lang)
    _parser_cache[GRAMMAR_MODULE] = parser
    return parser
