"""Tests for the Go tree builder."""

from __future__ import annotations

from pathlib import Path

import pytest

from syscallguard.resilience.errors import ParseError
from syscallguard.rewrite.ast_parser import parse_source, position_of
from syscallguard.rewrite.schemas import SourceFile

VALID = b"package p\n\n// comment kept\nfunc f() {\n\tSyscall(1, 2, 3)\n}\n"


def test_parse_returns_source_file() -> None:
    result = parse_source(Path("a.go"), VALID)

    assert isinstance(result, SourceFile)
    assert result.path == Path("a.go")
    assert result.content == VALID
    assert result.lines == VALID.split(b"\n")
    assert result.tree.root_node.type == "source_file"


def test_comments_are_retained() -> None:
    """Comment nodes stay in the tree."""
    result = parse_source("a.go", VALID)
    types = [child.type for child in result.tree.root_node.children]
    assert "comment" in types


def test_position_maps_to_original_offsets() -> None:
    """Positions resolve to byte offsets and 1-based lines of the input."""
    result = parse_source("a.go", VALID)
    func = next(
        c for c in result.tree.root_node.children
        if c.type == "function_declaration"
    )
    pos = position_of(func)

    assert pos.line == 4
    assert pos.column == 0
    assert VALID[pos.byte_offset:].startswith(b"func f()")


def test_malformed_source_raises_parse_error() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_source("bad.go", b"package p\n\nfunc f( {\n")

    err = exc_info.value
    assert err.path == Path("bad.go")
    assert err.line >= 1
    assert err.column >= 1
    assert "syntax error" in str(err)
    assert str(err).startswith("bad.go:")


def test_parse_error_line_points_at_problem() -> None:
    """The reported line is where the first error sits, not line 1."""
    src = b"package p\n\nfunc ok() {}\n\nfunc broken() {\n\tx := \n}\n"
    with pytest.raises(ParseError) as exc_info:
        parse_source("bad.go", src)
    assert exc_info.value.line >= 5


def test_parser_is_cached() -> None:
    from syscallguard.rewrite import ast_parser

    parse_source("a.go", VALID)
    first = ast_parser._get_parser()
    assert ast_parser._get_parser() is first
