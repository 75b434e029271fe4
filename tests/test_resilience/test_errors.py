"""Tests for error types and classification."""

from __future__ import annotations

from pathlib import Path

from syscallguard.constants import FileOutcome
from syscallguard.resilience.errors import (
    ErrorClass,
    FormatError,
    ParseError,
    ProcessingError,
    classify_error,
)


def test_parse_error_message() -> None:
    err = ParseError("pkg/a.go", 3, 7, "syntax error: unexpected '{'")
    assert str(err) == "pkg/a.go:3:7: syntax error: unexpected '{'"
    assert err.path == Path("pkg/a.go")


def test_processing_error_wraps_cause() -> None:
    cause = PermissionError("denied")
    err = ProcessingError(Path("a.go"), cause, FileOutcome.WRITE_FAILED)
    assert str(err) == "processing a.go: denied"
    assert err.cause is cause
    assert err.outcome == FileOutcome.WRITE_FAILED


# ── classify_error ───────────────────────────────────────────


def test_classify_parse_error() -> None:
    assert classify_error(ParseError("a.go", 1, 1, "x")) == ErrorClass.PARSE


def test_classify_os_error_as_io() -> None:
    assert classify_error(FileNotFoundError("a.go")) == ErrorClass.IO


def test_classify_format_error() -> None:
    assert classify_error(FormatError("gofmt failed")) == ErrorClass.FORMAT


def test_classify_unwraps_processing_error() -> None:
    wrapped = ProcessingError(
        "a.go", ParseError("a.go", 1, 1, "x"), FileOutcome.PARSE_FAILED
    )
    assert classify_error(wrapped) == ErrorClass.PARSE


def test_classify_unknown() -> None:
    assert classify_error(RuntimeError("boom")) == ErrorClass.UNKNOWN
