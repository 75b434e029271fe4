"""Shared constants — single source of truth for cross-module values.

StrEnum members are str-compatible, so they print and log as their value.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class FileOutcome(StrEnum):
    """Terminal state of one file's pass through the pipeline."""

    UNCHANGED = "unchanged"
    SUCCEEDED = "succeeded"
    FORMAT_FALLBACK = "format_fallback"
    READ_FAILED = "read_failed"
    PARSE_FAILED = "parse_failed"
    WRITE_FAILED = "write_failed"


# ── Numeric Constants ────────────────────────────────────

LINE_TERMINATOR = b"\n"

# Max characters of formatter stderr kept in logs and results
ERROR_TRUNCATION_CHARS = 500
