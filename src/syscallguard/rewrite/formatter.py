"""Canonicalize edited Go source through gofmt."""

from __future__ import annotations

import shutil
import subprocess

from syscallguard.config import Settings
from syscallguard.constants import ERROR_TRUNCATION_CHARS
from syscallguard.resilience.errors import FormatError
from syscallguard.rewrite.schemas import FormatResult


def is_gofmt_available(settings: Settings | None = None) -> bool:
    """Check if the configured gofmt executable is on PATH."""
    cfg = settings or Settings()
    return shutil.which(cfg.gofmt_path) is not None


def run_gofmt(content: bytes, settings: Settings | None = None) -> bytes:
    """Pipe ``content`` through gofmt and return its output.

    Raises :class:`FormatError` when gofmt is missing, times out, or
    rejects the input.
    """
    cfg = settings or Settings()
    try:
        proc = subprocess.run(
            [cfg.gofmt_path],
            input=content,
            capture_output=True,
            timeout=cfg.gofmt_timeout_seconds,
            check=False,
        )
    except FileNotFoundError as exc:
        msg = f"formatter not found: {cfg.gofmt_path}"
        raise FormatError(msg) from exc
    except subprocess.TimeoutExpired as exc:
        msg = f"formatter timed out after {cfg.gofmt_timeout_seconds}s"
        raise FormatError(msg) from exc
    except OSError as exc:
        msg = f"formatter could not run: {exc}"
        raise FormatError(msg) from exc

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise FormatError(stderr[:ERROR_TRUNCATION_CHARS] or "gofmt failed")
    return proc.stdout


def canonicalize(
    content: bytes, settings: Settings | None = None
) -> FormatResult:
    """Format ``content``, falling back to it unchanged on failure.

    Both outcomes are returned rather than raised so the caller always
    has bytes to write.
    """
    try:
        return FormatResult(
            content=run_gofmt(content, settings), formatted=True
        )
    except FormatError as exc:
        return FormatResult(content=content, formatted=False, error=str(exc))
