"""Per-file pipeline: parse → detect → inject → canonicalize → write."""

from __future__ import annotations

import logging
from pathlib import Path

from syscallguard.config import Settings
from syscallguard.constants import FileOutcome
from syscallguard.resilience.errors import ParseError, ProcessingError
from syscallguard.rewrite.ast_parser import parse_source
from syscallguard.rewrite.detector import find_guard_sites
from syscallguard.rewrite.formatter import canonicalize
from syscallguard.rewrite.injector import inject_guards
from syscallguard.rewrite.schemas import FileResult
from syscallguard.text import join_lines

logger = logging.getLogger(__name__)


def rewrite_source(
    path: Path | str,
    content: bytes,
    settings: Settings | None = None,
) -> tuple[bytes | None, FileResult]:
    """Run the in-memory pipeline over one file's bytes.

    Returns ``(new_content, result)``. ``new_content`` is None when the
    file has no guard sites and must be left untouched. Raises
    :class:`ParseError` on malformed input; formatter failures degrade
    to the unformatted buffer.
    """
    source = parse_source(path, content)
    sites = find_guard_sites(source)
    if not sites:
        return None, FileResult(path=Path(path), outcome=FileOutcome.UNCHANGED)

    injection = inject_guards(sites, content, source.lines)
    formatted = canonicalize(join_lines(injection.lines), settings)

    if formatted.formatted:
        outcome = FileOutcome.SUCCEEDED
    else:
        outcome = FileOutcome.FORMAT_FALLBACK
        logger.warning(
            "event=format_fallback path=%s error=%s",
            path,
            formatted.error,
        )

    return formatted.content, FileResult(
        path=Path(path),
        outcome=outcome,
        sites=len(sites),
        inserted=injection.inserted,
        error=formatted.error,
    )


def process_file(
    path: Path | str,
    settings: Settings | None = None,
    *,
    dry_run: bool = False,
) -> FileResult:
    """Rewrite one file in place.

    The new content is computed fully before the single write. Read,
    parse and write failures raise :class:`ProcessingError` tagged with
    the failing stage.
    """
    file_path = Path(path)
    try:
        content = file_path.read_bytes()
    except OSError as exc:
        raise ProcessingError(file_path, exc, FileOutcome.READ_FAILED) from exc

    try:
        new_content, result = rewrite_source(file_path, content, settings)
    except ParseError as exc:
        raise ProcessingError(
            file_path, exc, FileOutcome.PARSE_FAILED
        ) from exc

    if new_content is None:
        return result

    if not dry_run:
        try:
            file_path.write_bytes(new_content)
        except OSError as exc:
            raise ProcessingError(
                file_path, exc, FileOutcome.WRITE_FAILED
            ) from exc

    logger.info(
        "event=file_processed path=%s sites=%d inserted=%d dry_run=%s",
        file_path,
        result.sites,
        result.inserted,
        dry_run,
    )
    return result
