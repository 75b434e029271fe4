"""Run the rewrite pipeline over every Go file in a directory tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from syscallguard.config import Settings
from syscallguard.resilience.errors import (
    ProcessingError,
    classify_error,
)
from syscallguard.rewrite.pipeline import process_file
from syscallguard.rewrite.schemas import FileResult, RunSummary
from syscallguard.walker import find_source_files

logger = logging.getLogger(__name__)


def process_directory(
    root: Path | str,
    settings: Settings | None = None,
    *,
    dry_run: bool = False,
    on_file: Callable[[FileResult], None] | None = None,
) -> RunSummary:
    """Process files one at a time, in lexical order.

    Stops at the first fatal file error: the failing file's result is
    passed to ``on_file`` and the :class:`ProcessingError` propagates.
    Files processed before the failure keep their changes.
    """
    cfg = settings or Settings()
    summary = RunSummary()

    for path in find_source_files(Path(root), cfg):
        try:
            result = process_file(path, cfg, dry_run=dry_run)
        except ProcessingError as exc:
            failed = FileResult(
                path=path, outcome=exc.outcome, error=str(exc.cause)
            )
            summary.files.append(failed)
            if on_file is not None:
                on_file(failed)
            logger.error(
                "event=file_failed path=%s class=%s outcome=%s",
                path,
                classify_error(exc).value,
                exc.outcome,
            )
            raise

        summary.files.append(result)
        if on_file is not None:
            on_file(result)

    logger.info(
        "event=run_complete root=%s scanned=%d modified=%d fallbacks=%d",
        root,
        summary.scanned,
        summary.modified,
        summary.fallbacks,
    )
    return summary
