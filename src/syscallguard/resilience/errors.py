"""Error types and classification for per-file processing.

Per-file failures are tagged with an error class in the run log.
Parse and I/O errors halt the run; formatter failures are recovered
inside the pipeline and never propagate.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from syscallguard.constants import FileOutcome


class GuardError(Exception):
    """Base class for rewriter errors."""


class ParseError(GuardError):
    """Source is not syntactically valid Go."""

    def __init__(
        self, path: Path | str, line: int, column: int, detail: str
    ) -> None:
        self.path = Path(path)
        self.line = line
        self.column = column
        self.detail = detail
        super().__init__(f"{path}:{line}:{column}: {detail}")


class FormatError(GuardError):
    """The formatter rejected the edited buffer or could not be run."""


class ProcessingError(GuardError):
    """A fatal per-file failure, tagged with the offending path.

    ``outcome`` records the pipeline stage that failed.
    """

    def __init__(
        self,
        path: Path | str,
        cause: BaseException,
        outcome: FileOutcome,
    ) -> None:
        self.path = Path(path)
        self.cause = cause
        self.outcome = outcome
        super().__init__(f"processing {path}: {cause}")


class ErrorClass(Enum):
    PARSE = "parse"  # malformed source — fatal for the file and the run
    IO = "io"  # read/write failure — fatal
    FORMAT = "format"  # formatter failure — recovered by raw write
    UNKNOWN = "unknown"  # unclassified — treated as fatal


def classify_error(error: BaseException) -> ErrorClass:
    """Classify an error, unwrapping ProcessingError to its cause."""
    if isinstance(error, ProcessingError):
        return classify_error(error.cause)
    if isinstance(error, ParseError):
        return ErrorClass.PARSE
    if isinstance(error, FormatError):
        return ErrorClass.FORMAT
    if isinstance(error, OSError):
        return ErrorClass.IO
    return ErrorClass.UNKNOWN
