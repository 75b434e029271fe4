"""Rewrite engine — detect guarded syscall sites and inject panics."""

from syscallguard.rewrite.pipeline import process_file, rewrite_source
from syscallguard.rewrite.schemas import (
    FileResult,
    FormatResult,
    GuardSite,
    InjectionResult,
    RunSummary,
    SourceFile,
    SourcePosition,
)

__all__ = [
    "FileResult",
    "FormatResult",
    "GuardSite",
    "InjectionResult",
    "RunSummary",
    "SourceFile",
    "SourcePosition",
    "process_file",
    "rewrite_source",
]
