"""Pydantic models for the rewrite data flow."""

from pathlib import Path

import tree_sitter
from pydantic import BaseModel, ConfigDict, Field

from syscallguard.constants import FileOutcome


class SourcePosition(BaseModel):
    """A location in the original file content."""

    model_config = ConfigDict(frozen=True)

    byte_offset: int
    line: int  # 1-based
    column: int  # 0-based, in bytes


class SourceFile(BaseModel):
    """Output of the tree builder — original bytes plus their syntax tree.

    Node positions refer to ``content``; they must not be applied to an
    edited line buffer without compensating for inserted lines.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: Path
    content: bytes
    lines: list[bytes]
    tree: tree_sitter.Tree


class GuardSite(BaseModel):
    """A statement that needs a guard inserted above it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    position: SourcePosition  # start of the enclosing statement
    call: tree_sitter.Node  # matched call_expression
    primitive: str


class InjectionResult(BaseModel):
    """Output of the injector — the edited buffer and what happened."""

    lines: list[bytes]
    inserted: int = 0
    skipped: int = 0


class FormatResult(BaseModel):
    """Output of the canonicalizer; ``formatted`` is False on fallback."""

    content: bytes
    formatted: bool
    error: str | None = None


class FileResult(BaseModel):
    """Per-file report handed back to the orchestrator."""

    path: Path
    outcome: FileOutcome
    sites: int = 0
    inserted: int = 0
    error: str | None = None

    @property
    def changed(self) -> bool:
        return self.outcome in (
            FileOutcome.SUCCEEDED,
            FileOutcome.FORMAT_FALLBACK,
        )


class RunSummary(BaseModel):
    """All file results from one directory run."""

    files: list[FileResult] = Field(default_factory=lambda: list[FileResult]())

    @property
    def scanned(self) -> int:
        return len(self.files)

    @property
    def modified(self) -> int:
        return sum(1 for f in self.files if f.changed)

    @property
    def fallbacks(self) -> int:
        return sum(
            1 for f in self.files
            if f.outcome == FileOutcome.FORMAT_FALLBACK
        )

    @property
    def insertions(self) -> int:
        return sum(f.inserted for f in self.files)
