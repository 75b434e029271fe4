"""Shared test fixtures — Go fixture tree, formatter-free settings."""

import os

# Keep a developer's local configuration out of the test run.
for _name in list(os.environ):
    if _name.startswith("SYSCALLGUARD_"):
        del os.environ[_name]

import shutil
from pathlib import Path

import pytest

from syscallguard.config import Settings
from syscallguard.rewrite.ast_parser import parse_source
from syscallguard.rewrite.detector import find_guard_sites
from syscallguard.rewrite.schemas import GuardSite, SourceFile

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "go_repo"

MISSING_GOFMT = "syscallguard-test-missing-gofmt"

requires_gofmt = pytest.mark.skipif(
    shutil.which("gofmt") is None, reason="gofmt not installed"
)


def parse_go(source: str) -> tuple[SourceFile, list[GuardSite]]:
    """Parse Go text and detect its guard sites.

    Shared helper used by detector and injector tests.
    """
    parsed = parse_source(Path("test.go"), source.encode("utf-8"))
    return parsed, find_guard_sites(parsed)


@pytest.fixture
def no_gofmt() -> Settings:
    """Settings whose formatter cannot be found — forces raw writes."""
    return Settings(gofmt_path=MISSING_GOFMT)


@pytest.fixture
def go_repo(tmp_path: Path) -> Path:
    """A writable copy of the Go fixture tree."""
    dest = tmp_path / "go_repo"
    shutil.copytree(FIXTURE_DIR, dest)
    return dest
