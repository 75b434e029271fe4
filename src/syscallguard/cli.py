"""CLI entry point — ``syscallguard <directory>``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from syscallguard import __version__
from syscallguard.config import Settings
from syscallguard.logging_config import setup_logging
from syscallguard.resilience.errors import GuardError
from syscallguard.rewrite.schemas import FileResult


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"syscallguard {__version__}")
        return

    if args.directory is None:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        "DEBUG" if args.verbose else settings.log_level,
        force=args.verbose,
    )
    _run(Path(args.directory), settings, dry_run=args.dry_run)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="syscallguard",
        description=(
            "Insert panic guards before raw syscall invocations "
            "in every Go file under a directory."
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Root directory to rewrite in place",
    )
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        help="Report files that would change without writing them",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return parser


def _run(root: Path, settings: Settings, *, dry_run: bool) -> None:
    """Execute the rewrite and map failures to exit status 1."""
    from syscallguard.orchestrator import process_directory

    def on_file(result: FileResult) -> None:
        if result.inserted == 0:
            return
        if dry_run:
            print(
                f"Would process: {result.path} "
                f"({result.inserted} insertions)"
            )
        else:
            print(f"Processed: {result.path}")

    try:
        summary = process_directory(
            root, settings, dry_run=dry_run, on_file=on_file
        )
    except (GuardError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if summary.fallbacks:
        print(
            f"Warning: {summary.fallbacks} file(s) written unformatted",
            file=sys.stderr,
        )
