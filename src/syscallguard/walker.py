"""Find Go source files under a directory tree."""

from __future__ import annotations

from pathlib import Path

import pathspec

from syscallguard.config import SOURCE_EXTENSION, Settings


def find_source_files(
    root: Path,
    settings: Settings | None = None,
) -> list[Path]:
    """Return every ``.go`` regular file under ``root`` in lexical order.

    * Skips directories named in ``settings.skip_directories``.
    * Honors the root ``.gitignore`` when ``settings.respect_gitignore``.
    * Does not descend into symlinked directories, and skips symlinked
      files that resolve outside the root.
    """
    cfg = settings or Settings()
    root = Path(root)
    if not root.is_dir():
        msg = f"not a directory: {root}"
        raise NotADirectoryError(msg)

    ignore_spec = (
        _load_gitignore(root) if cfg.respect_gitignore else None
    )
    return _walk_files_inner(
        root,
        root,
        set(cfg.skip_directories),
        ignore_spec,
        root.resolve(),
    )


def _walk_files_inner(
    current: Path,
    root: Path,
    skip_dirs: set[str],
    ignore_spec: pathspec.PathSpec | None,
    resolved_root: Path,
) -> list[Path]:
    """Recursive walk helper with symlink protection."""
    files: list[Path] = []
    for item in sorted(current.iterdir()):
        rel = item.relative_to(root).as_posix()
        if item.is_symlink():
            if item.is_dir():
                continue
            if not item.resolve().is_relative_to(resolved_root):
                continue
        if item.is_dir():
            if item.name in skip_dirs:
                continue
            if ignore_spec is not None and ignore_spec.match_file(rel + "/"):
                continue
            files.extend(
                _walk_files_inner(
                    item, root, skip_dirs, ignore_spec, resolved_root,
                )
            )
        elif item.is_file() and item.name.endswith(SOURCE_EXTENSION):
            if ignore_spec is None or not ignore_spec.match_file(rel):
                files.append(item)
    return files


def _load_gitignore(root: Path) -> pathspec.PathSpec:
    """Load .gitignore patterns using pathspec."""
    gitignore = root / ".gitignore"
    if not gitignore.exists():
        return pathspec.GitIgnoreSpec.from_lines([])
    try:
        with open(gitignore, encoding="utf-8") as f:
            return pathspec.GitIgnoreSpec.from_lines(f)
    except OSError:
        return pathspec.GitIgnoreSpec.from_lines([])
