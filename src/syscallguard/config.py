"""Environment-based configuration and rewriter constants."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and SYSCALLGUARD_* environment variables."""

    # Formatter
    gofmt_path: str = "gofmt"
    gofmt_timeout_seconds: int = 30

    # Traversal
    skip_directories: Annotated[list[str], NoDecode] = []
    respect_gitignore: bool = False

    # Logging
    log_level: str = "INFO"

    @field_validator("skip_directories", mode="before")
    @classmethod
    def _parse_skip_dirs(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("gofmt_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("gofmt_timeout_seconds must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Unknown log level %r, using INFO", v)
            return "INFO"
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SYSCALLGUARD_",
        "extra": "ignore",
    }


# Raw invocation functions of Go's syscall package. Matched by bare
# identifier only; qualified calls such as syscall.Syscall are not guarded.
GUARDED_PRIMITIVES: frozenset[str] = frozenset({
    "Syscall",
    "Syscall6",
    "RawSyscall",
    "RawSyscall6",
    "SyscallNoError",
    "RawSyscallNoError",
})

SOURCE_EXTENSION = ".go"

GUARD_CALL = "panic"
GUARD_MESSAGE_PREFIX = "syscall not supported in wasm"

# Scanned for on the line above a call to detect an existing guard.
GUARD_MARKER: bytes = f'{GUARD_CALL}("{GUARD_MESSAGE_PREFIX}:'.encode()

# Embedded in the guard when the call span cannot be recovered.
FALLBACK_CALL_TEXT = "syscall"

GRAMMAR_MODULE = "tree_sitter_go"
