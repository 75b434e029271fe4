"""Singleton logging configuration.

setup_logging() configures the root logger once; later calls are no-ops
unless ``force`` is set (the CLI uses it to honor ``--verbose``).
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_configured = False


def setup_logging(level: str = "INFO", *, force: bool = False) -> None:
    """Configure the root logger with the shared format.

    Idempotent — a second call is a no-op unless ``force`` is True.
    """
    global _configured  # noqa: PLW0603
    if _configured and not force:
        return
    _configured = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=force,
    )
