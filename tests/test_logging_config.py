"""Tests for singleton logging configuration."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from syscallguard.logging_config import LOG_DATEFMT, LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def _reset_flag() -> None:
    """Reset the singleton flag before each test."""
    import syscallguard.logging_config as mod

    mod._configured = False


def test_setup_logging_is_idempotent() -> None:
    with patch("syscallguard.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
        setup_logging()  # second call is no-op
        mock_bc.assert_called_once()


def test_force_reconfigures() -> None:
    with patch("syscallguard.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
        setup_logging("DEBUG", force=True)
    assert mock_bc.call_count == 2
    assert mock_bc.call_args.kwargs["force"] is True


def test_uses_shared_format() -> None:
    with patch("syscallguard.logging_config.logging.basicConfig") as mock_bc:
        setup_logging("warning")
    kwargs = mock_bc.call_args.kwargs
    assert kwargs["format"] == LOG_FORMAT
    assert kwargs["datefmt"] == LOG_DATEFMT
    assert kwargs["level"] == 30
