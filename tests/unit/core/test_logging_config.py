"""Unit tests for structured logging setup."""

from __future__ import annotations

import pytest

from core.logging_config import configure_logging, get_logger


def test_get_logger_binds_module_name(capsys: pytest.CaptureFixture[str]) -> None:
    """Module loggers should log key/value lines naming their module."""
    configure_logging("info")
    logger = get_logger("csvmerge.sample")

    logger.info("sample_event", rows=3)
    output = capsys.readouterr().out

    assert "event='sample_event'" in output
    assert "logger_name='csvmerge.sample'" in output
    assert "rows=3" in output


def test_configure_logging_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Events below the configured level are dropped."""
    configure_logging("warning")

    get_logger("csvmerge.sample").info("hidden_event")

    assert capsys.readouterr().out == ""
