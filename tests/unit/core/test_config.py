"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import MergeConfig
from core.errors import MergeConfigError


def test_from_env_defaults_preserve_reference_behavior(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should keep blank-line stop and joined output paths."""
    for name in (
        "CSVMERGE_LOG_LEVEL",
        "CSVMERGE_ENCODING",
        "CSVMERGE_STOP_AT_BLANK_LINE",
        "CSVMERGE_LEGACY_OUTPUT_PATHS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = MergeConfig.from_env()

    assert config == MergeConfig(
        log_level="info",
        encoding="utf-8",
        stop_at_blank_line=True,
        legacy_output_paths=False,
    )


def test_from_env_reads_boolean_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    """Boolean variables should accept common spellings in any case."""
    monkeypatch.setenv("CSVMERGE_STOP_AT_BLANK_LINE", "No")
    monkeypatch.setenv("CSVMERGE_LEGACY_OUTPUT_PATHS", "ON")

    config = MergeConfig.from_env()

    assert config.stop_at_blank_line is False and config.legacy_output_paths is True


def test_from_env_raises_for_invalid_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unrecognized boolean text."""
    monkeypatch.setenv("CSVMERGE_LEGACY_OUTPUT_PATHS", "maybe")

    with pytest.raises(MergeConfigError):
        MergeConfig.from_env()


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for log levels structlog is not configured for."""
    monkeypatch.setenv("CSVMERGE_LOG_LEVEL", "verbose")

    with pytest.raises(MergeConfigError):
        MergeConfig.from_env()
