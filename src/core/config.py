"""Runtime configuration model for csvmerge.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    ENCODING_ENV,
    LEGACY_OUTPUT_PATHS_ENV,
    LOG_LEVEL_ENV,
    STOP_AT_BLANK_LINE_ENV,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import MergeConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class MergeConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structlog level name.
        encoding: Text encoding for input and output CSV files.
        stop_at_blank_line: Stop reading a file at its first empty line.
        legacy_output_paths: Concatenate output directory and company name
            as raw strings instead of joining them as paths.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    encoding: str = DEFAULT_ENCODING
    stop_at_blank_line: bool = True
    legacy_output_paths: bool = False

    @classmethod
    def from_env(cls) -> "MergeConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            MergeConfigError: If environment values are invalid.
        """
        return cls(
            log_level=_parse_log_level(os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)),
            encoding=os.getenv(ENCODING_ENV, DEFAULT_ENCODING),
            stop_at_blank_line=_parse_bool(STOP_AT_BLANK_LINE_ENV, True),
            legacy_output_paths=_parse_bool(LEGACY_OUTPUT_PATHS_ENV, False),
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse and validate the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Lowercased level name.

    Raises:
        MergeConfigError: If the level is not supported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise MergeConfigError(
            f"Invalid {LOG_LEVEL_ENV} value: expected one of "
            f"{SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return level


def _parse_bool(env_name: str, default: bool) -> bool:
    """Parse a boolean flag from the environment.

    Args:
        env_name: Variable name.
        default: Value used when the variable is unset or empty.

    Returns:
        Parsed flag.

    Raises:
        MergeConfigError: If the value is not a recognized boolean.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None or not raw_value.strip():
        return default
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise MergeConfigError(
        f"Invalid {env_name} value: expected a boolean such as "
        f"'true' or 'false', got '{raw_value}'."
    )
