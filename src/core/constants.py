"""Core constants used across csvmerge modules.

This module centralizes file-format and configuration constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

CSV_SUFFIX = ".csv"
CSV_DELIMITER = ","
RECORD_FIELD_COUNT = 5
INVALID_VERSION = -1
MAX_VERSION = 2**31 - 1
OUTPUT_HEADER = "user_id,first_name,last_name,version,insurance_company"
HEADER_ROW_NUMBER = 1
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_LEVEL_ENV = "CSVMERGE_LOG_LEVEL"
ENCODING_ENV = "CSVMERGE_ENCODING"
STOP_AT_BLANK_LINE_ENV = "CSVMERGE_STOP_AT_BLANK_LINE"
LEGACY_OUTPUT_PATHS_ENV = "CSVMERGE_LEGACY_OUTPUT_PATHS"
