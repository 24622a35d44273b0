"""CSV data line parsing.

Turns one raw data line into a ``UserRecord`` or a diagnostic
explaining why the line was skipped.
"""

from __future__ import annotations

from core.constants import CSV_DELIMITER, INVALID_VERSION, MAX_VERSION, RECORD_FIELD_COUNT
from core.types import Diagnostic, ParsedLine, UserRecord


def parse_record_line(line: str, source_file: str, row_number: int) -> ParsedLine:
    """Parse one data line into a record.

    Args:
        line: Raw line without its terminator.
        source_file: File the line came from, for diagnostics.
        row_number: One-based row number within the file.

    Returns:
        A parsed line holding either the record or a warning diagnostic.
    """
    fields = split_fields(line)
    if len(fields) != RECORD_FIELD_COUNT:
        return ParsedLine(
            diagnostic=Diagnostic(
                kind="malformed_line",
                severity="warning",
                message=(
                    f"Incorrect CSV field count in file [{source_file}] on row "
                    f"{row_number}. Line: [{line}] skipped."
                ),
                source_file=source_file,
                row_number=row_number,
                line=line,
            )
        )
    version = parse_version(fields[3])
    if version <= 0:
        return ParsedLine(
            diagnostic=Diagnostic(
                kind="invalid_version",
                severity="warning",
                message=(
                    f"Invalid Version field in file [{source_file}] on row "
                    f"{row_number}. Line: [{line}] skipped."
                ),
                source_file=source_file,
                row_number=row_number,
                line=line,
            )
        )
    user_id, first_name, last_name, _, insurance_company = fields
    return ParsedLine(
        record=UserRecord(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            version=version,
            insurance_company=insurance_company,
        )
    )


def parse_version(raw_value: str, default: int = INVALID_VERSION) -> int:
    """Parse a version field as a signed 32-bit integer.

    Accepts an optional sign followed by Unicode decimal digits. Surrounding
    whitespace, digit separators and out-of-range values are rejected.

    Args:
        raw_value: Raw field text.
        default: Value returned when parsing fails.

    Returns:
        Parsed integer or ``default``.
    """
    digits = raw_value[1:] if raw_value[:1] in ("+", "-") else raw_value
    if not digits.isdecimal():
        return default
    try:
        value = int(raw_value)
    except ValueError:
        return default
    if value > MAX_VERSION or value < -MAX_VERSION - 1:
        return default
    return value


def split_fields(line: str) -> list[str]:
    """Split a line on commas, dropping trailing empty fields.

    ``"u1,Ann,Smith,1,"`` yields four fields, not five with an empty company.
    """
    fields = line.split(CSV_DELIMITER)
    while fields and not fields[-1]:
        fields.pop()
    return fields
