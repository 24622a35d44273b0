"""Shared typed models.

This module defines immutable data models used by the ingest,
transform, and store layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from core.constants import CSV_DELIMITER

Severity = Literal["info", "warning", "error"]


@dataclass(frozen=True)
class UserRecord:
    """One user's account data for one insurance company at one version.

    Attributes:
        user_id: User identifier, unique within a company.
        first_name: Given name.
        last_name: Family name.
        version: Positive record version; higher supersedes lower.
        insurance_company: Owning company, also the output file base name.
    """

    user_id: str
    first_name: str
    last_name: str
    version: int
    insurance_company: str

    @property
    def dedup_key(self) -> tuple[str, str]:
        """Return the (company, user id) identity used for deduplication."""
        return (self.insurance_company, self.user_id)

    def describe(self) -> str:
        """Return a stable human-readable rendering of every field."""
        return (
            f"User [userId={self.user_id}, firstName={self.first_name}, "
            f"lastName={self.last_name}, version={self.version}, "
            f"insuranceCompany={self.insurance_company}]"
        )

    def to_csv_row(self) -> str:
        """Render the record as one output CSV row without terminator."""
        return CSV_DELIMITER.join(
            (
                self.user_id,
                self.first_name,
                self.last_name,
                str(self.version),
                self.insurance_company,
            )
        )


# company -> user id -> surviving record
AggregationTable = dict[str, dict[str, UserRecord]]


class MergeOutcome(str, Enum):
    """Result of merging one record into the aggregation table."""

    COMPANY_ADDED = "company_added"
    USER_ADDED = "user_added"
    USER_REPLACED = "user_replaced"
    USER_DISCARDED = "user_discarded"


@dataclass(frozen=True)
class Diagnostic:
    """One reportable event raised while ingesting or emitting.

    Attributes:
        kind: Stable event name, e.g. ``malformed_line``.
        severity: ``info``, ``warning`` or ``error``.
        message: Human-readable description.
        source_file: File the event relates to, when any.
        row_number: One-based row within ``source_file``, when any.
        line: Raw input line, when any.
    """

    kind: str
    severity: Severity
    message: str
    source_file: str | None = None
    row_number: int | None = None
    line: str | None = None


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of parsing one data line: a record or a diagnostic."""

    record: UserRecord | None = None
    diagnostic: Diagnostic | None = None


@dataclass
class IngestReport:
    """Aggregation table plus ingest counters.

    Attributes:
        table: Company -> user id -> surviving record.
        files_read: Files read to completion.
        files_failed: Files skipped or cut short by a read failure.
        rows_accepted: Valid rows merged into the table.
        rows_rejected: Malformed or invalid-version rows.
    """

    table: AggregationTable = field(default_factory=dict)
    files_read: int = 0
    files_failed: int = 0
    rows_accepted: int = 0
    rows_rejected: int = 0


@dataclass(frozen=True)
class EmissionReport:
    """Outcome of writing per-company output files.

    Attributes:
        written: Paths of company files written successfully.
        failed: Companies whose file could not be written.
        aborted: True when the output directory could not be created.
    """

    written: tuple[Path, ...] = ()
    failed: tuple[str, ...] = ()
    aborted: bool = False


@dataclass(frozen=True)
class MergeReport:
    """Combined ingest and emission outcome of one batch run."""

    ingest: IngestReport
    emission: EmissionReport

    @property
    def succeeded(self) -> bool:
        return not self.emission.aborted
