"""Ingest orchestration for the merge batch.

This module scans an input directory, parses each CSV file, and folds
valid records into the aggregation table. Bad lines and bad files are
reported and skipped; nothing raised for a single file escapes.
"""

from __future__ import annotations

from pathlib import Path

from core.config import MergeConfig
from core.diagnostics import DiagnosticReporter
from core.errors import MergeIngestError
from core.types import Diagnostic, IngestReport, MergeOutcome, UserRecord
from ingest.input_reader import iter_data_lines, list_csv_files
from ingest.record_parser import parse_record_line
from transforms.version_deduplication import merge_record


class IngestRunner:
    """Single-writer builder of the aggregation table."""

    def __init__(self, config: MergeConfig, reporter: DiagnosticReporter) -> None:
        self._config = config
        self._reporter = reporter
        self._report = IngestReport()

    def run(self, input_dir: Path) -> IngestReport:
        """Ingest every CSV file in ``input_dir`` and return the report."""
        for file_path in list_csv_files(input_dir):
            self._ingest_file(file_path)
        return self._report

    def _ingest_file(self, file_path: Path) -> None:
        source_file = str(file_path.absolute())
        self._reporter.report(
            Diagnostic(
                kind="file_processing",
                severity="info",
                message=f"Processing input file: {source_file}",
                source_file=source_file,
            )
        )
        lines = iter_data_lines(
            file_path,
            encoding=self._config.encoding,
            stop_at_blank_line=self._config.stop_at_blank_line,
        )
        try:
            for row_number, line in lines:
                self._ingest_line(line, source_file, row_number)
        except MergeIngestError as error:
            self._report.files_failed += 1
            self._reporter.report(_file_failure_diagnostic(error, source_file))
            return
        self._report.files_read += 1

    def _ingest_line(self, line: str, source_file: str, row_number: int) -> None:
        parsed = parse_record_line(line, source_file, row_number)
        if parsed.record is None:
            self._report.rows_rejected += 1
            if parsed.diagnostic is not None:
                self._reporter.report(parsed.diagnostic)
            return
        self._report.rows_accepted += 1
        outcome, existing = merge_record(self._report.table, parsed.record)
        self._reporter.report(_merge_diagnostic(outcome, parsed.record, existing, source_file))


def ingest_directory(
    input_dir: str | Path,
    config: MergeConfig,
    reporter: DiagnosticReporter,
) -> IngestReport:
    """Run the Ingestion Stage over one directory.

    Args:
        input_dir: Directory holding input CSV files.
        config: Runtime configuration.
        reporter: Diagnostic sink.

    Returns:
        Report holding the aggregation table and counters. A missing or
        unlistable directory yields an empty table and one error diagnostic.
    """
    runner = IngestRunner(config, reporter)
    try:
        return runner.run(Path(input_dir).expanduser())
    except MergeIngestError as error:
        reporter.report(
            Diagnostic(
                kind="file_read_failed",
                severity="error",
                message=str(error),
                source_file=str(input_dir),
            )
        )
        return IngestReport()


def _file_failure_diagnostic(error: MergeIngestError, source_file: str) -> Diagnostic:
    """Classify a per-file ingest failure."""
    kind = "file_not_found" if isinstance(error.__cause__, FileNotFoundError) else "file_read_failed"
    return Diagnostic(kind=kind, severity="error", message=str(error), source_file=source_file)


_MERGE_MESSAGES = {
    MergeOutcome.COMPANY_ADDED: "New Company, First User: {record}",
    MergeOutcome.USER_ADDED: "New User Added: {record}",
    MergeOutcome.USER_REPLACED: "Existing User, Higher Version, Replace: {record} {existing}",
    MergeOutcome.USER_DISCARDED: "Existing User, Lower/Equal Version, Discard: {record} {existing}",
}


def _merge_diagnostic(
    outcome: MergeOutcome,
    record: UserRecord,
    existing: UserRecord | None,
    source_file: str,
) -> Diagnostic:
    """Build the info diagnostic describing one merge decision."""
    message = _MERGE_MESSAGES[outcome].format(
        record=record.describe(),
        existing=existing.describe() if existing is not None else "",
    )
    return Diagnostic(
        kind=outcome.value,
        severity="info",
        message=message,
        source_file=source_file,
    )
