"""Per-company CSV emission.

This module sorts each company's surviving records and writes them to
one CSV file per company in the output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from core.config import MergeConfig
from core.constants import CSV_SUFFIX, OUTPUT_HEADER
from core.diagnostics import DiagnosticReporter
from core.errors import MergeEmitError
from core.types import AggregationTable, Diagnostic, EmissionReport, UserRecord


def sort_company_records(records: Iterable[UserRecord]) -> list[UserRecord]:
    """Sort records by last name, then first name, by code point order.

    The sort is stable, so records with equal names keep their input order.
    """
    return sorted(records, key=lambda record: (record.last_name, record.first_name))


def render_company_csv(records: Iterable[UserRecord]) -> str:
    """Render the header and one row per record, each newline-terminated."""
    rows = [OUTPUT_HEADER]
    rows.extend(record.to_csv_row() for record in records)
    return "\n".join(rows) + "\n"


def company_output_path(output_dir: str, company: str, legacy: bool = False) -> Path:
    """Build the destination path of one company file.

    Args:
        output_dir: Output directory as given by the caller.
        company: Company name, used as the file base name.
        legacy: Concatenate the strings without inserting a separator.

    Returns:
        Destination file path.
    """
    file_name = f"{company}{CSV_SUFFIX}"
    if legacy:
        return Path(f"{output_dir}{file_name}")
    return Path(output_dir) / file_name


def ensure_output_directory(output_dir: str) -> Path:
    """Create the output directory and any missing parents.

    Raises:
        MergeEmitError: If the directory does not exist afterwards.
    """
    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise MergeEmitError(
            f"Failed to create output directory [{directory.absolute()}]."
        ) from error
    if not directory.is_dir():
        raise MergeEmitError(f"Failed to create output directory [{directory.absolute()}].")
    return directory


def write_company_file(path: Path, records: list[UserRecord], encoding: str) -> None:
    """Write one company's sorted records.

    Raises:
        MergeEmitError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(render_company_csv(records))
    except (OSError, UnicodeEncodeError) as error:
        raise MergeEmitError(f"Failed to write file [{path.absolute()}].") from error


class CompanyWriter:
    """Emission Stage over a finished aggregation table."""

    def __init__(self, config: MergeConfig, reporter: DiagnosticReporter) -> None:
        self._config = config
        self._reporter = reporter

    def write_all(self, table: AggregationTable, output_dir: str) -> EmissionReport:
        """Write one file per company; abort only if the directory is unusable."""
        try:
            ensure_output_directory(output_dir)
        except MergeEmitError as error:
            self._reporter.report(
                Diagnostic(
                    kind="output_directory_failed",
                    severity="error",
                    message=str(error),
                    source_file=output_dir,
                )
            )
            return EmissionReport(aborted=True)
        written: list[Path] = []
        failed: list[str] = []
        for company, users in table.items():
            path = self._write_company(company, users, output_dir)
            if path is None:
                failed.append(company)
            else:
                written.append(path)
        return EmissionReport(written=tuple(written), failed=tuple(failed))

    def _write_company(
        self,
        company: str,
        users: Mapping[str, UserRecord],
        output_dir: str,
    ) -> Path | None:
        path = company_output_path(output_dir, company, self._config.legacy_output_paths)
        records = sort_company_records(users.values())
        try:
            write_company_file(path, records, self._config.encoding)
        except MergeEmitError as error:
            self._reporter.report(
                Diagnostic(
                    kind="company_write_failed",
                    severity="error",
                    message=(
                        f"Failed to write records for company [{company}] "
                        f"to file [{path.absolute()}]: {error.__cause__ or error}"
                    ),
                    source_file=str(path),
                )
            )
            return None
        self._reporter.report(
            Diagnostic(
                kind="company_written",
                severity="info",
                message=(
                    f"Wrote {len(records)} User records for {company} "
                    f"to file {path.absolute()}"
                ),
                source_file=str(path),
            )
        )
        return path


def write_company_files(
    table: AggregationTable,
    output_dir: str,
    config: MergeConfig,
    reporter: DiagnosticReporter,
) -> EmissionReport:
    """Run the Emission Stage.

    Args:
        table: Finished aggregation table; it is not modified.
        output_dir: Output directory path.
        config: Runtime configuration.
        reporter: Diagnostic sink.

    Returns:
        Written paths, failed companies and the abort flag.
    """
    return CompanyWriter(config, reporter).write_all(table, output_dir)
