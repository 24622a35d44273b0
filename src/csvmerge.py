"""Public SDK surface for csvmerge.

This module provides a stable import path for batch merge users.
It re-exports the typed models and runs both stages in sequence.
"""

from __future__ import annotations

from pathlib import Path

from core.config import MergeConfig
from core.diagnostics import CollectingReporter, DiagnosticReporter, LoggingReporter
from core.types import (
    AggregationTable,
    Diagnostic,
    EmissionReport,
    IngestReport,
    MergeReport,
    UserRecord,
)
from ingest.pipeline import ingest_directory
from store.company_writer import write_company_files


def run_merge(
    input_dir: str | Path,
    output_dir: str,
    config: MergeConfig | None = None,
    reporter: DiagnosticReporter | None = None,
) -> MergeReport:
    """Ingest every CSV file in ``input_dir`` and write one file per company.

    Args:
        input_dir: Directory of input CSV files.
        output_dir: Directory receiving ``<company>.csv`` files.
        config: Optional runtime configuration; read from env when omitted.
        reporter: Optional diagnostic sink; structlog when omitted.

    Returns:
        Ingest and emission reports.
    """
    config = config or MergeConfig.from_env()
    reporter = reporter or LoggingReporter()
    ingest_report = ingest_directory(input_dir, config, reporter)
    emission_report = write_company_files(ingest_report.table, output_dir, config, reporter)
    return MergeReport(ingest=ingest_report, emission=emission_report)


__all__ = [
    "AggregationTable",
    "CollectingReporter",
    "Diagnostic",
    "DiagnosticReporter",
    "EmissionReport",
    "IngestReport",
    "LoggingReporter",
    "MergeConfig",
    "MergeReport",
    "UserRecord",
    "run_merge",
]
