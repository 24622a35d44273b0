"""csvmerge CLI entry point.

This module maps the two positional directory arguments onto one
batch merge run and turns its outcome into an exit code.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from core.config import MergeConfig
from core.diagnostics import LoggingReporter
from core.errors import MergeConfigError
from core.logging_config import configure_logging, get_logger
from core.types import MergeReport
from csvmerge import run_merge

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="csvmerge",
        description=(
            "Merge insurance user CSV files, keeping the highest version of each "
            "user per company, and write one sorted CSV file per company."
        ),
    )
    parser.add_argument("input_directory", help="Directory containing input CSV files")
    parser.add_argument("output_directory", help="Directory receiving one CSV file per company")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csvmerge CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code: 0 on completion, 1 if the output directory
        could not be created, 2 on usage or configuration errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = MergeConfig.from_env()
    except MergeConfigError as error:
        parser.error(str(error))
    configure_logging(config.log_level)
    report = run_merge(args.input_directory, args.output_directory, config, LoggingReporter())
    _log_merge_completion(args, report)
    return 0 if report.succeeded else 1


def _log_merge_completion(args: argparse.Namespace, report: MergeReport) -> None:
    """Log run completion with contextual counters."""
    _LOGGER.info(
        "merge_completed",
        input_directory=args.input_directory,
        output_directory=args.output_directory,
        files_read=report.ingest.files_read,
        files_failed=report.ingest.files_failed,
        rows_accepted=report.ingest.rows_accepted,
        rows_rejected=report.ingest.rows_rejected,
        companies_written=len(report.emission.written),
        companies_failed=len(report.emission.failed),
        aborted=report.emission.aborted,
    )
