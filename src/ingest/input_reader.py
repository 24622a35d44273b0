"""Input file readers for ingestion.

This module lists candidate CSV files in an input directory and
yields their data lines with one-based row numbers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from core.constants import CSV_SUFFIX, HEADER_ROW_NUMBER
from core.errors import MergeIngestError


def list_csv_files(input_dir: Path) -> list[Path]:
    """List CSV files directly inside a directory.

    Args:
        input_dir: Directory to scan, non-recursively.

    Returns:
        Regular files whose name ends in ``.csv`` in any case, sorted by name.

    Raises:
        MergeIngestError: If the directory is missing or cannot be listed.
    """
    if not input_dir.is_dir():
        raise MergeIngestError(
            f"Failed to read input directory {input_dir}: path is not a directory. "
            "Provide an existing directory of CSV files."
        )
    try:
        entries = list(input_dir.iterdir())
    except OSError as error:
        raise MergeIngestError(
            f"Failed to list input directory {input_dir}: {error.strerror or error}."
        ) from error
    return sorted(entry for entry in entries if _is_csv_file(entry))


def iter_data_lines(
    file_path: Path,
    encoding: str,
    stop_at_blank_line: bool = True,
) -> Iterator[tuple[int, str]]:
    """Yield data lines after the header with their row numbers.

    The first line is skipped unconditionally. When ``stop_at_blank_line``
    is set, the first empty line ends the file.

    Args:
        file_path: CSV file to read.
        encoding: Text encoding of the file.
        stop_at_blank_line: Stop at the first empty data line.

    Yields:
        ``(row_number, line)`` pairs with the terminator removed.

    Raises:
        MergeIngestError: If the file is missing or cannot be read or decoded.
    """
    try:
        with file_path.open("r", encoding=encoding) as handle:
            row_number = HEADER_ROW_NUMBER
            handle.readline()
            for raw_line in handle:
                line = raw_line.rstrip("\n")
                if stop_at_blank_line and not line:
                    return
                row_number += 1
                yield row_number, line
    except FileNotFoundError as error:
        raise MergeIngestError(f"File [{file_path}] not found.") from error
    except (OSError, UnicodeDecodeError) as error:
        raise MergeIngestError(f"Failed during processing file [{file_path}].") from error


def _is_csv_file(path: Path) -> bool:
    """Return whether a directory entry is a CSV regular file."""
    return path.name.lower().endswith(CSV_SUFFIX) and path.is_file()
