"""Unit tests for input reader module."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import MergeIngestError
from ingest.input_reader import iter_data_lines, list_csv_files
from tests.csv_fixtures import write_input_csv


def test_list_csv_files_filters_suffix_case_insensitively(tmp_path: Path) -> None:
    """Only direct regular files ending in .csv in any case are listed."""
    write_input_csv(tmp_path, "b.CSV", [])
    write_input_csv(tmp_path, "a.csv", [])
    write_input_csv(tmp_path, "notes.txt", [])
    write_input_csv(tmp_path / "nested", "c.csv", [])
    (tmp_path / "folder.csv").mkdir()

    files = list_csv_files(tmp_path)

    assert [path.name for path in files] == ["a.csv", "b.CSV"]


def test_list_csv_files_raises_for_missing_directory(tmp_path: Path) -> None:
    """Listing should fail when the input directory is missing."""
    with pytest.raises(MergeIngestError):
        list_csv_files(tmp_path / "does-not-exist")


def test_iter_data_lines_skips_header_and_numbers_rows(tmp_path: Path) -> None:
    """The first line is skipped and data rows are numbered from two."""
    file_path = write_input_csv(tmp_path, "a.csv", ["u1,Ann,Smith,1,Acme", "u2,Bob,Jones,2,Acme"])

    lines = list(iter_data_lines(file_path, "utf-8"))

    assert lines == [(2, "u1,Ann,Smith,1,Acme"), (3, "u2,Bob,Jones,2,Acme")]


def test_iter_data_lines_skips_header_without_validating_it(tmp_path: Path) -> None:
    """Any first line is treated as a header."""
    file_path = write_input_csv(tmp_path, "a.csv", ["u1,Ann,Smith,1,Acme"], header=False)

    assert list(iter_data_lines(file_path, "utf-8")) == []


def test_iter_data_lines_stops_at_first_empty_line(tmp_path: Path) -> None:
    """Lines after an empty line are never yielded."""
    file_path = write_input_csv(
        tmp_path, "a.csv", ["u1,Ann,Smith,1,Acme", "", "u2,Bob,Jones,2,Acme"]
    )

    lines = list(iter_data_lines(file_path, "utf-8"))

    assert lines == [(2, "u1,Ann,Smith,1,Acme")]


def test_iter_data_lines_can_read_past_empty_lines(tmp_path: Path) -> None:
    """With the blank-line stop disabled the empty line is yielded as data."""
    file_path = write_input_csv(
        tmp_path, "a.csv", ["u1,Ann,Smith,1,Acme", "", "u2,Bob,Jones,2,Acme"]
    )

    lines = list(iter_data_lines(file_path, "utf-8", stop_at_blank_line=False))

    assert [line for _, line in lines] == ["u1,Ann,Smith,1,Acme", "", "u2,Bob,Jones,2,Acme"]


def test_iter_data_lines_strips_windows_line_endings(tmp_path: Path) -> None:
    """CRLF terminators are removed before parsing."""
    file_path = tmp_path / "a.csv"
    file_path.write_bytes(b"header\r\nu1,Ann,Smith,1,Acme\r\n")

    assert list(iter_data_lines(file_path, "utf-8")) == [(2, "u1,Ann,Smith,1,Acme")]


def test_iter_data_lines_raises_for_missing_file(tmp_path: Path) -> None:
    """A vanished file surfaces as an ingest error caused by FileNotFoundError."""
    with pytest.raises(MergeIngestError) as error_info:
        list(iter_data_lines(tmp_path / "gone.csv", "utf-8"))

    assert isinstance(error_info.value.__cause__, FileNotFoundError)


def test_iter_data_lines_raises_for_undecodable_file(tmp_path: Path) -> None:
    """Decode failures surface as ingest errors."""
    file_path = tmp_path / "a.csv"
    file_path.write_bytes(b"header\n\xff\xfe,bad\n")

    with pytest.raises(MergeIngestError):
        list(iter_data_lines(file_path, "utf-8"))
