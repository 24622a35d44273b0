"""Diagnostic reporting collaborators.

Stages hand every progress and error event to a reporter instead of
writing to the console, so callers decide where diagnostics go.
"""

from __future__ import annotations

from typing import Any, Protocol

from core.logging_config import get_logger
from core.types import Diagnostic


class DiagnosticReporter(Protocol):
    """Sink for diagnostics emitted by the ingest and emission stages."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Accept one diagnostic."""


class LoggingReporter:
    """Reporter that forwards diagnostics to structlog."""

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger or get_logger("csvmerge.diagnostics")

    def report(self, diagnostic: Diagnostic) -> None:
        log_method = getattr(self._logger, diagnostic.severity)
        log_method(diagnostic.kind, **_diagnostic_fields(diagnostic))


class CollectingReporter:
    """Reporter that keeps diagnostics in memory."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def kinds(self) -> list[str]:
        """Return reported diagnostic kinds in arrival order."""
        return [diagnostic.kind for diagnostic in self.diagnostics]

    def of_kind(self, kind: str) -> list[Diagnostic]:
        """Return diagnostics matching one kind."""
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.kind == kind]


def _diagnostic_fields(diagnostic: Diagnostic) -> dict[str, object]:
    """Build log fields, omitting unset location attributes."""
    fields: dict[str, object] = {"message": diagnostic.message}
    if diagnostic.source_file is not None:
        fields["source_file"] = diagnostic.source_file
    if diagnostic.row_number is not None:
        fields["row_number"] = diagnostic.row_number
    if diagnostic.line is not None:
        fields["line"] = diagnostic.line
    return fields
