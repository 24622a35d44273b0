"""csvmerge exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class MergeError(Exception):
    """Base exception for all csvmerge failures."""


class MergeConfigError(MergeError):
    """Raised for invalid runtime configuration."""


class MergeIngestError(MergeError):
    """Raised when an input file cannot be opened or read."""


class MergeEmitError(MergeError):
    """Raised when output directories or company files cannot be written."""
