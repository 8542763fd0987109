"""Chronicle exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ChronicleError(Exception):
    """Base exception for all Chronicle failures."""


class ChronicleConfigError(ChronicleError):
    """Raised for invalid runtime configuration."""


class ChronicleStoreError(ChronicleError):
    """Raised for series persistence and parsing failures."""


class SeriesIndexError(ChronicleStoreError):
    """Raised when a series is read outside its recorded index range."""


class NonMonotonicTimestampError(ChronicleStoreError):
    """Raised when an append would make series timestamps decrease."""


class ChronicleLookupError(ChronicleError):
    """Raised when a lookup cannot complete within its iteration bound."""


class ChronicleDependencyError(ChronicleError):
    """Raised when an optional runtime dependency is missing."""
