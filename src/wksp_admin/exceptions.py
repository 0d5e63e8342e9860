"""Custom exception hierarchy for wksp-admin.

All exceptions that cross layer boundaries must inherit from
:class:`WkspAdminError`.  Raw third-party exceptions (botocore, OS
errors from file handling) must NEVER propagate beyond the
infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
WkspAdminError
├── UsageError
├── ProviderError
├── CredentialsError
├── CsvFileError
├── CsvFormatError
├── TerminationStateError
└── EnvironmentError
"""

from __future__ import annotations


class WkspAdminError(Exception):
    """Base exception for all wksp-admin errors.

    Every failure is fatal for the current run.  The CLI error boundary
    renders the message (and optional hint) and exits non-zero.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(WkspAdminError):
    """Raised when the given switches cannot be combined."""


# --- Remote API ------------------------------------------------------------

class ProviderError(WkspAdminError):
    """Raised when a WorkSpaces API request fails."""


class CredentialsError(WkspAdminError):
    """Raised when no usable AWS credentials or profile can be found."""


# --- CSV files -------------------------------------------------------------

class CsvFileError(WkspAdminError):
    """Raised when a CSV file cannot be opened, read or written."""


class CsvFormatError(WkspAdminError):
    """Raised when a CSV file does not have the expected shape."""


# --- Termination -----------------------------------------------------------

class TerminationStateError(WkspAdminError):
    """Raised when a termination plan is driven out of order."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(WkspAdminError):
    """Raised when a required runtime dependency is not available."""
