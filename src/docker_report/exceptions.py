"""Custom exception hierarchy for docker-report.

All exceptions that cross layer boundaries must inherit from
:class:`DockerReportError`.  Raw OS and subprocess exceptions must
NEVER propagate beyond the infrastructure layer — they are either
recovered there or re-raised as a typed subclass defined here.

Hierarchy
---------
DockerReportError
├── RuntimeUnavailableError
├── CommandExecutionError
├── ReportWriteError
├── ConfigurationError
└── DependencyMissingError
"""

from __future__ import annotations


class DockerReportError(Exception):
    """Base exception for all docker-report errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Runtime / commands ----------------------------------------------------

class RuntimeUnavailableError(DockerReportError):
    """Raised when the availability probe gets no answer from the runtime."""


class CommandExecutionError(DockerReportError):
    """Raised when the command executor fails in an unexpected way."""


# --- Output ----------------------------------------------------------------

class ReportWriteError(DockerReportError):
    """Raised when the report file cannot be created or written."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(DockerReportError):
    """Raised when an environment setting holds an unusable value."""


class DependencyMissingError(DockerReportError):
    """Raised when an optional third-party package is not installed."""
