"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — report generated, runtime unavailable, help or version shown."""

GENERAL_ERROR: int = 1
"""A known DockerReportError was caught, or an unknown option was given."""

UNEXPECTED_ERROR: int = 1
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
