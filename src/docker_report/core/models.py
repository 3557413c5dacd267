"""Domain models for docker-report.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Every textual field is kept exactly as
the runtime printed it; nothing is parsed into dates or byte counts.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Listing records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ContainerRecord:
    """One row of the container listing."""

    id: str
    """Runtime-assigned container identifier."""

    name: str
    """Container name."""

    image: str
    """Image reference, ``repository[:tag]``."""

    status: str
    """Free-text status, e.g. ``"Up 3 minutes"`` or ``"Exited (0) 2 hours ago"``."""

    ports: str = ""
    """Comma-separated port mappings.  Empty when none are published."""


@dataclass(frozen=True, slots=True)
class ImageRecord:
    """One row of the image listing."""

    repository: str
    tag: str
    image_id: str
    created: str
    """Creation timestamp as reported by the runtime."""

    size: str
    """Human-readable size as reported by the runtime (e.g. ``"123MB"``)."""


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a single external command invocation."""

    output: str
    """Captured standard output.  Empty when the process never started."""

    ok: bool
    """``True`` when the process started and exited with status 0."""


# ---------------------------------------------------------------------------
# Report aggregates
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ReportSummary:
    """Counts shown in the system summary section."""

    total_containers: int
    running: int
    stopped: int
    total_images: int
    runtime_version: str


@dataclass(frozen=True, slots=True)
class ReportSnapshot:
    """Everything gathered from the runtime for one report.

    Both collections are tuples in the order the runtime listed them.
    """

    containers: tuple[ContainerRecord, ...]
    images: tuple[ImageRecord, ...]
    runtime_version: str
