"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem access and no subprocess imports.
* No imports from ``cli`` or ``infra``.
* External commands are reached only through the ``CommandExecutor``
  protocol.
"""

from docker_report.core.models import (
    CommandResult,
    ContainerRecord,
    ImageRecord,
    ReportSnapshot,
    ReportSummary,
)
from docker_report.core.parser import parse_containers, parse_images
from docker_report.core.protocols import CommandExecutor
from docker_report.core.report_service import ReportService

__all__: list[str] = [
    "CommandExecutor",
    "CommandResult",
    "ContainerRecord",
    "ImageRecord",
    "ReportService",
    "ReportSnapshot",
    "ReportSummary",
    "parse_containers",
    "parse_images",
]
