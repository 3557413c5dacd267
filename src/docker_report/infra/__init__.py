"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: spawning
the runtime CLI and writing the report file.  Raw ``OSError`` and
``subprocess`` exceptions are recovered or re-raised here as
:class:`~docker_report.exceptions.DockerReportError` subclasses.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from docker_report.infra.report_writer import write_report
from docker_report.infra.subprocess_executor import SubprocessExecutor

__all__: list[str] = [
    "SubprocessExecutor",
    "write_report",
]
