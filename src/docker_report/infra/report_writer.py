"""Infrastructure: persisting the rendered file report.

The report is written in one scoped ``open`` call and always replaces
the previous file; there is no appending and no versioning.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docker_report.exceptions import ReportWriteError

logger = logging.getLogger(__name__)

DEFAULT_REPORT_FILE: str = "docker_report.txt"


def write_report(path: Path, text: str) -> Path:
    """Overwrite *path* with *text* (UTF-8) and return the path.

    Raises
    ------
    ReportWriteError
        When the file cannot be opened or written.
    """
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise ReportWriteError(
            f"Unable to create report file: {path}",
            hint=exc.strerror or str(exc),
        ) from exc

    logger.debug("Wrote %d characters to %s", len(text), path)
    return path
