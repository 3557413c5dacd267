"""``subprocess``-backed implementation of :class:`~docker_report.core.protocols.CommandExecutor`.

This module is the **only** place in the codebase that spawns
processes.  Every failure mode — missing binary, non-zero exit,
timeout — is folded into ``CommandResult(ok=False)``; nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from docker_report.core.models import CommandResult

logger = logging.getLogger(__name__)


class SubprocessExecutor:
    """Concrete :class:`CommandExecutor` running commands without a shell.

    Usage::

        executor = SubprocessExecutor(timeout=30)
        result = executor.execute(["docker", "--version"])

    Parameters
    ----------
    timeout:
        Seconds to wait for each command, or ``None`` to wait
        indefinitely.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout: float | None = timeout

    def execute(self, args: Sequence[str]) -> CommandResult:
        """Run *args* and capture standard output as text.

        Standard error is discarded (logged at debug level).
        """
        try:
            completed = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("Executable not found: %s", args[0])
            return CommandResult(output="", ok=False)
        except subprocess.TimeoutExpired as exc:
            logger.warning("%s timed out after %s seconds", args[0], exc.timeout)
            return CommandResult(output=_as_text(exc.stdout), ok=False)
        except OSError as exc:
            logger.debug("Could not start %s: %s", args[0], exc)
            return CommandResult(output="", ok=False)

        if completed.stderr:
            logger.debug("%s stderr: %s", args[0], completed.stderr.strip())
        if completed.returncode != 0:
            logger.debug("%s exited with status %d", args[0], completed.returncode)

        return CommandResult(
            output=completed.stdout or "",
            ok=completed.returncode == 0,
        )


def _as_text(data: str | bytes | None) -> str:
    """Normalise partial output captured before a timeout."""
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data
