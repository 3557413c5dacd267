"""Runtime configuration loaded from environment variables.

==========================  ==================  =====================
Variable                    Field               Default
==========================  ==================  =====================
``DOCKER_REPORT_RUNTIME``   ``runtime``         ``docker``
``DOCKER_REPORT_FILE``      ``report_path``     ``docker_report.txt``
``DOCKER_REPORT_TIMEOUT``   ``command_timeout`` no timeout
``DOCKER_REPORT_LOG_LEVEL`` ``log_level``       ``WARNING``
==========================  ==================  =====================
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from docker_report.exceptions import ConfigurationError
from docker_report.infra.report_writer import DEFAULT_REPORT_FILE

ENV_PREFIX: str = "DOCKER_REPORT_"

DEFAULT_RUNTIME: str = "docker"

DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Settings for a single report run."""

    runtime: str = DEFAULT_RUNTIME
    report_path: Path = Path(DEFAULT_REPORT_FILE)
    command_timeout: float | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReportConfig:
        """Build a config from *environ* (``os.environ`` by default).

        Unset or blank variables fall back to the defaults.

        Raises
        ------
        ConfigurationError
            When ``DOCKER_REPORT_TIMEOUT`` is not a positive number.
        """
        env = os.environ if environ is None else environ

        def _get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name, "").strip()
            return value or None

        return cls(
            runtime=_get("RUNTIME") or DEFAULT_RUNTIME,
            report_path=Path(_get("FILE") or DEFAULT_REPORT_FILE),
            command_timeout=_parse_timeout(_get("TIMEOUT")),
            log_level=(_get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid {ENV_PREFIX}TIMEOUT: {raw!r}",
            hint="Use a number of seconds, e.g. 30.",
        ) from exc
    if timeout <= 0:
        raise ConfigurationError(
            f"Invalid {ENV_PREFIX}TIMEOUT: {raw!r}",
            hint="The timeout must be greater than zero.",
        )
    return timeout
