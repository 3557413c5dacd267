"""Logging setup for the command-line entry point.

Modules obtain loggers with ``logging.getLogger(__name__)``; only the
CLI calls :func:`configure_logging`.  Records go to stderr so they never
interleave with the report printed on stdout.
"""

from __future__ import annotations

import logging
import sys

from docker_report.exceptions import ConfigurationError

LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_log_level(level_name: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    try:
        return _LEVELS[level_name.upper()]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown log level: {level_name}",
            hint=f"Use one of: {', '.join(_LEVELS)}.",
        ) from exc


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(level_name: str = "WARNING") -> None:
    """Install a single stderr handler at *level_name* on the root logger."""
    logging.basicConfig(
        level=resolve_log_level(level_name),
        format="%(message)s",
        handlers=[_build_handler()],
        force=True,
    )
