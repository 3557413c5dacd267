"""CLI application entry point for docker-report.

This module is the **sole error boundary** for the entire application.
It catches :class:`~docker_report.exceptions.DockerReportError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the report
  command, the core service and the infrastructure adapters.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from docker_report.cli import exit_codes
from docker_report.cli.console import console
from docker_report.exceptions import DockerReportError
from docker_report.version import __version__

PROG: str = "docker-report"

DESCRIPTION: str = "Container runtime reporting utility."

EPILOG: str = """\
This program generates a comprehensive report of your Docker environment,
including containers, images, and system statistics.

Environment:
  DOCKER_REPORT_RUNTIME    runtime CLI to query (default: docker)
  DOCKER_REPORT_FILE       report file path (default: docker_report.txt)
  DOCKER_REPORT_TIMEOUT    per-command timeout in seconds (default: none)
  DOCKER_REPORT_LOG_LEVEL  log level on stderr (default: WARNING)

Examples:
  docker-report            # Generate full Docker report
  docker-report --help     # Show this help
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ReportArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with ``GENERAL_ERROR`` on bad input."""

    def error(self, message: str) -> NoReturn:
        unknown = message.partition(": ")[2] if "unrecognized" in message else message
        self.exit(
            exit_codes.GENERAL_ERROR,
            f"Unknown option: {unknown}\nUse --help for usage information.\n",
        )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI takes no positional arguments:
    * ``docker-report``            — generate the full report
    * ``docker-report --help``
    * ``docker-report --version``
    """
    parser = _ReportArgumentParser(
        prog=PROG,
        allow_abbrev=False,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}\n{DESCRIPTION}",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_report() -> int:
    """Wire configuration, logging and infrastructure, then run the report."""
    from docker_report.cli.report import run_report
    from docker_report.config import ReportConfig
    from docker_report.core.report_service import ReportService
    from docker_report.infra.subprocess_executor import SubprocessExecutor
    from docker_report.utils.logger import configure_logging

    config = ReportConfig.from_env()
    configure_logging(config.log_level)

    executor = SubprocessExecutor(timeout=config.command_timeout)
    service = ReportService(executor, runtime=config.runtime)
    return run_report(service, config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the docker-report CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    parser.parse_args(argv)
    return _handle_report()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DockerReportError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"Error: {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
