"""Allow ``python -m docker_report`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m docker_report`` behaves identically to the
``docker-report`` console script.
"""

from __future__ import annotations

from docker_report.cli.app import cli

if __name__ == "__main__":
    cli()
