"""Shared pytest fixtures and configuration for the docker-report test suite.

Guidelines
----------
* No real container runtime is ever invoked.
* The command executor is replaced by :class:`FakeExecutor` at the
  core boundary, or ``subprocess.run`` is mocked at the infra boundary.
* Report files are written under ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from docker_report.core.models import CommandResult

CONTAINER_HEADER = "CONTAINER ID\tNAMES\tIMAGE\tSTATUS\tPORTS"
IMAGE_HEADER = "REPOSITORY\tTAG\tIMAGE ID\tCREATED\tSIZE"


class FakeExecutor:
    """In-memory :class:`CommandExecutor` keyed by the runtime subcommand.

    ``responses`` maps the first argument after the program name
    (``"--version"``, ``"ps"``, ``"images"``) to a :class:`CommandResult`
    or an exception to raise.  Unknown subcommands fail with ``ok=False``.
    """

    def __init__(self, responses: dict[str, CommandResult | Exception]) -> None:
        self.responses = responses
        self.calls: list[list[str]] = []

    def execute(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        response = self.responses.get(args[1], CommandResult(output="", ok=False))
        if isinstance(response, Exception):
            raise response
        return response


def ok(output: str) -> CommandResult:
    return CommandResult(output=output, ok=True)


FAILED = CommandResult(output="", ok=False)


@pytest.fixture
def healthy_executor() -> FakeExecutor:
    """Executor answering like a runtime with two containers and one image."""
    return FakeExecutor(
        {
            "--version": ok("Docker version 24.0.7, build afdd53b\n"),
            "ps": ok(
                "abc123456789\tweb\tnginx:latest\tUp 5 minutes\t0.0.0.0:80->80/tcp\n"
                "def987654321\tdb\tpostgres:16\tExited (0) 2 hours ago\t\n"
            ),
            "images": ok(
                "nginx\tlatest\tsha256abcdef\t2024-01-01 10:00:00 +0000 UTC\t187MB\n"
            ),
        }
    )
