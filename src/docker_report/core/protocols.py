"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can hand the service an in-memory executor.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from docker_report.core.models import CommandResult


class CommandExecutor(Protocol):
    """Contract for running an external command synchronously.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def execute(self, args: Sequence[str]) -> CommandResult:
        """Run *args* (program followed by its arguments) to completion.

        Implementations must not raise for ordinary failures: a process
        that cannot be started, exits non-zero or times out is reported
        as ``CommandResult(output=..., ok=False)``.
        """
        ...  # pragma: no cover
