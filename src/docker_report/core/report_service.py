"""Core report service — queries the runtime and parses its listings.

The service depends on a :class:`~docker_report.core.protocols.CommandExecutor`
injected at construction time (dependency inversion), keeping the core
free of any subprocess imports and replaceable by an in-memory fake.

Guarantees
----------
* Commands run sequentially, one at a time.
* A failed listing degrades to an empty tuple; a failed version query
  degrades to :data:`VERSION_UNKNOWN`.
* Only :class:`~docker_report.exceptions.DockerReportError` subclasses
  escape.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from docker_report.core.models import (
    CommandResult,
    ContainerRecord,
    ImageRecord,
    ReportSnapshot,
)
from docker_report.core.parser import FIELD_SEPARATOR, parse_containers, parse_images
from docker_report.core.protocols import CommandExecutor
from docker_report.exceptions import (
    CommandExecutionError,
    DockerReportError,
    RuntimeUnavailableError,
)

logger = logging.getLogger(__name__)

VERSION_UNKNOWN: str = "Unable to determine"

CONTAINER_HEADER: tuple[str, ...] = ("CONTAINER ID", "NAMES", "IMAGE", "STATUS", "PORTS")
CONTAINER_TEMPLATE: tuple[str, ...] = (
    "{{.ID}}",
    "{{.Names}}",
    "{{.Image}}",
    "{{.Status}}",
    "{{.Ports}}",
)

IMAGE_HEADER: tuple[str, ...] = ("REPOSITORY", "TAG", "IMAGE ID", "CREATED", "SIZE")
IMAGE_TEMPLATE: tuple[str, ...] = (
    "{{.Repository}}",
    "{{.Tag}}",
    "{{.ID}}",
    "{{.CreatedAt}}",
    "{{.Size}}",
)


class ReportService:
    """Stateless service that gathers listings from a container runtime.

    Parameters
    ----------
    executor:
        Any object satisfying the :class:`CommandExecutor` protocol.
    runtime:
        Name of the runtime CLI to invoke (``docker`` by default; any
        Docker-compatible CLI such as ``podman`` works).
    """

    def __init__(self, executor: CommandExecutor, runtime: str = "docker") -> None:
        self._executor: CommandExecutor = executor
        self._runtime: str = runtime

    @property
    def runtime(self) -> str:
        return self._runtime

    @property
    def display_name(self) -> str:
        """Runtime name as shown to users, e.g. ``Docker``."""
        return self._runtime.capitalize()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_runtime_available(self) -> bool:
        """Return ``True`` when ``<runtime> --version`` answers with output."""
        result = self._run(self._version_args())
        return result.ok and bool(result.output.strip())

    def runtime_version(self) -> str:
        """Return the runtime's self-reported version line.

        Falls back to :data:`VERSION_UNKNOWN` when the query fails or
        prints nothing.
        """
        result = self._run(self._version_args())
        version = result.output.strip()
        if not result.ok or not version:
            logger.warning("Could not determine %s version", self._runtime)
            return VERSION_UNKNOWN
        return version

    def list_containers(self) -> tuple[ContainerRecord, ...]:
        """List every container (running or not), in runtime order."""
        output = self._listing(
            ["ps", "-a", "--format", FIELD_SEPARATOR.join(CONTAINER_TEMPLATE)],
            CONTAINER_HEADER,
        )
        return parse_containers(output)

    def list_images(self) -> tuple[ImageRecord, ...]:
        """List local images, in runtime order."""
        output = self._listing(
            ["images", "--format", FIELD_SEPARATOR.join(IMAGE_TEMPLATE)],
            IMAGE_HEADER,
        )
        return parse_images(output)

    def collect(self) -> ReportSnapshot:
        """Probe the runtime, then gather containers, images and version.

        Raises
        ------
        RuntimeUnavailableError
            When the availability probe gets no answer.
        """
        if not self.is_runtime_available():
            raise RuntimeUnavailableError(
                f"{self.display_name} is not available on this system.",
                hint=f"Please install {self.display_name} to use this reporting tool.",
            )
        return ReportSnapshot(
            containers=self.list_containers(),
            images=self.list_images(),
            runtime_version=self.runtime_version(),
        )

    # ------------------------------------------------------------------
    # Command construction
    # ------------------------------------------------------------------

    def _version_args(self) -> list[str]:
        return [self._runtime, "--version"]

    def _listing(self, subcommand: list[str], header: Sequence[str]) -> str:
        """Run a listing subcommand and return its rows under a header line.

        The ``--format`` template prints raw tab-separated rows without a
        header, so one is prepended here to match the listing shape the
        parser expects.  A failed listing yields an empty string.
        """
        result = self._run([self._runtime, *subcommand])
        if not result.ok:
            logger.warning(
                "%s %s failed; treating as empty listing",
                self._runtime,
                subcommand[0],
            )
            return ""
        return FIELD_SEPARATOR.join(header) + "\n" + result.output

    # ------------------------------------------------------------------
    # Executor delegation (safe boundary)
    # ------------------------------------------------------------------

    def _run(self, args: list[str]) -> CommandResult:
        """Call the executor and ensure only our exceptions escape."""
        logger.debug("Running %s", args)
        try:
            return self._executor.execute(args)
        except DockerReportError:
            raise
        except Exception as exc:
            raise CommandExecutionError(
                f"Unexpected executor error running {args[0]}: {exc}",
            ) from exc
