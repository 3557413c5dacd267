"""Report rendering — console tables, summary and the file report.

Every function here is pure: it receives records and returns text.
Console tables go through :func:`~docker_report.core.formatting.render_table`
and are width-truncated; the file report writes every field in full.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from docker_report.core.formatting import Column, render_table
from docker_report.core.models import ContainerRecord, ImageRecord, ReportSummary

RUNNING_MARKER: str = "Up"

REPORT_RULE: str = "=" * 49

GENERATED_AT_FORMAT: str = "%b %d %Y %H:%M:%S"


# ---------------------------------------------------------------------------
# Console tables
# ---------------------------------------------------------------------------

CONTAINER_COLUMNS: tuple[Column[ContainerRecord], ...] = (
    Column("ID", 12, lambda c: c.id),
    Column("NAME", 20, lambda c: c.name),
    Column("IMAGE", 20, lambda c: c.image),
    Column("STATUS", 15, lambda c: c.status),
    Column("PORTS", None, lambda c: c.ports),
)

IMAGE_COLUMNS: tuple[Column[ImageRecord], ...] = (
    Column("REPOSITORY", 25, lambda i: i.repository),
    Column("TAG", 15, lambda i: i.tag),
    Column("IMAGE ID", 12, lambda i: i.image_id),
    Column("SIZE", None, lambda i: i.size),
)


def render_container_table(containers: Sequence[ContainerRecord]) -> str:
    return render_table(
        containers,
        CONTAINER_COLUMNS,
        rule_width=80,
        empty_message="No containers found.",
    )


def render_image_table(images: Sequence[ImageRecord]) -> str:
    return render_table(
        images,
        IMAGE_COLUMNS,
        rule_width=70,
        empty_message="No images found.",
    )


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def is_running(container: ContainerRecord) -> bool:
    """Return ``True`` when the status text contains ``"Up"`` anywhere.

    Case-sensitive substring match, so ``"Exited (0) (Up was never true)"``
    counts as running and ``"up"`` does not.
    """
    return RUNNING_MARKER in container.status


def summarize(
    containers: Sequence[ContainerRecord],
    images: Sequence[ImageRecord],
    runtime_version: str,
) -> ReportSummary:
    """Count containers by running state and images in total."""
    running = sum(1 for container in containers if is_running(container))
    return ReportSummary(
        total_containers=len(containers),
        running=running,
        stopped=len(containers) - running,
        total_images=len(images),
        runtime_version=runtime_version,
    )


def render_summary(summary: ReportSummary) -> str:
    return "\n".join(
        (
            f"Total Containers: {summary.total_containers}",
            f"  - Running: {summary.running}",
            f"  - Stopped: {summary.stopped}",
            f"Total Images: {summary.total_images}",
            "",
            f"Docker Version: {summary.runtime_version}",
        )
    )


# ---------------------------------------------------------------------------
# File report
# ---------------------------------------------------------------------------

def _container_block(container: ContainerRecord) -> list[str]:
    lines = [
        f"- {container.name} ({container.id})",
        f"  Image: {container.image}",
        f"  Status: {container.status}",
    ]
    if container.ports:
        lines.append(f"  Ports: {container.ports}")
    lines.append("")
    return lines


def _image_block(image: ImageRecord) -> list[str]:
    return [
        f"- {image.repository}:{image.tag}",
        f"  ID: {image.image_id}",
        f"  Size: {image.size}",
        f"  Created: {image.created}",
        "",
    ]


def render_file_report(
    containers: Sequence[ContainerRecord],
    images: Sequence[ImageRecord],
    *,
    generated_at: datetime,
) -> str:
    """Render the full, non-truncated report persisted to disk.

    The ``Ports:`` line is emitted only for containers that publish
    ports.  The returned text ends with a newline.
    """
    lines = [
        "Docker System Report",
        f"Generated on: {generated_at.strftime(GENERATED_AT_FORMAT)}",
        REPORT_RULE,
        "",
        f"CONTAINERS ({len(containers)} total):",
    ]
    for container in containers:
        lines.extend(_container_block(container))

    lines.append(f"IMAGES ({len(images)} total):")
    for image in images:
        lines.extend(_image_block(image))

    return "\n".join(lines) + "\n"
