"""Pure parsers for the runtime's tab-delimited listing output.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Input shape
-----------
One header row followed by zero or more data rows, fields separated by
``\\t``.  The header is the first non-empty line and is discarded
without inspection.  Blank lines are ignored.  A row lacking one of
its required fields is dropped silently; parsing never raises.
"""

from __future__ import annotations

from collections.abc import Iterator

from docker_report.core.models import ContainerRecord, ImageRecord

FIELD_SEPARATOR: str = "\t"

CONTAINER_REQUIRED_FIELDS: int = 4
"""id, name, image, status.  ``ports`` is optional."""

IMAGE_REQUIRED_FIELDS: int = 5
"""repository, tag, id, created, size."""


# ---------------------------------------------------------------------------
# Row splitting
# ---------------------------------------------------------------------------

def iter_data_rows(text: str) -> Iterator[list[str]]:
    """Yield the tab-split fields of every data row in *text*.

    The first non-empty line is the header and is skipped; blank lines
    are skipped wherever they appear.
    """
    header_seen = False
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line:
            continue
        if not header_seen:
            header_seen = True
            continue
        yield line.split(FIELD_SEPARATOR)


# ---------------------------------------------------------------------------
# Record parsers
# ---------------------------------------------------------------------------

def parse_containers(text: str) -> tuple[ContainerRecord, ...]:
    """Parse a container listing into records, preserving order."""
    records: list[ContainerRecord] = []
    for fields in iter_data_rows(text):
        if len(fields) < CONTAINER_REQUIRED_FIELDS:
            continue
        container_id, name, image, status = fields[:CONTAINER_REQUIRED_FIELDS]
        ports = fields[4] if len(fields) > 4 else ""
        records.append(
            ContainerRecord(
                id=container_id,
                name=name,
                image=image,
                status=status,
                ports=ports,
            )
        )
    return tuple(records)


def parse_images(text: str) -> tuple[ImageRecord, ...]:
    """Parse an image listing into records, preserving order."""
    records: list[ImageRecord] = []
    for fields in iter_data_rows(text):
        if len(fields) < IMAGE_REQUIRED_FIELDS:
            continue
        repository, tag, image_id, created, size = fields[:IMAGE_REQUIRED_FIELDS]
        records.append(
            ImageRecord(
                repository=repository,
                tag=tag,
                image_id=image_id,
                created=created,
                size=size,
            )
        )
    return tuple(records)
