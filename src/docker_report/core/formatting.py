"""Fixed-width table formatting shared by every console table.

A cell is truncated to ``width - 1`` characters and then left-justified
to exactly ``width``, leaving at least one blank between columns.  The
trailing column carries ``width=None`` and is printed as-is.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

RecordT = TypeVar("RecordT")


def fit_cell(value: str, width: int | None) -> str:
    """Truncate *value* to ``width - 1`` characters and pad it to *width*.

    ``width=None`` marks the trailing column: the value is returned
    unchanged.
    """
    if width is None:
        return value
    return value[: max(width - 1, 0)].ljust(width)


@dataclass(frozen=True, slots=True)
class Column(Generic[RecordT]):
    """One table column: its header, fixed width and value accessor."""

    header: str
    width: int | None
    accessor: Callable[[RecordT], str]


def format_row(cells: Sequence[str], columns: Sequence[Column[RecordT]]) -> str:
    """Join *cells* applying each column's width."""
    return "".join(
        fit_cell(cell, column.width) for cell, column in zip(cells, columns)
    )


def render_table(
    records: Sequence[RecordT],
    columns: Sequence[Column[RecordT]],
    *,
    rule_width: int,
    empty_message: str,
) -> str:
    """Render *records* as a header, a dashed rule and one line per record.

    An empty *records* sequence renders *empty_message* alone.
    """
    if not records:
        return empty_message

    lines = [
        format_row([column.header for column in columns], columns),
        "-" * rule_width,
    ]
    for record in records:
        cells = [column.accessor(record) for column in columns]
        lines.append(format_row(cells, columns))
    return "\n".join(lines)
