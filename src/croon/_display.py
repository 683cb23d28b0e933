from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ._ast import FIELD_ORDER

if TYPE_CHECKING:
    from ._table import CronTable

_LABEL_WIDTH = 14


def _row(label: str, value: str) -> str:
    return f"{label:<{_LABEL_WIDTH}}{value}".rstrip()


def display(table: CronTable) -> str:
    """Render a table one field per row, label column first."""
    lines = [
        _row(str(field), " ".join(str(v) for v in table.values(field)))
        for field in FIELD_ORDER
    ]
    lines.append(_row("command", table.command))
    return "\n".join(lines)


def display_next(occurrence: datetime | None) -> str:
    return _row("next", occurrence.isoformat() if occurrence else "none")
