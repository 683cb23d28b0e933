from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Field(Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day of month"
    MONTH = "month"
    DAY_OF_WEEK = "day of week"

    @property
    def min(self) -> int:
        return _FIELD_BOUNDS[self][0]

    @property
    def max(self) -> int:
        return _FIELD_BOUNDS[self][1]

    @property
    def accepts_aliases(self) -> bool:
        return self is Field.DAY_OF_WEEK

    def __str__(self) -> str:
        return self.value


_FIELD_BOUNDS: dict[Field, tuple[int, int]] = {
    Field.MINUTE: (0, 59),
    Field.HOUR: (0, 23),
    Field.DAY_OF_MONTH: (1, 31),
    Field.MONTH: (1, 12),
    Field.DAY_OF_WEEK: (0, 6),
}

# Order in which fields appear on a schedule line.
FIELD_ORDER: tuple[Field, ...] = (
    Field.MINUTE,
    Field.HOUR,
    Field.DAY_OF_MONTH,
    Field.MONTH,
    Field.DAY_OF_WEEK,
)

# Cron day-of-week numbering: Sunday=0, Monday=1, ..., Saturday=6.
DAY_ALIASES: dict[str, int] = {
    "MON": 1,
    "TUE": 2,
    "WED": 3,
    "THU": 4,
    "FRI": 5,
    "SAT": 6,
    "SUN": 0,
}


# --- Base expressions ---


@dataclass(frozen=True, slots=True)
class All:
    pass


@dataclass(frozen=True, slots=True)
class Exact:
    value: int


@dataclass(frozen=True, slots=True)
class Range:
    start: int
    end: int


BaseExpression = All | Exact | Range


# --- Field expressions ---


@dataclass(frozen=True, slots=True)
class Plain:
    expr: BaseExpression


@dataclass(frozen=True, slots=True)
class Stepped:
    start: BaseExpression
    step: int


FieldExpression = Plain | Stepped
