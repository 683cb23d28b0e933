from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ._ast import FIELD_ORDER, Field
from ._display import display
from ._error import CronError, RangeError
from ._expand import expand
from ._next import matches as _matches
from ._next import next_from as _next_from
from ._parser import LineParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CronTable:
    """A parsed schedule line: the values each field matches, plus the command.

    Every field is a tuple of distinct integers in ascending order. A field
    may be empty, in which case the table never matches.
    """

    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    def __post_init__(self) -> None:
        for field in FIELD_ORDER:
            values = self.values(field)
            if any(a >= b for a, b in zip(values, values[1:])):
                raise ValueError(f"{field} values must be strictly ascending: {values}")
        if not self.command.strip():
            raise ValueError("command must not be empty")

    @classmethod
    def parse(cls, input_text: str) -> CronTable:
        return assemble(input_text)

    @classmethod
    def validate(cls, input_text: str) -> bool:
        try:
            assemble(input_text)
            return True
        except CronError:
            return False

    def values(self, field: Field) -> tuple[int, ...]:
        match field:
            case Field.MINUTE:
                return self.minute
            case Field.HOUR:
                return self.hour
            case Field.DAY_OF_MONTH:
                return self.day_of_month
            case Field.MONTH:
                return self.month
            case Field.DAY_OF_WEEK:
                return self.day_of_week

    def next_from(self, after: datetime) -> datetime | None:
        """Earliest matching minute strictly after ``after``, or None.

        None is also returned when the first candidate date falls on a day of
        the week the table excludes; later days are not searched.
        """
        return _next_from(self, after)

    def matches(self, dt: datetime) -> bool:
        return _matches(self, dt)

    def __str__(self) -> str:
        return display(self)


def assemble(input_text: str) -> CronTable:
    """Parse and expand a full schedule line.

    Fields are handled strictly left to right, so the first bad field decides
    which error is raised. Raises ParseError or RangeError.
    """
    parser = LineParser(input_text)

    expanded: list[tuple[int, ...]] = []
    for field in FIELD_ORDER:
        try:
            exprs = parser.field(field)
            values = expand(exprs, field.min, field.max)
        except RangeError as e:
            span = e.span if e.span is not None else parser.last_span
            raise CronError.range(f"{field}: {e}", span, input_text) from None
        if not values:
            logger.debug("%s field %r matches no values", field, exprs)
        expanded.append(values)

    command = parser.command()

    minute, hour, day_of_month, month, day_of_week = expanded
    table = CronTable(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month=month,
        day_of_week=day_of_week,
        command=command,
    )
    logger.debug("assembled %r", table)
    return table
