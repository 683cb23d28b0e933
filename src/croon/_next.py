from __future__ import annotations

import calendar
import logging
from bisect import bisect_left, bisect_right
from datetime import MAXYEAR, datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._table import CronTable

logger = logging.getLogger(__name__)

# =============================================================================
# Search horizon
# =============================================================================
# A single carry pass can land on a day the chosen month does not have
# (31 April, 29 February outside leap years). The search then restarts at the
# first minute of the following month. Restarts stop once the candidate year
# is more than SEARCH_YEARS past the starting year: eight years always spans
# a leap day, so anything still unresolved never occurs.
# =============================================================================

SEARCH_YEARS = 8


def _within(values: tuple[int, ...], min_val: int, max_val: int) -> tuple[int, ...]:
    # Exact values skip bounds checks at parse time; drop what no calendar has.
    return tuple(v for v in values if min_val <= v <= max_val)


def _first_at_or_after(values: tuple[int, ...], current: int) -> tuple[int, bool]:
    """Smallest value >= current, else the first value and a carry flag."""
    i = bisect_left(values, current)
    if i < len(values):
        return values[i], False
    return values[0], True


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _cron_weekday(dt: datetime) -> int:
    """Cron DOW number: Sunday=0, Monday=1, ..., Saturday=6."""
    return dt.isoweekday() % 7


def next_from(table: CronTable, after: datetime) -> datetime | None:
    minutes = _within(table.minute, 0, 59)
    hours = _within(table.hour, 0, 23)
    days = _within(table.day_of_month, 1, 31)
    months = _within(table.month, 1, 12)
    if not (minutes and hours and days and months and table.day_of_week):
        return None

    try:
        start = after.replace(second=0, microsecond=0) + timedelta(minutes=1)
    except OverflowError:
        return None

    year, month, day, hour, minute = start.year, start.month, start.day, start.hour, start.minute
    horizon = start.year + SEARCH_YEARS

    while year <= horizon:
        # minute
        m, carry = _first_at_or_after(minutes, minute)
        if carry:
            hour += 1

        # hour
        h, carry = _first_at_or_after(hours, hour)
        if carry:
            m = minutes[0]
            day += 1
        elif h > hour:
            m = minutes[0]

        # day of month, limited to days this month has
        in_month = days[: bisect_right(days, _days_in_month(year, month))]
        if in_month:
            d, carry = _first_at_or_after(in_month, day)
        else:
            d, carry = days[0], True
        if carry:
            d, h, m = days[0], hours[0], minutes[0]
            month += 1
        elif d > day:
            h, m = hours[0], minutes[0]

        # month
        mo, carry = _first_at_or_after(months, month)
        if carry:
            d, h, m = days[0], hours[0], minutes[0]
            year += 1
        elif mo > month:
            d, h, m = days[0], hours[0], minutes[0]

        if year > MAXYEAR:
            return None

        if d > _days_in_month(year, mo):
            # restart from the first minute of the next month
            year, month = (year + 1, 1) if mo == 12 else (year, mo + 1)
            day, hour, minute = 1, 0, 0
            continue

        candidate = datetime(year, mo, d, h, m, tzinfo=after.tzinfo)
        if _cron_weekday(candidate) not in table.day_of_week:
            logger.debug(
                "candidate %s falls on weekday %d, not in %s",
                candidate.isoformat(),
                _cron_weekday(candidate),
                table.day_of_week,
            )
            return None
        return candidate

    logger.debug("no occurrence within %d years of %s", SEARCH_YEARS, after.isoformat())
    return None


def matches(table: CronTable, dt: datetime) -> bool:
    return (
        dt.minute in table.minute
        and dt.hour in table.hour
        and dt.day in table.day_of_month
        and dt.month in table.month
        and _cron_weekday(dt) in table.day_of_week
    )
