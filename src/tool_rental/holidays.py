"""Holiday calendar used for billing.

Only two holidays are observed: Independence Day (shifted off weekends)
and Labor Day. Every function here is a pure function of the date, so the
per-year holiday set is cached.
"""

from datetime import date, timedelta
from functools import lru_cache
from typing import FrozenSet

SATURDAY = 5
SUNDAY = 6
MONDAY = 0


def independence_day(year: int) -> date:
    """Observed Independence Day for *year*.

    July 4 on a Saturday is observed Friday July 3; on a Sunday it is
    observed Monday July 5.
    """
    day = date(year, 7, 4)
    if day.weekday() == SATURDAY:
        return day - timedelta(days=1)
    if day.weekday() == SUNDAY:
        return day + timedelta(days=1)
    return day


def labor_day(year: int) -> date:
    """First Monday of September in *year*."""
    first = date(year, 9, 1)
    return first + timedelta(days=(MONDAY - first.weekday()) % 7)


@lru_cache(maxsize=256)
def observed_holidays(year: int) -> FrozenSet[date]:
    """All observed holiday dates for *year*."""
    return frozenset((independence_day(year), labor_day(year)))


def is_holiday(day: date) -> bool:
    return day in observed_holidays(day.year)


def is_weekend(day: date) -> bool:
    return day.weekday() >= SATURDAY
