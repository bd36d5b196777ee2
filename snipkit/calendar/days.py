"""
Day-of-week models.

Days are ordered Monday first, matching ``datetime.date.weekday()``.
"""

from enum import Enum, IntEnum
from typing import Union


class Day(IntEnum):
    """Days of the week, Monday=0 through Sunday=6."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DayType(str, Enum):
    """Classification of a day."""
    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"


WEEKEND_DAYS = frozenset({Day.SATURDAY, Day.SUNDAY})


def get_day_type(day: Day) -> str:
    """Return "Weekend" for Saturday and Sunday, "Weekday" otherwise."""
    if day in WEEKEND_DAYS:
        return DayType.WEEKEND.value
    return DayType.WEEKDAY.value


def parse_day(value: Union[Day, str, int]) -> Day:
    """
    Resolve a day from its name (any case) or its Monday-first index.

    Raises:
        ValueError: If the value names no day
    """
    if isinstance(value, Day):
        return value
    if isinstance(value, str):
        try:
            return Day[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown day name: {value!r}") from None
    if isinstance(value, int) and not isinstance(value, bool):
        return Day(value)
    raise ValueError(f"Cannot interpret {value!r} as a day")
