"""
Recurring holiday rules.

Each rule maps a year to exactly one holiday date. Supported rules:
- fixed month/day (Independence Day, Christmas)
- n-th weekday of a month (Labor Day, Thanksgiving)
- last weekday of a month (Memorial Day)
- Good Friday and Easter Monday, from the Gregorian Easter date
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Union

from findates.core.dates import days_in_month


class Weekday(IntEnum):
    """Days of the week, numbered as in date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


def easter_sunday(year: int) -> date:
    """
    Easter Sunday for a Gregorian year.

    Anonymous Gregorian algorithm (Meeus/Jones/Butcher), closed form.

    Examples:
        >>> easter_sunday(2024)
        datetime.date(2024, 3, 31)
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    weekday_offset = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * weekday_offset) // 451
    month = (h + weekday_offset - 7 * m + 114) // 31
    day = (h + weekday_offset - 7 * m + 114) % 31 + 1

    return date(year, month, day)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in [1, 12], got {month}")


@dataclass(frozen=True)
class OrdinalWeekWeekdayRule:
    """
    The n-th occurrence of a weekday in a month.

    Columbus Day is OrdinalWeekWeekdayRule(2, Weekday.MONDAY, 10).

    Attributes:
        ordinal: Occurrence number, 1 for the first one (1-4)
        weekday: Day of the week
        month: Month number (1-12)
    """

    ordinal: int
    weekday: Weekday
    month: int

    def __post_init__(self) -> None:
        _check_month(self.month)
        # The 5th occurrence does not exist in every month.
        if not 1 <= self.ordinal <= 4:
            raise ValueError(f"Ordinal must be in [1, 4], got {self.ordinal}")

    def date_for_year(self, year: int) -> date:
        first = date(year, self.month, 1)
        offset = (self.weekday - first.weekday()) % 7
        return first + timedelta(days=offset, weeks=self.ordinal - 1)


@dataclass(frozen=True)
class LastWeekWeekdayRule:
    """
    The last occurrence of a weekday in a month (e.g. Memorial Day).

    Attributes:
        weekday: Day of the week
        month: Month number (1-12)
    """

    weekday: Weekday
    month: int

    def __post_init__(self) -> None:
        _check_month(self.month)

    def date_for_year(self, year: int) -> date:
        last = date(year, self.month, days_in_month(year, self.month))
        offset = (last.weekday() - self.weekday) % 7
        return last - timedelta(days=offset)


@dataclass(frozen=True)
class MonthDayRule:
    """
    A fixed calendar date every year (e.g. July 4th).

    Only dates that exist in every year are accepted, so Feb 29 is rejected.
    """

    month: int
    day: int

    def __post_init__(self) -> None:
        _check_month(self.month)
        # Non-leap year month lengths
        if not 1 <= self.day <= days_in_month(2001, self.month):
            raise ValueError(
                f"Day {self.day} does not exist in month {self.month} every year"
            )

    def date_for_year(self, year: int) -> date:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class MondayAfterEasterRule:
    """Easter Monday."""

    def date_for_year(self, year: int) -> date:
        return easter_sunday(year) + timedelta(days=1)


@dataclass(frozen=True)
class FridayBeforeEasterRule:
    """Good Friday."""

    def date_for_year(self, year: int) -> date:
        return easter_sunday(year) - timedelta(days=2)


HolidayRule = Union[
    OrdinalWeekWeekdayRule,
    LastWeekWeekdayRule,
    MonthDayRule,
    MondayAfterEasterRule,
    FridayBeforeEasterRule,
]
