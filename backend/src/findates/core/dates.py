"""
Gregorian calendar helpers.

Leap years, month lengths, end-of-month detection and month arithmetic
used by the calendar, day count and tenor modules.
"""

from datetime import date


def is_leap_year(year: int) -> bool:
    """Check if a year is a Gregorian leap year."""
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def days_in_year(year: int) -> int:
    """Number of days in a year (365 or 366)."""
    return 366 if is_leap_year(year) else 365


_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a given month of a given year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def end_of_month(d: date) -> date:
    """Last calendar day of the month containing d."""
    return date(d.year, d.month, days_in_month(d.year, d.month))


def is_end_of_month(d: date) -> bool:
    """Check if d is the last calendar day of its month."""
    return d.day == days_in_month(d.year, d.month)


def end_of_february(year: int) -> date:
    """Last day of February (28th or 29th) in a given year."""
    return date(year, 2, days_in_month(year, 2))


def is_end_of_february(d: date) -> bool:
    """Check if d is the last day of February of its own year."""
    return d.month == 2 and is_end_of_month(d)


def add_months(d: date, months: int) -> date:
    """
    Add calendar months to a date, clamping the day to the target month.

    Jan 31 + 1 month gives Feb 28 (or Feb 29 in a leap year).

    Args:
        d: Start date
        months: Number of months to add (may be negative)

    Returns:
        Shifted date
    """
    year = d.year + (d.month + months - 1) // 12
    month = (d.month + months - 1) % 12 + 1

    day = min(d.day, days_in_month(year, month))

    return date(year, month, day)


def with_day_clamped(d: date, day: int) -> date:
    """
    Replace the day of month, falling back to the latest valid day.

    Asking for the 31st in a 30-day month gives the 30th, in February the
    28th or 29th.
    """
    return d.replace(day=min(day, days_in_month(d.year, d.month)))
