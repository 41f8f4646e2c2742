"""
Business day calendars.

A calendar combines explicit holiday dates with recurring holiday rules.
Rules are evaluated on demand, so a calendar answers holiday queries for any
year even before its rules have been materialised into dates.
"""

import logging
from bisect import bisect_left, insort
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from findates.core.holidays import (
    FridayBeforeEasterRule,
    HolidayRule,
    LastWeekWeekdayRule,
    MonthDayRule,
    OrdinalWeekWeekdayRule,
    Weekday,
)

logger = logging.getLogger(__name__)


def is_weekend(d: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return d.weekday() >= Weekday.SATURDAY


def next_weekday(d: date) -> date:
    """Next Monday-Friday date strictly after d."""
    wd = d.weekday()
    if wd == Weekday.FRIDAY:
        return d + timedelta(days=3)
    if wd == Weekday.SATURDAY:
        return d + timedelta(days=2)
    return d + timedelta(days=1)


def previous_weekday(d: date) -> date:
    """Previous Monday-Friday date strictly before d."""
    wd = d.weekday()
    if wd == Weekday.MONDAY:
        return d - timedelta(days=3)
    if wd == Weekday.SUNDAY:
        return d - timedelta(days=2)
    return d - timedelta(days=1)


class Calendar:
    """
    Business day calendar with explicit holidays and recurring holiday rules.

    The explicit holiday list is kept sorted and free of duplicates after
    every mutation. Rules are fixed at construction; adding them to the
    explicit list only happens through add_holidays_with_rules().

    A calendar may be shared by any number of DateAdjustingMethod objects.
    It has no internal locking: do not mutate it while they are in use.
    """

    def __init__(
        self,
        holiday_rules: Optional[Iterable[HolidayRule]] = None,
        holidays: Optional[Iterable[date]] = None,
        name: str = "WE",  # Weekend-only calendar
    ) -> None:
        """
        Initialize calendar.

        Args:
            holiday_rules: Recurring rules (e.g. MonthDayRule(12, 25))
            holidays: Explicit holiday dates (weekends need not be listed)
            name: Calendar identifier (e.g., "WE", "USNY")
        """
        self.name = name
        self._holiday_rules: Tuple[HolidayRule, ...] = tuple(holiday_rules or ())
        self._holidays: List[date] = sorted(set(holidays or ()))
        self._log_weekend_holidays(self._holidays)

    def __repr__(self) -> str:
        return (
            f"Calendar(name={self.name!r}, holidays={len(self._holidays)}, "
            f"rules={len(self._holiday_rules)})"
        )

    @property
    def holidays(self) -> Tuple[date, ...]:
        """Explicit holidays, ascending."""
        return tuple(self._holidays)

    @property
    def holiday_rules(self) -> Tuple[HolidayRule, ...]:
        return self._holiday_rules

    def _is_explicit_holiday(self, d: date) -> bool:
        i = bisect_left(self._holidays, d)
        return i < len(self._holidays) and self._holidays[i] == d

    def is_holiday(self, d: date) -> bool:
        """
        Check if a date is a holiday.

        True when d is an explicit holiday or when any rule, evaluated for
        d's year, produces d.
        """
        if self._is_explicit_holiday(d):
            return True
        return any(rule.date_for_year(d.year) == d for rule in self._holiday_rules)

    def is_business_day(self, d: date) -> bool:
        """Check if a date is a business day."""
        return not is_weekend(d) and not self.is_holiday(d)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_holiday(self, holiday: date) -> None:
        """Add a single explicit holiday."""
        if not self._is_explicit_holiday(holiday):
            self._log_weekend_holidays([holiday])
            insort(self._holidays, holiday)

    def add_holidays(self, holidays: Iterable[date]) -> None:
        """Add explicit holidays to the calendar."""
        holidays = list(holidays)
        self._log_weekend_holidays(holidays)
        self._merge_holidays(holidays)

    def _merge_holidays(self, holidays: Iterable[date]) -> None:
        self._holidays = sorted(set(self._holidays).union(holidays))

    def _log_weekend_holidays(self, holidays: Iterable[date]) -> None:
        for holiday in holidays:
            if is_weekend(holiday):
                logger.debug(
                    "Calendar %s: explicit holiday %s falls on a weekend",
                    self.name, holiday,
                )

    def add_holidays_with_rules(self, start_year: int, end_year: int) -> None:
        """
        Materialise every rule for each year in [start_year, end_year].

        Raises:
            ValueError: If end_year < start_year
        """
        if end_year < start_year:
            raise ValueError(
                f"end_year ({end_year}) must be >= start_year ({start_year})"
            )

        generated = [
            rule.date_for_year(year)
            for year in range(start_year, end_year + 1)
            for rule in self._holiday_rules
        ]
        logger.debug(
            "Calendar %s: materialised %d rule dates for %d-%d",
            self.name, len(generated), start_year, end_year,
        )
        self._merge_holidays(generated)

    def delete_holidays(self) -> None:
        """Remove all explicit holidays. Rules are kept."""
        self._holidays.clear()

    # ------------------------------------------------------------------
    # Business day arithmetic
    # ------------------------------------------------------------------

    def add_business_days(self, d: date, days: int) -> date:
        """
        Move forward by a number of business days.

        Steps from weekday to weekday (Friday and Saturday go straight to
        Monday) and skips holidays until `days` business days are consumed.

        Args:
            d: Start date (need not be a business day)
            days: Number of business days, >= 0

        Returns:
            The resulting business day, or d itself when days == 0
        """
        if days < 0:
            raise ValueError(f"days must be >= 0, got {days}")

        current = d
        remaining = days
        while remaining > 0:
            current = next_weekday(current)
            if not self.is_holiday(current):
                remaining -= 1
        return current

    def subtract_business_days(self, d: date, days: int) -> date:
        """Move backward by a number of business days."""
        if days < 0:
            raise ValueError(f"days must be >= 0, got {days}")

        current = d
        remaining = days
        while remaining > 0:
            current = previous_weekday(current)
            if not self.is_holiday(current):
                remaining -= 1
        return current

    def next_business_day(self, d: date) -> date:
        """Get the next business day on or after the given date."""
        current = d
        while not self.is_business_day(current):
            current += timedelta(days=1)
        return current

    def prev_business_day(self, d: date) -> date:
        """Get the previous business day on or before the given date."""
        current = d
        while not self.is_business_day(current):
            current -= timedelta(days=1)
        return current

    def business_days_between(self, start: date, end: date) -> int:
        """Count business days between two dates (exclusive of start, inclusive of end)."""
        if end <= start:
            return 0

        count = 0
        current = start + timedelta(days=1)
        while current <= end:
            if self.is_business_day(current):
                count += 1
            current += timedelta(days=1)

        return count

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------

    def combine(self, other: "Calendar") -> "Calendar":
        """
        Union of two calendars (e.g. New York + London).

        Explicit holidays are merged, rule lists are concatenated with rules
        already present in self left out. Neither input is modified.
        """
        rules = list(self._holiday_rules)
        rules.extend(r for r in other.holiday_rules if r not in self._holiday_rules)
        combined = Calendar(
            holiday_rules=rules,
            holidays=self._holidays + list(other.holidays),
            name=f"{self.name}+{other.name}",
        )
        logger.debug("Combined calendars into %r", combined)
        return combined

    def __add__(self, other: "Calendar") -> "Calendar":
        return self.combine(other)


# Default weekend-only calendar. Shared, so never mutate it.
WEEKEND_CALENDAR = Calendar(name="WE")


US_HOLIDAY_RULES: Tuple[HolidayRule, ...] = (
    MonthDayRule(1, 1),                                      # New Year's Day
    OrdinalWeekWeekdayRule(3, Weekday.MONDAY, 1),            # Martin Luther King Jr. Day
    OrdinalWeekWeekdayRule(3, Weekday.MONDAY, 2),            # Presidents' Day
    FridayBeforeEasterRule(),                                # Good Friday
    LastWeekWeekdayRule(Weekday.MONDAY, 5),                  # Memorial Day
    MonthDayRule(6, 19),                                     # Juneteenth
    MonthDayRule(7, 4),                                      # Independence Day
    OrdinalWeekWeekdayRule(1, Weekday.MONDAY, 9),            # Labor Day
    OrdinalWeekWeekdayRule(2, Weekday.MONDAY, 10),           # Columbus Day
    MonthDayRule(11, 11),                                    # Veterans Day
    OrdinalWeekWeekdayRule(4, Weekday.THURSDAY, 11),         # Thanksgiving Day
    MonthDayRule(12, 25),                                    # Christmas Day
)


def get_us_calendar(
    holidays: Optional[Iterable[date]] = None,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
) -> Calendar:
    """
    US market (New York) calendar.

    Args:
        holidays: Extra explicit holidays
        start_year: First year to materialise rule dates for
        end_year: Last year to materialise rule dates for

    Returns:
        Calendar with the twelve US holiday rules, materialised over
        [start_year, end_year] when both are given

    Raises:
        ValueError: If only one of start_year/end_year is given, or if
            end_year < start_year
    """
    if (start_year is None) != (end_year is None):
        raise ValueError("If start_year or end_year is set, both must be set")

    calendar = Calendar(holiday_rules=US_HOLIDAY_RULES, holidays=holidays, name="USNY")
    if start_year is not None and end_year is not None:
        calendar.add_holidays_with_rules(start_year, end_year)
    return calendar


get_ny_calendar = get_us_calendar
