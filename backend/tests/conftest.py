"""
Shared pytest fixtures for findates tests.

Provides calendars and holiday lists reused across test modules.
"""

import pytest
from datetime import date

from findates.core.calendar import Calendar, get_us_calendar


@pytest.fixture
def weekend_calendar() -> Calendar:
    """Calendar with no holidays (weekends only)."""
    return Calendar(name="WE")


@pytest.fixture
def us_calendar() -> Calendar:
    """US market calendar with rules only (nothing materialised)."""
    return get_us_calendar()


@pytest.fixture
def us_calendar_2024() -> Calendar:
    """US market calendar materialised for 2024."""
    return get_us_calendar(start_year=2024, end_year=2024)


@pytest.fixture
def us_holidays_2024() -> list[date]:
    """US market holidays for 2024 (none falls on a weekend)."""
    return [
        date(2024, 1, 1),    # New Year's Day
        date(2024, 1, 15),   # Martin Luther King Jr. Day
        date(2024, 2, 19),   # Presidents' Day
        date(2024, 3, 29),   # Good Friday
        date(2024, 5, 27),   # Memorial Day
        date(2024, 6, 19),   # Juneteenth
        date(2024, 7, 4),    # Independence Day
        date(2024, 9, 2),    # Labor Day
        date(2024, 10, 14),  # Columbus Day
        date(2024, 11, 11),  # Veterans Day
        date(2024, 11, 28),  # Thanksgiving Day
        date(2024, 12, 25),  # Christmas Day
    ]
