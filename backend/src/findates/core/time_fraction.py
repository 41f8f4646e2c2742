"""
Year fraction calculators.

Supports: ACT/360, ACT/365F, ACT/ACT ISDA and the 30/360 family.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Sequence, Union

import numpy as np

from findates.core.dates import days_in_year
from findates.core.day_count import (
    ActualCounter,
    DayCounter,
    Days30Counter,
    Thirty360Backend,
)


@dataclass(frozen=True)
class FixedBaseTimeFraction:
    """
    Day count divided by a constant year length.

    Attributes:
        day_counter: Day counter producing the numerator
        base: Days per year (e.g., 360.0 or 365.0)
    """

    day_counter: DayCounter
    base: float

    def __post_init__(self) -> None:
        if self.base <= 0:
            raise ValueError(f"base must be positive, got {self.base}")

    def time_fraction(self, start: date, end: date) -> float:
        return self.day_counter.day_count(start, end) / self.base

    def time_fraction_vector(self, start: date, ends: Sequence[date]) -> np.ndarray:
        days = self.day_counter.day_count_vector(start, ends)
        return days / self.base


@dataclass(frozen=True)
class ActualActualISDA:
    """
    ACT/ACT ISDA year fraction.

    Within one calendar year: actual days / days in that year. Across years
    the interval is split: the start-year piece runs from start to Dec 31 of
    the start year, the end-year piece from Jan 1 of the end year to end, each
    over its own year length, and every full year in between adds 1.0.
    """

    day_counter: ActualCounter = field(default_factory=ActualCounter)

    def time_fraction(self, start: date, end: date) -> float:
        start_year = start.year
        end_year = end.year
        start_year_days = days_in_year(start_year)

        if start_year == end_year:
            return self.day_counter.day_count(start, end) / start_year_days

        year_fraction = self.day_counter.day_count(start, date(start_year, 12, 31)) / start_year_days
        year_fraction += self.day_counter.day_count(date(end_year, 1, 1), end) / days_in_year(end_year)
        # Full years in between
        year_fraction += float(max(end_year - start_year - 1, 0))
        return year_fraction

    def time_fraction_vector(self, start: date, ends: Sequence[date]) -> np.ndarray:
        return np.array([self.time_fraction(start, e) for e in ends], dtype=np.float64)


TimeFractionCalc = Union[FixedBaseTimeFraction, ActualActualISDA]


class DayCountConvention(str, Enum):
    """Supported day count conventions."""

    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    ACT_ACT_ISDA = "ACT/ACT ISDA"
    THIRTY_360 = "30/360"
    THIRTY_E_360 = "30E/360"
    THIRTY_U_360 = "30U/360"
    THIRTY_E_360_ISDA = "30E/360 ISDA"


def get_time_fraction_calc(convention: DayCountConvention) -> TimeFractionCalc:
    """Build the year fraction calculator for a day count convention."""
    if convention == DayCountConvention.ACT_360:
        return FixedBaseTimeFraction(ActualCounter(), 360.0)

    elif convention == DayCountConvention.ACT_365F:
        return FixedBaseTimeFraction(ActualCounter(), 365.0)

    elif convention == DayCountConvention.ACT_ACT_ISDA:
        return ActualActualISDA()

    elif convention == DayCountConvention.THIRTY_360:
        return FixedBaseTimeFraction(Days30Counter(Thirty360Backend.BOND), 360.0)

    elif convention == DayCountConvention.THIRTY_E_360:
        return FixedBaseTimeFraction(Days30Counter(Thirty360Backend.E), 360.0)

    elif convention == DayCountConvention.THIRTY_U_360:
        return FixedBaseTimeFraction(Days30Counter(Thirty360Backend.U), 360.0)

    elif convention == DayCountConvention.THIRTY_E_360_ISDA:
        return FixedBaseTimeFraction(Days30Counter(Thirty360Backend.E_ISDA), 360.0)

    else:
        raise ValueError(f"Unknown day count convention: {convention}")


def day_count_fraction(
    start: date,
    end: date,
    convention: DayCountConvention
) -> float:
    """
    Calculate the year fraction between two dates.

    Args:
        start: Start date
        end: End date (may precede start, giving a negative fraction)
        convention: Day count convention to use

    Returns:
        Year fraction as a float

    Examples:
        >>> from datetime import date
        >>> day_count_fraction(date(2024, 1, 1), date(2024, 7, 1), DayCountConvention.ACT_360)
        0.5055555555555555
    """
    return get_time_fraction_calc(convention).time_fraction(start, end)
