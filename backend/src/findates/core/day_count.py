"""
Day counters for interest rate calculations.

Supports: Actual, 30/360 Bond basis, 30E/360, 30U/360 (ISDA) and
30E/360 ISDA.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Sequence, Tuple, Union

import numpy as np

from findates.core.dates import is_end_of_february, is_end_of_month


class Thirty360Backend(str, Enum):
    """Day-of-month adjustment rules of the 30/360 family."""

    BOND = "30/360"
    E = "30E/360"
    U = "30U/360"
    E_ISDA = "30E/360 ISDA"


def _thirty_360_days_of_month(
    backend: Thirty360Backend,
    start: date,
    end: date
) -> Tuple[int, int]:
    """
    Adjusted day-of-month pair (d1, d2) for a 30/360 backend.

    BOND and E share the same rule: the end day is only capped at 30 when
    the start day was capped.
    """
    if backend in (Thirty360Backend.BOND, Thirty360Backend.E):
        d1 = min(start.day, 30)
        d2 = min(end.day, 30) if d1 > 29 else end.day
        return d1, d2

    elif backend == Thirty360Backend.U:
        start_eof = is_end_of_february(start)
        d1 = start.day
        d2 = end.day
        if start_eof and is_end_of_february(end):
            d2 = 30
        if start_eof:
            d1 = 30
        if d2 == 31 and d1 in (30, 31):
            d2 = 30
        return min(d1, 30), d2

    elif backend == Thirty360Backend.E_ISDA:
        d1 = 30 if is_end_of_month(start) else start.day
        d2 = 30 if is_end_of_month(end) else end.day
        return d1, d2

    else:
        raise ValueError(f"Unknown 30/360 backend: {backend}")


@dataclass(frozen=True)
class ActualCounter:
    """Actual number of calendar days."""

    name: str = "ACT"

    def day_count(self, start: date, end: date) -> int:
        """Signed calendar-day difference end - start."""
        return end.toordinal() - start.toordinal()

    def day_count_vector(self, start: date, ends: Sequence[date]) -> np.ndarray:
        """Day counts from start to each end date."""
        ordinals = np.array([e.toordinal() for e in ends], dtype=np.int64)
        return ordinals - start.toordinal()


@dataclass(frozen=True)
class Days30Counter:
    """
    30/360 family day counter.

    Each month counts 30 days and each year 360:
        360 * (y2 - y1) + 30 * (m2 - m1) + (d2 - d1)
    with d1, d2 supplied by the backend.

    Attributes:
        backend: Day-of-month adjustment rule
    """

    backend: Thirty360Backend = Thirty360Backend.BOND

    @property
    def name(self) -> str:
        return self.backend.value

    def day_count(self, start: date, end: date) -> int:
        d1, d2 = _thirty_360_days_of_month(self.backend, start, end)
        return (
            360 * (end.year - start.year)
            + 30 * (end.month - start.month)
            + d2 - d1
        )

    def day_count_vector(self, start: date, ends: Sequence[date]) -> np.ndarray:
        return np.array([self.day_count(start, e) for e in ends], dtype=np.int64)


DayCounter = Union[ActualCounter, Days30Counter]
