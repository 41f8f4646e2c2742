"""
Tenors: symbolic date offsets such as "3M", "1Y6M" or "2BD".

A tenor string is parsed into a (value, unit) pair and applied to a date
with optional end-of-month handling and business day adjustment.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from findates.core.adjustment import DateAdjustingMethod
from findates.core.calendar import WEEKEND_CALENDAR
from findates.core.dates import add_months, end_of_month, is_end_of_month, with_day_clamped

logger = logging.getLogger(__name__)


class TenorUnit(str, Enum):
    """Tenor units."""

    DAY = "D"
    BUSINESS_DAY = "BD"
    WEEK = "W"
    MONTH = "M"
    YEAR = "Y"


MAX_TENOR_VALUE = 255


class InvalidTenorError(ValueError):
    """Raised when a string is not a valid tenor."""


def _build_tenor_table() -> Mapping[str, Tuple[int, TenorUnit]]:
    table = {
        "1D": (1, TenorUnit.DAY),
        "2D": (2, TenorUnit.DAY),
        "1BD": (1, TenorUnit.BUSINESS_DAY),
        "2BD": (2, TenorUnit.BUSINESS_DAY),
        "1W": (1, TenorUnit.WEEK),
        "2W": (2, TenorUnit.WEEK),
        "3W": (3, TenorUnit.WEEK),
    }
    for months in range(1, 13):
        table[f"{months}M"] = (months, TenorUnit.MONTH)
    table["1Y"] = (12, TenorUnit.MONTH)
    table["18M"] = (18, TenorUnit.MONTH)
    table["1Y6M"] = (18, TenorUnit.MONTH)
    for years in (2, 3, 4, 5, 10, 20, 25, 30, 35, 40, 45, 50):
        table[f"{years}Y"] = (years, TenorUnit.YEAR)
    return MappingProxyType(table)


# Canonical market tenors, looked up before generic parsing.
TENOR_TABLE = _build_tenor_table()

_TENOR_PATTERN = re.compile(r"^([0-9]+)(BD|B|D|W|M|Y)$")
_UNIT_LETTERS = {
    "D": TenorUnit.DAY,
    "B": TenorUnit.BUSINESS_DAY,
    "BD": TenorUnit.BUSINESS_DAY,
    "W": TenorUnit.WEEK,
    "M": TenorUnit.MONTH,
    "Y": TenorUnit.YEAR,
}


@dataclass(frozen=True)
class Tenor:
    """
    A date offset of `value` units.

    Build from a string with parse_tenor() or Tenor.from_string().

    Attributes:
        value: Number of units (1-255)
        unit: Offset unit
    """

    value: int
    unit: TenorUnit

    def __post_init__(self) -> None:
        if not 1 <= self.value <= MAX_TENOR_VALUE:
            raise ValueError(
                f"Tenor value must be in [1, {MAX_TENOR_VALUE}], got {self.value}"
            )
        if not isinstance(self.unit, TenorUnit):
            raise ValueError(f"Unknown tenor unit: {self.unit!r}")

    def __str__(self) -> str:
        return f"{self.value}{self.unit.value}"

    @classmethod
    def from_string(cls, text: str) -> "Tenor":
        """
        Parse a tenor string.

        Raises:
            InvalidTenorError: If the string is not a valid tenor
        """
        tenor = parse_tenor(text)
        if tenor is None:
            raise InvalidTenorError(f"Invalid tenor: {text!r}")
        return tenor

    def add_to_date(
        self,
        d: date,
        adjuster: Optional[DateAdjustingMethod] = None,
        end_of_month_roll: Optional[bool] = None
    ) -> date:
        """
        Apply the tenor forward from a date.

        Args:
            d: Start date
            adjuster: Business day adjustment applied to the result; its
                calendar is also used for business day tenors
            end_of_month_roll: For month and year tenors only. True: a start
                date on the last day of its month gives the last day of the
                resulting month. False, or True with a start date that is not
                a month end: a start day of 28 or 31 is re-applied to the
                result (31 falls back to 30, 29, 28). None: no day handling.

        Returns:
            Resulting date

        Raises:
            ValueError: If the result falls outside the years 1-9999 that
                datetime.date supports (e.g. "50Y" from 9980-01-01)

        Examples:
            >>> Tenor.from_string("1Y").add_to_date(date(2024, 2, 29), end_of_month_roll=True)
            datetime.date(2025, 2, 28)
        """
        return self._apply(d, 1, adjuster, end_of_month_roll)

    def subtract_from_date(
        self,
        d: date,
        adjuster: Optional[DateAdjustingMethod] = None,
        end_of_month_roll: Optional[bool] = None
    ) -> date:
        """Apply the tenor backward from a date. Same rules as add_to_date()."""
        return self._apply(d, -1, adjuster, end_of_month_roll)

    def _apply(
        self,
        d: date,
        direction: int,
        adjuster: Optional[DateAdjustingMethod],
        end_of_month_roll: Optional[bool]
    ) -> date:
        n = self.value * direction

        if self.unit == TenorUnit.DAY:
            result = d + timedelta(days=n)
        elif self.unit == TenorUnit.BUSINESS_DAY:
            calendar = adjuster.calendar if adjuster is not None else WEEKEND_CALENDAR
            if direction > 0:
                result = calendar.add_business_days(d, self.value)
            else:
                result = calendar.subtract_business_days(d, self.value)
        elif self.unit == TenorUnit.WEEK:
            result = d + timedelta(weeks=n)
        elif self.unit == TenorUnit.MONTH:
            result = add_months(d, n)
        elif self.unit == TenorUnit.YEAR:
            result = add_months(d, 12 * n)
        else:
            raise AssertionError(f"No date arithmetic for tenor unit {self.unit!r}")

        if end_of_month_roll is not None and self.unit in (TenorUnit.MONTH, TenorUnit.YEAR):
            result = _roll_day_of_month(d, result, end_of_month_roll)

        if adjuster is not None:
            result = adjuster.adjust(result)
        return result


def _roll_day_of_month(origin: date, target: date, end_of_month_roll: bool) -> date:
    if end_of_month_roll and is_end_of_month(origin):
        return end_of_month(target)
    if origin.day in (28, 31):
        return with_day_clamped(target, origin.day)
    return target


def parse_tenor(text: str) -> Optional[Tenor]:
    """
    Parse a tenor string, case-insensitively.

    Known market tenors ("1Y", "1Y6M", ...) come from TENOR_TABLE; other
    strings must read <digits><unit> with unit one of D, BD (or B), W, M, Y
    and a value between 1 and 255.

    Returns:
        The tenor, or None if the string is not a valid tenor
    """
    key = text.strip().upper()

    if key in TENOR_TABLE:
        value, unit = TENOR_TABLE[key]
        return Tenor(value, unit)

    match = _TENOR_PATTERN.match(key)
    if match is None:
        logger.debug("Rejected tenor string %r", text)
        return None

    value = int(match.group(1))
    if not 1 <= value <= MAX_TENOR_VALUE:
        logger.debug("Tenor value out of range in %r", text)
        return None

    return Tenor(value, _UNIT_LETTERS[match.group(2)])
