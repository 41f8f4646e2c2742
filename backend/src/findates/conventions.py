"""
Pydantic schema for market date conventions.

A ConventionSet bundles a calendar, a business day rule, a day count
convention and an optional tenor, and builds the matching objects.
"""

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from findates.core.adjustment import BusinessDayConvention, DateAdjustingMethod
from findates.core.calendar import Calendar, get_us_calendar
from findates.core.day_count import ActualCounter, DayCounter, Days30Counter, Thirty360Backend
from findates.core.tenor import Tenor, parse_tenor
from findates.core.time_fraction import (
    DayCountConvention,
    TimeFractionCalc,
    get_time_fraction_calc,
)


# ============================================================================
# Name registries
# ============================================================================

DAY_COUNT_ALIASES: Dict[str, DayCountConvention] = {
    "ACT/360": DayCountConvention.ACT_360,
    "ACTUAL/360": DayCountConvention.ACT_360,
    "ACT/365F": DayCountConvention.ACT_365F,
    "ACT/365": DayCountConvention.ACT_365F,
    "ACTUAL/365F": DayCountConvention.ACT_365F,
    "ACT/ACT": DayCountConvention.ACT_ACT_ISDA,
    "ACT/ACT ISDA": DayCountConvention.ACT_ACT_ISDA,
    "ACTUAL/ACTUAL": DayCountConvention.ACT_ACT_ISDA,
    "30/360": DayCountConvention.THIRTY_360,
    "30/360 BOND": DayCountConvention.THIRTY_360,
    "30E/360": DayCountConvention.THIRTY_E_360,
    "30/360 EUROPEAN": DayCountConvention.THIRTY_E_360,
    "30U/360": DayCountConvention.THIRTY_U_360,
    "30/360 ISDA": DayCountConvention.THIRTY_U_360,
    "30E/360 ISDA": DayCountConvention.THIRTY_E_360_ISDA,
}

_DAY_COUNTERS: Dict[DayCountConvention, DayCounter] = {
    DayCountConvention.ACT_360: ActualCounter(),
    DayCountConvention.ACT_365F: ActualCounter(),
    DayCountConvention.ACT_ACT_ISDA: ActualCounter(),
    DayCountConvention.THIRTY_360: Days30Counter(Thirty360Backend.BOND),
    DayCountConvention.THIRTY_E_360: Days30Counter(Thirty360Backend.E),
    DayCountConvention.THIRTY_U_360: Days30Counter(Thirty360Backend.U),
    DayCountConvention.THIRTY_E_360_ISDA: Days30Counter(Thirty360Backend.E_ISDA),
}


def resolve_day_count_convention(name: str) -> DayCountConvention:
    """Look up a day count convention by name or alias (case-insensitive)."""
    key = " ".join(name.upper().split())
    if key not in DAY_COUNT_ALIASES:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_ALIASES.keys())}"
        )
    return DAY_COUNT_ALIASES[key]


def get_day_counter(name: str) -> DayCounter:
    """Get the day counter behind a day count convention name."""
    return _DAY_COUNTERS[resolve_day_count_convention(name)]


def get_time_fraction(name: str) -> TimeFractionCalc:
    """Get the year fraction calculator for a day count convention name."""
    return get_time_fraction_calc(resolve_day_count_convention(name))


# ============================================================================
# Schemas
# ============================================================================

class CalendarName(str, Enum):
    """Supported calendars."""
    WEEKENDS = "WE"          # Weekends only
    USNY = "USNY"            # US market (New York)


class CalendarConfig(BaseModel):
    """Calendar specification."""
    model_config = ConfigDict(frozen=True)

    name: CalendarName = CalendarName.WEEKENDS
    start_year: Optional[int] = Field(
        default=None, ge=1, le=9999,
        description="First year to materialise holiday rules for"
    )
    end_year: Optional[int] = Field(
        default=None, ge=1, le=9999,
        description="Last year to materialise holiday rules for"
    )
    holidays: List[date] = Field(
        default_factory=list,
        description="Extra explicit holidays"
    )

    @model_validator(mode='after')
    def validate_year_range(self) -> 'CalendarConfig':
        """Validate the materialisation range is complete and ordered."""
        if (self.start_year is None) != (self.end_year is None):
            raise ValueError("start_year and end_year must be set together")
        if self.start_year is not None and self.end_year < self.start_year:
            raise ValueError(
                f"end_year ({self.end_year}) must be >= start_year ({self.start_year})"
            )
        if self.start_year is not None and self.name == CalendarName.WEEKENDS:
            raise ValueError(
                "start_year and end_year require a calendar with holiday rules, "
                f"not {self.name.value!r}"
            )
        return self

    def build(self) -> Calendar:
        """Create the calendar."""
        if self.name == CalendarName.USNY:
            return get_us_calendar(self.holidays, self.start_year, self.end_year)

        return Calendar(holidays=self.holidays, name=self.name.value)


class ConventionSet(BaseModel):
    """Date conventions for one leg or instrument."""
    model_config = ConfigDict(frozen=True)

    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    business_day_convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    day_count: DayCountConvention = DayCountConvention.ACT_360
    end_of_month_roll: Optional[bool] = None
    tenor: Optional[str] = Field(
        default=None,
        description="Tenor such as '3M' or '1Y6M'"
    )

    @field_validator('day_count', mode='before')
    @classmethod
    def validate_day_count(cls, v: object) -> object:
        """Accept day count aliases such as 'Actual/360'."""
        if isinstance(v, str) and not isinstance(v, DayCountConvention):
            return resolve_day_count_convention(v)
        return v

    @field_validator('tenor')
    @classmethod
    def validate_tenor(cls, v: Optional[str]) -> Optional[str]:
        """Validate the tenor parses."""
        if v is not None and parse_tenor(v) is None:
            raise ValueError(f"Invalid tenor: {v!r}")
        return v

    def build_calendar(self) -> Calendar:
        return self.calendar.build()

    def build_adjuster(self, calendar: Optional[Calendar] = None) -> DateAdjustingMethod:
        """Business day adjuster, on a freshly built calendar unless one is given."""
        return DateAdjustingMethod(
            self.business_day_convention,
            calendar if calendar is not None else self.build_calendar(),
        )

    def build_time_fraction(self) -> TimeFractionCalc:
        return get_time_fraction_calc(self.day_count)

    def build_tenor(self) -> Tenor:
        if self.tenor is None:
            raise ValueError("No tenor configured")
        return Tenor.from_string(self.tenor)

    def maturity(self, start: date, calendar: Optional[Calendar] = None) -> date:
        """Adjusted date one tenor after start."""
        return self.build_tenor().add_to_date(
            start,
            self.build_adjuster(calendar),
            self.end_of_month_roll,
        )

    def year_fraction(self, start: date, end: date) -> float:
        return self.build_time_fraction().time_fraction(start, end)
