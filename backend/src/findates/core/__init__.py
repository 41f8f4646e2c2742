"""Core utilities: calendars, business day adjustment, day counts and tenors."""

from findates.core.dates import (
    add_months,
    days_in_month,
    days_in_year,
    end_of_february,
    end_of_month,
    is_end_of_month,
    is_leap_year,
)
from findates.core.holidays import (
    FridayBeforeEasterRule,
    HolidayRule,
    LastWeekWeekdayRule,
    MondayAfterEasterRule,
    MonthDayRule,
    OrdinalWeekWeekdayRule,
    Weekday,
    easter_sunday,
)
from findates.core.calendar import (
    Calendar,
    US_HOLIDAY_RULES,
    WEEKEND_CALENDAR,
    get_ny_calendar,
    get_us_calendar,
)
from findates.core.adjustment import (
    BusinessDayConvention,
    DateAdjustingMethod,
    Following,
    ModifiedFollowing,
    ModifiedPreceding,
    Preceding,
    adjust_date,
)
from findates.core.day_count import (
    ActualCounter,
    DayCounter,
    Days30Counter,
    Thirty360Backend,
)
from findates.core.time_fraction import (
    ActualActualISDA,
    DayCountConvention,
    FixedBaseTimeFraction,
    TimeFractionCalc,
    day_count_fraction,
    get_time_fraction_calc,
)
from findates.core.tenor import (
    TENOR_TABLE,
    InvalidTenorError,
    Tenor,
    TenorUnit,
    parse_tenor,
)

__all__ = [
    "add_months",
    "days_in_month",
    "days_in_year",
    "end_of_february",
    "end_of_month",
    "is_end_of_month",
    "is_leap_year",
    "FridayBeforeEasterRule",
    "HolidayRule",
    "LastWeekWeekdayRule",
    "MondayAfterEasterRule",
    "MonthDayRule",
    "OrdinalWeekWeekdayRule",
    "Weekday",
    "easter_sunday",
    "Calendar",
    "US_HOLIDAY_RULES",
    "WEEKEND_CALENDAR",
    "get_ny_calendar",
    "get_us_calendar",
    "BusinessDayConvention",
    "DateAdjustingMethod",
    "Following",
    "ModifiedFollowing",
    "ModifiedPreceding",
    "Preceding",
    "adjust_date",
    "ActualCounter",
    "DayCounter",
    "Days30Counter",
    "Thirty360Backend",
    "ActualActualISDA",
    "DayCountConvention",
    "FixedBaseTimeFraction",
    "TimeFractionCalc",
    "day_count_fraction",
    "get_time_fraction_calc",
    "TENOR_TABLE",
    "InvalidTenorError",
    "Tenor",
    "TenorUnit",
    "parse_tenor",
]
