"""
findates - Financial date conventions.

Business day calendars, business day adjustment, day count conventions,
year fractions and tenor arithmetic:
- Holiday calendars from explicit dates and recurring rules (incl. Easter)
- Following / Preceding / Modified business day adjustment
- Actual and 30/360 family day counters (Bond, 30E, 30U, 30E ISDA)
- Fixed-base and ACT/ACT ISDA year fractions
- Tenor parsing ("3M", "1Y6M", "2BD") with end-of-month handling

Example:
    >>> from datetime import date
    >>> from findates import Tenor, ModifiedFollowing, get_us_calendar
    >>> cal = get_us_calendar()
    >>> Tenor.from_string("3M").add_to_date(date(2024, 1, 31), ModifiedFollowing(cal))
    datetime.date(2024, 4, 30)
"""

__version__ = "0.1.0"

# Core conventions
from findates.core import (
    # Calendars
    Calendar,
    US_HOLIDAY_RULES,
    WEEKEND_CALENDAR,
    get_ny_calendar,
    get_us_calendar,
    # Holiday rules
    FridayBeforeEasterRule,
    HolidayRule,
    LastWeekWeekdayRule,
    MondayAfterEasterRule,
    MonthDayRule,
    OrdinalWeekWeekdayRule,
    Weekday,
    easter_sunday,
    # Adjustment
    BusinessDayConvention,
    DateAdjustingMethod,
    Following,
    ModifiedFollowing,
    ModifiedPreceding,
    Preceding,
    adjust_date,
    # Day counts
    ActualCounter,
    DayCounter,
    Days30Counter,
    Thirty360Backend,
    ActualActualISDA,
    DayCountConvention,
    FixedBaseTimeFraction,
    TimeFractionCalc,
    day_count_fraction,
    get_time_fraction_calc,
    # Tenors
    TENOR_TABLE,
    InvalidTenorError,
    Tenor,
    TenorUnit,
    parse_tenor,
)

# Configuration
from findates.conventions import (
    CalendarConfig,
    CalendarName,
    ConventionSet,
    get_day_counter,
    get_time_fraction,
    resolve_day_count_convention,
)

__all__ = [
    # Version
    "__version__",
    # Calendars
    "Calendar",
    "US_HOLIDAY_RULES",
    "WEEKEND_CALENDAR",
    "get_ny_calendar",
    "get_us_calendar",
    # Holiday rules
    "FridayBeforeEasterRule",
    "HolidayRule",
    "LastWeekWeekdayRule",
    "MondayAfterEasterRule",
    "MonthDayRule",
    "OrdinalWeekWeekdayRule",
    "Weekday",
    "easter_sunday",
    # Adjustment
    "BusinessDayConvention",
    "DateAdjustingMethod",
    "Following",
    "ModifiedFollowing",
    "ModifiedPreceding",
    "Preceding",
    "adjust_date",
    # Day counts
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
    # Tenors
    "TENOR_TABLE",
    "InvalidTenorError",
    "Tenor",
    "TenorUnit",
    "parse_tenor",
    # Configuration
    "CalendarConfig",
    "CalendarName",
    "ConventionSet",
    "get_day_counter",
    "get_time_fraction",
    "resolve_day_count_convention",
]
