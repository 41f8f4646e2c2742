"""
Business day adjustment conventions.

Supports Following, Preceding and their Modified variants.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional

from findates.core.calendar import WEEKEND_CALENDAR, Calendar


class BusinessDayConvention(str, Enum):
    """Business day adjustment conventions."""

    UNADJUSTED = "UNADJUSTED"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


def adjust_date(
    d: date,
    convention: BusinessDayConvention,
    calendar: Optional[Calendar] = None
) -> date:
    """
    Adjust a date according to a business day convention.

    Args:
        d: Date to adjust
        convention: Business day convention
        calendar: Calendar to use (defaults to weekend-only)

    Returns:
        Adjusted date
    """
    cal = calendar or WEEKEND_CALENDAR

    if convention == BusinessDayConvention.UNADJUSTED:
        return d

    elif convention == BusinessDayConvention.FOLLOWING:
        return cal.next_business_day(d)

    elif convention == BusinessDayConvention.PRECEDING:
        return cal.prev_business_day(d)

    elif convention == BusinessDayConvention.MODIFIED_FOLLOWING:
        adjusted = cal.next_business_day(d)
        # If adjusted date is in a different month, go backwards instead
        if adjusted.month != d.month:
            adjusted = cal.prev_business_day(d)
        return adjusted

    elif convention == BusinessDayConvention.MODIFIED_PRECEDING:
        adjusted = cal.prev_business_day(d)
        # If adjusted date is in a different month, go forwards instead
        if adjusted.month != d.month:
            adjusted = cal.next_business_day(d)
        return adjusted

    else:
        raise ValueError(f"Unknown business day convention: {convention}")


@dataclass(frozen=True)
class DateAdjustingMethod:
    """
    A business day convention bound to a calendar.

    The calendar is shared, not copied. The adjuster only reads it.

    Attributes:
        convention: Business day convention
        calendar: Holiday calendar used to detect non-business days
    """

    convention: BusinessDayConvention
    calendar: Calendar = WEEKEND_CALENDAR

    def adjust(self, d: date) -> date:
        """Roll a date onto a business day."""
        return adjust_date(d, self.convention, self.calendar)

    def adjust_many(self, dates: Iterable[date]) -> List[date]:
        """Adjust each date; output[i] corresponds to dates[i]."""
        return [self.adjust(d) for d in dates]


def Following(calendar: Calendar) -> DateAdjustingMethod:
    return DateAdjustingMethod(BusinessDayConvention.FOLLOWING, calendar)


def Preceding(calendar: Calendar) -> DateAdjustingMethod:
    return DateAdjustingMethod(BusinessDayConvention.PRECEDING, calendar)


def ModifiedFollowing(calendar: Calendar) -> DateAdjustingMethod:
    return DateAdjustingMethod(BusinessDayConvention.MODIFIED_FOLLOWING, calendar)


def ModifiedPreceding(calendar: Calendar) -> DateAdjustingMethod:
    return DateAdjustingMethod(BusinessDayConvention.MODIFIED_PRECEDING, calendar)
