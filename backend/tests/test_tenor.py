"""Tests for tenor parsing and date arithmetic."""

import pytest
from datetime import date, timedelta

from hypothesis import given
from hypothesis import strategies as st

from findates.core.adjustment import Following, ModifiedFollowing
from findates.core.calendar import Calendar
from findates.core.tenor import (
    TENOR_TABLE,
    InvalidTenorError,
    Tenor,
    TenorUnit,
    parse_tenor,
)


class TestParseTenor:
    """Tests for parse_tenor()."""

    @pytest.mark.parametrize("text,value,unit", [
        ("3M", 3, TenorUnit.MONTH),
        ("1Y", 12, TenorUnit.MONTH),
        ("1Y6M", 18, TenorUnit.MONTH),
        ("18M", 18, TenorUnit.MONTH),
        ("2BD", 2, TenorUnit.BUSINESS_DAY),
        ("3W", 3, TenorUnit.WEEK),
        ("50Y", 50, TenorUnit.YEAR),
    ])
    def test_table_tenors(self, text: str, value: int, unit: TenorUnit) -> None:
        """Canonical tenors come from the table."""
        assert parse_tenor(text) == Tenor(value, unit)

    @pytest.mark.parametrize("text,value,unit", [
        ("7W", 7, TenorUnit.WEEK),
        ("100Y", 100, TenorUnit.YEAR),
        ("45D", 45, TenorUnit.DAY),
        ("5BD", 5, TenorUnit.BUSINESS_DAY),
        ("5B", 5, TenorUnit.BUSINESS_DAY),
        ("255M", 255, TenorUnit.MONTH),
    ])
    def test_generic_tenors(self, text: str, value: int, unit: TenorUnit) -> None:
        """Other <digits><unit> strings are parsed generically."""
        assert parse_tenor(text) == Tenor(value, unit)

    def test_case_and_whitespace(self) -> None:
        """Parsing trims and ignores case."""
        assert parse_tenor("  1y6m ") == Tenor(18, TenorUnit.MONTH)
        assert parse_tenor("2bd") == Tenor(2, TenorUnit.BUSINESS_DAY)
        assert parse_tenor("\t9m\n") == Tenor(9, TenorUnit.MONTH)

    @pytest.mark.parametrize("text", [
        "", "M", "0M", "256D", "-1M", "1.5Y", "3X", "1Y3M", "M3", "3 M", "1000000Y",
        "\u0663M", "\uff13M", "1\uff12M",
    ])
    def test_invalid(self, text: str) -> None:
        """Invalid strings give None, never a default tenor."""
        assert parse_tenor(text) is None

    def test_from_string_raises(self) -> None:
        """from_string() raises for invalid strings."""
        with pytest.raises(InvalidTenorError, match="Invalid tenor"):
            Tenor.from_string("3X")

    def test_invalid_tenor_error_is_value_error(self) -> None:
        """Callers catching ValueError also catch invalid tenors."""
        assert issubclass(InvalidTenorError, ValueError)

    def test_direct_construction_validates_value(self) -> None:
        """Values outside 1-255 are rejected."""
        with pytest.raises(ValueError):
            Tenor(0, TenorUnit.DAY)
        with pytest.raises(ValueError):
            Tenor(256, TenorUnit.DAY)

    def test_str(self) -> None:
        """String form is the canonical <value><unit>."""
        assert str(Tenor.from_string("1Y")) == "12M"
        assert str(Tenor.from_string("2bd")) == "2BD"

    def test_table_is_read_only(self) -> None:
        """The canonical table cannot be modified."""
        with pytest.raises(TypeError):
            TENOR_TABLE["1Q"] = (3, TenorUnit.MONTH)  # type: ignore[index]


class TestAddToDate:
    """Tests for Tenor.add_to_date()."""

    @given(d=st.dates(min_value=date(1900, 1, 1), max_value=date(2200, 12, 31)))
    def test_weeks_are_calendar_days(self, d: date) -> None:
        """3W is always 21 calendar days."""
        assert Tenor.from_string("3W").add_to_date(d, None) == d + timedelta(days=21)

    @given(d=st.dates(min_value=date(1900, 1, 1), max_value=date(2200, 12, 31)))
    def test_week_ignores_end_of_month_flag(self, d: date) -> None:
        """Day handling only applies to month and year tenors."""
        tenor = Tenor.from_string("3W")

        assert tenor.add_to_date(d, None, end_of_month_roll=False) == d + timedelta(days=21)
        assert tenor.add_to_date(d, None, end_of_month_roll=True) == d + timedelta(days=21)

    def test_days(self) -> None:
        """Day tenors add calendar days."""
        assert Tenor.from_string("2D").add_to_date(date(2024, 2, 28)) == date(2024, 3, 1)

    def test_months_clamp(self) -> None:
        """Jan 31 + 1M is the last day of February."""
        assert Tenor.from_string("1M").add_to_date(date(2024, 1, 31)) == date(2024, 2, 29)
        assert Tenor.from_string("3M").add_to_date(date(2024, 1, 31)) == date(2024, 4, 30)

    def test_years(self) -> None:
        """Year tenors are twelve months each."""
        assert Tenor.from_string("2Y").add_to_date(date(2024, 2, 29)) == date(2026, 2, 28)
        assert Tenor.from_string("10Y").add_to_date(date(2024, 5, 15)) == date(2034, 5, 15)

    def test_one_year_from_leap_day_with_eom(self) -> None:
        """Feb 29 + 1Y with EOM roll is Feb 28 of the next year."""
        result = Tenor.from_string("1Y").add_to_date(date(2024, 2, 29), None, end_of_month_roll=True)

        assert result == date(2025, 2, 28)

    def test_eom_roll_from_month_end(self) -> None:
        """A month-end start date rolls to the month end of the result."""
        tenor = Tenor.from_string("1M")

        assert tenor.add_to_date(date(2023, 2, 28), end_of_month_roll=True) == date(2023, 3, 31)
        assert tenor.add_to_date(date(2024, 4, 30), end_of_month_roll=True) == date(2024, 5, 31)
        assert Tenor.from_string("12M").add_to_date(
            date(2023, 2, 28), end_of_month_roll=True
        ) == date(2024, 2, 29)

    def test_no_eom_roll_keeps_day(self) -> None:
        """Without EOM roll the day of month is kept."""
        tenor = Tenor.from_string("1M")

        assert tenor.add_to_date(date(2023, 2, 28), end_of_month_roll=False) == date(2023, 3, 28)
        assert tenor.add_to_date(date(2024, 4, 30), end_of_month_roll=False) == date(2024, 5, 30)
        assert tenor.add_to_date(date(2023, 2, 28)) == date(2023, 3, 28)

    def test_day_31_falls_back(self) -> None:
        """A start on the 31st keeps the 31st where possible, else the month end."""
        assert Tenor.from_string("2M").add_to_date(
            date(2024, 1, 31), end_of_month_roll=False
        ) == date(2024, 3, 31)
        assert Tenor.from_string("1M").add_to_date(
            date(2024, 1, 31), end_of_month_roll=False
        ) == date(2024, 2, 29)

    def test_eom_roll_not_applied_to_mid_month(self) -> None:
        """EOM roll only affects month-end start dates."""
        result = Tenor.from_string("1M").add_to_date(date(2024, 1, 15), end_of_month_roll=True)

        assert result == date(2024, 2, 15)

    def test_business_days_use_adjuster_calendar(self, us_calendar: Calendar) -> None:
        """2BD steps over Independence Day on the US calendar."""
        tenor = Tenor.from_string("2BD")

        assert tenor.add_to_date(date(2024, 7, 3), Following(us_calendar)) == date(2024, 7, 8)

    def test_business_days_without_adjuster(self) -> None:
        """Without an adjuster only weekends are skipped."""
        tenor = Tenor.from_string("2BD")

        assert tenor.add_to_date(date(2024, 7, 3)) == date(2024, 7, 5)
        assert tenor.add_to_date(date(2024, 7, 5)) == date(2024, 7, 9)

    def test_adjuster_applied_last(self, weekend_calendar: Calendar) -> None:
        """The result is rolled onto a business day."""
        tenor = Tenor.from_string("1M")

        # Jun 29 2024 is a Saturday; Following would cross into July
        result = tenor.add_to_date(date(2024, 5, 29), ModifiedFollowing(weekend_calendar))

        assert result == date(2024, 6, 28)

    def test_eom_then_adjust(self, us_calendar: Calendar) -> None:
        """EOM roll happens before the business day adjustment."""
        tenor = Tenor.from_string("1M")

        # May 31 -> Jun 30 2024 (Sunday) -> Friday Jun 28
        result = tenor.add_to_date(date(2024, 5, 31), ModifiedFollowing(us_calendar), True)

        assert result == date(2024, 6, 28)

    def test_past_year_9999_raises(self) -> None:
        """Results beyond datetime.date range raise ValueError."""
        with pytest.raises(ValueError):
            Tenor.from_string("50Y").add_to_date(date(9980, 1, 1))


class TestSubtractFromDate:
    """Tests for Tenor.subtract_from_date()."""

    def test_months_back(self) -> None:
        """Mar 31 - 1M is Feb 29 in a leap year."""
        assert Tenor.from_string("1M").subtract_from_date(date(2024, 3, 31)) == date(2024, 2, 29)

    def test_business_days_back(self, us_calendar: Calendar) -> None:
        """2BD back from Jul 8 skips the weekend and Independence Day."""
        tenor = Tenor.from_string("2BD")

        assert tenor.subtract_from_date(date(2024, 7, 8), Following(us_calendar)) == date(2024, 7, 3)

    def test_eom_roll_backwards(self) -> None:
        """EOM roll also applies going backwards."""
        tenor = Tenor.from_string("1M")

        assert tenor.subtract_from_date(date(2024, 3, 31), end_of_month_roll=True) == date(2024, 2, 29)
        assert tenor.subtract_from_date(date(2024, 4, 30), end_of_month_roll=True) == date(2024, 3, 31)

    @given(d=st.dates(min_value=date(1900, 1, 1), max_value=date(2200, 12, 31)))
    def test_days_inverse(self, d: date) -> None:
        """Day tenors are exact inverses."""
        tenor = Tenor.from_string("45D")

        assert tenor.subtract_from_date(tenor.add_to_date(d)) == d
