# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday calendar."""

from datetime import date
from functools import lru_cache

import holidays

from worktime.config import settings


class HolidayCalendar:
    """Non-working holidays for a country, plus configured extra days.

    Movable feasts come from the ``holidays`` package. Extra fixed-date
    holidays (for example a local patron saint) are given as a mapping of
    ``"MM-DD"`` to a name and are applied to every year.
    """

    def __init__(
        self,
        country_code: str = "IT",
        subdivision: str | None = None,
        extra_holidays: dict[str, str] | None = None,
    ) -> None:
        """Initialize the calendar.

        Args:
            country_code: ISO 2-letter country code.
            subdivision: Optional state/region code.
            extra_holidays: Additional "MM-DD" -> name entries.

        Raises:
            ValueError: If an extra holiday key is not a valid "MM-DD" day.
        """
        self.country_code = country_code
        self.subdivision = subdivision
        self.extra_holidays = {
            _parse_month_day(key): name
            for key, name in (extra_holidays or {}).items()
        }
        self._years: dict[int, dict[date, str]] = {}

    def get_holidays(self, year: int) -> dict[date, str]:
        """Get all holidays of a year.

        Args:
            year: The year to get holidays for.

        Returns:
            Dictionary mapping dates to holiday names.
        """
        table = self._years.get(year)
        if table is None:
            country = holidays.country_holidays(
                self.country_code, subdiv=self.subdivision, years=year
            )
            table = dict(country.items())
            for (month, day), name in self.extra_holidays.items():
                try:
                    table.setdefault(date(year, month, day), name)
                except ValueError:
                    # 02-29 outside leap years
                    continue
            self._years[year] = table
        return table

    def is_holiday(self, check_date: date) -> bool:
        """Check if a date is a non-working holiday."""
        return check_date in self.get_holidays(check_date.year)

    def holiday_name(self, check_date: date) -> str | None:
        """Get the name of the holiday on a date, or None."""
        return self.get_holidays(check_date.year).get(check_date)

    def is_non_working_day(self, check_date: date) -> bool:
        """Check if a date is a weekend day or a holiday."""
        return check_date.weekday() >= 5 or self.is_holiday(check_date)


def _parse_month_day(value: str) -> tuple[int, int]:
    month_str, _, day_str = value.partition("-")
    month, day = int(month_str), int(day_str)
    # Validate against a leap year so 02-29 is accepted
    date(2000, month, day)
    return month, day


@lru_cache
def get_calendar() -> HolidayCalendar:
    """Return the calendar configured in the application settings."""
    return HolidayCalendar(
        country_code=settings.holiday_country,
        subdivision=settings.holiday_subdivision,
        extra_holidays=settings.extra_holidays,
    )


def is_holiday(check_date: date) -> bool:
    """Check a date against the configured calendar."""
    return get_calendar().is_holiday(check_date)


def holiday_name(check_date: date) -> str | None:
    """Get a holiday name from the configured calendar."""
    return get_calendar().holiday_name(check_date)
