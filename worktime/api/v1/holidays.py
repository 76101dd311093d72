# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday calendar API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from worktime.api.deps import get_current_user
from worktime.models import User
from worktime.schemas.holiday import HolidayCheckResponse, HolidayResponse
from worktime.services.holiday_calendar import get_calendar

router = APIRouter()


@router.get("/check/{check_date}", response_model=HolidayCheckResponse)
def check_date(
    check_date: date,
    current_user: User = Depends(get_current_user),
) -> HolidayCheckResponse:
    """Check whether a date is a weekend day or a public holiday."""
    calendar = get_calendar()
    name = calendar.holiday_name(check_date)
    return HolidayCheckResponse(
        date=check_date,
        is_holiday=name is not None,
        is_weekend=check_date.weekday() >= 5,
        name=name,
    )


@router.get("/{year}", response_model=list[HolidayResponse])
def list_holidays(
    year: int,
    current_user: User = Depends(get_current_user),
) -> list[HolidayResponse]:
    """List the public holidays of a year."""
    if not 1900 <= year <= 2100:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Year out of range",
        )

    holidays = get_calendar().get_holidays(year)
    return [
        HolidayResponse(date=day, name=name)
        for day, name in sorted(holidays.items())
    ]
