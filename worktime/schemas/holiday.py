# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday calendar schemas."""

import datetime

from pydantic import BaseModel


class HolidayResponse(BaseModel):
    """A single public holiday."""

    date: datetime.date
    name: str


class HolidayCheckResponse(BaseModel):
    """Working-day status of a date."""

    date: datetime.date
    is_holiday: bool
    is_weekend: bool
    name: str | None = None
