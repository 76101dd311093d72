# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Errors raised by the hours and leave services.

The HTTP layer maps each class to a status code in ``worktime.main``.
"""

from datetime import date

from worktime.models.enums import LeaveCap, NotEditableReason


class WorkTimeError(Exception):
    """Base exception for hours and leave rule violations."""

    code = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Return a JSON-serializable description of the error."""
        return {"code": self.code, "detail": self.message}


class UnauthorizedError(WorkTimeError):
    """The actor may not act on this user or entry."""

    code = "unauthorized"


class NotEditableError(WorkTimeError):
    """The date is outside what the actor may create or modify."""

    code = "not_editable"

    def __init__(self, day: date, reason: NotEditableReason) -> None:
        messages = {
            NotEditableReason.SUNDAY: f"{day.isoformat()} is a Sunday",
            NotEditableReason.HOLIDAY: f"{day.isoformat()} is a public holiday",
            NotEditableReason.OUT_OF_WINDOW: (
                f"{day.isoformat()} is outside the editable period"
            ),
        }
        super().__init__(messages[reason])
        self.date = day
        self.reason = reason

    def to_dict(self) -> dict:
        """Return a JSON-serializable description of the error."""
        return {**super().to_dict(), "reason": self.reason.value}


class InvalidSubmissionError(WorkTimeError):
    """The submitted day is empty or contradictory."""

    code = "invalid_submission"


class LeaveRequestConflictError(InvalidSubmissionError):
    """A leave request overlaps existing requests or entries."""

    code = "conflict"


class CapExceededError(WorkTimeError):
    """A leave cap would be exceeded by the submission."""

    code = "cap_exceeded"

    def __init__(
        self,
        cap: LeaveCap,
        used: float,
        requested: float,
        limit: float,
    ) -> None:
        if cap == LeaveCap.SPECIAL_LEAVE_MONTHLY:
            message = (
                f"Monthly special leave limit of {limit:g}h exceeded: "
                f"{used:g}h already used this month, {requested:g}h requested"
            )
        else:
            message = (
                f"Parental leave limit of {limit:g} days reached: "
                f"{used:g} days already used"
            )
        super().__init__(message)
        self.cap = cap
        self.used = used
        self.requested = requested
        self.limit = limit

    def to_dict(self) -> dict:
        """Return a JSON-serializable description of the error."""
        return {
            **super().to_dict(),
            "cap": self.cap.value,
            "used": self.used,
            "requested": self.requested,
            "limit": self.limit,
        }


class NotFoundError(WorkTimeError):
    """The requested entry, request or user does not exist."""

    code = "not_found"
