# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """Role of a portal user."""

    EMPLOYEE = "employee"
    ADMIN = "admin"


class DayType(str, Enum):
    """Kind of day being submitted."""

    NORMAL = "normal"
    VACATION = "vacation"
    SICKNESS = "sickness"


class LeaveRequestType(str, Enum):
    """Leave request type enumeration."""

    VACATION = "vacation"
    SICKNESS = "sickness"
    PERMISSION = "permission"


class LeaveRequestStatus(str, Enum):
    """Leave request status enumeration."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotEditableReason(str, Enum):
    """Why a date cannot be edited by an employee."""

    SUNDAY = "sunday"
    HOLIDAY = "holiday"
    OUT_OF_WINDOW = "out_of_window"


class LeaveCap(str, Enum):
    """Leave caps checked against historical entries."""

    SPECIAL_LEAVE_MONTHLY = "special_leave_monthly"
    PARENTAL_LEAVE_LIFETIME = "parental_leave_lifetime"
