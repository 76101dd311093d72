# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from worktime.api.v1 import auth, holidays, hours, requests, users

api_router = APIRouter()

# Session routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Work hours routes
api_router.include_router(hours.router, prefix="/hours", tags=["hours"])

# Leave request routes
api_router.include_router(requests.router, prefix="/requests", tags=["requests"])

# Holiday calendar routes
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])

# User management routes
api_router.include_router(users.router, prefix="/users", tags=["users"])
