# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from worktime import __version__
from worktime.config import settings
from worktime.exceptions import (
    CapExceededError,
    InvalidSubmissionError,
    LeaveRequestConflictError,
    NotEditableError,
    NotFoundError,
    UnauthorizedError,
    WorkTimeError,
)
from worktime.schemas.common import HealthResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Most specific classes first, LeaveRequestConflictError before its parent
ERROR_STATUS_CODES: list[tuple[type[WorkTimeError], int]] = [
    (UnauthorizedError, status.HTTP_403_FORBIDDEN),
    (NotEditableError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (LeaveRequestConflictError, status.HTTP_409_CONFLICT),
    (CapExceededError, status.HTTP_409_CONFLICT),
    (InvalidSubmissionError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_code_for(exc: WorkTimeError) -> int:
    """Get the HTTP status code for a rule violation."""
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


app = FastAPI(
    title="WorkTime",
    description="Employee hours and leave accounting",
    version=__version__,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WorkTimeError)
async def work_time_error_handler(request: Request, exc: WorkTimeError) -> JSONResponse:
    """Turn rule violations into JSON error responses."""
    status_code = status_code_for(exc)
    logger.info(
        f"{request.method} {request.url.path} rejected with {status_code}: "
        f"{exc.message}"
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from worktime.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
