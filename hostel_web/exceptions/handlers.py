import logging

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse

from .custom import (
    BookingSubmissionError,
    HostelApiError,
    NotAuthenticatedError,
    RateLimitError,
    SubmissionInProgressError,
)

logger = logging.getLogger(__name__)


async def hostel_api_error_handler(_request: Request, exc: HostelApiError) -> JSONResponse:
    logger.error("Hostel API error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Hostel API error: {exc.message}"},
    )


async def booking_submission_error_handler(
    _request: Request, exc: BookingSubmissionError
) -> JSONResponse:
    logger.warning("Booking submission failed: %s (status=%s)", exc.message, exc.status_code)
    # Upstream 4xx rejections stay client errors; 5xx and transport failures are gateway errors
    if exc.status_code == 429:
        status_code = 429
    elif exc.status_code is not None and exc.status_code < 500:
        status_code = 400
    else:
        status_code = 502
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def submission_in_progress_handler(
    _request: Request, exc: SubmissionInProgressError
) -> JSONResponse:
    logger.warning("Rejected duplicate submit for draft %s", exc.draft_id)
    return JSONResponse(
        status_code=409,
        content={"detail": "A booking submission is already in progress"},
    )


async def not_authenticated_handler(
    _request: Request, exc: NotAuthenticatedError
) -> RedirectResponse:
    return RedirectResponse(url=exc.redirect_to, status_code=303)


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )
