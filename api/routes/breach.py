"""Breach check endpoints.

Public, rate-limited endpoints. Passwords are only hashed in process;
the range API sees the 5-char prefix of the SHA-1 digest.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_breach_api, limiter
from api.models import (
    BreachCheckRequest,
    BreachCheckResponse,
    BreachCountResponse,
    ErrorResponse,
)
from breach_check import check_and_warn
from passleak import BreachApi
from passleak.config import RATE_LIMIT


router = APIRouter(tags=["Breach Check"])

ERROR_RESPONSES = {
    502: {"model": ErrorResponse, "description": "Range service misbehaved"},
    503: {"model": ErrorResponse, "description": "Range service unreachable"},
}


@router.post("/breach-count", response_model=BreachCountResponse, responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMIT)
async def breach_count(
    request: Request,
    body: BreachCheckRequest,
    api: BreachApi = Depends(get_breach_api),
):
    """Count how often a password appears in known data breaches."""
    count = await api.count_breaches(body.password)
    return BreachCountResponse(count=count, is_breached=count > 0)


@router.post("/breach-check", response_model=BreachCheckResponse)
@limiter.limit(RATE_LIMIT)
async def breach_check(
    request: Request,
    body: BreachCheckRequest,
    api: BreachApi = Depends(get_breach_api),
):
    """Check if password appears in known data breaches."""
    is_safe, message = await check_and_warn(body.password, api)
    return BreachCheckResponse(is_safe=is_safe, message=message)
