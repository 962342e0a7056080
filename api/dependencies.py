"""FastAPI dependencies for the breach check service.

Provides the shared BreachApi instance and the client IP key used for
rate limiting. Includes trusted proxy validation to prevent
X-Forwarded-For spoofing.
"""

from fastapi import Request
from slowapi import Limiter

from passleak import BreachApi
from passleak.config import RATE_LIMIT, TRUSTED_PROXIES


def get_client_ip(request: Request) -> str:
    """Extract client IP from request with trusted proxy validation.

    SECURITY: Only trusts X-Forwarded-For header if the direct connection
    comes from a configured trusted proxy. This prevents clients from
    dodging rate limits by setting the X-Forwarded-For header.

    Args:
        request: FastAPI request object

    Returns:
        Client IP address (from X-Forwarded-For if trusted proxy, else direct)
    """
    direct_ip = request.client.host if request.client else "unknown"

    if TRUSTED_PROXIES and direct_ip in TRUSTED_PROXIES:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain (original client)
            client_ip = forwarded.split(",")[0].strip()
            if client_ip and ("." in client_ip or ":" in client_ip):
                return client_ip

    return direct_ip


# Rate limiter keyed by client IP
limiter = Limiter(key_func=get_client_ip, default_limits=[RATE_LIMIT])


def get_breach_api(request: Request) -> BreachApi:
    """Return the BreachApi created at application startup."""
    return request.app.state.breach_api
