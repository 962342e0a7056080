"""FastAPI application configuration.

Main entry point for the Breach Check REST API.
Implements security best practices including rate limiting, security headers,
HTTPS enforcement, and restrictive CORS configuration.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.dependencies import limiter
from api.routes import breach_router, health_router
from api.routes.health import SERVICE_VERSION
from passleak import (
    BreachApi,
    BreachCheckError,
    DecodeError,
    HttpCandidateFetcher,
    NetworkError,
    PaddingError,
    ServerError,
)
from passleak.config import CORS_ORIGINS, REQUIRE_HTTPS
from passleak.siem import configure_logging


logger = logging.getLogger(__name__)

# Status code and machine-readable error per breach check failure
ERROR_STATUS: dict[type, tuple[int, str]] = {
    NetworkError: (503, "network_error"),
    ServerError: (502, "upstream_error"),
    DecodeError: (502, "decode_error"),
    PaddingError: (502, "padding_violation"),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Share one pooled HTTP client across all breach checks."""
    configure_logging()
    async with httpx.AsyncClient() as client:
        app.state.breach_api = BreachApi(HttpCandidateFetcher(client))
        yield


app = FastAPI(
    title="Breach Check API",
    description="""
    Breached password checks with:
    - k-Anonymity range queries (only 5 hash characters leave the server)
    - Enforced response padding
    - Constant-time suffix matching
    - SIEM-compatible logging
    - Rate limiting
    """,
    version=SERVICE_VERSION,
    lifespan=lifespan
)

# Attach rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(BreachCheckError)
async def breach_check_error_handler(request: Request, exc: BreachCheckError) -> JSONResponse:
    """Map breach check failures to upstream error statuses."""
    status_code, error = ERROR_STATUS.get(type(exc), (502, "breach_check_error"))
    logger.error("Breach check failed: %s", exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": error},
    )


# HTTPS enforcement middleware
@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Enforce HTTPS connections when REQUIRE_HTTPS is enabled.

    Health checks are exempted to allow load balancer probes.
    Passwords travel in request bodies, so plain HTTP exposes them.
    """
    if REQUIRE_HTTPS:
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        # X-Forwarded-Proto is set by reverse proxies (nginx, traefik, etc.)
        forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
        is_https = (
            request.url.scheme == "https" or
            forwarded_proto.lower() == "https"
        )

        if not is_https:
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "HTTPS required. This API requires secure connections.",
                    "error": "https_required"
                }
            )

    return await call_next(request)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add OWASP-recommended security headers to all responses."""
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    # Responses describe password exposure; never cache them
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

app.include_router(health_router)
app.include_router(breach_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
