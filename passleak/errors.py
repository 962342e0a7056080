"""Errors raised by breach checks.

Every error is scoped to a single call and propagates to the caller
unchanged. A count of zero is a successful result, never an error.
"""

from typing import Optional


class BreachCheckError(Exception):
    """Base class for all breach check failures."""


# Name used by callers that think of these as API errors
ApiError = BreachCheckError


class NetworkError(BreachCheckError):
    """Transport failure: connection refused, DNS failure or timeout."""


class ServerError(BreachCheckError):
    """The range service answered with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Range API returned status {status_code}")


class DecodeError(BreachCheckError):
    """The response body does not parse into SUFFIX:COUNT records."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class PaddingError(BreachCheckError):
    """The response carries fewer entries than the padding guarantee.

    Raised as a distinct error so callers can tell a misbehaving or
    compromised service apart from ordinary network or format failures.
    """

    def __init__(self, received: int, minimum: int):
        self.received = received
        self.minimum = minimum
        super().__init__(
            f"Range response has {received} entries, expected at least {minimum}"
        )
