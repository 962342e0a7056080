"""Candidate fetching for the Pwned Passwords range API.

Only the 5-char hash prefix is sent. The service answers with every known
suffix sharing that prefix, one ``SUFFIX:COUNT`` record per line, padded with
zero-count decoys when ``Add-Padding: true`` is requested.

Transport concerns (connection pooling, gzip/brotli decoding, timeouts) are
delegated to ``httpx.AsyncClient``. ``CandidateFetcher.fetch_text`` is the seam:
tests and offline callers substitute ``StaticCandidateFetcher``.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple, Optional

import httpx

from passleak.config import (
    ADD_PADDING,
    API_URL,
    LINE_SEPARATOR,
    PREFIX_SIZE,
    REQUEST_TIMEOUT,
    SUFFIX_SIZE,
    USER_AGENT,
)
from passleak.errors import DecodeError, NetworkError, ServerError


logger = logging.getLogger(__name__)

_RANGE_LINE = re.compile(
    rf"[0-9A-F]{{{SUFFIX_SIZE}}}{re.escape(LINE_SEPARATOR)}[0-9]{{1,20}}"
)
_PREFIX = re.compile(rf"[0-9A-F]{{{PREFIX_SIZE}}}")


def validate_prefix(prefix: str) -> str:
    """Check that a prefix is exactly PREFIX_SIZE uppercase hex characters.

    Raises:
        ValueError: For any other string, so nothing but a hash prefix
            reaches the request path
    """
    if not isinstance(prefix, str) or not _PREFIX.fullmatch(prefix):
        raise ValueError(f"Prefix must be {PREFIX_SIZE} uppercase hex characters")
    return prefix


class CandidateEntry(NamedTuple):
    """One record of a range response."""
    suffix: bytes
    count: int


def parse_range_line(line: str) -> Optional[CandidateEntry]:
    """Parse one ``SUFFIX:COUNT`` record.

    Returns:
        CandidateEntry, or None if the line is malformed
    """
    line = line.removesuffix("\r")
    if not _RANGE_LINE.fullmatch(line):
        return None
    suffix, count = line.split(LINE_SEPARATOR)
    return CandidateEntry(suffix.encode("ascii"), int(count))


def iter_range_lines(text: str) -> Iterator[CandidateEntry | str]:
    """Lenient iterator over a range response body.

    Use this if you want to handle malformed records yourself.
    Empty lines are skipped; records that cannot be parsed are yielded
    as the raw line string.
    """
    for line in text.split("\n"):
        if not line.removesuffix("\r"):
            continue
        entry = parse_range_line(line)
        yield entry if entry is not None else line.removesuffix("\r")


def parse_range_body(text: str) -> list[CandidateEntry]:
    """Parse a range response body into a candidate set.

    Each line is parsed independently. A malformed line fails the whole
    body: dropping it would undercount the entries the padding check
    relies on.

    Args:
        text: Decoded response body

    Returns:
        List of CandidateEntry in response order

    Raises:
        DecodeError: If any non-empty line is not a SUFFIX:COUNT record
    """
    candidates = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line.removesuffix("\r"):
            continue
        entry = parse_range_line(line)
        if entry is None:
            raise DecodeError("Malformed range record", line_number=line_number)
        candidates.append(entry)
    return candidates


class CandidateFetcher(ABC):
    """Retrieves the candidate set for a hash prefix.

    Subclasses implement ``fetch_text``, returning the decoded body.
    """

    @abstractmethod
    async def fetch_text(self, prefix: str) -> str:
        """Return the decoded range body for a validated prefix."""

    async def fetch(self, prefix: str) -> list[CandidateEntry]:
        """Fetch and parse the candidate set for ``prefix``.

        Raises:
            NetworkError: On transport failure or timeout
            ServerError: On a non-success status
            DecodeError: If the body is not valid range data
        """
        return parse_range_body(await self.fetch_text(prefix))

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""

    async def __aenter__(self) -> "CandidateFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


class HttpCandidateFetcher(CandidateFetcher):
    """Range API client over ``httpx.AsyncClient``.

    Pass a shared client to pool connections across many concurrent checks;
    the fetcher only closes clients it created itself.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = API_URL,
        timeout: float = REQUEST_TIMEOUT,
        add_padding: bool = ADD_PADDING,
        user_agent: str = USER_AGENT,
    ):
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.add_padding = add_padding
        self.user_agent = user_agent

    def range_url(self, prefix: str) -> str:
        return f"{self.base_url}/{prefix}"

    def range_headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        if self.add_padding:
            # Pads the response with decoys so its size hides the real count
            headers["Add-Padding"] = "true"
        return headers

    async def fetch_text(self, prefix: str) -> str:
        validate_prefix(prefix)
        try:
            response = await self._client.get(
                self.range_url(prefix),
                headers=self.range_headers(),
                timeout=self.timeout,
            )
        except httpx.DecodingError as e:
            raise DecodeError(f"Could not decode response content: {e}") from e
        except httpx.TimeoutException as e:
            raise NetworkError(f"Range API request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Range API request failed: {e}") from e

        if not response.is_success:
            logger.warning("Range API returned status %s", response.status_code)
            raise ServerError(response.status_code)

        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("Range response is not valid UTF-8") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class StaticCandidateFetcher(CandidateFetcher):
    """In-memory range table keyed by prefix.

    Bodies use the same ``SUFFIX:COUNT`` format as the live service, so they
    go through the same parser.
    """

    def __init__(self, table: dict[str, str]):
        self.table = dict(table)
        self.requested: list[str] = []

    async def fetch_text(self, prefix: str) -> str:
        self.requested.append(prefix)
        try:
            return self.table[prefix]
        except KeyError:
            raise ServerError(404, f"No range data for prefix {prefix}") from None
