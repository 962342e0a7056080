"""Public breach check API.

Usage:
    async with BreachApi() as api:
        count = await api.count_breaches("secret")
        breached = await api.is_breached("secret")

Each call is an independent pipeline: hash the secret, fetch the padded
range for its prefix, enforce the padding floor, then match the suffix
with a constant-time full scan. No state is kept between calls, so one
instance can serve many concurrent checks.
"""

import logging
from typing import Optional

from passleak.config import MIN_PADDING
from passleak.digest import Secret, hash_secret
from passleak.errors import BreachCheckError
from passleak.fetcher import (
    CandidateEntry,
    CandidateFetcher,
    HttpCandidateFetcher,
    validate_prefix,
)
from passleak.matcher import match_suffix
from passleak.padding import enforce_padding
from passleak.siem import log_siem_event


logger = logging.getLogger(__name__)


class BreachApi:
    """Breach checks against a range service.

    Args:
        fetcher: Candidate fetcher; defaults to an HttpCandidateFetcher
            with its own connection pool
        require_padding: Refuse responses below the padding floor. Turn off
            only for services that are configured not to pad.
        min_padding: Padding floor in entries
    """

    def __init__(
        self,
        fetcher: Optional[CandidateFetcher] = None,
        require_padding: bool = True,
        min_padding: int = MIN_PADDING,
    ):
        self.fetcher = fetcher if fetcher is not None else HttpCandidateFetcher()
        self.require_padding = require_padding
        self.min_padding = min_padding
        if not require_padding:
            logger.warning("Padding enforcement disabled; response size may reveal the prefix range")

    async def range_text(self, prefix: str) -> str:
        """Get the raw range response body for a prefix.

        Raises:
            ValueError: If prefix is not 5 uppercase hex characters
        """
        return await self.fetcher.fetch_text(validate_prefix(prefix))

    async def range(self, prefix: str) -> list[CandidateEntry]:
        """Get the parsed candidate set for a prefix, padding enforced.

        Raises:
            ValueError: If prefix is not 5 uppercase hex characters
        """
        candidates = await self.fetcher.fetch(validate_prefix(prefix))
        if self.require_padding:
            enforce_padding(candidates, self.min_padding)
        return candidates

    async def count_breaches(self, secret: Secret) -> int:
        """Count the known breaches for a secret.

        Returns:
            Number of times the secret appears in the corpus, 0 if none

        Raises:
            NetworkError: Transport failure or timeout
            ServerError: Non-success status from the service
            DecodeError: Malformed response body
            PaddingError: Response below the padding floor
        """
        try:
            with hash_secret(secret) as (prefix, suffix):
                candidates = await self.range(prefix)
                count = match_suffix(suffix, candidates)
        except BreachCheckError as e:
            log_siem_event("breach_check", "FAILURE", details={"error": type(e).__name__})
            raise

        log_siem_event("breach_check", "BREACHED" if count > 0 else "SUCCESS")
        return count

    async def is_breached(self, secret: Secret) -> bool:
        """Check if any breaches are known for a secret.

        Raises the same errors as ``count_breaches``.
        """
        count = await self.count_breaches(secret)
        return count > 0

    async def aclose(self) -> None:
        await self.fetcher.aclose()

    async def __aenter__(self) -> "BreachApi":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


async def count_breaches(secret: Secret) -> int:
    """One-shot ``BreachApi().count_breaches`` with a temporary client."""
    async with BreachApi() as api:
        return await api.count_breaches(secret)


async def is_breached(secret: Secret) -> bool:
    """One-shot ``BreachApi().is_breached`` with a temporary client."""
    async with BreachApi() as api:
        return await api.is_breached(secret)
