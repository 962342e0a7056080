"""Breached password checks over the Pwned Passwords range API.

Provides modular components for the k-anonymity protocol:
- config: Protocol constants and environment overrides
- digest: SHA-1 hashing and prefix/suffix split
- fetcher: Range API client and response parsing
- padding: Padding floor enforcement
- matcher: Constant-time suffix matching
- client: Public breach check API
- siem: Logging setup and security events
"""

import logging

from passleak.config import HASH_SIZE, MIN_PADDING, PREFIX_SIZE, SUFFIX_SIZE
from passleak.errors import (
    ApiError,
    BreachCheckError,
    DecodeError,
    NetworkError,
    PaddingError,
    ServerError,
)
from passleak.digest import Suffix, digest, hash_secret, split_digest
from passleak.fetcher import (
    CandidateEntry,
    CandidateFetcher,
    HttpCandidateFetcher,
    StaticCandidateFetcher,
    iter_range_lines,
    parse_range_body,
    validate_prefix,
)
from passleak.padding import enforce_padding
from passleak.matcher import constant_time_equals, match_suffix
from passleak.client import BreachApi, count_breaches, is_breached

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Config
    "HASH_SIZE",
    "PREFIX_SIZE",
    "SUFFIX_SIZE",
    "MIN_PADDING",
    # Errors
    "ApiError",
    "BreachCheckError",
    "NetworkError",
    "ServerError",
    "DecodeError",
    "PaddingError",
    # Hashing
    "Suffix",
    "digest",
    "split_digest",
    "hash_secret",
    # Fetching
    "CandidateEntry",
    "CandidateFetcher",
    "HttpCandidateFetcher",
    "StaticCandidateFetcher",
    "iter_range_lines",
    "parse_range_body",
    "validate_prefix",
    # Checks
    "enforce_padding",
    "constant_time_equals",
    "match_suffix",
    "BreachApi",
    "count_breaches",
    "is_breached",
]
