"""Constant-time matching of a digest suffix against a candidate set.

The scan always visits every candidate, compares each suffix with
``hmac.compare_digest`` and folds the count in through a bit mask, so the
running time depends only on the candidate set size and never on where or
whether the local suffix matches.
"""

import hmac
from typing import Iterable

from passleak.fetcher import CandidateEntry
from passleak.secure_memory import SecureBytes


def constant_time_equals(left: bytes | bytearray | memoryview,
                         right: bytes | bytearray | memoryview) -> bool:
    """Compare two byte strings without leaking the first differing position.

    Args:
        left: First value
        right: Second value

    Returns:
        True if both values are identical
    """
    return hmac.compare_digest(left, right)


def match_suffix(suffix: bytes | bytearray | memoryview,
                 candidates: Iterable[CandidateEntry]) -> int:
    """Return the breach count for ``suffix`` in ``candidates``.

    Every entry is visited exactly once; there is no early exit on a match.
    ``-int(equal)`` is an all-ones mask for a match and zero otherwise, so the
    matching count is accumulated without branching on the comparison.

    Args:
        suffix: Local 35-char hex suffix (bytes-like, e.g. a Suffix buffer)
        candidates: Parsed range response

    Returns:
        Count of the matching entry, or 0 if no entry matches
    """
    if isinstance(suffix, SecureBytes):
        suffix = suffix.get_bytearray()

    total = 0
    for entry in candidates:
        mask = -int(constant_time_equals(suffix, entry.suffix))
        total += entry.count & mask
    return total
