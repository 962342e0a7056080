"""Padding enforcement for range responses.

A padded response carries at least MIN_PADDING entries, so its size says
nothing about how many real suffixes share the prefix. An unpadded response
would let an observer tell a small real range from a padded one; such
responses are refused instead of silently accepted.
"""

import logging
from typing import Sequence, TypeVar

from passleak.config import MIN_PADDING
from passleak.errors import PaddingError
from passleak.siem import log_siem_event


logger = logging.getLogger(__name__)

T = TypeVar("T")


def enforce_padding(candidates: Sequence[T], minimum: int = MIN_PADDING) -> Sequence[T]:
    """Check that a candidate set meets the padding floor.

    The check depends only on the number of entries, never on their content.

    Args:
        candidates: Parsed range response
        minimum: Required number of entries

    Returns:
        The candidates, unchanged

    Raises:
        PaddingError: If fewer than ``minimum`` entries were returned
    """
    received = len(candidates)
    if received < minimum:
        logger.warning("Range response below padding floor: %d < %d", received, minimum)
        log_siem_event(
            "padding_violation",
            "FAILURE",
            details={"received": received, "minimum": minimum},
        )
        raise PaddingError(received, minimum)
    return candidates
