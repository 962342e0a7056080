"""Breach detection using the Pwned Passwords range API.

Uses the k-Anonymity model to check passwords without exposing them.
Only the first 5 characters of the SHA-1 hash are sent to the API.
"""

import asyncio
import logging
import sys
from typing import Optional

from passleak import BreachApi, BreachCheckError, PaddingError
from passleak.report import format_check_result
from passleak.siem import configure_logging


logger = logging.getLogger(__name__)

EXIT_SAFE = 0
EXIT_COMPROMISED = 1
EXIT_CHECK_FAILED = 2


async def check_and_warn(password: str, api: Optional[BreachApi] = None) -> tuple[Optional[bool], str]:
    """Check password and return safety status with message.

    Returns:
        Tuple of (is_safe, message) where is_safe is False if breached
        and None if the breach database could not be checked.
    """
    if api is None:
        async with BreachApi() as owned_api:
            return await check_and_warn(password, owned_api)

    try:
        breach_count = await api.count_breaches(password)
    except PaddingError as e:
        logger.error("Breach check refused: %s", e)
        return None, "Could not verify: breach service returned an unpadded response"
    except BreachCheckError as e:
        logger.error("Breach check failed: %s", e)
        return None, "Could not verify against breach database"

    return format_check_result(breach_count)


def main() -> int:
    import getpass

    configure_logging()
    print("=== Password Breach Checker ===")
    print("Check if your password has been exposed in data breaches.")
    print("(Uses the Pwned Passwords API with k-Anonymity - your password is never sent)\n")

    pwd = getpass.getpass("Enter password to check: ")
    if not pwd:
        print("No password entered.")
        return EXIT_CHECK_FAILED

    is_safe, message = asyncio.run(check_and_warn(pwd))
    print(f"\nResult: {message}")
    if is_safe is None:
        print("Status: UNKNOWN")
        return EXIT_CHECK_FAILED
    if is_safe:
        print("Status: SAFE")
        return EXIT_SAFE
    print("Status: COMPROMISED - Choose a different password!")
    return EXIT_COMPROMISED


if __name__ == "__main__":
    sys.exit(main())
