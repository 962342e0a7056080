"""Human-readable breach warnings."""


def format_breach_warning(breach_count: int) -> str:
    """Format a warning message based on breach count."""
    if breach_count == 0:
        return ""
    elif breach_count < 10:
        return f"This password appeared in {breach_count} data breach(es). Consider using a different password."
    elif breach_count < 100:
        return f"WARNING: This password was found {breach_count} times in data breaches!"
    elif breach_count < 1000:
        return f"DANGER: This password was exposed {breach_count} times in breaches. Do NOT use it!"
    else:
        return f"CRITICAL: This password was found {breach_count:,} times in breaches. It is extremely compromised!"


def format_check_result(breach_count: int) -> tuple[bool, str]:
    """Turn a breach count into (is_safe, message)."""
    if breach_count == 0:
        return True, "Password not found in known data breaches"
    return False, format_breach_warning(breach_count)
