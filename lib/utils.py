# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# =============================================================================
# Number Utilities
# =============================================================================

def parse_leading_int(value: Any) -> int | None:
    """
    Parse the integer at the start of a value.

    Accepts ints, floats and strings such as "30" or " 45 minutes".
    Floats and decimal strings are truncated ("12.9" -> 12).

    Args:
        value: Raw value from a request body or query string

    Returns:
        The parsed integer, or None if the value doesn't start with one

    Example:
        parse_leading_int("30min")  # 30
        parse_leading_int("abc")    # None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


# =============================================================================
# Text Utilities
# =============================================================================

def scalar_to_text(value: Any) -> Any:
    """
    Convert JSON numbers and booleans to text; leave anything else unchanged.

    Example:
        scalar_to_text(123)   # "123"
        scalar_to_text(True)  # "true"
        scalar_to_text([1])   # [1]
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value
