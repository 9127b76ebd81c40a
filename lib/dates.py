# =============================================================================
# lib/dates.py - Exercise Date Helpers
# =============================================================================
# Exercise dates are stored as ISO "YYYY-MM-DD" strings so that range
# filters can compare them lexicographically in the store. This module
# builds those strings and renders them for API responses.
#
# Usage:
#   from lib.dates import today_iso, describe_date
#   describe_date("2023-01-01")  # "Sun Jan 01 2023"
# =============================================================================

from datetime import date, datetime, timezone

# Lower bound used when a log query has no "from" date
EPOCH_ISO = "1970-01-01"

INVALID_DATE = "Invalid Date"


def today_iso() -> str:
    """Return the current UTC calendar date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def parse_iso_date(value: str | None) -> date | None:
    """
    Parse an ISO date or datetime string into a date.

    Args:
        value: "2023-01-01" or "2023-01-01T10:00:00"

    Returns:
        The calendar date, or None if the value is empty or not ISO
    """
    if not value:
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def describe_date(value: str | None) -> str:
    """
    Render a stored ISO date as a descriptive string.

    Example:
        describe_date("2023-02-01")  # "Wed Feb 01 2023"
        describe_date("not a date")  # "Invalid Date"
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime("%a %b %d %Y")
