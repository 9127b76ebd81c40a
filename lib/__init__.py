# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - dates.py: ISO date defaults and descriptive date rendering
# - utils.py: Shared utilities (integer parsing, text coercion)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.dates import EPOCH_ISO, describe_date, parse_iso_date, today_iso
from lib.utils import parse_leading_int, scalar_to_text

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Dates
    "EPOCH_ISO",
    "describe_date",
    "parse_iso_date",
    "today_iso",
    # Utils
    "parse_leading_int",
    "scalar_to_text",
]
