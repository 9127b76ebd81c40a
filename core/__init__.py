# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for users, exercises and exercise logs
# - services/: User and exercise operations over the Supabase wrapper
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
