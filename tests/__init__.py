# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Exercise Tracker API:
# - test_models.py: Pydantic models and error objects
# - test_dates.py: Date rendering and integer parsing helpers
# - test_supabase_client.py: Query building against a mocked client
# - test_services.py: User and exercise services on the in-memory store
# - test_api.py: Endpoint tests through TestClient
#
# Run tests with: pytest
# =============================================================================
