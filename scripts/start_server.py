#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the Exercise Tracker API with uvicorn.
#
# Usage:
#   python scripts/start_server.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --reload --port 3000
#
# Prerequisites:
#   - Environment variables must be set (.env file)
#   - supabase/migrations/0001_exercise_tracker.sql applied to the project
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main() -> None:
    """Run the API server on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=settings.is_development and settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
