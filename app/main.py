# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Exercise Tracker API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import __version__
from app.config import settings
from app.exceptions import (
    ExerciseTrackerException,
    exercise_tracker_exception_handler,
    validation_exception_handler,
)
from app.routers import health, pages, users, exercises

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so startup
    only reports configuration.
    """
    logger.info(f"Starting Exercise Tracker API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if settings.LEGACY_ERROR_RESPONSES:
        logger.info("Legacy error responses enabled")

    yield

    logger.info("Shutting down Exercise Tracker API")


# Create FastAPI application
app = FastAPI(
    title="Exercise Tracker API",
    description="""
## Exercise Tracker

Create users, log exercises against them and read back a date-filtered log.

### Quick Start

```bash
# 1. Create a user
curl -X POST http://localhost:3000/api/users \\
  -H "Content-Type: application/json" -d '{"username": "alice"}'

# 2. Log an exercise
curl -X POST http://localhost:3000/api/users/{id}/exercises \\
  -H "Content-Type: application/json" \\
  -d '{"description": "run", "duration": 30, "date": "2023-02-01"}'

# 3. Read the log
curl "http://localhost:3000/api/users/{id}/logs?from=2023-01-01&to=2023-12-31&limit=10"
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "Create, list and bulk-delete users",
        },
        {
            "name": "Exercises",
            "description": "Log exercises and read a user's exercise log",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list or ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(ExerciseTrackerException)
async def handle_exercise_tracker_exception(request: Request, exc: ExerciseTrackerException):
    """Handle custom Exercise Tracker exceptions."""
    return await exercise_tracker_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    users.router,
    prefix="/api/users",
    tags=["Users"]
)

app.include_router(
    exercises.router,
    prefix="/api",
    tags=["Exercises"]
)

app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

app.include_router(pages.router)

# Static assets for the landing page
app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")
