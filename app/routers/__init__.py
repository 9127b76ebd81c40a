# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - pages.py: HTML landing page
# - users.py: User creation, listing and bulk delete
# - exercises.py: Exercise logging, exercise log and bulk delete
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import pages
from . import users
from . import exercises

__all__ = [
    "health",
    "pages",
    "users",
    "exercises",
]
