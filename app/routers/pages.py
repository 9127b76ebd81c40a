# =============================================================================
# app/routers/pages.py - Landing Page
# =============================================================================
# Serves the HTML landing page. After the page is sent, a background task
# checks that the users and exercises tables exist so a missing migration
# shows up in the logs on first visit.
# =============================================================================

import logging
from pathlib import Path

from fastapi import APIRouter, BackgroundTasks
from fastapi.responses import FileResponse

from app.config import settings
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)

router = APIRouter()

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
INDEX_PAGE = PROJECT_ROOT / "views" / "index.html"


def ensure_tables() -> None:
    """Query each table, logging a warning for any that can't be queried."""
    for table in (settings.USERS_TABLE, settings.EXERCISES_TABLE):
        try:
            SupabaseClient.check_table(table)
            logger.debug(f"Table '{table}' is ready")
        except SupabaseClientError as e:
            logger.warning(str(e))


@router.get("/", include_in_schema=False)
async def index(background_tasks: BackgroundTasks):
    """Serve the landing page."""
    background_tasks.add_task(ensure_tables)
    return FileResponse(INDEX_PAGE, media_type="text/html")
