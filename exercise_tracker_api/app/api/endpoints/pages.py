"""
Landing page and static assets.

``GET /`` returns the HTML page from ``views``; files under ``public``
are mounted at ``/public`` by ``create_app``.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

APP_DIR = Path(__file__).resolve().parent.parent.parent
VIEWS_DIR = APP_DIR / "views"
PUBLIC_DIR = APP_DIR / "public"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")
