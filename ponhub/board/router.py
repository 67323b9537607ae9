"""Landing page endpoint."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from .templates import render_landing_page


router = APIRouter(tags=["board"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page() -> HTMLResponse:
    """Serve the PONHUB landing page with the comment board."""
    return HTMLResponse(render_landing_page())
