"""Landing page, liveness probe, and crawler housekeeping."""
from __future__ import annotations

import base64

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from ..pages import INDEX_PAGE

router = APIRouter(tags=["meta"])

# 1x1 transparent PNG
_FAVICON = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGMAAQAABQABDQottAAAAABJRU5ErkJggg=="
)


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def index(request: Request) -> Response:
    """Landing page with a link that starts a new video appointment."""

    if request.method == "HEAD":
        return Response(status_code=200, media_type="text/html")
    return HTMLResponse(content=INDEX_PAGE)


@router.api_route("/api/health", methods=["GET", "HEAD"], response_model=None)
async def health(request: Request) -> Response | dict[str, str | int]:
    if request.method == "HEAD":
        return Response(status_code=200)
    return {"status": "ok", "active_rooms": len(request.app.state.room_registry)}


@router.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
async def robots() -> PlainTextResponse:
    return PlainTextResponse("User-agent: *\nDisallow: /appointment/\n")


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    return Response(content=_FAVICON, media_type="image/png")
