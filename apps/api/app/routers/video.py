"""Video appointment room endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse

from ..pages import ROOM_PAGE
from ..services import rooms as rooms_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/appointment", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
async def create_room() -> RedirectResponse:
    """Mint a new appointment room and send the caller into it."""

    try:
        room_id = rooms_service.allocate_room_id()
    except Exception as exc:  # noqa: BLE001 - allocation failure is fatal to this request
        logger.exception("Could not allocate appointment room")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not create appointment room"
        ) from exc

    logger.info("Allocated appointment room %s", room_id)
    return RedirectResponse(url=rooms_service.room_path(room_id), status_code=status.HTTP_302_FOUND)


@router.get("/appointment/{room_id}", response_class=HTMLResponse)
async def resolve_room(room_id: str) -> HTMLResponse:
    """Serve the call page; the room id is only checked when the browser joins."""

    return HTMLResponse(content=ROOM_PAGE)
