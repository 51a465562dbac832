"""RTC configuration and signaling endpoints."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, HTTPException, Request, WebSocket, status

from ..schemas.rtc import IceServerModel, RoomSnapshot, RtcConfigurationResponse
from ..services import rtc as rtc_service
from ..services.signaling import Participant, SignalingRelay

logger = logging.getLogger(__name__)

router = APIRouter()


def _relay_for(connection: Request | WebSocket) -> SignalingRelay:
    return connection.app.state.signaling_relay


async def _frames(websocket: WebSocket) -> AsyncIterator[str | bytes]:
    """Yield text and binary frames until the client disconnects."""

    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return
        frame = message.get("text")
        if frame is None:
            frame = message.get("bytes")
        if frame is not None:
            yield frame


@router.get("/ice-servers", response_model=RtcConfigurationResponse)
async def ice_servers() -> RtcConfigurationResponse:
    """Return the ICE servers browsers should use for peer connections."""

    configuration = rtc_service.get_rtc_configuration()
    return RtcConfigurationResponse(
        ice_servers=[
            IceServerModel(urls=server.urls, username=server.username, credential=server.credential)
            for server in configuration.ice_servers
        ]
    )


@router.get("/rooms/{room_id}", response_model=RoomSnapshot)
async def room_snapshot(room_id: str, request: Request) -> RoomSnapshot:
    """Return who is currently connected to a room."""

    registry = _relay_for(request).registry
    if room_id not in registry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not active")
    return RoomSnapshot(
        room_id=room_id,
        participants=[member.user_id for member in registry.members(room_id) if member.user_id],
    )


@router.websocket("/signaling")
async def signaling_endpoint(websocket: WebSocket) -> None:
    """Relay join/leave presence and SDP/ICE payloads between room members."""

    await websocket.accept()
    relay = _relay_for(websocket)
    participant = Participant(send=websocket.send_json)
    logger.debug("Signaling connection %s opened", participant.connection_id)

    try:
        await relay.serve(participant, _frames(websocket))
    except Exception:  # noqa: BLE001 - abrupt transport failures end the connection like a close
        logger.exception("Signaling connection %s failed", participant.connection_id)
    finally:
        logger.debug("Signaling connection %s closed", participant.connection_id)
