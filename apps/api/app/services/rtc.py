"""RTC client configuration.

Browsers in a room negotiate media peer to peer; the server only hands out the
STUN/TURN servers they should try."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..core.config import settings


@dataclass(slots=True)
class IceServer:
    urls: list[str]
    username: str | None = None
    credential: str | None = None


@dataclass(slots=True)
class RtcConfiguration:
    ice_servers: list[IceServer] = field(default_factory=list)


def get_rtc_configuration() -> RtcConfiguration:
    """Build the RTCPeerConnection configuration from settings."""

    urls = [url for url in settings.ice_servers if url]
    servers = [IceServer(urls=urls)] if urls else []
    return RtcConfiguration(ice_servers=servers)
