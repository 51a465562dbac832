"""Data contracts for RTC endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field


class IceServerModel(BaseModel):
    urls: list[str] = Field(..., description="STUN/TURN URLs")
    username: str | None = None
    credential: str | None = None


class RtcConfigurationResponse(BaseModel):
    ice_servers: list[IceServerModel] = Field(default_factory=list)


class RoomSnapshot(BaseModel):
    room_id: str
    participants: list[str] = Field(default_factory=list, description="User ids currently joined")
