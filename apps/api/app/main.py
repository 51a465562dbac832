"""FastAPI application for the hospital appointment backend."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .db.session import dispose_engine
from .routers import accounts, appointments, assist, directory, meta, profile, rtc, video
from .services.signaling import RoomRegistry, SignalingRelay
from .services.uploads import upload_root

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

room_registry = RoomRegistry()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Hospital API starting (env=%s)", settings.app_env)
    try:
        yield
    finally:
        logger.info("Shutting down; dropping %d active rooms", len(room_registry))
        room_registry.clear()
        await dispose_engine()


app = FastAPI(title="Hospital Appointment API", version="0.1.0", lifespan=lifespan)
app.state.room_registry = room_registry
app.state.signaling_relay = SignalingRelay(room_registry)

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(meta.router)
app.include_router(accounts.router, tags=["accounts"])
app.include_router(profile.router, prefix="/api", tags=["profile"])
app.include_router(directory.router, tags=["directory"])
app.include_router(appointments.router, prefix="/api", tags=["appointments"])
app.include_router(assist.router, tags=["assist"])
app.include_router(video.router, tags=["video"])
app.include_router(rtc.router, prefix="/api/rtc", tags=["rtc"])
app.mount(settings.upload_url_prefix, StaticFiles(directory=upload_root()), name="uploads")
