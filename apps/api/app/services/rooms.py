"""Video appointment room allocation."""
from __future__ import annotations

from urllib.parse import quote
from uuid import uuid4

ROOM_URL_PREFIX = "/appointment"


def allocate_room_id() -> str:
    """Return a fresh room identifier (UUID4, 122 random bits)."""

    return str(uuid4())


def room_path(room_id: str) -> str:
    """Return the URL path that serves the room shell for ``room_id``."""

    return f"{ROOM_URL_PREFIX}/{quote(room_id, safe='')}"
