"""Profile picture storage on the local filesystem."""
from __future__ import annotations

import asyncio
import secrets
import time
from functools import partial
from pathlib import Path

from fastapi import UploadFile

from ..core.config import settings


def upload_root() -> Path:
    """Return the upload directory, creating it when missing."""

    root = Path(settings.upload_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


def _unique_filename() -> str:
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}.jpg"


async def save_profile_picture(upload: UploadFile | None) -> str | None:
    """Store an uploaded picture and return its filename, or None if nothing was sent."""

    if upload is None or not upload.filename:
        return None

    contents = await upload.read()
    if not contents:
        return None

    filename = _unique_filename()
    target = upload_root() / filename
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, target.write_bytes, contents)
    return filename


async def discard_profile_picture(filename: str | None) -> None:
    """Remove a stored picture whose account was never created."""

    if not filename:
        return
    target = upload_root() / filename
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, partial(target.unlink, missing_ok=True))
