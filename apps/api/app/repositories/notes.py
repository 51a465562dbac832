"""Translation note persistence."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


async def create_note(
    session: AsyncSession,
    *,
    original_text: str,
    translated_text: str,
    source_language: str | None = None,
    target_language: str | None = None,
    timestamp: datetime | None = None,
) -> Note:
    """Store a translated note and return it."""

    note = Note(
        timestamp=(timestamp or datetime.now(timezone.utc)).replace(microsecond=0),
        original_text=original_text,
        translated_text=translated_text,
        source_language=source_language,
        target_language=target_language,
    )
    session.add(note)
    await session.flush()
    return note
