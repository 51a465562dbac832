"""In-memory room registry and WebRTC signaling relay for video appointments."""
from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from contextlib import suppress
from typing import Any, Awaitable, Callable, Dict
from uuid import uuid4

logger = logging.getLogger(__name__)

SendCallable = Callable[[dict], Awaitable[None]]

JOIN_ROOM = "join-room"
ROOM_JOINED = "room-joined"
USER_CONNECTED = "user-connected"
USER_DISCONNECTED = "user-disconnected"
ERROR = "error"
SIGNAL_TYPES = frozenset({"offer", "answer", "ice-candidate"})
MAX_PENDING_EVENTS = 256


class Participant:
    """One live signaling connection and its outbound queue.

    Events are enqueued without suspending the caller and a writer task
    (:meth:`pump`) pushes them to the socket, so a slow or broken peer never
    holds up fan-out to the rest of the room.
    """

    def __init__(
        self,
        send: SendCallable,
        *,
        connection_id: str | None = None,
        max_pending: int = MAX_PENDING_EVENTS,
    ) -> None:
        self.connection_id = connection_id or uuid4().hex
        self.room_id: str | None = None
        self.user_id: str | None = None
        self._send = send
        self._outbox: asyncio.Queue[dict | None] = asyncio.Queue(maxsize=max_pending)
        self._broken = False

    @property
    def joined(self) -> bool:
        return self.room_id is not None

    def deliver(self, event: dict) -> None:
        """Queue an event for this participant."""

        if self._broken:
            logger.debug("Dropping %s for broken connection %s", event.get("type"), self.connection_id)
            return
        try:
            self._outbox.put_nowait(event)
        except asyncio.QueueFull:
            # A peer that stops reading is treated like one whose socket failed.
            self._broken = True
            logger.warning("Outbound queue for %s is full; dropping its events", self.connection_id)

    def close(self) -> None:
        """Signal the writer to stop after draining queued events."""

        try:
            self._outbox.put_nowait(None)
        except asyncio.QueueFull:
            self._broken = True
            while not self._outbox.empty():
                self._outbox.get_nowait()
            self._outbox.put_nowait(None)

    async def pump(self) -> None:
        """Drain the outbound queue until closed or the transport fails."""

        while True:
            event = await self._outbox.get()
            if event is None:
                return
            try:
                await self._send(event)
            except Exception as exc:  # noqa: BLE001 - one bad socket must not leak into fan-out
                self._broken = True
                logger.warning(
                    "Delivery of %s to %s failed: %s", event.get("type"), self.connection_id, exc
                )
                return


class RoomRegistry:
    """Map room identifiers to their ordered member sets."""

    def __init__(self) -> None:
        self._rooms: Dict[str, Dict[str, Participant]] = {}

    def add(self, room_id: str, participant: Participant) -> list[Participant]:
        """Register a participant and return the members that were already present."""

        members = self._rooms.setdefault(room_id, {})
        existing = [member for key, member in members.items() if key != participant.connection_id]
        members[participant.connection_id] = participant
        return existing

    def discard(self, room_id: str, participant: Participant) -> list[Participant]:
        """Remove a participant and return the remaining members, dropping empty rooms."""

        members = self._rooms.get(room_id)
        if not members:
            return []
        members.pop(participant.connection_id, None)
        if not members:
            self._rooms.pop(room_id, None)
            return []
        return list(members.values())

    def members(self, room_id: str) -> list[Participant]:
        return list(self._rooms.get(room_id, {}).values())

    def room_ids(self) -> list[str]:
        return list(self._rooms)

    def clear(self) -> None:
        self._rooms.clear()

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)


class SignalingRelay:
    """Drive the Connected -> Joined -> Disconnected lifecycle of each participant.

    Every handler below is synchronous: all notifications caused by one frame
    are queued before the next frame is read, for any room.
    """

    def __init__(self, registry: RoomRegistry) -> None:
        self.registry = registry

    async def serve(self, participant: Participant, frames: AsyncIterator[str | bytes]) -> None:
        """Run one connection until its frame stream ends or fails."""

        writer = asyncio.create_task(participant.pump())
        try:
            async for frame in frames:
                self.dispatch(participant, frame)
        except asyncio.CancelledError:
            writer.cancel()
            raise
        finally:
            self.leave(participant)
            participant.close()
            with suppress(asyncio.CancelledError):
                await writer

    def dispatch(self, participant: Participant, frame: str | bytes) -> None:
        """Decode one inbound frame and route it by type."""

        try:
            message = json.loads(frame)
        except (TypeError, ValueError):
            self._reject(participant, "invalid-json")
            return
        if not isinstance(message, dict):
            self._reject(participant, "invalid-message")
            return

        message_type = message.get("type")
        if message_type == JOIN_ROOM:
            self.join(participant, message.get("room_id"), message.get("user_id"))
        elif message_type in SIGNAL_TYPES:
            self.relay(participant, message_type, message.get("payload"), message.get("target"))
        else:
            self._reject(participant, "unsupported-type")

    def join(self, participant: Participant, room_id: Any, user_id: Any) -> bool:
        """Add the participant to a room and notify the other members."""

        if not _is_identifier(room_id) or not _is_identifier(user_id):
            self._reject(participant, "invalid-join")
            return False

        if participant.joined:
            if participant.room_id == room_id:
                return True
            self._reject(participant, "already-joined")
            return False

        existing = self.registry.add(room_id, participant)
        participant.room_id = room_id
        participant.user_id = user_id
        logger.info("User %s joined room %s (%d already present)", user_id, room_id, len(existing))

        participant.deliver(
            {
                "type": ROOM_JOINED,
                "room_id": room_id,
                "participants": [member.user_id for member in existing],
            }
        )
        self._fan_out(existing, {"type": USER_CONNECTED, "user_id": user_id})
        return True

    def relay(self, participant: Participant, message_type: str, payload: Any, target: Any = None) -> int:
        """Forward an offer/answer/ICE payload to the other members of the sender's room."""

        if not participant.joined:
            self._reject(participant, "not-joined")
            return 0

        recipients = [
            member
            for member in self.registry.members(participant.room_id)
            if member is not participant and (target is None or member.user_id == target)
        ]
        self._fan_out(recipients, {"type": message_type, "user_id": participant.user_id, "payload": payload})
        return len(recipients)

    def leave(self, participant: Participant) -> None:
        """Remove a participant on disconnect and notify who is left."""

        if not participant.joined:
            return

        room_id = participant.room_id
        remaining = self.registry.discard(room_id, participant)
        logger.info("User %s left room %s (%d remaining)", participant.user_id, room_id, len(remaining))
        self._fan_out(remaining, {"type": USER_DISCONNECTED, "user_id": participant.user_id})
        participant.room_id = None

    def _fan_out(self, members: list[Participant], event: dict) -> None:
        for member in members:
            try:
                member.deliver(event)
            except Exception:  # noqa: BLE001 - keep notifying the rest of the room
                logger.exception("Failed to queue %s for %s", event.get("type"), member.connection_id)

    def _reject(self, participant: Participant, reason: str) -> None:
        logger.debug("Rejected frame from %s: %s", participant.connection_id, reason)
        participant.deliver({"type": ERROR, "reason": reason})


def _is_identifier(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
