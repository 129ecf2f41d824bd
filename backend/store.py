from __future__ import annotations

from typing import Callable, Dict, List
import logging
import threading
import uuid

from hanabi import Outcome, Room, from_json, new_room, to_json

# Called after every applied change with (room_id, new room, log line)
Listener = Callable[[str, Room, str], None]

logger = logging.getLogger(__name__)


class RoomStore:
    """In-memory document store: one state document and one action log per room.

    Writes to a room are serialized, so every action sees the state left by
    the previous one.
    """

    def __init__(self) -> None:
        self._docs: Dict[str, Dict[str, object]] = {}
        self._logs: Dict[str, List[str]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._listeners: List[Listener] = []

    def create(self) -> str:
        room_id = uuid.uuid4().hex
        self._docs[room_id] = to_json(new_room())
        self._logs[room_id] = []
        self._locks[room_id] = threading.Lock()
        return room_id

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._docs

    def get(self, room_id: str) -> Room:
        return from_json(self._docs[room_id])

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def apply(self, room_id: str, action: Callable[[Room], Outcome]) -> Outcome:
        with self._locks[room_id]:
            outcome = action(self.get(room_id))
            self._docs[room_id] = to_json(outcome.room)
            self._logs[room_id].append(outcome.log)
        # The change is committed; a failing listener must not undo the response
        for listener in self._listeners:
            try:
                listener(room_id, outcome.room, outcome.log)
            except Exception:
                logger.exception("room %s: listener %r failed", room_id, listener)
        return outcome

    def log(self, room_id: str) -> List[str]:
        # Newest first
        return list(reversed(self._logs[room_id]))
