from __future__ import annotations

from typing import Dict, Optional
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings
from backend.models import (
    ActionReq,
    ActionResp,
    CommandReq,
    GetStateResp,
    JoinReq,
    LogEntry,
    LogResp,
    StateEnvelope,
)
from backend.store import RoomStore

from hanabi import (
    Command,
    CommandError,
    Rejected,
    Room,
    apply_command,
    help_text,
    parse_command,
    render_log_line,
    to_json,
)
from hanabi.commands import Discard, Help, Hint, Join, Play, Rename, Start


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# In-memory room store
STORE = RoomStore()


def _log_change(room_id: str, room: Room, line: str) -> None:
    logger.info("room %s: %s", room_id, line)


STORE.subscribe(_log_change)


def get_room(room_id: str) -> Room:
    if room_id not in STORE:
        raise HTTPException(status_code=404, detail="Room not found")
    return STORE.get(room_id)


def _to_command(req: ActionReq) -> Command:
    # Field presence per action; pydantic only checks types
    if req.action == "start":
        return Start()
    if req.action in ("discard", "play"):
        if req.index is None:
            raise HTTPException(status_code=422, detail=f"{req.action} requires index")
        return Discard(req.index) if req.action == "discard" else Play(req.index)
    if req.action == "hint":
        if req.target is None or req.hint is None:
            raise HTTPException(status_code=422, detail="hint requires target and hint")
        return Hint(target=req.target, hint=req.hint)
    if req.name is None:
        raise HTTPException(status_code=422, detail="rename requires name")
    return Rename(req.name)


def _perform(room_id: str, participant: str, command: Command) -> ActionResp:
    get_room(room_id)
    try:
        outcome = STORE.apply(room_id, lambda room: apply_command(room, participant, command))
    except Rejected as e:
        logger.warning("room %s: %s rejected: %s", room_id, participant, e.reason)
        raise HTTPException(status_code=409, detail=e.reason)
    return ActionResp(state=to_json(outcome.room, viewer=participant), log=outcome.log)


app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@app.post("/rooms", response_model=StateEnvelope)
def create_room() -> StateEnvelope:
    room_id = STORE.create()
    logger.info("room %s: created", room_id)
    return StateEnvelope(roomId=room_id, state=to_json(STORE.get(room_id)))


@app.get("/rooms/{roomId}", response_model=GetStateResp)
def get_state_endpoint(roomId: str, viewer: Optional[str] = None) -> GetStateResp:
    room = get_room(roomId)
    return GetStateResp(state=to_json(room, viewer=viewer))


@app.post("/rooms/{roomId}/join", response_model=ActionResp)
def join_endpoint(roomId: str, req: JoinReq) -> ActionResp:
    try:
        return _perform(roomId, req.participant, Join())
    except HTTPException:
        raise
    except AssertionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"join failed: {e}")


@app.post("/rooms/{roomId}/actions", response_model=ActionResp)
def action_endpoint(roomId: str, req: ActionReq) -> ActionResp:
    try:
        return _perform(roomId, req.participant, _to_command(req))
    except HTTPException:
        raise
    except AssertionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"{req.action} failed: {e}")


@app.post("/rooms/{roomId}/command", response_model=ActionResp)
def command_endpoint(roomId: str, req: CommandReq) -> ActionResp:
    try:
        room = get_room(roomId)
        try:
            command = parse_command(req.text)
        except CommandError as e:
            raise HTTPException(status_code=422, detail=str(e))
        if isinstance(command, Help):
            return ActionResp(state=to_json(room, viewer=req.participant), help=help_text(room))
        return _perform(roomId, req.participant, command)
    except HTTPException:
        raise
    except AssertionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"command failed: {e}")


@app.get("/rooms/{roomId}/log", response_model=LogResp)
def log_endpoint(roomId: str) -> LogResp:
    room = get_room(roomId)
    entries = [LogEntry(text=render_log_line(line, room.names)) for line in STORE.log(roomId)]
    return LogResp(entries=entries)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.app:app", host=settings.HOST, port=settings.PORT, reload=True)
