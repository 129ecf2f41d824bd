from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


ActionName = Literal["start", "discard", "play", "hint", "rename"]


class JoinReq(BaseModel):
    participant: str = Field(..., min_length=1)


class ActionReq(BaseModel):
    participant: str = Field(..., min_length=1)
    action: ActionName
    index: Optional[int] = None
    target: Optional[str] = None
    hint: Optional[str] = None
    name: Optional[str] = None


class CommandReq(BaseModel):
    participant: str = Field(..., min_length=1)
    text: str


class StateEnvelope(BaseModel):
    roomId: str
    state: Dict[str, Any]


class GetStateResp(BaseModel):
    state: Dict[str, Any]


class ActionResp(BaseModel):
    state: Dict[str, Any]
    log: Optional[str] = None
    help: Optional[str] = None


class LogEntry(BaseModel):
    text: str


class LogResp(BaseModel):
    entries: List[LogEntry]
