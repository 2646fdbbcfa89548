from pydantic import BaseModel, field_validator
from datetime import datetime, date as date_type, time as time_type
from typing import Optional, List

from app.models.session import SessionStatus


class SessionCreate(BaseModel):
    # Presence is checked by the capacity manager so that a missing field
    # answers 400 like every other business-rule rejection
    sport_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    venue: Optional[str] = None
    date: Optional[date_type] = None
    time: Optional[time_type] = None
    team_a: Optional[str] = None
    team_b: Optional[str] = None
    max_participants: Optional[int] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SessionCancel(BaseModel):
    cancellation_reason: Optional[str] = None


class SessionDelete(BaseModel):
    deletion_reason: Optional[str] = None


class SessionInDB(BaseModel):
    id: int
    sport_id: int
    title: str
    description: Optional[str] = ""
    venue: str
    date: date_type
    time: time_type
    team_a: str
    team_b: str
    max_participants: int
    current_participants: int
    created_by: int
    status: SessionStatus
    cancellation_reason: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class SessionResponse(SessionInDB):
    pass


class SessionDetailResponse(SessionInDB):
    sport_name: Optional[str] = None
    created_by_name: Optional[str] = None
    participants: Optional[List[str]] = None


class ParticipantResponse(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
