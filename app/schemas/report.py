from pydantic import BaseModel
from datetime import date as date_type


class StatsResponse(BaseModel):
    total_sessions: int
    completed_sessions: int
    cancelled_sessions: int
    upcoming_sessions: int
    total_participants: int
    total_sports: int


class SportPopularityResponse(BaseModel):
    name: str
    count: int


class SessionsByDateResponse(BaseModel):
    date: date_type
    count: int
