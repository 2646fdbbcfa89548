from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class SportBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    max_players: int = Field(..., gt=0)


class SportCreate(SportBase):
    pass


class SportUpdate(SportBase):
    pass


class SportInDB(SportBase):
    id: int
    created_by: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class SportResponse(SportInDB):
    pass
