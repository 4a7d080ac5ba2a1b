from pydantic import Field
from typing import Optional
from datetime import datetime
from .base_schemas import CamelModel


class EventBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    location: Optional[str] = None
    reminder_minutes: int = Field(15, ge=0)


class EventCreate(EventBase):
    pass


class EventUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = None
    reminder_minutes: Optional[int] = Field(None, ge=0)


class EventResponse(EventBase):
    id: str
    user_id: str
    created_at: datetime
