from typing import Optional, ClassVar
from datetime import datetime
from pydantic import Field
from .base_model import StoreBaseModel


class Event(StoreBaseModel):
    title: str = Field(..., min_length=1, description="Event title")
    description: Optional[str] = Field(None, description="Event description")
    start_time: datetime = Field(..., description="Event start")
    end_time: datetime = Field(..., description="Event end")
    location: Optional[str] = Field(None, description="Event location")
    reminder_minutes: int = Field(
        15, ge=0, description="Minutes before start to remind")

    collection_name: ClassVar[str] = "events"
