from typing import Optional, ClassVar, Literal
from datetime import datetime
from pydantic import Field
from .base_model import StoreBaseModel
from focushub.utils.datetime_utils import get_utc_now, today_key

HabitFrequency = Literal["daily", "weekly"]

DEFAULT_HABIT_COLOR = "#4CAF50"


class Habit(StoreBaseModel):
    name: str = Field(..., min_length=1, description="Habit name")
    description: Optional[str] = Field(None, description="Habit description")
    frequency: HabitFrequency = Field("daily", description="daily|weekly")
    target_count: int = Field(1, ge=1, description="Check-ins per period")
    color: str = Field(DEFAULT_HABIT_COLOR, description="Display color")
    is_active: bool = Field(True)

    collection_name: ClassVar[str] = "habits"


class HabitEntry(StoreBaseModel):
    habit_id: str = Field(..., description="Habit ID")
    date: str = Field(default_factory=today_key, description="YYYY-MM-DD")
    completed: bool = Field(False)
    count: int = Field(0, ge=0, description="Check-ins recorded for the day")
    timestamp: datetime = Field(default_factory=get_utc_now)

    collection_name: ClassVar[str] = "habit_entries"
