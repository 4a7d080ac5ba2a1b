from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from .base_schemas import CamelModel
from focushub.data_layer.models.habit_model import HabitFrequency, DEFAULT_HABIT_COLOR
from focushub.utils.validation_utils import validate_date_key, validate_hex_color


class HabitBase(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    frequency: HabitFrequency = "daily"
    target_count: int = Field(1, ge=1)
    color: str = DEFAULT_HABIT_COLOR
    is_active: bool = True

    @field_validator("color")
    @classmethod
    def check_color(cls, v):
        return validate_hex_color(v)


class HabitCreate(HabitBase):
    pass


class HabitUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    frequency: Optional[HabitFrequency] = None
    target_count: Optional[int] = Field(None, ge=1)
    color: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("color")
    @classmethod
    def check_color(cls, v):
        return validate_hex_color(v)


class HabitResponse(HabitBase):
    id: str
    user_id: str
    created_at: datetime


class HabitEntryCreate(CamelModel):
    habit_id: str = Field(..., min_length=1)
    date: Optional[str] = Field(None, description="YYYY-MM-DD, defaults to today")
    completed: bool = False
    count: int = Field(0, ge=0)

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        return validate_date_key(v)


class HabitEntryUpdate(CamelModel):
    completed: Optional[bool] = None
    count: Optional[int] = Field(None, ge=0)


class HabitEntryResponse(CamelModel):
    id: str
    user_id: str
    habit_id: str
    date: str
    completed: bool
    count: int
    timestamp: datetime
