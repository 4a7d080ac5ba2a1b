from pydantic import Field
from typing import Optional, Literal
from .base_schemas import CamelModel


class UserSettingsUpdate(CamelModel):
    pomodoro_focus_time: Optional[int] = Field(None, gt=0)
    pomodoro_short_break: Optional[int] = Field(None, gt=0)
    pomodoro_long_break: Optional[int] = Field(None, gt=0)
    water_daily_goal: Optional[int] = Field(None, ge=0)
    water_reminder_interval: Optional[int] = Field(None, gt=0)
    theme: Optional[Literal["light", "dark", "system"]] = None
    notifications: Optional[bool] = None


class UserSettingsResponse(CamelModel):
    id: str
    user_id: str
    pomodoro_focus_time: int
    pomodoro_short_break: int
    pomodoro_long_break: int
    water_daily_goal: int
    water_reminder_interval: int
    theme: str
    notifications: bool
