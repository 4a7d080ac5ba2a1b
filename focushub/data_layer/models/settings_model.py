from typing import ClassVar
from pydantic import Field
from .base_model import StoreBaseModel


class UserSettings(StoreBaseModel):
    pomodoro_focus_time: int = Field(
        25, gt=0, description="Focus length in minutes")
    pomodoro_short_break: int = Field(
        5, gt=0, description="Short break length in minutes")
    pomodoro_long_break: int = Field(
        15, gt=0, description="Long break length in minutes")
    water_daily_goal: int = Field(
        2500, ge=0, description="Daily water goal in ml")
    water_reminder_interval: int = Field(
        60, gt=0, description="Water reminder interval in minutes")
    theme: str = Field("light")
    notifications: bool = Field(True)

    collection_name: ClassVar[str] = "user_settings"
