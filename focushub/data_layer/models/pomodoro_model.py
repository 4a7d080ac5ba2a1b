from typing import Optional, ClassVar, Literal
from datetime import datetime
from pydantic import Field
from .base_model import StoreBaseModel
from focushub.utils.datetime_utils import get_utc_now

PomodoroType = Literal["focus", "short_break", "long_break"]


class PomodoroSession(StoreBaseModel):
    type: PomodoroType = Field(..., description="focus|short_break|long_break")
    duration: int = Field(..., gt=0, description="Target duration in minutes")
    completed: bool = Field(False, description="Session finished")
    start_time: datetime = Field(
        default_factory=get_utc_now, description="Session start")
    end_time: Optional[datetime] = Field(None, description="Session end")

    collection_name: ClassVar[str] = "pomodoro_sessions"
